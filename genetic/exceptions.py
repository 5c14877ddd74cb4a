class GeneticError(Exception):
    """Base for all genetic exceptions."""

    pass


class ValidationError(GeneticError):
    """Invalid configuration or argument values."""

    pass


class GrowthError(GeneticError):
    """A genome could not be grown into a phenotype."""

    pass


class FitnessError(GeneticError):
    """A phenotype could not be scored, or objective vectors are invalid."""

    pass


class ArityError(GeneticError):
    """An operator received the wrong number of inputs."""

    pass


class MutationError(GeneticError):
    """Mutation failures."""

    pass


class PopulationStateError(GeneticError):
    """Operation not valid for the current population state."""

    pass


class EvolutionError(GeneticError):
    """Evolution process failures."""

    pass
