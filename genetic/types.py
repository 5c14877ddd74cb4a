"""Operator contracts plugged into the generational loop.

Every strategy the engine drives implements one of the abstract classes below.
Genomes, phenotypes and fitness values are opaque to the engine; the only
requirement on a fitness value is that it is totally ordered with *greater is
better* and can be copied.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Protocol, Sequence, TypeVar, runtime_checkable

from genetic.exceptions import ArityError

if TYPE_CHECKING:
    from genetic.population import SortedPopulation, UnsortedPopulation

Genome = TypeVar("Genome")
Phenotype = TypeVar("Phenotype")


@runtime_checkable
class Fitness(Protocol):
    """Ordered, copyable fitness capability. ``int`` and ``float`` satisfy it."""

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


class Incubator(ABC, Generic[Genome, Phenotype]):
    """Grows a genome into its evaluable phenotype."""

    @abstractmethod
    def grow(self, genome: Genome) -> Phenotype:
        """Decode *genome*.

        Must not keep state between calls: the engine may grow distinct
        genomes concurrently.

        Raises:
            GrowthError: if the genome cannot be decoded.
        """


class FitnessFunction(ABC):
    """Scores a batch of phenotypes."""

    @abstractmethod
    def evaluate(self, phenotypes_with_fitnesses: Sequence[tuple[Any, Any | None]]) -> list[Fitness]:
        """Return one fitness per ``(phenotype, existing_fitness)`` pair, in order.

        Whether an existing fitness is reused or recomputed is a policy of the
        concrete function (see :class:`genetic.fitness.simple.FitnessBehavior`).

        Raises:
            FitnessError: if any phenotype cannot be scored.
        """


class SelectOperator(ABC, Generic[Genome]):
    """Picks groups of parents out of a sorted population."""

    @abstractmethod
    def select(self, population: SortedPopulation) -> list[list[Genome]]:
        """Return parent groups; each group is a non-empty list of genomes."""


class CrossoverOperator(ABC, Generic[Genome]):
    """Combines a parent group into offspring genomes."""

    #: Number of parents the operator accepts, ``None`` for any non-zero count.
    num_parents: int | None = None

    @abstractmethod
    def crossover(self, genomes: Sequence[Genome]) -> list[Genome]:
        """Return new offspring genomes. Parents are left untouched."""

    def check_arity(self, genomes: Sequence[Genome]) -> None:
        if self.num_parents is None:
            if not genomes:
                raise ArityError(f"{type(self).__name__} needs at least one parent")
        elif len(genomes) != self.num_parents:
            raise ArityError(
                f"{type(self).__name__} only works with {self.num_parents} parents, got {len(genomes)}"
            )


class MutateOperator(ABC, Generic[Genome]):
    """Mutates a single offspring genome in place."""

    @abstractmethod
    def mutate(self, genome: Genome) -> None:
        """Raises MutationError on invalid genome structure."""


class ReinsertOperator(ABC):
    """Decides which individuals survive into the next generation."""

    @abstractmethod
    def reinsert(self, population: SortedPopulation) -> UnsortedPopulation:
        """Return the surviving individuals as an unsorted population."""


__all__ = [
    "Genome",
    "Phenotype",
    "Fitness",
    "Incubator",
    "FitnessFunction",
    "SelectOperator",
    "CrossoverOperator",
    "MutateOperator",
    "ReinsertOperator",
]
