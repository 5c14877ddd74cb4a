from __future__ import annotations

from enum import Enum
import math
from typing import Any, Callable, Sequence

from genetic.exceptions import FitnessError, GeneticError
from genetic.types import FitnessFunction

__all__ = ["FitnessBehavior", "SimpleFitnessFunction", "SimpleFitness"]


class FitnessBehavior(Enum):
    """What a fitness function does with a fitness an individual already has."""

    USE_EXISTING = "use_existing"  # keep it, only score individuals without one
    RECALCULATE = "recalculate"  # always score

    def resolve(self, existing: Any | None, compute: Callable[[], Any]) -> Any:
        if self is FitnessBehavior.USE_EXISTING and existing is not None:
            return existing
        return compute()


def _score(function: Callable[[Any], Any], phenotype: Any) -> Any:
    try:
        fitness = function(phenotype)
    except GeneticError:
        raise
    except Exception as exc:
        raise FitnessError(f"Failed to score phenotype {phenotype!r}: {exc}") from exc
    if fitness is None or (isinstance(fitness, float) and math.isnan(fitness)):
        raise FitnessError(f"Fitness of {phenotype!r} is not orderable: {fitness!r}")
    return fitness


class SimpleFitnessFunction(FitnessFunction):
    """Scores each phenotype independently with a user callable."""

    def __init__(
        self,
        function: Callable[[Any], Any],
        behavior: FitnessBehavior = FitnessBehavior.USE_EXISTING,
    ):
        self.function = function
        self.behavior = behavior

    def evaluate(self, phenotypes_with_fitnesses: Sequence[tuple[Any, Any | None]]) -> list[Any]:
        return [
            self.behavior.resolve(existing, lambda p=phenotype: _score(self.function, p))
            for phenotype, existing in phenotypes_with_fitnesses
        ]

    def __repr__(self) -> str:
        return f"SimpleFitnessFunction(behavior={self.behavior.value})"


class SimpleFitness:
    """Builder choosing the reuse policy of a :class:`SimpleFitnessFunction`."""

    def __init__(self, function: Callable[[Any], Any]):
        self.function = function

    def use_existing_fitness(self) -> SimpleFitnessFunction:
        return SimpleFitnessFunction(self.function, FitnessBehavior.USE_EXISTING)

    def recalculate_fitness(self) -> SimpleFitnessFunction:
        return SimpleFitnessFunction(self.function, FitnessBehavior.RECALCULATE)
