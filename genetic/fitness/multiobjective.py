from __future__ import annotations

from typing import Any, Sequence

from genetic.exceptions import FitnessError
from genetic.types import FitnessFunction

__all__ = ["MultiFitness2"]


class MultiFitness2(FitnessFunction):
    """Combines two fitness functions into a lexicographically ordered pair.

    The first function dominates the ordering; the second only breaks ties.
    An existing ``(f1, f2)`` fitness is split so each function applies its own
    reuse policy to its own component.
    """

    def __init__(self, fitness_function1: FitnessFunction, fitness_function2: FitnessFunction):
        self.fitness_function1 = fitness_function1
        self.fitness_function2 = fitness_function2

    def evaluate(
        self, phenotypes_with_fitnesses: Sequence[tuple[Any, tuple[Any, Any] | None]]
    ) -> list[tuple[Any, Any]]:
        first = [
            (phenotype, fitness[0] if fitness is not None else None)
            for phenotype, fitness in phenotypes_with_fitnesses
        ]
        second = [
            (phenotype, fitness[1] if fitness is not None else None)
            for phenotype, fitness in phenotypes_with_fitnesses
        ]

        fitnesses1 = self.fitness_function1.evaluate(first)
        fitnesses2 = self.fitness_function2.evaluate(second)
        if len(fitnesses1) != len(fitnesses2):
            raise FitnessError(
                f"Component fitness functions disagree on batch size: "
                f"{len(fitnesses1)} != {len(fitnesses2)}"
            )
        return list(zip(fitnesses1, fitnesses2))
