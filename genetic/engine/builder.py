from __future__ import annotations

from typing import Any, Sequence

from genetic.engine.config import EngineConfig
from genetic.engine.core import GeneticAlgorithm
from genetic.exceptions import ValidationError
from genetic.population import Population, SortedPopulation
from genetic.types import (
    CrossoverOperator,
    FitnessFunction,
    Incubator,
    MutateOperator,
    ReinsertOperator,
    SelectOperator,
)

__all__ = ["GeneticAlgorithmBuilder"]

_OPERATORS = ("incubator", "fitness_function", "select", "crossover", "mutate", "reinsert")


class GeneticAlgorithmBuilder:
    """Collects the six operators and builds a :class:`GeneticAlgorithm`.

    Each ``with_*`` method returns the builder so calls can be chained; missing
    operators are reported when :meth:`build` is called.
    """

    def __init__(self) -> None:
        self.incubator: Incubator | None = None
        self.fitness_function: FitnessFunction | None = None
        self.select: SelectOperator | None = None
        self.crossover: CrossoverOperator | None = None
        self.mutate: MutateOperator | None = None
        self.reinsert: ReinsertOperator | None = None
        self.config: EngineConfig | None = None

    def with_incubator(self, incubator: Incubator) -> GeneticAlgorithmBuilder:
        self.incubator = incubator
        return self

    def with_fitness_function(self, fitness_function: FitnessFunction) -> GeneticAlgorithmBuilder:
        self.fitness_function = fitness_function
        return self

    def with_select(self, select: SelectOperator) -> GeneticAlgorithmBuilder:
        self.select = select
        return self

    def with_crossover(self, crossover: CrossoverOperator) -> GeneticAlgorithmBuilder:
        self.crossover = crossover
        return self

    def with_mutate(self, mutate: MutateOperator) -> GeneticAlgorithmBuilder:
        self.mutate = mutate
        return self

    def with_reinsert(self, reinsert: ReinsertOperator) -> GeneticAlgorithmBuilder:
        self.reinsert = reinsert
        return self

    def with_config(self, config: EngineConfig) -> GeneticAlgorithmBuilder:
        self.config = config
        return self

    def missing(self) -> list[str]:
        return [name for name in _OPERATORS if getattr(self, name) is None]

    def create_population(self, genomes: Sequence[Any]) -> SortedPopulation:
        """Sort *genomes* into a generation-0 population.

        Only the incubator and fitness function need to be configured.
        """
        if self.incubator is None or self.fitness_function is None:
            raise ValidationError(
                "create_population() needs an incubator and a fitness function"
            )
        return Population.empty().add_children(genomes).sort(
            self.incubator, self.fitness_function
        )

    def build(self) -> GeneticAlgorithm:
        missing = self.missing()
        if missing:
            raise ValidationError(f"Missing operators: {', '.join(missing)}")
        return GeneticAlgorithm(
            incubator=self.incubator,
            fitness_function=self.fitness_function,
            select=self.select,
            crossover=self.crossover,
            mutate=self.mutate,
            reinsert=self.reinsert,
            config=self.config,
        )
