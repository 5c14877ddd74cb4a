"""Population bookkeeping across generations.

A population is either *unsorted* (fitness of new children may be missing or
stale) or *sorted* (every individual carries a fitness and the sequence is
ordered best-first). The two states are separate classes so that selection
and reinsertion operators can only ever be handed a sorted population. Every
transition returns a new population value and leaves the source untouched.
"""

from __future__ import annotations

from concurrent.futures import Executor
import math
from typing import Any, Iterable, Iterator, Sequence

from loguru import logger

from genetic.exceptions import (
    FitnessError,
    GeneticError,
    GrowthError,
    PopulationStateError,
)
from genetic.individual import Individual
from genetic.types import Fitness, FitnessFunction, Incubator

__all__ = ["Population", "UnsortedPopulation", "SortedPopulation"]


class Population:
    """Ordered individuals plus the generation counter and children count."""

    def __init__(
        self,
        individuals: Iterable[Individual] = (),
        generation: int = 0,
        num_children: int = 0,
    ):
        self._individuals: list[Individual] = list(individuals)
        self._generation = generation
        self._num_children = num_children

    @classmethod
    def empty(cls) -> UnsortedPopulation:
        return UnsortedPopulation()

    @property
    def individuals(self) -> tuple[Individual, ...]:
        return tuple(self._individuals)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def num_children(self) -> int:
        """Number of individuals born in the current generation."""
        return self._num_children

    @property
    def previous_generation_size(self) -> int:
        """Number of individuals carried over from earlier generations."""
        return len(self._individuals) - self._num_children

    def __len__(self) -> int:
        return len(self._individuals)

    def __getitem__(self, index: int) -> Individual:
        return self._individuals[index]

    def __iter__(self) -> Iterator[Individual]:
        return iter(self._individuals)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={len(self)}, generation={self._generation}, "
            f"num_children={self._num_children})"
        )

    def fitnesses(self) -> list[Fitness | None]:
        return [individual.fitness for individual in self._individuals]

    def genomes(self) -> list[Any]:
        return [individual.genome for individual in self._individuals]

    def current_generation(self) -> list[Individual]:
        """Individuals whose generation equals the population's counter."""
        return [i for i in self._individuals if i.generation == self._generation]

    def add_children(self, genomes: Sequence[Any]) -> UnsortedPopulation:
        """Append *genomes* as children of the current generation."""
        children = [
            Individual(generation=self._generation, genome=genome) for genome in genomes
        ]
        return UnsortedPopulation(
            self._individuals + children,
            generation=self._generation,
            num_children=self._num_children + len(children),
        )

    def truncate(self, length: int) -> UnsortedPopulation:
        """Keep the first *length* individuals."""
        if length < 0:
            raise PopulationStateError(f"Cannot truncate population to {length}")
        kept = self._individuals[:length]
        num_children = sum(1 for i in kept if i.generation == self._generation)
        return UnsortedPopulation(kept, generation=self._generation, num_children=num_children)

    def next_generation(self) -> UnsortedPopulation:
        """Advance the counter; every current individual becomes carried-over."""
        return UnsortedPopulation(
            self._individuals, generation=self._generation + 1, num_children=0
        )


class UnsortedPopulation(Population):
    """Population whose fitness values may be missing or outdated."""

    def sort(
        self,
        incubator: Incubator,
        fitness_function: FitnessFunction,
        executor: Executor | None = None,
    ) -> SortedPopulation:
        """Grow, evaluate and order every individual best-first.

        Phenotypes are grown for all individuals, including those that already
        carry a fitness, and live only for the duration of this call. The
        fitness function decides whether existing fitness values are reused.
        The sort is stable: individuals with equal fitness keep their relative
        order.

        Args:
            incubator: Genome to phenotype decoder
            fitness_function: Batch fitness evaluator
            executor: Optional executor used to grow phenotypes in parallel

        Returns:
            A new sorted population; ``self`` is not modified.
        """
        phenotypes = self._grow_all(incubator, executor)
        phenotypes_with_fitnesses = list(zip(phenotypes, self.fitnesses()))

        try:
            new_fitnesses = fitness_function.evaluate(phenotypes_with_fitnesses)
        except GeneticError:
            raise
        except Exception as exc:
            raise FitnessError(f"Fitness evaluation failed: {exc}") from exc

        new_fitnesses = list(new_fitnesses)
        if len(new_fitnesses) != len(self._individuals):
            raise FitnessError(
                f"Fitness function returned {len(new_fitnesses)} values for "
                f"{len(self._individuals)} individuals"
            )
        for fitness in new_fitnesses:
            if fitness is None or (isinstance(fitness, float) and math.isnan(fitness)):
                raise FitnessError(f"Invalid fitness value: {fitness!r}")

        evaluated = [
            individual.with_fitness(fitness)
            for individual, fitness in zip(self._individuals, new_fitnesses)
        ]
        evaluated.sort(key=lambda individual: individual.fitness, reverse=True)

        logger.debug(
            "[Population] Sorted {} individuals (generation={}, children={})",
            len(evaluated),
            self._generation,
            self._num_children,
        )
        return SortedPopulation(
            evaluated, generation=self._generation, num_children=self._num_children
        )

    def _grow_all(self, incubator: Incubator, executor: Executor | None) -> list[Any]:
        def grow(genome: Any) -> Any:
            try:
                return incubator.grow(genome)
            except GeneticError:
                raise
            except Exception as exc:
                raise GrowthError(f"Failed to grow genome {genome!r}: {exc}") from exc

        genomes = self.genomes()
        if executor is None:
            return [grow(genome) for genome in genomes]
        return list(executor.map(grow, genomes))


class SortedPopulation(Population):
    """Population where every individual has a fitness, best first."""

    def __init__(
        self,
        individuals: Iterable[Individual] = (),
        generation: int = 0,
        num_children: int = 0,
    ):
        super().__init__(individuals, generation, num_children)
        if any(not individual.has_fitness for individual in self._individuals):
            raise PopulationStateError(
                "Every individual of a sorted population must carry a fitness"
            )
        # incomparable neighbours (equal Pareto keys) pass
        for position, (current, following) in enumerate(
            zip(self._individuals, self._individuals[1:])
        ):
            if current.fitness < following.fitness:
                raise PopulationStateError(
                    f"Sorted population is out of order at position {position}: "
                    f"{current.fitness!r} < {following.fitness!r}"
                )

    def best(self) -> Individual:
        if not self._individuals:
            raise PopulationStateError("Empty population has no best individual")
        return self._individuals[0]
