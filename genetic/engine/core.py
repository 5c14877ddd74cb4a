from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Sequence

from loguru import logger

from genetic.engine.config import EngineConfig
from genetic.engine.metrics import EngineMetrics
from genetic.exceptions import (
    ArityError,
    EvolutionError,
    GeneticError,
    PopulationStateError,
    ValidationError,
)
from genetic.population import Population, SortedPopulation, UnsortedPopulation
from genetic.types import (
    CrossoverOperator,
    FitnessFunction,
    Incubator,
    MutateOperator,
    ReinsertOperator,
    SelectOperator,
)

__all__ = ["GeneticAlgorithm"]


class GeneticAlgorithm:
    """
    Generational loop over a sorted population:
    select -> crossover -> mutate -> add children -> sort -> reinsert -> sort.

    Populations are values: advance() builds a new population and never
    modifies the one it was given, so a failed generation leaves the caller
    with the last good population.
    """

    def __init__(
        self,
        incubator: Incubator,
        fitness_function: FitnessFunction,
        select: SelectOperator,
        crossover: CrossoverOperator,
        mutate: MutateOperator,
        reinsert: ReinsertOperator,
        config: EngineConfig | None = None,
    ):
        self.incubator = incubator
        self.fitness_function = fitness_function
        self.select = select
        self.crossover = crossover
        self.mutate = mutate
        self.reinsert = reinsert
        self.config = config or EngineConfig()

        self.metrics = EngineMetrics(history_limit=self.config.history_limit)

        logger.info(
            "[GeneticAlgorithm] Init | select={}, crossover={}, mutate={}, reinsert={}, fitness={}",
            type(self.select).__name__,
            type(self.crossover).__name__,
            type(self.mutate).__name__,
            type(self.reinsert).__name__,
            type(self.fitness_function).__name__,
        )

    def create_population(self, genomes: Sequence[Any]) -> SortedPopulation:
        """Sort *genomes* into a generation-0 population."""
        with self._executor() as executor:
            population = Population.empty().add_children(genomes).sort(
                self.incubator, self.fitness_function, executor
            )
        logger.info("[GeneticAlgorithm] Created population of {}", len(population))
        return population

    def advance(self, population: SortedPopulation) -> SortedPopulation:
        """Run one generation and return the next sorted population.

        Raises:
            GeneticError: the typed failure of the step that failed; operator
                exceptions outside the hierarchy are wrapped in EvolutionError.
        """
        if not isinstance(population, SortedPopulation):
            raise PopulationStateError(
                f"advance() needs a SortedPopulation, got {type(population).__name__}"
            )

        try:
            with self._executor() as executor:
                return self._step(population, executor)
        except GeneticError as exc:
            self.metrics.record_error()
            logger.error(
                "[GeneticAlgorithm] Generation {} failed: {}", population.generation + 1, exc
            )
            raise
        except Exception as exc:
            self.metrics.record_error()
            logger.error(
                "[GeneticAlgorithm] Generation {} failed: {}", population.generation + 1, exc
            )
            raise EvolutionError(
                f"Generation {population.generation + 1} failed: {exc}"
            ) from exc

    def run(
        self,
        population: SortedPopulation,
        generations: int | None = None,
        *,
        stop: Callable[[SortedPopulation], bool] | None = None,
    ) -> SortedPopulation:
        """Advance up to *generations* times, or until *stop* returns True."""
        generations = generations if generations is not None else self.config.max_generations
        if generations is None:
            raise ValidationError("run() needs a generation count or config.max_generations")
        if generations < 0:
            raise ValidationError(f"generations must be >= 0, got {generations}")

        logger.info("[GeneticAlgorithm] Start | generations={}", generations)
        for step in range(1, generations + 1):
            if stop is not None and stop(population):
                logger.info(
                    "[GeneticAlgorithm] Stop condition met at generation {}", population.generation
                )
                break

            population = self.advance(population)

            if step % self.config.log_interval == 0:
                logger.info(
                    "[GeneticAlgorithm] Generation {} | size={}, children={}, best={}",
                    population.generation,
                    len(population),
                    population.num_children,
                    population.best().fitness if len(population) else None,
                )
        logger.info("[GeneticAlgorithm] Done | generation={}", population.generation)
        return population

    def _step(
        self, population: SortedPopulation, executor: ThreadPoolExecutor | None
    ) -> SortedPopulation:
        # Stage 1: select parent groups
        parent_groups = self.select.select(population)
        if any(len(group) == 0 for group in parent_groups):
            raise ArityError(f"{type(self.select).__name__} returned an empty parent group")

        # Stage 2: crossover
        offspring: list[Any] = []
        for group in parent_groups:
            offspring.extend(self.crossover.crossover(group))
        if not offspring:
            logger.warning(
                "[GeneticAlgorithm] No offspring produced in generation {}",
                population.generation + 1,
            )

        # Stage 3: mutate in place
        for genome in offspring:
            self.mutate.mutate(genome)

        # Stage 4: merge and rank
        merged = population.next_generation().add_children(offspring)
        ranked = merged.sort(self.incubator, self.fitness_function, executor)

        # Stage 5: reinsert and re-rank survivors
        survivors = self.reinsert.reinsert(ranked)
        if not isinstance(survivors, UnsortedPopulation):
            raise PopulationStateError(
                f"{type(self.reinsert).__name__} must return an UnsortedPopulation"
            )
        result = survivors.sort(self.incubator, self.fitness_function, executor)

        self.metrics.record_generation(
            offspring=len(offspring),
            evaluated=len(merged) + len(survivors),
            best_fitness=result.best().fitness if len(result) else None,
        )
        logger.debug(
            "[GeneticAlgorithm] Generation {} | groups={}, offspring={}, survivors={}",
            result.generation,
            len(parent_groups),
            len(offspring),
            len(result),
        )
        return result

    @contextmanager
    def _executor(self) -> Iterator[ThreadPoolExecutor | None]:
        if self.config.max_workers is None:
            yield None
            return
        with ThreadPoolExecutor(
            max_workers=self.config.max_workers, thread_name_prefix="genetic-grow"
        ) as executor:
            yield executor
