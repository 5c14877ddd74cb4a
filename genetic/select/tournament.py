from __future__ import annotations

import random
from typing import Any

from loguru import logger

from genetic.config import TournamentSelectionConfig, build_config
from genetic.exceptions import ValidationError
from genetic.individual import Individual
from genetic.population import SortedPopulation
from genetic.types import SelectOperator

__all__ = ["TournamentSelection"]


class TournamentSelection(SelectOperator):
    """Stochastic tournament selection.

    Each parent slot is filled by drawing ``tournament_size`` individuals with
    replacement and ranking them best-first. The best participant wins with
    probability ``p``, the second with ``p * (1 - p)``, and so on; the last
    participant takes whatever probability is left.
    """

    def __init__(
        self,
        config: TournamentSelectionConfig | None = None,
        *,
        rng: random.Random | None = None,
        **overrides: Any,
    ):
        self.config = build_config(TournamentSelectionConfig, config, overrides)
        self.rng = rng if rng is not None else random.Random()

    @property
    def tournament_size(self) -> int:
        return self.config.tournament_size

    @property
    def num_children(self) -> int:
        return self.config.num_children

    @property
    def num_parents(self) -> int:
        return self.config.num_parents

    @property
    def selection_probability(self) -> float:
        return self.config.selection_probability

    def select(self, population: SortedPopulation) -> list[list[Any]]:
        if len(population) == 0:
            raise ValidationError("Cannot select parents from an empty population")

        selected = [
            [self._run_tournament(population).genome for _ in range(self.num_parents)]
            for _ in range(self.num_children)
        ]
        logger.debug(
            "[TournamentSelection] Selected {} groups of {} parents from {} individuals",
            len(selected),
            self.num_parents,
            len(population),
        )
        return selected

    def _run_tournament(self, population: SortedPopulation) -> Individual:
        size = len(population)
        tournament = [
            population[self.rng.randrange(size)] for _ in range(self.tournament_size)
        ]
        tournament.sort(key=lambda individual: individual.fitness, reverse=True)

        threshold = self.rng.random()
        accumulated = 0.0
        for individual in tournament:
            accumulated += self.selection_probability * (1.0 - accumulated)
            if threshold <= accumulated:
                return individual
        return tournament[-1]
