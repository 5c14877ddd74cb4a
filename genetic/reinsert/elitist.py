from loguru import logger

from genetic.population import SortedPopulation, UnsortedPopulation
from genetic.types import ReinsertOperator

__all__ = ["ElitistReinserter"]


class ElitistReinserter(ReinsertOperator):
    """Keeps the best individuals, as many as the previous generation had."""

    def reinsert(self, population: SortedPopulation) -> UnsortedPopulation:
        keep = population.previous_generation_size
        logger.debug(
            "[ElitistReinserter] Keeping {} of {} individuals", keep, len(population)
        )
        return population.truncate(keep)
