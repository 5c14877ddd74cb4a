from genetic.crossover.exhaustive import ExhaustiveCrossover, exhaustive_crossover
from genetic.crossover.unique_genes import UniquenessPreservingCrossover

__all__ = ["ExhaustiveCrossover", "exhaustive_crossover", "UniquenessPreservingCrossover"]
