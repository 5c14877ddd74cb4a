"""
genetic - a generic evolutionary-computation engine.

Callers plug in how genomes grow into phenotypes, how phenotypes are scored and
how genomes recombine; the engine runs the generational loop and keeps the
population bookkeeping.
"""

from genetic.config import (
    GaussianMutationConfig,
    SwapMutationConfig,
    TournamentSelectionConfig,
    UniqueGenesCrossoverConfig,
)
from genetic.crossover import (
    ExhaustiveCrossover,
    UniquenessPreservingCrossover,
    exhaustive_crossover,
)
from genetic.engine import EngineConfig, EngineMetrics, GeneticAlgorithm, GeneticAlgorithmBuilder
from genetic.exceptions import (
    ArityError,
    EvolutionError,
    FitnessError,
    GeneticError,
    GrowthError,
    MutationError,
    PopulationStateError,
    ValidationError,
)
from genetic.fitness import (
    FitnessBehavior,
    MultiFitness2,
    ParetoFitness,
    ParetoFitnessFunction,
    SimpleFitness,
    SimpleFitnessFunction,
    crowding_distances,
    dominates,
    pareto_ranks,
)
from genetic.incubators import FunctionIncubator, IdentityIncubator
from genetic.individual import Individual
from genetic.mutate import GaussianMutation, SwapMutation
from genetic.population import Population, SortedPopulation, UnsortedPopulation
from genetic.reinsert import ElitistReinserter
from genetic.select import TournamentSelection
from genetic.types import (
    CrossoverOperator,
    Fitness,
    FitnessFunction,
    Incubator,
    MutateOperator,
    ReinsertOperator,
    SelectOperator,
)
from genetic.utils import setup_logger

__version__ = "0.1.0"

__all__ = [
    "ArityError",
    "CrossoverOperator",
    "ElitistReinserter",
    "EngineConfig",
    "EngineMetrics",
    "EvolutionError",
    "ExhaustiveCrossover",
    "Fitness",
    "FitnessBehavior",
    "FitnessError",
    "FitnessFunction",
    "FunctionIncubator",
    "GaussianMutation",
    "GaussianMutationConfig",
    "GeneticAlgorithm",
    "GeneticAlgorithmBuilder",
    "GeneticError",
    "GrowthError",
    "IdentityIncubator",
    "Incubator",
    "Individual",
    "MultiFitness2",
    "MutateOperator",
    "MutationError",
    "ParetoFitness",
    "ParetoFitnessFunction",
    "Population",
    "PopulationStateError",
    "ReinsertOperator",
    "SelectOperator",
    "SimpleFitness",
    "SimpleFitnessFunction",
    "SortedPopulation",
    "SwapMutation",
    "SwapMutationConfig",
    "TournamentSelection",
    "TournamentSelectionConfig",
    "UniqueGenesCrossoverConfig",
    "UniquenessPreservingCrossover",
    "UnsortedPopulation",
    "ValidationError",
    "crowding_distances",
    "dominates",
    "exhaustive_crossover",
    "pareto_ranks",
    "setup_logger",
    "__version__",
]
