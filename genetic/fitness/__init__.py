from genetic.fitness.multiobjective import MultiFitness2
from genetic.fitness.pareto import (
    ParetoFitness,
    ParetoFitnessFunction,
    crowding_distances,
    dominates,
    pareto_ranks,
)
from genetic.fitness.simple import FitnessBehavior, SimpleFitness, SimpleFitnessFunction

__all__ = [
    "FitnessBehavior",
    "SimpleFitness",
    "SimpleFitnessFunction",
    "MultiFitness2",
    "ParetoFitness",
    "ParetoFitnessFunction",
    "dominates",
    "pareto_ranks",
    "crowding_distances",
]
