from __future__ import annotations

from genetic.engine.builder import GeneticAlgorithmBuilder
from genetic.engine.config import EngineConfig
from genetic.engine.core import GeneticAlgorithm
from genetic.engine.metrics import EngineMetrics
