from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EngineConfig(BaseModel):
    """Configuration options controlling GeneticAlgorithm behaviour."""

    max_generations: int | None = Field(
        default=None,
        gt=0,
        description="Generations run() advances when no explicit count is given (None = must be passed)",
    )
    max_workers: int | None = Field(
        default=None,
        gt=0,
        description="Threads used to grow phenotypes while sorting (None = sequential)",
    )
    log_interval: int = Field(
        default=10, gt=0, description="Log a progress summary every N generations"
    )
    history_limit: int | None = Field(
        default=1000,
        gt=0,
        description="Best fitnesses kept in EngineMetrics.best_fitness_history (None = unbounded)",
    )
    model_config = ConfigDict(extra="forbid")
