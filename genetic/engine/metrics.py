from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EngineMetrics(BaseModel):
    """Counters accumulated by a GeneticAlgorithm across advance() calls."""

    total_generations: int = Field(
        default=0, description="Total number of generations advanced"
    )
    offspring_created: int = Field(
        default=0, description="Total number of offspring genomes produced"
    )
    individuals_evaluated: int = Field(
        default=0, description="Total individuals passed through fitness evaluation"
    )
    errors_encountered: int = Field(
        default=0, description="Total number of failed advance() calls"
    )
    best_fitness_history: list[Any] = Field(
        default_factory=list, description="Fitness of the best individual after each generation"
    )
    history_limit: int | None = Field(
        default=1000,
        gt=0,
        description="Most recent best fitnesses kept in the history (None = unbounded)",
    )

    def record_generation(
        self, offspring: int, evaluated: int, best_fitness: Any | None
    ) -> None:
        """Record metrics from one successful generation."""
        self.total_generations += 1
        self.offspring_created += offspring
        self.individuals_evaluated += evaluated
        if best_fitness is not None:
            self.best_fitness_history.append(best_fitness)
            if self.history_limit is not None:
                del self.best_fitness_history[: -self.history_limit]

    def record_error(self) -> None:
        self.errors_encountered += 1

    model_config = ConfigDict(arbitrary_types_allowed=True)
