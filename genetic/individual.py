from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Individual(BaseModel):
    """A genome in the population together with its (optional) fitness."""

    generation: int = Field(
        default=0, ge=0, description="Generation the genome entered the population"
    )
    genome: Any = Field(..., description="Encoded candidate solution")
    fitness: Any | None = Field(
        default=None, description="Fitness value, absent until the population is sorted"
    )

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @property
    def has_fitness(self) -> bool:
        return self.fitness is not None

    def with_fitness(self, fitness: Any) -> "Individual":
        """Return a copy carrying *fitness*; the genome object is shared."""
        return self.model_copy(update={"fitness": fitness})
