"""Parameter models for the bundled operators.

Operators take either one of these models or keyword overrides, e.g.
``TournamentSelection(tournament_size=3, rng=rng)``. Values are validated by
pydantic; failures surface as :class:`genetic.exceptions.ValidationError`.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from genetic.exceptions import ValidationError

ConfigT = TypeVar("ConfigT", bound=BaseModel)

__all__ = [
    "TournamentSelectionConfig",
    "UniqueGenesCrossoverConfig",
    "SwapMutationConfig",
    "GaussianMutationConfig",
    "build_config",
]


class TournamentSelectionConfig(BaseModel):
    """Parameters of tournament selection."""

    tournament_size: int = Field(
        default=12, gt=0, description="Individuals drawn (with replacement) per tournament"
    )
    num_children: int = Field(
        default=4, gt=0, description="Number of parent groups produced per selection"
    )
    num_parents: int = Field(default=2, gt=0, description="Parents in every group")
    selection_probability: float = Field(
        default=0.8,
        gt=0,
        le=1,
        description="Probability that the best remaining tournament participant wins",
    )
    model_config = ConfigDict(extra="forbid")


class UniqueGenesCrossoverConfig(BaseModel):
    num_children: int = Field(default=2, gt=0, description="Children produced per crossover")
    model_config = ConfigDict(extra="forbid")


class SwapMutationConfig(BaseModel):
    probability: float = Field(
        default=1.0, ge=0, le=1, description="Chance that a genome gets a swap"
    )
    num_swaps: int = Field(default=1, gt=0, description="Swaps applied to a mutated genome")
    model_config = ConfigDict(extra="forbid")


class GaussianMutationConfig(BaseModel):
    probability: float = Field(
        default=0.1, ge=0, le=1, description="Per-gene mutation probability"
    )
    sigma: float = Field(default=0.1, gt=0, description="Standard deviation of the noise")
    model_config = ConfigDict(extra="forbid")


def build_config(model: type[ConfigT], config: ConfigT | None, overrides: dict[str, Any]) -> ConfigT:
    """Merge keyword *overrides* into *config* (or the model defaults) and validate."""
    base = config.model_dump() if config is not None else {}
    try:
        return model.model_validate({**base, **overrides})
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid {model.__name__}: {exc}") from exc
