from __future__ import annotations

import numbers
import random
from typing import Any

from genetic.config import (
    GaussianMutationConfig,
    SwapMutationConfig,
    build_config,
)
from genetic.exceptions import MutationError
from genetic.types import MutateOperator

__all__ = ["SwapMutation", "GaussianMutation"]


def _require_list(genome: Any, operator: str) -> list[Any]:
    if not isinstance(genome, list):
        raise MutationError(
            f"{operator} mutates list genomes in place, got {type(genome).__name__}"
        )
    return genome


class SwapMutation(MutateOperator[list]):
    """Swaps the genes at two random loci.

    Keeps the multiset of genes unchanged, so permutation genomes stay valid.
    """

    def __init__(
        self,
        config: SwapMutationConfig | None = None,
        *,
        rng: random.Random | None = None,
        **overrides: Any,
    ):
        self.config = build_config(SwapMutationConfig, config, overrides)
        self.rng = rng if rng is not None else random.Random()

    def mutate(self, genome: Any) -> None:
        genes = _require_list(genome, "SwapMutation")
        if len(genes) < 2 or self.rng.random() >= self.config.probability:
            return
        for _ in range(self.config.num_swaps):
            i, j = self.rng.sample(range(len(genes)), 2)
            genes[i], genes[j] = genes[j], genes[i]


class GaussianMutation(MutateOperator[list]):
    """Adds gaussian noise to numeric genes, each with probability ``probability``."""

    def __init__(
        self,
        config: GaussianMutationConfig | None = None,
        *,
        rng: random.Random | None = None,
        **overrides: Any,
    ):
        self.config = build_config(GaussianMutationConfig, config, overrides)
        self.rng = rng if rng is not None else random.Random()

    def mutate(self, genome: Any) -> None:
        genes = _require_list(genome, "GaussianMutation")
        for i, gene in enumerate(genes):
            if isinstance(gene, bool) or not isinstance(gene, numbers.Real):
                raise MutationError(f"Gene {i} is not numeric: {gene!r}")
        for i, gene in enumerate(genes):
            if self.rng.random() < self.config.probability:
                genes[i] = gene + self.rng.gauss(0.0, self.config.sigma)
