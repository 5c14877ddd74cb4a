from __future__ import annotations

import random
from typing import Any, Callable, Hashable, Sequence

from genetic.config import UniqueGenesCrossoverConfig, build_config
from genetic.exceptions import ValidationError
from genetic.types import CrossoverOperator

__all__ = ["UniquenessPreservingCrossover"]


class UniquenessPreservingCrossover(CrossoverOperator[list]):
    """Crossover for genomes whose genes must not repeat (e.g. permutations).

    All parents' genes are pooled; every child draws genes from the pool at
    random, skipping genes whose identity it already holds, until it is as long
    as the parents. Gene identity is the gene itself unless *gene_key* maps it
    to a hashable key.
    """

    def __init__(
        self,
        config: UniqueGenesCrossoverConfig | None = None,
        *,
        rng: random.Random | None = None,
        gene_key: Callable[[Any], Hashable] | None = None,
        **overrides: Any,
    ):
        self.config = build_config(UniqueGenesCrossoverConfig, config, overrides)
        self.rng = rng if rng is not None else random.Random()
        self.gene_key = gene_key or (lambda gene: gene)

    @property
    def num_children(self) -> int:
        return self.config.num_children

    def crossover(self, genomes: Sequence[Sequence[Any]]) -> list[list[Any]]:
        self.check_arity(genomes)

        genome_length = len(genomes[0])
        if any(len(genome) != genome_length for genome in genomes):
            raise ValidationError("Parent genotypes must have the same length")

        combined = [gene for genome in genomes for gene in genome]
        return [self._child(combined, genome_length) for _ in range(self.num_children)]

    def _child(self, combined: list[Any], genome_length: int) -> list[Any]:
        gene_pool = list(combined)
        seen: set[Hashable] = set()
        child: list[Any] = []
        while len(child) < genome_length:
            if not gene_pool:
                raise ValidationError(
                    f"Parents hold fewer than {genome_length} distinct genes"
                )
            gene = gene_pool.pop(self.rng.randrange(len(gene_pool)))
            key = self.gene_key(gene)
            if key in seen:
                continue
            seen.add(key)
            child.append(gene)
        return child
