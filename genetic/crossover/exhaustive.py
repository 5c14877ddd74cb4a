"""Exhaustive crossover: every locus-preserving recombination of two parents."""

from __future__ import annotations

from typing import Any, Sequence

from genetic.exceptions import ValidationError
from genetic.types import CrossoverOperator

__all__ = ["exhaustive_crossover", "ExhaustiveCrossover"]


def exhaustive_crossover(parent1: Sequence[Any], parent2: Sequence[Any]) -> list[list[Any]]:
    """Return all 2**n children of two equal-length parents.

    Child ``i`` takes the gene at locus ``j`` from *parent1* when bit ``j`` of
    ``i`` is set and from *parent2* otherwise, so the first child is a copy of
    *parent2* and the last a copy of *parent1*.

    Example:
        >>> exhaustive_crossover([1, 2], [3, 4])
        [[3, 4], [1, 4], [3, 2], [1, 2]]

    Raises:
        ValidationError: if the parents differ in length.
    """
    if len(parent1) != len(parent2):
        raise ValidationError("Parent genotypes must have the same length")

    n = len(parent1)
    return [
        [parent1[j] if (i >> j) & 1 else parent2[j] for j in range(n)]
        for i in range(2**n)
    ]


class ExhaustiveCrossover(CrossoverOperator[list]):
    num_parents = 2

    def crossover(self, genomes: Sequence[Sequence[Any]]) -> list[list[Any]]:
        self.check_arity(genomes)
        return exhaustive_crossover(genomes[0], genomes[1])
