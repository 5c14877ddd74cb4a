"""
Multi-objective fitness: Pareto ranking with crowding distance.

Objective vectors are maximised component-wise. Every individual gets

- ``rank``: index of the non-dominated front it belongs to (0 is best);
- ``crowding_distance``: density estimate used to break ties within a rank.
  It is computed over the whole objective set at once rather than per front,
  and boundary individuals of any objective get ``inf``.

Ranking peels fronts one by one, which is O(N^3) in the worst case. That is
fine for population sizes of hundreds to a few thousands.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from genetic.exceptions import ArityError, FitnessError, GeneticError, ValidationError
from genetic.fitness.simple import FitnessBehavior
from genetic.types import FitnessFunction

__all__ = [
    "ObjectiveFunction",
    "ParetoFitness",
    "ParetoFitnessFunction",
    "dominates",
    "pareto_ranks",
    "crowding_distances",
]

ObjectiveFunction = Callable[[Any], float]


def dominates(p: Sequence[float], q: Sequence[float]) -> bool:
    """Returns True if p Pareto-dominates q (i.e., p is >= in all and > in at least one)."""
    return all(p_i >= q_i for p_i, q_i in zip(p, q)) and any(
        p_i > q_i for p_i, q_i in zip(p, q)
    )


def _as_matrix(vectors: Sequence[Sequence[float]]) -> np.ndarray:
    if len(vectors) == 0:
        raise ArityError("Cannot rank an empty set of objective vectors")

    try:
        dimensions = {len(vector) for vector in vectors}
    except TypeError as exc:
        raise FitnessError(f"Objective values must be vectors: {exc}") from exc
    if len(dimensions) != 1:
        raise FitnessError(
            f"Objective vectors have inconsistent dimensionality: {sorted(dimensions)}"
        )
    if dimensions == {0}:
        raise FitnessError("Objective vectors need at least one objective")

    try:
        matrix = np.asarray(vectors, dtype=float)
    except (TypeError, ValueError) as exc:
        raise FitnessError(f"Objective values must be numeric: {exc}") from exc
    if not np.isfinite(matrix).all():
        raise FitnessError("Objective vectors must be finite")
    return matrix


def pareto_ranks(vectors: Sequence[Sequence[float]]) -> list[int]:
    """Assign each vector the index of its non-dominated front.

    Identical vectors never dominate each other and land in the same front.

    Raises:
        ArityError: if *vectors* is empty.
        FitnessError: if vectors differ in length or hold non-numeric/NaN values.
    """
    matrix = _as_matrix(vectors)
    n = matrix.shape[0]

    # dominated_by[i, j] is True when j dominates i
    others = matrix[np.newaxis, :, :]
    this = matrix[:, np.newaxis, :]
    dominated_by = (others >= this).all(axis=2) & (others > this).any(axis=2)

    ranks = np.zeros(n, dtype=int)
    remaining = np.ones(n, dtype=bool)
    rank = 0
    while remaining.any():
        front = remaining & ~(dominated_by[:, remaining].any(axis=1))
        ranks[front] = rank
        remaining &= ~front
        rank += 1

    return ranks.tolist()


def crowding_distances(vectors: Sequence[Sequence[float]]) -> list[float]:
    """Crowding distance of every vector relative to the whole set.

    Per objective the extreme vectors get ``inf``; an objective without spread
    (``max == min``) adds nothing to the interior vectors. Ties are ordered
    stably by input position.

    Raises:
        ArityError: if *vectors* is empty.
        FitnessError: if vectors differ in length or hold non-numeric/NaN values.
    """
    matrix = _as_matrix(vectors)
    n, num_objectives = matrix.shape
    distances = np.zeros(n, dtype=float)

    for objective in range(num_objectives):
        order = np.argsort(matrix[:, objective], kind="stable")
        values = matrix[order, objective]

        distances[order[0]] = math.inf
        distances[order[-1]] = math.inf

        spread = values[-1] - values[0]
        if spread == 0:
            continue

        distances[order[1:-1]] += (values[2:] - values[:-2]) / spread

    return distances.tolist()


class ParetoFitness(BaseModel):
    """Rank and crowding distance of an individual plus the objectives they came from.

    Comparison operators follow the engine-wide "greater is better" convention:
    ``a > b`` exactly when ``a`` precedes ``b`` in best-first order, i.e. it has
    a lower rank or, at equal rank, a larger crowding distance. Equality is
    stricter and also compares the raw objectives, so two fitnesses can be
    neither equal nor ordered.
    """

    rank: int = Field(..., ge=0, description="Index of the Pareto front, 0 is best")
    crowding_distance: float = Field(
        ..., ge=0, description="Density estimate, inf for boundary individuals"
    )
    objectives: tuple[float, ...] = Field(
        ..., min_length=1, description="Raw objective values (higher is better)"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("crowding_distance")
    @classmethod
    def validate_crowding_distance(cls, v: float) -> float:
        if math.isnan(v):
            raise ValueError("crowding_distance cannot be NaN")
        return v

    def precedes(self, other: "ParetoFitness") -> bool:
        return self._key() > other._key()

    def _key(self) -> tuple[int, float]:
        return (-self.rank, self.crowding_distance)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParetoFitness):
            return NotImplemented
        return (
            self.rank == other.rank
            and self.crowding_distance == other.crowding_distance
            and self.objectives == other.objectives
        )

    def __hash__(self) -> int:
        return hash((self.rank, self.crowding_distance, self.objectives))

    def __lt__(self, other: "ParetoFitness") -> bool:
        if not isinstance(other, ParetoFitness):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: "ParetoFitness") -> bool:
        if not isinstance(other, ParetoFitness):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: "ParetoFitness") -> bool:
        if not isinstance(other, ParetoFitness):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: "ParetoFitness") -> bool:
        if not isinstance(other, ParetoFitness):
            return NotImplemented
        return self._key() >= other._key()


class ParetoFitnessFunction(FitnessFunction):
    """Ranks a batch of phenotypes by Pareto dominance and crowding distance.

    Objectives are configured either one scalar callable at a time::

        ParetoFitnessFunction().with_objective(speed).with_objective(accuracy)

    or as a single callable returning the whole vector::

        ParetoFitnessFunction().with_objectives(lambda p: [p.speed, p.accuracy])

    Under ``FitnessBehavior.USE_EXISTING`` the cached objectives of an existing
    :class:`ParetoFitness` are reused instead of calling the objectives again.
    Ranks and crowding distances are always recomputed since they depend on
    the whole batch.
    """

    def __init__(
        self,
        objectives: Sequence[ObjectiveFunction] | None = None,
        vector_objective: Callable[[Any], Sequence[float]] | None = None,
        behavior: FitnessBehavior = FitnessBehavior.USE_EXISTING,
    ):
        if objectives and vector_objective is not None:
            raise ValidationError("Use either scalar objectives or a vector objective, not both")
        self.objectives: list[ObjectiveFunction] = list(objectives or [])
        self.vector_objective = vector_objective
        self.behavior = behavior

    def with_objective(self, objective: ObjectiveFunction) -> "ParetoFitnessFunction":
        if self.vector_objective is not None:
            raise ValidationError("A vector objective is already configured")
        return ParetoFitnessFunction(
            objectives=[*self.objectives, objective], behavior=self.behavior
        )

    def with_objectives(
        self, objective: Callable[[Any], Sequence[float]]
    ) -> "ParetoFitnessFunction":
        if self.objectives:
            raise ValidationError("Scalar objectives are already configured")
        return ParetoFitnessFunction(vector_objective=objective, behavior=self.behavior)

    def with_behavior(self, behavior: FitnessBehavior) -> "ParetoFitnessFunction":
        return ParetoFitnessFunction(
            objectives=self.objectives,
            vector_objective=self.vector_objective,
            behavior=behavior,
        )

    def compute_objectives(self, phenotype: Any) -> list[float]:
        try:
            if self.vector_objective is not None:
                return [float(v) for v in self.vector_objective(phenotype)]
            if not self.objectives:
                raise FitnessError("ParetoFitnessFunction has no objectives configured")
            return [float(objective(phenotype)) for objective in self.objectives]
        except GeneticError:
            raise
        except Exception as exc:
            raise FitnessError(f"Failed to compute objectives of {phenotype!r}: {exc}") from exc

    def evaluate(
        self, phenotypes_with_fitnesses: Sequence[tuple[Any, ParetoFitness | None]]
    ) -> list[ParetoFitness]:
        if not phenotypes_with_fitnesses:
            return []
        vectors = [
            self.behavior.resolve(
                existing.objectives if existing is not None else None,
                lambda p=phenotype: self.compute_objectives(p),
            )
            for phenotype, existing in phenotypes_with_fitnesses
        ]
        return self.evaluate_objectives(vectors)

    def evaluate_objectives(self, vectors: Sequence[Sequence[float]]) -> list[ParetoFitness]:
        ranks = pareto_ranks(vectors)
        distances = crowding_distances(vectors)
        return [
            ParetoFitness(
                rank=rank,
                crowding_distance=distance,
                objectives=tuple(float(v) for v in vector),
            )
            for rank, distance, vector in zip(ranks, distances, vectors)
        ]
