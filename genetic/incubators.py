from typing import Any, Callable

from genetic.exceptions import GeneticError, GrowthError
from genetic.types import Incubator

__all__ = ["IdentityIncubator", "FunctionIncubator"]


class IdentityIncubator(Incubator):
    """For problems where the genome is directly evaluable."""

    def grow(self, genome: Any) -> Any:
        return genome


class FunctionIncubator(Incubator):
    """Decodes genomes with a plain callable."""

    def __init__(self, function: Callable[[Any], Any]):
        self.function = function

    def grow(self, genome: Any) -> Any:
        try:
            return self.function(genome)
        except GeneticError:
            raise
        except Exception as exc:
            raise GrowthError(f"Failed to grow genome {genome!r}: {exc}") from exc
