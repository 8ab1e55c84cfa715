"""Noise source protocol and the adapter that turns a callable into a source."""

from typing import Callable, Protocol, runtime_checkable

from .exceptions import DimensionMismatchError
from .types import Point


@runtime_checkable
class NoiseSource(Protocol):
    """Anything that maps an N-dimensional point to a scalar.

    Implementations must be read-only with respect to shared state so that
    ``get`` can be called from a worker thread. A source may expose a
    ``dimension`` attribute, which builders check at construction time.
    """

    def get(self, point: Point) -> float: ...


class NoiseFnWrapper:
    """Adapts a plain ``point -> float`` callable to the NoiseSource protocol."""

    __slots__ = ("source_fn", "dimension")

    def __init__(self, source_fn: Callable[[Point], float], dimension: int):
        self.source_fn = source_fn
        self.dimension = dimension

    def get(self, point: Point) -> float:
        return self.source_fn(point)

    def __repr__(self) -> str:
        name = getattr(self.source_fn, "__name__", repr(self.source_fn))
        return f"NoiseFnWrapper({name}, dimension={self.dimension})"


def source_dimension(source: NoiseSource) -> int | None:
    """Declared dimension of a source, or None if it doesn't declare one."""
    dimension = getattr(source, "dimension", None)
    return dimension if isinstance(dimension, int) else None


def check_source_dimension(source: NoiseSource, dimension: int) -> None:
    """Reject a source whose declared dimension differs from the builder's.

    Raises:
        DimensionMismatchError: If the dimensions disagree.
        TypeError: If the source has no ``get`` method.
    """
    if not isinstance(source, NoiseSource):
        raise TypeError(f"{type(source).__name__} does not provide get(point)")

    declared = source_dimension(source)
    if declared is not None and declared != dimension:
        raise DimensionMismatchError(
            f"Source is {declared}-dimensional but the builder samples "
            f"{dimension}-dimensional points"
        )
