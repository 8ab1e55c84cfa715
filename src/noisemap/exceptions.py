"""Custom exceptions for noise map building."""


class NoiseMapError(Exception):
    """Base exception for noise map errors."""

    pass


class DimensionMismatchError(NoiseMapError, ValueError):
    """Raised when a source's dimension doesn't match the builder's."""

    pass


class GridIndexError(NoiseMapError, IndexError):
    """Raised when a noise map cell is addressed outside its bounds."""

    pass
