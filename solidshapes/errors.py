"""Exceptions raised while building shapes."""


class ShapeError(ValueError):
    """Base class for invalid shape construction."""


class EmptyCompositionError(ShapeError):
    """A compound shape was built without any parts."""


class NestingDepthError(ShapeError):
    """Compound shapes are nested deeper than ``settings.MAX_NESTING_DEPTH``."""


class InvalidDimensionError(ShapeError):
    """Non-positive radius or extent while ``settings.STRICT_DIMENSIONS`` is on."""
