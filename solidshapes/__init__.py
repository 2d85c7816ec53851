"""Solid shapes with point containment and axis-aligned bounding boxes."""

__all__ = [
    "Vec3",
    "Bounds",
    "union_all",
    "Shape",
    "Sphere",
    "Box",
    "Cylinder",
    "CompoundShape",
    # Errors
    "ShapeError",
    "EmptyCompositionError",
    "NestingDepthError",
    "InvalidDimensionError",
]

from .linalg import Vec3
from .bounds import Bounds, union_all
from .shapes import Shape, Sphere, Box, Cylinder, CompoundShape
from .errors import (
    ShapeError,
    EmptyCompositionError,
    NestingDepthError,
    InvalidDimensionError,
)
