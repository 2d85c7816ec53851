"""Solid shapes answering point containment and axis-aligned bounds.

Every shape is an immutable value. ``contains_point`` treats the surface as
inside (closed sets) and ``bounding_box`` always returns a :class:`Box`.

Points may be given as :class:`~solidshapes.linalg.Vec3` or any 3-item
sequence.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator, Tuple

import numpy as np

from . import settings
from .bounds import Bounds, union_all
from .errors import EmptyCompositionError, InvalidDimensionError, NestingDepthError
from .linalg import Vec3

log = logging.getLogger("solidshapes.shapes")


def _check_dimensions(kind: str, **dims: float) -> None:
    bad = {name: value for name, value in dims.items() if not value > 0}
    if not bad:
        return
    if settings.STRICT_DIMENSIONS:
        raise InvalidDimensionError(f"{kind} needs positive dimensions, got {bad}")
    log.debug("accepting degenerate %s %s", kind, bad)


class Shape(ABC):
    """Common contract of every solid."""

    position: Vec3

    @abstractmethod
    def contains_point(self, point) -> bool:
        ...

    @abstractmethod
    def bounding_box(self) -> "Box":
        ...

    def __contains__(self, point) -> bool:
        return self.contains_point(point)


@dataclass(frozen=True)
class Sphere(Shape):
    position: Vec3
    radius: float

    def __post_init__(self):
        object.__setattr__(self, "position", Vec3.of(self.position))
        _check_dimensions("Sphere", radius=self.radius)

    def contains_point(self, point) -> bool:
        # squared distance, no sqrt needed
        return (Vec3.of(point) - self.position).length2() <= self.radius * self.radius

    def bounding_box(self) -> "Box":
        # containment squares the radius, so a negative one still encloses |radius|
        size = 2 * abs(self.radius)
        return Box(self.position, size, size, size)


@dataclass(frozen=True)
class Box(Shape):
    """Axis-aligned box. ``size_*`` are full widths centred on ``position``."""

    position: Vec3
    size_x: float
    size_y: float
    size_z: float

    def __post_init__(self):
        object.__setattr__(self, "position", Vec3.of(self.position))
        _check_dimensions("Box", size_x=self.size_x, size_y=self.size_y, size_z=self.size_z)

    @classmethod
    def from_bounds(cls, bounds: Bounds) -> "Box":
        lo, hi = bounds.lo, bounds.hi
        center = bounds.center()
        size = bounds.size()
        # center -/+ size/2 may round inside lo/hi; grow size by an ulp until it does not
        while True:
            half = size / 2
            short = (center - half > lo) | (center + half < hi)
            if not short.any():
                break
            size = np.where(short, np.nextafter(size, np.inf), size)
        sx, sy, sz = (float(v) for v in size)
        return cls(Vec3.of(center), sx, sy, sz)

    def half_size(self) -> Vec3:
        return Vec3(self.size_x, self.size_y, self.size_z) / 2

    def min_corner(self) -> Vec3:
        return self.position - self.half_size()

    def max_corner(self) -> Vec3:
        return self.position + self.half_size()

    def contains_point(self, point) -> bool:
        p = Vec3.of(point)
        return p >= self.min_corner() and p <= self.max_corner()

    def bounding_box(self) -> "Box":
        return self


@dataclass(frozen=True)
class Cylinder(Shape):
    """Cylinder with its axis parallel to Z, ``size_z`` tall."""

    position: Vec3
    size_z: float
    radius: float

    def __post_init__(self):
        object.__setattr__(self, "position", Vec3.of(self.position))
        _check_dimensions("Cylinder", size_z=self.size_z, radius=self.radius)

    def contains_point(self, point) -> bool:
        p = Vec3.of(point)
        dx = p.x - self.position.x
        dy = p.y - self.position.y
        min_z = self.position.z - self.size_z / 2
        max_z = min_z + self.size_z
        return dx * dx + dy * dy <= self.radius * self.radius and min_z <= p.z <= max_z

    def bounding_box(self) -> "Box":
        size = 2 * abs(self.radius)
        return Box(self.position, size, size, self.size_z)


@dataclass(frozen=True)
class CompoundShape(Shape):
    """Union of one or more shapes, compounds included.

    ``position`` is the first part's position, not a centroid. The parts are
    copied into a tuple at construction, so the compound never shares a
    mutable container with the caller.

    Nesting is limited to ``settings.MAX_NESTING_DEPTH`` levels, checked here
    rather than at query time.
    """

    parts: Tuple[Shape, ...]
    depth: int = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        parts = tuple(self.parts)
        if not parts:
            raise EmptyCompositionError("CompoundShape needs at least one part")
        for part in parts:
            if not isinstance(part, Shape):
                raise TypeError(f"CompoundShape parts must be shapes, got {type(part).__name__}")
        depth = 1 + max((p.depth for p in parts if isinstance(p, CompoundShape)), default=0)
        if depth > settings.MAX_NESTING_DEPTH:
            raise NestingDepthError(
                f"nesting depth {depth} exceeds MAX_NESTING_DEPTH={settings.MAX_NESTING_DEPTH}"
            )
        object.__setattr__(self, "parts", parts)
        object.__setattr__(self, "depth", depth)
        log.debug("CompoundShape with %d parts, depth %d", len(parts), depth)

    @property
    def position(self) -> Vec3:
        return self.parts[0].position

    def __len__(self) -> int:
        return len(self.parts)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.parts)

    def leaves(self) -> Iterator[Shape]:
        """Depth-first walk over the non-compound shapes."""
        for part in self.parts:
            if isinstance(part, CompoundShape):
                yield from part.leaves()
            else:
                yield part

    def contains_point(self, point) -> bool:
        p = Vec3.of(point)
        return any(part.contains_point(p) for part in self.parts)

    def bounding_box(self) -> Box:
        # recomputed on every call; parts are immutable so callers may cache
        # inverted boxes contain nothing and do not widen the union
        filled = []
        for part in self.parts:
            bounds = Bounds.of_box(part.bounding_box())
            if not bounds.is_empty():
                filled.append(bounds)
        if not filled:
            return Box(self.position, 0.0, 0.0, 0.0)
        return Box.from_bounds(union_all(filled))
