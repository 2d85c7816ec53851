"""Vector primitive used by the shape family.

A small immutable 3D vector. Comparison operators are componentwise and
collapse to a single bool, so ``a <= b`` reads as "a lies below b on every
axis".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np


@dataclass(frozen=True)
class Vec3:
    x: float
    y: float
    z: float

    @staticmethod
    def of(values: Iterable[float]) -> "Vec3":
        if isinstance(values, Vec3):
            return values
        coords = [float(v) for v in values]
        if len(coords) != 3:
            raise ValueError(f"Vec3 expects 3 components, got {len(coords)}")
        return Vec3(*coords)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vec3":
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec3":
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __le__(self, other: "Vec3") -> bool:
        return self.x <= other.x and self.y <= other.y and self.z <= other.z

    def __ge__(self, other: "Vec3") -> bool:
        return self.x >= other.x and self.y >= other.y and self.z >= other.z

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length2(self) -> float:
        return self.dot(self)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)
