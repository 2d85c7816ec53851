from __future__ import annotations

from functools import reduce
from typing import Iterable

import numpy as np

from .errors import EmptyCompositionError


class Bounds:
    """Axis-aligned min/max corner pair."""

    __slots__ = ("lo", "hi")

    def __init__(self, lo, hi):
        self.lo = np.array(lo, dtype=float)
        self.hi = np.array(hi, dtype=float)
        assert self.lo.shape == self.hi.shape == (3,), "Bounds expects 3D corners"
        self.lo.flags.writeable = False
        self.hi.flags.writeable = False

    @classmethod
    def of_box(cls, box) -> "Bounds":
        return cls(box.min_corner().as_array(), box.max_corner().as_array())

    def is_empty(self) -> bool:
        """True when any axis is inverted (lo > hi), as for a negative-size box."""
        return bool(np.any(self.lo > self.hi))

    def union(self, other: "Bounds") -> "Bounds":
        return Bounds(np.minimum(self.lo, other.lo), np.maximum(self.hi, other.hi))

    def center(self) -> np.ndarray:
        return (self.lo + self.hi) / 2

    def size(self) -> np.ndarray:
        return self.hi - self.lo

    def __eq__(self, other):
        if not isinstance(other, Bounds):
            return NotImplemented
        return np.array_equal(self.lo, other.lo) and np.array_equal(self.hi, other.hi)

    __hash__ = None

    def __repr__(self):
        return f"Bounds(lo={self.lo.tolist()}, hi={self.hi.tolist()})"


def union_all(items: Iterable[Bounds]) -> Bounds:
    """Fold a non-empty sequence of bounds into the box enclosing all of them."""
    items = iter(items)
    try:
        first = next(items)
    except StopIteration:
        raise EmptyCompositionError("cannot take the union of zero bounds") from None
    return reduce(Bounds.union, items, first)
