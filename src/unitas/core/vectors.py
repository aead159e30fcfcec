"""
unitas.core.vectors
===================

Directions of vector quantities.

A direction is a read-only ``numpy.ndarray`` of shape ``(3,)`` and dtype
``float64``; its Euclidean length is the magnitude of the quantity that owns
it. All the vector algebra comes from numpy; the helpers here only coerce
input, freeze the result and keep scaling total.
"""

from __future__ import annotations

from math import hypot
from numbers import Real
from typing import Sequence, Union

import numpy as np
import numpy.typing as npt

from unitas.core.utils import divide

Direction = npt.NDArray[np.float64]
DirectionLike = Union[Real, Sequence[float], npt.ArrayLike]


def freeze(arr: npt.ArrayLike) -> Direction:
    """Copy ``arr`` into a new read-only float64 3-vector."""
    out = np.array(arr, dtype=np.float64)
    if out.shape != (3,):
        raise ValueError(f"a direction must have exactly 3 components, got shape {out.shape}")
    out.setflags(write=False)
    return out


def as_direction(value: DirectionLike) -> Direction:
    """Coerce ``value`` to a direction.

    A bare number ``x`` is read as ``(x, 0, 0)``: one-dimensional use of a
    vector quantity lies along the x axis.
    """
    if isinstance(value, Real) and not isinstance(value, bool):
        return freeze((float(value), 0.0, 0.0))
    return freeze(value)


def norm(d: Direction) -> float:
    """Euclidean length, scaled so that huge or tiny components neither
    overflow nor underflow."""
    return hypot(*d.tolist())


def scale(d: Direction, k: float) -> Direction:
    with np.errstate(invalid="ignore", over="ignore", under="ignore"):
        return freeze(np.multiply(d, k))


def shrink(d: Direction, k: float) -> Direction:
    """``d / k`` with IEEE semantics for a zero ``k``."""
    return freeze(divide(d, k))


ZERO: Direction = freeze((0.0, 0.0, 0.0))

__all__ = [
    "Direction",
    "DirectionLike",
    "ZERO",
    "as_direction",
    "freeze",
    "norm",
    "scale",
    "shrink",
]
