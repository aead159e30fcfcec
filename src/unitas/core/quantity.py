"""
unitas.core.quantity
====================

The two variants every physical quantity is built on.

- `ScalarQuantity` stores one magnitude (a float) in the canonical unit.
- `VectorQuantity` stores one direction (a frozen numpy 3-vector) in the
  canonical unit; its magnitude is the Euclidean length of that vector.

Both are immutable and satisfy the `HasMagnitude` protocol. A concrete
quantity declares a ``META`` record (`QuantityMetadata`); creating the class
generates its ``in_<unit>`` constructors and ``as_<unit>`` accessors for
every SI prefix and every extra unit listed in the metadata.

Display
-------
``str(q)`` gives the short form ``"<magnitude> <symbol>"``; ``q.long()``
spells the unit out, singular when the magnitude is 1 and plural otherwise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from math import isclose
from numbers import Real
from typing import Any, ClassVar, Protocol, Tuple, runtime_checkable

import numpy as np

from unitas.core.generator import UnitTable, install_units
from unitas.core.unit import Kind, LinearUnit, QuantityMetadata
from unitas.core.utils import REL_TOL, divide, format_dim, format_magnitude, is_one
from unitas.core.vectors import (
    Direction,
    DirectionLike,
    ZERO,
    as_direction,
    freeze,
    norm,
    scale,
    shrink,
)


@runtime_checkable
class HasMagnitude(Protocol):
    @property
    def magnitude(self) -> float: ...


class constant:
    """Class-level constant that hands out a fresh instance of its owner.

    The value is given in the owner's canonical unit (a number for scalar
    quantities, a number or a 3-vector for vector quantities).
    """

    __slots__ = ("value", "name")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: object, owner: type) -> "Quantity":
        return owner(self.value)

    def __repr__(self) -> str:
        return f"constant({self.name}={self.value!r})"


class Quantity(ABC):
    """Behaviour shared by scalar and vector quantities."""

    META: ClassVar[QuantityMetadata]
    units: ClassVar[UnitTable]
    _kind: ClassVar[Kind]

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        meta = cls.__dict__.get("META")
        if meta is None:
            # intermediate base, or a subclass reusing its parent's units
            return
        if meta.kind is not cls._kind:
            raise TypeError(
                f"{cls.__name__} is a {cls._kind.value} quantity "
                f"but its metadata declares {meta.kind.value}"
            )
        cls.units = install_units(cls, meta)

    # --- variant hooks used by the generated functions ---
    @classmethod
    @abstractmethod
    def _build(cls, unit: LinearUnit, value: Any) -> "Quantity":
        """Create an instance from ``value`` given in ``unit``."""

    @abstractmethod
    def _read(self, unit: LinearUnit) -> Any:
        """Return the stored value expressed in ``unit``."""

    @property
    @abstractmethod
    def magnitude(self) -> float:
        """Size in the canonical unit."""

    # --- immutability ---
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --- string lookups ---
    @classmethod
    def of(cls, value: Any, unit: str) -> "Quantity":
        """Build a quantity from ``value`` in the unit spelled ``unit``.

        Any generated spelling is accepted, as are their Unicode display
        forms: ``Speed.of(3, "km/s")``, ``Length.of(2, "µm")``.
        """
        return cls._build(cls.units.get(unit), value)

    def to(self, unit: str) -> Any:
        """Read the value in the unit spelled ``unit`` (see `of`)."""
        return self._read(self.units.get(unit))

    # --- display ---
    @classmethod
    def unit(cls) -> str:
        return cls.META.display_symbol

    @classmethod
    def unit_long_singular(cls) -> str:
        return cls.META.display_singular

    @classmethod
    def unit_long_plural(cls) -> str:
        return cls.META.display_plural

    @classmethod
    def si_units(cls) -> str:
        """The canonical unit written in SI base units, e.g. 'kg·m/s²'."""
        return format_dim(cls.META.dim)

    def unit_long(self) -> str:
        if is_one(self.magnitude):
            return self.unit_long_singular()
        return self.unit_long_plural()

    def short(self) -> str:
        return f"{format_magnitude(self.magnitude)} {self.unit()}"

    def long(self) -> str:
        return f"{format_magnitude(self.magnitude)} {self.unit_long()}"

    def __str__(self) -> str:
        return self.short()

    def __format__(self, spec: str) -> str:
        """
        Supported specifiers
        --------------------
        "" (empty), or "short"
            ``'5 km/s'`` style, canonical unit symbol.
        "long"
            ``'5 kilometres per second'`` style.

        Raises
        ------
        ValueError
            If the format specifier is not one of "", "short", or "long".
        """
        spec = (spec or "").strip().lower()
        if spec in ("", "short"):
            return self.short()
        if spec == "long":
            return self.long()
        raise ValueError("Unknown format spec; use '', 'short', or 'long'")

    # --- comparisons ---
    def _same_kind(self, other: object) -> bool:
        return isinstance(other, Quantity) and other.META is self.META

    __hash__ = None  # type: ignore[assignment]


class ScalarQuantity(Quantity):
    """A quantity with a single magnitude in the canonical unit."""

    _kind = Kind.SCALAR
    __slots__ = ("_m",)

    def __init__(self, magnitude: float = 0.0) -> None:
        object.__setattr__(self, "_m", float(magnitude))

    @classmethod
    def _build(cls, unit: LinearUnit, value: float) -> "ScalarQuantity":
        return cls(unit.to_base(float(value)))

    def _read(self, unit: LinearUnit) -> float:
        return unit.from_base(self._m)

    @property
    def magnitude(self) -> float:
        return self._m

    def __reduce__(self):
        return (type(self), (self._m,))

    def __repr__(self) -> str:
        return self.short()

    # --- equality / ordering (relative tolerance, as for floats) ---
    def _check_compatible(self, other: object) -> "ScalarQuantity":
        if not self._same_kind(other):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return other  # type: ignore[return-value]

    def _is_close(self, other_m: float) -> bool:
        return isclose(self._m, other_m, rel_tol=REL_TOL, abs_tol=0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._same_kind(other) and self._is_close(other.magnitude)

    def __lt__(self, other: object) -> bool:
        o = self._check_compatible(other)
        return self._m < o._m and not self._is_close(o._m)

    def __le__(self, other: object) -> bool:
        o = self._check_compatible(other)
        return self._m < o._m or self._is_close(o._m)

    def __gt__(self, other: object) -> bool:
        o = self._check_compatible(other)
        return self._m > o._m and not self._is_close(o._m)

    def __ge__(self, other: object) -> bool:
        o = self._check_compatible(other)
        return self._m > o._m or self._is_close(o._m)

    def as_key(self, precision: int = 12) -> tuple:
        """
        Returns a hashable, discretized key for this quantity.

        `__hash__` is not implemented because `__eq__` uses `isclose`, which
        would violate the Python hash contract. Round to a chosen precision
        instead when quantities are needed as dict keys or set members.
        """
        rounded = round(self._m, precision)
        if rounded == 0.0:
            rounded = 0.0  # fold -0.0
        return (type(self).META.symbol, rounded)

    # --- arithmetic ---
    def __add__(self, other: object) -> "ScalarQuantity":
        if not self._same_kind(other):
            return NotImplemented
        return type(self)(self._m + other._m)  # type: ignore[attr-defined]

    def __sub__(self, other: object) -> "ScalarQuantity":
        if not self._same_kind(other):
            return NotImplemented
        return type(self)(self._m - other._m)  # type: ignore[attr-defined]

    def __neg__(self) -> "ScalarQuantity":
        return type(self)(-self._m)

    def __abs__(self) -> "ScalarQuantity":
        return type(self)(abs(self._m))

    def __mul__(self, k: object) -> "ScalarQuantity":
        if not isinstance(k, Real):
            return NotImplemented
        return type(self)(self._m * float(k))

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Any:
        # same quantity: dimensionless ratio
        if self._same_kind(other):
            return divide(self._m, other._m)  # type: ignore[attr-defined]
        if isinstance(other, Real):
            return type(self)(divide(self._m, float(other)))
        return NotImplemented


class VectorQuantity(Quantity):
    """A quantity with a 3-component direction in the canonical unit.

    The constructor accepts a 3-sequence or a bare number ``x`` (read as
    ``(x, 0, 0)``). Generated accessors return ``(magnitude, direction)``
    pairs, both expressed in the requested unit.
    """

    _kind = Kind.VECTOR
    __slots__ = ("_d",)

    def __init__(self, direction: DirectionLike = ZERO) -> None:
        object.__setattr__(self, "_d", as_direction(direction))

    @classmethod
    def from_components(cls, x: float, y: float, z: float) -> "VectorQuantity":
        return cls((x, y, z))

    @classmethod
    def _build(cls, unit: LinearUnit, value: DirectionLike) -> "VectorQuantity":
        # prefix scaling of the components saturates to inf or 0 silently
        with np.errstate(over="ignore", under="ignore"):
            return cls(unit.to_base(as_direction(value)))

    def _read(self, unit: LinearUnit) -> Tuple[float, Direction]:
        with np.errstate(over="ignore", under="ignore"):
            return unit.from_base(self.magnitude), freeze(unit.from_base(self._d))

    @property
    def magnitude(self) -> float:
        return norm(self._d)

    @property
    def direction(self) -> Direction:
        return self._d

    def unit_vector(self) -> Direction:
        """Direction scaled to length 1 (NaN components for a zero vector)."""
        return shrink(self._d, self.magnitude)

    def __reduce__(self):
        return (type(self), (tuple(self._d.tolist()),))

    def __repr__(self) -> str:
        x, y, z = (format_magnitude(c) for c in self._d.tolist())
        return f"{self.short()} [{x}, {y}, {z}]"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if not self._same_kind(other):
            return False
        gap = norm(self._d - other._d)  # type: ignore[attr-defined]
        return gap <= REL_TOL * max(self.magnitude, other.magnitude)

    def dot(self, other: "VectorQuantity") -> float:
        return float(np.dot(self._d, other.direction))

    # --- arithmetic ---
    def __add__(self, other: object) -> "VectorQuantity":
        if not self._same_kind(other):
            return NotImplemented
        return type(self)(self._d + other._d)  # type: ignore[attr-defined]

    def __sub__(self, other: object) -> "VectorQuantity":
        if not self._same_kind(other):
            return NotImplemented
        return type(self)(self._d - other._d)  # type: ignore[attr-defined]

    def __neg__(self) -> "VectorQuantity":
        return type(self)(-self._d)

    def __mul__(self, k: object) -> "VectorQuantity":
        if not isinstance(k, Real):
            return NotImplemented
        return type(self)(scale(self._d, float(k)))

    __rmul__ = __mul__

    def __truediv__(self, k: object) -> "VectorQuantity":
        if not isinstance(k, Real):
            return NotImplemented
        return type(self)(shrink(self._d, float(k)))


__all__ = ["HasMagnitude", "constant", "Quantity", "ScalarQuantity", "VectorQuantity"]
