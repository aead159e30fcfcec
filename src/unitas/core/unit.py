from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from math import isfinite
from typing import Tuple

from unitas.core.dimensions import Dim, Dimension
from unitas.core.prefixes import Prefix, pow10, prefix_for_exponent


class Kind(Enum):
    SCALAR = "scalar"
    VECTOR = "vector"


@dataclass(frozen=True, slots=True)
class LinearUnit:
    """One generated unit of a quantity: how to reach the canonical unit.

    Prefixed units scale by an exact power of ten (``exponent``); non-SI
    units carry an arbitrary multiplicative ``factor`` instead.
    """

    name: str
    exponent: int = 0
    factor: float | None = None

    def __post_init__(self) -> None:
        if self.factor is not None and not (self.factor > 0 and isfinite(self.factor)):
            raise ValueError("factor must be a positive, finite number")

    @property
    def is_identity(self) -> bool:
        return self.factor is None and self.exponent == 0

    @property
    def scale_to_base(self) -> float:
        if self.factor is not None:
            return self.factor
        return pow10(self.exponent)

    # Positive and negative exponents are applied with the opposite operation
    # so that the scale is always an exact integral power of ten.
    def to_base(self, x):
        if self.factor is not None:
            return x * self.factor
        e = self.exponent
        if e == 0:
            return x
        if e > 0:
            return x * pow10(e)
        return x / pow10(-e)

    def from_base(self, x):
        if self.factor is not None:
            return x / self.factor
        e = self.exponent
        if e == 0:
            return x
        if e > 0:
            return x / pow10(e)
        return x * pow10(-e)


@dataclass(frozen=True, slots=True)
class ExtraUnit:
    """A unit outside the prefix ladder (non-SI, or a prefixed second part)."""

    symbol: str
    name: str
    factor: float
    unicode_symbol: str | None = None
    unicode_name: str | None = None


@dataclass(frozen=True, slots=True)
class QuantityMetadata:
    """Everything the generator and the display layer need about a quantity.

    ``symbol`` is the ASCII identifier form of the unprefixed unit (``m2``,
    ``m_s``, ``g_m3``); ``unicode_symbol`` is its display form (``m²``,
    ``m/s``, ``g/m³``). ``power`` applies to the prefixed (first) part of the
    unit only. ``base_shift`` is the exponent of the prefix the value is
    stored in (3 for quantities stored in kilograms).
    """

    symbol: str
    unicode_symbol: str
    singular: str
    plural: str
    kind: Kind
    dim: Dim
    power: int = 1
    base_shift: int = 0
    qualifier: str = ""
    extras: Tuple[ExtraUnit, ...] = field(default=())

    def __post_init__(self) -> None:
        if not self.symbol:
            raise ValueError("symbol must not be empty")
        if self.power not in (1, 2, 3):
            raise ValueError("power must be 1, 2 or 3")
        # raises ValueError for a shift that is not a prefix exponent
        prefix_for_exponent(self.base_shift)
        object.__setattr__(self, "dim", Dimension(self.dim))

    @property
    def is_vector(self) -> bool:
        return self.kind is Kind.VECTOR

    @property
    def canonical_prefix(self) -> Prefix:
        return prefix_for_exponent(self.base_shift)

    def effective_exponent(self, prefix: Prefix) -> int:
        return prefix.exponent * self.power - self.base_shift

    def label(self, prefix: Prefix, plural: bool) -> str:
        """Human-readable unit name, e.g. 'square kilometres'."""
        noun = self.plural if plural else self.singular
        head = f"{self.qualifier} " if self.qualifier else ""
        return f"{head}{prefix.name}{noun}"

    def long_name(self, prefix: Prefix, *, unicode: bool = False) -> str:
        """Identifier stem of the long spelling, e.g. 'square_kilometres'."""
        head = f"{self.qualifier}_" if self.qualifier else ""
        pname = prefix.unicode_name if unicode else prefix.name
        return f"{head}{pname}{self.plural.replace(' ', '_')}"

    def short_name(self, prefix: Prefix, *, unicode: bool = False) -> str:
        if unicode:
            return prefix.unicode_symbol + self.unicode_symbol
        return prefix.symbol + self.symbol

    # Canonical display --------------------------------------------------
    @property
    def display_symbol(self) -> str:
        return self.short_name(self.canonical_prefix, unicode=True)

    @property
    def display_singular(self) -> str:
        return self.label(self.canonical_prefix, plural=False)

    @property
    def display_plural(self) -> str:
        return self.label(self.canonical_prefix, plural=True)


__all__ = ["Kind", "LinearUnit", "ExtraUnit", "QuantityMetadata"]
