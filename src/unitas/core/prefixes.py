"""
unitas.core.prefixes
====================

The SI prefix table.

Twenty magnitude-altering prefixes, yotta (10²⁴) down to yocto (10⁻²⁴),
plus the unprefixed base entry: twenty-one ladder entries in all. Each entry
carries an ASCII and a Unicode spelling of both its symbol and its name; the
two only differ for micro (``u`` / ``µ``) and deka (``deka`` / ``deca``).

The table is data: the unit generator walks it once per quantity class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True, slots=True)
class Prefix:
    symbol: str
    name: str
    unicode_symbol: str
    unicode_name: str
    exponent: int

    def __post_init__(self) -> None:
        if not -24 <= self.exponent <= 24:
            raise ValueError(f"prefix exponent out of range: {self.exponent}")

    @property
    def factor(self) -> float:
        return pow10(self.exponent)

    @property
    def is_base(self) -> bool:
        return self.exponent == 0


def pow10(exponent: int) -> float:
    """Return ``10**exponent`` as the correctly rounded float literal."""
    return float(f"1e{exponent}")


BASE = Prefix("", "", "", "", 0)

PREFIXES: Tuple[Prefix, ...] = (
    Prefix("Y", "yotta", "Y", "yotta", 24),
    Prefix("Z", "zetta", "Z", "zetta", 21),
    Prefix("E", "exa", "E", "exa", 18),
    Prefix("P", "peta", "P", "peta", 15),
    Prefix("T", "tera", "T", "tera", 12),
    Prefix("G", "giga", "G", "giga", 9),
    Prefix("M", "mega", "M", "mega", 6),
    Prefix("k", "kilo", "k", "kilo", 3),
    Prefix("h", "hecto", "h", "hecto", 2),
    Prefix("da", "deka", "da", "deca", 1),
    Prefix("d", "deci", "d", "deci", -1),
    Prefix("c", "centi", "c", "centi", -2),
    Prefix("m", "milli", "m", "milli", -3),
    Prefix("u", "micro", "µ", "micro", -6),
    Prefix("n", "nano", "n", "nano", -9),
    Prefix("p", "pico", "p", "pico", -12),
    Prefix("f", "femto", "f", "femto", -15),
    Prefix("a", "atto", "a", "atto", -18),
    Prefix("z", "zepto", "z", "zepto", -21),
    Prefix("y", "yocto", "y", "yocto", -24),
)

# Base entry slotted between deka and deci so the ladder stays ordered by factor.
LADDER: Tuple[Prefix, ...] = PREFIXES[:10] + (BASE,) + PREFIXES[10:]

_BY_EXPONENT: Dict[int, Prefix] = {p.exponent: p for p in LADDER}


def prefix_for_exponent(exponent: int) -> Prefix:
    """Look up the prefix with the given power of ten (0 gives the base entry)."""
    try:
        return _BY_EXPONENT[exponent]
    except KeyError:
        raise ValueError(f"No SI prefix for 10^{exponent}") from None


__all__ = ["Prefix", "BASE", "PREFIXES", "LADDER", "pow10", "prefix_for_exponent"]
