"""
unitas.core.utils
=================

Numeric and formatting helpers shared by the quantity classes.

This module holds the library-wide tolerances, the total (never raising)
division used by every formula, the magnitude formatter used for display,
and helpers for representing dimensional exponents in a readable scientific
format (e.g., 'kg·m/s²').
"""

from __future__ import annotations

import sys
import unicodedata
from typing import List

import numpy as np

from unitas.core.dimensions import Dim

# Equality between two quantities of the same type.
REL_TOL = 1e-12
# Guaranteed accuracy of a constructor/accessor round-trip through any prefix.
ROUND_TRIP_REL_TOL = 1e-9
# A magnitude closer than this to 1 is rendered with the singular unit name.
EPSILON = sys.float_info.epsilon
MAGNITUDE_FORMAT = ".15g"

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")
_SEPARATORS = str.maketrans({"/": "_", "·": "_", "⋅": "_", "*": "_", " ": "_"})


def _sup(n: int) -> str:
    return "" if n == 1 else str(n).translate(_SUPERSCRIPTS)


def format_dim(dim: Dim) -> str:
    """
    Turn a dimension tuple (L,M,T,I,Θ,N,J) into 'kg·m/s²' style.
    Conventional order: M, L, T, I, Θ, N, J.
    """
    # indices: L=0 M=1 T=2 I=3 Θ=4 N=5 J=6
    labels: List[str] = ["m", "kg", "s", "A", "K", "mol", "cd"]
    order: List[int] = [1, 0, 2, 3, 4, 5, 6]

    num: List[str] = []
    den: List[str] = []
    for i in order:
        e = dim[i]
        if e > 0:
            num.append(labels[i] + _sup(e))
        elif e < 0:
            den.append(labels[i] + _sup(-e))

    numerator = "·".join(num) if num else "1"
    denominator = "·".join(den)
    return f"{numerator}/{denominator}" if denominator else numerator


def format_magnitude(value: float) -> str:
    return format(value, MAGNITUDE_FORMAT)


def is_one(value: float) -> bool:
    """True when ``value`` should take the singular unit name."""
    return abs(value - 1.0) < EPSILON


def normalize_unit_name(name: str) -> str:
    """Normalize a user-provided unit name to its lookup key.

    Rules:
    - Strip surrounding whitespace.
    - Unicode normalize to NFKC, the form Python uses for identifiers
      (so 'µ' and 'μ' agree, 'm²' becomes 'm2', 'Å' the composed letter).
    - Map the separators '/', '·', '*' and blanks to '_' so that
      'm/s²' and 'metres per second' match the generated names.
    """
    s = unicodedata.normalize("NFKC", name.strip())
    return s.translate(_SEPARATORS)


def divide(numerator, denominator):
    """IEEE-754 division that never raises.

    Works for floats and for numpy direction vectors alike; a zero divisor
    gives ±inf or NaN.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        result = np.divide(numerator, denominator, dtype=np.float64)
    if np.ndim(result) == 0:
        return float(result)
    return result


__all__ = [
    "REL_TOL",
    "ROUND_TRIP_REL_TOL",
    "EPSILON",
    "MAGNITUDE_FORMAT",
    "format_dim",
    "format_magnitude",
    "is_one",
    "normalize_unit_name",
    "divide",
]
