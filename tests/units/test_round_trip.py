# tests/units/test_round_trip.py
import pytest

from unitas.core.prefixes import LADDER
from unitas.core.quantity import VectorQuantity
from unitas.core.utils import ROUND_TRIP_REL_TOL
from unitas.units import (
    Acceleration, Amount, Area, Charge, Current, Density, Energy, Force,
    Frequency, GravitationalFieldStrength, Intensity, Length, Mass, Moment,
    Momentum, Power, Pressure, Speed, Temperature, Time, Velocity, Volume,
)

QUANTITIES = [
    Time, Length, Mass, Current, Temperature, Intensity, Amount,
    Area, Volume, Density, Speed, Velocity, Acceleration, Force, Moment,
    Momentum, GravitationalFieldStrength, Pressure, Energy, Power, Frequency,
    Charge,
]

PAIRS = [(q, p) for q in QUANTITIES for p in LADDER]


def _ids(pair):
    q, p = pair
    return f"{q.__name__}-{p.name or 'base'}"


# -------------------------------
# in_P(x).as_P() reproduces x
# -------------------------------

@pytest.mark.parametrize("pair", PAIRS, ids=[_ids(p) for p in PAIRS])
def test_round_trip_every_prefix(pair):
    cls, prefix = pair
    key = cls.META.short_name(prefix)
    q = getattr(cls, f"in_{key}")(1.5)
    out = getattr(q, f"as_{key}")()
    if issubclass(cls, VectorQuantity):
        mag, direction = out
        assert mag == pytest.approx(1.5, rel=ROUND_TRIP_REL_TOL)
        assert direction[0] == pytest.approx(1.5, rel=ROUND_TRIP_REL_TOL)
    else:
        assert out == pytest.approx(1.5, rel=ROUND_TRIP_REL_TOL)

@pytest.mark.parametrize("cls", QUANTITIES)
def test_long_and_short_spellings_agree(cls):
    for prefix in LADDER:
        short = cls.META.short_name(prefix)
        long = cls.META.long_name(prefix)
        assert getattr(cls, f"in_{short}")(2) == getattr(cls, f"in_{long}")(2)

@pytest.mark.parametrize("cls", QUANTITIES)
def test_canonical_unit_is_identity(cls):
    canonical = cls.META.short_name(cls.META.canonical_prefix)
    x = 0.1 + 0.2
    q = getattr(cls, f"in_{canonical}")(x)
    assert q.magnitude == x

# -------------------------------
# in_P1(x).as_P2() == x * f1^n / f2^n
# -------------------------------

@pytest.mark.parametrize("cls", [Length, Area, Volume, Mass, Speed, Energy])
def test_cross_prefix_consistency(cls):
    n = cls.META.power
    for p1 in LADDER[4:18]:   # tera .. femto
        for p2 in LADDER[4:18]:
            q = getattr(cls, f"in_{cls.META.short_name(p1)}")(3.0)
            got = getattr(q, f"as_{cls.META.short_name(p2)}")()
            expected = 3.0 * (p1.factor ** n) / (p2.factor ** n)
            assert got == pytest.approx(expected, rel=ROUND_TRIP_REL_TOL)

# -------------------------------
# Vector magnitudes far from 1
# -------------------------------

@pytest.mark.parametrize("cls, key, value", [
    (Force, "N", 1e200),
    (Force, "yN", 1e-150),
    (Force, "YN", 1e150),
    (Velocity, "m_s", 1e-170),
    (Acceleration, "m_s2", 1e250),
])
def test_vector_round_trip_at_extreme_magnitudes(cls, key, value):
    mag, direction = getattr(getattr(cls, f"in_{key}")(value), f"as_{key}")()
    assert mag == pytest.approx(value, rel=ROUND_TRIP_REL_TOL)
    assert direction[0] == pytest.approx(value, rel=ROUND_TRIP_REL_TOL)
