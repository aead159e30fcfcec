"""
unitas.units.base
=================

The seven SI base quantities.

Mass is the odd one out: its unit ladder is built on the gram (``as_g``,
``as_mg``, ``as_kg``, ...) while values are stored in kilograms.
Time and Length also carry the common non-SI units (minutes to Julian years,
astronomical units and ångströms).

Formulas whose result or operand is a derived quantity import it locally;
``unitas.units.mechanics`` imports this module at load time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from unitas import constants as C
from unitas.core.dimensions import AMOUNT, CURRENT, LENGTH, LUMINOUS, MASS, TEMPERATURE, TIME
from unitas.core.quantity import ScalarQuantity, constant
from unitas.core.unit import ExtraUnit, Kind, QuantityMetadata
from unitas.core.utils import divide
from unitas.core.vectors import scale, shrink

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from unitas.units.mechanics import (
        Acceleration,
        Energy,
        Force,
        GravitationalFieldStrength,
        Moment,
        Power,
        Speed,
    )


class Time(ScalarQuantity):
    META = QuantityMetadata(
        symbol="s",
        unicode_symbol="s",
        singular="second",
        plural="seconds",
        kind=Kind.SCALAR,
        dim=TIME,
        extras=(
            ExtraUnit("min", "minutes", C.MINUTE),
            ExtraUnit("h", "hours", C.HOUR),
            ExtraUnit("d", "days", C.DAY),
            ExtraUnit("w", "weeks", C.WEEK),
            ExtraUnit("y", "years", C.YEAR),
            ExtraUnit("jy", "julian_years", C.JULIAN_YEAR),
        ),
    )
    __slots__ = ()

    JULIAN_YEAR = constant(C.JULIAN_YEAR)
    FULL_MOON_CYCLE = constant(C.FULL_MOON_CYCLE)
    DRACONIC_YEAR = constant(C.DRACONIC_YEAR)
    LUNAR_YEAR = constant(C.LUNAR_YEAR)

    # t = d / v
    @classmethod
    def from_distance_speed(cls, distance: Length, speed: Speed) -> Time:
        return cls(divide(distance.magnitude, speed.magnitude))

    @classmethod
    def from_speed_distance(cls, speed: Speed, distance: Length) -> Time:
        return cls.from_distance_speed(distance, speed)

    def calc_speed(self, distance: Length) -> Speed:
        from unitas.units.mechanics import Speed

        return Speed(divide(distance.magnitude, self._m))

    def calc_distance(self, speed: Speed) -> Length:
        return Length(speed.magnitude * self._m)

    # t = E / P
    @classmethod
    def from_energy_power(cls, energy: Energy, power: Power) -> Time:
        return cls(divide(energy.magnitude, power.magnitude))

    @classmethod
    def from_power_energy(cls, power: Power, energy: Energy) -> Time:
        return cls.from_energy_power(energy, power)

    def calc_power(self, energy: Energy) -> Power:
        from unitas.units.mechanics import Power

        return Power(divide(energy.magnitude, self._m))

    def calc_energy(self, power: Power) -> Energy:
        from unitas.units.mechanics import Energy

        return Energy(power.magnitude * self._m)


class Length(ScalarQuantity):
    META = QuantityMetadata(
        symbol="m",
        unicode_symbol="m",
        singular="metre",
        plural="metres",
        kind=Kind.SCALAR,
        dim=LENGTH,
        extras=(
            ExtraUnit("au", "astronomical_units", C.ASTRONOMICAL_UNIT),
            ExtraUnit("A", "angstroms", C.ANGSTROM, unicode_symbol="Å", unicode_name="ångströms"),
        ),
    )
    __slots__ = ()

    PLANCK = constant(C.PLANCK_LENGTH)
    WEAK_FORCE_RANGE = constant(C.WEAK_FORCE_RANGE)
    PROTON_RADIUS = constant(C.PROTON_RADIUS)
    ELECTRON_RADIUS = constant(C.ELECTRON_RADIUS)
    ATOMIC_NUCLEUS_DIAMETER_MIN = constant(C.ATOMIC_NUCLEUS_DIAMETER_MIN)
    ATOMIC_NUCLEUS_DIAMETER_MAX = constant(C.ATOMIC_NUCLEUS_DIAMETER_MAX)
    XRAY_SHORTEST_WAVELENGTH = constant(C.XRAY_SHORTEST_WAVELENGTH)
    HELIUM_RADIUS = constant(C.HELIUM_RADIUS)
    BOHR_RADIUS = constant(C.BOHR_RADIUS)
    ANGSTROM = constant(C.ANGSTROM)
    COVALENT_BOND_DIAMOND = constant(C.COVALENT_BOND_DIAMOND)
    ASTRONOMICAL_UNIT = constant(C.ASTRONOMICAL_UNIT)

    # d = v · t
    @classmethod
    def from_time_speed(cls, time: Time, speed: Speed) -> Length:
        return cls(speed.magnitude * time.magnitude)

    @classmethod
    def from_speed_time(cls, speed: Speed, time: Time) -> Length:
        return cls.from_time_speed(time, speed)

    def calc_speed(self, time: Time) -> Speed:
        from unitas.units.mechanics import Speed

        return Speed(divide(self._m, time.magnitude))

    def calc_time(self, speed: Speed) -> Time:
        return Time(divide(self._m, speed.magnitude))

    # d = |M| / |F|, the lever arm of a moment
    @classmethod
    def from_moment_force(cls, moment: Moment, force: Force) -> Length:
        return cls(divide(moment.magnitude, force.magnitude))

    @classmethod
    def from_force_moment(cls, force: Force, moment: Moment) -> Length:
        return cls.from_moment_force(moment, force)

    def calc_moment(self, force: Force) -> Moment:
        """Moment of ``force`` acting at this distance, oriented like ``force``."""
        from unitas.units.mechanics import Moment

        return Moment(scale(force.direction, self._m))

    def calc_force(self, moment: Moment) -> Force:
        """Force producing ``moment`` at this distance, oriented like ``moment``."""
        from unitas.units.mechanics import Force

        return Force(shrink(moment.direction, self._m))


Distance = Length
Height = Length


class Mass(ScalarQuantity):
    META = QuantityMetadata(
        symbol="g",
        unicode_symbol="g",
        singular="gram",
        plural="grams",
        kind=Kind.SCALAR,
        dim=MASS,
        base_shift=3,
    )
    __slots__ = ()

    ELECTRON = constant(C.ELECTRON_MASS)
    PROTON = constant(C.PROTON_MASS)

    # m = E / c²
    @classmethod
    def from_energy(cls, energy: Energy) -> Mass:
        return cls(divide(energy.magnitude, C.SPEED_OF_LIGHT_SQUARED))

    def calc_energy(self) -> Energy:
        from unitas.units.mechanics import Energy

        return Energy.from_mass(self)

    # m = |F| / |a|
    @classmethod
    def from_force_acceleration(cls, force: Force, acceleration: Acceleration) -> Mass:
        return cls(divide(force.magnitude, acceleration.magnitude))

    @classmethod
    def from_acceleration_force(cls, acceleration: Acceleration, force: Force) -> Mass:
        return cls.from_force_acceleration(force, acceleration)

    def calc_force(self, acceleration: Acceleration) -> Force:
        from unitas.units.mechanics import Force

        return Force(scale(acceleration.direction, self._m))

    def calc_acceleration(self, force: Force) -> Acceleration:
        from unitas.units.mechanics import Acceleration

        return Acceleration(shrink(force.direction, self._m))

    # m = |W| / |g|
    @classmethod
    def from_weight_gfs(cls, weight: Force, gfs: GravitationalFieldStrength) -> Mass:
        return cls(divide(weight.magnitude, gfs.magnitude))

    @classmethod
    def from_gfs_weight(cls, gfs: GravitationalFieldStrength, weight: Force) -> Mass:
        return cls.from_weight_gfs(weight, gfs)

    def calc_weight(self, gfs: GravitationalFieldStrength) -> Force:
        from unitas.units.mechanics import Force

        return Force(scale(gfs.direction, self._m))

    def calc_gfs(self, weight: Force) -> GravitationalFieldStrength:
        from unitas.units.mechanics import GravitationalFieldStrength

        return GravitationalFieldStrength(shrink(weight.direction, self._m))


class Current(ScalarQuantity):
    META = QuantityMetadata(
        symbol="A",
        unicode_symbol="A",
        singular="ampere",
        plural="amperes",
        kind=Kind.SCALAR,
        dim=CURRENT,
    )
    __slots__ = ()


class Temperature(ScalarQuantity):
    META = QuantityMetadata(
        symbol="K",
        unicode_symbol="K",
        singular="kelvin",
        plural="kelvins",
        kind=Kind.SCALAR,
        dim=TEMPERATURE,
    )
    __slots__ = ()


class Intensity(ScalarQuantity):
    """Luminous intensity."""

    META = QuantityMetadata(
        symbol="cd",
        unicode_symbol="cd",
        singular="candela",
        plural="candelas",
        kind=Kind.SCALAR,
        dim=LUMINOUS,
    )
    __slots__ = ()


class Amount(ScalarQuantity):
    """Amount of substance."""

    META = QuantityMetadata(
        symbol="mol",
        unicode_symbol="mol",
        singular="mole",
        plural="moles",
        kind=Kind.SCALAR,
        dim=AMOUNT,
    )
    __slots__ = ()


__all__ = [
    "Time",
    "Length",
    "Distance",
    "Height",
    "Mass",
    "Current",
    "Temperature",
    "Intensity",
    "Amount",
]
