"""
unitas.units.mechanics
======================

Derived mechanical quantities and the formulas that relate them.

Formulas are total: a zero divisor gives ``inf`` or ``nan`` rather than an
exception. Each forward formula is a class method named after its operands
in order (``Force.from_mass_acceleration``), with a swapped-argument twin,
and each operand can be recovered with a ``calc_<operand>`` method on the
result.

Vector results take the orientation of the vector operand of the call. When
the receiver is the only vector operand, the receiver's orientation is used.
Scalar results from vector operands only use magnitudes.
"""

from __future__ import annotations

from unitas import constants as C
from unitas.core.dimensions import (
    ACCELERATION,
    AREA,
    DENSITY,
    ENERGY,
    FIELD_STRENGTH,
    FORCE,
    FREQUENCY,
    MOMENTUM,
    POWER,
    PRESSURE,
    SPEED,
    VOLUME,
)
from unitas.core.quantity import ScalarQuantity, VectorQuantity, constant
from unitas.core.unit import ExtraUnit, Kind, QuantityMetadata
from unitas.core.utils import divide
from unitas.core.vectors import scale, shrink
from unitas.units.base import Length, Mass, Time

# Second-part prefixes are not generated; the common ones are listed explicitly.
# TODO: generate the full prefix cross product for two-part units once their
# identifier spellings (e.g. in_km_ms) are settled.
_SPEED_EXTRAS = (
    ExtraUnit("km_h", "kilometres_per_hour", C.KILOMETRE_PER_HOUR, unicode_symbol="km/h"),
    ExtraUnit("mph", "miles_per_hour", C.MILE_PER_HOUR),
    ExtraUnit("kn", "knots", C.KNOT),
)


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------
class Area(ScalarQuantity):
    META = QuantityMetadata(
        symbol="m2",
        unicode_symbol="m²",
        singular="metre",
        plural="metres",
        qualifier="square",
        kind=Kind.SCALAR,
        dim=AREA,
        power=2,
    )
    __slots__ = ()

    @classmethod
    def from_lengths(cls, a: Length, b: Length) -> Area:
        return cls(a.magnitude * b.magnitude)

    def calc_length(self, other: Length) -> Length:
        """The side that, with ``other``, spans this area."""
        return Length(divide(self._m, other.magnitude))


class Volume(ScalarQuantity):
    META = QuantityMetadata(
        symbol="m3",
        unicode_symbol="m³",
        singular="metre",
        plural="metres",
        qualifier="cubic",
        kind=Kind.SCALAR,
        dim=VOLUME,
        power=3,
        extras=(ExtraUnit("l", "litres", C.LITRE, unicode_symbol="L"),),
    )
    __slots__ = ()

    LITRE = constant(C.LITRE)

    @classmethod
    def from_area_length(cls, area: Area, length: Length) -> Volume:
        return cls(area.magnitude * length.magnitude)

    @classmethod
    def from_length_area(cls, length: Length, area: Area) -> Volume:
        return cls.from_area_length(area, length)

    def calc_area(self, length: Length) -> Area:
        return Area(divide(self._m, length.magnitude))

    def calc_length(self, area: Area) -> Length:
        return Length(divide(self._m, area.magnitude))


class Density(ScalarQuantity):
    META = QuantityMetadata(
        symbol="g_m3",
        unicode_symbol="g/m³",
        singular="gram per cubic metre",
        plural="grams per cubic metre",
        kind=Kind.SCALAR,
        dim=DENSITY,
        base_shift=3,
        extras=(
            ExtraUnit("g_cm3", "grams_per_cubic_centimetre", 1_000.0, unicode_symbol="g/cm³"),
        ),
    )
    __slots__ = ()

    # ρ = m / V
    @classmethod
    def from_mass_volume(cls, mass: Mass, volume: Volume) -> Density:
        return cls(divide(mass.magnitude, volume.magnitude))

    @classmethod
    def from_volume_mass(cls, volume: Volume, mass: Mass) -> Density:
        return cls.from_mass_volume(mass, volume)

    def calc_mass(self, volume: Volume) -> Mass:
        return Mass(self._m * volume.magnitude)

    def calc_volume(self, mass: Mass) -> Volume:
        return Volume(divide(mass.magnitude, self._m))


# ---------------------------------------------------------------------------
# Kinematics
# ---------------------------------------------------------------------------
class Speed(ScalarQuantity):
    META = QuantityMetadata(
        symbol="m_s",
        unicode_symbol="m/s",
        singular="metre per second",
        plural="metres per second",
        kind=Kind.SCALAR,
        dim=SPEED,
        extras=_SPEED_EXTRAS,
    )
    __slots__ = ()

    LIGHT = constant(C.SPEED_OF_LIGHT)
    SOUND = constant(C.SPEED_OF_SOUND)
    SOUND_IN_WATER = constant(C.SPEED_OF_SOUND_IN_WATER)
    STALACTITE_GROWTH = constant(C.SPEED_STALACTITE_GROWTH)
    HUMAN_HAIR_GROWTH = constant(C.SPEED_HUMAN_HAIR_GROWTH)
    RUNNING = constant(C.SPEED_RUNNING)
    HUMAN_FREE_FALL_MAX = constant(C.SPEED_HUMAN_FREE_FALL_MAX)
    ESCAPE_VELOCITY_MOON = constant(C.ESCAPE_VELOCITY_MOON)
    ESCAPE_VELOCITY_EARTH = constant(C.ESCAPE_VELOCITY_EARTH)
    EARTH_ORBIT = constant(C.SPEED_EARTH_ORBIT)
    SOLAR_SYSTEM_ORBIT = constant(C.SPEED_SOLAR_SYSTEM_ORBIT)
    FIBER_OPTIC_SIGNAL = constant(C.SPEED_FIBER_OPTIC_SIGNAL)

    # v = d / t
    @classmethod
    def from_distance_time(cls, distance: Length, time: Time) -> Speed:
        return cls(divide(distance.magnitude, time.magnitude))

    @classmethod
    def from_time_distance(cls, time: Time, distance: Length) -> Speed:
        return cls.from_distance_time(distance, time)

    def calc_distance(self, time: Time) -> Length:
        return Length(self._m * time.magnitude)

    def calc_time(self, distance: Length) -> Time:
        return Time(divide(distance.magnitude, self._m))


class Velocity(VectorQuantity):
    META = QuantityMetadata(
        symbol="m_s",
        unicode_symbol="m/s",
        singular="metre per second",
        plural="metres per second",
        kind=Kind.VECTOR,
        dim=SPEED,
        extras=_SPEED_EXTRAS,
    )
    __slots__ = ()

    def speed(self) -> Speed:
        return Speed(self.magnitude)


class Acceleration(VectorQuantity):
    META = QuantityMetadata(
        symbol="m_s2",
        unicode_symbol="m/s²",
        singular="metre per second squared",
        plural="metres per second squared",
        kind=Kind.VECTOR,
        dim=ACCELERATION,
    )
    __slots__ = ()

    # a = v / t
    @classmethod
    def from_velocity_time(cls, velocity: Velocity, time: Time) -> Acceleration:
        return cls(shrink(velocity.direction, time.magnitude))

    @classmethod
    def from_time_velocity(cls, time: Time, velocity: Velocity) -> Acceleration:
        return cls.from_velocity_time(velocity, time)

    # a = (v₁ − v₀) / t
    @classmethod
    def from_velocities_time(
        cls, initial: Velocity, final: Velocity, time: Time
    ) -> Acceleration:
        return cls(shrink(final.direction - initial.direction, time.magnitude))

    @classmethod
    def from_time_velocities(
        cls, time: Time, initial: Velocity, final: Velocity
    ) -> Acceleration:
        return cls.from_velocities_time(initial, final, time)

    # a = F / m
    @classmethod
    def from_mass_force(cls, mass: Mass, force: Force) -> Acceleration:
        return cls(shrink(force.direction, mass.magnitude))

    @classmethod
    def from_force_mass(cls, force: Force, mass: Mass) -> Acceleration:
        return cls.from_mass_force(mass, force)

    def calc_mass(self, force: Force) -> Mass:
        return Mass(divide(force.magnitude, self.magnitude))

    def calc_force(self, mass: Mass) -> Force:
        return Force(scale(self._d, mass.magnitude))


# ---------------------------------------------------------------------------
# Dynamics
# ---------------------------------------------------------------------------
class Force(VectorQuantity):
    META = QuantityMetadata(
        symbol="N",
        unicode_symbol="N",
        singular="newton",
        plural="newtons",
        kind=Kind.VECTOR,
        dim=FORCE,
    )
    __slots__ = ()

    # F = m · a
    @classmethod
    def from_mass_acceleration(cls, mass: Mass, acceleration: Acceleration) -> Force:
        return cls(scale(acceleration.direction, mass.magnitude))

    @classmethod
    def from_acceleration_mass(cls, acceleration: Acceleration, mass: Mass) -> Force:
        return cls.from_mass_acceleration(mass, acceleration)

    def calc_mass(self, acceleration: Acceleration) -> Mass:
        return Mass(divide(self.magnitude, acceleration.magnitude))

    def calc_acceleration(self, mass: Mass) -> Acceleration:
        return Acceleration(shrink(self._d, mass.magnitude))

    # F = M / d
    @classmethod
    def from_moment_distance(cls, moment: Moment, distance: Length) -> Force:
        return cls(shrink(moment.direction, distance.magnitude))

    @classmethod
    def from_distance_moment(cls, distance: Length, moment: Moment) -> Force:
        return cls.from_moment_distance(moment, distance)

    def calc_moment(self, distance: Length) -> Moment:
        return Moment(scale(self._d, distance.magnitude))

    def calc_distance(self, moment: Moment) -> Length:
        return Length(divide(moment.magnitude, self.magnitude))

    # W = m · g
    @classmethod
    def from_mass_gfs(cls, mass: Mass, gfs: GravitationalFieldStrength) -> Force:
        return cls(scale(gfs.direction, mass.magnitude))

    @classmethod
    def from_gfs_mass(cls, gfs: GravitationalFieldStrength, mass: Mass) -> Force:
        return cls.from_mass_gfs(mass, gfs)

    def calc_mass_from_gfs(self, gfs: GravitationalFieldStrength) -> Mass:
        return Mass(divide(self.magnitude, gfs.magnitude))

    def calc_gfs(self, mass: Mass) -> GravitationalFieldStrength:
        return GravitationalFieldStrength(shrink(self._d, mass.magnitude))

    def calc_pressure(self, area: Area) -> Pressure:
        return Pressure.from_force_area(self, area)


Weight = Force


class Moment(VectorQuantity):
    META = QuantityMetadata(
        symbol="N_m",
        unicode_symbol="N·m",
        singular="newton metre",
        plural="newton metres",
        kind=Kind.VECTOR,
        dim=ENERGY,
    )
    __slots__ = ()

    # M = F · d
    @classmethod
    def from_force_distance(cls, force: Force, distance: Length) -> Moment:
        return cls(scale(force.direction, distance.magnitude))

    @classmethod
    def from_distance_force(cls, distance: Length, force: Force) -> Moment:
        return cls.from_force_distance(force, distance)

    def calc_distance(self, force: Force) -> Length:
        return Length(divide(self.magnitude, force.magnitude))

    def calc_force(self, distance: Length) -> Force:
        return Force(shrink(self._d, distance.magnitude))


Torque = Moment


class Momentum(VectorQuantity):
    META = QuantityMetadata(
        symbol="g_m_s",
        unicode_symbol="g·m/s",
        singular="gram metre per second",
        plural="gram metres per second",
        kind=Kind.VECTOR,
        dim=MOMENTUM,
        base_shift=3,
    )
    __slots__ = ()

    # p = m · v
    @classmethod
    def from_mass_velocity(cls, mass: Mass, velocity: Velocity) -> Momentum:
        return cls(scale(velocity.direction, mass.magnitude))

    @classmethod
    def from_velocity_mass(cls, velocity: Velocity, mass: Mass) -> Momentum:
        return cls.from_mass_velocity(mass, velocity)

    def calc_mass(self, velocity: Velocity) -> Mass:
        return Mass(divide(self.magnitude, velocity.magnitude))

    def calc_velocity(self, mass: Mass) -> Velocity:
        return Velocity(shrink(self._d, mass.magnitude))


def _downward(g: float) -> tuple[float, float, float]:
    return (0.0, -g, 0.0)


class GravitationalFieldStrength(VectorQuantity):
    """Gravitational field strength; surface values point down the y axis."""

    META = QuantityMetadata(
        symbol="N_kg",
        unicode_symbol="N/kg",
        singular="newton per kilogram",
        plural="newtons per kilogram",
        kind=Kind.VECTOR,
        dim=FIELD_STRENGTH,
    )
    __slots__ = ()

    MERCURY = constant(_downward(C.GFS_MERCURY))
    VENUS = constant(_downward(C.GFS_VENUS))
    EARTH = constant(_downward(C.GFS_EARTH))
    MARS = constant(_downward(C.GFS_MARS))
    JUPITER = constant(_downward(C.GFS_JUPITER))
    SATURN = constant(_downward(C.GFS_SATURN))
    URANUS = constant(_downward(C.GFS_URANUS))
    NEPTUNE = constant(_downward(C.GFS_NEPTUNE))
    MOON = constant(_downward(C.GFS_MOON))
    PLUTO = constant(_downward(C.GFS_PLUTO))
    CERES = constant(_downward(C.GFS_CERES))
    SUN = constant(_downward(C.GFS_SUN))

    # g = W / m
    @classmethod
    def from_weight_mass(cls, weight: Force, mass: Mass) -> GravitationalFieldStrength:
        return cls(shrink(weight.direction, mass.magnitude))

    def calc_weight(self, mass: Mass) -> Force:
        return Force(scale(self._d, mass.magnitude))


Gfs = GravitationalFieldStrength


class Pressure(ScalarQuantity):
    META = QuantityMetadata(
        symbol="Pa",
        unicode_symbol="Pa",
        singular="pascal",
        plural="pascals",
        kind=Kind.SCALAR,
        dim=PRESSURE,
    )
    __slots__ = ()

    # p = |F| / A
    @classmethod
    def from_force_area(cls, force: Force, area: Area) -> Pressure:
        return cls(divide(force.magnitude, area.magnitude))

    def calc_area(self, force: Force) -> Area:
        return Area(divide(force.magnitude, self._m))


# ---------------------------------------------------------------------------
# Energy
# ---------------------------------------------------------------------------
class Energy(ScalarQuantity):
    META = QuantityMetadata(
        symbol="J",
        unicode_symbol="J",
        singular="joule",
        plural="joules",
        kind=Kind.SCALAR,
        dim=ENERGY,
    )
    __slots__ = ()

    # W = |F| · d
    @classmethod
    def from_force_distance(cls, force: Force, distance: Length) -> Energy:
        return cls(force.magnitude * distance.magnitude)

    from_force_length = from_force_distance

    @classmethod
    def from_distance_force(cls, distance: Length, force: Force) -> Energy:
        return cls.from_force_distance(force, distance)

    # E = P · t
    @classmethod
    def from_power_time(cls, power: Power, time: Time) -> Energy:
        return cls(power.magnitude * time.magnitude)

    @classmethod
    def from_time_power(cls, time: Time, power: Power) -> Energy:
        return cls.from_power_time(power, time)

    def calc_power(self, time: Time) -> Power:
        return Power(divide(self._m, time.magnitude))

    def calc_time(self, power: Power) -> Time:
        return Time(divide(self._m, power.magnitude))

    # E = m · c²
    @classmethod
    def from_mass(cls, mass: Mass) -> Energy:
        return cls(mass.magnitude * C.SPEED_OF_LIGHT_SQUARED)

    def calc_mass(self) -> Mass:
        return Mass.from_energy(self)


Work = Energy


class Power(ScalarQuantity):
    META = QuantityMetadata(
        symbol="W",
        unicode_symbol="W",
        singular="watt",
        plural="watts",
        kind=Kind.SCALAR,
        dim=POWER,
    )
    __slots__ = ()

    # P = E / t
    @classmethod
    def from_energy_time(cls, energy: Energy, time: Time) -> Power:
        return cls(divide(energy.magnitude, time.magnitude))

    @classmethod
    def from_time_energy(cls, time: Time, energy: Energy) -> Power:
        return cls.from_energy_time(energy, time)

    def calc_energy(self, time: Time) -> Energy:
        return Energy(self._m * time.magnitude)

    def calc_time(self, energy: Energy) -> Time:
        return Time(divide(energy.magnitude, self._m))


class Frequency(ScalarQuantity):
    META = QuantityMetadata(
        symbol="Hz",
        unicode_symbol="Hz",
        singular="hertz",
        plural="hertz",
        kind=Kind.SCALAR,
        dim=FREQUENCY,
    )
    __slots__ = ()

    # f = 1 / T
    @classmethod
    def from_period(cls, period: Time) -> Frequency:
        return cls(divide(1.0, period.magnitude))

    def calc_period(self) -> Time:
        return Time(divide(1.0, self._m))


__all__ = [
    "Area",
    "Volume",
    "Density",
    "Speed",
    "Velocity",
    "Acceleration",
    "Force",
    "Weight",
    "Moment",
    "Torque",
    "Momentum",
    "GravitationalFieldStrength",
    "Gfs",
    "Pressure",
    "Energy",
    "Work",
    "Power",
    "Frequency",
]
