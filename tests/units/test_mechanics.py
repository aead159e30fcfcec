# tests/units/test_mechanics.py
import math

import pytest

from unitas import constants as C
from unitas.units import (
    Acceleration, Area, Density, Distance, Energy, Force, Frequency, Gfs,
    GravitationalFieldStrength, Length, Mass, Moment, Momentum, Power,
    Pressure, Speed, Time, Torque, Velocity, Volume, Weight, Work,
)


# -------------------------------
# Power / compound conversions
# -------------------------------

def test_area_power_two():
    assert Area.in_km2(1.0).as_m2() == 1e6
    assert Area.in_cm2(1).as_m2() == pytest.approx(1e-4)
    assert Area.in_square_kilometres(2).as_square_metres() == 2e6

def test_volume_power_three():
    assert Volume.in_km3(1.0).as_m3() == 1e9
    assert Volume.in_cm3(1).as_m3() == pytest.approx(1e-6)
    assert Volume.in_cubic_decimetres(1).as_l() == pytest.approx(1.0)

def test_litres():
    assert Volume.in_l(1).as_m3() == pytest.approx(1e-3)
    assert Volume.in_L(1) == Volume.in_litres(1)
    assert Volume.LITRE == Volume.in_l(1)

def test_compound_units_prefix_first_part_only():
    assert Speed.in_km_s(1).as_m_s() == 1000.0
    assert Speed.in_kilometres_per_second(1) == Speed.in_km_s(1)
    assert Acceleration.in_km_s2(1).as_m_s2()[0] == 1000.0
    assert Moment.in_kN_m(1).as_N_m()[0] == 1000.0
    assert Moment.in_kilonewton_metres(1) == Moment.in_kN_m(1)
    assert GravitationalFieldStrength.in_kN_kg(1).magnitude == 1000.0

def test_explicit_second_part_units():
    assert Speed.in_km_h(36).as_m_s() == pytest.approx(10.0)
    assert Speed.in_m_s(10).as_kilometres_per_hour() == pytest.approx(36.0)
    assert Velocity.in_km_h((36, 0, 0)).magnitude == pytest.approx(10.0)
    assert Density.in_g_cm3(1).as_kg_m3() == pytest.approx(1000.0)
    assert Speed.in_mph(1).as_m_s() == C.MILE_PER_HOUR
    assert Speed.in_knots(1).as_m_s() == C.KNOT

def test_base_shift_in_compound_units():
    assert Density.in_g_m3(1000).as_kg_m3() == 1.0
    assert Momentum.in_g_m_s(1000).magnitude == 1.0
    assert Momentum.in_kg_m_s((3, 4, 0)).as_g_m_s()[0] == 5000.0

# -------------------------------
# Force: F = m·a
# -------------------------------

def test_force_from_mass_acceleration():
    m, a = Mass.in_kg(5), Acceleration(2)
    f = Force.from_mass_acceleration(m, a)
    assert f.as_N()[0] == 10.0
    assert Force.from_acceleration_mass(a, m) == f
    assert f.calc_mass(a) == m
    assert f.calc_acceleration(m) == a

def test_force_takes_acceleration_direction():
    f = Force.from_mass_acceleration(Mass.in_kg(2), Acceleration((0, 3, 4)))
    assert f.direction.tolist() == [0.0, 6.0, 8.0]
    assert f.magnitude == 10.0

def test_acceleration_from_mass_force():
    a = Acceleration.from_mass_force(Mass.in_kg(2), Force((0, 0, 10)))
    assert a.direction.tolist() == [0.0, 0.0, 5.0]
    assert Acceleration.from_force_mass(Force((0, 0, 10)), Mass.in_kg(2)) == a
    assert a.calc_mass(Force((0, 0, 10))) == Mass.in_kg(2)
    assert a.calc_force(Mass.in_kg(2)) == Force((0, 0, 10))

# -------------------------------
# Moment: M = F·d
# -------------------------------

def test_moment_from_force_distance():
    f = Force((0, 10, 0))
    d = Length.in_cm(50)
    m = Moment.from_force_distance(f, d)
    assert m.direction.tolist() == [0.0, 5.0, 0.0]
    assert Moment.from_distance_force(d, f) == m
    assert m.calc_distance(f) == d
    assert m.calc_force(d) == f

def test_force_moment_inverses():
    m, f = Moment(6), Force(30)
    assert f.calc_distance(m).as_m() == pytest.approx(0.2)
    assert Force.from_moment_distance(m, Length.in_m(0.2)).magnitude == pytest.approx(30.0)
    assert Force.from_distance_moment(Length.in_m(0.2), m).magnitude == pytest.approx(30.0)
    assert f.calc_moment(Length.in_m(0.2)).magnitude == pytest.approx(6.0)

def test_torque_alias():
    assert Torque is Moment

# -------------------------------
# Weight: W = m·g
# -------------------------------

def test_weight_from_mass_gfs():
    w = Weight.from_mass_gfs(Mass.in_kg(2), Gfs.EARTH)
    assert w.direction.tolist() == pytest.approx([0.0, -19.6, 0.0])
    assert Weight.from_gfs_mass(Gfs.EARTH, Mass.in_kg(2)) == w
    assert w.calc_mass_from_gfs(Gfs.EARTH) == Mass.in_kg(2)
    assert w.calc_gfs(Mass.in_kg(2)) == Gfs.EARTH
    assert Weight is Force

def test_gfs_from_weight_mass():
    g = Gfs.from_weight_mass(Force((0, -49, 0)), Mass.in_kg(5))
    assert g == Gfs.EARTH
    assert g.calc_weight(Mass.in_kg(5)) == Force((0, -49, 0))

@pytest.mark.parametrize("name, value", [
    ("MERCURY", 3.8), ("VENUS", 8.8), ("EARTH", 9.8), ("MARS", 3.8),
    ("JUPITER", 25.0), ("SATURN", 10.4), ("URANUS", 10.4), ("NEPTUNE", 13.8),
    ("MOON", 1.6), ("PLUTO", 0.49), ("CERES", 0.27), ("SUN", 293.0),
])
def test_surface_gfs_points_down(name, value):
    g = getattr(GravitationalFieldStrength, name)
    assert g.magnitude == value
    assert g.direction.tolist() == [0.0, -value, 0.0]

# -------------------------------
# Speed: v = d/t
# -------------------------------

def test_speed_scenario():
    v = Speed.from_distance_time(Distance.in_m(300), Time.in_s(25))
    assert v.as_m_s() == 12.0
    assert Speed.from_time_distance(Time.in_s(25), Distance.in_m(300)) == v
    assert v.calc_distance(Time.in_s(25)).as_m() == pytest.approx(300.0)
    assert v.calc_time(Distance.in_m(300)).as_s() == pytest.approx(25.0)

def test_speed_constants():
    assert Speed.LIGHT.as_m_s() == 299_792_458.0
    assert Speed.SOUND.as_m_s() == 340.3
    assert Speed.ESCAPE_VELOCITY_EARTH.as_km_s() == pytest.approx(11.2)
    assert Speed.LIGHT is not Speed.LIGHT

def test_velocity_speed():
    assert Velocity((3, 4, 0)).speed() == Speed(5)

# -------------------------------
# Acceleration from velocities
# -------------------------------

def test_acceleration_from_velocity_time():
    a = Acceleration.from_velocity_time(Velocity((0, 20, 0)), Time.in_s(4))
    assert a.direction.tolist() == [0.0, 5.0, 0.0]
    assert Acceleration.from_time_velocity(Time.in_s(4), Velocity((0, 20, 0))) == a

def test_acceleration_from_velocity_difference():
    v0, v1 = Velocity((1, 0, 0)), Velocity((1, 4, 0))
    a = Acceleration.from_velocities_time(v0, v1, Time.in_s(2))
    assert a.direction.tolist() == [0.0, 2.0, 0.0]
    assert Acceleration.from_time_velocities(Time.in_s(2), v0, v1) == a

# -------------------------------
# Momentum: p = m·v
# -------------------------------

def test_momentum():
    m, v = Mass.in_kg(3), Velocity((0, 0, 2))
    p = Momentum.from_mass_velocity(m, v)
    assert p.direction.tolist() == [0.0, 0.0, 6.0]
    assert Momentum.from_velocity_mass(v, m) == p
    assert p.calc_mass(v) == m
    assert p.calc_velocity(m) == v

# -------------------------------
# Energy and power
# -------------------------------

def test_work_from_force_distance():
    w = Work.from_force_distance(Force((0, 3, 4)), Length.in_m(2))
    assert w.as_J() == 10.0
    assert Energy.from_force_length(Force(5), Length(2)) == w
    assert Energy.from_distance_force(Length(2), Force(5)) == w
    assert Work is Energy

def test_energy_from_power_time():
    e = Energy.from_power_time(Power.in_W(800), Time.in_min(3))
    assert e.as_kJ() == pytest.approx(144.0)
    assert Energy.from_time_power(Time.in_min(3), Power.in_W(800)) == e
    assert e.calc_power(Time.in_min(3)) == Power(800)
    assert e.calc_time(Power(800)) == Time.in_min(3)

def test_power_from_energy_time():
    p = Power.from_energy_time(Energy.in_kJ(144), Time.in_min(3))
    assert p.as_W() == pytest.approx(800.0)
    assert Power.from_time_energy(Time.in_min(3), Energy.in_kJ(144)) == p
    assert p.calc_energy(Time.in_min(3)) == Energy.in_kJ(144)
    assert p.calc_time(Energy.in_kJ(144)) == Time.in_min(3)

def test_energy_calc_mass():
    assert Energy(C.SPEED_OF_LIGHT_SQUARED).calc_mass() == Mass.in_kg(1)

# -------------------------------
# Geometry, density, pressure, frequency
# -------------------------------

def test_area_and_volume_formulas():
    a = Area.from_lengths(Length.in_m(3), Length.in_m(4))
    assert a.as_m2() == 12.0
    assert a.calc_length(Length.in_m(3)) == Length.in_m(4)
    v = Volume.from_area_length(a, Length.in_m(2))
    assert v.as_m3() == 24.0
    assert Volume.from_length_area(Length.in_m(2), a) == v
    assert v.calc_area(Length.in_m(2)) == a
    assert v.calc_length(a) == Length.in_m(2)

def test_density_formulas():
    rho = Density.from_mass_volume(Mass.in_kg(1000), Volume.in_m3(1))
    assert rho.as_g_cm3() == pytest.approx(1.0)
    assert Density.from_volume_mass(Volume.in_m3(1), Mass.in_kg(1000)) == rho
    assert rho.calc_mass(Volume.in_l(2)) == Mass.in_kg(2)
    assert rho.calc_volume(Mass.in_kg(3)) == Volume.in_l(3)

def test_pressure_formulas():
    p = Pressure.from_force_area(Force(100), Area.in_m2(4))
    assert p.as_Pa() == 25.0
    assert Force((0, 60, 80)).calc_pressure(Area.in_m2(4)) == p
    assert p.calc_area(Force(100)) == Area.in_m2(4)
    assert Pressure.in_kPa(101.325).as_Pa() == pytest.approx(101325.0)

def test_frequency_formulas():
    f = Frequency.from_period(Time.in_ms(20))
    assert f.as_Hz() == pytest.approx(50.0)
    assert f.calc_period() == Time.in_ms(20)
    assert Frequency.in_kilohertz(1).as_Hz() == 1000.0

# -------------------------------
# Totality
# -------------------------------

def test_division_by_zero_gives_inf_or_nan():
    assert Speed.from_distance_time(Length(1), Time(0)).magnitude == math.inf
    assert math.isnan(Speed(0).calc_time(Length(0)).magnitude)
    assert Force((1, 0, 0)).calc_acceleration(Mass(0)).direction[0] == math.inf
    assert all(math.isnan(c) for c in Force().calc_acceleration(Mass(0)).direction)
    assert Frequency(0).calc_period().magnitude == math.inf
    assert Pressure.from_force_area(Force(1), Area(0)).magnitude == math.inf
