"""
unitas.constants
================

Physical constants as plain floats in canonical units (SI, mass in kg).

The quantity classes expose the same values as class-level constants that
return quantity instances (``Speed.LIGHT``, ``Time.JULIAN_YEAR``, ...).
"""

# Electromagnetism and relativity
SPEED_OF_LIGHT = 299_792_458.0  # m/s
SPEED_OF_LIGHT_SQUARED = 89_875_517_873_681_764.0  # m²/s²
COULOMB_CONSTANT = 8_987_551_792.3  # N·m²/C²
ELEMENTARY_CHARGE = 1.602176634e-19  # C

# Particle masses, kg
ELECTRON_MASS = 9.1093837015e-31
PROTON_MASS = 1.67262192369e-27

# Time, s
MINUTE = 60.0
HOUR = 3_600.0
DAY = 86_400.0
WEEK = 604_800.0
YEAR = 31_536_000.0
JULIAN_YEAR = 31_557_600.0
FULL_MOON_CYCLE = 35_578_174.777056
DRACONIC_YEAR = 29_947_974.5562912
LUNAR_YEAR = 30_617_314.848

# Length, m
PLANCK_LENGTH = 1.616255e-35
WEAK_FORCE_RANGE = 1e-17
PROTON_RADIUS = 8.33e-16
ELECTRON_RADIUS = 2.8179403227e-15
ATOMIC_NUCLEUS_DIAMETER_MIN = 3e-15
ATOMIC_NUCLEUS_DIAMETER_MAX = 1.5e-14
XRAY_SHORTEST_WAVELENGTH = 5e-12
HELIUM_RADIUS = 2.8e-11
BOHR_RADIUS = 5.29177210903e-11
ANGSTROM = 1e-10
COVALENT_BOND_DIAMOND = 1.54e-10
ASTRONOMICAL_UNIT = 1.495978707e11

# Volume, m³
LITRE = 1e-3

# Speed, m/s
SPEED_STALACTITE_GROWTH = 4.12e-12
SPEED_HUMAN_HAIR_GROWTH = 4.8e-9
KILOMETRE_PER_HOUR = 1_000.0 / 3_600.0
MILE_PER_HOUR = 0.44704
KNOT = 0.5144
SPEED_RUNNING = 4.98
SPEED_HUMAN_FREE_FALL_MAX = 54.0
SPEED_OF_SOUND = 340.3
SPEED_OF_SOUND_IN_WATER = 1_500.0
ESCAPE_VELOCITY_MOON = 2_375.0
ESCAPE_VELOCITY_EARTH = 11_200.0
SPEED_EARTH_ORBIT = 29_800.0
SPEED_SOLAR_SYSTEM_ORBIT = 2e5
SPEED_FIBER_OPTIC_SIGNAL = 2e8

# Surface gravitational field strength, N/kg (= m/s²)
GFS_MERCURY = 3.8
GFS_VENUS = 8.8
GFS_EARTH = 9.8
GFS_MARS = 3.8
GFS_JUPITER = 25.0
GFS_SATURN = 10.4
GFS_URANUS = 10.4
GFS_NEPTUNE = 13.8
GFS_MOON = 1.6
GFS_PLUTO = 0.49
GFS_CERES = 0.27
GFS_SUN = 293.0
