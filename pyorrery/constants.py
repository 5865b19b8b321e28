# pyorrery/constants.py

"""
Central repository for all astronomical constants and parameters
for the Terrax system simulation.
"""

# --- Physical Constants ---
AU_KM = 1.495978707e8  # Astronomical Unit (km)
EARTH_DAY_HOURS = 24.0  # Hours in one Earth day

# --- Host Star (G0.7V) ---
STAR_MASS = 2.06856e30  # kg
STAR_RADIUS_KM = 712083.0
STAR_TEMPERATURE_K = 5940.0
STAR_LUMINOSITY = 1.170  # relative to Sol
STAR_AGE_GYR = 4.3

# --- Terrax Planet Parameters ---
PLANET_RADIUS_KM = 7016.80
PLANET_MASS = 8.53996e24  # kg
PLANET_ALBEDO = 0.30  # Earth-like average
PLANET_A_AU = 1.34  # Semi-major axis of the planet's orbit
PLANET_ROTATION_HOURS = 26.0  # Length of one local day
PLANET_YEAR_LOCAL_DAYS = 512.833  # Orbital period in local days
PLANET_AXIAL_TILT = 25.0  # Axial tilt in degrees
PLANET_GRAVITY_G = 1.179
PLANET_PRESSURE_ATM = 1.36
PLANET_ECCENTRICITY = 0.0167  # Used by the solar geometry model
PLANET_PERIAPSIS_LONGITUDE = 283.0  # degrees, solar geometry model

# --- Calendar ---
CALENDAR_MONTHS = 13
SHORT_MONTH_DAYS = 39
LONG_MONTH_DAYS = 40
LONG_MONTHS = (4, 8, 13)  # 1-based month ids
REMAINDER_DAYS = 3  # Normal year
LEAP_REMAINDER_DAYS = 2  # Leap year
LEAP_YEAR_INTERVAL = 6  # Every sixth year is a leap year
DAYS_PER_YEAR = 513
DAYS_PER_LEAP_YEAR = 512

# --- Moons ---
LUNA_A_KM = 556200.0
LUNA_PERIOD_DAYS = 39.213  # Synodic
LUNA_ECCENTRICITY = 0.055
LUNA_PERIAPSIS_ARG = -45.0  # degrees

# Semi-major axis follows Kepler's 3rd law relative to Luna:
# (72.79/39.213)^2 = (a/556200)^3 => a ~ 839,800 km
ECHO_A_KM = 839800.0
ECHO_PERIOD_DAYS = 72.79  # Synodic
ECHO_ECCENTRICITY = 0.12
ECHO_PERIAPSIS_ARG = 135.0  # degrees

# --- Tides & resonance ---
TIDE_WEIGHTS = (0.83, 0.17)  # Luna, Echo relative tidal dominance
RESONANCE_CYCLE_DAYS = 85.0  # Luna/Echo alignment window

# --- Observation ---
ALIGNMENT_THRESHOLD_RAD = 0.2  # Conjunction/opposition window

# --- Moon phase ---
SUN_REFERENCE_ANGLE = 1.5707963267948966  # pi/2, fixed sun direction
