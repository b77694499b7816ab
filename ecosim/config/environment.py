"""Environmental parameter domains, defaults and scoring baselines."""

# (minimum, maximum, slider step) for each environmental parameter
PARAMETER_RANGES = {
    "co2_levels": (350.0, 500.0, 5.0),
    "forest_cover": (0.0, 100.0, 1.0),
    "temperature": (-2.0, 5.0, 0.1),
    "renewable_energy": (0.0, 100.0, 1.0),
    "population": (0.0, 100.0, 1.0),
    "industry_level": (0.0, 100.0, 1.0),
}

# Starting point of every new session
DEFAULT_CO2_LEVELS = 410.0
DEFAULT_FOREST_COVER = 65.0
DEFAULT_TEMPERATURE = 1.2
DEFAULT_RENEWABLE_ENERGY = 25.0
DEFAULT_POPULATION = 50.0
DEFAULT_INDUSTRY_LEVEL = 60.0

# Metrics formula constants
SPECIES_COUNT_BASE = 1500
SPECIES_COUNT_FLOOR = 100
AIR_QUALITY_POOR_THRESHOLD = 450
AIR_QUALITY_MODERATE_THRESHOLD = 420
AIR_QUALITY_GOOD_THRESHOLD = 380
RENEWABLE_CO2_OFFSET = 2

# Static placeholder shown before the first computation
INITIAL_SPECIES_COUNT = 1247
INITIAL_AIR_QUALITY = "Good"
INITIAL_CARBON_STORAGE = 2.3
INITIAL_BIODIVERSITY_INDEX = 75
INITIAL_SUSTAINABILITY_SCORE = 68

# Baselines used to report session deltas
BASELINE_CO2 = 410.0
BASELINE_TEMPERATURE = 1.2
BASELINE_BIODIVERSITY = 75

# Session rewards
MIN_SESSION_XP = 50
MIN_SESSION_CREDITS = 10
ECONOMIC_VALUE_PER_POINT = 1000
MIN_ACTION_XP = 25
MIN_ACTION_CREDITS = 5
ACTION_XP_PER_IMPACT = 5
ACTION_CREDITS_PER_IMPACT = 2
