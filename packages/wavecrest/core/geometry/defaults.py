"""Default parameters for wave geometry generation.

This module contains global constants shared across the geometry engine.
These are defined separately to avoid circular imports.
"""

# Viewbox the generators draw into (px)
DEFAULT_VIEWBOX_WIDTH = 1440.0
DEFAULT_WAVE_HEIGHT = 120.0

DEFAULT_PATTERN_PARAMS = {
    "amplitude": 0.5,
    "frequency": 1.0,
    "phase": 0.0,
}

# Seed used when a seeded pattern is requested without one
DEFAULT_SEED = 42

# Valid ranges; values outside are clamped with a warning
AMPLITUDE_RANGE = (0.0, 1.0)
FREQUENCY_RANGE = (0.1, 20.0)

# Resolution of the sampler used by the interlock engine
DEFAULT_SAMPLE_COUNT = 20

# Serialized coordinates carry at most this many decimals
COORDINATE_PRECISION = 3

# RDP tolerance in px
DEFAULT_SIMPLIFY_EPSILON = 1.0

# Baseline y used when a region is inverted to sit above the drawing area
TOP_REGION_BASELINE = -50.0
# Extra depth added below the drawing area by extend_below_region
BELOW_REGION_OVERSCAN = 50.0
