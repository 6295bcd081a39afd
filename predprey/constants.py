"""
Central configuration constants for the predator-prey simulation.

Defines default values and configuration parameters used across
multiple modules. Data pack values override these where present.
"""

# ============================================================================
# Organism Defaults
# ============================================================================

# Layer value for organisms whose species does not specify one
DEFAULT_LAYER = 1


# ============================================================================
# Field Configuration
# ============================================================================

DEFAULT_FIELD_DEPTH = 80
DEFAULT_FIELD_WIDTH = 120

# Moore neighborhood offsets (row, col), self excluded
NEIGHBOR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


# ============================================================================
# Population Configuration
# ============================================================================

# Per-cell creation probabilities used when the world file gives none
FOX_CREATION_PROBABILITY = 0.02
RABBIT_CREATION_PROBABILITY = 0.08


# ============================================================================
# Randomness
# ============================================================================

# Seed for the shared randomizer when neither CLI nor world file sets one
DEFAULT_SEED = 1111


# ============================================================================
# Performance / Reporting Configuration
# ============================================================================

# Tick timing window for rolling average
TICK_TIME_WINDOW = 100  # Number of ticks to average

# Default tick summary interval (print every N ticks)
TICK_SUMMARY_INTERVAL = 100
