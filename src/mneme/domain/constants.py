"""Centralized constants for the mneme scheduler.

All magic numbers live here so every layer imports from a single source of truth.
"""

# ---------- Forgetting curve ----------
RETRIEVABILITY_TARGET = 0.9  # Stability is the time to decay to this recall probability
DECAY = -1.0

# ---------- Memory state bounds ----------
S_MIN = 0.1  # Minimum stability after any review (days)
D_MIN = 1.0
D_MAX = 10.0
MIN_INTERVAL_DAYS = 1

# ---------- New card defaults ----------
NEW_CARD_STABILITY = 0.0  # Sentinel: never reviewed
NEW_CARD_DIFFICULTY = 5.0

# ---------- Weights ----------
WEIGHT_COUNT = 17
DEFAULT_WEIGHTS_VERSION = "fsrs-4.5"
