"""Centralized constants for the WeekWise planner.

All magic numbers and configuration defaults live here so every layer
imports from a single source of truth.
"""

# ---------- Schedule ----------
WEEKDAY_FIRST_HOUR = 20
WEEKEND_FIRST_HOUR = 8
DAY_END_HOUR = 24  # exclusive
SLOT_ID_SEPARATOR = "__"

# ---------- Scoring ----------
POINTS = {"study": 2, "essential": 1, "nonessential": -1, "empty": 0}
MIN_SCORE = 0
MAX_SCORE = 100

# ---------- Persistence ----------
STORAGE_KEY = "WEEKWISE_SLOTS_V2"

# ---------- Presentation ----------
REFRESH_INTERVAL_SECONDS = 60
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8787
EMPTY_SLOT_PLACEHOLDER = "Tap to add"
UNTITLED_SLOT_PLACEHOLDER = "—"
