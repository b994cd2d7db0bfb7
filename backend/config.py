"""Runtime configuration read from the environment."""

import os

# Percentage points an item's shares may deviate from 100 and still count as fully assigned
ASSIGNMENT_TOLERANCE = float(os.getenv("ASSIGNMENT_TOLERANCE", "0.01"))

# Allowed rounding drift, in major units, per participant when checking receipt invariants
SPLIT_DEVIATION_PER_PERSON = float(os.getenv("SPLIT_DEVIATION_PER_PERSON", "0.01"))

# Comma-separated list of allowed CORS origins
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Currency used for unknown codes and as the formatting default; unsupported values fall back to USD
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "USD")
