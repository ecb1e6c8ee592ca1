"""Global configuration for primefield."""

import os

# ---------- Default modulus ----------
# Used by the demo walkthrough.  Primality is not checked.
DEFAULT_PRIME = int(os.environ.get("PRIMEFIELD_DEFAULT_PRIME", "13"))

# ---------- Logging ----------
LOG_LEVEL = os.environ.get("PRIMEFIELD_LOG_LEVEL", "WARNING").upper()
