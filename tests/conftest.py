"""
Shared test setup.

Settings are read once at import time, so test-friendly values must be in the
environment before any app module is imported: a low bcrypt cost keeps signup
fast, and a fixed secret lets tests mint tokens with the app's own key.
"""

import os

os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret-with-enough-length-for-hs256-0123456789")
os.environ.setdefault("LOG_LEVEL", "WARNING")
