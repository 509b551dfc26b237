"""
Test settings for the ledgerpoll project.
"""

from pathlib import Path

from .base import *  # noqa: F403, F401

# Use file-based database for tests in a reliable location
# pytest-django will automatically create tables and run migrations
BASE_DIR = Path(__file__).resolve().parent.parent.parent
TEST_DB = BASE_DIR / "test_db.sqlite3"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": str(TEST_DB),
        "OPTIONS": {
            "timeout": 20,
            # Writers queue on the busy timeout instead of failing a lock upgrade
            "transaction_mode": "IMMEDIATE",
        },
        # A file (not shared-cache memory) so concurrent test threads wait for locks
        "TEST": {
            "NAME": str(BASE_DIR / "test_db_pytest.sqlite3"),
        },
    }
}

# Password hashing for tests (faster)
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Disable security features for tests
SECURE_SSL_REDIRECT = False
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

# Disable logging during tests
LOGGING_CONFIG = None

# Override cache configuration for tests to use dummy backend
# This avoids Redis connection issues during tests
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.dummy.DummyCache",
    }
}

# Throttle tests re-enable this explicitly
DISABLE_RATE_LIMITING = True

LEDGER_PROGRAM_ID = "ledgerpoll.voting"
LEDGER_ENFORCE_POLL_WINDOW = False
