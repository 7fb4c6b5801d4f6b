# config/settings/test.py
"""
Test environment settings.

This file is used exclusively for running tests.
"""

from .base import *

# Force test environment; the service container reads it from os.environ
ENVIRONMENT = "test"
os.environ["ENVIRONMENT"] = ENVIRONMENT

# Load .env.test explicitly
from dotenv import load_dotenv

env_test_path = BASE_DIR / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=False)

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "subscriptions-test",
    }
}

# Tests assert on the English wording and corrected status codes
SUBSCRIPTION_MESSAGE_LOCALE = "en"
SUBSCRIPTION_STRICT_STATUS = True
