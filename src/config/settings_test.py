"""Settings used by the pytest-django test run.

Provides the values production requires explicitly, then reuses the
regular settings module unchanged.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")
os.environ.setdefault("SEED_ON_STARTUP", "False")

from config.settings import *  # noqa: E402,F401,F403
