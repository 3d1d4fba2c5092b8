# config/settings/test.py
from .base import *  # noqa

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

RESULTS_DEFAULT_PAGE_LIMIT = 5
RESULTS_INCLUDED_NARROWING = "union"

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
