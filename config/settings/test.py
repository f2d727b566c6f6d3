"""Test settings for Studyhub.

In-memory database, fast password hashing, throttling off, and uploads
written to a throwaway directory.
"""
from .base import *  # noqa
import tempfile


DEBUG = False
SECRET_KEY = "test-insecure-key"
ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

MEDIA_ROOT = tempfile.mkdtemp(prefix="studyhub-media-")

REST_FRAMEWORK = {
    **REST_FRAMEWORK,  # noqa: F405
    "DEFAULT_THROTTLE_CLASSES": [],
}

STUDYHUB = {
    **STUDYHUB,  # noqa: F405
    "GENERATOR_BACKEND": "studyaids.generators.UnconfiguredGenerator",
}
