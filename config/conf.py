"""Access to the project-level `STUDYHUB` settings dict."""
from __future__ import annotations

from typing import Any

from django.conf import settings


DEFAULTS: dict[str, Any] = {
    "GENERATOR_BACKEND": "studyaids.generators.UnconfiguredGenerator",
    "GENERATOR_MODEL": "gpt-5",
    "MAX_UPLOAD_BYTES": 20 * 1024 * 1024,
    "ACTIVITY_FEED_DEFAULT": 20,
    "ACTIVITY_FEED_MAX": 100,
}


def studyhub_setting(name: str) -> Any:
    """Return a `STUDYHUB` value, falling back to the built-in default.

    Read on every call so `override_settings(STUDYHUB=...)` applies in tests.
    """
    configured = getattr(settings, "STUDYHUB", {}) or {}
    if name in configured:
        return configured[name]
    if name in DEFAULTS:
        return DEFAULTS[name]
    raise KeyError(f"Unknown STUDYHUB setting: {name}")
