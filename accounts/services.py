"""Profile updates from the onboarding flow."""
from __future__ import annotations

from typing import Any

from django.db import transaction

from activity.models import UserActivity
from activity.services import log_activity

from .models import UserProfile


@transaction.atomic
def upsert_profile(user, changes: dict[str, Any]) -> UserProfile:
    """Create the caller's profile if missing, apply `changes`, log it."""
    profile, _ = UserProfile.objects.get_or_create(user=user)
    for field, value in changes.items():
        setattr(profile, field, value)
    profile.save()
    log_activity(
        user,
        UserActivity.TYPE_PROFILE_UPDATE,
        "Updated profile information",
        {"completedOnboarding": profile.completed_onboarding},
    )
    return profile
