"""Writes to the activity log and study session log."""
from __future__ import annotations

import logging
from typing import Any

from django.db import DatabaseError, transaction

from .models import StudySession, UserActivity

logger = logging.getLogger(__name__)


def log_activity(user, activity_type: str, description: str, metadata: dict[str, Any] | None = None) -> UserActivity:
    return UserActivity.objects.create(
        user=user,
        activity_type=activity_type,
        description=description[:300],
        metadata=metadata or {},
    )


def log_activity_quietly(user, activity_type: str, description: str, metadata: dict[str, Any] | None = None) -> UserActivity | None:
    """Append an activity entry; a store failure is logged, never raised.

    The entry is written in its own savepoint so a failure cannot break
    an enclosing transaction that has already persisted the main write.
    """
    try:
        with transaction.atomic():
            return log_activity(user, activity_type, description, metadata)
    except DatabaseError:
        logger.exception("could not record %s activity for user %s", activity_type, getattr(user, "pk", None))
        return None


def record_study_session(user, *, duration: int, course=None, content=None, activities_completed=None) -> StudySession:
    """Persist a study session and add it to the activity feed."""
    session = StudySession.objects.create(
        user=user,
        course=course,
        content=content,
        duration=duration,
        activities_completed=list(activities_completed or []),
    )
    log_activity(
        user,
        UserActivity.TYPE_STUDY_SESSION,
        f"Studied for {duration} minutes",
        {"duration": duration, "courseId": getattr(course, "pk", None)},
    )
    logger.info("study session %s recorded for user %s (%s min)", session.pk, user.pk, duration)
    return session


def recent_activities(user, limit: int):
    return UserActivity.objects.filter(user=user).order_by("-created_at", "-id")[:limit]
