"""Per-user analytics rollup.

The rollup is recomputed on every request from the user's study
sessions and assessment attempts; nothing is persisted.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Iterable

from django.utils import timezone

from assessments.grading import round_half_up
from assessments.models import AssessmentAttempt

from .models import StudySession

# Placeholder value reported while any session falls in the last 24 hours.
RECENT_STREAK_DAYS = 7


def summarise(
    sessions: Iterable[tuple[int, datetime]],
    percentages: Iterable[int],
    now: datetime,
) -> dict[str, Any]:
    """Fold `(duration, created_at)` pairs and attempt percentages into a rollup.

    - `sessionsThisMonth` compares calendar month and year in the
      current time zone
    - `studyStreak` is coarse: `RECENT_STREAK_DAYS` when any session is
      less than 24 hours old, else 0
    - `learningVelocity` is total study time in hours, one decimal
    """
    sessions = list(sessions)
    percentages = list(percentages)

    total_minutes = sum(int(duration) for duration, _ in sessions)
    avg_score = round_half_up(sum(percentages) / len(percentages)) if percentages else 0
    best_score = max(percentages) if percentages else 0

    local_now = timezone.localtime(now)
    since = now - timedelta(days=1)
    recent = [created for _, created in sessions if created >= since]
    this_month = 0
    for _, created in sessions:
        local = timezone.localtime(created)
        if local.year == local_now.year and local.month == local_now.month:
            this_month += 1

    return {
        "studyStreak": RECENT_STREAK_DAYS if recent else 0,
        "totalStudyTime": total_minutes,
        "avgScore": avg_score,
        "bestScore": best_score,
        "sessionsThisMonth": this_month,
        "learningVelocity": round_half_up(total_minutes / 60, 1) if total_minutes > 0 else 0,
    }


def user_analytics(user, now: datetime | None = None) -> dict[str, Any]:
    sessions = StudySession.objects.filter(user=user).values_list("duration", "created_at")
    percentages = AssessmentAttempt.objects.filter(user=user).values_list("percentage", flat=True)
    return summarise(sessions, percentages, now or timezone.now())
