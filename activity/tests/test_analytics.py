from __future__ import annotations

from datetime import datetime, timedelta, timezone as dt_timezone

import pytest
from django.test import override_settings

from activity.analytics import RECENT_STREAK_DAYS, summarise, user_analytics
from activity.models import StudySession
from assessments.models import Assessment, AssessmentAttempt

NOW = datetime(2024, 5, 15, 12, 0, tzinfo=dt_timezone.utc)


def test_empty_rollup_is_all_zero():
    assert summarise([], [], NOW) == {
        "studyStreak": 0,
        "totalStudyTime": 0,
        "avgScore": 0,
        "bestScore": 0,
        "sessionsThisMonth": 0,
        "learningVelocity": 0,
    }


def test_rollup_of_sessions_and_scores():
    sessions = [(60, NOW - timedelta(hours=1)), (60, NOW - timedelta(days=3))]
    result = summarise(sessions, [80, 90, 70], NOW)
    assert result["totalStudyTime"] == 120
    assert result["avgScore"] == 80
    assert result["bestScore"] == 90
    assert result["learningVelocity"] == 2.0
    assert result["studyStreak"] == RECENT_STREAK_DAYS
    assert result["sessionsThisMonth"] == 2


def test_streak_is_zero_without_a_session_in_last_day():
    sessions = [(30, NOW - timedelta(hours=25))]
    assert summarise(sessions, [], NOW)["studyStreak"] == 0


def test_sessions_from_previous_month_are_not_counted():
    sessions = [(30, datetime(2024, 4, 30, 23, 59, tzinfo=dt_timezone.utc)), (30, NOW)]
    assert summarise(sessions, [], NOW)["sessionsThisMonth"] == 1


def test_month_boundary_uses_project_time_zone():
    # 23:30 UTC on 31 May is already June in Lagos (UTC+1)
    now = datetime(2024, 6, 1, 10, 0, tzinfo=dt_timezone.utc)
    late_may = datetime(2024, 5, 31, 23, 30, tzinfo=dt_timezone.utc)
    with override_settings(TIME_ZONE="UTC"):
        assert summarise([(10, late_may)], [], now)["sessionsThisMonth"] == 0
    with override_settings(TIME_ZONE="Africa/Lagos"):
        assert summarise([(10, late_may)], [], now)["sessionsThisMonth"] == 1


def test_average_and_velocity_round_half_up():
    result = summarise([(15, NOW)], [70, 75], NOW)
    # mean 72.5 -> 73; 15 minutes = 0.25 h -> 0.3
    assert result["avgScore"] == 73
    assert result["learningVelocity"] == 0.3


@pytest.mark.django_db
def test_user_analytics_reads_only_the_users_rows(make_user):
    u = make_user("me")
    other = make_user("other")
    a = Assessment.objects.create(created_by=u, title="A", type="quiz", questions=[])
    StudySession.objects.create(user=u, duration=90)
    StudySession.objects.create(user=other, duration=500)
    AssessmentAttempt.objects.create(assessment=a, user=u, answers=[], score=0, percentage=50)
    AssessmentAttempt.objects.create(assessment=a, user=other, answers=[], score=0, percentage=100)

    result = user_analytics(u)
    assert result["totalStudyTime"] == 90
    assert result["bestScore"] == 50
    assert result["learningVelocity"] == 1.5
    assert result["sessionsThisMonth"] == 1
