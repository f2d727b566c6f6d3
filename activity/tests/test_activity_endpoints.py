from __future__ import annotations

from unittest import mock

import pytest
from django.db import DatabaseError
from rest_framework.test import APIClient

from activity.models import StudySession, UserActivity
from activity.services import log_activity, log_activity_quietly
from courses.models import Course


@pytest.mark.django_db
def test_log_study_session_appends_activity(make_user, client_for):
    u = make_user()
    course = Course.objects.create(name="Biology")
    r = client_for(u).post(
        "/api/v1/study-sessions/",
        {"duration": 45, "course": course.id, "activities_completed": ["read chapter 2"]},
        format="json",
    )
    assert r.status_code == 201
    session = StudySession.objects.get(user=u)
    assert session.duration == 45
    assert session.activities_completed == ["read chapter 2"]

    entry = UserActivity.objects.get(user=u)
    assert entry.activity_type == UserActivity.TYPE_STUDY_SESSION
    assert entry.description == "Studied for 45 minutes"


@pytest.mark.django_db
def test_study_session_duration_must_be_positive(make_user, client_for):
    r = client_for(make_user()).post("/api/v1/study-sessions/", {"duration": 0}, format="json")
    assert r.status_code == 400
    assert StudySession.objects.count() == 0


@pytest.mark.django_db
def test_study_sessions_are_scoped_to_caller(make_user, client_for):
    me = make_user("me")
    StudySession.objects.create(user=me, duration=10)
    StudySession.objects.create(user=make_user("other"), duration=20)
    rows = client_for(me).get("/api/v1/study-sessions/").json()["results"]
    assert [row["duration"] for row in rows] == [10]


@pytest.mark.django_db
def test_activity_feed_limit_default_and_cap(make_user, client_for):
    u = make_user()
    for i in range(30):
        log_activity(u, UserActivity.TYPE_STUDY_SESSION, f"entry {i}")
    c = client_for(u)

    body = c.get("/api/v1/activities/").json()
    assert body["count"] == 20
    assert body["results"][0]["description"] == "entry 29"

    assert c.get("/api/v1/activities/?limit=5").json()["count"] == 5
    assert c.get("/api/v1/activities/?limit=500").json()["count"] == 30
    assert c.get("/api/v1/activities/?limit=abc").json()["count"] == 20


@pytest.mark.django_db
def test_activity_feed_never_shows_other_users(make_user, client_for):
    me = make_user("me")
    log_activity(make_user("other"), UserActivity.TYPE_PROFILE_UPDATE, "not mine")
    assert client_for(me).get("/api/v1/activities/").json() == {"count": 0, "results": []}


@pytest.mark.django_db
def test_log_activity_quietly_swallows_store_errors(make_user):
    u = make_user()
    with mock.patch("activity.services.UserActivity.objects.create", side_effect=DatabaseError("boom")), \
            mock.patch("activity.services.logger") as logger:
        assert log_activity_quietly(u, UserActivity.TYPE_AI_GENERATION, "x") is None
    logger.exception.assert_called_once()


@pytest.mark.django_db
def test_analytics_endpoint_shape(make_user, client_for):
    u = make_user()
    StudySession.objects.create(user=u, duration=120)
    body = client_for(u).get("/api/v1/analytics/").json()
    assert body["totalStudyTime"] == 120
    assert body["learningVelocity"] == 2.0
    assert body["studyStreak"] == 7
    assert set(body) == {
        "studyStreak", "totalStudyTime", "avgScore", "bestScore", "sessionsThisMonth", "learningVelocity",
    }


@pytest.mark.security
@pytest.mark.django_db
def test_anonymous_callers_are_rejected():
    c = APIClient()
    assert c.get("/api/v1/analytics/").status_code == 403
    assert c.get("/api/v1/activities/").status_code == 403
    assert c.post("/api/v1/study-sessions/", {"duration": 5}, format="json").status_code == 403
