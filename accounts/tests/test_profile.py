from __future__ import annotations

import pytest
from django.contrib.auth.models import User
from rest_framework.test import APIClient

from accounts.models import Role, SubscriptionTier, UserProfile
from activity.models import UserActivity
from courses.models import Institution, Programme


@pytest.mark.django_db
def test_profile_created_with_defaults_on_user_creation():
    u = User.objects.create_user(username="fresh", password="pw")
    assert u.profile.role == Role.STUDENT
    assert u.profile.subscription_tier == SubscriptionTier.FREE
    assert u.profile.completed_onboarding is False
    assert u.profile.goals == []


@pytest.mark.django_db
def test_get_own_profile(make_user, client_for):
    u = make_user("reader")
    r = client_for(u).get("/api/v1/profile/")
    assert r.status_code == 200
    assert r.json()["user"] == {"id": u.id, "username": "reader"}


@pytest.mark.django_db
def test_onboarding_upsert_logs_profile_update(make_user, client_for):
    u = make_user()
    inst = Institution.objects.create(name="University of Nigeria", country="Nigeria")
    prog = Programme.objects.create(institution=inst, name="Pharmacy")
    payload = {
        "institution": inst.id,
        "programme": prog.id,
        "current_level": "Year 2",
        "goals": ["pass finals", "improve GPA"],
        "completed_onboarding": True,
    }
    r = client_for(u).post("/api/v1/profile/", payload, format="json")
    assert r.status_code == 200
    profile = UserProfile.objects.get(user=u)
    assert profile.programme == prog
    assert profile.goals == ["pass finals", "improve GPA"]
    assert profile.completed_onboarding is True

    entry = UserActivity.objects.get(user=u)
    assert entry.activity_type == UserActivity.TYPE_PROFILE_UPDATE
    assert entry.metadata == {"completedOnboarding": True}


@pytest.mark.django_db
def test_upsert_recreates_missing_profile(make_user, client_for):
    u = make_user()
    UserProfile.objects.filter(user=u).delete()
    r = client_for(u).post("/api/v1/profile/", {"current_level": "Graduate"}, format="json")
    assert r.status_code == 200
    assert UserProfile.objects.get(user=u).current_level == "Graduate"


@pytest.mark.django_db
def test_role_and_tier_are_not_client_writable(make_user, client_for):
    u = make_user()
    client_for(u).post("/api/v1/profile/", {"role": "admin", "subscription_tier": "premium"}, format="json")
    profile = UserProfile.objects.get(user=u)
    assert profile.role == Role.STUDENT
    assert profile.subscription_tier == SubscriptionTier.FREE


@pytest.mark.django_db
def test_programme_must_belong_to_institution(make_user, client_for):
    a = Institution.objects.create(name="A", country="Nigeria")
    b = Institution.objects.create(name="B", country="Nigeria")
    prog = Programme.objects.create(institution=b, name="Law")
    r = client_for(make_user()).post(
        "/api/v1/profile/", {"institution": a.id, "programme": prog.id}, format="json"
    )
    assert r.status_code == 400
    assert "programme" in r.json()


@pytest.mark.security
@pytest.mark.django_db
def test_anonymous_profile_access_is_forbidden():
    assert APIClient().get("/api/v1/profile/").status_code == 403
