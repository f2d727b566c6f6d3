from __future__ import annotations

import pytest
from django.test import Client
from rest_framework.test import APIClient

from courses.models import Course, Enrolment, Institution, Programme


@pytest.mark.django_db
def test_duplicate_enrolment_returns_400_not_500(make_user, client_for):
    course = Course.objects.create(name="Calculus", code="MTH101")
    c = client_for(make_user())
    r1 = c.post(f"/api/v1/courses/{course.id}/enrol/")
    assert r1.status_code == 201
    assert r1.json()["progress"] == 0
    r2 = c.post(f"/api/v1/courses/{course.id}/enrol/")
    assert r2.status_code == 400
    assert "Already enrolled" in r2.json()["detail"]
    assert Enrolment.objects.count() == 1


@pytest.mark.django_db
def test_my_courses_lists_enrolments_with_progress(make_user, client_for):
    u = make_user()
    mine = Course.objects.create(name="Statistics")
    Course.objects.create(name="Not mine")
    Enrolment.objects.create(user=u, course=mine, progress=40)
    Enrolment.objects.create(user=make_user("other"), course=mine, progress=90)

    rows = client_for(u).get("/api/v1/courses/mine/").json()["results"]
    assert len(rows) == 1
    assert rows[0]["course"]["name"] == "Statistics"
    assert rows[0]["progress"] == 40


@pytest.mark.django_db
def test_progress_update_is_validated(make_user, client_for):
    u = make_user()
    course = Course.objects.create(name="Algebra")
    Enrolment.objects.create(user=u, course=course)
    c = client_for(u)
    url = f"/api/v1/courses/{course.id}/progress/"

    r = c.post(url, {"progress": 75}, format="json")
    assert r.status_code == 200
    assert r.json()["progress"] == 75
    for bad in (-1, 101, "lots"):
        assert c.post(url, {"progress": bad}, format="json").status_code == 400
    assert Enrolment.objects.get(user=u, course=course).progress == 75


@pytest.mark.django_db
def test_progress_requires_enrolment(make_user, client_for):
    course = Course.objects.create(name="Algebra")
    r = client_for(make_user()).post(f"/api/v1/courses/{course.id}/progress/", {"progress": 10}, format="json")
    assert r.status_code == 404


@pytest.mark.django_db
def test_institutions_and_programmes_are_public_and_ordered():
    uni = Institution.objects.create(name="University of Lagos", country="Nigeria")
    Institution.objects.create(name="Ahmadu Bello University", country="Nigeria")
    Programme.objects.create(institution=uni, name="Law")
    Programme.objects.create(institution=uni, name="Accounting")

    c = Client()
    r = c.get("/api/v1/institutions/")
    assert r.status_code == 200
    assert [row["name"] for row in r.json()["results"]] == ["Ahmadu Bello University", "University of Lagos"]

    r = c.get(f"/api/v1/institutions/{uni.id}/programmes/")
    assert [row["name"] for row in r.json()["results"]] == ["Accounting", "Law"]

    r = c.get(f"/api/v1/programmes/?institution={uni.id}")
    assert r.json()["count"] == 2


@pytest.mark.django_db
def test_course_listing_requires_login(make_user, client_for):
    Course.objects.create(name="Geography")
    assert APIClient().get("/api/v1/courses/").status_code == 403
    r = client_for(make_user()).get("/api/v1/courses/")
    assert r.status_code == 200
    assert r.json()["results"][0]["name"] == "Geography"
