"""Institutions, programmes, courses and enrolments.

A `Course` may belong to an institution; users enrol in courses through
`Enrolment`, which also carries their self-reported progress.
"""
from __future__ import annotations

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class InstitutionType(models.TextChoices):
    UNIVERSITY = "university", "University"
    COLLEGE = "college", "College"
    SCHOOL = "school", "School"


class Institution(models.Model):
    name = models.CharField(max_length=200)
    type = models.CharField(max_length=20, choices=InstitutionType.choices, default=InstitutionType.UNIVERSITY)
    country = models.CharField(max_length=100)
    website = models.URLField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:  # pragma: no cover
        return self.name


class Programme(models.Model):
    """A degree programme offered by an institution (e.g. Computer Science)."""

    institution = models.ForeignKey(Institution, on_delete=models.CASCADE, related_name="programmes")
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name", "id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.name} ({self.institution_id})"


class Course(models.Model):
    name = models.CharField(max_length=200)
    code = models.CharField(max_length=50, blank=True)
    description = models.TextField(blank=True)
    institution = models.ForeignKey(
        Institution, on_delete=models.SET_NULL, null=True, blank=True, related_name="courses"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name", "id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.code} {self.name}".strip()


class Enrolment(models.Model):
    """Link a user to a course with a 0-100 progress value."""

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="enrolments")
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="enrolments")
    progress = models.PositiveSmallIntegerField(
        default=0, validators=[MinValueValidator(0), MaxValueValidator(100)]
    )
    enrolled_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ("user", "course")
        ordering = ["-enrolled_at", "id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.user_id}->{self.course_id}"
