"""Accounts models: user profile and roles.

Defines a `UserProfile` associated one-to-one with Django's `User`,
capturing the platform role, subscription tier and the onboarding
answers (institution, programme, level, goals). The profile is created
automatically on user creation.
"""
from __future__ import annotations

from django.conf import settings
from django.db import models


class Role(models.TextChoices):
    """Platform roles."""

    STUDENT = "student", "Student"
    INSTITUTION = "institution", "Institution"
    ADMIN = "admin", "Admin"


class SubscriptionTier(models.TextChoices):
    FREE = "free", "Free"
    PREMIUM = "premium", "Premium"
    INSTITUTION = "institution", "Institution"


class UserProfile(models.Model):
    """Profile linked to a Django auth user.

    - `role` and `subscription_tier`: stored for display and soft gating
    - onboarding fields are optional and filled in by the client
    """

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="profile")
    role = models.CharField(max_length=16, choices=Role.choices, default=Role.STUDENT)
    subscription_tier = models.CharField(
        max_length=16, choices=SubscriptionTier.choices, default=SubscriptionTier.FREE
    )

    institution = models.ForeignKey(
        "courses.Institution", on_delete=models.SET_NULL, null=True, blank=True, related_name="profiles"
    )
    programme = models.ForeignKey(
        "courses.Programme", on_delete=models.SET_NULL, null=True, blank=True, related_name="profiles"
    )
    current_level = models.CharField(max_length=100, blank=True)  # e.g. Year 2, Graduate
    discovery_source = models.CharField(max_length=200, blank=True)
    goals = models.JSONField(default=list, blank=True)
    target_exam_date = models.DateTimeField(null=True, blank=True)
    completed_onboarding = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:  # pragma: no cover (string repr convenience)
        return f"Profile<{self.user.username}:{self.role}>"
