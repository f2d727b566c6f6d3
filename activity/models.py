"""Activity models: study sessions and the user activity log.

Both tables are append-only; they feed the analytics rollup and the
dashboard activity feed.
"""
from __future__ import annotations

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class StudySession(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="study_sessions")
    course = models.ForeignKey(
        "courses.Course", on_delete=models.SET_NULL, null=True, blank=True, related_name="study_sessions"
    )
    content = models.ForeignKey(
        "library.Content", on_delete=models.SET_NULL, null=True, blank=True, related_name="study_sessions"
    )
    duration = models.PositiveIntegerField(validators=[MinValueValidator(1)])  # minutes
    activities_completed = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.user_id}:{self.duration}min"


class UserActivity(models.Model):
    TYPE_CONTENT_UPLOAD = "content_upload"
    TYPE_ASSESSMENT_COMPLETION = "assessment_completion"
    TYPE_STUDY_SESSION = "study_session"
    TYPE_PROFILE_UPDATE = "profile_update"
    TYPE_AI_GENERATION = "ai_generation"
    TYPE_LEARNING_PATH = "learning_path"
    TYPE_CHOICES = (
        (TYPE_CONTENT_UPLOAD, "Content upload"),
        (TYPE_ASSESSMENT_COMPLETION, "Assessment completion"),
        (TYPE_STUDY_SESSION, "Study session"),
        (TYPE_PROFILE_UPDATE, "Profile update"),
        (TYPE_AI_GENERATION, "AI generation"),
        (TYPE_LEARNING_PATH, "Learning path"),
    )

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="activities")
    activity_type = models.CharField(max_length=32, choices=TYPE_CHOICES)
    description = models.CharField(max_length=300)
    metadata = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        verbose_name_plural = "user activities"

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.user_id}:{self.activity_type}:{self.description[:20]}"
