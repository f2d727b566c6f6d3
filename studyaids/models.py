"""Persisted study aids: generated artifacts and learning paths."""
from __future__ import annotations

from django.conf import settings
from django.db import models


class AIContentType(models.TextChoices):
    FLASHCARD = "flashcard", "Flashcards"
    SUMMARY = "summary", "Summary"
    MINDMAP = "mindmap", "Mind map"
    QUIZ = "quiz", "Quiz"


class AIGeneratedContent(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="ai_content")
    source_content = models.ForeignKey(
        "library.Content", on_delete=models.SET_NULL, null=True, blank=True, related_name="ai_content"
    )
    type = models.CharField(max_length=16, choices=AIContentType.choices)
    ai_content = models.JSONField()
    model = models.CharField(max_length=100)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        verbose_name = "AI generated content"
        verbose_name_plural = "AI generated content"

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.user_id}:{self.type}"


class LearningPath(models.Model):
    """A generated study plan: an ordered list of dated tasks."""

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="learning_paths")
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    target_date = models.DateTimeField(null=True, blank=True)
    tasks = models.JSONField(default=list)
    is_completed = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover
        return self.title
