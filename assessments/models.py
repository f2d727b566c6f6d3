"""Assessments and their attempts.

An `Assessment` stores its questions as an ordered JSON list of
`{question, options, correctAnswer, explanation}` objects. Attempts are
scored once on submission and never modified afterwards.
"""
from __future__ import annotations

from django.conf import settings
from django.db import models


class AssessmentType(models.TextChoices):
    QUIZ = "quiz", "Quiz"
    TEST = "test", "Test"
    EXAM = "exam", "Exam"
    FLASHCARD = "flashcard", "Flashcard"


class Assessment(models.Model):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    type = models.CharField(max_length=16, choices=AssessmentType.choices)
    questions = models.JSONField(default=list)
    time_limit = models.PositiveIntegerField(null=True, blank=True)  # minutes
    total_points = models.PositiveIntegerField(default=0)
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="assessments")
    course = models.ForeignKey(
        "courses.Course", on_delete=models.SET_NULL, null=True, blank=True, related_name="assessments"
    )
    is_ai_generated = models.BooleanField(default=False)
    source_content = models.ForeignKey(
        "library.Content", on_delete=models.SET_NULL, null=True, blank=True, related_name="assessments"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.title} ({self.get_type_display()})"

    @property
    def question_count(self) -> int:
        return len(self.questions or [])


class AssessmentAttempt(models.Model):
    assessment = models.ForeignKey(Assessment, on_delete=models.CASCADE, related_name="attempts")
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="assessment_attempts")
    answers = models.JSONField(default=list)
    score = models.PositiveIntegerField()
    percentage = models.PositiveSmallIntegerField()
    time_spent = models.PositiveIntegerField(null=True, blank=True)  # seconds
    completed_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["-completed_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"Attempt {self.pk} by {self.user_id} on {self.assessment_id}: {self.percentage}%"
