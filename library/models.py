"""Note library models and upload validation.

`Content` is an uploaded study artifact. Its `rating` and
`rating_count` are derived from the `ContentRating` rows that reference
it and are only ever written by `library.services.rate_content`.
"""
from __future__ import annotations

from pathlib import Path

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from config.conf import studyhub_setting


class ContentType(models.TextChoices):
    PDF = "pdf", "PDF"
    PPTX = "pptx", "PowerPoint"
    DOC = "doc", "Word (legacy)"
    DOCX = "docx", "Word"


ALLOWED_EXT = {".pdf", ".pptx", ".doc", ".docx"}


def validate_upload(file) -> None:
    """Validate file size and extension.

    Only PDF, PPTX, DOC and DOCX are accepted, up to the configured
    `MAX_UPLOAD_BYTES` (20 MB by default).
    """
    max_bytes = studyhub_setting("MAX_UPLOAD_BYTES")
    size = getattr(file, "size", None)
    if size is not None and size > max_bytes:
        raise ValidationError(f"File too large (max {max_bytes // (1024 * 1024)} MB)")
    ext = Path(getattr(file, "name", "")).suffix.lower()
    if ext not in ALLOWED_EXT:
        raise ValidationError("Invalid file type. Only PDF, PPTX, DOC, and DOCX files are allowed.")


class Content(models.Model):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    type = models.CharField(max_length=8, choices=ContentType.choices)
    file = models.FileField(upload_to="content/", validators=[validate_upload], blank=True)
    file_size = models.PositiveIntegerField(default=0)
    uploaded_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="uploads")
    course = models.ForeignKey(
        "courses.Course", on_delete=models.SET_NULL, null=True, blank=True, related_name="content"
    )
    institution = models.ForeignKey(
        "courses.Institution", on_delete=models.SET_NULL, null=True, blank=True, related_name="content"
    )
    programme = models.ForeignKey(
        "courses.Programme", on_delete=models.SET_NULL, null=True, blank=True, related_name="content"
    )
    is_public = models.BooleanField(default=True, db_index=True)
    # Derived from ContentRating; recomputed on every rating write
    rating = models.PositiveSmallIntegerField(default=0)
    rating_count = models.PositiveIntegerField(default=0)
    download_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        verbose_name_plural = "content"

    def save(self, *args, **kwargs):
        # Record the stored size alongside the file for listings.
        if self.file:
            self.file_size = getattr(self.file, "size", self.file_size) or 0
        super().save(*args, **kwargs)

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.title} ({self.type})"

    def is_owner(self, user) -> bool:
        return bool(user and user.is_authenticated and self.uploaded_by_id == user.id)


class ContentRating(models.Model):
    content = models.ForeignKey(Content, on_delete=models.CASCADE, related_name="ratings")
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="content_ratings")
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    review = models.TextField(blank=True)
    created_at = models.DateTimeField()

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["content", "user"], name="unique_rating_per_user"),
            models.CheckConstraint(condition=models.Q(rating__gte=1, rating__lte=5), name="rating_between_1_and_5"),
        ]
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.content_id}:{self.user_id}={self.rating}"
