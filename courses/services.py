"""Enrolment operations used by the API layer."""
from __future__ import annotations

import logging

from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotFound, ValidationError

from .models import Course, Enrolment

logger = logging.getLogger(__name__)


def enrol_user(user, course: Course) -> Enrolment:
    """Enrol `user` in `course`; a second enrolment is a validation error."""
    try:
        with transaction.atomic():
            enrolment = Enrolment.objects.create(user=user, course=course)
    except IntegrityError:
        raise ValidationError({"detail": "Already enrolled in this course."})
    logger.info("user %s enrolled in course %s", user.pk, course.pk)
    return enrolment


def update_progress(user, course: Course, progress) -> Enrolment:
    """Set the caller's progress (0-100) on a course they are enrolled in."""
    try:
        value = int(progress)
    except (TypeError, ValueError):
        raise ValidationError({"progress": "A whole number between 0 and 100 is required."})
    if isinstance(progress, bool) or value < 0 or value > 100:
        raise ValidationError({"progress": "Progress must be between 0 and 100."})
    updated = Enrolment.objects.filter(user=user, course=course).update(progress=value)
    if not updated:
        raise NotFound("You are not enrolled in this course.")
    return Enrolment.objects.select_related("course").get(user=user, course=course)
