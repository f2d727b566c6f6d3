"""Assessment creation and attempt submission."""
from __future__ import annotations

import logging
from typing import Any, Sequence

from activity.models import UserActivity
from activity.services import log_activity_quietly

from .grading import grade_answers
from .models import Assessment, AssessmentAttempt

logger = logging.getLogger(__name__)


def create_assessment(user, *, questions: Sequence[dict[str, Any]], total_points: int | None = None, **fields) -> Assessment:
    """Create an assessment owned by `user`.

    `total_points` defaults to one point per question.
    """
    questions = list(questions)
    if total_points is None:
        total_points = len(questions)
    assessment = Assessment.objects.create(
        created_by=user, questions=questions, total_points=total_points, **fields
    )
    logger.info("assessment %s created by user %s (%d questions)", assessment.pk, user.pk, len(questions))
    return assessment


def submit_attempt(user, assessment: Assessment, answers, time_spent: int | None = None) -> AssessmentAttempt:
    """Grade `answers`, persist the attempt, then log the completion.

    The attempt stands even when the activity log write fails.
    """
    result = grade_answers(assessment.questions, answers)
    attempt = AssessmentAttempt.objects.create(
        assessment=assessment,
        user=user,
        answers=list(answers) if isinstance(answers, (list, tuple)) else [],
        score=result.score,
        percentage=result.percentage,
        time_spent=time_spent,
    )
    logger.info(
        "attempt %s on assessment %s by user %s: %d/%d (%d%%)",
        attempt.pk, assessment.pk, user.pk, result.score, result.total, result.percentage,
    )
    log_activity_quietly(
        user,
        UserActivity.TYPE_ASSESSMENT_COMPLETION,
        f'Completed "{assessment.title}" - Score: {result.percentage}%',
        {"assessmentId": assessment.pk, "score": result.percentage},
    )
    return attempt
