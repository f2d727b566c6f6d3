"""Generate study aids through the configured backend and persist them."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from django.db import transaction

from activity.models import UserActivity
from activity.services import log_activity_quietly
from assessments.grading import correct_index
from assessments.models import Assessment, AssessmentType
from assessments.services import create_assessment

from .generators import GenerationFailed, get_generator
from .models import AIContentType, AIGeneratedContent, LearningPath

logger = logging.getLogger(__name__)

# Minutes allowed per requested quiz question
QUIZ_MINUTES_PER_QUESTION = 2


def _save_artifact(user, kind: str, payload: dict[str, Any], model: str, source_content=None) -> AIGeneratedContent:
    artifact = AIGeneratedContent.objects.create(
        user=user, type=kind, ai_content=payload, model=model, source_content=source_content
    )
    log_activity_quietly(
        user,
        UserActivity.TYPE_AI_GENERATION,
        f"Generated {AIContentType(kind).label.lower()}",
        {"aiContentId": artifact.pk, "type": kind},
    )
    logger.info("%s artifact %s generated for user %s with %s", kind, artifact.pk, user.pk, model)
    return artifact


def _require_list(value: Any, what: str) -> list:
    if not isinstance(value, list):
        raise GenerationFailed(f"Generator returned malformed {what}.")
    return value


def _require_dict(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise GenerationFailed(f"Generator returned malformed {what}.")
    return value


def valid_question(question: Any) -> bool:
    """A question needs text, at least two options and an in-range answer index."""
    if not isinstance(question, dict):
        return False
    options = question.get("options")
    index = correct_index(question)
    return (
        isinstance(question.get("question"), str)
        and isinstance(options, list)
        and len(options) >= 2
        and index is not None
        and 0 <= index < len(options)
    )


def generate_flashcards(user, text: str, count: int = 10, source_content=None) -> list[dict[str, Any]]:
    generator = get_generator()
    cards = _require_list(generator.flashcards(text, count), "flashcards")
    _save_artifact(
        user, AIContentType.FLASHCARD, {"flashcards": cards, "originalContent": text},
        generator.model_name, source_content,
    )
    return cards


@transaction.atomic
def generate_quiz(user, text: str, question_count: int = 5, source_content=None) -> Assessment:
    """Generate questions and store them as an AI-generated quiz assessment."""
    generator = get_generator()
    questions = _require_list(generator.quiz(text, question_count), "quiz questions")
    if not questions or not all(valid_question(q) for q in questions):
        raise GenerationFailed("Generator returned malformed quiz questions.")
    return create_assessment(
        user,
        title="AI Generated Quiz",
        description="Quiz generated from uploaded content",
        type=AssessmentType.QUIZ,
        questions=questions,
        time_limit=question_count * QUIZ_MINUTES_PER_QUESTION,
        total_points=len(questions),
        is_ai_generated=True,
        source_content=source_content,
    )


def summarise_text(user, text: str, source_content=None) -> dict[str, Any]:
    generator = get_generator()
    summary = _require_dict(generator.summary(text), "summary")
    _save_artifact(
        user, AIContentType.SUMMARY, {"summary": summary, "originalContent": text},
        generator.model_name, source_content,
    )
    return summary


def generate_mind_map(user, text: str, source_content=None) -> dict[str, Any]:
    generator = get_generator()
    tree = _require_dict(generator.mind_map(text), "mind map")
    _save_artifact(
        user, AIContentType.MINDMAP, {"mindMap": tree, "originalContent": text},
        generator.model_name, source_content,
    )
    return tree


def create_learning_path(user, goals: list[str], target_date: datetime, current_level: str) -> LearningPath:
    plan = _require_dict(get_generator().study_plan(goals, target_date, current_level), "study plan")
    path = LearningPath.objects.create(
        user=user,
        title=str(plan.get("title") or "Study plan")[:200],
        description=str(plan.get("description") or ""),
        target_date=target_date,
        tasks=_require_list(plan.get("tasks", []), "study plan tasks"),
    )
    log_activity_quietly(
        user,
        UserActivity.TYPE_LEARNING_PATH,
        f'Created learning path "{path.title}"',
        {"learningPathId": path.pk},
    )
    return path
