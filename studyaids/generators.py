"""Boundary to the text-generation service that produces study aids.

The backend is chosen by `STUDYHUB["GENERATOR_BACKEND"]` (a dotted
path). Backends return plain Python data in the shapes documented on
`StudyAidGenerator`; callers validate it before persisting anything.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any

from django.utils.module_loading import import_string

from config.conf import studyhub_setting


class GeneratorUnavailable(Exception):
    """No generator backend is configured or it cannot be reached."""


class GenerationFailed(Exception):
    """The backend answered, but not with usable study aid data."""


class StudyAidGenerator:
    """Interface implemented by generator backends.

    - `flashcards` -> `[{"question", "answer", "category"?}]`
    - `quiz` -> `[{"question", "options": [...], "correctAnswer": int, "explanation"?}]`
    - `summary` -> `{"title", "summary", "keyPoints": [...]}`
    - `mind_map` -> `{"id", "label", "children": [...]}`
    - `study_plan` -> `{"title", "description", "tasks": [...]}`
    """

    model_name = ""

    def flashcards(self, text: str, count: int) -> list[dict[str, Any]]:
        raise NotImplementedError

    def quiz(self, text: str, question_count: int) -> list[dict[str, Any]]:
        raise NotImplementedError

    def summary(self, text: str) -> dict[str, Any]:
        raise NotImplementedError

    def mind_map(self, text: str) -> dict[str, Any]:
        raise NotImplementedError

    def study_plan(self, goals: list[str], target_date: datetime, current_level: str) -> dict[str, Any]:
        raise NotImplementedError


class UnconfiguredGenerator(StudyAidGenerator):
    """Default backend: every call reports that generation is unavailable."""

    def _unavailable(self, *args, **kwargs):
        raise GeneratorUnavailable("Study aid generation is not configured.")

    flashcards = quiz = summary = mind_map = study_plan = _unavailable


def get_generator() -> StudyAidGenerator:
    backend = import_string(studyhub_setting("GENERATOR_BACKEND"))
    generator = backend()
    if not generator.model_name:
        generator.model_name = studyhub_setting("GENERATOR_MODEL")
    return generator
