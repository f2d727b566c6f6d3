"""Assessment grading and the rounding rule shared by all aggregates.

Grading is strict exact-match and equal-weight: answer `i` is correct
when it equals question `i`'s `correctAnswer`. It never raises on
malformed input; anything that is not a valid index counts as wrong.
"""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, NamedTuple, Sequence


class GradeResult(NamedTuple):
    score: int
    percentage: int
    total: int


def round_half_up(value, ndigits: int = 0):
    """Round halves away from zero (2.5 -> 3), unlike the built-in `round`.

    Returns an int when `ndigits` is 0, otherwise a float.
    """
    number = value if isinstance(value, Decimal) else Decimal(str(value))
    quantum = Decimal(1).scaleb(-ndigits)
    rounded = number.quantize(quantum, rounding=ROUND_HALF_UP)
    return int(rounded) if ndigits == 0 else float(rounded)


def _as_index(value: Any) -> int | None:
    # bool is an int subclass; True must not match index 1
    if isinstance(value, bool):
        return None
    # JSON does not distinguish 1 from 1.0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        return None
    return value


def correct_index(question: Any) -> int | None:
    if not isinstance(question, dict):
        return None
    return _as_index(question.get("correctAnswer"))


def grade_answers(questions: Sequence[Any], answers: Sequence[Any] | None) -> GradeResult:
    """Grade `answers` positionally against `questions`.

    Missing positions (a short answer list) and out-of-range or
    non-integer answers count as incorrect. Extra answers are ignored.
    An assessment without questions scores 0%.
    """
    questions = list(questions or [])
    if not isinstance(answers, (list, tuple)):
        answers = []
    total = len(questions)
    correct = 0
    for i, question in enumerate(questions):
        if i >= len(answers):
            break
        expected = correct_index(question)
        given = _as_index(answers[i])
        if expected is not None and given == expected:
            correct += 1
    if total == 0:
        return GradeResult(score=0, percentage=0, total=0)
    percentage = round_half_up(Decimal(100 * correct) / Decimal(total))
    return GradeResult(score=correct, percentage=percentage, total=total)
