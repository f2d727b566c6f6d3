from __future__ import annotations

import pytest

from assessments.grading import GradeResult, grade_answers, round_half_up


def _questions(*correct):
    return [
        {"question": f"Q{i}", "options": ["a", "b", "c", "d"], "correctAnswer": c}
        for i, c in enumerate(correct)
    ]


def test_mixed_answers_round_half_up():
    # 2 of 3 correct -> 66.67 -> 67
    result = grade_answers(_questions(1, 0, 2), [1, 0, 0])
    assert result == GradeResult(score=2, percentage=67, total=3)


def test_all_correct_and_all_wrong():
    qs = _questions(0, 1, 2, 3)
    assert grade_answers(qs, [0, 1, 2, 3]).percentage == 100
    assert grade_answers(qs, [3, 2, 1, 0]) == GradeResult(0, 0, 4)


def test_no_questions_scores_zero():
    assert grade_answers([], [1, 2]) == GradeResult(0, 0, 0)


def test_short_answer_list_counts_missing_as_wrong():
    result = grade_answers(_questions(0, 0, 0, 0), [0])
    assert result.score == 1
    assert result.percentage == 25


def test_extra_answers_are_ignored():
    assert grade_answers(_questions(1), [1, 1, 1]) == GradeResult(1, 100, 1)


@pytest.mark.parametrize("bad", [None, "1", 1.5, float("nan"), float("inf"), True, [1], {"a": 1}])
def test_non_integer_answers_are_incorrect(bad):
    assert grade_answers(_questions(1), [bad]).score == 0


def test_integral_float_answer_matches_index():
    # JSON clients may send 1.0 for option 1
    assert grade_answers(_questions(1, 0), [1.0, 0.0]) == GradeResult(2, 100, 2)


def test_bool_does_not_match_index_one_or_zero():
    assert grade_answers(_questions(1, 0), [True, False]).score == 0


def test_non_list_answers_grade_as_empty():
    assert grade_answers(_questions(0, 1), "0,1") == GradeResult(0, 0, 2)
    assert grade_answers(_questions(0, 1), None) == GradeResult(0, 0, 2)


def test_malformed_question_never_matches():
    qs = [{"question": "x", "options": ["a", "b"]}, "not a question"]
    assert grade_answers(qs, [0, 0]) == GradeResult(0, 0, 2)


def test_percentage_half_rounds_up():
    # 1 of 8 -> 12.5 -> 13 (built-in round would give 12)
    assert grade_answers(_questions(*[0] * 8), [0]).percentage == 13


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(4.5) == 5
    assert round_half_up(3.49) == 3
    assert round_half_up(0.25, 1) == 0.3
    assert isinstance(round_half_up(2.0), int)
    assert isinstance(round_half_up(2, 1), float)
