from __future__ import annotations

import random

import pytest

from trivia_app.core.errors import EmptyQuestionSetError, InvalidTransitionError
from trivia_app.core.models import QuizOutcome, ResultTier, SessionState
from trivia_app.core.result_messages import result_message
from trivia_app.core.services.question_selector import select_questions
from trivia_app.core.services.quiz_session import QuizSession

from conftest import make_question


def _session(count: int = 3) -> QuizSession:
    return QuizSession([make_question(1, "en", n) for n in range(count)])


def test_initial_state():
    session = _session()
    assert session.state is SessionState.AWAITING_ANSWER
    assert session.current_index == 0
    assert session.score == 0
    assert session.selected_answer is None
    assert not session.is_answer_checked
    assert session.outcome is None


def test_check_without_selection_fails_without_scoring():
    session = _session()
    with pytest.raises(InvalidTransitionError):
        session.check_answer()
    assert session.score == 0
    assert session.state is SessionState.AWAITING_ANSWER


def test_last_selection_wins():
    session = _session()
    session.select_answer("wrong")
    session.select_answer("also wrong")
    session.select_answer("right")
    assert session.selected_answer == "right"
    assert session.check_answer() is True
    assert session.score == 1


def test_wrong_answer_does_not_score():
    session = _session()
    session.select_answer("wrong")
    assert session.check_answer() is False
    assert session.score == 0
    assert session.state is SessionState.ANSWER_CHECKED


def test_unknown_option_is_rejected():
    session = _session()
    with pytest.raises(ValueError):
        session.select_answer("not an option")
    assert session.selected_answer is None


def test_out_of_order_transitions_raise():
    session = _session()
    with pytest.raises(InvalidTransitionError):
        session.next_question()

    session.select_answer("right")
    session.check_answer()
    with pytest.raises(InvalidTransitionError):
        session.check_answer()
    with pytest.raises(InvalidTransitionError):
        session.select_answer("wrong")
    assert session.score == 1


def test_next_question_resets_selection():
    session = _session()
    session.select_answer("wrong")
    session.check_answer()
    assert session.next_question() is None
    assert session.current_index == 1
    assert session.selected_answer is None
    assert session.state is SessionState.AWAITING_ANSWER


def test_walks_every_index_in_order_then_completes():
    session = _session(4)
    visited = []
    outcome = None
    for _ in range(session.total):
        visited.append(session.current_index)
        session.select_answer("right")
        session.check_answer()
        outcome = session.next_question()

    assert visited == [0, 1, 2, 3]
    assert session.state is SessionState.COMPLETED
    assert outcome == QuizOutcome(score=4, total=4)
    assert session.outcome == outcome


def test_completed_session_rejects_everything():
    session = _session(1)
    session.select_answer("right")
    session.check_answer()
    session.next_question()

    with pytest.raises(InvalidTransitionError):
        session.select_answer("right")
    with pytest.raises(InvalidTransitionError):
        session.check_answer()
    with pytest.raises(InvalidTransitionError):
        session.next_question()
    assert session.score == 1


def test_empty_session_reports_empty_question_set():
    session = QuizSession([])
    assert session.is_empty
    assert session.get_current_question() is None
    assert session.snapshot() == {"state": "empty", "total": 0, "score": 0}
    with pytest.raises(EmptyQuestionSetError):
        session.select_answer("right")
    with pytest.raises(EmptyQuestionSetError):
        session.check_answer()


def test_snapshot_hides_answer_until_checked():
    session = _session(2)
    session.select_answer("wrong")
    snapshot = session.snapshot()
    assert snapshot["selected_answer"] == "wrong"
    assert snapshot["correct_answer"] is None
    assert snapshot["explanation"] is None
    assert snapshot["progress_percent"] == 50

    session.check_answer()
    snapshot = session.snapshot()
    assert snapshot["state"] == "answer_checked"
    assert snapshot["correct_answer"] == "right"
    assert snapshot["is_correct"] is False
    assert snapshot["explanation"] == "Explanation 0"


def test_ten_question_quiz_with_eight_correct_is_congrats(beginner_catalog):
    questions = select_questions("beginner", "en", beginner_catalog, rng=random.Random(4))
    session = QuizSession(questions)
    assert session.total == 10

    outcome = None
    for number in range(session.total):
        session.select_answer("right" if number < 8 else "wrong")
        session.check_answer()
        outcome = session.next_question()

    assert outcome == QuizOutcome(score=8, total=10)
    assert result_message(outcome.score, outcome.total).tier is ResultTier.CONGRATS


def test_no_matching_questions_gives_empty_session(beginner_catalog):
    session = QuizSession(select_questions("advanced", "ko", beginner_catalog))
    assert session.is_empty
    assert session.snapshot()["state"] == "empty"
