from __future__ import annotations

import random

import pytest

from trivia_app.core.errors import InvalidDifficultyError
from trivia_app.core.models import ResultTier
from trivia_app.core.quiz_manager import QuizManager, UnknownSessionError
from trivia_app.core.services.question_repository import QuestionRepository


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def manager(beginner_catalog, clock) -> QuizManager:
    return QuizManager(
        QuestionRepository.from_questions(beginner_catalog),
        rng=random.Random(3),
        idle_timeout=600,
        max_sessions=3,
        clock=clock,
    )


def test_sessions_are_isolated_per_browser(manager):
    first = manager.start_quiz("browser-a", "beginner", "en")
    second = manager.start_quiz("browser-b", "beginner", "ja")
    assert first["total"] == 10
    assert second["total"] == 3

    manager.select_answer("browser-a", "right")
    manager.check_answer("browser-a")
    assert manager.get_session("browser-a").score == 1
    assert manager.get_session("browser-b").score == 0


def test_restarting_replaces_the_session(manager):
    first = manager.start_quiz("browser", "beginner", "en")
    second = manager.start_quiz("browser", "intermediate", "en")
    assert second["quiz_id"] != first["quiz_id"]
    assert manager.get_snapshot("browser")["quiz_id"] == second["quiz_id"]
    assert manager.get_active_session_count() == 1


def test_snapshots_do_not_follow_later_transitions(manager):
    manager.start_quiz("browser", "beginner", "en")
    selected = manager.select_answer("browser", "right")
    checked = manager.check_answer("browser")
    assert selected["state"] == "awaiting_answer"
    assert selected["correct_answer"] is None
    assert checked["state"] == "answer_checked"
    assert checked["score"] == 1

    advanced, outcome = manager.next_question("browser")
    assert outcome is None
    assert advanced["number"] == 2
    assert checked["number"] == 1
    assert advanced["language"] == "en"


def test_completion_discards_session(manager):
    manager.start_quiz("browser", "intermediate", "en")
    total = manager.get_session("browser").total
    outcome = None
    for _ in range(total):
        manager.select_answer("browser", "right")
        manager.check_answer("browser")
        snapshot, outcome = manager.next_question("browser")

    assert outcome.score == outcome.total == total
    assert snapshot["state"] == "completed"
    with pytest.raises(UnknownSessionError):
        manager.get_session("browser")


def test_discard_and_unknown_sessions(manager):
    manager.start_quiz("browser", "beginner", "en")
    assert manager.discard_session("browser") is True
    assert manager.discard_session("never-started") is False
    assert manager.discard_session(None) is False
    with pytest.raises(UnknownSessionError):
        manager.check_answer("browser")
    with pytest.raises(UnknownSessionError):
        manager.get_session(None)


def test_quit_for_a_replaced_quiz_keeps_the_new_one(manager):
    old = manager.start_quiz("browser", "beginner", "en")
    new = manager.start_quiz("browser", "beginner", "en")

    assert manager.discard_session("browser", old["quiz_id"]) is False
    assert manager.get_snapshot("browser")["quiz_id"] == new["quiz_id"]
    assert manager.discard_session("browser", new["quiz_id"]) is True
    assert manager.get_active_session_count() == 0


def test_idle_sessions_are_evicted(manager, clock):
    manager.start_quiz("idle", "beginner", "en")
    clock.advance(300)
    manager.start_quiz("busy", "beginner", "en")
    clock.advance(299)
    manager.select_answer("idle", "right")
    clock.advance(301)

    # "busy" was last seen 600s ago; "idle" was touched 301s ago.
    assert manager.get_active_session_count() == 1
    with pytest.raises(UnknownSessionError):
        manager.get_session("busy")
    assert manager.get_session("idle").selected_answer == "right"

    clock.advance(600)
    with pytest.raises(UnknownSessionError):
        manager.check_answer("idle")


def test_session_count_is_capped(manager, clock):
    for index in range(3):
        manager.start_quiz(f"browser-{index}", "beginner", "en")
        clock.advance(1)
    manager.get_snapshot("browser-0")

    manager.start_quiz("browser-3", "beginner", "en")

    assert manager.get_active_session_count() == 3
    with pytest.raises(UnknownSessionError):
        manager.get_session("browser-1")
    manager.get_session("browser-0")


def test_session_cap_must_be_positive(beginner_catalog):
    with pytest.raises(ValueError):
        QuizManager(QuestionRepository.from_questions(beginner_catalog), max_sessions=0)


def test_invalid_difficulty_leaves_no_session(manager):
    with pytest.raises(InvalidDifficultyError):
        manager.start_quiz("browser", "legendary", "en")
    assert manager.get_active_session_count() == 0


def test_result_for_uses_locale(manager):
    message = manager.result_for(3, 10, "th")
    assert message.tier is ResultTier.ENCOURAGEMENT
    assert message.title == "ไม่ต้องกังวล!"
