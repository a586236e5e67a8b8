"""State machine for a single run through a sampled question list."""

from __future__ import annotations

import logging

from trivia_app.core.errors import EmptyQuestionSetError, InvalidTransitionError
from trivia_app.core.models import Question, QuizOutcome, SessionState

logger = logging.getLogger(__name__)


class QuizSession:
    """Tracks progress and score while a user answers a quiz.

    The session moves between ``AWAITING_ANSWER`` and ``ANSWER_CHECKED`` once
    per question and ends in ``COMPLETED``. Out-of-order calls raise
    ``InvalidTransitionError`` and leave the session untouched. A completed
    session cannot be restarted; build a new one to retake the quiz.
    """

    def __init__(self, questions: list[Question], language: str | None = None) -> None:
        self._questions: tuple[Question, ...] = tuple(questions)
        self._language = language
        self._current_index: int = 0
        self._selected_answer: str | None = None
        self._is_answer_checked: bool = False
        self._score: int = 0
        self._state: SessionState = SessionState.AWAITING_ANSWER
        self._outcome: QuizOutcome | None = None

    # --- Read access ---

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def language(self) -> str | None:
        return self._language

    @property
    def total(self) -> int:
        return len(self._questions)

    @property
    def is_empty(self) -> bool:
        return not self._questions

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def selected_answer(self) -> str | None:
        return self._selected_answer

    @property
    def is_answer_checked(self) -> bool:
        return self._is_answer_checked

    @property
    def score(self) -> int:
        return self._score

    @property
    def outcome(self) -> QuizOutcome | None:
        return self._outcome

    def get_current_question(self) -> Question | None:
        if self.is_empty:
            return None
        return self._questions[self._current_index]

    def is_last_question(self) -> bool:
        return self._current_index + 1 >= len(self._questions)

    # --- Transitions ---

    def select_answer(self, option: str) -> None:
        """Record the option the user picked; later calls replace earlier ones."""
        question = self._require_state(SessionState.AWAITING_ANSWER, "select an answer")
        if option not in question.options:
            raise ValueError(f"{option!r} is not an option of the current question.")
        self._selected_answer = option

    def check_answer(self) -> bool:
        """Grade the selected answer and return whether it was correct."""
        question = self._require_state(SessionState.AWAITING_ANSWER, "check an answer")
        if self._selected_answer is None:
            raise InvalidTransitionError("Cannot check an answer before one is selected.")

        is_correct = question.is_correct(self._selected_answer)
        if is_correct:
            self._score += 1
        self._is_answer_checked = True
        self._state = SessionState.ANSWER_CHECKED
        return is_correct

    def next_question(self) -> QuizOutcome | None:
        """Advance past a checked question.

        Returns the final ``QuizOutcome`` when the last question has been
        passed, otherwise ``None``.
        """
        self._require_state(SessionState.ANSWER_CHECKED, "move to the next question")
        if not self.is_last_question():
            self._current_index += 1
            self._selected_answer = None
            self._is_answer_checked = False
            self._state = SessionState.AWAITING_ANSWER
            return None

        self._state = SessionState.COMPLETED
        self._outcome = QuizOutcome(score=self._score, total=self.total)
        logger.info("Quiz completed with score %d/%d", self._score, self.total)
        return self._outcome

    def snapshot(self) -> dict[str, object]:
        """Serializable view of the session for the quiz page."""
        if self.is_empty:
            return {"state": "empty", "total": 0, "score": 0}

        question = self._questions[self._current_index]
        checked = self._is_answer_checked
        payload: dict[str, object] = {
            "state": self._state.value,
            "index": self._current_index,
            "number": self._current_index + 1,
            "total": self.total,
            "score": self._score,
            "progress_percent": round((self._current_index + 1) / self.total * 100),
            "is_last_question": self.is_last_question(),
            "question_text": question.text,
            "options": list(question.options),
            "selected_answer": self._selected_answer,
            "is_answer_checked": checked,
            "correct_answer": question.correct_answer if checked else None,
            "is_correct": question.is_correct(self._selected_answer) if checked else None,
            "explanation": question.explanation if checked else None,
        }
        return payload

    def _require_state(self, expected: SessionState, action: str) -> Question:
        if self.is_empty:
            raise EmptyQuestionSetError("No questions are available for this selection.")
        if self._state is not expected:
            raise InvalidTransitionError(f"Cannot {action} while the session is {self._state.value}.")
        return self._questions[self._current_index]
