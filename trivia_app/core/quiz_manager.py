"""Business logic shared by the HTML pages and the JSON API."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
import logging
import random
from threading import Lock
import time
from typing import Callable
from uuid import uuid4

from trivia_app.constants.quiz_constants import (
    AFFILIATE_LINKS_PER_RESULT,
    MAX_ACTIVE_SESSIONS,
    QUESTIONS_PER_CLASS_LEVEL,
    SESSION_IDLE_TIMEOUT_SECONDS,
)
from trivia_app.core.models import AffiliateLink, DifficultyTier, QuizOutcome, ResultMessage
from trivia_app.core.result_messages import result_message
from trivia_app.core.services.affiliate_repository import AffiliateRepository
from trivia_app.core.services.question_repository import QuestionRepository
from trivia_app.core.services.question_selector import select_questions
from trivia_app.core.services.quiz_session import QuizSession

logger = logging.getLogger(__name__)


class UnknownSessionError(KeyError):
    """Raised when no quiz session exists for a browser."""


@dataclass(slots=True)
class _TrackedSession:
    session: QuizSession
    quiz_id: str
    last_active: float


class QuizManager:
    """Facade over the repositories, the selector and per-browser quiz sessions.

    Sessions live only in memory. A session is dropped when its quiz
    completes, when the browser quits the quiz, after ``idle_timeout`` seconds
    without activity, or when ``max_sessions`` newer sessions push it out.
    Session reads hand out ``snapshot()`` dicts built while the lock is held.
    """

    def __init__(
        self,
        question_repository: QuestionRepository | None = None,
        affiliate_repository: AffiliateRepository | None = None,
        *,
        per_class: int = QUESTIONS_PER_CLASS_LEVEL,
        rng: random.Random | None = None,
        idle_timeout: float = SESSION_IDLE_TIMEOUT_SECONDS,
        max_sessions: int = MAX_ACTIVE_SESSIONS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_sessions <= 0:
            raise ValueError("max_sessions must be positive")
        self._lock = Lock()
        self._questions = question_repository or QuestionRepository()
        self._affiliates = affiliate_repository or AffiliateRepository()
        self._per_class = per_class
        self._rng = rng or random.Random()
        self._idle_timeout = idle_timeout
        self._max_sessions = max_sessions
        self._clock = clock
        # Least recently active first.
        self._sessions: OrderedDict[str, _TrackedSession] = OrderedDict()

    @staticmethod
    def new_session_id() -> str:
        return uuid4().hex

    # --- Catalog ---

    def get_question_count(self) -> int:
        with self._lock:
            return self._questions.get_question_count()

    def pick_affiliate_links(self, count: int = AFFILIATE_LINKS_PER_RESULT) -> list[AffiliateLink]:
        with self._lock:
            return self._affiliates.pick_links(count)

    # --- Sessions ---

    def start_quiz(self, session_id: str, difficulty: DifficultyTier | str, language: str) -> dict[str, object]:
        """Sample a fresh question list and replace any previous session for the browser."""
        with self._lock:
            questions = select_questions(
                difficulty,
                language,
                self._questions.load_questions(),
                per_class=self._per_class,
                rng=self._rng,
            )
            session = QuizSession(questions, language=language)
            self._sessions.pop(session_id, None)
            self._evict_stale(reserve=1)
            tracked = _TrackedSession(session, uuid4().hex, self._clock())
            self._sessions[session_id] = tracked
            if session.is_empty:
                logger.warning("No questions available for %s/%s", difficulty, language)
            else:
                logger.info("Started %s quiz (%s) with %d questions", difficulty, language, session.total)
            return self._snapshot(tracked)

    def get_session(self, session_id: str | None) -> QuizSession:
        with self._lock:
            return self._require_session(session_id).session

    def get_snapshot(self, session_id: str | None) -> dict[str, object]:
        with self._lock:
            return self._snapshot(self._require_session(session_id))

    def discard_session(self, session_id: str | None, quiz_id: str | None = None) -> bool:
        """Drop the browser's session.

        With ``quiz_id`` the session is only dropped while it still runs that
        quiz, so a late quit for an earlier quiz leaves a restarted one alone.
        """
        with self._lock:
            tracked = self._sessions.get(session_id) if session_id else None
            if tracked is None:
                return False
            if quiz_id is not None and tracked.quiz_id != quiz_id:
                logger.debug("Ignoring quit for a replaced quiz")
                return False
            del self._sessions[session_id]
            logger.info("Discarded quiz session at question %d", tracked.session.current_index + 1)
            return True

    def get_active_session_count(self) -> int:
        with self._lock:
            self._evict_stale()
            return len(self._sessions)

    def select_answer(self, session_id: str | None, option: str) -> dict[str, object]:
        with self._lock:
            tracked = self._require_session(session_id)
            tracked.session.select_answer(option)
            return self._snapshot(tracked)

    def check_answer(self, session_id: str | None) -> dict[str, object]:
        with self._lock:
            tracked = self._require_session(session_id)
            tracked.session.check_answer()
            return self._snapshot(tracked)

    def next_question(self, session_id: str | None) -> tuple[dict[str, object], QuizOutcome | None]:
        """Advance the session; a completed session is discarded."""
        with self._lock:
            tracked = self._require_session(session_id)
            outcome = tracked.session.next_question()
            if outcome is not None:
                self._sessions.pop(session_id, None)
            return self._snapshot(tracked), outcome

    # --- Results ---

    def result_for(self, score: int, total: int, language: str) -> ResultMessage:
        return result_message(score, total, language)

    # --- Internals (call with the lock held) ---

    def _require_session(self, session_id: str | None) -> _TrackedSession:
        self._evict_stale()
        tracked = self._sessions.get(session_id) if session_id else None
        if tracked is None:
            raise UnknownSessionError("No quiz in progress. Start a quiz first.")
        tracked.last_active = self._clock()
        self._sessions.move_to_end(session_id)
        return tracked

    def _evict_stale(self, reserve: int = 0) -> None:
        now = self._clock()
        evicted = 0
        while self._sessions:
            oldest_id, oldest = next(iter(self._sessions.items()))
            is_idle = now - oldest.last_active >= self._idle_timeout
            if not is_idle and len(self._sessions) + reserve <= self._max_sessions:
                break
            del self._sessions[oldest_id]
            evicted += 1
        if evicted:
            logger.info("Evicted %d abandoned quiz session(s)", evicted)

    @staticmethod
    def _snapshot(tracked: _TrackedSession) -> dict[str, object]:
        payload = tracked.session.snapshot()
        payload["quiz_id"] = tracked.quiz_id
        payload["language"] = tracked.session.language
        return payload
