"""Domain models for the trivia quiz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DifficultyTier(str, Enum):
    """User-facing quiz difficulty."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    JAPANESE = "japanese"


class SessionState(str, Enum):
    """States of a quiz session."""

    AWAITING_ANSWER = "awaiting_answer"
    ANSWER_CHECKED = "answer_checked"
    COMPLETED = "completed"


class ResultTier(str, Enum):
    """Tier of the congratulatory message shown on the result page."""

    CONGRATS = "congrats"
    CLOSE = "close"
    ENCOURAGEMENT = "encouragement"


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice trivia question loaded from the catalog."""

    class_level: int
    language_code: str
    text: str
    options: tuple[str, ...]
    correct_answer: str
    explanation: str = ""

    def is_correct(self, answer: str | None) -> bool:
        return answer is not None and answer == self.correct_answer


@dataclass(frozen=True, slots=True)
class QuizOutcome:
    """Final score handed to the result page once a session completes."""

    score: int
    total: int


@dataclass(frozen=True, slots=True)
class ResultMessage:
    """Localized message shown for a final score."""

    tier: ResultTier
    title: str
    body: str


@dataclass(frozen=True, slots=True)
class AffiliateLink:
    """Recommendation card shown on the result page."""

    url: str
    image: str
    title: str
    description: str
