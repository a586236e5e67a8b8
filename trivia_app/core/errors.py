"""Exception types raised by the trivia core."""

from __future__ import annotations


class TriviaError(Exception):
    """Base class for all trivia quiz errors."""


class ResourceUnavailableError(TriviaError):
    """Raised when a static data resource cannot be read or parsed."""


class InvalidDifficultyError(TriviaError):
    """Raised when a difficulty key is not one of the known tiers."""

    def __init__(self, difficulty: object) -> None:
        super().__init__(f"Unknown difficulty tier: {difficulty!r}")
        self.difficulty = difficulty


class InvalidTransitionError(TriviaError):
    """Raised when a quiz session is driven out of order."""


class EmptyQuestionSetError(TriviaError):
    """Raised when a session has no questions for the chosen language and tier."""
