"""Mapping from a final score to the message shown on the result page."""

from __future__ import annotations

from trivia_app.constants.quiz_constants import CLOSE_THRESHOLD, CONGRATS_THRESHOLD
from trivia_app.core.locale_strings import get_strings
from trivia_app.core.models import ResultMessage, ResultTier


def result_tier(score: int, total: int) -> ResultTier:
    """Pick the message tier from the fraction of questions answered correctly."""
    if score < 0:
        raise ValueError("Score cannot be negative.")
    if total <= 0:
        return ResultTier.ENCOURAGEMENT
    if score > total:
        raise ValueError("Score cannot exceed the number of questions.")

    ratio = score / total
    if ratio >= CONGRATS_THRESHOLD:
        return ResultTier.CONGRATS
    if ratio >= CLOSE_THRESHOLD:
        return ResultTier.CLOSE
    return ResultTier.ENCOURAGEMENT


def result_message(score: int, total: int, language: str = "en") -> ResultMessage:
    tier = result_tier(score, total)
    strings = get_strings(language)
    return ResultMessage(tier=tier, title=strings.result_titles[tier], body=strings.result_bodies[tier])
