"""Selection of the question list for a quiz run."""

from __future__ import annotations

import logging
import random
from typing import Sequence, TypeVar

from trivia_app.constants.quiz_constants import DIFFICULTY_CLASS_MAP, QUESTIONS_PER_CLASS_LEVEL
from trivia_app.core.errors import InvalidDifficultyError
from trivia_app.core.models import DifficultyTier, Question

logger = logging.getLogger(__name__)

T = TypeVar("T")


def resolve_class_levels(difficulty: DifficultyTier | str) -> tuple[int, int]:
    """Return the two catalog class levels covered by a difficulty tier."""
    key = difficulty.value if isinstance(difficulty, DifficultyTier) else difficulty
    try:
        return DIFFICULTY_CLASS_MAP[key]
    except (KeyError, TypeError) as exc:
        raise InvalidDifficultyError(difficulty) from exc


def fisher_yates_shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``items``.

    Walks from the last index down to 1 and swaps each slot with a uniformly
    chosen index in ``[0, i]``, so each of the n! orderings is equally likely.
    """
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def select_questions(
    difficulty: DifficultyTier | str,
    language: str,
    all_questions: Sequence[Question],
    *,
    per_class: int = QUESTIONS_PER_CLASS_LEVEL,
    rng: random.Random | None = None,
) -> list[Question]:
    """Sample the ordered question list for a quiz.

    Questions of the lower class level come first; order inside each class
    level is random. Pools smaller than ``per_class`` are taken whole, and an
    empty list is returned when nothing matches.
    """
    if per_class <= 0:
        raise ValueError("per_class must be a positive integer.")

    first_class, second_class = resolve_class_levels(difficulty)
    rng = rng or random.Random()

    first_pool = [q for q in all_questions if q.class_level == first_class and q.language_code == language]
    second_pool = [q for q in all_questions if q.class_level == second_class and q.language_code == language]

    selected = (
        fisher_yates_shuffle(first_pool, rng)[:per_class]
        + fisher_yates_shuffle(second_pool, rng)[:per_class]
    )
    logger.debug(
        "Selected %d questions for %s/%s (pools: %d + %d)",
        len(selected),
        difficulty,
        language,
        len(first_pool),
        len(second_pool),
    )
    return selected
