from __future__ import annotations

import pytest

from trivia_app.core.models import Question


def make_question(class_level: int, language_code: str = "en", number: int = 0) -> Question:
    return Question(
        class_level=class_level,
        language_code=language_code,
        text=f"L{class_level} {language_code} question {number}",
        options=("right", "wrong", "also wrong"),
        correct_answer="right",
        explanation=f"Explanation {number}",
    )


def make_catalog(per_level: dict[tuple[int, str], int]) -> list[Question]:
    catalog: list[Question] = []
    for (class_level, language_code), count in per_level.items():
        catalog.extend(make_question(class_level, language_code, n) for n in range(count))
    return catalog


@pytest.fixture
def beginner_catalog() -> list[Question]:
    """Five English questions at class levels 1 and 2, plus noise."""
    return make_catalog({(1, "en"): 5, (2, "en"): 5, (3, "en"): 4, (1, "ja"): 3})


@pytest.fixture
def large_catalog() -> list[Question]:
    return make_catalog({(level, lang): 8 for level in range(1, 6) for lang in ("en", "ja")})
