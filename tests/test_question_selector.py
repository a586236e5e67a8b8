from __future__ import annotations

from collections import Counter
from itertools import permutations
import random

import pytest

from trivia_app.constants.quiz_constants import DIFFICULTY_CLASS_MAP
from trivia_app.core.errors import InvalidDifficultyError
from trivia_app.core.models import DifficultyTier
from trivia_app.core.services.question_selector import (
    fisher_yates_shuffle,
    resolve_class_levels,
    select_questions,
)

from conftest import make_catalog


@pytest.mark.parametrize("tier", list(DifficultyTier))
def test_every_tier_maps_to_two_distinct_class_levels(tier):
    first, second = resolve_class_levels(tier)
    assert first != second
    assert first < second
    assert resolve_class_levels(tier.value) == (first, second)


def test_tier_map_matches_reference_levels():
    assert DIFFICULTY_CLASS_MAP == {
        "beginner": (1, 2),
        "intermediate": (2, 3),
        "advanced": (3, 4),
        "japanese": (4, 5),
    }


def test_unknown_difficulty_is_rejected():
    with pytest.raises(InvalidDifficultyError):
        resolve_class_levels("expert")
    with pytest.raises(InvalidDifficultyError):
        select_questions("expert", "en", [])


def test_shuffle_returns_new_list_with_same_items():
    items = list(range(10))
    shuffled = fisher_yates_shuffle(items, random.Random(3))
    assert items == list(range(10))
    assert sorted(shuffled) == items


def test_shuffle_handles_tiny_inputs():
    assert fisher_yates_shuffle([]) == []
    assert fisher_yates_shuffle(["only"]) == ["only"]


def test_shuffle_is_unbiased_over_all_permutations():
    items = ["a", "b", "c", "d"]
    all_orders = list(permutations(items))
    trials = 24_000
    rng = random.Random(20241019)
    counts = Counter(tuple(fisher_yates_shuffle(items, rng)) for _ in range(trials))

    assert set(counts) == set(all_orders)
    expected = trials / len(all_orders)
    chi_square = sum((counts[order] - expected) ** 2 / expected for order in all_orders)
    # 23 degrees of freedom, p = 0.001
    assert chi_square < 49.73


def test_beginner_selection_groups_lower_level_first(beginner_catalog):
    selected = select_questions(DifficultyTier.BEGINNER, "en", beginner_catalog, rng=random.Random(1))
    assert len(selected) == 10
    assert [q.class_level for q in selected] == [1] * 5 + [2] * 5
    assert all(q.language_code == "en" for q in selected)


def test_selection_respects_bounds_and_filters(large_catalog):
    rng = random.Random(7)
    for tier in DifficultyTier:
        levels = resolve_class_levels(tier)
        for language in ("en", "ja"):
            selected = select_questions(tier, language, large_catalog, rng=rng)
            assert len(selected) <= 10
            assert all(q.language_code == language and q.class_level in levels for q in selected)
            assert len(set(selected)) == len(selected)


def test_small_pools_are_taken_whole():
    catalog = make_catalog({(2, "en"): 2, (3, "en"): 7})
    selected = select_questions("intermediate", "en", catalog, rng=random.Random(0))
    assert [q.class_level for q in selected] == [2, 2, 3, 3, 3, 3, 3]


def test_no_matches_yields_empty_list(beginner_catalog):
    assert select_questions("japanese", "en", beginner_catalog) == []
    assert select_questions("beginner", "th", beginner_catalog) == []


def test_per_class_is_configurable(large_catalog):
    selected = select_questions("advanced", "en", large_catalog, per_class=3, rng=random.Random(2))
    assert [q.class_level for q in selected] == [3, 3, 3, 4, 4, 4]
    with pytest.raises(ValueError):
        select_questions("advanced", "en", large_catalog, per_class=0)
