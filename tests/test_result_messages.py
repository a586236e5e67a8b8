from __future__ import annotations

import pytest

from trivia_app.core.models import ResultTier
from trivia_app.core.result_messages import result_message, result_tier


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (10, ResultTier.CONGRATS),
        (8, ResultTier.CONGRATS),
        (7, ResultTier.CLOSE),
        (5, ResultTier.CLOSE),
        (4, ResultTier.ENCOURAGEMENT),
        (0, ResultTier.ENCOURAGEMENT),
    ],
)
def test_tiers_for_ten_questions(score, expected):
    assert result_tier(score, 10) is expected


def test_thresholds_scale_with_total():
    assert result_tier(16, 20) is ResultTier.CONGRATS
    assert result_tier(15, 20) is ResultTier.CLOSE
    assert result_tier(10, 20) is ResultTier.CLOSE
    assert result_tier(9, 20) is ResultTier.ENCOURAGEMENT
    assert result_tier(4, 5) is ResultTier.CONGRATS


def test_zero_total_is_encouragement():
    assert result_tier(0, 0) is ResultTier.ENCOURAGEMENT


def test_invalid_scores_are_rejected():
    with pytest.raises(ValueError):
        result_tier(-1, 10)
    with pytest.raises(ValueError):
        result_tier(11, 10)


def test_messages_are_localized():
    english = result_message(8, 10)
    assert english.title == "Congrats!"
    assert english.body == "You're ready to enjoy Japan like a local!"

    japanese = result_message(6, 10, "ja")
    assert japanese.tier is ResultTier.CLOSE
    assert japanese.title == "もう少し！"


def test_untranslated_locale_falls_back_to_english():
    assert result_message(1, 10, "fr").title == "No worries!"
    assert result_message(1, 10, "xx").title == "No worries!"
