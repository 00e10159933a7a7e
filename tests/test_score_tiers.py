import pytest

from cookie_api.core.score_tiers import (
    MAX_SCORE,
    SCORE_TIERS,
    lookup_tier,
    score_progress,
)


def test_650_lands_in_600_tier():
    tier = lookup_tier(650)
    assert tier.bound == 600
    assert tier.label == "Whole Foods Organic"
    assert tier.reward == "Noise-canceling headphones"
    assert score_progress(650) == pytest.approx(65.0)


@pytest.mark.parametrize(
    "score,bound",
    [(0, 0), (99.9, 0), (100, 100), (599, 500), (600, 600), (999, 900), (1000, 1000), (5000, 1000)],
)
def test_breakpoints(score, bound):
    assert lookup_tier(score).bound == bound


def test_negative_score_defaults_to_lowest_tier():
    assert lookup_tier(-25) == SCORE_TIERS[-1]
    assert score_progress(-25) == 0.0


def test_progress_is_capped():
    assert score_progress(MAX_SCORE * 3) == 100.0


def test_table_is_descending():
    bounds = [tier.bound for tier in SCORE_TIERS]
    assert bounds == sorted(bounds, reverse=True)


def test_lookup_is_monotonic():
    scores = [s / 2 for s in range(-50, 2500)]
    ranks = [len(SCORE_TIERS) - SCORE_TIERS.index(lookup_tier(s)) for s in scores]
    assert ranks == sorted(ranks)
