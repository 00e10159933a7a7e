"""Score-to-reward tier table used when displaying a baked cookie."""

from typing import List, NamedTuple

MAX_SCORE = 1000.0


class ScoreTier(NamedTuple):
    bound: float
    label: str
    reward: str


# Descending by bound; the last row is the floor for everything below 100.
SCORE_TIERS: List[ScoreTier] = [
    ScoreTier(1000, "Best natural booty in web3", "CryptoPunk"),
    ScoreTier(900, "absolute dump truck", "Bidet attachment"),
    ScoreTier(800, "Economically Significant", "Digital photo frame"),
    ScoreTier(700, "Booty With Lore", "Smart doorbell"),
    ScoreTier(600, "Whole Foods Organic", "Noise-canceling headphones"),
    ScoreTier(500, "Algorithm Boosted", "At-home espresso kit"),
    ScoreTier(400, "Booty With Lore", "Dyson vacuum"),
    ScoreTier(300, "Historic Landmark", "Heated blanket"),
    ScoreTier(200, "Sneaky Side-Angle", "Electric toothbrush"),
    ScoreTier(100, "National Treasure", "Fancy olive oil"),
    ScoreTier(0, "pancake booty", "Socks From grandma"),
]


def lookup_tier(score: float, tiers: List[ScoreTier] = SCORE_TIERS) -> ScoreTier:
    """Return the first tier whose bound is <= score, else the lowest tier."""
    for tier in tiers:
        if score >= tier.bound:
            return tier
    return tiers[-1]


def score_progress(score: float, max_score: float = MAX_SCORE) -> float:
    """Percentage of the scale reached, clamped to 0..100."""
    return max(0.0, min(score * 100 / max_score, 100.0))


__all__ = ["MAX_SCORE", "ScoreTier", "SCORE_TIERS", "lookup_tier", "score_progress"]
