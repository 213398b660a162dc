"""
Overall Score Aggregation

Combines the four category scores of a ScoreSet into a single 0-100 score.

Formula:
    Overall = round_half_up((Performance + Accessibility + BestPractices + SEO) / 4)

This unweighted mean is the only score used for tier and badge
classification. A weighted variant exists for analytics events:

    Analytics = round_half_up(0.3 × Performance + 0.3 × SEO
                              + 0.25 × Accessibility + 0.15 × BestPractices)

Precondition: every field is an integer in [0, 100]. Neither function
validates or clamps; see ScoreSet.validate().
"""

import logging
from decimal import Decimal
from typing import Any, Dict

from .helpers import (
    ANALYTICS_WEIGHTS,
    Category,
    ScoreSet,
    mean_half_up,
    round_half_up,
)

logger = logging.getLogger(__name__)


def calculate_overall_score(scores: ScoreSet) -> int:
    """
    Calculate the canonical overall score.

    Args:
        scores: ScoreSet with four 0-100 integers

    Returns:
        Rounded mean of the four scores (0-100)
    """
    return mean_half_up(scores.values())


def calculate_analytics_score(scores: ScoreSet) -> int:
    """
    Calculate the weighted score reported with some analytics events.

    Kept separate from calculate_overall_score so it can never leak into
    tier or badge decisions.

    Args:
        scores: ScoreSet with four 0-100 integers

    Returns:
        Weighted score (0-100)
    """
    weighted = sum(
        (Decimal(scores.get(category)) * weight for category, weight in ANALYTICS_WEIGHTS.items()),
        Decimal(0),
    )
    return round_half_up(weighted)


def get_lowest_score_category(scores: ScoreSet) -> Category:
    """
    Find the weakest category.

    Ties resolve to the earliest category in canonical order
    (performance, accessibility, best_practices, seo).
    """
    lowest_category, lowest_score = Category.PERFORMANCE, scores.performance
    for category, value in scores.items():
        if value < lowest_score:
            lowest_category, lowest_score = category, value
    return lowest_category


def summarize_scores(scores: ScoreSet) -> Dict[str, Any]:
    """
    Build a flat summary of a score set.

    Args:
        scores: ScoreSet to summarise

    Returns:
        Dict with overall_score, tier, badge, lowest_category and the raw scores
    """
    from .tiers import classify_tier, evaluate_badge

    overall = calculate_overall_score(scores)
    tier = classify_tier(scores)
    badge = evaluate_badge(scores, tier)

    logger.debug(f"Score summary: overall={overall} tier={tier.value} badge={badge.value}")

    return {
        "overall_score": overall,
        "tier": tier.value,
        "badge": badge.value,
        "lowest_category": get_lowest_score_category(scores).value,
        "scores": scores.to_dict(),
    }
