"""
Tier Classification and Badge Evaluation

Tier rules (first match wins):
    1. overall < 60 OR any category < 50  -> critical
    2. overall >= 90                      -> pass
    3. otherwise                          -> needs_boost

The category floor is checked even when the mean would qualify for a
better tier: one catastrophic category forces critical.

Badge bands over the overall score (never awarded for critical):
    98-100 platinum, 90-97 gold, 75-89 silver, 60-74 bronze, <60 none
"""

import logging
from typing import Union

from .helpers import (
    BADGE_RANGES,
    CATEGORY_FLOOR,
    CRITICAL_OVERALL_BELOW,
    PASS_OVERALL_MIN,
    BadgeLevel,
    ScoreSet,
    Tier,
    coerce_tier,
)
from .overall import calculate_overall_score

logger = logging.getLogger(__name__)


def classify_tier(scores: ScoreSet) -> Tier:
    """
    Classify a score set into an outcome tier.

    Args:
        scores: ScoreSet with four 0-100 integers

    Returns:
        Tier enum
    """
    overall = calculate_overall_score(scores)

    if overall < CRITICAL_OVERALL_BELOW or has_failing_category(scores):
        return Tier.CRITICAL

    if overall >= PASS_OVERALL_MIN:
        return Tier.PASS

    return Tier.NEEDS_BOOST


def has_failing_category(scores: ScoreSet) -> bool:
    """True when any single category is below the floor."""
    return any(value < CATEGORY_FLOOR for value in scores.values())


def get_badge_for_score(overall_score: int) -> BadgeLevel:
    """
    Map an overall score onto its badge band, ignoring tier.

    Args:
        overall_score: Overall score (0-100)

    Returns:
        BadgeLevel enum (NONE below the bronze band)
    """
    for badge in (BadgeLevel.PLATINUM, BadgeLevel.GOLD, BadgeLevel.SILVER, BadgeLevel.BRONZE):
        if overall_score >= BADGE_RANGES[badge][0]:
            return badge
    return BadgeLevel.NONE


def evaluate_badge(scores: ScoreSet, tier: Union[Tier, str]) -> BadgeLevel:
    """
    Determine the badge for a score set.

    Args:
        scores: ScoreSet with four 0-100 integers
        tier: Tier already classified for the same scores

    Returns:
        BadgeLevel enum; always NONE for critical
    """
    if coerce_tier(tier) is Tier.CRITICAL:
        return BadgeLevel.NONE

    return get_badge_for_score(calculate_overall_score(scores))
