"""
Scoring Helper Types and Constants

Contains the ScoreSet model, tier/badge enums, classification thresholds,
and the rounding helpers shared by all scoring calculations.
"""

import math
from dataclasses import dataclass, asdict
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple, Union


# ============================================================================
# CATEGORIES
# ============================================================================

class Category(Enum):
    """Lighthouse scoring categories, in canonical order."""
    PERFORMANCE = "performance"
    ACCESSIBILITY = "accessibility"
    BEST_PRACTICES = "best_practices"
    SEO = "seo"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS: Dict[Category, str] = {
    Category.PERFORMANCE: "Performance",
    Category.ACCESSIBILITY: "Accessibility",
    Category.BEST_PRACTICES: "Best Practices",
    Category.SEO: "SEO",
}

# Accepted input keys per category (snake_case and the camelCase used by
# the PageSpeed collaborator and the browser client)
_CATEGORY_KEYS: Dict[Category, Tuple[str, ...]] = {
    Category.PERFORMANCE: ("performance",),
    Category.ACCESSIBILITY: ("accessibility",),
    Category.BEST_PRACTICES: ("best_practices", "bestPractices"),
    Category.SEO: ("seo",),
}


class InvalidScoreError(ValueError):
    """Raised when a score set does not satisfy the 0-100 integer contract."""


# ============================================================================
# SCORE SET
# ============================================================================

@dataclass(frozen=True)
class ScoreSet:
    """
    The four 0-100 category scores for one device class of one scan.

    Scoring functions trust these values. Call validate() at the boundary
    where scores enter the system.
    """
    performance: int
    accessibility: int
    best_practices: int
    seo: int

    def get(self, category: Category) -> int:
        return getattr(self, category.value)

    def values(self) -> List[int]:
        return [self.get(category) for category in Category]

    def items(self) -> List[Tuple[Category, int]]:
        return [(category, self.get(category)) for category in Category]

    def validate(self) -> "ScoreSet":
        """
        Check every field is an integer in [0, 100].

        Returns:
            self, so the call can be chained

        Raises:
            InvalidScoreError: if any field is out of contract
        """
        for category, value in self.items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidScoreError(
                    f"{category.value} score must be an integer, got {value!r}"
                )
            if not SCORE_MIN <= value <= SCORE_MAX:
                raise InvalidScoreError(
                    f"{category.value} score must be between {SCORE_MIN} and {SCORE_MAX}, got {value}"
                )
        return self

    def to_dict(self, camel_case: bool = False) -> Dict[str, int]:
        data = asdict(self)
        if camel_case:
            data["bestPractices"] = data.pop("best_practices")
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], validate: bool = True) -> "ScoreSet":
        """
        Build a ScoreSet from a mapping with snake_case or camelCase keys.

        Args:
            data: Mapping containing all four category scores
            validate: Run validate() on the result (default True)

        Raises:
            InvalidScoreError: if a category is missing or out of contract
        """
        values: Dict[str, Any] = {}
        for category, keys in _CATEGORY_KEYS.items():
            for key in keys:
                if key in data and data[key] is not None:
                    values[category.value] = data[key]
                    break
            else:
                raise InvalidScoreError(f"Missing {category.value} score")

        scores = cls(**values)
        return scores.validate() if validate else scores


# ============================================================================
# THRESHOLDS
# ============================================================================

SCORE_MIN = 0
SCORE_MAX = 100

# Tier classification
CRITICAL_OVERALL_BELOW = 60    # overall < 60 -> critical
CATEGORY_FLOOR = 50            # any category < 50 -> critical
PASS_OVERALL_MIN = 90          # overall >= 90 -> pass

# Quick wins
QUICK_WIN_THRESHOLD = 80       # category < 80 gets recommendations
MAX_QUICK_WINS = 6

# Leaderboard
LEADERBOARD_MIN_SCORE = 90

# Weights for the analytics-only score (never used for tier or badge)
ANALYTICS_WEIGHTS: Dict[Category, Decimal] = {
    Category.PERFORMANCE: Decimal("0.3"),
    Category.SEO: Decimal("0.3"),
    Category.ACCESSIBILITY: Decimal("0.25"),
    Category.BEST_PRACTICES: Decimal("0.15"),
}


# ============================================================================
# TIERS AND BADGES
# ============================================================================

class Tier(Enum):
    """Qualitative outcome bucket derived from a score set."""
    CRITICAL = "critical"        # overall < 60 or any category < 50
    NEEDS_BOOST = "needs_boost"  # 60 <= overall < 90
    PASS = "pass"                # overall >= 90


class BadgeLevel(Enum):
    """Reward badge shown for non-critical outcomes."""
    NONE = "none"
    BRONZE = "bronze"        # 60-74
    SILVER = "silver"        # 75-89
    GOLD = "gold"            # 90-97
    PLATINUM = "platinum"    # 98-100

    @property
    def rank(self) -> int:
        return _BADGE_ORDER.index(self)

    @property
    def is_awarded(self) -> bool:
        return self is not BadgeLevel.NONE


_BADGE_ORDER: List[BadgeLevel] = [
    BadgeLevel.NONE,
    BadgeLevel.BRONZE,
    BadgeLevel.SILVER,
    BadgeLevel.GOLD,
    BadgeLevel.PLATINUM,
]

# Inclusive (min, max) overall score band per badge
BADGE_RANGES: Dict[BadgeLevel, Tuple[int, int]] = {
    BadgeLevel.BRONZE: (60, 74),
    BadgeLevel.SILVER: (75, 89),
    BadgeLevel.GOLD: (90, 97),
    BadgeLevel.PLATINUM: (98, 100),
}


def coerce_tier(value: Union[Tier, str]) -> Tier:
    """Accept a Tier or its string value."""
    return value if isinstance(value, Tier) else Tier(value)


def coerce_badge(value: Union[BadgeLevel, str, None]) -> BadgeLevel:
    """Accept a BadgeLevel, its string value, or None (no badge)."""
    if value is None:
        return BadgeLevel.NONE
    return value if isinstance(value, BadgeLevel) else BadgeLevel(value)


# ============================================================================
# ROUNDING
# ============================================================================

def round_half_up(value: Union[int, float, Decimal]) -> int:
    """
    Round to the nearest integer, halves away from zero for non-negative input.

    Python's round() uses banker's rounding (round(89.5) == 90 but
    round(88.5) == 88), which would move scores across band boundaries.

    Args:
        value: Number to round

    Returns:
        Rounded integer
    """
    if isinstance(value, Decimal):
        return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return int(math.floor(value + 0.5))


def mean_half_up(values: List[int]) -> int:
    """
    Arithmetic mean of integers rounded half-up, in exact integer arithmetic.

    Args:
        values: Non-empty list of integers

    Returns:
        Rounded mean
    """
    n = len(values)
    return (2 * sum(values) + n) // (2 * n)
