"""
Scoring Module for the LaunchIn7 Site Scanner

Turns the four Lighthouse category scores of a scan into the values the
outcome screen is built from:

1. **Overall Score** (0-100)
   Unweighted mean of performance, accessibility, best practices and SEO,
   rounded half-up.

2. **Tier** (critical / needs_boost / pass)
   Critical when overall < 60 or any category < 50; pass at 90+.

3. **Badge** (none / bronze / silver / gold / platinum)
   Fixed bands over the overall score, never awarded for critical sites.

4. **Quick Wins**
   Up to 6 scripted recommendations for categories scoring below 80.

Example Usage:
    from src.scoring import ScoreSet, calculate_overall_score, classify_tier, evaluate_badge

    scores = ScoreSet(performance=92, accessibility=88, best_practices=95, seo=90)
    overall = calculate_overall_score(scores)   # 91
    tier = classify_tier(scores)                # Tier.PASS
    badge = evaluate_badge(scores, tier)        # BadgeLevel.GOLD
"""

from .helpers import (
    # Types
    Category,
    CATEGORY_LABELS,
    ScoreSet,
    InvalidScoreError,
    Tier,
    BadgeLevel,
    BADGE_RANGES,
    coerce_tier,
    coerce_badge,

    # Thresholds
    SCORE_MIN,
    SCORE_MAX,
    CRITICAL_OVERALL_BELOW,
    CATEGORY_FLOOR,
    PASS_OVERALL_MIN,
    QUICK_WIN_THRESHOLD,
    MAX_QUICK_WINS,
    LEADERBOARD_MIN_SCORE,
    ANALYTICS_WEIGHTS,

    # Rounding
    round_half_up,
    mean_half_up,
)

from .overall import (
    calculate_overall_score,
    calculate_analytics_score,
    get_lowest_score_category,
    summarize_scores,
)

from .tiers import (
    classify_tier,
    has_failing_category,
    evaluate_badge,
    get_badge_for_score,
)

from .quick_wins import (
    QuickWin,
    QUICK_WIN_LIBRARY,
    QUICK_WIN_ORDER,
    generate_quick_wins,
    get_quick_wins_summary,
)

__all__ = [
    # Helpers
    "Category",
    "CATEGORY_LABELS",
    "ScoreSet",
    "InvalidScoreError",
    "Tier",
    "BadgeLevel",
    "BADGE_RANGES",
    "coerce_tier",
    "coerce_badge",
    "SCORE_MIN",
    "SCORE_MAX",
    "CRITICAL_OVERALL_BELOW",
    "CATEGORY_FLOOR",
    "PASS_OVERALL_MIN",
    "QUICK_WIN_THRESHOLD",
    "MAX_QUICK_WINS",
    "LEADERBOARD_MIN_SCORE",
    "ANALYTICS_WEIGHTS",
    "round_half_up",
    "mean_half_up",

    # Overall
    "calculate_overall_score",
    "calculate_analytics_score",
    "get_lowest_score_category",
    "summarize_scores",

    # Tiers and badges
    "classify_tier",
    "has_failing_category",
    "evaluate_badge",
    "get_badge_for_score",

    # Quick wins
    "QuickWin",
    "QUICK_WIN_LIBRARY",
    "QUICK_WIN_ORDER",
    "generate_quick_wins",
    "get_quick_wins_summary",
]

__version__ = "1.0.0"
