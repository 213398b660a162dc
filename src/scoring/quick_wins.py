"""
Quick-Wins Generator

Produces a short checklist of low-effort remediation suggestions from a
score set. Every category scoring below 80 contributes its two scripted
recommendations, in category order Performance, Accessibility, SEO,
Best Practices. The list is truncated to 6 entries, so earlier
categories win when all four are weak.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Tuple

from .helpers import MAX_QUICK_WINS, QUICK_WIN_THRESHOLD, Category, ScoreSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuickWin:
    """A scripted remediation suggestion tied to one category."""
    category: str
    title: str
    description: str
    impact: str          # "high", "medium", "low"
    difficulty: str      # "easy", "medium", "hard"
    estimated_time: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _win(category: Category, title: str, description: str, impact: str, difficulty: str, estimated_time: str) -> QuickWin:
    return QuickWin(
        category=category.label,
        title=title,
        description=description,
        impact=impact,
        difficulty=difficulty,
        estimated_time=estimated_time,
    )


QUICK_WIN_ORDER: Tuple[Category, ...] = (
    Category.PERFORMANCE,
    Category.ACCESSIBILITY,
    Category.SEO,
    Category.BEST_PRACTICES,
)

QUICK_WIN_LIBRARY: Dict[Category, Tuple[QuickWin, ...]] = {
    Category.PERFORMANCE: (
        _win(Category.PERFORMANCE, "Optimize Images",
             "Compress and convert images to WebP format for faster loading",
             "high", "easy", "15 minutes"),
        _win(Category.PERFORMANCE, "Enable Browser Caching",
             "Set cache headers to reduce repeat load times",
             "high", "medium", "10 minutes"),
    ),
    Category.ACCESSIBILITY: (
        _win(Category.ACCESSIBILITY, "Add Alt Text to Images",
             "Provide descriptive alt text for all images",
             "high", "easy", "20 minutes"),
        _win(Category.ACCESSIBILITY, "Improve Color Contrast",
             "Ensure text meets WCAG color contrast requirements",
             "medium", "easy", "15 minutes"),
    ),
    Category.SEO: (
        _win(Category.SEO, "Add Meta Descriptions",
             "Write compelling meta descriptions for all pages",
             "medium", "easy", "30 minutes"),
        _win(Category.SEO, "Optimize Page Titles",
             "Create unique, descriptive titles for each page",
             "high", "easy", "20 minutes"),
    ),
    Category.BEST_PRACTICES: (
        _win(Category.BEST_PRACTICES, "Update to HTTPS",
             "Ensure all pages are served over secure HTTPS",
             "high", "medium", "30 minutes"),
        _win(Category.BEST_PRACTICES, "Fix Console Errors",
             "Resolve JavaScript errors shown in browser console",
             "medium", "medium", "45 minutes"),
    ),
}


def generate_quick_wins(scores: ScoreSet) -> List[QuickWin]:
    """
    Generate quick wins for every weak category.

    Args:
        scores: ScoreSet with four 0-100 integers

    Returns:
        Ordered list of at most 6 QuickWin records; empty when every
        category scores 80 or above
    """
    wins: List[QuickWin] = []

    for category in QUICK_WIN_ORDER:
        if scores.get(category) < QUICK_WIN_THRESHOLD:
            wins.extend(QUICK_WIN_LIBRARY[category])

    return wins[:MAX_QUICK_WINS]


def get_quick_wins_summary(wins: List[QuickWin]) -> Dict[str, Any]:
    """
    Summarise a quick-wins list by category and impact.

    Args:
        wins: Output of generate_quick_wins

    Returns:
        Summary dict with totals and distributions
    """
    by_category: Dict[str, int] = {}
    by_impact: Dict[str, int] = {"high": 0, "medium": 0, "low": 0}

    for win in wins:
        by_category[win.category] = by_category.get(win.category, 0) + 1
        by_impact[win.impact] = by_impact.get(win.impact, 0) + 1

    return {
        "total_wins": len(wins),
        "by_category": by_category,
        "by_impact": by_impact,
        "easy_wins": sum(1 for w in wins if w.difficulty == "easy"),
    }
