"""
Quick Wins Tests

Tests quick-win generation for weak categories and the summary helper.
"""

import pytest
from src.scoring import (
    MAX_QUICK_WINS,
    QUICK_WIN_LIBRARY,
    Category,
    QuickWin,
    ScoreSet,
    generate_quick_wins,
    get_quick_wins_summary,
)


def scores(perf, a11y, bp, seo) -> ScoreSet:
    return ScoreSet(performance=perf, accessibility=a11y, best_practices=bp, seo=seo)


class TestGenerateQuickWins:
    """Test quick-win generation."""

    def test_no_wins_when_all_strong(self, perfect_scores):
        """Every category at or above 80 yields nothing."""
        assert generate_quick_wins(perfect_scores) == []

    def test_threshold_is_exclusive(self):
        """A score of exactly 80 is not weak."""
        assert generate_quick_wins(scores(80, 80, 80, 80)) == []

    def test_single_weak_category(self):
        """A weak category contributes its two wins."""
        wins = generate_quick_wins(scores(79, 100, 100, 100))

        assert len(wins) == 2
        assert all(isinstance(w, QuickWin) for w in wins)
        assert [w.title for w in wins] == ["Optimize Images", "Enable Browser Caching"]
        assert all(w.category == "Performance" for w in wins)

    def test_seo_before_best_practices(self):
        """SEO wins come before Best Practices wins."""
        wins = generate_quick_wins(scores(100, 100, 79, 79))
        assert [w.category for w in wins] == ["SEO", "SEO", "Best Practices", "Best Practices"]

    def test_truncated_to_six(self, weak_scores):
        """All four weak categories are cut to six, dropping Best Practices."""
        wins = generate_quick_wins(weak_scores)

        assert len(wins) == MAX_QUICK_WINS
        assert [w.category for w in wins] == [
            "Performance", "Performance",
            "Accessibility", "Accessibility",
            "SEO", "SEO",
        ]

    def test_deterministic(self, weak_scores):
        assert generate_quick_wins(weak_scores) == generate_quick_wins(weak_scores)

    def test_library_covers_every_category(self):
        for category in Category:
            assert len(QUICK_WIN_LIBRARY[category]) == 2

    def test_fields(self):
        win = generate_quick_wins(scores(100, 100, 40, 100))[0]
        assert win.to_dict() == {
            "category": "Best Practices",
            "title": "Update to HTTPS",
            "description": "Ensure all pages are served over secure HTTPS",
            "impact": "high",
            "difficulty": "medium",
            "estimated_time": "30 minutes",
        }


class TestQuickWinsSummary:
    """Test quick-win summaries."""

    def test_summary(self, weak_scores):
        summary = get_quick_wins_summary(generate_quick_wins(weak_scores))

        assert summary["total_wins"] == 6
        assert summary["by_category"] == {"Performance": 2, "Accessibility": 2, "SEO": 2}
        assert summary["by_impact"] == {"high": 4, "medium": 2, "low": 0}
        assert summary["easy_wins"] == 5

    def test_empty_summary(self):
        summary = get_quick_wins_summary([])
        assert summary["total_wins"] == 0
        assert summary["by_category"] == {}
