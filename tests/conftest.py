"""
Pytest Configuration and Shared Fixtures

Provides common fixtures and configuration for all test modules.
"""

import pytest
from typing import Any, Dict
from unittest.mock import AsyncMock

from src.flags import DEFAULT_FLAGS, FeatureFlags
from src.scan import InMemoryScanStore
from src.scoring import ScoreSet


# ============================================================================
# Score Fixtures
# ============================================================================

@pytest.fixture
def perfect_scores() -> ScoreSet:
    """All categories at 100."""
    return ScoreSet(performance=100, accessibility=100, best_practices=100, seo=100)


@pytest.fixture
def pass_scores() -> ScoreSet:
    """Mean 97.5 rounds up to 98: pass tier, platinum badge."""
    return ScoreSet(performance=95, accessibility=98, best_practices=100, seo=97)


@pytest.fixture
def needs_boost_scores() -> ScoreSet:
    """Mean 80 with a weak performance score: needs_boost, silver."""
    return ScoreSet(performance=70, accessibility=80, best_practices=85, seo=85)


@pytest.fixture
def critical_scores() -> ScoreSet:
    """Mean 85 but performance below the floor: critical, no badge."""
    return ScoreSet(performance=40, accessibility=100, best_practices=100, seo=100)


@pytest.fixture
def weak_scores() -> ScoreSet:
    """Every category below the quick-win threshold."""
    return ScoreSet(performance=55, accessibility=65, best_practices=70, seo=60)


# ============================================================================
# Flag Fixtures
# ============================================================================

@pytest.fixture
def default_flags() -> FeatureFlags:
    return DEFAULT_FLAGS


@pytest.fixture
def all_features_flags() -> FeatureFlags:
    """Every optional outcome feature switched on."""
    return FeatureFlags(
        show_confetti=True,
        enable_badge_sharing=True,
        show_leaderboard=True,
        enable_quick_wins=True,
        enable_industry_personalization=True,
    )


# ============================================================================
# Scan Fixtures
# ============================================================================

def make_device_payload(
    performance: int = 92,
    accessibility: int = 95,
    best_practices: int = 100,
    seo: int = 91,
) -> Dict[str, Any]:
    """Performance scanner output for one device."""
    return {
        "scores": {
            "performance": performance,
            "accessibility": accessibility,
            "best_practices": best_practices,
            "seo": seo,
        },
        "core_web_vitals": {"lcp": "1.8 s", "fid": "40 ms", "cls": "0.02", "tbt": "120 ms"},
        "top_issues": [
            {
                "title": "Remove unused CSS",
                "description": "Reduce stylesheet size by removing unused rules",
                "severity": "important",
            },
        ],
    }


@pytest.fixture
def scan_store() -> InMemoryScanStore:
    return InMemoryScanStore()


@pytest.fixture
def desktop_payload() -> Dict[str, Any]:
    return make_device_payload()


@pytest.fixture
def mobile_payload() -> Dict[str, Any]:
    return make_device_payload(performance=64, accessibility=90, best_practices=96, seo=88)


@pytest.fixture
def performance_scanner(desktop_payload, mobile_payload) -> AsyncMock:
    """Scanner returning a payload per strategy."""
    payloads = {"desktop": desktop_payload, "mobile": mobile_payload}

    async def scan(url: str, strategy: str) -> Dict[str, Any]:
        return payloads[strategy]

    return AsyncMock(side_effect=scan)


@pytest.fixture
def brand_extractor() -> AsyncMock:
    return AsyncMock(return_value={
        "businessName": "Acme Shop",
        "primaryColor": "#1a73e8",
        "fontFamily": "Inter",
        "tagline": "Everything you need",
    })


@pytest.fixture
def screenshot_capturer() -> AsyncMock:
    return AsyncMock(return_value="iVBORw0KGgoAAAANSUhEUgAAAAEAAAAB")
