"""
Shared API Dependencies

Process-wide singletons injected into route handlers with Depends().
Tests replace them through app.dependency_overrides.
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import HTTPException

from src.flags import FeatureFlags, get_feature_flags
from src.outcomes import EventTracker, InMemoryLeaderboard
from src.scan import InMemoryScanStore, ScanOrchestrator, ScanStore
from src.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


_orchestrator: Optional[ScanOrchestrator] = None


@lru_cache
def get_scan_store() -> ScanStore:
    """Get the process-wide scan store."""
    return InMemoryScanStore()


@lru_cache
def get_leaderboard() -> InMemoryLeaderboard:
    """Get the process-wide leaderboard."""
    return InMemoryLeaderboard()


def get_flags() -> FeatureFlags:
    """Feature flags resolved once from the configured environment."""
    return get_feature_flags()


@lru_cache
def get_event_tracker() -> EventTracker:
    """Analytics tracker; the app registers its log sink at startup."""
    return EventTracker(enabled=get_flags().enable_analytics)


def configure_orchestrator(orchestrator: Optional[ScanOrchestrator]) -> None:
    """Install the scan orchestrator wired to the real collaborators."""
    global _orchestrator
    _orchestrator = orchestrator


def is_orchestrator_configured() -> bool:
    return _orchestrator is not None


def get_orchestrator() -> ScanOrchestrator:
    """Get the configured orchestrator or fail with 503."""
    if _orchestrator is None:
        raise HTTPException(status_code=503, detail="Scan service not configured")
    return _orchestrator


def get_app_settings() -> Settings:
    return get_settings()
