"""
Leaderboard API

Public leaderboard of high-scoring sites and the opt-in submission path.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from src.outcomes import (
    AnalyticsEvent,
    EventTracker,
    InMemoryLeaderboard,
    LeaderboardValidationError,
    summarize_leaderboard,
    validate_leaderboard_submission,
)
from src.utils.config import Settings
from api.dependencies import get_app_settings, get_event_tracker, get_leaderboard

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/leaderboard", tags=["Leaderboard"])


class LeaderboardSubmission(BaseModel):
    """Opt-in request; values are re-checked by the submission gate."""
    domain: Optional[str] = None
    score: Optional[int] = None
    badge: Optional[str] = None
    industry: Optional[str] = None
    email: Optional[str] = None


@router.get("")
def get_leaderboard_summary(
    limit: int = Query(default=10, ge=1, le=100),
    leaderboard: InMemoryLeaderboard = Depends(get_leaderboard),
) -> Dict[str, Any]:
    """Top performers and badge distribution."""
    return summarize_leaderboard(leaderboard.entries(), limit=limit)


@router.post("")
def submit_to_leaderboard(
    submission: LeaderboardSubmission,
    leaderboard: InMemoryLeaderboard = Depends(get_leaderboard),
    settings: Settings = Depends(get_app_settings),
    tracker: EventTracker = Depends(get_event_tracker),
) -> Dict[str, Any]:
    """
    Submit a site to the leaderboard.

    Only scores at or above the minimum with a matching badge are accepted.
    """
    try:
        entry = validate_leaderboard_submission(
            domain=submission.domain,
            score=submission.score,
            badge=submission.badge,
            industry=submission.industry,
            email=submission.email,
            min_score=settings.LEADERBOARD_MIN_SCORE,
        )
    except LeaderboardValidationError as e:
        logger.info(f"Leaderboard submission rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    leaderboard.add(entry)
    tracker.track(
        AnalyticsEvent.LEADERBOARD_OPTED_IN,
        {"badge": entry.badge.value, "overall_score": entry.score, "domain": entry.domain},
    )

    return {
        "success": True,
        "message": "Thank you for joining our leaderboard! Your site will be verified and added within 24 hours.",
        "submission_id": entry.id,
        "status": entry.status,
    }
