"""
Outcome API

Endpoints the results page calls to render the gamified outcome:
- Outcome view for raw scores or a completed scan
- Quick-wins checklist
- Calendar and badge share links
"""

import logging
from typing import Any, Dict, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from src.flags import FeatureFlags
from src.outcomes import (
    AnalyticsEvent,
    EventTracker,
    build_badge_share,
    build_calendar_url,
    analytics_score_property,
    build_report_email_subject,
    resolve_outcome_view,
    resolve_outcome_views,
)
from src.scan import ScanStatus, ScanStore
from src.scoring import ScoreSet, generate_quick_wins, get_quick_wins_summary
from src.utils.config import Settings
from src.utils.domain import normalize_domain
from api.dependencies import get_app_settings, get_event_tracker, get_flags, get_scan_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Outcomes"])


# =============================================================================
# REQUEST MODELS
# =============================================================================

class ScoresPayload(BaseModel):
    """Four Lighthouse category scores (0-100)."""
    performance: int = Field(..., ge=0, le=100)
    accessibility: int = Field(..., ge=0, le=100)
    best_practices: int = Field(..., ge=0, le=100, alias="bestPractices")
    seo: int = Field(..., ge=0, le=100)

    class Config:
        populate_by_name = True

    def to_score_set(self) -> ScoreSet:
        return ScoreSet(
            performance=self.performance,
            accessibility=self.accessibility,
            best_practices=self.best_practices,
            seo=self.seo,
        )


class OutcomeRequest(BaseModel):
    """Request to resolve an outcome for raw scores."""
    scores: ScoresPayload
    domain: Optional[str] = Field(default=None, description="Site URL or domain")
    user_id: Optional[str] = Field(default=None, description="Visitor id for A/B bucketing")
    industry: Optional[str] = None


class QuickWinsRequest(BaseModel):
    scores: ScoresPayload


class CalendarLinkRequest(BaseModel):
    tier: Literal["critical", "needs_boost", "pass"]
    domain: Optional[str] = None
    scores: Optional[ScoresPayload] = None


class BadgeShareRequest(BaseModel):
    badge: Literal["bronze", "silver", "gold", "platinum"]
    domain: Optional[str] = None


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/outcome")
def get_outcome_for_scores(
    request: OutcomeRequest,
    flags: FeatureFlags = Depends(get_flags),
    tracker: EventTracker = Depends(get_event_tracker),
) -> Dict[str, Any]:
    """Resolve the outcome view for a set of scores."""
    domain = normalize_domain(request.domain)
    scores = request.scores.to_score_set()
    view = resolve_outcome_view(
        scores,
        domain=domain,
        flags=flags,
        user_id=request.user_id,
        industry=request.industry,
    )

    tracker.track_outcome(
        AnalyticsEvent.OUTCOME_VIEWED,
        view.event_properties,
        industry=view.industry_hint or "unknown",
        **analytics_score_property(scores),
    )
    return view.to_dict()


@router.get("/outcome/{scan_id}")
async def get_outcome_for_scan(
    scan_id: str,
    user_id: Optional[str] = None,
    store: ScanStore = Depends(get_scan_store),
    flags: FeatureFlags = Depends(get_flags),
) -> Dict[str, Any]:
    """
    Resolve outcome views for a completed scan, one per device class.

    Returns 409 while the scan is still running and 422 when it failed.
    """
    record = await store.get(scan_id)
    if not record:
        raise HTTPException(status_code=404, detail="Scan not found")
    if record.status is ScanStatus.FAILED:
        raise HTTPException(status_code=422, detail="Scan failed; no scores to resolve")
    if not record.is_complete:
        raise HTTPException(status_code=409, detail=f"Scan is {record.status.value}")

    domain = normalize_domain(record.url)
    views = resolve_outcome_views(record.device_scores(), domain=domain, flags=flags, user_id=user_id)

    return {
        "scan_id": record.id,
        "domain": domain,
        "outcomes": {device: view.to_dict() for device, view in views.items()},
    }


@router.post("/quick-wins")
def get_quick_wins(request: QuickWinsRequest) -> Dict[str, Any]:
    """Quick-wins checklist for weak categories."""
    wins = generate_quick_wins(request.scores.to_score_set())
    return {
        "quick_wins": [w.to_dict() for w in wins],
        "summary": get_quick_wins_summary(wins),
    }


@router.post("/links/calendar")
def get_calendar_link(
    request: CalendarLinkRequest,
    settings: Settings = Depends(get_app_settings),
) -> Dict[str, str]:
    """Consultation booking URL with outcome tracking parameters."""
    domain = normalize_domain(request.domain)
    url = build_calendar_url(
        request.tier,
        domain=domain,
        scores=request.scores.to_score_set() if request.scores else None,
        base_url=settings.CALENDAR_URL,
    )
    return {
        "url": url,
        "report_subject": build_report_email_subject(domain, request.tier),
    }


@router.post("/links/badge-share")
def get_badge_share_links(
    request: BadgeShareRequest,
    flags: FeatureFlags = Depends(get_flags),
    settings: Settings = Depends(get_app_settings),
) -> Dict[str, Any]:
    """Share captions and URLs for an earned badge."""
    if not flags.enable_badge_sharing:
        raise HTTPException(status_code=404, detail="Badge sharing is disabled")

    return build_badge_share(
        request.badge,
        domain=normalize_domain(request.domain),
        base_url=settings.PUBLIC_BASE_URL,
    )
