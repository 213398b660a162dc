"""
Analytics Events

Defines the event names emitted by the outcome screen and the stable
property bundle {tier, overall_score, badge, domain} attached to them.

Delivery is handled by injected sinks (Plausible, GA4, a queue...). A
failing sink is logged and skipped; analytics must never break a render.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from src.scoring import (
    BadgeLevel,
    ScoreSet,
    Tier,
    calculate_analytics_score,
    calculate_overall_score,
    classify_tier,
    evaluate_badge,
)

logger = logging.getLogger(__name__)


class AnalyticsEvent(Enum):
    """Event names tracked by the outcome flow."""
    OUTCOME_VIEWED = "outcome_viewed"
    CTA_CLICKED = "cta_clicked"
    BADGE_SHARED = "badge_shared"
    QUICK_WINS_OPENED = "quick_wins_opened"
    REPORT_REQUESTED = "report_requested"
    CALENDAR_OPENED = "calendar_opened"
    CONFETTI_TRIGGERED = "confetti_triggered"
    LEADERBOARD_OPTED_IN = "leaderboard_opted_in"


UNKNOWN_DOMAIN = "unknown"


@dataclass(frozen=True)
class OutcomeEventProperties:
    """The four outcome fields every analytics event carries."""
    tier: Tier
    overall_score: int
    badge: BadgeLevel
    domain: str = UNKNOWN_DOMAIN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tier": self.tier.value,
            "overall_score": self.overall_score,
            "badge": self.badge.value,
            "domain": self.domain,
        }


def build_event_properties(scores: ScoreSet, domain: Optional[str] = None) -> OutcomeEventProperties:
    """
    Build the analytics bundle from a score set.

    overall_score is the canonical mean, the same value the tier and badge
    were derived from.
    """
    tier = classify_tier(scores)
    return OutcomeEventProperties(
        tier=tier,
        overall_score=calculate_overall_score(scores),
        badge=evaluate_badge(scores, tier),
        domain=domain or UNKNOWN_DOMAIN,
    )


EventSink = Callable[[str, Dict[str, Any]], None]


class EventTracker:
    """
    Fan analytics events out to registered sinks.

    Args:
        enabled: When False, track() is a no-op (feature flag enable_analytics)
        sinks: Callables receiving (event_name, properties)
    """

    def __init__(self, enabled: bool = True, sinks: Optional[List[EventSink]] = None):
        self.enabled = enabled
        self.sinks: List[EventSink] = list(sinks or [])

    def add_sink(self, sink: EventSink) -> None:
        self.sinks.append(sink)

    def track(self, event: AnalyticsEvent, properties: Optional[Dict[str, Any]] = None) -> int:
        """
        Send an event to every sink.

        Returns:
            Number of sinks that accepted the event
        """
        if not self.enabled:
            return 0

        props = dict(properties or {})
        delivered = 0

        logger.debug(f"Analytics event: {event.value} {props}")

        for sink in self.sinks:
            try:
                sink(event.value, props)
                delivered += 1
            except Exception as e:
                logger.warning(f"Analytics sink failed for {event.value}: {e}")

        return delivered

    def track_outcome(
        self,
        event: AnalyticsEvent,
        bundle: OutcomeEventProperties,
        **extra: Any,
    ) -> int:
        """Track an event carrying the outcome bundle plus extra properties."""
        return self.track(event, {**bundle.to_dict(), **extra})


def analytics_score_property(scores: ScoreSet) -> Dict[str, int]:
    """
    Weighted score some CTA events report as "weighted_score".

    Never substitutes for the bundle's overall_score.
    """
    return {"weighted_score": calculate_analytics_score(scores)}


def log_event_sink(name: str, properties: Dict[str, Any]) -> None:
    """Sink that writes events to the application log."""
    logger.info(f"[analytics] {name} {properties}")
