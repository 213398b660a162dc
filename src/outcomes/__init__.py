"""
Outcome Resolution

Turns scored scans into the gamified outcome screen:

- content: static per-tier copy, CTAs and theme (read-only policy table)
- personalization: industry hints from domain keywords
- resolver: the combined OutcomeView with A/B variants applied
- events: analytics event names and the outcome property bundle
- links: calendar, share and guide URLs behind the CTAs
- leaderboard: opt-in submission gate
"""

from .content import (
    CallToAction,
    OutcomeTheme,
    OutcomeContent,
    OUTCOMES,
    CTA_ACTIONS,
    ACTION_OPEN_CALENDAR,
    ACTION_SEND_REPORT,
    ACTION_APPLY_QUICK_WINS,
    ACTION_SHARE_BADGE,
    get_outcome,
)
from .personalization import (
    IndustryPattern,
    PersonalizationResult,
    EMPTY_PERSONALIZATION,
    INDUSTRY_PATTERNS,
    get_industry_personalization,
    list_industries,
)
from .events import (
    AnalyticsEvent,
    OutcomeEventProperties,
    EventTracker,
    UNKNOWN_DOMAIN,
    build_event_properties,
    analytics_score_property,
    log_event_sink,
)
from .resolver import (
    OutcomeView,
    resolve_outcome_view,
    resolve_outcome_views,
)
from .links import (
    LinkConfig,
    UnknownPlatformError,
    BADGE_SHARE_TEMPLATES,
    build_url,
    build_calendar_url,
    build_social_share_url,
    build_badge_share,
    build_report_email_subject,
    get_badge_share_text,
    get_quick_win_url,
)
from .leaderboard import (
    LeaderboardEntry,
    InMemoryLeaderboard,
    LeaderboardValidationError,
    validate_leaderboard_submission,
    summarize_leaderboard,
)

__all__ = [
    # Content
    "CallToAction",
    "OutcomeTheme",
    "OutcomeContent",
    "OUTCOMES",
    "CTA_ACTIONS",
    "ACTION_OPEN_CALENDAR",
    "ACTION_SEND_REPORT",
    "ACTION_APPLY_QUICK_WINS",
    "ACTION_SHARE_BADGE",
    "get_outcome",
    # Personalization
    "IndustryPattern",
    "PersonalizationResult",
    "EMPTY_PERSONALIZATION",
    "INDUSTRY_PATTERNS",
    "get_industry_personalization",
    "list_industries",
    # Events
    "AnalyticsEvent",
    "OutcomeEventProperties",
    "EventTracker",
    "UNKNOWN_DOMAIN",
    "build_event_properties",
    "analytics_score_property",
    "log_event_sink",
    # Resolver
    "OutcomeView",
    "resolve_outcome_view",
    "resolve_outcome_views",
    # Links
    "LinkConfig",
    "UnknownPlatformError",
    "BADGE_SHARE_TEMPLATES",
    "build_url",
    "build_calendar_url",
    "build_social_share_url",
    "build_badge_share",
    "build_report_email_subject",
    "get_badge_share_text",
    "get_quick_win_url",
    # Leaderboard
    "LeaderboardEntry",
    "InMemoryLeaderboard",
    "LeaderboardValidationError",
    "validate_leaderboard_submission",
    "summarize_leaderboard",
]
