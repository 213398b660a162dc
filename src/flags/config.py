"""
Feature Flag Configuration

Feature flags control the outcome screen: which extras are shown, which
A/B variant is the default, and which personalisation runs.

Flags are resolved once per process from the deployment environment by
merging ENVIRONMENT_OVERRIDES over DEFAULT_FLAGS. The resulting
FeatureFlags object is immutable and is passed explicitly to whatever needs
it; nothing below the API layer reads the environment.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)


CtaTextVariant = Literal["default", "urgent", "benefit"]
IncentiveDisplay = Literal["always", "hover", "never"]
BadgeAnimation = Literal["bounce", "glow", "pulse", "none"]


class FeatureFlags(BaseModel):
    """Process-wide feature flags. Read-only once constructed."""

    # Core feature toggles
    show_confetti: bool = False
    enable_badge_sharing: bool = True
    show_leaderboard: bool = True
    enable_quick_wins: bool = True

    # A/B testing variants
    cta_text_variant: CtaTextVariant = "default"
    incentive_display: IncentiveDisplay = "always"
    badge_animation: BadgeAnimation = "glow"
    experiments_enabled: bool = False  # bucket users instead of using the variants above

    # Personalization
    enable_industry_personalization: bool = True
    show_competitor_comparison: bool = False
    dynamic_pricing: bool = False

    # UI/UX experiments
    outcome_layout: Literal["card", "banner", "sidebar"] = "card"
    score_display_style: Literal["minimal", "detailed", "gauge"] = "detailed"
    color_theme: Literal["terminal", "modern", "brand"] = "terminal"

    # Advanced features
    enable_analytics: bool = True
    enable_email_capture: bool = True
    show_social_proof: bool = True
    enable_retargeting: bool = False  # privacy-first

    class Config:
        frozen = True
        extra = "forbid"

    def is_enabled(self, flag: str) -> bool:
        """Check a boolean flag by name."""
        value = getattr(self, flag)
        if not isinstance(value, bool):
            raise ValueError(f"Flag '{flag}' is a variant, not a toggle")
        return value

    def get_variant(self, flag: str) -> Any:
        """Get any flag value by name."""
        return getattr(self, flag)


DEFAULT_FLAGS = FeatureFlags()

ENVIRONMENT_OVERRIDES: Dict[str, Dict[str, Any]] = {
    "development": {
        "enable_analytics": False,
        "enable_retargeting": False,
        "show_leaderboard": True,
    },
    "staging": {
        "enable_analytics": True,
        "enable_retargeting": False,
        "show_competitor_comparison": True,
    },
    "production": {
        "enable_analytics": True,
        "enable_retargeting": True,
        "show_competitor_comparison": False,
    },
}


def resolve_feature_flags(
    environment: Optional[str],
    overrides: Optional[Dict[str, Any]] = None,
) -> FeatureFlags:
    """
    Merge environment overrides over the defaults.

    Args:
        environment: Deployment environment (development, staging, production).
            Unknown or missing environments get the defaults.
        overrides: Extra explicit overrides applied last

    Returns:
        Immutable FeatureFlags
    """
    merged = DEFAULT_FLAGS.model_dump()
    env_key = (environment or "").lower()

    if env_key not in ENVIRONMENT_OVERRIDES:
        logger.debug(f"No flag overrides for environment '{environment}'")
    merged.update(ENVIRONMENT_OVERRIDES.get(env_key, {}))
    merged.update(overrides or {})

    return FeatureFlags(**merged)


@lru_cache
def get_feature_flags() -> FeatureFlags:
    """Get the cached flags for the configured environment."""
    from src.utils.config import get_settings

    settings = get_settings()
    flags = resolve_feature_flags(settings.ENVIRONMENT)
    logger.info(f"Feature flags resolved for environment '{settings.ENVIRONMENT}'")
    return flags
