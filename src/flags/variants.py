"""
A/B Variant Assignment

Deterministic, sticky bucketing of a user or session identifier into one
of several named variants.

Hash:
    h = 0
    for each UTF-16 code unit c of the identifier:
        h = int32(h * 31 + c)
    bucket = |h| mod len(variants)

This is the classic polynomial string hash, so a browser client computing
the same function lands every user in the same bucket as the server.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple, Union

from src.scoring import Tier, coerce_tier
from .config import FeatureFlags

logger = logging.getLogger(__name__)


_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


# ============================================================================
# EXPERIMENT TABLES
# ============================================================================

CTA_VARIANTS: Dict[str, Dict[str, Dict[str, str]]] = {
    "default": {
        "critical": {
            "primary": "Fix my site now",
            "secondary": "Email me the rescue plan (PDF)",
        },
        "needs_boost": {
            "primary": "Apply quick wins",
            "secondary": "Send me the full report",
        },
        "pass": {
            "primary": "Book a growth tune-up",
            "secondary": "Share my badge",
        },
    },
    "urgent": {
        "critical": {
            "primary": "Emergency site repair",
            "secondary": "Rush me the fix plan",
        },
        "needs_boost": {
            "primary": "Boost now (5 min fixes)",
            "secondary": "Get instant improvements",
        },
        "pass": {
            "primary": "Maximize your edge",
            "secondary": "Show off your badge",
        },
    },
    "benefit": {
        "critical": {
            "primary": "Recover lost visitors",
            "secondary": "Get my recovery roadmap",
        },
        "needs_boost": {
            "primary": "Unlock hidden gains",
            "secondary": "See my potential wins",
        },
        "pass": {
            "primary": "Optimize for more growth",
            "secondary": "Join the elite club",
        },
    },
}

# CSS animation classes per badge animation variant
BADGE_ANIMATIONS: Dict[str, str] = {
    "bounce": "animate-bounce",
    "glow": "animate-pulse shadow-lg",
    "pulse": "animate-ping",
    "none": "",
}

CTA_TEXT_FLAG = "cta_text_variant"
BADGE_ANIMATION_FLAG = "badge_animation"

EXPERIMENTS: Dict[str, List[str]] = {
    CTA_TEXT_FLAG: list(CTA_VARIANTS),
    BADGE_ANIMATION_FLAG: list(BADGE_ANIMATIONS),
}


# ============================================================================
# HASHING
# ============================================================================

def string_hash(value: str) -> int:
    """
    32-bit signed polynomial hash over UTF-16 code units.

    Args:
        value: Identifier to hash

    Returns:
        Signed 32-bit integer
    """
    h = 0
    data = value.encode("utf-16-le")
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + code_unit) & _INT32_MASK
    return h - (1 << 32) if h & _INT32_SIGN else h


def assign_user_to_variant(user_id: str, variants: Sequence[str]) -> str:
    """
    Assign an identifier to one of the variants.

    Args:
        user_id: User or session identifier
        variants: Ordered variant names

    Returns:
        Chosen variant; empty string when variants is empty
    """
    if not variants:
        return ""
    return variants[abs(string_hash(user_id)) % len(variants)]


def assign_flag_variant(user_id: str, flag_name: str, variants: Sequence[str]) -> str:
    """
    Assign a variant for one experiment flag.

    The flag name salts the hash, so two experiments on the same user are
    bucketed independently.
    """
    return assign_user_to_variant(f"{flag_name}:{user_id}", variants)


def resolve_experiment_variants(
    flags: FeatureFlags,
    user_id: Optional[str] = None,
) -> Tuple[str, str]:
    """
    Resolve the CTA text and badge animation variants for a visitor.

    Without a user id, or with experiments disabled, the configured flag
    values are returned unchanged.

    Args:
        flags: Resolved feature flags
        user_id: Optional user or session identifier

    Returns:
        (cta_text_variant, badge_animation)
    """
    if not user_id or not flags.experiments_enabled:
        return flags.cta_text_variant, flags.badge_animation

    cta_variant = assign_flag_variant(user_id, CTA_TEXT_FLAG, EXPERIMENTS[CTA_TEXT_FLAG])
    animation = assign_flag_variant(user_id, BADGE_ANIMATION_FLAG, EXPERIMENTS[BADGE_ANIMATION_FLAG])
    logger.debug(f"Experiment buckets for {user_id}: cta={cta_variant} animation={animation}")
    return cta_variant, animation


def get_cta_texts(variant: str, tier: Union[Tier, str]) -> Dict[str, str]:
    """
    Look up primary/secondary CTA copy for a variant and tier.

    Raises:
        KeyError: for an unknown variant
    """
    return CTA_VARIANTS[variant][coerce_tier(tier).value]


def get_badge_animation_class(animation: str) -> str:
    """CSS class for a badge animation variant; unknown variants animate nothing."""
    return BADGE_ANIMATIONS.get(animation, "")
