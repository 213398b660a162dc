"""
Outcome Resolver

Builds the complete outcome payload for a score set:

    ScoreSet -> overall score -> tier + badge
             -> static content for the tier
             -> industry bullets (if personalisation is on and the domain matches)
             -> CTA copy and badge animation (A/B variants)
             -> quick wins, confetti, leaderboard eligibility, analytics bundle

Everything is recomputed per call from the scores and domain; nothing is
cached or mutated.
"""

import logging
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional, Tuple

from src.flags import (
    DEFAULT_FLAGS,
    FeatureFlags,
    get_badge_animation_class,
    get_cta_texts,
    resolve_experiment_variants,
)
from src.scoring import (
    LEADERBOARD_MIN_SCORE,
    BadgeLevel,
    QuickWin,
    ScoreSet,
    Tier,
    calculate_overall_score,
    classify_tier,
    evaluate_badge,
    generate_quick_wins,
)
from .content import ACTION_APPLY_QUICK_WINS, CallToAction, OutcomeTheme, get_outcome
from .events import OutcomeEventProperties, UNKNOWN_DOMAIN
from .personalization import get_industry_personalization

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutcomeView:
    """Everything the outcome screen renders for one scan."""
    tier: Tier
    overall_score: int
    badge: BadgeLevel
    icon: str
    title: str
    subtitle: str
    bullets: Tuple[str, ...]
    primary_cta: CallToAction
    secondary_cta: CallToAction
    incentive: str
    incentive_display: str
    gradient: str
    theme: OutcomeTheme
    show_confetti: bool
    show_badge: bool
    badge_animation: str
    cta_variant: str
    leaderboard_eligible: bool
    industry_hint: Optional[str]
    event_properties: OutcomeEventProperties
    quick_wins: Tuple[QuickWin, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tier": self.tier.value,
            "overall_score": self.overall_score,
            "badge": self.badge.value,
            "icon": self.icon,
            "title": self.title,
            "subtitle": self.subtitle,
            "bullets": list(self.bullets),
            "primary_cta": asdict(self.primary_cta),
            "secondary_cta": asdict(self.secondary_cta),
            "incentive": self.incentive,
            "incentive_display": self.incentive_display,
            "gradient": self.gradient,
            "theme": asdict(self.theme),
            "show_confetti": self.show_confetti,
            "show_badge": self.show_badge,
            "badge_animation": self.badge_animation,
            "cta_variant": self.cta_variant,
            "leaderboard_eligible": self.leaderboard_eligible,
            "industry_hint": self.industry_hint,
            "quick_wins": [w.to_dict() for w in self.quick_wins],
            "event_properties": self.event_properties.to_dict(),
        }


def resolve_outcome_view(
    scores: ScoreSet,
    domain: Optional[str] = None,
    flags: Optional[FeatureFlags] = None,
    user_id: Optional[str] = None,
    industry: Optional[str] = None,
) -> OutcomeView:
    """
    Resolve the outcome payload for a score set.

    Args:
        scores: Validated ScoreSet
        domain: Visitor domain for personalisation and analytics
        flags: Feature flags; defaults when omitted
        user_id: Identifier for A/B bucketing
        industry: Explicit industry, wins over the domain heuristic

    Returns:
        Frozen OutcomeView
    """
    flags = flags or DEFAULT_FLAGS

    overall = calculate_overall_score(scores)
    tier = classify_tier(scores)
    badge = evaluate_badge(scores, tier)
    outcome = get_outcome(tier)

    # Personalisation
    personalization = get_industry_personalization(domain)
    bullets = outcome.bullets
    if flags.enable_industry_personalization and personalization.custom_bullets:
        bullets = personalization.custom_bullets

    # A/B variants
    cta_variant, animation = resolve_experiment_variants(flags, user_id)
    primary_cta, secondary_cta = _apply_cta_variant(
        outcome.primary_cta, outcome.secondary_cta, cta_variant, tier
    )

    quick_wins: Tuple[QuickWin, ...] = ()
    if flags.enable_quick_wins and primary_cta.action == ACTION_APPLY_QUICK_WINS:
        quick_wins = tuple(generate_quick_wins(scores))

    show_badge = badge.is_awarded and flags.enable_badge_sharing

    view = OutcomeView(
        tier=tier,
        overall_score=overall,
        badge=badge,
        icon=outcome.icon,
        title=outcome.title,
        subtitle=outcome.subtitle,
        bullets=bullets,
        primary_cta=primary_cta,
        secondary_cta=secondary_cta,
        incentive=outcome.incentive,
        incentive_display=flags.incentive_display,
        gradient=outcome.gradient,
        theme=outcome.theme,
        show_confetti=tier is Tier.PASS and outcome.confetti and flags.show_confetti,
        show_badge=show_badge,
        badge_animation=get_badge_animation_class(animation),
        cta_variant=cta_variant,
        leaderboard_eligible=(
            tier is Tier.PASS and overall >= LEADERBOARD_MIN_SCORE and flags.show_leaderboard
        ),
        industry_hint=industry or personalization.industry_hint,
        event_properties=OutcomeEventProperties(
            tier=tier,
            overall_score=overall,
            badge=badge,
            domain=domain or UNKNOWN_DOMAIN,
        ),
        quick_wins=quick_wins,
    )

    logger.debug(
        f"Resolved outcome for {domain or UNKNOWN_DOMAIN}: "
        f"tier={tier.value} overall={overall} badge={badge.value} cta={cta_variant}"
    )
    return view


def _apply_cta_variant(
    primary: CallToAction,
    secondary: CallToAction,
    variant: str,
    tier: Tier,
) -> Tuple[CallToAction, CallToAction]:
    """Swap in the variant's CTA copy; actions and styles are untouched."""
    if variant == "default":
        return primary, secondary

    texts = get_cta_texts(variant, tier)
    return (
        CallToAction(texts["primary"], primary.action, primary.variant),
        CallToAction(texts["secondary"], secondary.action, secondary.variant),
    )


def resolve_outcome_views(
    scan_scores: Dict[str, ScoreSet],
    domain: Optional[str] = None,
    flags: Optional[FeatureFlags] = None,
    user_id: Optional[str] = None,
) -> Dict[str, OutcomeView]:
    """
    Resolve one view per device class ("desktop", "mobile").

    Device classes are scored independently.
    """
    return {
        device: resolve_outcome_view(scores, domain=domain, flags=flags, user_id=user_id)
        for device, scores in scan_scores.items()
    }
