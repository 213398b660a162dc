"""
Outcome Content Policy Table

Static copy, CTAs and theming for each tier. The table is total over Tier
and is exposed read-only; personalisation and A/B variants override
fields downstream in the resolver, never here.
"""

from dataclasses import dataclass, asdict
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple, Union

from src.scoring import Tier, coerce_tier


# CTA action identifiers handled by the presentation layer
ACTION_OPEN_CALENDAR = "openCalendar"
ACTION_SEND_REPORT = "sendReport"
ACTION_APPLY_QUICK_WINS = "applyQuickWins"
ACTION_SHARE_BADGE = "shareBadge"

CTA_ACTIONS = (
    ACTION_OPEN_CALENDAR,
    ACTION_SEND_REPORT,
    ACTION_APPLY_QUICK_WINS,
    ACTION_SHARE_BADGE,
)


@dataclass(frozen=True)
class CallToAction:
    """A button on the outcome screen."""
    text: str
    action: str
    variant: str  # button style: default, destructive, outline, secondary, ghost, link


@dataclass(frozen=True)
class OutcomeTheme:
    """Tailwind classes for the tier's colour scheme."""
    primary: str
    secondary: str
    accent: str
    background: str


@dataclass(frozen=True)
class OutcomeContent:
    """Static outcome copy for one tier."""
    tier: Tier
    icon: str
    title: str
    subtitle: str
    bullets: Tuple[str, ...]
    primary_cta: CallToAction
    secondary_cta: CallToAction
    incentive: str
    confetti: bool
    gradient: str
    theme: OutcomeTheme

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["tier"] = self.tier.value
        data["bullets"] = list(self.bullets)
        return data


_OUTCOMES: Dict[Tier, OutcomeContent] = {
    Tier.CRITICAL: OutcomeContent(
        tier=Tier.CRITICAL,
        icon="alert-triangle",
        title="🚨 Grounded: Your site isn't flight-ready.",
        subtitle="Pages are loading slowly and key best practices are missing.",
        bullets=(
            "Heavy or unoptimized images slowing page loads",
            "Render-blocking JavaScript and CSS",
            "Missing caching strategies and CDN optimization",
        ),
        primary_cta=CallToAction("Fix my site now", ACTION_OPEN_CALENDAR, "destructive"),
        secondary_cta=CallToAction("Email me the rescue plan (PDF)", ACTION_SEND_REPORT, "outline"),
        incentive="Free quick-fix checklist included",
        confetti=False,
        gradient="from-red-500 to-orange-600",
        theme=OutcomeTheme(
            primary="text-red-400",
            secondary="text-red-300",
            accent="text-orange-400",
            background="bg-red-950/20 border-red-800/30",
        ),
    ),
    Tier.NEEDS_BOOST: OutcomeContent(
        tier=Tier.NEEDS_BOOST,
        icon="wrench",
        title="⚙️ Almost There: A few tweaks = big wins.",
        subtitle="We found optimization opportunities that could lift conversions.",
        bullets=(
            "Preload key fonts for faster text rendering",
            "Defer non-critical JavaScript execution",
            "Compress and optimize hero images",
        ),
        primary_cta=CallToAction("Apply quick wins", ACTION_APPLY_QUICK_WINS, "default"),
        secondary_cta=CallToAction("Send me the full report", ACTION_SEND_REPORT, "outline"),
        incentive="Mini win-plan delivered via email",
        confetti=False,
        gradient="from-yellow-500 to-amber-600",
        theme=OutcomeTheme(
            primary="text-yellow-400",
            secondary="text-yellow-300",
            accent="text-amber-400",
            background="bg-yellow-950/20 border-yellow-800/30",
        ),
    ),
    Tier.PASS: OutcomeContent(
        tier=Tier.PASS,
        icon="rocket",
        title="🚀 Ready for Lift-Off!",
        subtitle="You're in the top tier. Want to squeeze out that last 1–2s?",
        bullets=(
            "Maintain performance with weekly automated checks",
            "Fine-tune LCP and CLS for perfect scores",
            "A/B test hero sections for maximum impact",
        ),
        primary_cta=CallToAction("Book a growth tune-up", ACTION_OPEN_CALENDAR, "default"),
        secondary_cta=CallToAction("Share my badge", ACTION_SHARE_BADGE, "outline"),
        incentive="Leaderboard placement (opt-in available)",
        confetti=True,
        gradient="from-green-500 to-emerald-600",
        theme=OutcomeTheme(
            primary="text-green-400",
            secondary="text-green-300",
            accent="text-emerald-400",
            background="bg-green-950/20 border-green-800/30",
        ),
    ),
}

OUTCOMES: Mapping[Tier, OutcomeContent] = MappingProxyType(_OUTCOMES)


def get_outcome(tier: Union[Tier, str]) -> OutcomeContent:
    """
    Look up the static content bundle for a tier.

    Args:
        tier: Tier enum or its string value

    Returns:
        Frozen OutcomeContent
    """
    return OUTCOMES[coerce_tier(tier)]
