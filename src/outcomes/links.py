"""
Link Builders

URLs and share copy behind the outcome CTAs: the consultation calendar,
social badge sharing, report email subjects and quick-win guides.
All builders are pure; base URLs can be overridden from settings.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional, Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from src.scoring import BadgeLevel, ScoreSet, Tier, coerce_badge, coerce_tier

logger = logging.getLogger(__name__)


class UnknownPlatformError(ValueError):
    """Raised for a social platform without share support."""


@dataclass(frozen=True)
class LinkConfig:
    """A link with tracking parameters."""
    url: str
    title: str = ""
    open_in_new_tab: bool = True
    tracking_params: Dict[str, str] = field(default_factory=dict)


CALENDAR_LINK = LinkConfig(
    url="https://calendly.com/launchin7/website-consultation",
    title="Book Your Free Website Consultation",
    tracking_params={
        "utm_source": "app",
        "utm_medium": "cta",
        "utm_campaign": "consultation",
    },
)

BLOG_LINK = LinkConfig(
    url="https://launchin7.com/blog",
    title="Web Performance Blog",
    tracking_params={"utm_source": "app", "utm_medium": "content"},
)

QUICK_WIN_GUIDES: Dict[str, LinkConfig] = {
    "images": LinkConfig("https://launchin7.com/guides/image-optimization", "Image Optimization Guide"),
    "caching": LinkConfig("https://launchin7.com/guides/browser-caching", "Browser Caching Setup"),
    "performance": LinkConfig("https://launchin7.com/guides/core-web-vitals", "Core Web Vitals Optimization"),
    "accessibility": LinkConfig("https://launchin7.com/guides/web-accessibility", "Web Accessibility Checklist"),
}

SOCIAL_SHARE_URLS: Dict[str, str] = {
    "instagram": "https://www.instagram.com/",
    "linkedin": "https://www.linkedin.com/sharing/share-offsite/",
    "facebook": "https://www.facebook.com/sharer/sharer.php",
}

BADGE_SHARE_TEMPLATES: Dict[BadgeLevel, Dict[str, str]] = {
    BadgeLevel.BRONZE: {
        "instagram": "Just analyzed my website performance and earned a Bronze badge! 🥉 Working on those optimizations with @LaunchIn7 #WebPerformance #BronzeBadge #WebsiteOptimization",
        "linkedin": "Proud to share that our website just earned a Bronze performance badge! Always room for improvement and optimization. 🥉",
        "facebook": "Our website just got graded and we earned a Bronze badge! Time to optimize and improve our performance! 🥉",
    },
    BadgeLevel.SILVER: {
        "instagram": "Website performance check: Silver badge achieved! 🥈 Getting closer to that perfect score with @LaunchIn7 #WebPerformance #SilverBadge #DigitalExcellence",
        "linkedin": "Excited to share our website just earned a Silver performance badge! Great progress on our optimization journey. 🥈",
        "facebook": "Just got our website graded - Silver badge earned! 🥈 Making great progress on performance optimization!",
    },
    BadgeLevel.GOLD: {
        "instagram": "🏆 Gold badge for website performance! So close to perfect scores. Thanks @LaunchIn7 for the analysis! #WebPerformance #GoldStandard #WebsiteGoals #DigitalWins",
        "linkedin": "Thrilled to announce our website just earned a Gold performance badge! 🏆 High-performing websites drive better user experiences.",
        "facebook": "Incredible news! Our website just earned a Gold performance badge! 🏆 All that optimization work is paying off!",
    },
    BadgeLevel.PLATINUM: {
        "instagram": "🚀 PLATINUM BADGE! Our website just scored in the top tier for performance! Peak optimization achieved with @LaunchIn7 #WebPerformance #Platinum #TopTier #WebsiteWins #DigitalExcellence",
        "linkedin": "Proud to share our website just achieved PLATINUM status for performance! 🚀 When you prioritize user experience, it shows.",
        "facebook": "AMAZING! Our website just earned a PLATINUM performance badge! 🚀 Top tier performance unlocked!",
    },
}


def build_url(
    link: Union[LinkConfig, str],
    additional_params: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Add tracking and extra query parameters to a link.

    Later parameters replace earlier ones with the same name, including
    any already present on the URL.

    Args:
        link: LinkConfig or plain URL
        additional_params: Extra query parameters

    Returns:
        URL string
    """
    if isinstance(link, str):
        link = LinkConfig(url=link)

    parts = urlsplit(link.url)
    params: Dict[str, str] = dict(parse_qsl(parts.query, keep_blank_values=True))
    params.update(link.tracking_params)
    params.update(additional_params or {})

    return urlunsplit(parts._replace(query=urlencode(params)))


def build_calendar_url(
    tier: Union[Tier, str],
    domain: Optional[str] = None,
    scores: Optional[ScoreSet] = None,
    base_url: Optional[str] = None,
) -> str:
    """
    Build the consultation booking URL for an outcome.

    Args:
        tier: Outcome tier (sent as utm_content)
        domain: Visitor domain (sent as utm_term)
        scores: Scores sent as "performance,accessibility,best_practices,seo"
        base_url: Override for the calendar URL

    Returns:
        Calendar URL with tracking parameters
    """
    link = CALENDAR_LINK
    if base_url:
        link = LinkConfig(url=base_url, title=link.title, tracking_params=link.tracking_params)

    params = {"utm_content": coerce_tier(tier).value}
    if domain:
        params["utm_term"] = domain
    if scores is not None:
        params["scores"] = ",".join(str(v) for v in scores.values())

    return build_url(link, params)


def build_social_share_url(
    platform: str,
    url: Optional[str] = None,
    title: Optional[str] = None,
    text: Optional[str] = None,
) -> str:
    """
    Build a share URL for a social platform.

    Instagram has no share endpoint; its base URL is returned and the
    caption is copied by the client instead.

    Raises:
        UnknownPlatformError: for unsupported platforms
    """
    platform_key = platform.lower()
    if platform_key not in SOCIAL_SHARE_URLS:
        raise UnknownPlatformError(f"Unsupported share platform: {platform}")

    base = SOCIAL_SHARE_URLS[platform_key]
    params: Dict[str, str] = {}

    if platform_key == "linkedin":
        if url:
            params["url"] = url
        if title:
            params["title"] = title
        if text:
            params["summary"] = text
    elif platform_key == "facebook":
        if url:
            params["u"] = url
        if title:
            params["quote"] = title

    return build_url(base, params) if params else base


def get_badge_share_text(badge: Union[BadgeLevel, str, None], platform: str) -> str:
    """
    Share caption for a badge on a platform.

    Raises:
        ValueError: when there is no badge to share
        UnknownPlatformError: for unsupported platforms
    """
    level = coerce_badge(badge)
    if not level.is_awarded:
        raise ValueError("No badge available to share")

    templates = BADGE_SHARE_TEMPLATES[level]
    if platform.lower() not in templates:
        raise UnknownPlatformError(f"Unsupported share platform: {platform}")
    return templates[platform.lower()]


def build_badge_share(
    badge: Union[BadgeLevel, str, None],
    domain: Optional[str] = None,
    base_url: str = "https://launchin7.com",
    platforms: Iterable[str] = ("linkedin", "facebook", "instagram"),
) -> Dict[str, object]:
    """
    Assemble everything the share dialog needs for a badge.

    Returns:
        Dict with title, url, and per-platform share_url/text
    """
    level = coerce_badge(badge)
    if not level.is_awarded:
        raise ValueError("No badge available to share")

    title = f"{level.value.capitalize()} Website Performance Badge"
    page_url = build_url(base_url, {"domain": domain}) if domain else base_url

    shares: Dict[str, Dict[str, str]] = {}
    for platform in platforms:
        text = get_badge_share_text(level, platform)
        shares[platform] = {
            "text": text,
            "share_url": build_social_share_url(platform, url=page_url, title=title, text=text),
        }

    return {"badge": level.value, "title": title, "url": page_url, "platforms": shares}


def build_report_email_subject(domain: Optional[str] = None, tier: Union[Tier, str, None] = None) -> str:
    """Subject line for the emailed PDF report."""
    base_subject = "Website Performance Report"

    if domain and tier:
        return f"{base_subject} for {domain} ({coerce_tier(tier).value.upper()} tier)"
    if domain:
        return f"{base_subject} for {domain}"
    return base_subject


def get_quick_win_url(issue_type: str) -> str:
    """Guide URL for an issue type; falls back to the blog."""
    guide = QUICK_WIN_GUIDES.get(issue_type)
    return build_url(guide if guide else BLOG_LINK)
