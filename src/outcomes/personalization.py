"""
Industry Personalization

Guesses the visitor's industry from keywords in their domain and swaps in
industry-specific outcome bullets. Patterns are checked in priority order
(e-commerce, then SaaS, then content), so "appstore.io" is e-commerce.
No match is the common case and yields an empty result.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndustryPattern:
    """Keyword set and replacement bullets for one industry."""
    industry: str
    keywords: Tuple[str, ...]
    bullets: Tuple[str, ...]


@dataclass(frozen=True)
class PersonalizationResult:
    """Industry hint and custom bullets; both empty when nothing matched."""
    industry_hint: Optional[str] = None
    custom_bullets: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.industry_hint is None

    def to_dict(self) -> Dict[str, object]:
        if self.is_empty:
            return {}
        return {
            "industry_hint": self.industry_hint,
            "custom_bullets": list(self.custom_bullets),
        }


EMPTY_PERSONALIZATION = PersonalizationResult()

# Checked in order; first match wins
INDUSTRY_PATTERNS: Tuple[IndustryPattern, ...] = (
    IndustryPattern(
        industry="e-commerce",
        keywords=("shop", "store", "cart", "buy"),
        bullets=(
            "Optimize product image loading for faster browsing",
            "Implement efficient cart and checkout flows",
            "Add structured data for rich product snippets",
        ),
    ),
    IndustryPattern(
        industry="saas",
        keywords=("app", "platform", "software", "saas"),
        bullets=(
            "Optimize dashboard loading and interactivity",
            "Implement progressive loading for data tables",
            "Add proper focus management for accessibility",
        ),
    ),
    IndustryPattern(
        industry="content",
        keywords=("blog", "news", "media", "content"),
        bullets=(
            "Optimize article loading and reading experience",
            "Implement lazy loading for images and videos",
            "Add proper heading structure for better SEO",
        ),
    ),
)


def get_industry_personalization(domain: Optional[str] = None) -> PersonalizationResult:
    """
    Match a domain against the industry keyword sets.

    Args:
        domain: Visitor domain; None or empty yields an empty result

    Returns:
        PersonalizationResult
    """
    if not domain:
        return EMPTY_PERSONALIZATION

    domain_lower = domain.lower()

    for pattern in INDUSTRY_PATTERNS:
        if any(keyword in domain_lower for keyword in pattern.keywords):
            logger.debug(f"Domain '{domain}' matched industry '{pattern.industry}'")
            return PersonalizationResult(
                industry_hint=pattern.industry,
                custom_bullets=pattern.bullets,
            )

    return EMPTY_PERSONALIZATION


def list_industries() -> List[str]:
    """Industry hints in match priority order."""
    return [pattern.industry for pattern in INDUSTRY_PATTERNS]
