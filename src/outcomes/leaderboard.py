"""
Leaderboard Submission Gate

Opt-in public leaderboard for high-scoring sites. A submission is only
accepted when its score reaches the minimum (90 by default) and its badge
matches the band the score falls in.
"""

import logging
import uuid
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Union

from src.scoring import (
    LEADERBOARD_MIN_SCORE,
    SCORE_MAX,
    SCORE_MIN,
    BadgeLevel,
    get_badge_for_score,
    mean_half_up,
)
from src.utils.domain import normalize_domain

logger = logging.getLogger(__name__)


class LeaderboardValidationError(ValueError):
    """Raised when a leaderboard submission is rejected."""


@dataclass
class LeaderboardEntry:
    """An accepted leaderboard submission awaiting verification."""
    domain: str
    score: int
    badge: BadgeLevel
    industry: str = "other"
    email: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    submitted_at: datetime = field(default_factory=datetime.utcnow)
    status: str = "pending_verification"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["badge"] = self.badge.value
        data["submitted_at"] = self.submitted_at.isoformat()
        return data


def validate_leaderboard_submission(
    domain: Optional[str],
    score: Optional[int],
    badge: Union[BadgeLevel, str, None],
    industry: Optional[str] = None,
    email: Optional[str] = None,
    min_score: int = LEADERBOARD_MIN_SCORE,
) -> LeaderboardEntry:
    """
    Validate a leaderboard opt-in.

    Args:
        domain: Site domain or URL
        score: Claimed overall score
        badge: Claimed badge
        industry: Optional industry hint
        email: Optional contact email
        min_score: Minimum overall score for acceptance

    Returns:
        LeaderboardEntry with status pending_verification

    Raises:
        LeaderboardValidationError: on any rejected field
    """
    normalized = normalize_domain(domain)
    if not normalized or score is None or not badge:
        raise LeaderboardValidationError("Domain, score, and badge are required")

    if isinstance(score, bool) or not isinstance(score, int) or not SCORE_MIN <= score <= SCORE_MAX:
        raise LeaderboardValidationError(f"Score must be between {SCORE_MIN} and {SCORE_MAX}")

    if score < min_score:
        raise LeaderboardValidationError(
            f"Only sites with scores of {min_score} or higher can join the leaderboard"
        )

    try:
        claimed = badge if isinstance(badge, BadgeLevel) else BadgeLevel(str(badge).lower())
    except ValueError:
        raise LeaderboardValidationError(f"Unknown badge: {badge}") from None

    expected = get_badge_for_score(score)
    if claimed is not expected:
        raise LeaderboardValidationError(
            f"Badge '{claimed.value}' does not match score {score} (expected '{expected.value}')"
        )

    entry = LeaderboardEntry(
        domain=normalized,
        score=score,
        badge=claimed,
        industry=industry or "other",
        email=email,
    )
    logger.info(f"Leaderboard submission accepted for {normalized} ({score}, {claimed.value})")
    return entry


class InMemoryLeaderboard:
    """Accepted submissions, one per domain (latest wins)."""

    def __init__(self):
        self._entries: Dict[str, LeaderboardEntry] = {}

    def add(self, entry: LeaderboardEntry) -> LeaderboardEntry:
        if entry.domain in self._entries:
            logger.info(f"Replacing leaderboard entry for {entry.domain}")
        self._entries[entry.domain] = entry
        return entry

    def entries(self) -> List[LeaderboardEntry]:
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


def summarize_leaderboard(entries: Iterable[LeaderboardEntry], limit: int = 10) -> Dict[str, Any]:
    """
    Build the public leaderboard payload.

    Args:
        entries: Accepted entries
        limit: Number of top performers to include

    Returns:
        Dict with total_sites, top_performers, average_score and badge distribution
    """
    entries = list(entries)
    ranked: List[LeaderboardEntry] = sorted(entries, key=lambda e: (-e.score, e.submitted_at))

    distribution = {badge.value: 0 for badge in BadgeLevel}
    for entry in entries:
        distribution[entry.badge.value] += 1

    return {
        "total_sites": len(entries),
        "top_performers": [
            {"domain": e.domain, "score": e.score, "badge": e.badge.value, "industry": e.industry}
            for e in ranked[:limit]
        ],
        "average_score": mean_half_up([e.score for e in entries]) if entries else 0,
        "distribution": distribution,
    }
