"""
Scan Data Models

A scan record collects everything gathered for one submitted URL:
per-device Lighthouse scores, Core Web Vitals and issues, an optional
screenshot, and best-effort brand elements.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from src.scoring import (
    BadgeLevel,
    ScoreSet,
    calculate_overall_score,
    classify_tier,
    evaluate_badge,
)


class ScanStatus(Enum):
    """Scan lifecycle states."""
    RUNNING = "running"
    COMPLETE = "complete"
    FAILED = "failed"


class DeviceClass(Enum):
    """PageSpeed strategies; each is scored independently."""
    DESKTOP = "desktop"
    MOBILE = "mobile"


@dataclass
class CoreWebVitals:
    """Display strings as reported by PageSpeed (e.g. "2.1 s")."""
    lcp: str = "N/A"
    fid: str = "N/A"
    cls: str = "N/A"
    tbt: str = "N/A"


@dataclass
class Issue:
    """A Lighthouse audit that failed."""
    title: str
    description: str
    severity: str = "minor"  # critical, important, minor


@dataclass
class DeviceScan:
    """Results for one device class."""
    scores: ScoreSet
    core_web_vitals: CoreWebVitals = field(default_factory=CoreWebVitals)
    top_issues: List[Issue] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeviceScan":
        """Build from collaborator output; validates the scores."""
        vitals = data.get("core_web_vitals") or data.get("coreWebVitals") or {}
        issues = data.get("top_issues") or data.get("topIssues") or []
        return cls(
            scores=ScoreSet.from_dict(data.get("scores", data)),
            core_web_vitals=CoreWebVitals(**{k: str(v) for k, v in vitals.items() if k in ("lcp", "fid", "cls", "tbt")}),
            top_issues=[
                Issue(
                    title=i.get("title", ""),
                    description=i.get("description", ""),
                    severity=i.get("severity", "minor"),
                )
                for i in issues
            ],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scores": self.scores.to_dict(),
            "core_web_vitals": asdict(self.core_web_vitals),
            "top_issues": [asdict(i) for i in self.top_issues],
        }


@dataclass
class BrandElements:
    """Best-effort brand details scraped from the homepage."""
    logo: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    font_family: Optional[str] = None
    business_name: Optional[str] = None
    tagline: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BrandElements":
        aliases = {
            "primaryColor": "primary_color",
            "secondaryColor": "secondary_color",
            "fontFamily": "font_family",
            "businessName": "business_name",
        }
        known = {f for f in cls.__dataclass_fields__}
        values = {}
        for key, value in data.items():
            name = aliases.get(key, key)
            if name in known:
                values[name] = value
        return cls(**values)


@dataclass
class ScanRecord:
    """A scan of one URL across device classes."""
    id: str
    url: str
    status: ScanStatus = ScanStatus.RUNNING
    desktop: Optional[DeviceScan] = None
    mobile: Optional[DeviceScan] = None
    screenshot: Optional[str] = None  # base64 image
    brand_elements: Optional[BrandElements] = None
    errors: Dict[str, str] = field(default_factory=dict)
    created_at: datetime = field(default_factory=datetime.utcnow)
    completed_at: Optional[datetime] = None

    # Snapshot taken at completion for the PDF report and leaderboard
    overall_score: Optional[int] = None
    badge: Optional[BadgeLevel] = None

    @property
    def is_complete(self) -> bool:
        return self.status is ScanStatus.COMPLETE

    @property
    def progress(self) -> int:
        if self.status is ScanStatus.RUNNING:
            return 75
        return 100

    def device_scores(self) -> Dict[str, ScoreSet]:
        """Score sets by device class, for devices that completed."""
        scores = {}
        if self.desktop:
            scores[DeviceClass.DESKTOP.value] = self.desktop.scores
        if self.mobile:
            scores[DeviceClass.MOBILE.value] = self.mobile.scores
        return scores

    def take_snapshot(self) -> None:
        """Record overall score and badge from the desktop scores."""
        if not self.desktop:
            self.overall_score = None
            self.badge = None
            return
        scores = self.desktop.scores
        self.overall_score = calculate_overall_score(scores)
        self.badge = evaluate_badge(scores, classify_tier(scores))

    def snapshot_is_consistent(self) -> bool:
        """True when the stored snapshot matches a fresh recomputation."""
        if not self.desktop:
            return self.overall_score is None and self.badge is None
        scores = self.desktop.scores
        return (
            self.overall_score == calculate_overall_score(scores)
            and self.badge is evaluate_badge(scores, classify_tier(scores))
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "url": self.url,
            "status": self.status.value,
            "progress": self.progress,
            "desktop": self.desktop.to_dict() if self.desktop else None,
            "mobile": self.mobile.to_dict() if self.mobile else None,
            "screenshot": self.screenshot,
            "brand_elements": asdict(self.brand_elements) if self.brand_elements else None,
            "errors": dict(self.errors),
            "created_at": self.created_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "overall_score": self.overall_score,
            "badge": self.badge.value if self.badge else None,
        }
