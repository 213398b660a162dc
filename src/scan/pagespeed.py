"""
PageSpeed Insights Client

Async httpx client for the PageSpeed Insights v5 API with:
- Retry with exponential backoff on 429/5xx and timeouts
- Lighthouse result parsing into the scanner payload the orchestrator expects
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from src.scoring import round_half_up

logger = logging.getLogger(__name__)


PAGESPEED_URL = "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"

LIGHTHOUSE_CATEGORIES = {
    "performance": "performance",
    "accessibility": "accessibility",
    "best-practices": "best_practices",
    "seo": "seo",
}

VITAL_AUDITS = {
    "lcp": "largest-contentful-paint",
    "fid": "first-input-delay",
    "cls": "cumulative-layout-shift",
    "tbt": "total-blocking-time",
}

# (audit id, passing score, title, description, severity)
ISSUE_AUDITS = [
    ("render-blocking-resources", 0.9, "Eliminate render-blocking resources",
     "Remove unused CSS and JavaScript", "critical"),
    ("unused-css-rules", 0.9, "Remove unused CSS",
     "Reduce stylesheet size by removing unused rules", "important"),
    ("modern-image-formats", 0.9, "Optimize images",
     "Serve images in next-gen formats", "important"),
    ("meta-description", 1.0, "Missing meta description",
     "Add meta descriptions for better SEO", "important"),
    ("color-contrast", 0.9, "Improve color contrast",
     "Ensure sufficient color contrast for accessibility", "important"),
]

MAX_ISSUES = 5


class PageSpeedError(Exception):
    """Raised when the PageSpeed API fails or returns an unusable payload."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""
    max_retries: int = 2
    initial_delay: float = 1.0
    max_delay: float = 8.0
    exponential_base: float = 2.0
    retryable_status_codes: tuple = (429, 500, 502, 503, 504)


def _audit_failed(audits: Dict[str, Any], audit_id: str, passing: float) -> bool:
    audit = audits.get(audit_id)
    if audit_id == "meta-description" and not audit:
        return True
    if not audit or audit.get("score") is None:
        return False
    return audit["score"] < passing


def parse_lighthouse_result(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert a runPagespeed response into the scanner payload.

    Category scores arrive as fractions (0.0-1.0) and are scaled to 0-100.
    A missing category counts as 0.

    Args:
        data: Decoded JSON response

    Returns:
        Dict with scores, core_web_vitals and top_issues

    Raises:
        PageSpeedError: when the response has no lighthouseResult
    """
    lighthouse = data.get("lighthouseResult")
    if not lighthouse:
        raise PageSpeedError("Response has no lighthouseResult")

    categories = lighthouse.get("categories") or {}
    audits = lighthouse.get("audits") or {}

    scores = {}
    for category_id, field_name in LIGHTHOUSE_CATEGORIES.items():
        fraction = (categories.get(category_id) or {}).get("score") or 0
        scores[field_name] = round_half_up(fraction * 100)

    vitals = {
        name: (audits.get(audit_id) or {}).get("displayValue") or "N/A"
        for name, audit_id in VITAL_AUDITS.items()
    }

    issues: List[Dict[str, str]] = []
    for audit_id, passing, title, description, severity in ISSUE_AUDITS:
        if _audit_failed(audits, audit_id, passing):
            issues.append({"title": title, "description": description, "severity": severity})

    return {
        "scores": scores,
        "core_web_vitals": vitals,
        "top_issues": issues[:MAX_ISSUES],
    }


class PageSpeedClient:
    """
    Async client for PageSpeed Insights.

    Instances are callable with (url, strategy) so they plug straight
    into ScanOrchestrator as the performance scanner.

    Usage:
        client = PageSpeedClient(api_key="...")
        payload = await client.scan("https://example.com", "mobile")
        await client.close()
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        retry_config: Optional[RetryConfig] = None,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.retry_config = retry_config or RetryConfig()
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def __call__(self, url: str, strategy: str) -> Dict[str, Any]:
        return await self.scan(url, strategy)

    async def scan(self, url: str, strategy: str = "desktop") -> Dict[str, Any]:
        """Run Lighthouse for one device strategy and parse the result."""
        data = await self._request_with_retry(url, strategy)
        return parse_lighthouse_result(data)

    def _build_params(self, url: str, strategy: str) -> List[tuple]:
        params = [("url", url), ("strategy", strategy)]
        params.extend(("category", category) for category in LIGHTHOUSE_CATEGORIES)
        if self.api_key:
            params.append(("key", self.api_key))
        return params

    async def _make_request(self, url: str, strategy: str) -> Dict[str, Any]:
        logger.debug(f"PageSpeed {strategy} scan: {url}")
        response = await self._client.get(PAGESPEED_URL, params=self._build_params(url, strategy))
        if response.status_code != 200:
            raise PageSpeedError(
                f"PageSpeed API error: {response.status_code}",
                status_code=response.status_code,
            )
        return response.json()

    async def _request_with_retry(self, url: str, strategy: str) -> Dict[str, Any]:
        last_exception: Optional[Exception] = None
        delay = self.retry_config.initial_delay

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                return await self._make_request(url, strategy)

            except PageSpeedError as e:
                last_exception = e
                if e.status_code not in self.retry_config.retryable_status_codes:
                    raise

            except httpx.TimeoutException as e:
                last_exception = PageSpeedError(f"Request timed out: {e}")

            except httpx.HTTPError as e:
                last_exception = PageSpeedError(f"HTTP error: {e}")

            if attempt < self.retry_config.max_retries:
                logger.warning(
                    f"PageSpeed request failed (attempt {attempt + 1}/{self.retry_config.max_retries + 1}): "
                    f"{last_exception}. Retrying in {delay}s..."
                )
                await asyncio.sleep(delay)
                delay = min(delay * self.retry_config.exponential_base, self.retry_config.max_delay)

        raise last_exception

    async def close(self):
        await self._client.aclose()
