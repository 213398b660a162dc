"""
Scan Orchestrator

Coordinates the three independent scan collaborators:

1. Performance scan - PageSpeed scores, Core Web Vitals and issues per device
2. Brand extraction - business name, colours, fonts from the homepage
3. Screenshot capture - optional base64 image

They run concurrently and are joined best-effort: a failure in one is
recorded on the scan and never stops the others. The scan completes when
desktop scores were obtained; everything else is optional.
"""

import asyncio
import logging
from datetime import datetime
from typing import Any, Awaitable, Callable, Dict, Optional

from src.scoring import InvalidScoreError
from .models import BrandElements, DeviceClass, DeviceScan, ScanRecord, ScanStatus
from .storage import ScanStore

logger = logging.getLogger(__name__)


# (url, strategy) -> {"scores": {...}, "core_web_vitals": {...}, "top_issues": [...]}
PerformanceScanner = Callable[[str, str], Awaitable[Dict[str, Any]]]
# url -> {"businessName": ..., "primaryColor": ...}
BrandExtractor = Callable[[str], Awaitable[Optional[Dict[str, Any]]]]
# url -> base64 image or None
ScreenshotCapturer = Callable[[str], Awaitable[Optional[str]]]


def _safe_get_gather_result(results: list, idx: int, default):
    """Safely extract a result from asyncio.gather with return_exceptions=True."""
    if idx >= len(results):
        return default
    val = results[idx]
    return default if isinstance(val, BaseException) else val


def _describe_error(error: BaseException) -> str:
    if isinstance(error, asyncio.TimeoutError):
        return "timed out"
    return str(error) or error.__class__.__name__


class ScanOrchestrator:
    """
    Runs a full scan for a URL and stores the result.

    Args:
        store: ScanStore for records
        performance_scanner: PageSpeed collaborator
        brand_extractor: Optional brand scraping collaborator
        screenshot_capturer: Optional screenshot collaborator
        timeout: Per-collaborator timeout in seconds
    """

    def __init__(
        self,
        store: ScanStore,
        performance_scanner: PerformanceScanner,
        brand_extractor: Optional[BrandExtractor] = None,
        screenshot_capturer: Optional[ScreenshotCapturer] = None,
        timeout: float = 120,
    ):
        self.store = store
        self.performance_scanner = performance_scanner
        self.brand_extractor = brand_extractor
        self.screenshot_capturer = screenshot_capturer
        self.timeout = timeout

    async def start_scan(self, url: str) -> ScanRecord:
        """Create the running record; call run_scan() afterwards."""
        return await self.store.create(url)

    async def run_scan(self, url: str, record: Optional[ScanRecord] = None) -> ScanRecord:
        """
        Execute every collaborator and finalise the scan record.

        Args:
            url: URL to scan
            record: Existing running record (created when omitted)

        Returns:
            The completed or failed ScanRecord
        """
        record = record or await self.store.create(url)
        start_time = datetime.utcnow()

        logger.info(f"Starting scan {record.id} for {url}")

        results = await asyncio.gather(
            self._scan_devices(url, record),
            self._with_timeout(self.brand_extractor, url),
            self._with_timeout(self.screenshot_capturer, url),
            return_exceptions=True,
        )

        for name, result in zip(("performance", "brand", "screenshot"), results):
            if isinstance(result, BaseException):
                record.errors[name] = _describe_error(result)
                logger.warning(f"Scan {record.id}: {name} failed: {record.errors[name]}")

        brand = _safe_get_gather_result(results, 1, None)
        if brand:
            record.brand_elements = BrandElements.from_dict(brand)
        record.screenshot = _safe_get_gather_result(results, 2, None)

        self._finalize(record)
        await self.store.save(record)

        duration = (datetime.utcnow() - start_time).total_seconds()
        logger.info(
            f"Scan {record.id} {record.status.value} in {duration:.1f}s "
            f"(overall={record.overall_score}, badge={record.badge.value if record.badge else None})"
        )
        return record

    async def _scan_devices(self, url: str, record: ScanRecord) -> None:
        """Scan desktop and mobile concurrently; only desktop is required."""
        devices = (DeviceClass.DESKTOP, DeviceClass.MOBILE)
        results = await asyncio.gather(
            *(self._with_timeout(self.performance_scanner, url, device.value) for device in devices),
            return_exceptions=True,
        )

        for device, result in zip(devices, results):
            key = f"performance_{device.value}"
            if isinstance(result, BaseException):
                record.errors[key] = _describe_error(result)
                logger.warning(f"Scan {record.id}: {device.value} scan failed: {record.errors[key]}")
                continue
            if not result:
                record.errors[key] = "no data returned"
                continue
            try:
                setattr(record, device.value, DeviceScan.from_dict(result))
            except InvalidScoreError as e:
                record.errors[key] = f"invalid scores: {e}"
                logger.error(f"Scan {record.id}: {device.value} returned invalid scores: {e}")

    async def _with_timeout(self, collaborator: Optional[Callable[..., Awaitable[Any]]], *args: Any) -> Any:
        if collaborator is None:
            return None
        return await asyncio.wait_for(collaborator(*args), timeout=self.timeout)

    @staticmethod
    def _finalize(record: ScanRecord) -> None:
        record.status = ScanStatus.COMPLETE if record.desktop else ScanStatus.FAILED
        record.completed_at = datetime.utcnow()
        record.take_snapshot()
