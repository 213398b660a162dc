"""
Scan Pipeline Tests

Tests the best-effort scan orchestrator, scan records and storage.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest
from src.scan import (
    BrandElements,
    DeviceScan,
    InMemoryScanStore,
    ScanOrchestrator,
    ScanRecord,
    ScanStatus,
)
from src.scoring import BadgeLevel, InvalidScoreError


URL = "https://www.myshop.com"


@pytest.fixture
def orchestrator(scan_store, performance_scanner, brand_extractor, screenshot_capturer):
    return ScanOrchestrator(
        store=scan_store,
        performance_scanner=performance_scanner,
        brand_extractor=brand_extractor,
        screenshot_capturer=screenshot_capturer,
        timeout=5,
    )


class TestRunScan:
    """Test full scan runs."""

    @pytest.mark.asyncio
    async def test_all_collaborators_succeed(self, orchestrator, scan_store, performance_scanner):
        record = await orchestrator.run_scan(URL)

        assert record.status == ScanStatus.COMPLETE
        assert record.errors == {}
        assert record.desktop.scores.performance == 92
        assert record.mobile.scores.performance == 64
        assert record.desktop.core_web_vitals.lcp == "1.8 s"
        assert record.desktop.top_issues[0].severity == "important"
        assert record.brand_elements.business_name == "Acme Shop"
        assert record.brand_elements.primary_color == "#1a73e8"
        assert record.screenshot.startswith("iVBOR")
        assert record.completed_at is not None
        assert performance_scanner.await_count == 2
        assert await scan_store.get(record.id) is record

    @pytest.mark.asyncio
    async def test_snapshot_from_desktop(self, orchestrator):
        """Overall score and badge are snapshotted from desktop scores."""
        record = await orchestrator.run_scan(URL)

        assert record.overall_score == 95
        assert record.badge == BadgeLevel.GOLD
        assert record.snapshot_is_consistent()

    @pytest.mark.asyncio
    async def test_mobile_failure_still_completes(self, scan_store, desktop_payload):
        async def scan(url, strategy):
            if strategy == "mobile":
                raise RuntimeError("Lighthouse returned error: NO_FCP")
            return desktop_payload

        orchestrator = ScanOrchestrator(scan_store, AsyncMock(side_effect=scan))
        record = await orchestrator.run_scan(URL)

        assert record.status == ScanStatus.COMPLETE
        assert record.mobile is None
        assert "NO_FCP" in record.errors["performance_mobile"]
        assert set(record.device_scores()) == {"desktop"}

    @pytest.mark.asyncio
    async def test_desktop_failure_fails_scan(self, scan_store, mobile_payload):
        async def scan(url, strategy):
            if strategy == "desktop":
                raise RuntimeError("PageSpeed API error: 500")
            return mobile_payload

        orchestrator = ScanOrchestrator(scan_store, AsyncMock(side_effect=scan))
        record = await orchestrator.run_scan(URL)

        assert record.status == ScanStatus.FAILED
        assert record.mobile is not None
        assert record.overall_score is None
        assert record.badge is None
        assert record.snapshot_is_consistent()

    @pytest.mark.asyncio
    async def test_brand_failure_is_isolated(self, scan_store, performance_scanner, screenshot_capturer):
        brand = AsyncMock(side_effect=ValueError("no title tag"))
        orchestrator = ScanOrchestrator(
            scan_store, performance_scanner,
            brand_extractor=brand, screenshot_capturer=screenshot_capturer,
        )
        record = await orchestrator.run_scan(URL)

        assert record.status == ScanStatus.COMPLETE
        assert record.errors == {"brand": "no title tag"}
        assert record.brand_elements is None
        assert record.screenshot is not None

    @pytest.mark.asyncio
    async def test_timeout_recorded(self, scan_store, performance_scanner):
        async def slow_screenshot(url):
            await asyncio.sleep(1)
            return "never"

        orchestrator = ScanOrchestrator(
            scan_store, performance_scanner,
            screenshot_capturer=slow_screenshot,
            timeout=0.01,
        )
        record = await orchestrator.run_scan(URL)

        assert record.status == ScanStatus.COMPLETE
        assert record.errors["screenshot"] == "timed out"
        assert record.screenshot is None

    @pytest.mark.asyncio
    async def test_invalid_scores_rejected(self, scan_store, mobile_payload):
        bad = {"scores": {"performance": 130, "accessibility": 90, "best_practices": 90, "seo": 90}}

        async def scan(url, strategy):
            return bad if strategy == "desktop" else mobile_payload

        orchestrator = ScanOrchestrator(scan_store, AsyncMock(side_effect=scan))
        record = await orchestrator.run_scan(URL)

        assert record.status == ScanStatus.FAILED
        assert record.errors["performance_desktop"].startswith("invalid scores")

    @pytest.mark.asyncio
    async def test_empty_result(self, scan_store, desktop_payload):
        async def scan(url, strategy):
            return desktop_payload if strategy == "desktop" else None

        orchestrator = ScanOrchestrator(scan_store, AsyncMock(side_effect=scan))
        record = await orchestrator.run_scan(URL)

        assert record.errors["performance_mobile"] == "no data returned"
        assert record.status == ScanStatus.COMPLETE

    @pytest.mark.asyncio
    async def test_optional_collaborators_skipped(self, scan_store, performance_scanner):
        orchestrator = ScanOrchestrator(scan_store, performance_scanner)
        record = await orchestrator.run_scan(URL)

        assert record.status == ScanStatus.COMPLETE
        assert record.brand_elements is None
        assert record.screenshot is None
        assert record.errors == {}

    @pytest.mark.asyncio
    async def test_start_then_run(self, orchestrator, scan_store):
        """A started scan is visible as running before it completes."""
        record = await orchestrator.start_scan(URL)
        stored = await scan_store.get(record.id)

        assert stored.status == ScanStatus.RUNNING
        assert stored.progress == 75

        finished = await orchestrator.run_scan(URL, record)
        assert finished.id == record.id
        assert finished.progress == 100


class TestScanModels:
    """Test scan record models."""

    def test_device_scan_from_camel_case(self):
        scan = DeviceScan.from_dict({
            "performance": 90,
            "accessibility": 91,
            "bestPractices": 92,
            "seo": 93,
            "coreWebVitals": {"lcp": "2.0 s", "cls": 0.1},
            "topIssues": [{"title": "Optimize images", "description": "Use WebP"}],
        })

        assert scan.scores.best_practices == 92
        assert scan.core_web_vitals.lcp == "2.0 s"
        assert scan.core_web_vitals.cls == "0.1"
        assert scan.core_web_vitals.tbt == "N/A"
        assert scan.top_issues[0].severity == "minor"

    def test_device_scan_validates(self):
        with pytest.raises(InvalidScoreError):
            DeviceScan.from_dict({"performance": 90, "accessibility": 91, "best_practices": -1, "seo": 93})

    def test_brand_elements_aliases(self):
        brand = BrandElements.from_dict({"businessName": "Acme", "fontFamily": "Inter", "unknown": 1})
        assert brand.business_name == "Acme"
        assert brand.font_family == "Inter"

    def test_snapshot_detects_drift(self, desktop_payload):
        record = ScanRecord(id="scan-1", url=URL, desktop=DeviceScan.from_dict(desktop_payload))
        record.take_snapshot()
        assert record.snapshot_is_consistent()

        record.badge = BadgeLevel.PLATINUM
        assert not record.snapshot_is_consistent()

    def test_to_dict(self, desktop_payload):
        record = ScanRecord(id="scan-1", url=URL, desktop=DeviceScan.from_dict(desktop_payload))
        record.take_snapshot()
        data = record.to_dict()

        assert data["status"] == "running"
        assert data["progress"] == 75
        assert data["badge"] == "gold"
        assert data["desktop"]["scores"]["seo"] == 91
        assert data["mobile"] is None


class TestInMemoryScanStore:
    """Test scan storage."""

    @pytest.mark.asyncio
    async def test_create_get_delete(self):
        store = InMemoryScanStore()
        record = await store.create(URL)

        assert await store.get(record.id) is record
        assert await store.delete(record.id) is True
        assert await store.get(record.id) is None
        assert await store.delete(record.id) is False

    @pytest.mark.asyncio
    async def test_unique_ids(self):
        store = InMemoryScanStore()
        first = await store.create(URL)
        second = await store.create(URL)

        assert first.id != second.id
        assert len(await store.list_all()) == 2
