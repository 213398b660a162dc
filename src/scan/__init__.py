"""
Website Scan Pipeline

Gathers performance scores, brand elements and a screenshot for a URL
and keeps the resulting scan records.
"""

from .models import (
    ScanStatus,
    DeviceClass,
    CoreWebVitals,
    Issue,
    DeviceScan,
    BrandElements,
    ScanRecord,
)
from .storage import ScanStore, InMemoryScanStore
from .orchestrator import (
    ScanOrchestrator,
    PerformanceScanner,
    BrandExtractor,
    ScreenshotCapturer,
)
from .pagespeed import PageSpeedClient, PageSpeedError, RetryConfig, parse_lighthouse_result

__all__ = [
    # Models
    "ScanStatus",
    "DeviceClass",
    "CoreWebVitals",
    "Issue",
    "DeviceScan",
    "BrandElements",
    "ScanRecord",
    # Storage
    "ScanStore",
    "InMemoryScanStore",
    # Orchestration
    "ScanOrchestrator",
    "PerformanceScanner",
    "BrandExtractor",
    "ScreenshotCapturer",
    # PageSpeed
    "PageSpeedClient",
    "PageSpeedError",
    "RetryConfig",
    "parse_lighthouse_result",
]
