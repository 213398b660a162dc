"""
Website Scan API

FastAPI application for the LaunchIn7 website scanner:
1. Receives a URL and starts a background scan (PageSpeed desktop + mobile)
2. Serves scan progress and the stored scan record
3. Mounts the outcome and leaderboard routers for the results page
"""

import logging
import sys
from datetime import datetime
from typing import Any, Dict

from fastapi import BackgroundTasks, Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from src import __version__
from src.outcomes import log_event_sink
from src.scan import PageSpeedClient, ScanOrchestrator, ScanRecord, ScanStore
from src.utils.config import get_settings
from src.utils.domain import is_valid_url

from api.dependencies import (
    configure_orchestrator,
    get_event_tracker,
    get_orchestrator,
    get_scan_store,
    is_orchestrator_configured,
)
from api.leaderboard import router as leaderboard_router
from api.outcomes import router as outcomes_router

settings = get_settings()

# Configure logging to stdout
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
    force=True,
)
logger = logging.getLogger(__name__)

# Quiet down chatty loggers
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

app = FastAPI(
    title="LaunchIn7 Website Scanner",
    description="Lighthouse scoring with tiered outcomes, badges and quick wins",
    version=__version__,
)

app.include_router(outcomes_router)
app.include_router(leaderboard_router)

_pagespeed_client = None


# ============================================================================
# STARTUP / SHUTDOWN
# ============================================================================

@app.on_event("startup")
async def startup_event():
    """Register the analytics log sink and wire the scan orchestrator to PageSpeed."""
    global _pagespeed_client
    tracker = get_event_tracker()
    if log_event_sink not in tracker.sinks:
        tracker.add_sink(log_event_sink)

    if is_orchestrator_configured():
        return

    if not settings.PAGESPEED_API_KEY:
        logger.warning("PAGESPEED_API_KEY not set - scans will use the keyless quota")

    _pagespeed_client = PageSpeedClient(api_key=settings.PAGESPEED_API_KEY)
    configure_orchestrator(
        ScanOrchestrator(
            store=get_scan_store(),
            performance_scanner=_pagespeed_client,
            timeout=settings.SCAN_TIMEOUT,
        )
    )
    logger.info(f"Scan service ready ({settings.ENVIRONMENT})")


@app.on_event("shutdown")
async def shutdown_event():
    global _pagespeed_client
    if _pagespeed_client:
        await _pagespeed_client.close()
        _pagespeed_client = None
        configure_orchestrator(None)


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class ScanRequest(BaseModel):
    """Request to scan a website."""
    url: str = Field(..., description="Website URL including scheme")


class ScanResponse(BaseModel):
    """Response after starting a scan."""
    scan_id: str
    status: str


# ============================================================================
# ENDPOINTS
# ============================================================================

@app.get("/health")
async def health():
    """Health check."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
        "environment": settings.ENVIRONMENT,
    }


async def _run_scan_task(orchestrator: ScanOrchestrator, record: ScanRecord) -> None:
    try:
        await orchestrator.run_scan(record.url, record)
    except Exception as e:
        logger.error(f"Scan {record.id} crashed: {e}", exc_info=True)


@app.post("/api/scan", response_model=ScanResponse)
async def start_scan(
    request: ScanRequest,
    background_tasks: BackgroundTasks,
    orchestrator: ScanOrchestrator = Depends(get_orchestrator),
):
    """Start a scan; poll GET /api/scan/{scan_id} for progress."""
    url = request.url.strip()
    if not is_valid_url(url):
        raise HTTPException(status_code=400, detail="Invalid URL provided")

    record = await orchestrator.start_scan(url)
    background_tasks.add_task(_run_scan_task, orchestrator, record)

    logger.info(f"Queued scan {record.id} for {url}")
    return ScanResponse(scan_id=record.id, status=record.status.value)


@app.get("/api/scan/{scan_id}")
async def get_scan(
    scan_id: str,
    store: ScanStore = Depends(get_scan_store),
) -> Dict[str, Any]:
    """Scan record with status and progress."""
    record = await store.get(scan_id)
    if not record:
        raise HTTPException(status_code=404, detail="Scan not found")
    return record.to_dict()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.scan:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
    )
