"""
Scan Storage

Key-value storage for scan records. The in-memory backend loses data on
restart, which is acceptable for scan results.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .models import ScanRecord

logger = logging.getLogger(__name__)


class ScanStore(ABC):
    """Abstract base class for scan storage backends."""

    @abstractmethod
    async def create(self, url: str) -> ScanRecord:
        """Create a running scan record with a generated id."""
        pass

    @abstractmethod
    async def get(self, scan_id: str) -> Optional[ScanRecord]:
        """Load a scan record by id."""
        pass

    @abstractmethod
    async def save(self, record: ScanRecord) -> ScanRecord:
        """Persist a scan record, replacing any previous version."""
        pass

    @abstractmethod
    async def delete(self, scan_id: str) -> bool:
        """Delete a scan record."""
        pass

    @abstractmethod
    async def list_all(self) -> List[ScanRecord]:
        """List all scan records, newest first."""
        pass


class InMemoryScanStore(ScanStore):
    """
    Process-local scan storage.

    Each operation completes without awaiting, so no locking is needed
    within a single event loop.
    """

    def __init__(self):
        self._records: Dict[str, ScanRecord] = {}

    async def create(self, url: str) -> ScanRecord:
        record = ScanRecord(id=str(uuid.uuid4()), url=url)
        self._records[record.id] = record
        logger.debug(f"Created scan {record.id} for {url}")
        return record

    async def get(self, scan_id: str) -> Optional[ScanRecord]:
        return self._records.get(scan_id)

    async def save(self, record: ScanRecord) -> ScanRecord:
        self._records[record.id] = record
        return record

    async def delete(self, scan_id: str) -> bool:
        return self._records.pop(scan_id, None) is not None

    async def list_all(self) -> List[ScanRecord]:
        return sorted(self._records.values(), key=lambda r: r.created_at, reverse=True)
