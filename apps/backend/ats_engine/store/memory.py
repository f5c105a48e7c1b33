import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from ..schemas.pydantic.history import AnalysisRecord, NewAnalysisRecord
from ..services.exceptions import NotFoundError
from .base import HistoryStore


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryHistoryStore(HistoryStore):
    """Process-local store for tests and single-process demos."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock
        self._records: Dict[str, AnalysisRecord] = {}

    async def append(self, record: NewAnalysisRecord) -> str:
        record_id = uuid.uuid4().hex
        self._records[record_id] = AnalysisRecord(
            id=record_id,
            analyzed_at=self._clock(),
            **record.model_dump(),
        )
        return record_id

    async def list_by_user(self, user_id: str) -> List[AnalysisRecord]:
        # dicts keep insertion order, so reversing first keeps ties newest-first
        owned = [r for r in reversed(self._records.values()) if r.user_id == user_id]
        return sorted(owned, key=lambda r: r.analyzed_at, reverse=True)

    async def get(self, record_id: str) -> Optional[AnalysisRecord]:
        return self._records.get(record_id)

    async def delete(self, record_id: str) -> None:
        if self._records.pop(record_id, None) is None:
            raise NotFoundError(record_id)
