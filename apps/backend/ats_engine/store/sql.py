import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import AnalysisHistory
from ..schemas.pydantic.history import AnalysisRecord, NewAnalysisRecord
from ..services.exceptions import NotFoundError, PersistenceError
from .base import HistoryStore

logger = logging.getLogger(__name__)

_COLUMNS = [c.name for c in AnalysisHistory.__table__.columns]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _to_record(row: AnalysisHistory) -> AnalysisRecord:
    return AnalysisRecord.model_validate({name: getattr(row, name) for name in _COLUMNS})


class SQLHistoryStore(HistoryStore):
    """History store backed by the `ats_analysis_history` table."""

    def __init__(self, db: AsyncSession, clock: Callable[[], datetime] = _utcnow):
        self.db = db
        self._clock = clock

    async def append(self, record: NewAnalysisRecord) -> str:
        row = AnalysisHistory(
            id=uuid.uuid4().hex,
            analyzed_at=self._clock(),
            **record.model_dump(),
        )
        try:
            self.db.add(row)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to save analysis for user {record.user_id}: {e}")
            raise PersistenceError(operation="append", original_error=str(e)) from e
        return row.id

    async def list_by_user(self, user_id: str) -> List[AnalysisRecord]:
        query = (
            select(AnalysisHistory)
            .where(AnalysisHistory.user_id == user_id)
            .order_by(AnalysisHistory.analyzed_at.desc())
        )
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            raise PersistenceError(operation="list_by_user", original_error=str(e)) from e
        return [_to_record(row) for row in result.scalars().all()]

    async def get(self, record_id: str) -> Optional[AnalysisRecord]:
        try:
            row = await self.db.get(AnalysisHistory, record_id)
        except SQLAlchemyError as e:
            raise PersistenceError(operation="get", original_error=str(e)) from e
        return _to_record(row) if row is not None else None

    async def delete(self, record_id: str) -> None:
        try:
            row = await self.db.get(AnalysisHistory, record_id)
            if row is None:
                raise NotFoundError(record_id)
            await self.db.delete(row)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to delete analysis {record_id}: {e}")
            raise PersistenceError(operation="delete", original_error=str(e)) from e
