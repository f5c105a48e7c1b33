from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db_session
from ..services.analysis_service import ResumeAnalysisService
from ..services.history_service import AnalysisHistoryService
from ..store.base import HistoryStore
from ..store.sql import SQLHistoryStore


async def get_history_store(db: AsyncSession = Depends(get_db_session)) -> HistoryStore:
    return SQLHistoryStore(db)


def get_analysis_service() -> ResumeAnalysisService:
    return ResumeAnalysisService()


def get_history_service(
    store: HistoryStore = Depends(get_history_store),
    analyzer: ResumeAnalysisService = Depends(get_analysis_service),
) -> AnalysisHistoryService:
    return AnalysisHistoryService(store=store, analyzer=analyzer)
