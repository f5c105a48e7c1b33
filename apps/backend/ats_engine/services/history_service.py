import logging
from typing import List, Optional, Tuple

from ..schemas.pydantic.history import AnalysisRecord, AnalysisStats, NewAnalysisRecord
from ..schemas.pydantic.resume_analysis import AnalysisResult
from ..store.base import HistoryStore
from .analysis_service import ResumeAnalysisService
from .exceptions import NotFoundError, PersistenceError
from .stats import compute_stats

logger = logging.getLogger(__name__)


class AnalysisHistoryService:
    """
    Operations the rest of the application consumes: analyse a resume, keep
    the result in the user's history, read that history back and summarise it.
    """

    def __init__(self, store: HistoryStore, analyzer: Optional[ResumeAnalysisService] = None):
        self.store = store
        self.analyzer = analyzer or ResumeAnalysisService()

    async def analyze(self, resume_text: str, job_description: Optional[str] = None) -> AnalysisResult:
        return await self.analyzer.analyze(resume_text, job_description)

    async def save_analysis(
        self,
        user_id: str,
        result: AnalysisResult,
        job_title: Optional[str] = None,
        company: Optional[str] = None,
        resume_text: Optional[str] = None,
        resume_url: Optional[str] = None,
    ) -> str:
        record = NewAnalysisRecord.from_result(
            user_id,
            result,
            job_title=job_title,
            company=company,
            resume_text=resume_text,
            resume_url=resume_url,
        )
        record_id = await self.store.append(record)
        logger.info(f"ATS analysis saved to history: {record_id} (user {user_id})")
        return record_id

    async def analyze_and_save(
        self,
        user_id: Optional[str],
        resume_text: str,
        job_description: Optional[str] = None,
        job_title: Optional[str] = None,
        company: Optional[str] = None,
    ) -> Tuple[AnalysisResult, Optional[str]]:
        """
        Analyse and, when a user is known, record the result.

        A failed history write is logged and reported as a None record id;
        the analysis itself is still returned.
        """
        result = await self.analyze(resume_text, job_description)
        if not user_id:
            return result, None
        try:
            record_id = await self.save_analysis(
                user_id, result, job_title=job_title, company=company, resume_text=resume_text
            )
        except PersistenceError as e:
            logger.error(f"Could not save ATS analysis for user {user_id}: {e}")
            return result, None
        return result, record_id

    async def get_history(self, user_id: str) -> List[AnalysisRecord]:
        """Newest first. An unreadable store is logged and reads as empty."""
        try:
            return await self.store.list_by_user(user_id)
        except PersistenceError as e:
            logger.error(f"Could not load ATS history for user {user_id}: {e}")
            return []

    async def get_analysis(self, record_id: str) -> AnalysisRecord:
        try:
            record = await self.store.get(record_id)
        except PersistenceError as e:
            logger.error(f"Could not load ATS analysis {record_id}: {e}")
            raise NotFoundError(record_id) from e
        if record is None:
            raise NotFoundError(record_id)
        return record

    async def get_stats(self, user_id: str) -> Optional[AnalysisStats]:
        try:
            history = await self.store.list_by_user(user_id)
        except PersistenceError as e:
            logger.error(f"Could not load ATS stats for user {user_id}: {e}")
            return None
        # history is newest first; hand it over oldest first so timestamp ties
        # resolve in write order
        return compute_stats(list(reversed(history)))

    async def delete_analysis(self, record_id: str, user_id: Optional[str] = None) -> bool:
        """
        Delete a record. With `user_id`, records owned by anyone else are
        reported as not found.

        Returns False when the store could not be reached; the failure is
        logged and the record may still exist.
        """
        try:
            if user_id is not None:
                record = await self.store.get(record_id)
                if record is None or record.user_id != user_id:
                    raise NotFoundError(record_id)
            await self.store.delete(record_id)
        except PersistenceError as e:
            logger.error(f"Could not delete ATS analysis {record_id}: {e}")
            return False
        logger.info(f"ATS analysis deleted: {record_id}")
        return True
