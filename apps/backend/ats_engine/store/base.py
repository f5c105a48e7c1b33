from abc import ABC, abstractmethod
from typing import List, Optional

from ..schemas.pydantic.history import AnalysisRecord, NewAnalysisRecord


class HistoryStore(ABC):
    """
    Append-only persistence of analysis records, keyed by user.

    Records are never updated in place; the store assigns `id` and
    `analyzed_at` when a record is appended.
    """

    @abstractmethod
    async def append(self, record: NewAnalysisRecord) -> str:
        """Persist the record and return its id. Raises PersistenceError."""
        ...

    @abstractmethod
    async def list_by_user(self, user_id: str) -> List[AnalysisRecord]:
        """All records of a user, newest first."""
        ...

    @abstractmethod
    async def get(self, record_id: str) -> Optional[AnalysisRecord]: ...

    @abstractmethod
    async def delete(self, record_id: str) -> None:
        """Remove the record. Raises NotFoundError if it does not exist."""
        ...
