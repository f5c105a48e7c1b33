from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .resume_analysis import AnalysisResult


class ScoreTier(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    NEEDS_WORK = "Needs Work"


class NewAnalysisRecord(AnalysisResult):
    """An analysis about to be written; the store assigns `id` and `analyzed_at`."""

    user_id: str
    job_title: Optional[str] = None
    company: Optional[str] = None
    resume_text: Optional[str] = None
    resume_url: Optional[str] = None

    @classmethod
    def from_result(cls, user_id: str, result: AnalysisResult, **details: Optional[str]) -> "NewAnalysisRecord":
        return cls(user_id=user_id, **details, **result.model_dump())


class AnalysisRecord(NewAnalysisRecord):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        from_attributes=True,
    )

    id: str
    analyzed_at: datetime

    def to_result(self) -> AnalysisResult:
        return AnalysisResult(**self.model_dump(include=set(AnalysisResult.model_fields)))


class AnalysisStats(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    total_analyses: int
    average_score: int
    highest_score: int
    lowest_score: int
    improvement: int
    last_analyzed: Optional[datetime] = None
