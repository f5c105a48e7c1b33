import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ...core.scoring import normalize_score


def _dedupe(items: List[str]) -> List[str]:
    seen = set()
    out = []
    for item in items:
        key = item.lower()
        if key not in seen:
            seen.add(key)
            out.append(item)
    return out


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


class AnalysisResult(BaseModel):
    """Public result shape returned by every analysis, whichever path produced it."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    overall_score: int = Field(ge=0, le=100)
    skills_score: int = Field(ge=0, le=100)
    experience_score: int = Field(ge=0, le=100)
    format_score: int = Field(ge=0, le=100)
    keywords_score: int = Field(ge=0, le=100)
    suggestions: List[str] = Field(default_factory=list)
    strong_points: List[str] = Field(default_factory=list)
    missing_keywords: List[str] = Field(default_factory=list)
    matched_keywords: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _keywords_disjoint(self):
        overlap = {k.lower() for k in self.missing_keywords} & {k.lower() for k in self.matched_keywords}
        if overlap:
            raise ValueError(f"keywords cannot be both missing and matched: {sorted(overlap)}")
        return self


class GenerativeAnalysis(BaseModel):
    """
    Payload returned by the generative analysis service, after structural validation.

    Only two fields are mandatory: a finite numeric `overallScore` and a
    `suggestions` list. Everything else is read leniently; component scores
    that are absent or not numbers fall back to the overall score, and list
    fields keep only their non-blank string items.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    overall_score: float
    skills_score: Optional[float] = None
    experience_score: Optional[float] = None
    format_score: Optional[float] = None
    keywords_score: Optional[float] = None
    suggestions: List[str]
    strong_points: List[str] = Field(default_factory=list)
    missing_keywords: List[str] = Field(default_factory=list)
    matched_keywords: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    @field_validator("overall_score", mode="before")
    @classmethod
    def _require_number(cls, value: Any) -> float:
        if not _is_number(value):
            raise ValueError("overallScore must be a finite number")
        return value

    @field_validator("skills_score", "experience_score", "format_score", "keywords_score", mode="before")
    @classmethod
    def _optional_number(cls, value: Any) -> Optional[float]:
        return value if _is_number(value) else None

    @field_validator("suggestions", mode="before")
    @classmethod
    def _require_list(cls, value: Any) -> List[str]:
        if not isinstance(value, list):
            raise ValueError("suggestions must be a list")
        return [s.strip() for s in value if isinstance(s, str) and s.strip()]

    @field_validator("strong_points", "missing_keywords", "matched_keywords", "recommendations", mode="before")
    @classmethod
    def _string_list(cls, value: Any) -> List[str]:
        if not isinstance(value, list):
            return []
        return [s.strip() for s in value if isinstance(s, str) and s.strip()]

    def to_result(self) -> AnalysisResult:
        overall = normalize_score(self.overall_score)

        def component(value: Optional[float]) -> int:
            return overall if value is None else normalize_score(value)

        matched = _dedupe(self.matched_keywords)
        matched_keys = {k.lower() for k in matched}
        missing = [k for k in _dedupe(self.missing_keywords) if k.lower() not in matched_keys]
        return AnalysisResult(
            overall_score=overall,
            skills_score=component(self.skills_score),
            experience_score=component(self.experience_score),
            format_score=component(self.format_score),
            keywords_score=component(self.keywords_score),
            suggestions=self.suggestions,
            strong_points=self.strong_points,
            missing_keywords=missing,
            matched_keywords=matched,
            recommendations=self.recommendations,
        )


class HeuristicAnalysis(BaseModel):
    """
    Output of the offline keyword heuristic.

    Keeps the full matched / missing vocabulary split; `to_result` applies
    the output limits.
    """

    overall_score: int
    skills_score: int
    experience_score: int
    format_score: int
    keywords_score: int
    matched_terms: List[str]
    missing_terms: List[str]
    matched_limit: int
    missing_limit: int
    suggestions: List[str]
    strong_points: List[str]
    recommendations: List[str]

    def to_result(self) -> AnalysisResult:
        return AnalysisResult(
            overall_score=self.overall_score,
            skills_score=self.skills_score,
            experience_score=self.experience_score,
            format_score=self.format_score,
            keywords_score=self.keywords_score,
            suggestions=self.suggestions,
            strong_points=self.strong_points,
            missing_keywords=self.missing_terms[: self.missing_limit],
            matched_keywords=self.matched_terms[: self.matched_limit],
            recommendations=self.recommendations,
        )
