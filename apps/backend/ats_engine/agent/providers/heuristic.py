"""
Heuristic ATS Analyzer

A deterministic, offline scorer used whenever the generative analysis
service cannot produce a usable result:
- the model host is down, unreachable or too slow
- the model answered with empty text, broken JSON or the wrong shape
- generative analysis is switched off (LLM_ENABLED=false)

Scores come from substring matches against a small fixed vocabulary, so the
output is "good enough" rather than insightful. Suggestions, strong points and
recommendations are canned; they do not depend on the resume text.

Everything tunable lives in a HeuristicProfile. Pass a different profile to
change the vocabulary or localize the canned lists.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ...core.scoring import round_half_up
from ...schemas.pydantic.resume_analysis import AnalysisResult, HeuristicAnalysis

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeuristicProfile:
    vocabulary: Tuple[str, ...]
    experience_markers: Tuple[str, ...]
    skills_cap: int
    experience_present_score: int
    experience_absent_score: int
    format_score: int
    missing_limit: int
    matched_limit: int
    suggestions: Tuple[str, ...]
    strong_points: Tuple[str, ...]
    recommendations: Tuple[str, ...]


DEFAULT_PROFILE = HeuristicProfile(
    vocabulary=(
        "experience",
        "skills",
        "education",
        "management",
        "development",
        "javascript",
        "react",
        "python",
        "aws",
        "sql",
    ),
    experience_markers=("years", "experience"),
    skills_cap=95,
    experience_present_score=85,
    experience_absent_score=60,
    # Layout is never inspected; plain text has no formatting to judge.
    format_score=80,
    missing_limit=5,
    matched_limit=8,
    suggestions=(
        "Add more quantifiable achievements with specific numbers",
        "Include industry-specific keywords relevant to your target role",
        "Optimize section headers for better ATS parsing",
        "Add a professional summary section at the top",
    ),
    strong_points=(
        "Contains relevant technical keywords",
        "Professional formatting structure",
        "Clear experience section",
    ),
    recommendations=(
        "Consider using more action verbs in your experience descriptions",
        "Quantify your achievements with specific metrics and percentages",
        "Tailor your resume keywords to match the specific job requirements",
        "Ensure consistent formatting throughout the document",
    ),
)


class HeuristicAnalyzer:
    """
    Keyword heuristic ATS scorer.

    No external APIs, no model downloads, no state between calls: the same
    resume text always yields the same analysis.
    """

    def __init__(self, profile: HeuristicProfile = DEFAULT_PROFILE):
        self.profile = profile

    def evaluate(self, resume_text: str, job_description: Optional[str] = None) -> HeuristicAnalysis:
        """
        Score the resume against the profile vocabulary.

        `job_description` is accepted for interface parity with the
        generative path and is not used.
        """
        p = self.profile
        text = resume_text.lower()

        matched = [term for term in p.vocabulary if term in text]
        missing = [term for term in p.vocabulary if term not in text]

        skills_score = min(p.skills_cap, round_half_up(100 * len(matched) / len(p.vocabulary)))
        if any(marker in text for marker in p.experience_markers):
            experience_score = p.experience_present_score
        else:
            experience_score = p.experience_absent_score
        format_score = p.format_score
        keywords_score = skills_score
        overall_score = round_half_up(
            (skills_score + experience_score + format_score + keywords_score) / 4
        )

        return HeuristicAnalysis(
            overall_score=overall_score,
            skills_score=skills_score,
            experience_score=experience_score,
            format_score=format_score,
            keywords_score=keywords_score,
            matched_terms=matched,
            missing_terms=missing,
            matched_limit=p.matched_limit,
            missing_limit=p.missing_limit,
            suggestions=list(p.suggestions),
            strong_points=list(p.strong_points),
            recommendations=list(p.recommendations),
        )

    def analyze(self, resume_text: str, job_description: Optional[str] = None) -> AnalysisResult:
        analysis = self.evaluate(resume_text, job_description)
        logger.debug(
            f"Heuristic analysis: matched {len(analysis.matched_terms)}/{len(self.profile.vocabulary)} "
            f"terms, overall={analysis.overall_score}"
        )
        return analysis.to_result()


def analyze_heuristic(resume_text: str, job_description: Optional[str] = None) -> AnalysisResult:
    return HeuristicAnalyzer().analyze(resume_text, job_description)
