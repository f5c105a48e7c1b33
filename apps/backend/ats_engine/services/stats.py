from typing import Optional, Sequence

from ..core.scoring import round_half_up
from ..schemas.pydantic.history import AnalysisRecord, AnalysisStats, ScoreTier

EXCELLENT_THRESHOLD = 80
GOOD_THRESHOLD = 60


def score_tier(score: int) -> ScoreTier:
    """Badge for a score. Every component that labels a score goes through here."""
    if score >= EXCELLENT_THRESHOLD:
        return ScoreTier.EXCELLENT
    if score >= GOOD_THRESHOLD:
        return ScoreTier.GOOD
    return ScoreTier.NEEDS_WORK


def compute_stats(records: Sequence[AnalysisRecord]) -> Optional[AnalysisStats]:
    """
    Derive trend statistics from a user's full analysis history.

    Recomputed on every call; nothing is cached next to the records.
    `improvement` is the latest overall score minus the earliest one, ordered
    by `analyzed_at` (ties keep their input order).
    """
    if not records:
        return None

    scores = [r.overall_score for r in records]
    chronological = sorted(records, key=lambda r: r.analyzed_at)
    earliest, latest = chronological[0], chronological[-1]

    return AnalysisStats(
        total_analyses=len(records),
        average_score=round_half_up(sum(scores) / len(scores)),
        highest_score=max(scores),
        lowest_score=min(scores),
        improvement=latest.overall_score - earliest.overall_score if len(records) > 1 else 0,
        last_analyzed=latest.analyzed_at,
    )
