from datetime import datetime, timedelta, timezone

import pytest

from ats_engine.schemas.pydantic.history import AnalysisRecord, ScoreTier
from ats_engine.services.stats import compute_stats, score_tier

T0 = datetime(2026, 3, 1, tzinfo=timezone.utc)


def record(score: int, minutes: int, record_id: str | None = None) -> AnalysisRecord:
    return AnalysisRecord(
        id=record_id or f"r{minutes}",
        user_id="user-1",
        overall_score=score,
        skills_score=score,
        experience_score=score,
        format_score=score,
        keywords_score=score,
        analyzed_at=T0 + timedelta(minutes=minutes),
    )


class TestComputeStats:

    def test_empty_history(self):
        assert compute_stats([]) is None

    def test_two_records_in_time_order(self):
        stats = compute_stats([record(60, 0), record(85, 10)])

        assert stats.total_analyses == 2
        assert stats.highest_score == 85
        assert stats.lowest_score == 60
        # 72.5 rounds half-up
        assert stats.average_score == 73
        assert stats.improvement == 25
        assert stats.last_analyzed == T0 + timedelta(minutes=10)

    def test_input_order_does_not_matter(self):
        stats = compute_stats([record(85, 10), record(60, 0)])
        assert stats.improvement == 25

    def test_regression_is_negative(self):
        stats = compute_stats([record(90, 0), record(70, 5), record(55, 9)])
        assert stats.improvement == -35

    def test_single_record(self):
        stats = compute_stats([record(72, 0)])

        assert stats.total_analyses == 1
        assert stats.improvement == 0
        assert stats.average_score == 72
        assert stats.highest_score == 72

    def test_improvement_ignores_middle_records(self):
        stats = compute_stats([record(50, 0), record(99, 1), record(10, 2), record(65, 3)])
        assert stats.improvement == 15

    def test_many_records(self):
        scores = [31, 47, 100, 0, 68, 73, 59]
        stats = compute_stats([record(s, i) for i, s in enumerate(scores)])

        assert stats.total_analyses == len(scores)
        assert stats.highest_score == max(scores)
        assert stats.lowest_score == min(scores)
        assert 0 <= stats.average_score <= 100

    def test_equal_timestamps_keep_input_order(self):
        stats = compute_stats([record(40, 0, "a"), record(70, 0, "b")])
        assert stats.improvement == 30


class TestScoreTier:

    @pytest.mark.parametrize("score,tier", [
        (100, ScoreTier.EXCELLENT),
        (80, ScoreTier.EXCELLENT),
        (79, ScoreTier.GOOD),
        (60, ScoreTier.GOOD),
        (59, ScoreTier.NEEDS_WORK),
        (0, ScoreTier.NEEDS_WORK),
    ])
    def test_thresholds(self, score, tier):
        assert score_tier(score) is tier

    def test_labels(self):
        assert score_tier(85).value == "Excellent"
        assert score_tier(65).value == "Good"
        assert score_tier(10).value == "Needs Work"
