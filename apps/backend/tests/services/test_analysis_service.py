"""
Tests for ResumeAnalysisService.

These tests verify:
1. Blank resume text is the only caller-visible failure
2. A working generative client's result is returned as-is
3. Every generative failure falls back to the heuristic, once, without retries
"""

import asyncio

import pytest
from unittest.mock import AsyncMock, MagicMock

from ats_engine.agent.exceptions import ParseError, ServiceError
from ats_engine.agent.manager import AgentManager
from ats_engine.agent.providers.base import Provider
from ats_engine.schemas.pydantic.resume_analysis import AnalysisResult
from ats_engine.services.analysis_service import ResumeAnalysisService
from ats_engine.services.exceptions import InputError
from ats_engine.services.generative_client import GenerativeAnalysisClient, parse_generative_analysis

from tests.helpers import AI_PAYLOAD, SAMPLE_RESUME


@pytest.fixture
def failing_client():
    client = AsyncMock(spec=GenerativeAnalysisClient)
    client.request_ai_analysis.side_effect = ServiceError("generative service unreachable")
    return client


class TestInputValidation:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    async def test_blank_resume_raises_input_error(self, text, failing_client):
        service = ResumeAnalysisService(client=failing_client)

        with pytest.raises(InputError) as exc_info:
            await service.analyze(text)

        assert str(exc_info.value) == "Missing resume content"
        failing_client.request_ai_analysis.assert_not_called()


class TestGenerativePath:

    @pytest.mark.asyncio
    async def test_generative_result_returned(self):
        expected = parse_generative_analysis(AI_PAYLOAD).to_result()
        client = AsyncMock(spec=GenerativeAnalysisClient)
        client.request_ai_analysis.return_value = expected
        heuristic = MagicMock()

        result = await ResumeAnalysisService(client=client, heuristic=heuristic).analyze(SAMPLE_RESUME, "Job text")

        assert result == expected
        client.request_ai_analysis.assert_awaited_once_with(SAMPLE_RESUME, "Job text")
        heuristic.analyze.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_job_description_treated_as_absent(self):
        client = AsyncMock(spec=GenerativeAnalysisClient)
        client.request_ai_analysis.return_value = parse_generative_analysis(AI_PAYLOAD).to_result()

        await ResumeAnalysisService(client=client).analyze(SAMPLE_RESUME, "   ")

        client.request_ai_analysis.assert_awaited_once_with(SAMPLE_RESUME, None)


class TestFallback:

    @pytest.mark.asyncio
    async def test_unreachable_service_uses_heuristic(self, failing_client):
        """Generative service down: the reference resume gets the documented heuristic scores."""
        result = await ResumeAnalysisService(client=failing_client).analyze(SAMPLE_RESUME)

        assert isinstance(result, AnalysisResult)
        assert result.skills_score == 60
        assert result.experience_score == 85
        assert result.format_score == 80
        assert result.keywords_score == 60
        assert result.overall_score == 71
        assert set(result.matched_keywords) == {"experience", "javascript", "react", "python", "aws", "sql"}

    @pytest.mark.asyncio
    async def test_no_retry_on_failure(self, failing_client):
        await ResumeAnalysisService(client=failing_client).analyze(SAMPLE_RESUME)
        assert failing_client.request_ai_analysis.await_count == 1

    @pytest.mark.asyncio
    async def test_parse_error_uses_heuristic(self):
        client = AsyncMock(spec=GenerativeAnalysisClient)
        client.request_ai_analysis.side_effect = ParseError("Invalid JSON response")

        result = await ResumeAnalysisService(client=client).analyze(SAMPLE_RESUME)

        assert result.overall_score == 71

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", ["", "not json", '{"overallScore": "high", "suggestions": []}', '{"overallScore": 90}'])
    async def test_malformed_model_output_uses_heuristic(self, raw):
        class Static(Provider):
            async def __call__(self, prompt, **generation_args):
                return raw

        manager = AgentManager(model="m", model_provider="ollama")
        manager._get_provider = AsyncMock(return_value=Static())
        service = ResumeAnalysisService(client=GenerativeAnalysisClient(agent_manager=manager))

        result = await service.analyze(SAMPLE_RESUME)

        assert result.overall_score == 71

    @pytest.mark.asyncio
    async def test_hung_service_uses_heuristic(self):
        class Hung(Provider):
            async def __call__(self, prompt, **generation_args):
                await asyncio.sleep(5)
                return "{}"

        manager = AgentManager(model="m", model_provider="ollama", timeout=0.05)
        manager._get_provider = AsyncMock(return_value=Hung())
        service = ResumeAnalysisService(client=GenerativeAnalysisClient(agent_manager=manager))

        result = await service.analyze(SAMPLE_RESUME)

        assert result.overall_score == 71

    @pytest.mark.asyncio
    async def test_disabled_llm_skips_client(self, failing_client):
        service = ResumeAnalysisService(client=failing_client, llm_enabled=False)

        result = await service.analyze(SAMPLE_RESUME)

        assert result.overall_score == 71
        failing_client.request_ai_analysis.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["a", SAMPLE_RESUME, "python " * 500, "Ünïcödé résumé ✓"])
    async def test_scores_always_in_range(self, text, failing_client):
        r = await ResumeAnalysisService(client=failing_client).analyze(text)

        for score in (r.overall_score, r.skills_score, r.experience_score, r.format_score, r.keywords_score):
            assert 0 <= score <= 100
        assert not set(r.matched_keywords) & set(r.missing_keywords)

    @pytest.mark.asyncio
    async def test_concurrent_analyses_are_independent(self, failing_client):
        service = ResumeAnalysisService(client=failing_client)

        results = await asyncio.gather(
            service.analyze(SAMPLE_RESUME),
            service.analyze("chef"),
            service.analyze(SAMPLE_RESUME),
        )

        assert results[0] == results[2]
        assert results[1].overall_score == 35
