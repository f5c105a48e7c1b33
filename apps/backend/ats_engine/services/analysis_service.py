import logging
from typing import Optional

from ..agent.exceptions import ParseError, ServiceError
from ..agent.providers.heuristic import HeuristicAnalyzer
from ..core import settings
from ..schemas.pydantic.resume_analysis import AnalysisResult
from .exceptions import InputError
from .generative_client import GenerativeAnalysisClient

logger = logging.getLogger(__name__)


class ResumeAnalysisService:
    """
    Produces an ATS compatibility assessment for a resume.

    The generative client is tried once. Any ServiceError or ParseError
    switches to the heuristic analyzer, so callers always get an
    AnalysisResult and never learn which path produced it. The only error
    that escapes is InputError for blank resume text.
    """

    def __init__(
        self,
        client: Optional[GenerativeAnalysisClient] = None,
        heuristic: Optional[HeuristicAnalyzer] = None,
        llm_enabled: bool = settings.LLM_ENABLED,
    ):
        self.llm_enabled = llm_enabled
        self.client = client if client is not None or not llm_enabled else GenerativeAnalysisClient()
        self.heuristic = heuristic or HeuristicAnalyzer()

    async def analyze(self, resume_text: str, job_description: Optional[str] = None) -> AnalysisResult:
        if not resume_text or not resume_text.strip():
            raise InputError("Missing resume content")
        if job_description is not None and not job_description.strip():
            job_description = None

        if self.llm_enabled and self.client is not None:
            try:
                result = await self.client.request_ai_analysis(resume_text, job_description)
                logger.info(f"Generative analysis completed: overall={result.overall_score}")
                return result
            except (ServiceError, ParseError) as e:
                logger.warning(f"Generative analysis failed, using heuristic fallback: {e}")

        result = self.heuristic.analyze(resume_text, job_description)
        logger.info(f"Heuristic analysis completed: overall={result.overall_score}")
        return result
