import logging
from typing import Any, Optional

from pydantic import ValidationError

from ..agent.exceptions import ParseError
from ..agent.manager import AgentManager
from ..prompt import build_prompt
from ..schemas.pydantic.resume_analysis import AnalysisResult, GenerativeAnalysis

logger = logging.getLogger(__name__)


def parse_generative_analysis(payload: Any) -> GenerativeAnalysis:
    """Validate a decoded model response; anything unusable becomes ParseError."""
    if not isinstance(payload, dict):
        raise ParseError(f"Expected a JSON object, got {type(payload).__name__}")
    try:
        return GenerativeAnalysis.model_validate(payload)
    except ValidationError as e:
        raise ParseError(f"Invalid response format from generative analysis service: {e}") from e


class GenerativeAnalysisClient:
    """
    Thin client around the external model. The response is never trusted:
    it is parsed as opaque text and structurally validated before use.
    """

    def __init__(self, agent_manager: Optional[AgentManager] = None):
        self.agent_manager = agent_manager or AgentManager()

    async def request_ai_analysis(self, resume_text: str, job_description: Optional[str] = None) -> AnalysisResult:
        """
        Raises:
            ServiceError: transport failure, provider misconfiguration or timeout
            ParseError: empty, non-JSON or structurally invalid response
        """
        prompt = build_prompt(resume_text, job_description)
        payload = await self.agent_manager.run(prompt)
        analysis = parse_generative_analysis(payload)
        try:
            return analysis.to_result()
        except ValidationError as e:
            raise ParseError(f"Generative analysis could not be normalised: {e}") from e
