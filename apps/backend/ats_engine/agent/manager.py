import asyncio
import logging
from typing import Any, Dict, Optional

from ..core import settings
from .exceptions import ServiceError
from .providers.base import Provider, run_blocking
from .strategies.base import Strategy
from .strategies.wrapper import JSONWrapper

logger = logging.getLogger(__name__)


class AgentManager:
    """
    Sends a prompt to the configured generative provider and returns parsed JSON.

    Each run is a single attempt bounded by `timeout` seconds. Provider
    construction problems, transport failures and timeouts all surface as
    ServiceError; unusable output surfaces as ParseError.
    """

    def __init__(self,
                 model: str = settings.LL_MODEL,
                 model_provider: str = settings.LLM_PROVIDER,
                 timeout: Optional[float] = settings.LLM_TIMEOUT_SECONDS,
                 strategy: Optional[Strategy] = None,
                 ) -> None:
        self.strategy = strategy or JSONWrapper()
        self.model = model
        self.model_provider = model_provider
        self.timeout = timeout

    def _build_provider(self, **kwargs: Any) -> Provider:
        # Default options for any LLM. Not all can handle them but each
        # provider can make best effort.
        opts = {
            "temperature": settings.LLM_TEMPERATURE,
            "max_tokens": settings.LLM_MAX_TOKENS,
        }
        opts.update(kwargs)
        try:
            match self.model_provider:
                case 'ollama':
                    from .providers.ollama import OllamaProvider
                    model = opts.get("model", self.model)
                    return OllamaProvider(model_name=model, opts=opts, timeout=self.timeout)
                case _:
                    from .providers.llama_index import LlamaIndexProvider
                    return LlamaIndexProvider(api_key=opts.get("llm_api_key", settings.LLM_API_KEY),
                                              model_name=self.model,
                                              api_base_url=opts.get("llm_base_url", settings.LLM_BASE_URL),
                                              provider=self.model_provider,
                                              opts=opts)
        except ServiceError:
            raise
        except Exception as e:
            logger.error(f"Could not initialise provider '{self.model_provider}': {e}")
            raise ServiceError(f"Provider '{self.model_provider}' unavailable: {e}") from e

    async def _get_provider(self, **kwargs: Any) -> Provider:
        # construction talks to the provider (model listing, pulls), so keep
        # it off the event loop where the run timeout can still interrupt it
        return await run_blocking(self._build_provider, **kwargs)

    async def _run(self, prompt: str, **kwargs: Any) -> Dict[str, Any]:
        provider = await self._get_provider(**kwargs)
        return await self.strategy(prompt, provider)

    async def run(self, prompt: str, **kwargs: Any) -> Dict[str, Any]:
        """
        Run the agent with the given prompt and generation arguments.
        """
        try:
            return await asyncio.wait_for(self._run(prompt, **kwargs), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Generative analysis timed out after {self.timeout}s")
            raise ServiceError(f"Generative analysis timed out after {self.timeout}s") from e
