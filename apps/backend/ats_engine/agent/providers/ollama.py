import logging
import ollama
from ollama._types import ResponseError as OllamaResponseError

from typing import Any, Dict, List, Optional

from ..exceptions import ServiceError
from .base import Provider, run_blocking
from ...core import settings

logger = logging.getLogger(__name__)


class OllamaProvider(Provider):
    """Ollama LLM provider for resume analysis text generation."""

    _client: ollama.Client

    def __init__(
        self,
        model_name: str = settings.LL_MODEL,
        api_base_url: Optional[str] = settings.LLM_BASE_URL,
        opts: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = settings.LLM_TIMEOUT_SECONDS,
    ):
        self.opts = opts or {}
        self.model = model_name
        # bounds every list/pull/generate request made by this client
        self._client = ollama.Client(host=api_base_url or None, timeout=timeout)
        self._ensure_model_pulled(model_name)

    def _installed_models(self) -> List[str]:
        return [m.model for m in self._client.list().models]

    def _ensure_model_pulled(self, model_name: str) -> None:
        """
        Ensure model is available locally.
        - If it's already installed, skip pulling.
        - If pull fails but model is actually present, continue.
        - Raises ServiceError with clear message if model unavailable.
        """
        try:
            installed = self._installed_models()
            # "gemma3:4b" and "gemma3:4b-instruct" both count as installed
            if model_name in installed or any(m.startswith(model_name) for m in installed):
                logger.debug(f"Ollama model '{model_name}' already installed")
                return
        except Exception as e:
            logger.warning(f"Failed to list Ollama models: {e}")

        try:
            logger.info(f"Pulling Ollama model '{model_name}'...")
            self._client.pull(model_name)
            logger.info(f"Successfully pulled Ollama model '{model_name}'")
            return
        except Exception as e:
            try:
                installed = self._installed_models()
                if model_name in installed or any(m.startswith(model_name) for m in installed):
                    logger.debug(f"Ollama model '{model_name}' found after failed pull")
                    return
            except Exception as list_error:
                logger.debug(f"Ollama model listing failed again: {list_error}")

            error_msg = (
                f"Ollama model '{model_name}' is unavailable. "
                f"Please run 'ollama pull {model_name}'. "
                f"Original error: {e}"
            )
            logger.error(error_msg)
            raise ServiceError(error_msg) from e

    def _generate_sync(self, prompt: str, options: Dict[str, Any]) -> str:
        """Generate a response from the model synchronously."""
        try:
            response = self._client.generate(
                prompt=prompt,
                model=self.model,
                format="json",
                options=options,
            )
            return response["response"].strip()
        except OllamaResponseError as e:
            logger.error(f"Ollama generation error: status={e.status_code}, message={e}")
            raise ServiceError(f"Ollama - Error generating response: {e}") from e
        except Exception as e:
            logger.error(f"Ollama sync error: {e}")
            raise ServiceError(f"Ollama - Error generating response: {e}") from e

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        if generation_args:
            logger.warning(f"OllamaProvider ignoring generation_args {generation_args}")
        options = {
            "temperature": self.opts.get("temperature"),
            "num_predict": self.opts.get("max_tokens"),
        }
        options = {k: v for k, v in options.items() if v is not None}
        return await run_blocking(self._generate_sync, prompt, options)
