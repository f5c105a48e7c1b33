"""
Hosted generative analysis through LlamaIndex.

LLM_PROVIDER names a LlamaIndex LLM class by its dotted path, e.g.
`llama_index.llms.anthropic.Anthropic` or `llama_index.llms.openai_like.OpenAILike`.
"""

import logging
from importlib import import_module
from typing import Any, Dict, Optional, Type

from llama_index.core.base.llms.base import BaseLLM

from ..exceptions import ServiceError
from .base import Provider, run_blocking
from ...core import settings

logger = logging.getLogger(__name__)


def _load_llm_class(dotted_name: str) -> Type[BaseLLM]:
    modname, _, classname = dotted_name.rpartition(".")
    if not modname:
        raise ValueError(f"LLM provider '{dotted_name}' is not a dotted class path")
    llm_class = getattr(import_module(modname), classname)
    if not isinstance(llm_class, type) or not issubclass(llm_class, BaseLLM):
        raise TypeError(f"LLM provider '{dotted_name}' is not a llama_index BaseLLM subclass")
    return llm_class


class LlamaIndexProvider(Provider):
    def __init__(self,
                 api_key: Optional[str] = settings.LLM_API_KEY,
                 api_base_url: Optional[str] = settings.LLM_BASE_URL,
                 model_name: str = settings.LL_MODEL,
                 provider: str = settings.LLM_PROVIDER,
                 opts: Optional[Dict[str, Any]] = None):
        opts = opts or {}
        llm_class = _load_llm_class(provider)
        kwargs = {
            "model": model_name,
            "api_key": api_key,
            "base_url": api_base_url,
            "temperature": opts.get("temperature"),
            "max_tokens": opts.get("max_tokens"),
        }
        self._client = llm_class(**{k: v for k, v in kwargs.items() if v is not None})

    def _generate_sync(self, prompt: str) -> str:
        try:
            return self._client.complete(prompt).text
        except Exception as e:
            logger.error(f"llama_index generation error: {e}")
            raise ServiceError(f"llama_index - Error generating response: {e}") from e

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        if generation_args:
            logger.warning(f"LlamaIndexProvider ignoring generation_args: {generation_args}")
        return await run_blocking(self._generate_sync, prompt)
