from abc import ABC, abstractmethod
from typing import Any, Dict

from ..providers.base import Provider


class Strategy(ABC):
    @abstractmethod
    async def __call__(self, prompt: str, provider: Provider, **generation_args: Any) -> Dict[str, Any]:
        """
        Run the provider on the prompt and turn its raw text into structured output.
        """
        ...
