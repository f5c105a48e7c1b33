import json
import logging
import re
from typing import Any, Dict

from ..exceptions import ParseError
from ..providers.base import Provider
from .base import Strategy

logger = logging.getLogger(__name__)

_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)
# Some models wrap keys in **bold** even when asked for raw JSON.
_BOLD = re.compile(r"\*\*(.*?)\*\*")


def extract_json_object(raw: Any) -> Dict[str, Any]:
    """
    Parse an untrusted model response into a JSON object.

    Raises ParseError for anything that is not a non-empty string holding a
    single JSON object.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise ParseError("Empty or invalid response from generative analysis service")

    text = raw.strip()
    fenced = _FENCE.match(text)
    if fenced:
        text = fenced.group(1)
    text = _BOLD.sub(r"\1", text)

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        # Tolerate chatter around the object: take the outermost braces.
        start, end = text.find("{"), text.rfind("}")
        if start < 0 or end <= start:
            raise ParseError(f"Invalid JSON response from generative analysis service: {e}") from e
        try:
            payload = json.loads(text[start:end + 1])
        except json.JSONDecodeError as inner:
            raise ParseError(f"Invalid JSON response from generative analysis service: {inner}") from inner

    if not isinstance(payload, dict):
        raise ParseError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload


class JSONWrapper(Strategy):
    async def __call__(self, prompt: str, provider: Provider, **generation_args: Any) -> Dict[str, Any]:
        raw = await provider(prompt, **generation_args)
        try:
            return extract_json_object(raw)
        except ParseError:
            logger.warning(f"Unparseable model response ({len(raw) if isinstance(raw, str) else 0} chars)")
            raise
