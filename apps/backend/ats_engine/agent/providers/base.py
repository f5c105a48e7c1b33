import functools
from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

from anyio import to_thread

T = TypeVar("T")


async def run_blocking(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Run a blocking client call on a worker thread.

    Cancelling the awaiting task abandons the thread instead of waiting for it,
    so an `asyncio.wait_for` around this call times out on schedule even while
    the client is still stuck on the network.
    """
    return await to_thread.run_sync(functools.partial(func, *args, **kwargs), abandon_on_cancel=True)


class Provider(ABC):
    """
    Abstract base class for generative text providers.
    """

    @abstractmethod
    async def __call__(self, prompt: str, **generation_args: Any) -> str: ...
