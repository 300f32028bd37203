"""Top-level entry point binding every facade type to one client."""

from __future__ import annotations

import logging
from inspect import isawaitable
from typing import TYPE_CHECKING, Any, Self

import redis.asyncio as redis_async

from redis_facade.commands import DEFAULT_MAX_WATCH_RETRIES, CommandExecutor
from redis_facade.facades import RedisHashMap, RedisList, RedisSet, RedisSortedSet, RedisString
from redis_facade.utils import FacadeType, FacadeUtils


if TYPE_CHECKING:
    from types import TracebackType


logger = logging.getLogger(__name__)

DEFAULT_URL = "redis://localhost:6379/0"


class RedisFacades(FacadeUtils):
    """One factory per data type plus key-level utilities, all sharing a client."""

    def __init__(self, executor: CommandExecutor) -> None:
        super().__init__(executor)
        self.string = FacadeType(RedisString, executor)
        self.list = FacadeType(RedisList, executor)
        self.hash_map = FacadeType(RedisHashMap, executor)
        self.set = FacadeType(RedisSet, executor)
        self.sorted_set = FacadeType(RedisSortedSet, executor)

    async def close(self) -> None:
        """Release the underlying client."""
        client = self.executor.client
        close_method = getattr(client, "aclose", None)
        if close_method is None:
            close_method = getattr(client, "close", None)
        if close_method is None:
            return

        maybe_awaitable = close_method()
        if isawaitable(maybe_awaitable):
            await maybe_awaitable

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.close()


def create_facade(
    client: Any | None = None,
    *,
    url: str = DEFAULT_URL,
    max_watch_retries: int = DEFAULT_MAX_WATCH_RETRIES,
) -> RedisFacades:
    """Create facades bound to an explicit client.

    Parameters
    ----------
    client
        Optional injected async client with ``execute_command`` and ``pipeline`` APIs.
    url
        Redis connection URL used when ``client`` is not provided.
    max_watch_retries
        Restart limit for optimistic transactions (splice, sort, reverse).
    """
    if client is None:
        logger.debug("connecting to %s", url)
        client = redis_async.from_url(url, decode_responses=True)
    return RedisFacades(CommandExecutor(client, max_watch_retries=max_watch_retries))
