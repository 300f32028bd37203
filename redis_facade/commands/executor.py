"""Command execution against a ``redis.asyncio`` compatible client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from redis.exceptions import ResponseError, WatchError

from redis_facade.errors import CommandError, IndexOutOfRangeError, NotANumberError, TransactionError, WrongTypeError

from .replies import decode


if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence


logger = logging.getLogger(__name__)

_T = TypeVar("_T")

type Command = Sequence[Any]
type Reader = Callable[..., Awaitable[Any]]

DEFAULT_MAX_WATCH_RETRIES = 16

_NOT_A_NUMBER_MARKERS = ("not an integer", "not a valid float", "not a float")


def translate_error(error: ResponseError) -> CommandError | IndexOutOfRangeError:
    """Map a redis-py ``ResponseError`` onto a facade error kind."""
    message = str(error)
    lowered = message.lower()
    if "wrongtype" in lowered:
        return WrongTypeError(message)
    if any(marker in lowered for marker in _NOT_A_NUMBER_MARKERS):
        return NotANumberError(message)
    if "index out of range" in lowered:
        return IndexOutOfRangeError(message)
    return CommandError(message)


class CommandExecutor:
    """Issue single commands and transactions on behalf of the facades."""

    def __init__(self, client: Any, *, max_watch_retries: int = DEFAULT_MAX_WATCH_RETRIES) -> None:
        """Wrap an async Redis client.

        Parameters
        ----------
        client
            Client exposing ``execute_command`` and ``pipeline(transaction=True)``,
            such as ``redis.asyncio.Redis``.
        max_watch_retries
            How many times an optimistic transaction is restarted after the
            watched key changed before giving up with ``TransactionError``.
        """
        super().__init__()
        if max_watch_retries < 1:
            msg = "max_watch_retries must be at least 1"
            raise ValueError(msg)
        self._client = client
        self._max_watch_retries = max_watch_retries

    @property
    def client(self) -> Any:
        return self._client

    async def execute(self, command: str, *args: Any) -> Any:
        """Run one command and return its decoded reply."""
        logger.debug("execute %s %r", command, args)
        try:
            reply = await self._client.execute_command(command, *args)
        except ResponseError as error:
            raise translate_error(error) from error
        return decode(reply)

    async def transaction(self, commands: Sequence[Command], *, wrap: bool = True) -> list[Any]:
        """Run commands inside MULTI/EXEC, returning replies in order.

        A rejected command raises ``TransactionError`` chained to its own
        error kind, or that error kind directly when ``wrap`` is False.
        """
        if not commands:
            return []
        logger.debug("transaction of %d commands", len(commands))
        async with self._client.pipeline(transaction=True) as pipe:
            for command in commands:
                pipe.execute_command(*command)
            try:
                replies = await pipe.execute()
            except ResponseError as error:
                if not wrap:
                    raise translate_error(error) from error
                msg = f"transaction rejected: {error}"
                raise TransactionError(msg) from translate_error(error)
        return [decode(reply) for reply in replies]

    async def watch(
        self,
        key: str,
        prepare: Callable[[Reader], Awaitable[tuple[Sequence[Command], _T]]],
    ) -> tuple[_T, list[Any]]:
        """Run an optimistic read-then-write transaction on ``key``.

        ``prepare`` receives a ``read(command, *args)`` coroutine function for
        reads issued while the key is watched, and returns the commands to
        queue in MULTI/EXEC together with a value of its own. The whole cycle
        restarts when the key is modified by someone else before EXEC.
        """
        async with self._client.pipeline(transaction=True) as pipe:

            async def read(command: str, *args: Any) -> Any:
                try:
                    return decode(await pipe.execute_command(command, *args))
                except ResponseError as error:
                    raise translate_error(error) from error

            attempt = 0
            while True:
                attempt += 1
                await pipe.watch(key)
                commands, value = await prepare(read)
                if not commands:
                    return value, []
                pipe.multi()
                for command in commands:
                    pipe.execute_command(*command)
                try:
                    replies = await pipe.execute()
                except WatchError as error:
                    logger.debug("watched key %r changed, attempt %d", key, attempt)
                    if attempt >= self._max_watch_retries:
                        msg = f"gave up on {key!r} after {attempt} conflicting writes"
                        raise TransactionError(msg) from error
                    continue
                except ResponseError as error:
                    msg = f"transaction rejected: {error}"
                    raise TransactionError(msg) from translate_error(error)
                return value, [decode(reply) for reply in replies]
