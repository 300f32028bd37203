"""Common contract shared by every typed facade."""

from __future__ import annotations

from abc import ABC, abstractmethod
from inspect import isawaitable
from typing import TYPE_CHECKING, Any, ClassVar, override


if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable, Sequence

    from redis_facade.commands import CommandExecutor
    from redis_facade.types import KeyType


async def call_each(fn: Callable[..., Any], rows: Sequence[tuple[Any, ...]]) -> None:
    """Call ``fn(*row)`` for every row, awaiting coroutine results in order."""
    for row in rows:
        result = fn(*row)
        if isawaitable(result):
            await result


class Facade:
    """Handle bound to one Redis key.

    A handle holds no data of its own: every call round-trips to the store,
    which stays authoritative.
    """

    key_type: ClassVar[KeyType]

    def __init__(self, executor: CommandExecutor, key: str) -> None:
        """Bind a facade to ``key``.

        Parameters
        ----------
        executor
            Executor wrapping the Redis client all commands go through.
        key
            Redis key this handle operates on.
        """
        super().__init__()
        if not isinstance(key, str) or not key:
            msg = "key must be a non-empty string"
            raise ValueError(msg)
        self._executor = executor
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @property
    def executor(self) -> CommandExecutor:
        return self._executor

    @property
    def client(self) -> Any:
        return self._executor.client

    def is_same(self, other: object) -> bool:
        """Return True when both handles use the same client and the same key."""
        if not isinstance(other, Facade):
            return False
        return other.client is self.client and other.key == self.key

    async def set_ttl(self, seconds: int) -> int:
        """Expire the key after ``seconds``; returns 1 if set, 0 if the key is missing."""
        return int(await self.exec("EXPIRE", seconds))

    async def get_ttl(self) -> int:
        """Return remaining seconds, -1 without expiry or -2 for a missing key."""
        return int(await self.exec("TTL"))

    async def clear(self) -> None:
        """Delete the key; deleting a missing key is not an error."""
        _ = await self.exec("DEL")

    async def exec(self, command: str, *args: Any) -> Any:
        """Run ``command key *args``; the key is injected after the command name."""
        return await self._executor.execute(command, self._key, *args)

    async def batch(self, *commands: Sequence[Any]) -> list[Any]:
        """Run several commands on this key in one MULTI/EXEC block.

        Each command is ``(name, *args)`` without the key. No other client's
        command runs in between, but commands that succeeded before a failing
        one are not rolled back.
        """
        return await self._executor.transaction(self._with_key(commands))

    async def _atomic(self, *commands: Sequence[Any]) -> list[Any]:
        """Like ``batch``, but a rejected command raises its own error kind."""
        return await self._executor.transaction(self._with_key(commands), wrap=False)

    def _with_key(self, commands: Sequence[Sequence[Any]]) -> list[tuple[Any, ...]]:
        queued: list[tuple[Any, ...]] = []
        for command in commands:
            if not command:
                msg = "batched commands must not be empty"
                raise ValueError(msg)
            name, *args = command
            queued.append((name, self._key, *args))
        return queued

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key!r})"


class Collection(Facade, ABC):
    """Facade over a multi-valued Redis type."""

    @abstractmethod
    async def has(self, value: str) -> bool:
        """Return True when ``value`` is in the collection."""

    @abstractmethod
    async def delete(self, *values: str) -> bool:
        """Remove values; returns True when anything was removed."""

    @abstractmethod
    async def values(self) -> list[str]:
        """Return all values."""

    @abstractmethod
    async def size(self) -> int:
        """Return the number of elements."""

    async def __aiter__(self) -> AsyncIterator[str]:
        for value in await self.values():
            yield value
