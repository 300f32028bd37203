"""Sorted set facade.

Members are ranked by ascending score, ties broken lexicographically by
member, which is the order Redis itself keeps. Members added without a score
get ``DEFAULT_SCORE``; since they all tie, they end up sorted alphabetically
among themselves.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Self, override

from redis_facade.commands.replies import as_float, as_int, as_list, as_pairs, format_score
from redis_facade.types import KeyType

from .base import Collection, call_each
from .indexing import range_bounds, splice_window


if TYPE_CHECKING:
    from collections.abc import Callable

    from redis_facade.commands.executor import Command, Reader


DEFAULT_SCORE = 0.0


class RedisSortedSet(Collection):
    """Score-ordered collection of unique strings stored at a single key."""

    key_type: ClassVar[KeyType] = KeyType.ZSET

    async def add(self, value: str | Mapping[str, float], score: float | None = None) -> Self:
        """Add one member, or a ``{member: score}`` mapping; existing members get the new score."""
        if isinstance(value, Mapping):
            if score is not None:
                msg = "score must be omitted when adding a mapping"
                raise TypeError(msg)
            args = [item for member, member_score in value.items() for item in (format_score(member_score), member)]
            if args:
                _ = await self.exec("ZADD", *args)
            return self
        _ = await self.exec("ZADD", format_score(DEFAULT_SCORE if score is None else score), value)
        return self

    @override
    async def has(self, value: str) -> bool:
        return await self.exec("ZSCORE", value) is not None

    @override
    async def delete(self, *values: str) -> bool:
        if not values:
            return False
        return as_int(await self.exec("ZREM", *values)) > 0

    @override
    async def values(self) -> list[str]:
        return as_list(await self.exec("ZRANGE", 0, -1))

    @override
    async def size(self) -> int:
        return as_int(await self.exec("ZCARD"))

    async def index_of(self, value: str) -> int:
        """Return the rank of ``value``, or -1 when absent."""
        rank = await self.exec("ZRANK", value)
        return -1 if rank is None else as_int(rank)

    async def score_of(self, value: str) -> float | None:
        return as_float(await self.exec("ZSCORE", value))

    async def scores(self) -> dict[str, float]:
        """Return every member with its score, in rank order."""
        return dict(as_pairs(await self.exec("ZRANGE", 0, -1, "WITHSCORES")))

    async def increase(self, value: str, amount: float = 1) -> float:
        """Add ``amount`` to the score, creating the member at ``amount``; returns the new score."""
        return as_float(await self.exec("ZINCRBY", format_score(amount), value))  # type: ignore[return-value]

    async def decrease(self, value: str, amount: float = 1) -> float:
        return await self.increase(value, -amount)

    async def set(self, value: str, score: float) -> float:
        """Set the score of ``value``, adding it when absent; returns ``score``."""
        _ = await self.exec("ZADD", format_score(score), value)
        return score

    async def _pop(self, command: str) -> tuple[str, float] | None:
        pairs = as_pairs(await self.exec(command))
        return pairs[0] if pairs else None

    async def pop(self) -> str | None:
        """Remove and return the highest-ranked member."""
        popped = await self._pop("ZPOPMAX")
        return None if popped is None else popped[0]

    async def pop_with_score(self) -> tuple[str, float] | None:
        return await self._pop("ZPOPMAX")

    async def shift(self) -> str | None:
        """Remove and return the lowest-ranked member."""
        popped = await self._pop("ZPOPMIN")
        return None if popped is None else popped[0]

    async def shift_with_score(self) -> tuple[str, float] | None:
        return await self._pop("ZPOPMIN")

    async def slice(self, start: int, end: int | None = None) -> list[str]:
        """Return members ranked ``[start:end]`` without modification."""
        bounds = range_bounds(start, end)
        if bounds is None:
            return []
        return as_list(await self.exec("ZRANGE", *bounds))

    async def splice(self, start: int, count: int = 1) -> list[str]:
        """Remove and return ``count`` members starting at rank ``start``."""

        async def prepare(read: Reader) -> tuple[list[Command], None]:
            begin, stop = splice_window(start, count, as_int(await read("ZCARD", self.key)))
            if stop <= begin:
                return [], None
            return [("ZRANGE", self.key, begin, stop - 1), ("ZREMRANGEBYRANK", self.key, begin, stop - 1)], None

        _, replies = await self.executor.watch(self.key, prepare)
        return as_list(replies[0]) if replies else []

    async def count_by_score(self, min_score: float, max_score: float | None = None) -> int:
        """Count members scored ``min_score`` exactly, or within ``[min_score, max_score]``."""
        upper = min_score if max_score is None else max_score
        return as_int(await self.exec("ZCOUNT", format_score(min_score), format_score(upper)))

    async def slice_by_score(self, min_score: float, max_score: float) -> list[str]:
        """Return members scored within ``[min_score, max_score]`` without modification."""
        return as_list(await self.exec("ZRANGEBYSCORE", format_score(min_score), format_score(max_score)))

    async def splice_by_score(self, min_score: float, max_score: float) -> list[str]:
        """Remove and return members scored within ``[min_score, max_score]``."""
        bounds = (format_score(min_score), format_score(max_score))
        removed, _ = await self._atomic(("ZRANGEBYSCORE", *bounds), ("ZREMRANGEBYSCORE", *bounds))
        return as_list(removed)

    async def for_each(self, fn: Callable[[str, float], Any]) -> None:
        """Call ``fn(value, score)`` in rank order over a single snapshot."""
        await call_each(fn, list((await self.scores()).items()))
