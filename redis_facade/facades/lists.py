"""List facade.

Positional arguments follow Python conventions: indices are zero-based and a
negative index counts from the end, so ``-1`` is the last element. Slices
exclude their end and clamp to the current bounds, while ``get``/``set``
raise ``IndexOutOfRangeError`` outside ``[-length, length)``.

``splice``, ``sort`` and ``reverse`` have no matching Redis command. They read
the list under WATCH, compute the new contents locally and rewrite the key in
one MULTI/EXEC block, restoring any TTL the key carried.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Any, ClassVar

from redis_facade.commands.replies import as_int, as_list, as_str
from redis_facade.errors import CommandError, IndexOutOfRangeError
from redis_facade.types import KeyType

from .base import Collection, call_each
from .indexing import range_bounds, splice_window


if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from redis_facade.commands.executor import Command, Reader


# Plain ASCII decimal literals only; float() alone also accepts underscores and padding.
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _as_number(value: str) -> float | None:
    if _NUMBER.fullmatch(value) is None:
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def _check_order(order: int) -> None:
    if order not in (1, -1):
        msg = "order must be 1 (ascending) or -1 (descending)"
        raise ValueError(msg)


def sort_values(values: Sequence[str], order: int = 1) -> list[str]:
    """Sort numerically when every value is a decimal literal, else lexicographically."""
    _check_order(order)
    numbers = [_as_number(value) for value in values]
    if all(number is not None for number in numbers):
        pairs = sorted(zip(numbers, values, strict=True), key=lambda pair: pair[0], reverse=order == -1)
        return [value for _, value in pairs]
    return sorted(values, reverse=order == -1)


class RedisList(Collection):
    """Ordered sequence of strings stored at a single key."""

    key_type: ClassVar[KeyType] = KeyType.LIST

    async def push(self, *values: str) -> int:
        """Append values to the tail; returns the new length."""
        if not values:
            return await self.size()
        return as_int(await self.exec("RPUSH", *values))

    async def unshift(self, *values: str) -> int:
        """Prepend values to the head, keeping their order; returns the new length."""
        if not values:
            return await self.size()
        return as_int(await self.exec("LPUSH", *reversed(values)))

    async def pop(self) -> str | None:
        """Remove and return the last element, or None when empty."""
        return as_str(await self.exec("RPOP"))

    async def shift(self) -> str | None:
        """Remove and return the first element, or None when empty."""
        return as_str(await self.exec("LPOP"))

    async def has(self, value: str) -> bool:
        return await self.exec("LPOS", value) is not None

    async def includes(self, value: str) -> bool:
        return await self.has(value)

    async def index_of(self, value: str) -> int:
        """Return the index of the first occurrence, or -1."""
        position = await self.exec("LPOS", value)
        return -1 if position is None else as_int(position)

    async def get(self, index: int) -> str:
        value = await self.exec("LINDEX", index)
        if value is None:
            msg = f"list index out of range: {index}"
            raise IndexOutOfRangeError(msg)
        return as_str(value)  # type: ignore[return-value]

    async def set(self, index: int, value: str) -> str:
        try:
            _ = await self.exec("LSET", index, value)
        except CommandError as error:
            if "no such key" not in str(error).lower():
                raise
            msg = f"list index out of range: {index}"
            raise IndexOutOfRangeError(msg) from error
        return value

    async def delete(self, *values: str) -> bool:
        """Remove every occurrence of each value."""
        if not values:
            return False
        removed = await self._atomic(*(("LREM", 0, value) for value in values))
        return any(as_int(count) > 0 for count in removed)

    async def values(self) -> list[str]:
        return as_list(await self.exec("LRANGE", 0, -1))

    async def size(self) -> int:
        return as_int(await self.exec("LLEN"))

    async def length(self) -> int:
        return await self.size()

    async def slice(self, start: int, end: int | None = None) -> list[str]:
        """Return ``list[start:end]`` without modification."""
        bounds = range_bounds(start, end)
        if bounds is None:
            return []
        return as_list(await self.exec("LRANGE", *bounds))

    def _rewrite(self, values: Sequence[str], pttl: Any) -> list[Command]:
        commands: list[Command] = [("DEL", self.key)]
        if values:
            commands.append(("RPUSH", self.key, *values))
            if as_int(pttl) > 0:
                commands.append(("PEXPIRE", self.key, pttl))
        return commands

    async def _transform(self, change: Callable[[list[str]], tuple[list[str], list[str]]]) -> list[str]:
        """Rewrite the list atomically; ``change`` maps current values to ``(new, result)``."""

        async def prepare(read: Reader) -> tuple[list[Command], list[str]]:
            pttl = await read("PTTL", self.key)
            current = as_list(await read("LRANGE", self.key, 0, -1))
            updated, result = change(current)
            if updated == current:
                return [], result
            return self._rewrite(updated, pttl), result

        result, _ = await self.executor.watch(self.key, prepare)
        return result

    async def splice(self, start: int, count: int = 1, *items: str) -> list[str]:
        """Remove ``count`` elements at ``start``, insert ``items`` there, return the removed ones."""

        def change(current: list[str]) -> tuple[list[str], list[str]]:
            begin, stop = splice_window(start, count, len(current))
            return [*current[:begin], *items, *current[stop:]], current[begin:stop]

        return await self._transform(change)

    async def sort(self, order: int = 1) -> list[str]:
        """Sort in place, ascending (1) or descending (-1); returns the sorted list."""
        _check_order(order)

        def change(current: list[str]) -> tuple[list[str], list[str]]:
            ordered = sort_values(current, order)
            return ordered, ordered

        return await self._transform(change)

    async def reverse(self) -> list[str]:
        """Reverse in place; returns the reversed list."""

        def change(current: list[str]) -> tuple[list[str], list[str]]:
            reversed_values = current[::-1]
            return reversed_values, reversed_values

        return await self._transform(change)

    async def for_each(self, fn: Callable[[str, int], Any]) -> None:
        """Call ``fn(value, index)`` over a single snapshot of the list."""
        await call_each(fn, [(value, index) for index, value in enumerate(await self.values())])
