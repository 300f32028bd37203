"""Set facade."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Self, override

from redis_facade.commands.replies import as_int, as_list, as_str
from redis_facade.types import KeyType

from .base import Collection, call_each


if TYPE_CHECKING:
    from collections.abc import Callable


def _check_count(count: int) -> None:
    if count < 0:
        msg = "count must not be negative"
        raise ValueError(msg)


class RedisSet(Collection):
    """Unordered collection of unique strings stored at a single key."""

    key_type: ClassVar[KeyType] = KeyType.SET

    async def add(self, *values: str) -> Self:
        """Add values; existing members are left untouched."""
        if values:
            _ = await self.exec("SADD", *values)
        return self

    @override
    async def has(self, value: str) -> bool:
        return bool(await self.exec("SISMEMBER", value))

    @override
    async def delete(self, *values: str) -> bool:
        if not values:
            return False
        return as_int(await self.exec("SREM", *values)) > 0

    @override
    async def values(self) -> list[str]:
        return as_list(await self.exec("SMEMBERS"))

    @override
    async def size(self) -> int:
        return as_int(await self.exec("SCARD"))

    async def pop(self) -> str | None:
        """Remove and return a random member, or None when empty."""
        return as_str(await self.exec("SPOP"))

    async def pop_many(self, count: int) -> list[str]:
        """Remove and return up to ``count`` random members."""
        _check_count(count)
        if count == 0:
            return []
        return as_list(await self.exec("SPOP", count))

    async def random(self) -> str | None:
        """Return a random member without removing it."""
        return as_str(await self.exec("SRANDMEMBER"))

    async def random_many(self, count: int) -> list[str]:
        """Return up to ``count`` distinct random members without removing them."""
        _check_count(count)
        if count == 0:
            return []
        return as_list(await self.exec("SRANDMEMBER", count))

    def _operand_keys(self, sets: tuple[RedisSet, ...]) -> list[str]:
        keys = []
        for other in sets:
            if not isinstance(other, RedisSet):
                msg = f"expected RedisSet, got {type(other).__name__}"
                raise TypeError(msg)
            if other.client is not self.client:
                msg = f"{other!r} is bound to a different client"
                raise ValueError(msg)
            keys.append(other.key)
        return keys

    async def difference(self, *sets: RedisSet) -> list[str]:
        """Members of this set that are in none of ``sets``."""
        return as_list(await self.exec("SDIFF", *self._operand_keys(sets)))

    async def intersection(self, *sets: RedisSet) -> list[str]:
        return as_list(await self.exec("SINTER", *self._operand_keys(sets)))

    async def union(self, *sets: RedisSet) -> list[str]:
        return as_list(await self.exec("SUNION", *self._operand_keys(sets)))

    async def for_each(self, fn: Callable[[str], Any]) -> None:
        """Call ``fn(value)`` over a single snapshot of the set."""
        await call_each(fn, [(value,) for value in await self.values()])
