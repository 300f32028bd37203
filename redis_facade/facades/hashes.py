"""Hash facade."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Self, override

from redis_facade.commands.replies import as_dict, as_int, as_list, as_str, format_number, is_integral
from redis_facade.errors import NotANumberError
from redis_facade.types import KeyType

from .base import Collection, call_each


if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable


class RedisHashMap(Collection):
    """Field/value map stored at a single key."""

    key_type: ClassVar[KeyType] = KeyType.HASH

    async def set(self, field: str | Mapping[str, str], value: str | None = None) -> Self:
        """Set one field, or every pair of a mapping in a single HSET."""
        if isinstance(field, Mapping):
            if value is not None:
                msg = "value must be omitted when setting a mapping"
                raise TypeError(msg)
            pairs = [item for pair in field.items() for item in pair]
            if pairs:
                _ = await self.exec("HSET", *pairs)
            return self
        if value is None:
            msg = f"missing value for field {field!r}"
            raise TypeError(msg)
        _ = await self.exec("HSET", field, value)
        return self

    async def get(self, field: str) -> str | None:
        return as_str(await self.exec("HGET", field))

    @override
    async def has(self, value: str) -> bool:
        """Return True when the field exists."""
        return bool(await self.exec("HEXISTS", value))

    @override
    async def delete(self, field: str) -> bool:  # type: ignore[override]
        """Delete a single field."""
        return as_int(await self.exec("HDEL", field)) > 0

    async def keys(self) -> list[str]:
        return as_list(await self.exec("HKEYS"))

    @override
    async def values(self) -> list[str]:
        return as_list(await self.exec("HVALS"))

    @override
    async def size(self) -> int:
        return as_int(await self.exec("HLEN"))

    async def get_all(self) -> dict[str, str]:
        return as_dict(await self.exec("HGETALL"))

    async def increase(self, field: str, amount: float = 1) -> str:
        """Add ``amount`` to a numeric field, creating it at ``amount`` when absent."""
        if is_integral(amount):
            try:
                return format_number(await self.exec("HINCRBY", field, amount))
            except NotANumberError:
                pass
        return format_number(await self.exec("HINCRBYFLOAT", field, amount))

    async def decrease(self, field: str, amount: float = 1) -> str:
        return await self.increase(field, -amount)

    async def for_each(self, fn: Callable[[str, str], Any]) -> None:
        """Call ``fn(value, field)`` over a single snapshot of the map."""
        await call_each(fn, [(value, field) for field, value in (await self.get_all()).items()])

    @override
    async def __aiter__(self) -> AsyncIterator[str]:
        for field in await self.keys():
            yield field
