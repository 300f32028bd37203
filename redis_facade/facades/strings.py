"""String facade."""

from __future__ import annotations

from typing import ClassVar

from redis_facade.commands.replies import as_str, format_number, is_integral
from redis_facade.errors import NotANumberError
from redis_facade.types import KeyType

from .base import Facade


class RedisString(Facade):
    """String value stored at a single key."""

    key_type: ClassVar[KeyType] = KeyType.STRING

    async def set(self, value: str, ttl: int | None = None) -> str:
        """Store ``value``, optionally expiring after ``ttl`` seconds."""
        if ttl is None:
            _ = await self.exec("SET", value)
        else:
            _ = await self.exec("SET", value, "EX", ttl)
        return value

    async def get(self) -> str:
        """Return the value, or an empty string when the key is missing."""
        return as_str(await self.exec("GET")) or ""

    async def slice(self, start: int, end: int | None = None) -> str:
        """Return ``value[start:end]`` without modifying the stored string."""
        return (await self.get())[start:end]

    async def starts_with(self, prefix: str) -> bool:
        # Read then compare locally; not atomic with concurrent writers.
        return (await self.get()).startswith(prefix)

    async def ends_with(self, suffix: str) -> bool:
        return (await self.get()).endswith(suffix)

    async def append(self, text: str) -> str:
        """Append ``text`` and return the new full value."""
        _, value = await self._atomic(("APPEND", text), ("GET",))
        return as_str(value) or ""

    async def increase(self, amount: float = 1) -> str:
        """Add ``amount`` to a numeric string and return the new value.

        Integer amounts use INCRBY, falling back to INCRBYFLOAT when the
        stored value is a float literal. Raises ``NotANumberError`` when the
        stored value is not numeric.
        """
        if is_integral(amount):
            try:
                return format_number(await self.exec("INCRBY", amount))
            except NotANumberError:
                pass
        return format_number(await self.exec("INCRBYFLOAT", amount))

    async def decrease(self, amount: float = 1) -> str:
        return await self.increase(-amount)

    async def length(self) -> int:
        """Return the UTF-8 byte length of the value."""
        return int(await self.exec("STRLEN"))
