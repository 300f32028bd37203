"""Cross-cutting helpers that operate on arbitrary keys."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from redis_facade.commands.replies import as_int, as_str
from redis_facade.errors import WrongTypeError
from redis_facade.facades import Facade
from redis_facade.types import KeyType


if TYPE_CHECKING:
    from redis_facade.commands import CommandExecutor


_F = TypeVar("_F", bound=Facade)


def parse_key_type(raw: Any) -> KeyType:
    """Map the reply of TYPE onto a ``KeyType``."""
    name = as_str(raw)
    try:
        return KeyType(name)
    except ValueError as error:
        msg = f"unsupported key type: {name}"
        raise WrongTypeError(msg) from error


class FacadeType(Generic[_F]):
    """Factory for one facade class, bound to an executor."""

    def __init__(self, facade_class: type[_F], executor: CommandExecutor) -> None:
        super().__init__()
        self._facade_class = facade_class
        self._executor = executor

    @property
    def facade_class(self) -> type[_F]:
        return self._facade_class

    def of(self, key: str) -> _F:
        """Create a handle bound to ``key``."""
        return self._facade_class(self._executor, key)

    async def has(self, key: str) -> bool:
        """Return True when ``key`` exists and holds this facade's type."""
        raw = await self._executor.execute("TYPE", key)
        return parse_key_type(raw) is self._facade_class.key_type


class FacadeUtils:
    """Key-level operations that do not need a typed handle."""

    def __init__(self, executor: CommandExecutor) -> None:
        super().__init__()
        self._executor = executor

    @property
    def executor(self) -> CommandExecutor:
        return self._executor

    @staticmethod
    def is_same(first: Facade, second: Facade) -> bool:
        """Return True when both handles refer to the same client and key."""
        return first.is_same(second)

    async def exec(self, command: str, *args: Any) -> Any:
        """Run a command on a key (``exec("GET", key)``) or on the server (``exec("PING")``)."""
        return await self._executor.execute(command, *args)

    async def has(self, key: str) -> bool:
        return as_int(await self._executor.execute("EXISTS", key)) > 0

    async def delete(self, key: str) -> bool:
        """Delete ``key``; returns True when it existed."""
        return as_int(await self._executor.execute("DEL", key)) > 0

    async def typeof(self, key: str) -> KeyType:
        return parse_key_type(await self._executor.execute("TYPE", key))
