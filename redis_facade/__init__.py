"""redis-facade - native collection semantics over Redis data types"""

from ._version import version as __version__
from .commands import CommandExecutor
from .errors import (
    CommandError,
    FacadeError,
    IndexOutOfRangeError,
    NotANumberError,
    TransactionError,
    WrongTypeError,
)
from .factory import DEFAULT_URL, RedisFacades, create_facade
from .facades import RedisHashMap, RedisList, RedisSet, RedisSortedSet, RedisString
from .types import TTL_KEY_MISSING, TTL_NO_EXPIRY, KeyType
from .utils import FacadeType, FacadeUtils


__all__ = [
    "DEFAULT_URL",
    "TTL_KEY_MISSING",
    "TTL_NO_EXPIRY",
    "CommandError",
    "CommandExecutor",
    "FacadeError",
    "FacadeType",
    "FacadeUtils",
    "IndexOutOfRangeError",
    "KeyType",
    "NotANumberError",
    "RedisFacades",
    "RedisHashMap",
    "RedisList",
    "RedisSet",
    "RedisSortedSet",
    "RedisString",
    "TransactionError",
    "WrongTypeError",
    "__version__",
    "create_facade",
]
