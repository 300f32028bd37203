"""Key types and store-level constants."""

from __future__ import annotations

from enum import StrEnum


class KeyType(StrEnum):
    """Redis key types a facade can be bound to."""

    STRING = "string"
    LIST = "list"
    SET = "set"
    ZSET = "zset"
    HASH = "hash"
    NONE = "none"


# TTL reply sentinels, exposed as Redis reports them.
TTL_NO_EXPIRY = -1
TTL_KEY_MISSING = -2
