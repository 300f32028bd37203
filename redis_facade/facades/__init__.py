"""Typed facades over Redis data types."""

from .base import Collection, Facade
from .hashes import RedisHashMap
from .lists import RedisList
from .sets import RedisSet
from .sorted_sets import DEFAULT_SCORE, RedisSortedSet
from .strings import RedisString


__all__ = [
    "DEFAULT_SCORE",
    "Collection",
    "Facade",
    "RedisHashMap",
    "RedisList",
    "RedisSet",
    "RedisSortedSet",
    "RedisString",
]
