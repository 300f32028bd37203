"""Reply normalization helpers.

redis-py applies its own response callbacks, and those differ between RESP2
and RESP3 and between client versions. The helpers here accept every shape a
reply may arrive in and reduce it to the plain Python types the facades
return.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Iterable


def decode(reply: Any) -> Any:
    """Recursively convert bytes to ``str`` and sets/tuples to lists."""
    if isinstance(reply, bytes):
        return reply.decode()
    if isinstance(reply, dict):
        return {decode(key): decode(value) for key, value in reply.items()}
    if isinstance(reply, (list, tuple, set, frozenset)):
        return [decode(item) for item in reply]
    return reply


def as_str(reply: Any) -> str | None:
    if reply is None:
        return None
    if isinstance(reply, bytes):
        return reply.decode()
    return str(reply)


def as_int(reply: Any) -> int:
    return int(reply)


def as_float(reply: Any) -> float | None:
    if reply is None:
        return None
    return float(reply)


def as_list(reply: Any) -> list[str]:
    """Return a list of strings; ``None`` and scalars are handled."""
    if reply is None:
        return []
    if isinstance(reply, (str, bytes)):
        return [as_str(reply)]  # type: ignore[list-item]
    return [as_str(item) for item in reply]  # type: ignore[misc]


def _chunk(items: list[Any]) -> Iterable[tuple[Any, Any]]:
    return zip(items[::2], items[1::2], strict=True)


def as_pairs(reply: Any) -> list[tuple[str, float]]:
    """Return ``(member, score)`` pairs from a WITHSCORES-style reply.

    Accepts flat ``[member, score, ...]`` lists as well as lists of pairs.
    """
    if not reply:
        return []
    if isinstance(reply, dict):
        return [(as_str(member), float(score)) for member, score in reply.items()]  # type: ignore[misc]
    items = list(reply)
    if isinstance(items[0], (list, tuple)):
        return [(as_str(member), float(score)) for member, score in items]  # type: ignore[misc]
    return [(as_str(member), float(score)) for member, score in _chunk(items)]  # type: ignore[misc]


def as_dict(reply: Any) -> dict[str, str]:
    """Return a field/value mapping from an HGETALL-style reply."""
    if not reply:
        return {}
    if isinstance(reply, dict):
        return {as_str(key): as_str(value) for key, value in reply.items()}  # type: ignore[misc]
    return {as_str(key): as_str(value) for key, value in _chunk(list(reply))}  # type: ignore[misc]


def format_number(reply: Any) -> str:
    """Render an INCRBY/INCRBYFLOAT reply the way Redis stores it."""
    if isinstance(reply, bytes):
        return reply.decode()
    if isinstance(reply, str):
        return reply
    if isinstance(reply, float):
        if reply.is_integer():
            return str(int(reply))
        return repr(reply)
    return str(reply)


def format_score(score: float) -> str:
    """Render a score argument, mapping infinities to ``+inf``/``-inf``."""
    if math.isinf(score):
        return "+inf" if score > 0 else "-inf"
    if math.isnan(score):
        msg = "score must not be NaN"
        raise ValueError(msg)
    return repr(float(score))


def is_integral(amount: float) -> bool:
    """Return True for ints that INCRBY-style commands accept."""
    return isinstance(amount, int) and not isinstance(amount, bool)
