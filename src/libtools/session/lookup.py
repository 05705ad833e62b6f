"""
Session lookup against a Redis-style hash store.
"""

import logging
import math
import re
from typing import Any, Awaitable, Mapping, Protocol

import redis.asyncio as redis

from .config import SessionConfig
from ..exceptions import ClientError

logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INFINITY = re.compile(r"[+-]?Infinity")
_RADIX = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


class SessionStore(Protocol):
    """Anything exposing an async ``HGETALL``, e.g. ``redis.asyncio.Redis``."""

    def hgetall(self, name: str) -> Awaitable[Mapping[Any, Any] | None]:
        ...


def connect(url: str = "redis://localhost:6379/0", **kwargs: Any) -> redis.Redis:
    """
    Create an async Redis client suitable for :func:`session_exists`.

    Args:
        url: Redis connection URL
        **kwargs: Extra options passed to ``redis.asyncio.from_url``

    Returns:
        Client with ``decode_responses`` enabled unless overridden
    """
    kwargs.setdefault("decode_responses", True)
    logger.info(f"Connecting session store at {url}")
    return redis.from_url(url, **kwargs)


def _decode(value: Any) -> Any:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


def _to_number(value: Any) -> int | float:
    """
    Coerce a stored user id to a number the way JavaScript's ``Number()`` does.

    Decimal, exponent, ``Infinity`` and ``0x``/``0o``/``0b`` spellings are
    accepted; blank strings are 0 and anything else is NaN. Integral finite
    values come back as ``int``.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        number = value
    elif not isinstance(value, str):
        return math.nan
    else:
        text = value.strip()
        if not text:
            return 0
        if _DECIMAL.fullmatch(text):
            number = float(text)
        elif _INFINITY.fullmatch(text):
            number = -math.inf if text.startswith("-") else math.inf
        elif _RADIX.fullmatch(text):
            return int(text, 0)
        else:
            return math.nan
    if math.isfinite(number) and number == int(number):
        return int(number)
    return number


async def session_exists(
    store: SessionStore,
    session_string: Any,
    config: SessionConfig | None = None,
) -> dict[str, Any]:
    """
    Look up a session record.

    Args:
        store: Hash store holding the sessions
        session_string: Session identifier supplied by the client
        config: Key layout and field names (default: SessionConfig())

    Returns:
        The stored fields plus the session identifier and a numeric user id

    Raises:
        ClientError: 400 ``invalidSessionString`` if the identifier is not a
            string, 401 ``invalidSession`` if no session is stored under it.
            Store errors propagate unchanged.
    """
    if config is None:
        config = SessionConfig()

    if not isinstance(session_string, str):
        logger.warning(f"Rejected session lookup for non-string identifier {type(session_string).__name__}")
        raise ClientError(400, "invalidSessionString")

    data = await store.hgetall(config.key_for(session_string))

    # Redis reports a missing hash as an empty one
    if not data:
        logger.warning("Session lookup missed")
        raise ClientError(401, "invalidSession")

    record = {_decode(k): _decode(v) for k, v in data.items()}
    record[config.session_field] = session_string
    record[config.user_id_field] = _to_number(record.get(config.user_id_field))
    logger.debug(f"Session found for user {record[config.user_id_field]}")
    return record
