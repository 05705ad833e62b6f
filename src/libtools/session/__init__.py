"""
libtools - Sessions.

Async session lookup backed by a Redis hash store.
"""

from .config import SessionConfig
from .lookup import SessionStore, connect, session_exists

__all__ = [
    "SessionConfig",
    "SessionStore",
    "connect",
    "session_exists",
]
