"""
libtools - Small Helpers for Host Applications.

Formatting, classification, randomness, backoff, object helpers,
structured client errors and session lookup.
"""

from .backoff import BackoffConfig, ExponentialBackoff
from .exceptions import ToolsError, ClientError, InputError
from .session import SessionConfig, SessionStore, connect, session_exists
from .utils import (
    datetime_ms,
    now_ms,
    file_extension,
    file_type,
    human_size,
    random_int,
    random_float,
    variance_coefficient,
    empty,
    make_setter,
    has_keys,
    nest,
    is_email_basically_valid,
    get_stack,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Backoff
    "BackoffConfig",
    "ExponentialBackoff",
    # Exceptions
    "ToolsError",
    "ClientError",
    "InputError",
    # Sessions
    "SessionConfig",
    "SessionStore",
    "connect",
    "session_exists",
    # Helpers
    "datetime_ms",
    "now_ms",
    "file_extension",
    "file_type",
    "human_size",
    "random_int",
    "random_float",
    "variance_coefficient",
    "empty",
    "make_setter",
    "has_keys",
    "nest",
    "is_email_basically_valid",
    "get_stack",
]
