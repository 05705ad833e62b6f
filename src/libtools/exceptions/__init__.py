"""
libtools - Exception Hierarchy.

Structured client-facing errors.
"""

from .base import ToolsError, ClientError, InputError

__all__ = [
    "ToolsError",
    "ClientError",
    "InputError",
]
