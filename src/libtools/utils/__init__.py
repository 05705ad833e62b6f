"""
libtools - Standalone Helpers.

Formatting, classification, randomness and object utilities.
"""

from .timefmt import datetime_ms, now_ms
from .files import file_extension, file_type, human_size
from .rand import random_int, random_float, variance_coefficient
from .objects import empty, make_setter, has_keys, nest
from .validation import is_email_basically_valid
from .stack import get_stack

__all__ = [
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
