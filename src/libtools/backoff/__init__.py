"""
libtools - Backoff.

Exponential backoff ticker with jitter and a linear ceiling.
"""

from .config import BackoffConfig
from .exponential import ExponentialBackoff

__all__ = [
    "BackoffConfig",
    "ExponentialBackoff",
]
