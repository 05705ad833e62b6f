"""
Backoff configuration and presets.
"""

from dataclasses import dataclass


@dataclass
class BackoffConfig:
    """
    Configuration for an exponential backoff ticker.

    Attributes:
        multiplier: Growth factor applied to the threshold on each fire (default: 2.0)
        max_threshold: Ceiling for the threshold; once reached the ticker
            fires every ``max_threshold`` ticks (default: 1024)
        variance: Jitter spread applied to each new threshold, 0.5 = ±25%
            (default: 0.0, deterministic)
    """

    multiplier: float = 2.0
    max_threshold: int = 1024
    variance: float = 0.0

    @classmethod
    def jittered(cls) -> "BackoffConfig":
        """Preset that spreads thresholds by ±25% to avoid lockstep callers."""
        return cls(variance=0.5)

    @classmethod
    def linear(cls, every: int) -> "BackoffConfig":
        """Preset that jumps to the ceiling on the second fire, then fires every ``every`` ticks."""
        return cls(multiplier=float(every), max_threshold=every)
