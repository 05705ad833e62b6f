"""
Exponential backoff ticker.
"""

import logging
import math

from .config import BackoffConfig
from ..utils.rand import variance_coefficient

logger = logging.getLogger(__name__)


class ExponentialBackoff:
    """
    Counter that fires at exponentially spaced ticks.

    Every call to :meth:`tick` counts one event. The ticker fires when the
    count reaches the current threshold (or ``max_threshold``), returning the
    new threshold, and returns 0 otherwise. Thresholds grow by
    ``multiplier`` until they hit ``max_threshold``, after which the ticker
    fires every ``max_threshold`` ticks.

    With ``multiplier=2`` and no variance the fire values are
    ``1, 2, 4, 8, ...``::

        backoff = ExponentialBackoff(2, 1024)
        backoff.tick()  # 1
        backoff.tick()  # 2
        backoff.tick()  # 0
        backoff.tick()  # 4

    Instances are not thread-safe.
    """

    def __init__(
        self,
        multiplier: float,
        max_threshold: int,
        variance: float | None = 0.0,
    ):
        """
        Initialize the ticker.

        Args:
            multiplier: Exponential growth factor
            max_threshold: Threshold ceiling; backoff turns linear once reached
            variance: Jitter spread for each new threshold (None means 0)
        """
        self.multiplier = multiplier
        self.max_threshold = max_threshold
        self.variance = variance or 0.0
        self._counter = 0
        self._next = 0

    @classmethod
    def from_config(cls, config: BackoffConfig | None = None) -> "ExponentialBackoff":
        """Build a ticker from a :class:`BackoffConfig` (default: BackoffConfig())."""
        if config is None:
            config = BackoffConfig()
        return cls(config.multiplier, config.max_threshold, config.variance)

    @property
    def counter(self) -> int:
        """Ticks since the last fire or reset."""
        return self._counter

    @property
    def next_threshold(self) -> int:
        """Tick count at which the ticker fires next."""
        return self._next

    def tick(self) -> int:
        """
        Count one event.

        Returns:
            The new threshold if the ticker fired, otherwise 0
        """
        self._counter += 1
        if self._counter < self._next and self._counter < self.max_threshold:
            return 0

        if self._next < self.max_threshold:
            grown = max(self._next * self.multiplier, 1) * variance_coefficient(
                self.variance
            )
            self._next = min(math.ceil(grown), self.max_threshold)

        logger.debug(f"Backoff fired after {self._counter} ticks, next threshold {self._next}")
        self._counter = 0
        return self._next

    def reset(self) -> int:
        """Return to the initial state. Always returns 0."""
        self._counter = 0
        self._next = 0
        return 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(multiplier={self.multiplier}, "
            f"max_threshold={self.max_threshold}, variance={self.variance}, "
            f"counter={self._counter}, next_threshold={self._next})"
        )
