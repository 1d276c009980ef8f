"""
Weighted moving averages.

Classes:
    LWMA: Linearly Weighted Moving Average maintained over a circular buffer
"""

import numpy as np

from ..base import BaseIndicator, Input, closing_value_of


def triangular(n: int) -> float:
    """Sum of the weights 1..n, the LWMA normalizer."""
    return (n * (n + 1)) / 2.0


class LWMA(BaseIndicator):
    """
    Linearly Weighted Moving Average (LWMA) indicator.

    Weights the samples in the window 1, 2, ..., n from oldest to newest,
    so the most recent sample carries the weight n.

    Mathematical Formula:
        LWMA = (1*P1 + 2*P2 + ... + n*Pn) / (n * (n+1) / 2)

    While the window fills, n is the number of samples seen so far. Once it
    is full, n equals the period and each step shifts every weight down by
    one without rescanning the window:

        1*P1 + 2*P2 + ... + n*Pn
             1*P2 + ... + (n-1)*Pn + n*P_new
        = previous_weighted_sum - previous_sum + n * P_new

    The values are kept in a fixed-size ring buffer, so memory stays at
    O(period) and no allocation happens after construction.

    Example:
        >>> lwma = LWMA(period=4)
        >>> [lwma.update(p) for p in (4.0, 5.0, 6.0, 6.0, 6.0, 6.0, 2.0)][3:]
        [5.6, 5.9, 6.0, 4.4]
    """

    abbreviation = "LWMA"

    def __init__(self, period: int):
        """
        Initialize Linearly Weighted Moving Average indicator.

        Args:
            period (int): Number of samples in the weighting window.

        Raises:
            InvalidParameterError: If period is not a positive integer.
        """
        super().__init__(period)

        self._buffer = np.zeros(period, dtype=np.float64)
        self._index = 0
        self._count = 0
        self._weighted_sum = 0.0
        self._sum = 0.0

    def update(self, data: Input) -> float:
        value = closing_value_of(data)

        old_value = float(self._buffer[self._index])
        self._buffer[self._index] = value
        self._index = (self._index + 1) % self.period

        if self._count < self.period:
            self._count += 1
            self._weighted_sum += self._count * value
        else:
            self._weighted_sum = self._weighted_sum - self._sum + self.period * value

        self._sum = self._sum - old_value + value

        self._last = self._weighted_sum / triangular(self._count)
        return self._last

    @property
    def window(self) -> np.ndarray:
        """Retained samples, oldest first."""
        if self._count < self.period:
            return self._buffer[:self._count].copy()
        return np.roll(self._buffer, -self._index)

    def reset(self) -> None:
        super().reset()
        self._buffer.fill(0.0)
        self._index = 0
        self._count = 0
        self._weighted_sum = 0.0
        self._sum = 0.0


LinearlyWeightedMovingAverage = LWMA
