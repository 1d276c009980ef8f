"""
Trend-following technical indicators.

This module implements the basic moving averages the rest of the library
builds on. All indicators use O(1) streaming updates.

Classes:
    SMA: Simple Moving Average with O(1) rolling sum technique
    EMA: Exponential Moving Average with a configurable smoothing constant
"""

from collections import deque
from typing import Deque, Optional

from ..base import BaseIndicator, Input, closing_value_of, validate_alpha


class SMA(BaseIndicator):
    """
    Simple Moving Average (SMA) indicator.

    Calculates the arithmetic mean of prices over a specified period using
    a rolling sum that avoids recalculation.

    Mathematical Formula:
        SMA = (P1 + P2 + ... + Pn) / n

    Until ``period`` samples have been seen, the average covers the samples
    seen so far.

    Example:
        >>> sma = SMA(period=4)
        >>> [sma.update(p) for p in (4.0, 5.0, 6.0)]
        [4.0, 4.5, 5.0]
    """

    abbreviation = "SMA"

    def __init__(self, period: int):
        """
        Initialize Simple Moving Average indicator.

        Args:
            period (int): Number of periods for the moving average calculation.

        Raises:
            InvalidParameterError: If period is not a positive integer.
        """
        super().__init__(period)

        self._buffer: Deque[float] = deque(maxlen=period)
        self._sum = 0.0

    def update(self, data: Input) -> float:
        value = closing_value_of(data)

        # Drop the value that falls out of the window before appending
        old_value = self._buffer[0] if len(self._buffer) == self.period else 0.0
        self._buffer.append(value)
        self._sum = self._sum - old_value + value

        self._last = self._sum / len(self._buffer)
        return self._last

    def reset(self) -> None:
        super().reset()
        self._buffer.clear()
        self._sum = 0.0


class EMA(BaseIndicator):
    """
    Exponential Moving Average (EMA) indicator.

    Mathematical Formula:
        EMA_today = α * Price_today + (1-α) * EMA_yesterday
        where α = 2 / (period + 1) by default, or a custom alpha if provided

    The first sample seeds the average, so the first output equals the first
    input.

    Example:
        >>> ema = EMA(period=3)
        >>> [ema.update(p) for p in (2.0, 5.0, 1.0, 6.25)]
        [2.0, 3.5, 2.25, 4.25]
    """

    abbreviation = "EMA"

    def __init__(self, period: int, alpha: Optional[float] = None):
        """
        Initialize Exponential Moving Average indicator.

        Args:
            period (int): Number of periods, used to derive the default alpha.
            alpha (Optional[float]): Custom smoothing factor in (0, 1].
                If None, uses standard EMA formula: α = 2/(period+1).

        Raises:
            InvalidParameterError: If period is not positive or alpha is out of range.
        """
        super().__init__(period)

        if alpha is not None:
            self._alpha = validate_alpha(alpha, self._name)
        else:
            self._alpha = 2.0 / (period + 1)

    @classmethod
    def with_custom_smoothing_constant(cls, period: int, alpha: float) -> "EMA":
        """Build an EMA whose smoothing constant is ``alpha`` instead of 2/(period+1)."""
        return cls(period, alpha=alpha)

    @property
    def alpha(self) -> float:
        """Smoothing factor used by this EMA."""
        return self._alpha

    def update(self, data: Input) -> float:
        value = closing_value_of(data)

        if self._last is None:
            self._last = value
        else:
            self._last = self._alpha * value + (1.0 - self._alpha) * self._last

        return self._last
