"""
Wilder-style smoothing for technical indicators.

RSI, ATR and ADX conventionally smooth with Wilder's factor α = 1/N rather
than the standard EMA factor α = 2/(N+1). This module provides that average
as a configuration of the EMA.

Classes:
    RMA: Relative Moving Average (Wilder's smoothing, α = 1/period)
"""

from ..base import BaseIndicator, Input
from .trend import EMA


class RMA(BaseIndicator):
    """
    Relative Moving Average (RMA) indicator.

    An exponential moving average with the smoothing factor fixed to
    1/period. All state lives in the embedded EMA.

    Mathematical Formula:
        α = 1 / period
        RMA_today = α * Price_today + (1-α) * RMA_yesterday

    Example:
        >>> rma = RMA(period=3)
        >>> [rma.update(p) for p in (2.0, 5.0)]
        [2.0, 3.0]
    """

    abbreviation = "RMA"

    def __init__(self, period: int):
        """
        Initialize Relative Moving Average indicator.

        Args:
            period (int): Smoothing period, must be positive integer >= 1.

        Raises:
            InvalidParameterError: If period is not a positive integer.
        """
        super().__init__(period)
        self._ema = EMA.with_custom_smoothing_constant(period, 1.0 / period)

    @property
    def period(self) -> int:
        return self._ema.period

    @property
    def alpha(self) -> float:
        return self._ema.alpha

    def update(self, data: Input) -> float:
        return self._ema.update(data)

    @property
    def value(self) -> float:
        return self._ema.value

    @property
    def is_ready(self) -> bool:
        return self._ema.is_ready

    def reset(self) -> None:
        self._ema.reset()


RelativeMovingAverage = RMA
