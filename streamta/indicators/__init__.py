"""
Technical Analysis Indicators Module

Concrete implementations of streaming moving averages built on BaseIndicator.
"""

from .trend import SMA, EMA
from .weighted import LWMA, LinearlyWeightedMovingAverage
from .smoothing import RMA, RelativeMovingAverage
from .selector import MovingAverage, MovingAverageType

__all__ = [
    # Trend indicators
    "SMA",
    "EMA",
    "LWMA",
    "LinearlyWeightedMovingAverage",

    # Wilder's smoothing
    "RMA",
    "RelativeMovingAverage",

    # Runtime selection
    "MovingAverage",
    "MovingAverageType",
]
