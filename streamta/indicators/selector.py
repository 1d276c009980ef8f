"""
Runtime-selectable moving average.

Strategies often read "which average" from configuration. ``MovingAverage``
wraps one of the four moving average algorithms behind a single handle, so
the choice can be stored, passed around and swapped without the caller
knowing which concrete class is active.

Classes:
    MovingAverageType: Closed set of supported algorithms
    MovingAverage: Moving average whose algorithm is chosen at construction
"""

from enum import Enum
from typing import Dict, Type, Union

from ..base import BaseIndicator, Input
from ..exceptions import InvalidParameterError
from .smoothing import RMA
from .trend import EMA, SMA
from .weighted import LWMA


class MovingAverageType(Enum):
    """Moving average algorithms available to ``MovingAverage``."""

    SIMPLE = "sma"
    EXPONENTIAL = "ema"
    RELATIVE = "rma"
    LINEAR = "lwma"

    @classmethod
    def parse(cls, ma_type: Union["MovingAverageType", str]) -> "MovingAverageType":
        """
        Resolve a member from itself, its name or its abbreviation.

        ``"linear"``, ``"LINEAR"``, ``"lwma"`` and ``"wma"`` all resolve to
        ``MovingAverageType.LINEAR``.

        Raises:
            InvalidParameterError: If the name matches no algorithm.
        """
        if isinstance(ma_type, cls):
            return ma_type

        if isinstance(ma_type, str):
            key = ma_type.strip().lower()
            if key == "wma":
                key = "lwma"
            for member in cls:
                if key in (member.name.lower(), member.value):
                    return member

        expected = "one of " + ", ".join(member.name.lower() for member in cls)
        raise InvalidParameterError("ma_type", ma_type, expected, "MovingAverage")


_VARIANTS: Dict[MovingAverageType, Type[BaseIndicator]] = {
    MovingAverageType.SIMPLE: SMA,
    MovingAverageType.EXPONENTIAL: EMA,
    MovingAverageType.RELATIVE: RMA,
    MovingAverageType.LINEAR: LWMA,
}


class MovingAverage(BaseIndicator):
    """
    Moving average (MA) whose algorithm is picked at runtime.

    The algorithm is fixed for the lifetime of the instance; every operation
    is forwarded to the embedded SMA, EMA, RMA or LWMA. The display label
    only reports the period, e.g. ``MA(9)``.

    Example:
        >>> ma = MovingAverage(MovingAverageType.LINEAR, period=4)
        >>> ma.update(4.0)
        4.0
        >>> str(ma)
        'MA(4)'
    """

    abbreviation = "MA"

    def __init__(self, ma_type: Union[MovingAverageType, str] = MovingAverageType.SIMPLE, period: int = 9):
        """
        Initialize the moving average.

        Args:
            ma_type: Algorithm to use, a ``MovingAverageType`` or its name.
                Defaults to a simple moving average.
            period (int): Period handed to the selected algorithm. Defaults to 9.

        Raises:
            InvalidParameterError: If ma_type is unknown, or raised unchanged by
                the selected algorithm when the period is invalid.
        """
        self._ma_type = MovingAverageType.parse(ma_type)
        self._variant = _VARIANTS[self._ma_type](period)
        super().__init__(period)

    @property
    def ma_type(self) -> MovingAverageType:
        return self._ma_type

    @property
    def period(self) -> int:
        return self._variant.period

    def update(self, data: Input) -> float:
        return self._variant.update(data)

    @property
    def value(self) -> float:
        return self._variant.value

    @property
    def is_ready(self) -> bool:
        return self._variant.is_ready

    def reset(self) -> None:
        self._variant.reset()

    def __repr__(self) -> str:
        return f"{self._name}({self._ma_type.name}, {self._variant!r})"
