"""Base class and input capability for streaming technical indicators."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional, Protocol, Union, runtime_checkable
import math
import logging

from .exceptions import InvalidParameterError

logger = logging.getLogger(__name__)


@runtime_checkable
class Close(Protocol):
    """Anything that can report a closing price, e.g. a bar or candle record."""

    def closing_value(self) -> float:
        ...


Input = Union[float, Close, Mapping]


def closing_value_of(data: Any) -> float:
    """
    Extract the scalar price an indicator consumes from an input sample.

    Plain numbers are used as they are. Records implementing ``Close`` report
    their closing price, and OHLCV dictionaries contribute their ``'close'``
    field.

    Raises:
        TypeError: If the input offers no closing value.
    """
    if isinstance(data, float):
        return data
    if isinstance(data, Real):
        return float(data)
    if isinstance(data, Close):
        return float(data.closing_value())
    if isinstance(data, Mapping) and 'close' in data:
        return float(data['close'])
    raise TypeError(f"Cannot extract a closing value from {type(data).__name__}")


def validate_period(period: Any, name: str = "period", indicator_name: Optional[str] = None) -> int:
    """
    Validate period parameter for indicators.

    Args:
        period (Any): The period value to validate
        name (str): Parameter name for error messages
        indicator_name (Optional[str]): Indicator reported in the error message

    Returns:
        int: Validated period value

    Raises:
        InvalidParameterError: If period is not a positive integer
    """
    if isinstance(period, bool) or not isinstance(period, int):
        raise InvalidParameterError(name, period, "positive integer", indicator_name)

    if period <= 0:
        raise InvalidParameterError(name, period, "positive integer (> 0)", indicator_name)

    return period


def validate_alpha(alpha: Any, indicator_name: Optional[str] = None) -> float:
    """
    Validate a smoothing constant for exponential averages.

    Raises:
        InvalidParameterError: If alpha is not a number in (0, 1]
    """
    if isinstance(alpha, bool) or not isinstance(alpha, Real):
        raise InvalidParameterError("alpha", alpha, "numeric value between 0 and 1", indicator_name)

    if not 0 < alpha <= 1:
        raise InvalidParameterError("alpha", alpha, "value between 0 and 1 (exclusive of 0)", indicator_name)

    return float(alpha)


class BaseIndicator(ABC):
    """
    Abstract base for streaming technical indicators.

    Every indicator consumes one sample per ``update`` call and returns its
    new output immediately. State is fixed-size and allocated up front, so an
    update is O(1) regardless of how long the stream runs.

    Subclasses set ``abbreviation``, which ``str()`` renders together with
    the period, e.g. ``SMA(20)``.
    """

    abbreviation: str = ""

    def __init__(self, period: int):
        """
        Initialize indicator with a validated period.

        Raises:
            InvalidParameterError: If period is not a positive integer.
        """
        self._name = self.__class__.__name__
        self._period = validate_period(period, indicator_name=self._name)

        # Last output, None until the first sample arrives
        self._last: Optional[float] = None

        logger.debug(f"Initialized {self._name} with period={period}")

    @property
    def period(self) -> int:
        """Window length the indicator was constructed with."""
        return self._period

    @abstractmethod
    def update(self, data: Input) -> float:
        """
        Consume one sample and return the new indicator value.

        Args:
            data: A price, a record implementing ``Close`` or an OHLCV mapping.

        Returns:
            float: The indicator output after this sample.
        """
        pass

    @property
    def value(self) -> float:
        """Most recent output, or NaN before the first sample."""
        if self._last is None:
            return math.nan
        return self._last

    @property
    def is_ready(self) -> bool:
        """True once at least one sample has been consumed."""
        return self._last is not None

    def reset(self) -> None:
        """Return the indicator to its post-construction state."""
        self._last = None
        logger.debug(f"Reset {self._name} indicator state")

    def __str__(self) -> str:
        return f"{self.abbreviation}({self.period})"

    def __repr__(self) -> str:
        status = "ready" if self.is_ready else "warming up"
        return f"{self._name}(period={self.period}, {status})"
