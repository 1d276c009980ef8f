"""Factory for creating technical indicators."""

import inspect
from typing import Dict, Any, Type, List, Optional

from .base import BaseIndicator, validate_period, validate_alpha
from .exceptions import InvalidParameterError, IndicatorNotFoundError
from .indicators.trend import SMA, EMA
from .indicators.weighted import LWMA
from .indicators.smoothing import RMA
from .indicators.selector import MovingAverage

__all__ = [
    "IndicatorRegistry",
    "create",
    "list_indicators",
    "describe",
    "validate_period",
    "validate_alpha",
]


class IndicatorRegistry:
    """Registry for managing indicators with aliases."""

    def __init__(self):
        """Initialize registry with built-in indicators."""
        self._registry: Dict[str, Type[BaseIndicator]] = {}
        self._canonical: Dict[Type[BaseIndicator], str] = {}
        self._register_builtin_indicators()

    def _register_builtin_indicators(self) -> None:
        """Register built-in indicators."""
        self.register('sma', SMA, aliases=['simple_ma', 'simple_moving_average'])
        self.register('ema', EMA, aliases=['exp_ma', 'exponential_moving_average'])
        self.register('rma', RMA, aliases=['wilders', 'relative_moving_average'])
        self.register('lwma', LWMA, aliases=['wma', 'linearly_weighted_moving_average'])
        self.register('ma', MovingAverage, aliases=['moving_average'])

    def register(self, name: str, indicator_class: Type[BaseIndicator], aliases: Optional[List[str]] = None) -> None:
        """Register indicator with aliases."""
        name_lower = name.lower()
        self._registry[name_lower] = indicator_class
        self._canonical[indicator_class] = name_lower

        if aliases:
            for alias in aliases:
                self._registry[alias.lower()] = indicator_class

    def get(self, name: str) -> Type[BaseIndicator]:
        """Get indicator class by name."""
        name_lower = name.lower()
        if name_lower not in self._registry:
            raise IndicatorNotFoundError(name, self.list_indicators())

        return self._registry[name_lower]

    def list_indicators(self) -> List[str]:
        """List canonical indicator names, without aliases."""
        return sorted(self._canonical.values())

    def get_aliases(self, name: str) -> List[str]:
        """
        Get all aliases for an indicator.

        Args:
            name (str): Indicator name

        Returns:
            List[str]: List of all names (including aliases) for the indicator
        """
        try:
            target_class = self.get(name)
            return [key for key, cls in self._registry.items() if cls == target_class]
        except IndicatorNotFoundError:
            return []


# Global registry instance
_REGISTRY = IndicatorRegistry()


def create(name: str, **kwargs) -> BaseIndicator:
    """
    Factory function to create technical indicators by name.

    Args:
        name (str): Name of the indicator to create (case-insensitive).
            Available indicators can be listed using list_indicators().
        **kwargs: Parameters to pass to the indicator constructor, e.g.
            ``period`` for every indicator, ``alpha`` for EMA and
            ``ma_type`` for the runtime-selectable moving average.

    Returns:
        BaseIndicator: Configured indicator instance ready for use

    Raises:
        IndicatorNotFoundError: If the indicator name is not recognized
        InvalidParameterError: If parameters are invalid or missing

    Examples:
        >>> import streamta as ta
        >>> lwma = ta.create('lwma', period=20)
        >>> ema = ta.create('ema', period=12, alpha=0.15)
        >>> ma = ta.create('ma', ma_type='relative', period=14)
    """
    indicator_class = _REGISTRY.get(name)
    try:
        return indicator_class(**kwargs)
    except TypeError as e:
        # Convert constructor errors to our custom exception
        sig = inspect.signature(indicator_class.__init__)
        params = list(sig.parameters.keys())[1:]  # Skip 'self'

        raise InvalidParameterError(
            parameter_name="constructor",
            value=str(kwargs),
            expected=f"valid parameters for {name}: {params}",
            indicator_name=name
        ) from e


def list_indicators() -> List[str]:
    """
    Get a list of all available indicator names.

    Example:
        >>> import streamta as ta
        >>> ta.list_indicators()
        ['ema', 'lwma', 'ma', 'rma', 'sma']
    """
    return _REGISTRY.list_indicators()


def describe(name: str) -> Dict[str, Any]:
    """
    Get detailed information about an indicator including parameters and documentation.

    Returns:
        Dict[str, Any]: Dictionary containing:
            - name: Canonical class name
            - abbreviation: Label prefix used by str()
            - aliases: List of alternative names
            - parameters: Parameter information from constructor signature
            - docstring: Class documentation

    Raises:
        IndicatorNotFoundError: If the indicator name is not recognized
    """
    indicator_class = _REGISTRY.get(name)

    sig = inspect.signature(indicator_class.__init__)
    parameters = {}

    for param_name, param in sig.parameters.items():
        if param_name == 'self':
            continue

        param_info = {
            'type': param.annotation if param.annotation != inspect.Parameter.empty else 'Any',
            'default': param.default if param.default != inspect.Parameter.empty else None,
            'required': param.default == inspect.Parameter.empty
        }
        parameters[param_name] = param_info

    return {
        'name': indicator_class.__name__,
        'abbreviation': indicator_class.abbreviation,
        'aliases': _REGISTRY.get_aliases(name),
        'parameters': parameters,
        'docstring': indicator_class.__doc__,
    }
