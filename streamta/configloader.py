import yaml
import logging
import logging.config
from typing import Any, Dict, Mapping, Optional

from .base import BaseIndicator
from .factory import create
from .exceptions import InvalidParameterError
from .indicators.selector import MovingAverage, MovingAverageType

logger = logging.getLogger(__name__)

DEFAULT_MA_TYPE = MovingAverageType.SIMPLE
DEFAULT_MA_PERIOD = 9


class ConfigLoader:
    """
    A utility class to load, manage, and provide access to indicator
    settings from a YAML file.
    """
    def __init__(self, config_path: str):
        """
        Initializes the ConfigLoader with the path to the configuration file.

        Args:
            config_path (str): The file path to the YAML configuration.
        """
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Loads the YAML configuration file.

        Returns:
            Dict[str, Any]: A dictionary containing the configuration settings.
                An empty file yields an empty dictionary.

        Raises:
            FileNotFoundError: If the configuration file cannot be found.
            yaml.YAMLError: If the configuration file is malformed.
        """
        try:
            with open(self.config_path, 'r') as f:
                config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.error(f"Configuration file not found at '{self.config_path}'")
            raise
        except yaml.YAMLError as e:
            logger.error(f"Malformed YAML in configuration file: {e}")
            raise

        logger.info(f"Loaded configuration from {self.config_path}")
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Retrieves a configuration value for a given key.

        Args:
            key (str): The configuration key to retrieve.
            default (Any, optional): A default value to return if the key is not found.
        """
        return self.config.get(key, default)

    def __getitem__(self, key: str) -> Any:
        """
        Allows dictionary-style access to configuration settings.
        e.g., config_loader['indicators']
        """
        return self.config[key]

    def get_all(self) -> Dict[str, Any]:
        """Return entire configuration dictionary."""
        return self.config


def setup_logging(config: Optional[Dict[str, Any]]) -> None:
    """
    Sets up logging from a ``logging.config.dictConfig`` mapping.

    Falls back to a basic INFO configuration if the mapping is malformed.
    """
    try:
        logging.config.dictConfig(config)
        logging.info("Logging configured successfully from config file.")
    except (ValueError, TypeError, AttributeError) as e:
        # Fallback to a basic configuration if the one in the file is malformed
        logging.basicConfig(level=logging.INFO,
                            format="%(asctime)s - %(levelname)s - %(message)s")
        logging.warning(f"Could not configure logging from dict: {e}. Using basic config.")


def moving_average_from_config(section: Optional[Mapping[str, Any]]) -> MovingAverage:
    """
    Build a MovingAverage from a config section such as::

        moving_average:
          type: linear
          period: 14

    Missing keys fall back to a simple moving average over 9 periods.

    Raises:
        InvalidParameterError: If the type is unknown or the period is invalid.
    """
    section = section or {}
    ma_type = section.get('type', DEFAULT_MA_TYPE)
    period = section.get('period', DEFAULT_MA_PERIOD)

    ma = MovingAverage(ma_type, period)
    logger.info(f"Configured {ma.ma_type.name.lower()} moving average {ma}")
    return ma


def build_indicators(config: Mapping[str, Any]) -> Dict[str, BaseIndicator]:
    """
    Create every indicator listed under the ``indicators`` key.

    Each entry maps a label to the factory name (``type``) plus constructor
    keyword arguments::

        indicators:
          fast: {type: lwma, period: 10}
          slow: {type: ma, ma_type: exponential, period: 30}

    Raises:
        InvalidParameterError: If an entry has no type or bad parameters.
        IndicatorNotFoundError: If a type names no registered indicator.
    """
    indicators: Dict[str, BaseIndicator] = {}

    for label, spec in (config.get('indicators') or {}).items():
        params = dict(spec or {})
        name = params.pop('type', None)
        if name is None:
            raise InvalidParameterError("type", None, "indicator name", label)

        indicators[label] = create(name, **params)
        logger.debug(f"Built indicator '{label}': {indicators[label]!r}")

    logger.info(f"Built {len(indicators)} indicators from config")
    return indicators
