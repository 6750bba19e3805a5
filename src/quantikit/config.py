"""Process-wide defaults for formatting and logging.

All settings can be overridden through environment variables with the
``QUANTIKIT_`` prefix:

    QUANTIKIT_DEFAULT_LOCALE      - Locale used when none is passed (e.g. ``en_US``)
    QUANTIKIT_SIGNIFICANT_DIGITS  - Digits after the radix for ``str(quantity)``
    QUANTIKIT_LOG_LEVEL           - Level of the ``quantikit`` logger

Example:
    >>> from quantikit.config import UnitsConfig, get_config, set_config, reset_config
    >>> set_config(UnitsConfig(default_locale="nb_NO"))
    >>> get_config().default_locale
    'nb_NO'
    >>> reset_config()
"""

from dataclasses import asdict, dataclass
import logging
import os
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_ENV_PREFIX = "QUANTIKIT_"

_VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class UnitsConfig:
    default_locale: str = "en_US"
    significant_digits_after_radix: int = 2
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        errors = []
        if not self.default_locale:
            errors.append("default_locale must not be empty")
        if self.significant_digits_after_radix < 0:
            errors.append(
                "significant_digits_after_radix must be >= 0, got {}"
                .format(self.significant_digits_after_radix)
            )
        if self.log_level.upper() not in _VALID_LOG_LEVELS:
            errors.append(
                "log_level must be one of {}, got '{}'"
                .format(sorted(_VALID_LOG_LEVELS), self.log_level)
            )
        else:
            object.__setattr__(self, "log_level", self.log_level.upper())
        if errors:
            raise ValueError("Invalid UnitsConfig: " + "; ".join(errors))

    @classmethod
    def from_env(cls) -> "UnitsConfig":
        """Build a config from ``QUANTIKIT_*`` environment variables.

        Malformed values fall back to the class default with a warning.
        """
        def _env(name: str) -> Optional[str]:
            return os.environ.get(_ENV_PREFIX + name)

        def _str(name: str, default: str) -> str:
            val = _env(name)
            if val is None or not val.strip():
                return default
            return val.strip()

        def _int(name: str, default: int) -> int:
            val = _env(name)
            if val is None:
                return default
            try:
                return int(val.strip())
            except ValueError:
                logger.warning(
                    "Invalid integer for %s%s=%r, using default %d",
                    _ENV_PREFIX, name, val, default,
                )
                return default

        log_level = _str("LOG_LEVEL", cls.log_level)
        if log_level.upper() not in _VALID_LOG_LEVELS:
            logger.warning(
                "Invalid log level for %sLOG_LEVEL=%r, using default %s",
                _ENV_PREFIX, log_level, cls.log_level,
            )
            log_level = cls.log_level

        digits = _int("SIGNIFICANT_DIGITS", cls.significant_digits_after_radix)
        if digits < 0:
            logger.warning(
                "Negative value for %sSIGNIFICANT_DIGITS=%d, using default %d",
                _ENV_PREFIX, digits, cls.significant_digits_after_radix,
            )
            digits = cls.significant_digits_after_radix

        config = cls(
            default_locale=_str("DEFAULT_LOCALE", cls.default_locale),
            significant_digits_after_radix=digits,
            log_level=log_level,
        )
        logger.debug("UnitsConfig loaded: %s", config.to_dict())
        return config

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def apply_logging(self) -> None:
        logging.getLogger("quantikit").setLevel(self.log_level)


_config_instance: Optional[UnitsConfig] = None
_config_lock = threading.Lock()


def get_config() -> UnitsConfig:
    global _config_instance
    if _config_instance is None:
        with _config_lock:
            if _config_instance is None:
                config = UnitsConfig.from_env()
                config.apply_logging()
                _config_instance = config
    return _config_instance


def set_config(config: UnitsConfig) -> None:
    global _config_instance
    with _config_lock:
        config.apply_logging()
        _config_instance = config


def reset_config() -> None:
    """Drop the current config so the next ``get_config`` re-reads the environment."""
    global _config_instance
    with _config_lock:
        _config_instance = None
