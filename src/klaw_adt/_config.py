"""Library configuration: Config and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_adt._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
]


@dataclass(frozen=True)
class Config:
    """Configuration for klaw-adt.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render logs as JSON (True) or colored console lines (False).
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read the log level from KLAW_ADT_LOG_LEVEL, None when unset or empty."""
    level = os.environ.get('KLAW_ADT_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read the log format from KLAW_ADT_LOG_FORMAT.

    Priority:
    1. "json" -> True
    2. "console" -> False
    3. Unset or unknown -> True
    """
    env_format = os.environ.get('KLAW_ADT_LOG_FORMAT', '').lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logging.warning("Unknown KLAW_ADT_LOG_FORMAT value '%s', defaulting to json", env_format)
    return True


def init(
    *,
    log_level: str | None = None,
    json_output: bool | None = None,
) -> Config:
    """Initialize klaw-adt with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from the
            environment if None; silent if still unset.
        json_output: JSON (True) or console (False) output. Read from the
            environment if None.

    Returns:
        The Config that was set.

    Example:
        ```python
        import klaw_adt

        # Environment-driven
        klaw_adt.init()

        # Explicit configuration
        klaw_adt.init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = Config(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    Returns:
        The current Config.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw-adt not initialized. Call klaw_adt.init() first.'
        raise RuntimeError(msg)
    return _config
