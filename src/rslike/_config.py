"""Library configuration: Config and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from rslike._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
]


@dataclass(frozen=True)
class Config:
    """Configuration for rslike.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render log records as JSON (True) or console text (False).
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read RSLIKE_LOG_LEVEL, treating an empty value as unset."""
    level = os.environ.get('RSLIKE_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read RSLIKE_LOG_FORMAT ("json" or "console")."""
    env_format = os.environ.get('RSLIKE_LOG_FORMAT', '').lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logging.warning("Unknown RSLIKE_LOG_FORMAT value '%s', defaulting to json", env_format)
    return True


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
) -> Config:
    """Initialize rslike with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            RSLIKE_LOG_LEVEL if None; None there too means silent.
        json_output: JSON or console log rendering. Read from
            RSLIKE_LOG_FORMAT if None.

    Returns:
        The Config that was set.

    Example:
        ```python
        import rslike

        # Silent unless RSLIKE_LOG_LEVEL is set
        rslike.init()

        # Show executor and Bind diagnostics on stderr
        rslike.init(log_level="DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = Config(
        log_level=log_level if log_level is not None else _detect_log_level(),
        json_output=json_output if json_output is not None else _detect_json_output(),
    )

    # Configure logging if level specified
    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    Returns:
        The current Config.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'rslike not initialized. Call rslike.init() first.'
        raise RuntimeError(msg)
    return _config
