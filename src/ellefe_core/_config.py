"""Library configuration: CoreConfig, environment detection and init()."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ellefe_core._logging import configure_logging, get_logger

__all__ = [
    'CoreConfig',
    'get_config',
    'init',
    'report_captured',
    'reset_config',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})

log = get_logger(__name__)


@dataclass(frozen=True)
class CoreConfig:
    """Configuration for ellefe-core.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render logs as JSON (True) or console text (False).
        log_captured: Emit a debug event whenever a ``wrap*`` function or
            ``@safe`` decorator converts an exception into Err/Nothing.
    """

    log_level: str | None = None
    json_output: bool = True
    log_captured: bool = False


# Global configuration (set by init() or lazily by get_config())
_config: CoreConfig | None = None


def _detect_log_level() -> str | None:
    """Read ELLEFE_LOG_LEVEL; empty or unset means no level."""
    level = os.environ.get('ELLEFE_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_flag(name: str, default: bool) -> bool:
    """Read a boolean environment flag.

    Unknown values fall back to ``default`` with a warning.
    """
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    log.warning('unknown_flag_value', variable=name, value=raw, default=default)
    return default


def _from_environment() -> CoreConfig:
    return CoreConfig(
        log_level=_detect_log_level(),
        json_output=_detect_flag('ELLEFE_LOG_JSON', True),
        log_captured=_detect_flag('ELLEFE_LOG_CAPTURED', False),
    )


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    log_captured: bool | None = None,
) -> CoreConfig:
    """Initialize ellefe-core with the given configuration.

    Arguments left as None are resolved from the environment
    (``ELLEFE_LOG_LEVEL``, ``ELLEFE_LOG_JSON``, ``ELLEFE_LOG_CAPTURED``).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: JSON (True) or console (False) log rendering.
        log_captured: Log exceptions captured by the wrap family.

    Returns:
        The CoreConfig that was set.

    Example:
        ```python
        import ellefe_core

        ellefe_core.init(log_level='DEBUG', log_captured=True)
        ellefe_core.wrap(lambda: 1 / 0)  # logs exception_captured
        ```
    """
    global _config  # noqa: PLW0603

    env = _from_environment()
    _config = CoreConfig(
        log_level=log_level.upper() if log_level is not None else env.log_level,
        json_output=json_output if json_output is not None else env.json_output,
        log_captured=log_captured if log_captured is not None else env.log_captured,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> CoreConfig:
    """Get the current configuration.

    When init() has not been called, the configuration is built from the
    environment on first access; logging is not configured in that case.

    Returns:
        The current CoreConfig.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = _from_environment()
    return _config


def reset_config() -> None:
    """Forget the current configuration; the next access re-reads the environment."""
    global _config  # noqa: PLW0603

    _config = None


def report_captured(func: object, exc: BaseException) -> None:
    """Log an exception captured by the wrap family, if enabled."""
    if not get_config().log_captured:
        return
    log.debug(
        'exception_captured',
        function=getattr(func, '__qualname__', repr(func)),
        exc_type=type(exc).__name__,
        exc=str(exc),
    )
