"""
Parabola Launch logging.

Small levelled logger used across the package. Each module asks for a named
logger and the effective level can be tuned per module.

Usage:
    from parabola.logging import get_logger

    log = get_logger('animator')
    log.debug("Step at x=%s", 12)
    log.info("Launch started")

Configuration:
    Environment variables:
        PARABOLA_LOG_LEVEL=DEBUG         # Global default level
        PARABOLA_LOG_ANIMATOR=TRACE      # Module-specific level
        PARABOLA_LOG_SESSION=INFO

    Or programmatically:
        from parabola.logging import configure_logging
        configure_logging(level='DEBUG', modules={'animator': 'TRACE'})
"""

import os
import sys
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Dict, Optional


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Per-frame detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


_ENV_PREFIX = 'PARABOLA_LOG_'

_config: Dict = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel."""
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod.lower()] = _level_from_string(mod_level)


def _load_env_config() -> None:
    """Load configuration from environment variables.

    PARABOLA_LOG_LEVEL sets the global level, any other PARABOLA_LOG_<NAME>
    sets the level of module <name> (PARABOLA_LOG_ANIMATOR=TRACE -> animator).
    """
    if _ENV_PREFIX + 'LEVEL' in os.environ:
        _config['default_level'] = _level_from_string(os.environ[_ENV_PREFIX + 'LEVEL'])

    for key, value in os.environ.items():
        if key.startswith(_ENV_PREFIX) and key != _ENV_PREFIX + 'LEVEL':
            module_name = key[len(_ENV_PREFIX):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


# Load env config on import
_load_env_config()


class GameLogger:
    """
    Logger for a specific module.

    Writes formatted lines to stdout (WARNING and above go to stderr).
    """

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        if self._module_key in _config['module_levels']:
            return _config['module_levels'][self._module_key]
        return _config['default_level']

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if message at given level should be logged."""
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        """Internal log method."""
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        formatted = _format_message(self.module, level_name, msg)
        stream = sys.stderr if level >= LogLevel.WARNING else sys.stdout
        print(formatted, file=stream)

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (very verbose)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def exception(self, msg: str, *args) -> None:
        """
        Log an error together with the traceback of the exception being handled.

        Args:
            msg: Message describing what failed
        """
        self.error(msg, *args)

        tb = traceback.format_exc()
        if tb and tb.strip() != 'NoneType: None':
            for line in tb.strip().split('\n'):
                self._log(LogLevel.ERROR, 'TRACE', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> GameLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'animator', 'session', 'main')

    Returns:
        GameLogger instance for the module
    """
    return GameLogger(module)


def disable_logging() -> None:
    """Disable all logging."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()
