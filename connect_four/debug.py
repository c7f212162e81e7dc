"""
debug.py - Logging for the Connect Four console game

All modules log through the ``debug`` singleton defined here. It wraps the
standard ``logging`` package under the ``connect_four`` logger, adds a TRACE
level below DEBUG, can restrict output to a set of components ("board",
"rules", "game", "ai", "cli") and keeps named timers for rough performance numbers.

Log records are written to stderr so they never interleave with the board
and prompts printed on stdout.
"""

import logging
import sys
import time
from enum import Enum
from typing import Dict, Iterable, Optional, Set

LOGGER_NAME = "connect_four"
TRACE = 5

logging.addLevelName(TRACE, "TRACE")


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# Mapping to standard logging levels
LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 1,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: TRACE
}

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ComponentFilter(logging.Filter):
    """Drop records whose component is not in the enabled set (empty set allows all)."""

    def __init__(self):
        super().__init__()
        self.components: Set[str] = set()

    def filter(self, record: logging.LogRecord) -> bool:
        component = getattr(record, "component", None)
        if not self.components or component is None:
            return True
        return component in self.components


class DebugManager:
    """Manages logging for the Connect Four game."""

    def __init__(self, level: DebugLevel = DebugLevel.ERROR):
        self._level = level
        self._enabled = True
        self._file_handler: Optional[logging.FileHandler] = None
        self._filter: Optional[ComponentFilter] = None
        self._logger = self._setup_logger()
        self._timers: Dict[str, float] = {}

    @property
    def level(self) -> DebugLevel:
        """The current debug level."""
        return self._level

    @property
    def logger(self) -> logging.Logger:
        """The underlying package logger."""
        return self._logger

    def _setup_logger(self) -> logging.Logger:
        """
        Configure and return the package logger.

        The console handler and its component filter live on the shared
        ``connect_four`` logger, so every manager reuses them.
        """
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(LEVEL_MAP[self._level])
        logger.propagate = False

        for handler in logger.handlers:
            if getattr(handler, "_connect_four_console", False):
                self._filter = handler._connect_four_filter
                return logger

        self._filter = ComponentFilter()
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
        console_handler.addFilter(self._filter)
        console_handler._connect_four_console = True
        console_handler._connect_four_filter = self._filter
        logger.addHandler(console_handler)

        return logger

    def configure(self, level: Optional[DebugLevel] = None,
                  enabled: Optional[bool] = None,
                  log_file: Optional[str] = None,
                  components: Optional[Iterable[str]] = None):
        """
        Configure the debug manager settings.

        Args:
            level: Debug level to set
            enabled: Whether logging is enabled at all
            log_file: Path to a log file; an empty string removes file logging
            components: Components to log for (empty for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled
            self._logger.disabled = not enabled

        if log_file is not None:
            if self._file_handler is not None:
                self._logger.removeHandler(self._file_handler)
                self._file_handler.close()
                self._file_handler = None

            if log_file:
                self._file_handler = logging.FileHandler(log_file)
                self._file_handler.setFormatter(
                    logging.Formatter(CONSOLE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
                self._file_handler.addFilter(self._filter)
                self._logger.addHandler(self._file_handler)

        if components is not None:
            self._filter.components = set(components)

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None):
        """
        Log a message at the specified level.

        Args:
            level: Debug level for the message
            message: The message to log
            component: Optional component name for filtering
        """
        if not self._enabled or level == DebugLevel.NONE:
            return

        if component:
            message = f"[{component}] {message}"

        self._logger.log(LEVEL_MAP[level], message, extra={"component": component})

    def error(self, message: str, component: Optional[str] = None):
        """Log an error message."""
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None):
        """Log a warning message."""
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None):
        """Log an info message."""
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None):
        """Log a debug message."""
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None):
        """Log a trace message."""
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, marker_name: str):
        """Start a named timer."""
        self._timers[marker_name] = time.perf_counter()

    def end_timer(self, marker_name: str, component: Optional[str] = None) -> Optional[float]:
        """
        Stop a named timer and log the elapsed time.

        Returns:
            Elapsed time in seconds, or None if the timer was never started
        """
        started = self._timers.pop(marker_name, None)
        if started is None:
            self.warning(f"Timer '{marker_name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.debug(f"Performance [{marker_name}]: {elapsed:.6f} seconds", component)
        return elapsed

    def set_from_string(self, level_str: str):
        """Set the level from a command line value such as 'debug'."""
        try:
            level = DebugLevel[level_str.upper()]
        except KeyError:
            self.warning(f"Unknown debug level: {level_str}")
            return
        self.configure(level=level)
        self.info(f"Debug level set to {level.name}")


# Create a singleton instance
debug = DebugManager()
