"""Error type shared by the graphical client."""

import logging

LOG_ALL = 0
LOG_TRACE = 1
LOG_DEBUG = 2
LOG_INFO = 3
LOG_WARNING = 4
LOG_ERROR = 5
LOG_FATAL = 6
LOG_NONE = 7

_TRACE = logging.DEBUG - 5

_LOGGING_LEVELS = {
    LOG_ALL: _TRACE,
    LOG_TRACE: _TRACE,
    LOG_DEBUG: logging.DEBUG,
    LOG_INFO: logging.INFO,
    LOG_WARNING: logging.WARNING,
    LOG_ERROR: logging.ERROR,
    LOG_FATAL: logging.CRITICAL,
}

_logger = logging.getLogger("zappygui")


class RaylibError(RuntimeError):
    """Raised when a graphics or resource operation fails."""

    def trace_log(self, log_level=LOG_ERROR):
        """Write the error message to the package log at ``log_level``."""
        if log_level == LOG_NONE:
            return
        try:
            level = _LOGGING_LEVELS[log_level]
        except KeyError:
            raise ValueError(f"unknown log level: {log_level!r}") from None
        _logger.log(level, "%s", self)