"""Module: logger_factory.py

Author: Michael Economou
Date: 2026-09-14

Cached logger factory.
Keeps a single logger instance per module name and lets the CLI raise or
lower the level of every logger created so far in one call.
"""

import inspect
import logging
import threading


class LoggerFactory:
    """Thread-safe logger factory with caching.

    Pipeline workers may request loggers from several threads during a
    parallel preview, so the cache is guarded by a lock.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name (str): Logger name, typically __name__ from calling module

        Returns:
            logging.Logger: Cached logger instance

        """
        if name is None:
            name = _caller_module_name()

        with cls._lock:
            if name not in cls._loggers:
                logger = logging.getLogger(name)

                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)

                cls._loggers[name] = logger

            return cls._loggers[name]

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set logging level for all cached loggers (and future ones)."""
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(level)

    @classmethod
    def get_cached_names(cls) -> list[str]:
        """Return the names of all cached loggers."""
        with cls._lock:
            return list(cls._loggers.keys())

    @classmethod
    def clear_cache(cls) -> None:
        """Forget every cached logger and the global level override."""
        with cls._lock:
            cls._loggers.clear()
            cls._global_level = None


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience wrapper around LoggerFactory.get_logger."""
    return LoggerFactory.get_logger(name)


def _caller_module_name() -> str:
    """Module name of the first frame outside this module."""
    frame = inspect.currentframe()
    while frame is not None and frame.f_globals.get("__name__") == __name__:
        frame = frame.f_back
    if frame is None:
        return "cleanfy"
    return frame.f_globals.get("__name__", "cleanfy")
