"""
Custom logging configuration for Work Manager.

Extends Python's standard logging with a custom DEEP_DEBUG level (5)
for very verbose debugging output (one line per priority write). Provides
WorkLogger class with per-event log level configuration support.

Log Levels
----------
- CRITICAL (50): Critical errors
- ERROR (40): Errors
- WARNING (30): Warnings
- INFO (20): Run summaries (default)
- DEBUG (10): Per-pass thresholds and counts
- DEEP_DEBUG (5): Every individual priority assignment

Examples
--------
Use logger in events:

>>> from workmanager import logging
>>> logger = logging.getLogger("workmanager.events.assign_doctors")
>>> logger.info("Event executing")
>>> logger.deep("Assigning 'Ada' as a doctor")

Configure per-event log levels:

>>> import workmanager as wm
>>> log_config = {
...     "default_level": "INFO",
...     "events": {"assign_doctors": "DEBUG"},
... }
>>> manager = wm.WorkManager.init(work_types=universe, logging=log_config)

See Also
--------
Event.get_logger : Get logger for specific event
"""

import logging
from typing import Any

(CRITICAL, ERROR, WARNING, INFO, DEBUG) = (
    logging.CRITICAL,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
)
DEEP_DEBUG = 5
logging.addLevelName(DEEP_DEBUG, "DEEP")


class WorkLogger(logging.Logger):
    """
    Custom logger with DEEP_DEBUG level support.

    Extends Python's Logger to add the `deep()` method for very verbose
    debugging output (level 5).

    Examples
    --------
    >>> logger = WorkLogger("test")
    >>> logger.setLevel(5)  # DEEP_DEBUG
    >>> logger.deep("Very verbose message")
    """

    def deep(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """
        Log message at DEEP_DEBUG level (5).

        Parameters
        ----------
        msg : str
            Message format string.
        *args : Any
            Arguments for message formatting.
        **kwargs : Any
            Additional logging kwargs.
        """
        if self.isEnabledFor(DEEP_DEBUG):
            self._log(DEEP_DEBUG, msg, args, **kwargs)


# Make the logging module hand out our subclass from now on
logging.setLoggerClass(WorkLogger)


def getLogger(name: str | None = None) -> WorkLogger:
    """
    Get a WorkLogger instance.

    Convenience wrapper around logging.getLogger() that returns
    a WorkLogger instance with DEEP_DEBUG support.

    Parameters
    ----------
    name : str, optional
        Logger name. If None, returns root logger.

    Returns
    -------
    WorkLogger
        Logger instance with deep() method.
    """
    return logging.getLogger(name)  # type: ignore[return-value]


def configure(log_config: dict[str, Any]) -> None:
    """
    Apply a ``logging`` configuration section to the workmanager loggers.

    Parameters
    ----------
    log_config : dict
        Logging configuration with keys:
        - default_level: str (e.g., 'INFO', 'DEBUG', 'DEEP_DEBUG')
        - events: dict[str, str] (per-event overrides)
    """
    default_level = log_config.get("default_level", "INFO")
    logging.getLogger("workmanager").setLevel(_level(default_level))

    for event_name, level in log_config.get("events", {}).items():
        logging.getLogger(f"workmanager.events.{event_name}").setLevel(_level(level))


def _level(name: str) -> int:
    name = name.upper()
    if name == "DEEP_DEBUG":
        return DEEP_DEBUG
    return int(getattr(logging, name))
