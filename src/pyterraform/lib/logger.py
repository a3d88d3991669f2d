"""
Dual-mode logging for pyterraform.

Provides human-readable console logs for interactive use and JSON
structured logs for log collectors.
"""

import logging
import os
import sys

from pythonjsonlogger import jsonlogger


def setup_logger(
    name: str,
    level: str | None = None,
    log_format: str | None = None,
) -> logging.Logger:
    """
    Setup dual-mode logger.

    Parameters
    ----------
    name : str
        Logger name (e.g., "pyterraform", "pyterraform.process")
    level : str, optional
        Logging level name. Falls back to LOG_LEVEL, then INFO.
    log_format : str, optional
        "console" or "json". Falls back to PYTERRAFORM_LOG_FORMAT, then console.

    Returns
    -------
    logging.Logger
        Configured logger instance

    Examples
    --------
    >>> logger = setup_logger("pyterraform", level="DEBUG")
    >>> logger.debug("running terraform command [terraform plan]")

    Environment Variables
    ---------------------
    LOG_LEVEL : str
        Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
    PYTERRAFORM_LOG_FORMAT : str
        Output format: "console" or "json" (default: console)
    """
    logger = logging.getLogger(name)

    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    # Remove existing handlers to avoid duplicates if called multiple times
    logger.handlers.clear()

    log_format = (log_format or os.getenv("PYTERRAFORM_LOG_FORMAT", "console")).lower()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logger.level)

    if log_format == "json":
        formatter = _create_json_formatter(name)
    else:
        formatter = _create_console_formatter(name)

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    logger.propagate = False

    return logger


class JsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that tags every entry with its component."""

    def __init__(self, *args, component: str = "pyterraform", **kwargs):
        super().__init__(*args, **kwargs)
        self.component = component

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record["component"] = self.component

        # Collectors index on 'severity'
        if "levelname" in log_record:
            log_record["severity"] = log_record.pop("levelname")


def _create_json_formatter(component: str) -> logging.Formatter:
    return JsonFormatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        component=component,
    )


def _create_console_formatter(component: str) -> logging.Formatter:
    return logging.Formatter(
        fmt=f"%(asctime)s {component} %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
