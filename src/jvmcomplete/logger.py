"""Logging configuration for jvmcomplete using loguru.

jvmcomplete is embedded in editors, so importing it leaves loguru
untouched: the package's records are disabled until the host calls
``setup_logger`` (or ``logger.enable("jvmcomplete")`` for its own sinks).
"""

import os
import sys
from loguru import logger
from typing import Optional

_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[component]}:{function}:{line} - {message}"
_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

# Handler ids installed by setup_logger; host sinks are never touched
_handler_ids: list[int] = []

logger.disable("jvmcomplete")


def _is_component_record(record) -> bool:
    return "component" in record["extra"]


def setup_logger(
    log_file: Optional[str] = None,
    log_level: str = "WARNING",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = True,
) -> None:
    """
    Enable jvmcomplete logging and install its sinks.

    Calling it again replaces the sinks from the previous call. Sinks only
    accept records emitted through ``get_logger``, so host records never
    reach them.

    Args:
        log_file: Path to a log file (relative paths resolve against the
            current working directory). None disables file output.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
        console_output: Whether to output to stderr
    """
    reset_logger()

    if console_output:
        _handler_ids.append(
            logger.add(
                sys.stderr,
                level=log_level,
                format=_CONSOLE_FORMAT,
                filter=_is_component_record,
                colorize=True,
            )
        )

    if log_file is not None:
        if not os.path.isabs(log_file):
            log_file = os.path.abspath(log_file)
        _handler_ids.append(
            logger.add(
                log_file,
                level=log_level,
                format=_FILE_FORMAT,
                filter=_is_component_record,
                rotation=rotation,
                retention=retention,
                compression=compression,
                encoding="utf-8",
            )
        )

    logger.enable("jvmcomplete")


def reset_logger() -> None:
    """Remove the sinks installed by ``setup_logger`` and disable logging again."""
    while _handler_ids:
        logger.remove(_handler_ids.pop())
    logger.disable("jvmcomplete")


def get_logger(name: Optional[str] = None):
    """
    Get a logger bound to a component name.

    Args:
        name: Optional component name shown in log records

    Returns:
        Logger instance
    """
    return logger.bind(component=name or "jvmcomplete")
