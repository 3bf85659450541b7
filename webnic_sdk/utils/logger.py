"""
Centralized logging configuration with colored output

Module loggers (``webnic_sdk.*``) propagate to the ``webnic_sdk`` package
logger, which owns the handlers. File logging is off until
configure_logging() is given a log directory.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union
from datetime import datetime
import colorlog


PACKAGE_LOGGER = "webnic_sdk"

_configured = False


def _console_handler(level: int) -> logging.Handler:
    console_handler = colorlog.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    console_formatter = colorlog.ColoredFormatter(
        "%(log_color)s%(levelname)-8s%(reset)s %(blue)s[%(name)s]%(reset)s %(message)s",
        reset=True,
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        },
        style='%'
    )
    console_handler.setFormatter(console_formatter)
    return console_handler


def _file_handler(log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    today = datetime.now().strftime("%Y-%m-%d")

    file_handler = logging.FileHandler(log_dir / f"webnic_{today}.log", encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)  # Always log everything to file

    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(file_formatter)
    return file_handler


def setup_logger(
    name: str,
    level: str = "INFO",
    log_dir: Optional[Union[str, Path]] = None,
    console: bool = True
) -> logging.Logger:
    """
    Set up a logger with colored console output and optional file logging.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Optional directory for a daily log file
        console: Whether to output to console

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    numeric = getattr(logging, level.upper())
    logger.setLevel(numeric)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    if console:
        logger.addHandler(_console_handler(numeric))

    if log_dir is not None:
        logger.addHandler(_file_handler(Path(log_dir)))

    logger.propagate = not console

    return logger


def configure_logging(
    level: str = "INFO",
    console: bool = True,
    log_dir: Optional[Union[str, Path]] = None,
    propagate: Optional[bool] = None
) -> logging.Logger:
    """
    (Re)configure the SDK's package logger.

    Args:
        level: Logging level
        console: Attach the colored stdout handler
        log_dir: Directory for a daily ``webnic_<date>.log`` file; None disables it
        propagate: Pass records on to the root logger. Defaults to True when
            there is no console handler

    Returns:
        The package logger
    """
    global _configured

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    numeric = getattr(logging, level.upper())
    package_logger.setLevel(numeric)

    if console:
        package_logger.addHandler(_console_handler(numeric))
    if log_dir is not None:
        package_logger.addHandler(_file_handler(Path(log_dir)))

    package_logger.propagate = (not console) if propagate is None else propagate
    _configured = True

    return package_logger


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger. SDK module loggers share the package logger's handlers;
    any other name (e.g. a script's ``__main__``) gets its own console handler.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Optional level for this logger only

    Returns:
        Logger instance
    """
    if not (name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}.")):
        return setup_logger(name, level or "INFO")

    if not _configured:
        configure_logging()

    logger = logging.getLogger(name)
    if level:
        logger.setLevel(getattr(logging, level.upper()))
    return logger

