"""
Logging for the highlighting engine.

Handlers are attached to the ``search_highlighting`` package logger, not
the root logger, so applications embedding the engine keep control of
their own logging. Module loggers obtained with get_logger(__name__) are
children of the package logger and inherit its handlers.

The first get_logger call configures the package logger from config.json
when one can be found; otherwise a console handler with defaults is used.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


PACKAGE_LOGGER = "search_highlighting"
LOG_FILE_NAME = "search_highlighting.log"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_logger_initialized = False


def setup_logging(
    log_level: str = "INFO",
    log_format: str = DEFAULT_FORMAT,
    logs_directory: Path = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5
) -> logging.Logger:
    """
    Attach console and optional rotating file handlers to the package logger.

    Runs once per process; later calls return the logger unchanged.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
        log_format: Format string for log records.
        logs_directory: Directory for the rotating log file. None disables
            file logging.
        max_file_size_mb: Size at which the log file rotates.
        backup_count: Rotated files to keep.

    Returns:
        The package logger.
    """
    global _logger_initialized

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _logger_initialized:
        return package_logger

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.setLevel(getattr(logging, str(log_level).upper(), logging.INFO))
    package_logger.propagate = False

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if logs_directory:
        logs_directory = Path(logs_directory)
        logs_directory.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            logs_directory / LOG_FILE_NAME,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    _logger_initialized = True
    return package_logger


def _setup_from_config() -> None:
    """
    Configure logging from config.json.

    Falls back to console-only defaults when there is no usable config or
    the configured log directory cannot be created.
    """
    from .config_loader import get_config

    try:
        config = get_config()
        setup_logging(
            log_level=config.logging.level,
            log_format=config.logging.format,
            logs_directory=config.paths.logs_directory,
            max_file_size_mb=config.logging.max_file_size_mb,
            backup_count=config.logging.backup_count
        )
    except Exception:
        setup_logging()
        logging.getLogger(PACKAGE_LOGGER).warning(
            "Logging config unusable, using console defaults", exc_info=True
        )


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger.

    Names outside the package (anything not starting with
    ``search_highlighting``) are placed under the package logger so they
    share its handlers.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Logger instance.
    """
    if not _logger_initialized:
        _setup_from_config()

    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


if __name__ == "__main__":
    setup_logging(log_level="DEBUG")

    logger = get_logger(__name__)
    logger.debug("Debug message")
    logger.info("Info message")
    logger.warning("Warning message")
