"""Logger configuration for command-line callers.

Library modules only call logging.getLogger(__name__); attaching handlers
is left to whoever owns the process.
"""

import logging
from pathlib import Path


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str,
    log_level: str = "INFO",
    log_file: str | Path | None = None,
) -> logging.Logger:
    """Set up a logger with console and optional file output.

    Args:
        name: Logger name ("revlines" covers every library module).
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Unknown names
            fall back to INFO.
        log_file: Optional path to a log file; parent directories are created.

    Returns:
        The configured logger. Calling again with the same name does not
        stack duplicate handlers.
    """
    logger = logging.getLogger(name)
    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
