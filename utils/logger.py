# This module contains a custom formatter and the logger factory for the Blog Client.
import logging
from typing import Optional

ROOT_LOGGER_NAME = "blog"


class CustomFormatter(logging.Formatter):
    """
    A custom formatter for logging messages with different log levels.

    Attributes:
        grey (str): ANSI escape sequence for grey color.
        yellow (str): ANSI escape sequence for yellow color.
        red (str): ANSI escape sequence for red color.
        bold_red (str): ANSI escape sequence for bold red color.
        reset (str): ANSI escape sequence to reset color.
        format (str): The log message format.
        FORMATS (dict): A dictionary mapping log levels to their respective log message formats.

    Usage:
        handler = logging.StreamHandler()
        handler.setFormatter(CustomFormatter())
    """
    grey = "\x1b[37;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    dark_grey = "\x1b[30;1m"
    reset = "\x1b[0m"
    format = '[%(levelname)s] %(asctime)s - %(name)s - %(message)s'

    FORMATS = {
        logging.DEBUG: dark_grey + format + reset,
        logging.INFO: grey + format + reset,
        logging.WARNING: yellow + format + reset,
        logging.ERROR: red + format + reset,
        logging.CRITICAL: bold_red + format + reset
    }

    def format(self, record):
        """
        Formats the log record based on its log level.

        Args:
            record (logging.LogRecord): The log record to be formatted.

        Returns:
            str: The formatted log message.
        """
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


def _configure_root_logger() -> logging.Logger:
    log = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in log.handlers):
        log.setLevel(logging.INFO)

        # create console handler
        ch = logging.StreamHandler()
        ch.setLevel(logging.DEBUG)
        ch.setFormatter(CustomFormatter())
        log.addHandler(ch)
    return log


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger under the application's "blog" namespace.

    Args:
        name: Module name, usually __name__. None returns the root app logger.

    Returns:
        logging.Logger: The configured logger.
    """
    root = _configure_root_logger()
    if not name:
        return root
    return root.getChild(name)


def setup_file_logging(log_file: str, level: int = logging.INFO) -> logging.Logger:
    """
    Add a plain-text file handler to the application logger and set its level.

    Args:
        log_file: Path of the log file to append to.
        level: Logging level for the application logger.

    Returns:
        logging.Logger: The root application logger.
    """
    root = _configure_root_logger()
    root.setLevel(level)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter('[%(levelname)s] %(asctime)s - %(name)s - %(message)s'))
    root.addHandler(file_handler)
    return root
