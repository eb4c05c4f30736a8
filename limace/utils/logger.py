import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

PACKAGE_LOGGER_NAME = 'limace'

def setup_logger(logger_name: str, log_file: Optional[str] = None, level=logging.INFO, add_console_handler: bool = True) -> logging.Logger:
    """Generic function to set up a logger."""
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplication
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # File Handler
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(log_file, maxBytes=5*1024*1024, backupCount=5, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Console Handler
    if add_console_handler:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # Once this logger has its own handlers, records must not reach the root logger twice.
    logger.propagate = not logger.handlers
    return logger

def get_logger(name: str = PACKAGE_LOGGER_NAME) -> logging.Logger:
    """
    Returns a logger under the limace namespace.
    """
    return logging.getLogger(name)

def parse_log_level(value: Optional[str], fallback: int = logging.WARNING) -> int:
    """Translates a level name such as 'debug' into its logging constant."""
    if not value:
        return fallback
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else fallback
