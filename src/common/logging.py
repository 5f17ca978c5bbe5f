import logging
import time
from functools import wraps
from typing import Callable, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_default_level = logging.INFO


def set_default_level(level: Union[int, str]) -> None:
    """
    Sets the level used by loggers created afterwards and updates the ones
    already handed out by setup_logger.
    """
    global _default_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    _default_level = level

    for name in list(logging.root.manager.loggerDict):
        if name.startswith("src."):
            logging.getLogger(name).setLevel(level)


def setup_logger(name: str, level: int = None) -> logging.Logger:
    """
    Sets up a logger with a standard format.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level if level is not None else _default_level)
    return logger


def log_execution_time(logger: logging.Logger):
    """
    Decorator to measure and log execution time of a function.
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.time()
            try:
                result = func(*args, **kwargs)
                elapsed = time.time() - start
                # Upstream calls are slow; anything under 10ms is noise
                if logger.isEnabledFor(logging.DEBUG) or elapsed > 0.01:
                    logger.debug(f"{func.__name__} executed in {elapsed:.3f}s")
                return result
            except Exception as e:
                logger.error(f"{func.__name__} failed: {e}")
                raise
        return wrapper
    return decorator
