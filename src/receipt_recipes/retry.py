"""Retry decorator for HTTP calls to remote recipe services."""

import logging
import time
from functools import wraps
from typing import Any, Callable

import requests

logger = logging.getLogger(__name__)

RETRYABLE_ERRORS = (
    requests.exceptions.ConnectionError,
    requests.exceptions.ChunkedEncodingError,
    requests.exceptions.ReadTimeout,
    ConnectionResetError,
)


def retry_on_connection_error(
    max_retries: int = 3, initial_delay: float = 1.0
) -> Callable:
    """Decorator that retries a function on connection errors with exponential backoff.

    Args:
        max_retries: Maximum number of attempts, the first call included
        initial_delay: Delay before the first retry in seconds

    Returns:
        Decorated function that re-raises the last connection error once all
        attempts are used

    Example:
        @retry_on_connection_error(max_retries=3, initial_delay=1.0)
        def fetch_meals(url):
            return requests.get(url)
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            for attempt in range(1, max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except RETRYABLE_ERRORS as e:
                    if attempt == max_retries:
                        logger.error(f"Failed after {max_retries} attempts: {e}")
                        raise
                    logger.warning(
                        f"Connection error on attempt {attempt}/{max_retries}: {e}. "
                        f"Retrying in {delay}s..."
                    )
                    time.sleep(delay)
                    delay *= 2

        return wrapper

    return decorator
