"""Database connection retry utilities."""

import time
import functools
from typing import Any, Callable, TypeVar
from flask import current_app
from sqlalchemy.exc import OperationalError, DisconnectionError
from psycopg2 import OperationalError as Psycopg2OperationalError

F = TypeVar('F', bound=Callable[..., Any])

RETRYABLE_MESSAGES = (
    'ssl syscall error', 'eof detected', 'connection closed',
    'server closed the connection', 'connection reset',
    'connection timed out', 'could not connect',
    'ssl error: decryption failed', 'bad record mac',
)


def is_retryable(exc: Exception) -> bool:
    error_msg = str(exc).lower()
    return any(keyword in error_msg for keyword in RETRYABLE_MESSAGES)


def retry_db_operation(max_retries: int = 3, delay: float = 0.5, backoff: float = 2.0):
    """
    Decorator to retry read-only database operations on connection failures.

    Args:
        max_retries: Maximum number of retry attempts
        delay: Initial delay between retries in seconds
        backoff: Multiplier for delay after each retry
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            current_delay = delay

            for attempt in range(max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except (OperationalError, DisconnectionError, Psycopg2OperationalError) as e:
                    if not is_retryable(e) or attempt >= max_retries:
                        if attempt:
                            current_app.logger.error(
                                f"Database operation failed after {attempt + 1} attempts: {e}"
                            )
                        raise
                    current_app.logger.warning(
                        f"Database connection error on attempt {attempt + 1}/{max_retries + 1}: {e}. "
                        f"Retrying in {current_delay:.1f}s..."
                    )
                    time.sleep(current_delay)
                    current_delay *= backoff

        return wrapper  # type: ignore[return-value]
    return decorator


def safe_db_operation(func: F, *args, **kwargs) -> Any:
    """
    Execute a database operation with retry logic.
    Use this for one-off operations that need retry protection.
    """
    @retry_db_operation()
    def _operation():
        return func(*args, **kwargs)

    return _operation()
