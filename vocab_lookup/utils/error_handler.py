"""Error handling utilities and decorators"""

import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from ..exceptions import VocabLookupError

T = TypeVar("T")


def _log_error(
    logger: logging.Logger, log_level: int, op_name: str, e: Exception
) -> None:
    if isinstance(e, VocabLookupError):
        logger.log(log_level, f"Application error in {op_name}: {e}")
        if e.details:
            logger.debug(f"Error details for {op_name}: {e.details}")
    else:
        logger.log(log_level, f"Unexpected error in {op_name}: {e}", exc_info=True)


def handle_errors_async(
    log_level: int = logging.ERROR,
    operation_name: str | None = None,
) -> Callable[[Callable[..., Awaitable[T | None]]], Callable[..., Awaitable[T | None]]]:
    """
    Decorator that logs and swallows errors raised by a coroutine.

    Used for cleanup steps whose failure must not mask the caller's result.
    The wrapped coroutine returns None when an error is handled.

    Args:
        log_level: Logging level for error messages
        operation_name: Custom operation name for logging (defaults to function name)
    """

    def decorator(
        func: Callable[..., Awaitable[T | None]],
    ) -> Callable[..., Awaitable[T | None]]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T | None:
            op_name = operation_name or func.__name__
            logger = logging.getLogger(func.__module__)

            try:
                return await func(*args, **kwargs)
            except Exception as e:
                _log_error(logger, log_level, op_name, e)
                return None

        return wrapper

    return decorator
