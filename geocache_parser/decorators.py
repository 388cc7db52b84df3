"""Decorators for timing and argument checks.

@timed
------
Logs a function's execution time at DEBUG level and warns when it takes
longer than a second (a GPX pocket query of a few thousand caches loads
well under that).

Example:
    >>> @timed
    ... def load(path):
    ...     ...
    >>> load("caches.gpx")
    DEBUG: load took 0.12s

@validate_not_none
------------------
Raises ValueError before the call when a named parameter is None.

Example:
    >>> @validate_not_none("document")
    ... def count(document):
    ...     ...
    >>> count(None)
    ValueError: Parameter 'document' cannot be None in count()
"""

import functools
import inspect
import time
from typing import Callable, Any, TypeVar
from .logger import logger

__all__ = [
    "timed",
    "validate_not_none",
]

F = TypeVar("F", bound=Callable[..., Any])

SLOW_CALL_SECONDS = 1.0


def timed(func: F) -> F:
    """Decorator to measure and log function execution time.

    Args:
        func: Function to time

    Returns:
        Wrapped function that logs execution time
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - start_time

        logger.debug(f"{func.__name__} took {elapsed:.2f}s")

        if elapsed > SLOW_CALL_SECONDS:
            logger.warning(f"{func.__name__} took {elapsed:.2f}s")

        return result

    return wrapper


def validate_not_none(*param_names: str) -> Callable[[F], F]:
    """Decorator to validate that specified parameters are not None.

    Args:
        *param_names: Names of parameters to validate

    Returns:
        Decorator function
    """

    def decorator(func: F) -> F:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            bound_args = sig.bind(*args, **kwargs)
            bound_args.apply_defaults()

            for param_name in param_names:
                if bound_args.arguments.get(param_name, ...) is None:
                    raise ValueError(
                        f"Parameter '{param_name}' cannot be None in "
                        f"{func.__name__}()"
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator
