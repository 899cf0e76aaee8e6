"""
Performance utilities for timing loads and chart builds
"""

import functools
import logging
import time
from typing import Any, Callable

logger = logging.getLogger(__name__)

SLOW_OPERATION_SECONDS = 1.0


def _log_duration(name: str, duration: float) -> None:
    if duration > SLOW_OPERATION_SECONDS:
        logger.warning(f"⚠️ {name} took {duration:.2f}s")
    else:
        logger.debug(f"{name} took {duration:.3f}s")


class PerformanceMonitor:
    """Log how long named operations take"""

    def time_operation(self, operation_name: str):
        """Context manager for timing operations"""

        class Timer:
            def __init__(self, name):
                self.name = name
                self.start = None

            def __enter__(self):
                self.start = time.perf_counter()
                return self

            def __exit__(self, *args):
                _log_duration(self.name, time.perf_counter() - self.start)

        return Timer(operation_name)


# Global performance monitor
perf_monitor = PerformanceMonitor()


def log_performance(operation_name: str) -> Callable:
    """
    Decorator to log performance of operations.

    Args:
        operation_name: Name of the operation being performed

    Returns:
        Decorator function
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start_time = time.perf_counter()

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = time.perf_counter() - start_time
                logger.error(f"{operation_name} failed after {elapsed:.2f}s: {e}")
                raise

            _log_duration(operation_name, time.perf_counter() - start_time)
            return result

        return wrapper

    return decorator
