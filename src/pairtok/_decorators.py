"""Reusable decorators for training utilities."""

import functools
import logging
import time
from typing import Callable

log = logging.getLogger(__name__)


def measure_time(func: Callable) -> Callable:
    """Log how long the wrapped callable ran, whether it returned or raised."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start
            log.info("%s finished in %.3f s", func.__qualname__, elapsed)

    return wrapper
