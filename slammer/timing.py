"""Timing helper that logs how long a block took."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


@contextmanager
def log_duration(name: str) -> Iterator[None]:
    """Log the wall-clock duration of the enclosed block at INFO level.

    Works as a context manager and as a decorator. Timing is only logged
    when Python runs with assertions enabled.
    """
    if not __debug__:
        yield
        return
    start = time.perf_counter()
    yield
    elapsed = time.perf_counter() - start
    logger.info("%s took %.6fs", name, elapsed)