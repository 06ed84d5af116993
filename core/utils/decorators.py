"""
Utility decorators and context managers.
"""

import time
from contextlib import contextmanager
from typing import Dict, Iterator


@contextmanager
def timer() -> Iterator[Dict[str, int]]:
    """
    Measure wall time of a block in milliseconds.

    The yielded dict gets its "ms" key filled when the block exits, so read
    it after the with statement:

        >>> with timer() as t:
        ...     compose(image, circle)
        >>> elapsed = t["ms"]
    """
    result = {"ms": 0}
    start = time.perf_counter()
    try:
        yield result
    finally:
        result["ms"] = int((time.perf_counter() - start) * 1000)
