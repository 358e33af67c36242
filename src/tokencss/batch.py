"""Chunked processing of token lists."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, TypeVar

__all__ = ["batch_process_tokens"]

log = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def batch_process_tokens(
    tokens: Sequence[T],
    processor: Callable[[T], R],
    chunk_size: int = 10,
    delay: float = 0.0,
    max_workers: int | None = None,
) -> list[R]:
    """Run *processor* over *tokens* one chunk at a time.

    Items within a chunk run concurrently on a thread pool; chunks run in
    order with *delay* seconds between them.  Results come back in input
    order.  The first exception raised by *processor* propagates.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
    if delay < 0:
        raise ValueError(f"delay must be non-negative, got {delay}")

    items = list(tokens)
    chunks = [items[i : i + chunk_size] for i in range(0, len(items), chunk_size)]
    results: list[R] = []

    for index, chunk in enumerate(chunks):
        with ThreadPoolExecutor(max_workers=max_workers or len(chunk)) as pool:
            results.extend(pool.map(processor, chunk))
        log.debug("Processed chunk %d/%d (%d item(s))", index + 1, len(chunks), len(chunk))
        if delay > 0 and index < len(chunks) - 1:
            time.sleep(delay)

    return results
