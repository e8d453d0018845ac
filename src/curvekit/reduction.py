"""
Parallel radius reduction.

The input sequence is split into disjoint contiguous chunks, one per worker.
Each worker sums its own chunk into a local accumulator and hands the
partial sum back through its Future. Partial sums are combined only after
every worker has finished, so no accumulator is ever shared between threads.

Floating-point addition is not associative: the parallel total can differ
from the sequential left-to-right sum in the last few bits.
"""

import concurrent.futures
import logging
from typing import List, Sequence, TypeVar

from curvekit.curves import Curve

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 4

T = TypeVar("T")


def partition(items: Sequence[T], parts: int) -> List[Sequence[T]]:
    """
    Split `items` into at most `parts` contiguous, non-empty chunks.

    Chunk sizes differ by at most one. Every item lands in exactly one chunk.
    An empty input gives an empty list.
    """
    if parts < 1:
        raise ValueError(f"parts must be >= 1, got {parts}")

    parts = min(parts, len(items))
    if parts == 0:
        return []

    base, extra = divmod(len(items), parts)
    chunks = []
    start = 0
    for index in range(parts):
        size = base + (1 if index < extra else 0)
        chunks.append(items[start:start + size])
        start += size
    return chunks


def sequential_radius_sum(curves: Sequence[Curve]) -> float:
    """Left-to-right sum of radii."""
    total = 0.0
    for curve in curves:
        total += curve.radius()
    return total


def parallel_radius_sum(curves: Sequence[Curve], workers: int = DEFAULT_WORKERS) -> float:
    """
    Sum radius() over `curves` using a fixed pool of worker threads.

    Args:
        curves: Curves to reduce; read-only for the duration of the call
        workers: Pool size, fixed before the reduction starts

    Returns:
        Total radius. Exactly 0.0 for an empty input.

    Raises:
        ValueError: If workers < 1
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    if not curves:
        return 0.0

    if workers > len(curves):
        logger.info("Only %d curve(s) for %d workers; idle workers are not started", len(curves), workers)

    chunks = partition(curves, workers)

    with concurrent.futures.ThreadPoolExecutor(max_workers=len(chunks)) as executor:
        futures = [executor.submit(sequential_radius_sum, chunk) for chunk in chunks]
        partial_sums = [future.result() for future in concurrent.futures.as_completed(futures)]

    total = sum(partial_sums)
    logger.debug("Reduced %d curve(s) in %d chunk(s): %r", len(curves), len(chunks), total)
    return total


__all__ = ["DEFAULT_WORKERS", "parallel_radius_sum", "partition", "sequential_radius_sum"]
