"""Distinct index sampling.

obtain_distinct_samples draws candidate positions *with replacement* and
keeps every position hit at least once (a balls-into-bins process). When
draws collide the result holds fewer than ``max_num_samples`` indices;
``max_num_samples`` bounds the number of draws, not the output size. Use
expected_distinct_count to see how large the result will be on average.
"""

from __future__ import annotations

import numpy as np

from mlrng.sampling.scalar import uniform_int
from mlrng.state import RandomState


def obtain_distinct_samples(
    lo_inclusive: int,
    hi_exclusive: int,
    max_num_samples: int,
    *,
    state: RandomState | None = None,
) -> np.ndarray:
    """Obtain no more than ``max_num_samples`` distinct indices.

    If the range holds more than ``max_num_samples`` values, perform exactly
    ``max_num_samples`` draws of ``uniform_int(range_size)`` and return every
    position drawn at least once. Otherwise return the whole range.

    Args:
        lo_inclusive: Lower bound (inclusive).
        hi_exclusive: Upper bound (exclusive).
        max_num_samples: Number of draws in the sparse case.
        state: Generator to draw from.

    Returns:
        Ascending int64 array of unique indices in [lo_inclusive, hi_exclusive).

    Examples:
        >>> obtain_distinct_samples(0, 5, 10).tolist()
        [0, 1, 2, 3, 4]
        >>> obtain_distinct_samples(3, 3, 5).tolist()
        []

    """
    range_size = hi_exclusive - lo_inclusive

    if range_size > max_num_samples:
        counts = np.zeros(range_size, dtype=np.int64)
        for _ in range(max_num_samples):
            counts[uniform_int(range_size, state=state)] += 1
        return np.flatnonzero(counts).astype(np.int64) + lo_inclusive

    return np.arange(lo_inclusive, hi_exclusive, dtype=np.int64)


def expected_distinct_count(range_size: int, max_num_samples: int) -> float:
    """Expected size of obtain_distinct_samples' result.

    In the sparse case this is ``n * (1 - (1 - 1/n) ** k)`` for ``n`` bins
    and ``k`` draws; otherwise the whole range is returned.

    Examples:
        >>> expected_distinct_count(5, 10)
        5.0
        >>> round(expected_distinct_count(20, 10), 3)
        8.025

    """
    if range_size > max_num_samples:
        if max_num_samples <= 0:
            return 0.0
        return range_size * (1.0 - (1.0 - 1.0 / range_size) ** max_num_samples)
    return float(max(range_size, 0))
