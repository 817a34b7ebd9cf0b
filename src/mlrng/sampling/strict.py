"""Validating samplers.

Same names and signatures as the core samplers. Each checks its arguments,
raises SamplingDomainError on anything the core would silently accept, then
delegates to the core unchanged. Valid calls consume exactly the same draws
as the core, so both layers produce identical streams under one seed.

    >>> from mlrng.sampling import strict
    >>> strict.bernoulli(1.5)
    Traceback (most recent call last):
        ...
    mlrng.errors.SamplingDomainError: probability must lie in [0, 1], got 1.5

"""

from __future__ import annotations

import math

import numpy as np

from mlrng.errors import SamplingDomainError
from mlrng.sampling import distinct, scalar
from mlrng.state import RandomState


def _check_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise SamplingDomainError(f"{name} must be finite, got {value!r}")


def uniform_real(lo: float = 0.0, hi: float = 1.0, *, state: RandomState | None = None) -> float:
    """Strict uniform_real: requires finite ``lo <= hi``."""
    _check_finite("lo", lo)
    _check_finite("hi", hi)
    if hi < lo:
        raise SamplingDomainError(f"lower bound {lo} exceeds upper bound {hi}")
    return scalar.uniform_real(lo, hi, state=state)


def uniform_int(lo: int, hi_exclusive: int | None = None, *, state: RandomState | None = None) -> int:
    """Strict uniform_int: requires a non-empty range."""
    low, high = (0, lo) if hi_exclusive is None else (lo, hi_exclusive)
    if high <= low:
        raise SamplingDomainError(f"empty integer range [{low}, {high})")
    return scalar.uniform_int(lo, hi_exclusive, state=state)


def bernoulli(p: float, *, state: RandomState | None = None) -> int:
    """Strict bernoulli: requires ``0 <= p <= 1``."""
    if not 0.0 <= p <= 1.0:
        raise SamplingDomainError(f"probability must lie in [0, 1], got {p}")
    return scalar.bernoulli(p, state=state)


def normal(mean: float = 0.0, variance: float = 1.0, *, state: RandomState | None = None) -> float:
    """Strict normal: requires a finite mean and a finite non-negative scale."""
    _check_finite("mean", mean)
    _check_finite("variance", variance)
    if variance < 0:
        raise SamplingDomainError(f"scale must be non-negative, got {variance}")
    return scalar.normal(mean, variance, state=state)


def obtain_distinct_samples(
    lo_inclusive: int,
    hi_exclusive: int,
    max_num_samples: int,
    *,
    state: RandomState | None = None,
) -> np.ndarray:
    """Strict obtain_distinct_samples: ordered non-negative range, count >= 0."""
    if lo_inclusive < 0:
        raise SamplingDomainError(f"lower bound must be non-negative, got {lo_inclusive}")
    if hi_exclusive < lo_inclusive:
        raise SamplingDomainError(f"inverted range [{lo_inclusive}, {hi_exclusive})")
    if max_num_samples < 0:
        raise SamplingDomainError(f"max_num_samples must be non-negative, got {max_num_samples}")
    return distinct.obtain_distinct_samples(lo_inclusive, hi_exclusive, max_num_samples, state=state)
