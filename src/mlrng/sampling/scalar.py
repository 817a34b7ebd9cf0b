"""Scalar samplers.

Each sampler is an arithmetic transform of one raw draw from the state.
Nothing is validated: inverted ranges reflect, out-of-range probabilities
saturate, and a non-positive integer bound is the caller's problem.
"""

from __future__ import annotations

import math

from mlrng.state import RandomState, default_state


def _resolve(state: RandomState | None) -> RandomState:
    return default_state() if state is None else state


def uniform_real(lo: float = 0.0, hi: float = 1.0, *, state: RandomState | None = None) -> float:
    """Sample uniformly from [lo, hi).

    Computes ``lo + (hi - lo) * u`` for one unit-uniform draw ``u``. With the
    default bounds this is ``u`` itself. ``hi < lo`` is accepted and samples
    from (hi, lo].

    Args:
        lo: Lower bound.
        hi: Upper bound.
        state: Generator to draw from.

    Returns:
        A float between lo and hi.

    Examples:
        >>> s = RandomState(42)
        >>> 2.0 <= uniform_real(2.0, 5.0, state=s) < 5.0
        True

    """
    u = _resolve(state).draw_uniform01()
    return lo + (hi - lo) * u


def bernoulli(p: float, *, state: RandomState | None = None) -> int:
    """Return 1 with probability ``p``, else 0.

    ``p <= 0`` always gives 0 and ``p >= 1`` always gives 1.
    """
    return 1 if uniform_real(state=state) < p else 0


def uniform_int(lo: int, hi_exclusive: int | None = None, *, state: RandomState | None = None) -> int:
    """Sample an integer uniformly from [lo, hi_exclusive).

    Called with one argument, that argument is the exclusive upper bound and
    the range starts at 0, as with ``range()``.

    Args:
        lo: Lower bound (inclusive), or the upper bound when
            ``hi_exclusive`` is omitted.
        hi_exclusive: Upper bound (exclusive).
        state: Generator to draw from.

    Returns:
        ``lo + floor((hi_exclusive - lo) * u)``.

    Examples:
        >>> s = RandomState(0)
        >>> 0 <= uniform_int(10, state=s) < 10
        True
        >>> 5 <= uniform_int(5, 8, state=s) < 8
        True

    """
    u = _resolve(state).draw_uniform01()
    if hi_exclusive is None:
        return math.floor(lo * u)
    return lo + math.floor((hi_exclusive - lo) * u)


def normal(mean: float = 0.0, variance: float = 1.0, *, state: RandomState | None = None) -> float:
    """Sample ``variance * z + mean`` for a standard normal draw ``z``.

    Note: ``variance`` multiplies the unit draw directly, so it acts as a
    standard deviation. ``normal(5, 2)`` has spread 2, not sqrt(2).

    Args:
        mean: Location.
        variance: Scale applied to the unit normal draw.
        state: Generator to draw from.

    Returns:
        A normally distributed float.

    """
    z = _resolve(state).draw_normal01()
    return variance * z + mean
