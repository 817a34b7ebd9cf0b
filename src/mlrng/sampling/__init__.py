"""Derived samplers built on RandomState draws.

Every sampler takes an optional ``state=`` keyword; None means the
process-wide default_state(). The core samplers never validate their
arguments. ``mlrng.sampling.strict`` offers validating versions under the
same names.
"""

from mlrng.sampling.distinct import expected_distinct_count, obtain_distinct_samples
from mlrng.sampling.scalar import bernoulli, normal, uniform_int, uniform_real

__all__ = [
    "uniform_real",
    "uniform_int",
    "bernoulli",
    "normal",
    "obtain_distinct_samples",
    "expected_distinct_count",
]
