"""mlrng — seedable random-number core for numerical and ML code.

Modules:
    state: Generator ownership, seeding, raw uniform/normal draws
    sampling: Derived samplers (ranged reals and integers, Bernoulli,
        scaled normals, distinct index sets) and an opt-in strict layer
    errors: Exception hierarchy

Typical use::

    import mlrng

    mlrng.seed(42)
    idx = mlrng.obtain_distinct_samples(0, 1000, 10)
"""

from mlrng.sampling import (
    bernoulli,
    expected_distinct_count,
    normal,
    obtain_distinct_samples,
    uniform_int,
    uniform_real,
)
from mlrng.state import (
    RandomConfig,
    RandomState,
    custom_seed,
    default_state,
    fixed_seed,
    seed,
    set_default_state,
)

__version__ = "0.1.0"

__all__ = [
    "RandomConfig",
    "RandomState",
    "seed",
    "custom_seed",
    "fixed_seed",
    "default_state",
    "set_default_state",
    "uniform_real",
    "uniform_int",
    "bernoulli",
    "normal",
    "obtain_distinct_samples",
    "expected_distinct_count",
]
