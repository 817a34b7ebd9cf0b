"""Generator ownership and seeding.

A RandomState owns one Mersenne Twister engine plus the JAX key derived
from the same seed. Sampling functions take a state explicitly; the
process-wide convenience instance is reached through default_state().

Seeding through seed() keeps every random subsystem in lockstep:
    - the state's MT19937 engine
    - Python's global ``random`` module
    - NumPy's legacy global ``numpy.random`` state
    - the state's JAX PRNG key
"""

from mlrng.state.config import RandomConfig
from mlrng.state.generator import (
    SEED_MASK,
    RandomState,
    custom_seed,
    default_state,
    fixed_seed,
    seed,
    set_default_state,
    truncate_seed,
)

__all__ = [
    "SEED_MASK",
    "RandomConfig",
    "RandomState",
    "truncate_seed",
    "seed",
    "custom_seed",
    "fixed_seed",
    "default_state",
    "set_default_state",
]
