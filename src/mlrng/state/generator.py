"""RandomState: the generator every sampler draws from.

The engine is NumPy's legacy ``RandomState`` (MT19937 seeded from a
32-bit integer). Alongside it each state keeps a JAX PRNG key derived from
the same seed, so array code written against ``jax.random`` stays in step
with the scalar samplers.

No locking: one state shared between threads gives an unspecified
interleaving of draws. Give each worker its own state via spawn().

References:
    - NumPy legacy RandomState: https://numpy.org/doc/stable/reference/random/legacy.html
    - JAX random: https://jax.readthedocs.io/en/latest/random-numbers.html

"""

from __future__ import annotations

import logging
import random

import jax
import numpy as np
from jax import Array

from mlrng.errors import ConfigError
from mlrng.state.config import RandomConfig

logger = logging.getLogger(__name__)

SEED_MASK = 0xFFFFFFFF

# RAND_MAX-sized range for the once-per-process fixed seed
_FIXED_SEED_RANGE = 2**31

_fixed_seed: int | None = None
_default_state: RandomState | None = None


def truncate_seed(value: int) -> int:
    """Narrow an arbitrary integer to the 32-bit seed actually used.

    Examples:
        >>> truncate_seed(7)
        7
        >>> truncate_seed(2**32 + 7)
        7
        >>> truncate_seed(-1)
        4294967295

    """
    return int(value) & SEED_MASK


class RandomState:
    """Owned pseudo-random generator with its two canonical draws.

    Args:
        seed: Initial seed. Defaults to ``config.default_seed``.
        config: Settings for this state. Defaults to ``RandomConfig()``.

    Constructing a state never touches the global PRNGs; only seed(),
    custom_seed() and fixed_seed() do.

    Examples:
        >>> a = RandomState(3)
        >>> b = RandomState(3)
        >>> a.draw_uniform01() == b.draw_uniform01()
        True

    """

    def __init__(self, seed: int | None = None, *, config: RandomConfig | None = None) -> None:
        self.config = config if config is not None else RandomConfig()
        self._engine = np.random.RandomState()
        self._epoch_seed = 0
        self._key: Array | None = None
        self._reseed(self.config.default_seed if seed is None else seed, sync_globals=False)

    def __repr__(self) -> str:
        return f"RandomState(epoch_seed={self._epoch_seed})"

    @property
    def epoch_seed(self) -> int:
        """The 32-bit seed last applied to this state."""
        return self._epoch_seed

    def _reseed(self, value: int, *, sync_globals: bool) -> None:
        narrowed = truncate_seed(value)
        self._engine.seed(narrowed)
        self._key = jax.random.key(np.uint32(narrowed))
        self._epoch_seed = narrowed
        if sync_globals:
            random.seed(narrowed)
            np.random.seed(narrowed)
        logger.debug("reseeded %r from %d (globals synced: %s)", self, value, sync_globals)

    def seed(self, value: int) -> None:
        """Reseed this state and every global PRNG in lockstep.

        The value is narrowed to 32 bits silently. Python's ``random`` module,
        NumPy's legacy global state and this state's JAX key all restart from
        the same seed. In binding test mode the call is ignored.

        Args:
            value: Any integer.

        """
        if self.config.binding_test_mode:
            logger.debug("binding test mode: ignoring seed(%d)", value)
            return
        self._reseed(value, sync_globals=True)

    def custom_seed(self, value: int) -> None:
        """Like seed(), but applied even in binding test mode."""
        self._reseed(value, sync_globals=True)

    def fixed_seed(self) -> None:
        """Reseed everything with a seed drawn once per process.

        The first call draws the seed from Python's global ``random``
        module; later calls reuse it, so a harness can reset all
        subsystems to the same state before each run.
        """
        global _fixed_seed
        if _fixed_seed is None:
            _fixed_seed = random.randrange(_FIXED_SEED_RANGE)
        self._reseed(_fixed_seed, sync_globals=True)

    def draw_uniform01(self) -> float:
        """Draw from the uniform distribution on [0, 1)."""
        return float(self._engine.random_sample())

    def draw_normal01(self) -> float:
        """Draw from the standard normal distribution N(0, 1)."""
        return float(self._engine.standard_normal())

    def next_key(self) -> Array:
        """Split the held JAX key and return a fresh sub-key.

        The sequence of returned keys is fixed by the epoch seed.

        Examples:
            >>> import jax
            >>> s = RandomState(0)
            >>> k = s.next_key()
            >>> jax.random.uniform(k).shape
            ()

        """
        self._key, subkey = jax.random.split(self._key)
        return subkey

    def spawn(self, n: int) -> list[RandomState]:
        """Derive ``n`` child states, one per worker.

        Child seeds are drawn from this state's engine, so a seeded parent
        yields the same family every time. Children share this state's
        config and never touch the global PRNGs.

        Args:
            n: Number of children.

        Returns:
            List of independent RandomState instances.

        """
        seeds = self._engine.randint(0, SEED_MASK + 1, size=n, dtype=np.int64)
        logger.debug("spawning %d children from %r", n, self)
        return [RandomState(int(s), config=self.config) for s in seeds]


def default_state() -> RandomState:
    """Return the process-wide convenience state, creating it on first use.

    The state is configured from the environment (see RandomConfig.from_env).
    A malformed environment is logged as a warning and the built-in defaults
    are used instead, so seeding and sampling through the default state
    never fail.
    """
    global _default_state
    if _default_state is None:
        try:
            config = RandomConfig.from_env()
        except ConfigError as exc:
            logger.warning("ignoring malformed environment, using defaults: %s", exc)
            config = RandomConfig()
        _default_state = RandomState(config=config)
    return _default_state


def set_default_state(state: RandomState | None) -> RandomState | None:
    """Install ``state`` as the process-wide default.

    Passing None drops the current default; the next default_state() call
    recreates it from the environment.

    Returns:
        The previously installed state, or None.

    """
    global _default_state
    previous = _default_state
    _default_state = state
    logger.debug("default state replaced: %r -> %r", previous, state)
    return previous


def seed(value: int) -> None:
    """Seed the default state and all global PRNGs. See RandomState.seed."""
    default_state().seed(value)


def custom_seed(value: int) -> None:
    """Seed the default state even in binding test mode."""
    default_state().custom_seed(value)


def fixed_seed() -> None:
    """Reseed the default state with the per-process fixed seed."""
    default_state().fixed_seed()
