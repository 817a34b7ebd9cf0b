"""Runtime configuration for random states."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from mlrng.errors import ConfigError

SEED_ENV = "MLRNG_SEED"
BINDING_TEST_ENV = "MLRNG_BINDING_TEST"

# MT19937's canonical default seed
DEFAULT_SEED = 5489

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def _parse_seed(raw: str) -> int | None:
    """Parse a decimal seed, or one with an explicit 0x/0o/0b prefix."""
    text = raw.strip()
    try:
        return int(text, 10)
    except ValueError:
        pass
    try:
        return int(text, 0)
    except ValueError:
        return None


@dataclass(frozen=True)
class RandomConfig:
    """Settings applied when a RandomState is created.

    Attributes:
        default_seed: Seed for states constructed without one.
        binding_test_mode: When True, seed() is ignored so a test harness
            can pin the seed with custom_seed() or fixed_seed().
    """

    default_seed: int = DEFAULT_SEED
    binding_test_mode: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RandomConfig:
        """Build a config from ``MLRNG_SEED`` and ``MLRNG_BINDING_TEST``.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            RandomConfig with unset variables left at their defaults.

        Raises:
            ConfigError: If a variable is set to an unparseable value.

        Examples:
            >>> RandomConfig.from_env({"MLRNG_SEED": "7"}).default_seed
            7
            >>> RandomConfig.from_env({}).binding_test_mode
            False

        """
        env = os.environ if environ is None else environ

        default_seed = DEFAULT_SEED
        raw_seed = env.get(SEED_ENV)
        if raw_seed is not None and raw_seed.strip():
            default_seed = _parse_seed(raw_seed)
            if default_seed is None:
                raise ConfigError(f"{SEED_ENV} must be an integer, got {raw_seed!r}")

        binding_test_mode = False
        raw_flag = env.get(BINDING_TEST_ENV)
        if raw_flag is not None:
            flag = raw_flag.strip().lower()
            if flag in _TRUE:
                binding_test_mode = True
            elif flag not in _FALSE:
                raise ConfigError(f"{BINDING_TEST_ENV} must be a boolean flag, got {raw_flag!r}")

        return cls(default_seed=default_seed, binding_test_mode=binding_test_mode)
