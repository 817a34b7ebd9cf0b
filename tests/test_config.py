"""Tests for mlrng.state.config module."""

from __future__ import annotations

import pytest

from mlrng.errors import ConfigError, MlrngError
from mlrng.state import RandomConfig


class TestRandomConfigFromEnv:
    """Tests for RandomConfig.from_env."""

    def test_defaults(self):
        config = RandomConfig.from_env({})
        assert config == RandomConfig()
        assert config.default_seed == 5489
        assert config.binding_test_mode is False

    def test_seed(self):
        assert RandomConfig.from_env({"MLRNG_SEED": " 123 "}).default_seed == 123

    def test_hex_seed(self):
        assert RandomConfig.from_env({"MLRNG_SEED": "0xff"}).default_seed == 255

    @pytest.mark.parametrize(("raw", "expected"), [("007", 7), ("0042", 42), ("-05", -5)])
    def test_leading_zero_seed_is_decimal(self, raw, expected):
        assert RandomConfig.from_env({"MLRNG_SEED": raw}).default_seed == expected

    @pytest.mark.parametrize(("raw", "expected"), [("0o17", 15), ("0b101", 5), ("0X1F", 31)])
    def test_prefixed_seed(self, raw, expected):
        assert RandomConfig.from_env({"MLRNG_SEED": raw}).default_seed == expected

    def test_blank_seed_ignored(self):
        assert RandomConfig.from_env({"MLRNG_SEED": ""}).default_seed == 5489

    def test_bad_seed(self):
        with pytest.raises(ConfigError, match="MLRNG_SEED"):
            RandomConfig.from_env({"MLRNG_SEED": "abc"})

    @pytest.mark.parametrize("flag", ["1", "true", "Yes", "ON"])
    def test_binding_flag_on(self, flag):
        assert RandomConfig.from_env({"MLRNG_BINDING_TEST": flag}).binding_test_mode

    @pytest.mark.parametrize("flag", ["0", "false", "No", "off", ""])
    def test_binding_flag_off(self, flag):
        assert not RandomConfig.from_env({"MLRNG_BINDING_TEST": flag}).binding_test_mode

    def test_bad_flag(self):
        with pytest.raises(ConfigError):
            RandomConfig.from_env({"MLRNG_BINDING_TEST": "maybe"})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("MLRNG_SEED", "9")
        monkeypatch.delenv("MLRNG_BINDING_TEST", raising=False)
        assert RandomConfig.from_env().default_seed == 9

    def test_error_hierarchy(self):
        with pytest.raises(MlrngError):
            RandomConfig.from_env({"MLRNG_SEED": "x"})
        with pytest.raises(ValueError):
            RandomConfig.from_env({"MLRNG_SEED": "x"})

    def test_frozen(self):
        config = RandomConfig()
        with pytest.raises(AttributeError):
            config.default_seed = 1
