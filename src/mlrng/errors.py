"""Exception hierarchy.

Core sampling is total over its numeric domain and raises nothing of its
own. These classes cover configuration parsing and the opt-in strict layer.
"""

from __future__ import annotations


class MlrngError(Exception):
    """Base class for all mlrng errors."""


class ConfigError(MlrngError, ValueError):
    """A configuration value could not be parsed."""


class SamplingDomainError(MlrngError, ValueError):
    """A strict sampler received an argument outside its domain."""
