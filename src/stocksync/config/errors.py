"""Errors for settings the replica cannot run without."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """An environment value, command-line option or input path is unusable.

    The CLI maps it to a usage exit code, e.g. for a missing sync file.
    """


class MissingConfigurationError(ConfigurationError):
    """A required environment variable such as ``STOCKSYNC_STORE_ID`` is set but blank."""
