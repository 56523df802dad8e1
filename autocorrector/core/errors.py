# autocorrector/core/errors.py
# Exceptions raised while building an Autocorrector. Queries never raise.

from __future__ import annotations


class AutocorrectError(Exception):
    """Base class for all errors raised by the autocorrector package."""


class CorpusError(AutocorrectError):
    """A corpus file could not be read or decoded. Partial state is discarded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"unable to read corpus file {path!r}: {reason}")
        self.path = path
        self.reason = reason


class ConfigError(AutocorrectError, ValueError):
    """Invalid engine or shell configuration (e.g. a negative edit distance)."""
