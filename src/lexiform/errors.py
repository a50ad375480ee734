"""Exceptions raised by lexiform.

Derivations never raise; only reading settings and external files can fail.
"""


class LexiformError(Exception):
    """Base class for lexiform errors."""


class KnownVerbsError(LexiformError, ValueError):
    """A known-verbs file could not be read or validated."""


class ConfigError(LexiformError, ValueError):
    """A LEXIFORM_* environment setting is invalid."""
