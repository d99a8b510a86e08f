"""
Exceptions raised by the rules engine.

Only programming/configuration mistakes are exceptions. Anything a player can
trigger at runtime (too short, unknown word, game over) is reported as an
`InputStatus` value instead.
"""


class WordleError(Exception):
    """Base class for wordlekit errors."""


class ConfigurationError(WordleError, ValueError):
    """A game session can't be built from the given dictionary/secret."""


class InvalidInputError(WordleError, ValueError):
    """A caller passed arguments that break a precondition (e.g. length mismatch)."""
