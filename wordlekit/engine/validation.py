"""
Guess validation.

This module answers the question: "Could this input be played right now?"
without touching any game state, so a UI can give live feedback
("too short", "not in dictionary") while the player is still typing.

Length checks take priority over dictionary membership.
"""

import enum
import re
from typing import Collection

from .sanitize import sanitize


class InputStatus(enum.Enum):
    VALID = "valid"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    NOT_IN_DICTIONARY = "not_in_dictionary"
    NOT_PLAYING = "not_playing"

    @property
    def cause(self) -> str:
        """Short message to show next to a rejected input."""
        if self is InputStatus.VALID:
            return ""
        return self.value.replace("_", " ")


def is_wordle_word(word: str, word_size: int) -> bool:
    """True iff `word` is exactly `word_size` Latin letters A-Z."""
    return re.fullmatch(f"[A-Z]{{{word_size}}}", word) is not None


def check_word(word: str, dictionary: Collection[str], word_size: int) -> InputStatus:
    """
    Classify `word` against an already-sanitized `dictionary`.

    Args:
      word       : raw player input (sanitized here)
      dictionary : normalized words; pass a set for O(1) lookups
      word_size  : required length
    """
    w = sanitize(word)
    if len(w) < word_size:
        return InputStatus.TOO_SHORT
    if len(w) > word_size:
        return InputStatus.TOO_LONG
    if w not in dictionary:
        return InputStatus.NOT_IN_DICTIONARY
    return InputStatus.VALID
