"""
Wordle-style feedback for a single (guess, secret) pair.

Conventions (one flag per letter):
  - CORRECT : letter at the exact position            ('G', green)
  - PRESENT : letter elsewhere in the secret           ('Y', yellow)
  - ABSENT  : letter missing, or already fully claimed ('-', gray)
  - UNKNOWN : nothing played at this position yet      ('_', empty cell)

Algorithm (two-pass, duplicate-safe):
  1) First pass marks all exact matches and counts the secret letters that
     were NOT matched.
  2) Second pass, left to right, marks a letter PRESENT only while that
     leftover count is positive, consuming one occurrence each time.

This caps CORRECT+PRESENT for any letter at its multiplicity in the secret:
    evaluate("WEEDS", "SPEED").pattern == "-YGYY"
"""

from __future__ import annotations

import enum
from collections import Counter
from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidInputError


class LetterFlag(enum.IntEnum):
    # Ordered by how much a flag tells about a letter; the alphabet summary
    # relies on max() picking the most informative one.
    UNKNOWN = 0
    ABSENT = 1
    PRESENT = 2
    CORRECT = 3

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def emoji(self) -> str:
        return _EMOJIS[self]


_SYMBOLS = {
    LetterFlag.UNKNOWN: "_",
    LetterFlag.ABSENT: "-",
    LetterFlag.PRESENT: "Y",
    LetterFlag.CORRECT: "G",
}

_EMOJIS = {
    LetterFlag.UNKNOWN: "⬜",
    LetterFlag.ABSENT: "⬛",
    LetterFlag.PRESENT: "🟨",
    LetterFlag.CORRECT: "🟩",
}


@dataclass(frozen=True)
class GuessResult:
    """A played word and its per-letter flags (parallel sequences)."""
    word: str
    flags: Tuple[LetterFlag, ...]

    def __post_init__(self):
        if len(self.word) != len(self.flags):
            raise InvalidInputError(
                f"'{self.word}' has {len(self.word)} letters but {len(self.flags)} flags")

    @classmethod
    def empty(cls, size: int) -> "GuessResult":
        """Blank row, handy for drawing the unplayed part of a board."""
        return cls(" " * size, (LetterFlag.UNKNOWN,) * size)

    @property
    def letters(self) -> Tuple[str, ...]:
        return tuple(self.word)

    @property
    def pattern(self) -> str:
        """Compact 'G'/'Y'/'-' string, e.g. '-YGYY'."""
        return "".join(f.symbol for f in self.flags)

    @property
    def is_win(self) -> bool:
        return bool(self.flags) and all(f is LetterFlag.CORRECT for f in self.flags)


def evaluate(guess: str, secret: str) -> GuessResult:
    """
    Compute the feedback for `guess` against `secret`.

    Both words are compared as given; normalizing them is the caller's job
    (see `sanitize`).

    Raises:
      InvalidInputError if the two words don't have the same length.

    Examples:
      evaluate("AAAAA", "BBBBB").pattern -> "-----"
      evaluate("WEEDS", "HELLO").pattern -> "-G---"
    """
    if len(guess) != len(secret):
        raise InvalidInputError(f"'{guess}' and '{secret}' should have the same size")

    n = len(guess)
    flags = [LetterFlag.ABSENT] * n

    # Pass 1: exact matches; every unmatched secret letter stays available.
    remaining: Counter[str] = Counter()
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            flags[i] = LetterFlag.CORRECT
        else:
            remaining[s] += 1

    # Pass 2: misplaced letters, earliest unclaimed position wins ties.
    for i, g in enumerate(guess):
        if flags[i] is LetterFlag.CORRECT:
            continue
        if remaining[g] > 0:
            flags[i] = LetterFlag.PRESENT
            remaining[g] -= 1

    return GuessResult(guess, tuple(flags))
