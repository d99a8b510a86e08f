"""
Game outcomes: Playing, Won and Lost.

Each outcome is an immutable snapshot. A session replaces its outcome with a
brand-new one on every accepted guess, so a snapshot kept by a caller never
changes under its feet. Only the terminal outcomes know the secret word and
its puzzle number (`wordle_id`, its index in the session dictionary).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from wordlekit.engine import GuessResult


@dataclass(frozen=True)
class Playing:
    guesses: Tuple[GuessResult, ...]
    max_attempts: int

    finished = False

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - len(self.guesses)


@dataclass(frozen=True)
class Won:
    guesses: Tuple[GuessResult, ...]
    max_attempts: int
    wordle_id: int
    selected_word: str

    finished = True


@dataclass(frozen=True)
class Lost:
    guesses: Tuple[GuessResult, ...]
    max_attempts: int
    wordle_id: int
    selected_word: str

    finished = True


GameOutcome = Union[Playing, Won, Lost]
