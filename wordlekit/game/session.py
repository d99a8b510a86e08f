"""
Game session: dictionary + secret word + turn bookkeeping.

State machine:
  Playing --valid guess, not the secret, attempts left--> Playing
  Playing --guess == secret--------------------------------> Won   (terminal)
  Playing --valid guess, last attempt used-----------------> Lost  (terminal)

A session built with max_attempts == 0 starts directly in Lost.

Construction problems (empty dictionary, mixed lengths, non A-Z words, secret
missing from the dictionary) raise ConfigurationError. Everything a player can
do afterwards is answered with an InputStatus and never raises.

The session does no locking; callers sharing one across threads must
serialize access themselves.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Tuple

from wordlekit.engine import (
    ConfigurationError, InputStatus, check_word, evaluate, is_wordle_word, sanitize,
)
from .outcome import GameOutcome, Lost, Playing, Won

logger = logging.getLogger(__name__)

# Classic Wordle turn budget.
DEFAULT_MAX_ATTEMPTS = 6


def _unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


class GameSession:
    """
    One game. Start a new game by building a new session.

    Args:
      words        : dictionary of acceptable guesses (normalized + deduplicated here)
      secret       : word to find; picked uniformly from `words` when omitted
      max_attempts : number of guesses allowed (default 6)
      rng          : random.Random used for the default secret pick
    """

    def __init__(
            self,
            words: Iterable[str],
            secret: Optional[str] = None,
            max_attempts: int = DEFAULT_MAX_ATTEMPTS,
            *,
            rng: Optional[random.Random] = None,
    ):
        self._words: Tuple[str, ...] = tuple(_unique_preserve_order(sanitize(w) for w in words))
        if not self._words:
            raise ConfigurationError("At least one word is required")

        self._word_size = len(self._words[0])
        if self._word_size <= 0:
            raise ConfigurationError("Words shouldn't be empty")

        invalid = [w for w in self._words if not is_wordle_word(w, self._word_size)]
        if invalid:
            raise ConfigurationError(
                f"All words should be compound of {self._word_size} latin letters "
                f"(e.g., {invalid[:5]})")

        if not isinstance(max_attempts, int) or isinstance(max_attempts, bool):
            raise ConfigurationError(f"max_attempts must be an int; got {max_attempts!r}")
        if max_attempts < 0:
            raise ConfigurationError(f"max_attempts can't be negative; got {max_attempts}")

        if secret is None:
            secret = (rng or random).choice(self._words)
        self._secret = sanitize(secret)
        self._dictionary = frozenset(self._words)
        if self._secret not in self._dictionary:
            raise ConfigurationError(f"Selected word ({self._secret}) isn't part of available words")

        self._wordle_id = self._words.index(self._secret)
        self._max_attempts = max_attempts
        self._state: GameOutcome
        if self._max_attempts > 0:
            self._state = Playing((), self._max_attempts)
        else:
            self._state = self._finish(Lost, ())

        logger.debug("new session: %d words of %d letters, %d attempts",
                     len(self._words), self._word_size, self._max_attempts)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def word_size(self) -> int:
        return self._word_size

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def state(self) -> GameOutcome:
        return self._state

    @property
    def wordle_id(self) -> int:
        """Position of the secret in `words`; front ends show it as a puzzle number."""
        return self._wordle_id

    def _finish(self, outcome, guesses):
        return outcome(guesses, self._max_attempts, wordle_id=self._wordle_id,
                       selected_word=self._secret)

    def check_word(self, word: str) -> InputStatus:
        """Length/dictionary status of `word`. Never mutates the session."""
        return check_word(word, self._dictionary, self._word_size)

    def submit_guess(self, word: str) -> InputStatus:
        """
        Play `word`. Returns VALID when the guess was recorded; any other
        status leaves the session untouched.
        """
        state = self._state
        if not isinstance(state, Playing):
            return InputStatus.NOT_PLAYING

        guess = sanitize(word)
        status = self.check_word(guess)
        if status is not InputStatus.VALID:
            logger.debug("rejected '%s': %s", guess, status.cause)
            return status

        guesses = state.guesses + (evaluate(guess, self._secret),)
        if guess == self._secret:
            self._state = self._finish(Won, guesses)
            logger.info("won in %d/%d", len(guesses), self._max_attempts)
        elif len(guesses) == self._max_attempts:
            self._state = self._finish(Lost, guesses)
            logger.info("lost after %d attempts", len(guesses))
        else:
            self._state = Playing(guesses, self._max_attempts)
            logger.debug("turn %d/%d: %s", len(guesses), self._max_attempts, guesses[-1].pattern)

        return InputStatus.VALID
