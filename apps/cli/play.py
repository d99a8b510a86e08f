# apps/cli/play.py
"""
Interactive text Wordle on top of GameSession.

    python -m apps.cli.play
    python -m apps.cli.play --words my_words.txt --max-attempts 8 --seed 42

Each turn prints the board (letter + colored square per cell), the letters
ruled in/out so far, or why an input was rejected.
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, Optional

from wordlekit.datasets import DEFAULT_WORDS_PATH, load_words
from wordlekit.engine import ConfigurationError, GuessResult, InputStatus, LetterFlag
from wordlekit.game import DEFAULT_MAX_ATTEMPTS, GameOutcome, GameSession, Lost, Playing, Won, letter_summary
from wordlekit.logs import setup_logging

BANNER = """\
.---------------.
| Hello Wordle! |
'---------------'"""


def _format_row(result: GuessResult) -> str:
    return "".join(f"{ch}{flag.emoji}" for ch, flag in zip(result.word, result.flags))


def format_board(outcome: GameOutcome, word_size: int) -> str:
    """Full board, with a header/footer once the game is decided."""
    lines = []
    if isinstance(outcome, Won):
        lines.append(f"Wordle {outcome.wordle_id} {len(outcome.guesses)}/{outcome.max_attempts}")
    elif isinstance(outcome, Lost):
        lines.append(f"Wordle {outcome.wordle_id} X/{outcome.max_attempts}")

    lines += [_format_row(g) for g in outcome.guesses]
    empty = GuessResult.empty(word_size)
    lines += [_format_row(empty)] * (outcome.max_attempts - len(outcome.guesses))

    if isinstance(outcome, Won):
        lines.append(f"Congrats! You found the correct answer 🎉: {outcome.selected_word}")
    elif isinstance(outcome, Lost):
        lines.append(f"Doh! You didn't find the answer 🤭: {outcome.selected_word}")
    elif outcome.guesses:
        lines.append(f"Keep going… {len(outcome.guesses)}/{outcome.max_attempts}")
    return "\n".join(lines)


def format_alphabet(outcome: GameOutcome) -> str:
    """Letters known so far; absent ones are hidden, unknown ones shown plain."""
    cells = []
    for letter, flag in letter_summary(outcome.guesses).items():
        if flag is LetterFlag.ABSENT:
            cells.append(" ")
        elif flag is LetterFlag.UNKNOWN:
            cells.append(letter)
        else:
            cells.append(f"{letter}{flag.emoji}")
    return " ".join(cells)


def play_game(
        session: GameSession,
        read: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
) -> GameOutcome:
    """Run one game until it is decided. EOFError from `read` propagates."""
    read = read or input
    write = write or print
    write(BANNER)
    write(format_board(session.state, session.word_size))
    while isinstance(session.state, Playing):
        word = read(f" ➡️ Enter a {session.word_size} letter word: ")
        status = session.check_word(word)
        if status is InputStatus.VALID:
            session.submit_guess(word)
        else:
            write(f" ❌ '{word}' is invalid: {status.cause}")
        write(format_board(session.state, session.word_size))
        if isinstance(session.state, Playing):
            write(format_alphabet(session.state))
    return session.state


def main(argv: Optional[list] = None) -> int:
    ap = argparse.ArgumentParser(description="wordlekit: play Wordle in the terminal")
    ap.add_argument("--words", default=DEFAULT_WORDS_PATH, help="dictionary file (one word per line)")
    ap.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS,
                    help="number of guesses per game")
    ap.add_argument("--secret", help="force the word to find (testing/demo)")
    ap.add_argument("--seed", type=int, help="RNG seed for the secret word pick")
    ap.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING, ...")
    args = ap.parse_args(argv)

    setup_logging(args.log_level)
    rng = random.Random(args.seed)

    try:
        words = load_words(args.words)
        playing = True
        while playing:
            session = GameSession(words, args.secret, args.max_attempts, rng=rng)
            play_game(session)
            playing = input(" 🔄 Play again? (y/N) ").strip().lower() == "y"
    except (ConfigurationError, FileNotFoundError) as e:
        print(f"Can't start a game: {e}", file=sys.stderr)
        return 2
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
