"""
Keyboard/alphabet summary: the best flag seen so far for every letter A-Z.

Once a letter is known CORRECT somewhere it stays CORRECT, even if a later
guess places it wrongly.
"""

import string
from typing import Dict, Iterable

from wordlekit.engine import GuessResult, LetterFlag


def letter_summary(guesses: Iterable[GuessResult]) -> Dict[str, LetterFlag]:
    summary = {c: LetterFlag.UNKNOWN for c in string.ascii_uppercase}
    for result in guesses:
        for letter, flag in zip(result.word, result.flags):
            if letter in summary:
                summary[letter] = max(summary[letter], flag)
    return summary
