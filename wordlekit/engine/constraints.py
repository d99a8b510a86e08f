"""
Candidate filtering given game history.

Given a pool of words and the guesses played so far, keep the words that are
still possible secrets, i.e. that would have produced exactly the same
feedback for every past guess. Automated players use this to shrink their
search space turn after turn.
"""

from typing import Iterable, List

from .scoring import GuessResult, evaluate


def filter_candidates(words: Iterable[str], history: Iterable[GuessResult]) -> List[str]:
    """
    Keep only words consistent with ALL results in `history`.

    Words of another length than a played guess are dropped rather than
    raising, so a mixed pool can be filtered safely. Order is preserved.
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        consistent = True
        for result in history:
            if len(w) != len(result.word) or evaluate(result.word, w).flags != result.flags:
                consistent = False
                break
        if consistent:
            out.append(w)

    return out
