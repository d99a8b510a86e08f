"""
Letter-coverage solver.

Each letter is weighted by how many remaining candidates contain it (a
candidate with two E's counts once), and a word scores the summed weight of
its distinct letters. While more than WIDE_POOL_THRESHOLD candidates remain, any
dictionary word may be played to cover letters; after that only candidates are.
Ties go through the seeded RNG.
"""

from __future__ import annotations
from collections import Counter
from typing import Dict, List
from .base import BaseSolver, register


@register
class LetterFreqSolver(BaseSolver):
    id = "letter_freq"
    name = "Letter Coverage"
    version = "2.0.0"

    WIDE_POOL_THRESHOLD = 200

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        words: List[str] = state["words"]

        pool = candidates if 0 < len(candidates) <= self.WIDE_POOL_THRESHOLD else words
        weights = Counter(ch for w in (candidates or words) for ch in set(w))

        scores: Dict[str, int] = {w: sum(weights[ch] for ch in set(w)) for w in pool}
        best = max(scores.values())
        return self.pick([w for w, s in scores.items() if s == best])
