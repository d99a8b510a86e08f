"""
Random Consistent solver.

Picks uniformly at random among the words still consistent with every
feedback seen so far, falling back to the whole dictionary if that set is
somehow empty. Deterministic for a given seed. Baseline player for
simulations; it makes no attempt at maximizing information.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        pool: List[str] = candidates if candidates else state["words"]
        return self.pick(pool)
