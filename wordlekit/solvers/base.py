"""
Automated players for self-play.

A solver only ever sees a state dict built by the harness:
    turn, history (GuessResults so far), candidates (words still possible),
    words (full dictionary), word_size, rng
and answers with the word it wants to play next.
"""

from __future__ import annotations
import random
from typing import Dict, List, Sequence, Type

REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """Class decorator: make a solver available to create_solver() under its `id`."""
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if REGISTRY.get(sid, cls) is not cls:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.word_size = 5
        self.words: List[str] = []
        self.answers: List[str] = []
        self.rng = random.Random()

    def reset(self, *, words: Sequence[str], answers: Sequence[str], word_size: int,
              seed: int | None = None) -> None:
        """Called once per game, before the first next_guess()."""
        self.words = list(words)
        self.answers = list(answers)
        self.word_size = int(word_size)
        if seed is not None:
            self.rng.seed(seed)

    def pick(self, pool: Sequence[str]) -> str:
        """Seeded uniform choice, so a run is reproducible for a given seed."""
        return pool[self.rng.randrange(len(pool))]

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
