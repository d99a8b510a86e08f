"""
Play records and aggregated statistics.

A PlayRecord is what a front end keeps once a game is over: the secret and
the words played. compute_stats() folds a chronological list of records into
the usual Wordle numbers (played, win %, streaks, guess distribution).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

from wordlekit.game import DEFAULT_MAX_ATTEMPTS, GameOutcome, Playing


@dataclass(frozen=True)
class PlayRecord:
    answer: str
    guesses: Tuple[str, ...]
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    @classmethod
    def from_outcome(cls, outcome: GameOutcome) -> "PlayRecord":
        """Build a record from a finished game (Won or Lost)."""
        if isinstance(outcome, Playing):
            raise ValueError("Can't record a game that is still being played")
        return cls(
            answer=outcome.selected_word,
            guesses=tuple(g.word for g in outcome.guesses),
            max_attempts=outcome.max_attempts,
        )

    @property
    def score(self) -> int:
        """Number of guesses needed to win; 0 means the game was lost."""
        if self.guesses and self.guesses[-1] == self.answer:
            return len(self.guesses)
        return 0


@dataclass(frozen=True)
class PlayStats:
    played_count: int
    victory_distribution: Tuple[int, ...]
    last_score: int  # 0 means lost game
    current_streak: int
    best_streak: int

    def __post_init__(self):
        if self.victory_count > self.played_count:
            raise ValueError("There are more victories than played games")
        if self.last_score > 0:
            if self.last_score > len(self.victory_distribution):
                raise ValueError("Invalid victory distribution")
            if self.victory_distribution[self.last_score - 1] <= 0:
                raise ValueError("Last score not in victory distribution")
        if self.best_streak < self.current_streak:
            raise ValueError("Best streak is lower than current one")
        if self.best_streak > self.victory_count:
            raise ValueError("Best streak exceeds victory count")

    @property
    def victory_count(self) -> int:
        return sum(self.victory_distribution)

    @property
    def victory_ratio(self) -> float:
        return self.victory_count / self.played_count if self.played_count > 0 else 0.0


def compute_stats(records: Iterable[PlayRecord], max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> PlayStats:
    """
    Aggregate records (oldest first).

    victory_distribution[i] counts the games won in i + 1 guesses.
    """
    scores = np.array([r.score for r in records], dtype=int)
    if np.any(scores > max_attempts):
        raise ValueError(f"Found a game won in more than {max_attempts} guesses")

    wins = scores[scores > 0]
    distribution = np.bincount(wins - 1, minlength=max_attempts)

    current_streak = 0
    best_streak = 0
    for s in scores:
        current_streak = current_streak + 1 if s > 0 else 0
        best_streak = max(best_streak, current_streak)

    return PlayStats(
        played_count=int(scores.size),
        victory_distribution=tuple(int(c) for c in distribution),
        last_score=int(scores[-1]) if scores.size else 0,
        current_streak=current_streak,
        best_streak=best_streak,
    )


def pretty_stats(stats: PlayStats) -> str:
    """
    One-liner for consoles, e.g.:
        played=10 | win%=80 | streak=3 (best=5) | dist=[0, 1, 4, 2, 1, 0]
    """
    return (
        f"played={stats.played_count} | win%={round(stats.victory_ratio * 100)} "
        f"| streak={stats.current_streak} (best={stats.best_streak}) "
        f"| dist={list(stats.victory_distribution)}"
    )
