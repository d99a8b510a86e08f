"""
Self-play harness.

- run_case:  play one game (one secret) with a solver, through a real GameSession.
- run_batch: play many games in sequence (optionally a sample prefix).

The session owns the rules; the harness only feeds it the solver's guesses
and keeps a consistent candidate set for the solver. Nothing here is tied to
a UI, so a CLI or a notebook can reuse it unchanged.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Iterable, List, Optional

from wordlekit.engine import InputStatus, filter_candidates, sanitize
from wordlekit.game import DEFAULT_MAX_ATTEMPTS, GameSession, Playing, Won
from wordlekit.stats import PlayRecord

logger = logging.getLogger(__name__)


def run_case(
        solver,
        answer: str,
        *,
        words: Iterable[str],
        answers: Optional[Iterable[str]] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the session reaches Won or Lost.

    Args:
        solver:       an object implementing BaseSolver
        answer:       the secret word for this case
        words:        dictionary (every word accepted as a guess)
        answers:      candidate universe for the solver; defaults to `words`
        max_attempts: turn budget handed to the session
        seed:         RNG seed to make solver tie-breaks reproducible

    Returns:
        dict with keys:
            answer, success (bool), guesses (int), time_ms (float),
            history (list[GuessResult]), record (PlayRecord)

    Raises:
        ValueError if the solver proposes a guess the session rejects.
    """
    session = GameSession(words, answer, max_attempts)
    pool = list(session.words) if answers is None else [sanitize(w) for w in answers]
    candidates = [w for w in pool if len(w) == session.word_size]

    solver.reset(words=list(session.words), answers=candidates, word_size=session.word_size, seed=seed)

    t0 = time.perf_counter()
    while isinstance(session.state, Playing):
        state = {
            "turn": len(session.state.guesses) + 1,
            "history": list(session.state.guesses),
            "candidates": candidates,
            "words": list(session.words),
            "word_size": session.word_size,
            "rng": solver.rng,
        }
        guess = solver.next_guess(state)
        status = session.submit_guess(guess)
        if status is not InputStatus.VALID:
            raise ValueError(f"solver '{solver.id}' proposed '{guess}': {status.cause}")

        candidates = filter_candidates(candidates, session.state.guesses[-1:])
    dt = (time.perf_counter() - t0) * 1000.0

    outcome = session.state
    result = {
        "answer": outcome.selected_word,
        "success": isinstance(outcome, Won),
        "guesses": len(outcome.guesses),
        "time_ms": dt,
        "history": list(outcome.guesses),
        "record": PlayRecord.from_outcome(outcome),
    }
    logger.debug("case %s: success=%s in %d", result["answer"], result["success"], result["guesses"])
    return result


def run_batch(
        solver,
        cases: List[str],
        *,
        words: List[str],
        answers: Optional[List[str]] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        seed: int | None = None,
        sample: int | None = None,
        progress: Callable[[Iterable], Iterable] | None = None,
) -> List[Dict]:
    """
    Play every secret in `cases` back-to-back. If `sample` is given only the
    first K cases are played. Solvers start from the `answers` universe (the
    whole dictionary when omitted), never from `cases`. `progress` may wrap
    the case iterator (e.g. tqdm).

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    pool = list(cases)
    if sample is not None:
        pool = pool[:sample]

    iterator = progress(pool) if progress is not None else pool
    out: List[Dict] = []
    for idx, ans in enumerate(iterator, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, ans, words=words, answers=answers,
                     max_attempts=max_attempts, seed=case_seed)
        r["solver_id"] = solver.id
        out.append(r)
    return out
