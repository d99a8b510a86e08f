"""
Report files for simulation runs.

- write_results_csv: one row per game, built from its PlayRecord and the
  GuessResults played.
- write_manifest:    JSON description of a run, with the aggregated PlayStats.

Feedback is written as emoji squares (🟩🟨⬛), one block per guess.
"""

from __future__ import annotations

import csv
import json
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Iterable, List

from wordlekit.engine import GuessResult
from wordlekit.stats import PlayStats

CSV_FIELDS = ["solver", "answer", "score", "max_attempts", "time_ms", "guesses", "feedback"]


def _squares(result: GuessResult) -> str:
    return "".join(f.emoji for f in result.flags)


def _result_row(result: Dict) -> Dict:
    record = result["record"]
    history: List[GuessResult] = result["history"]
    return {
        "solver": result.get("solver_id", ""),
        "answer": record.answer,
        "score": record.score,  # 0 = lost
        "max_attempts": record.max_attempts,
        "time_ms": f"{result['time_ms']:.3f}",
        "guesses": " ".join(g.word for g in history),
        "feedback": " ".join(_squares(g) for g in history),
    }


def write_results_csv(results: Iterable[Dict], path: str) -> str:
    """Write run_case() results to `path` (parent dirs created). Returns the path."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        writer.writerows(_result_row(r) for r in results)
    return str(p)


def write_manifest(path: str, *, stats: PlayStats, **meta) -> str:
    """
    Dump `meta` (run id, config, dictionary report, ...) plus every PlayStats
    field and its derived victory count/ratio as JSON.
    """
    payload = dict(meta)
    payload["stats"] = {
        **asdict(stats),
        "victory_count": stats.victory_count,
        "victory_ratio": stats.victory_ratio,
    }
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return str(p)
