"""
Dictionary validator.

What this module does:
- Check a word list file before handing it to a GameSession.
- Apply the same normalization as the game (see engine.sanitize) and flag
  lines that don't become exactly N Latin letters.
- Detect duplicates (after normalization) and compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordlekit.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("wordlekit/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from wordlekit.engine import is_wordle_word, sanitize
from .io import load_words


@dataclass
class DictionaryReport:
    path: str
    exists: bool
    word_size: int       # detected (first valid word) or requested length
    count: int           # number of VALID words after normalization
    unique_count: int    # valid words after dedupe
    invalid_lines: int
    sha256: str          # empty string if missing
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, word_size: Optional[int]) -> Tuple[List[str], int, int]:
    """
    Normalize every word and keep those matching ^[A-Z]{N}$.

    When `word_size` is None it is taken from the first word, the same way
    GameSession does.

    Returns:
      (valid_words, invalid_count, word_size)
    """
    words = [sanitize(w) for w in load_words(path)]
    if word_size is None:
        word_size = len(words[0]) if words else 0

    valid = [w for w in words if word_size > 0 and is_wordle_word(w, word_size)]
    return valid, len(words) - len(valid), word_size


def validate_dictionary(path: str, word_size: Optional[int] = None) -> Dict:
    """
    Validate a dictionary file.

    Strict pass criteria: file exists, at least one valid word, no invalid
    line. Duplicates are reported but don't fail the check since the game
    deduplicates on load.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(str(p), False, word_size or 0, 0, 0, 0, "", False,
                               [f"dictionary file not found: {path}"])
        return asdict(rep)

    valid, invalid, size = _load_and_check(p, word_size)
    issues: List[str] = []

    if not valid:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s) for N={size}")
    if len(valid) != len(set(valid)):
        issues.append("dictionary contains duplicate words")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        word_size=size,
        count=len(valid),
        unique_count=len(set(valid)),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(valid) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Example:
        N=5 | words=412 (uniq=412, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['word_size']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) | {status}"
    )
