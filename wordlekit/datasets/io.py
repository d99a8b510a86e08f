from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Lines of a UTF-8 text file, without line endings.
    FileNotFoundError if `p` doesn't exist.
    """
    with Path(p).open(encoding="utf-8") as f:
        return [ln.rstrip("\r\n") for ln in f]


def load_words(p: Path | str) -> List[str]:
    """
    Word list reader: one word per line, blank lines and '#' comments skipped.
    Words come back as written (only trimmed); GameSession normalizes them.
    """
    words = (ln.strip() for ln in read_lines(p))
    return [w for w in words if w and not w.startswith("#")]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one item per line (UTF-8, trailing newline), creating parent dirs.
    Returns the path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(f"{ln}\n" for ln in lines), encoding="utf-8")
    return str(p)
