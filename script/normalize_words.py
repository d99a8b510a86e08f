"""
Clean up a dictionary file so a GameSession accepts it as-is.

- Normalizes every word (uppercase, accents removed, trimmed).
- Drops blanks, comments and words that aren't exactly N Latin letters.
- Removes duplicates, keeping first-seen order (optionally sorts).
- Overwrites the input by default, or writes to --out.

Usage:
    python -m script.normalize_words --in my_words.txt --size 5 --lower
"""

import argparse
from pathlib import Path
from typing import Iterable, List

from wordlekit.datasets import load_words, write_lines
from wordlekit.engine import is_wordle_word, sanitize


def normalize_words(words: Iterable[str], size: int) -> List[str]:
    cleaned = (sanitize(w) for w in words)
    return list(dict.fromkeys(w for w in cleaned if is_wordle_word(w, size)))


def main():
    ap = argparse.ArgumentParser(description="Normalize and de-duplicate a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--size", type=int, default=5, help="word length to keep")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically")
    ap.add_argument("--lower", action="store_true", help="write words in lowercase")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    words = load_words(inp)
    out = normalize_words(words, args.size)
    if args.sort:
        out.sort()
    if args.lower:
        out = [w.lower() for w in out]

    write_lines(out, outp)
    print(f"Input: {inp} ({len(words)} words) -> Output: {outp} ({len(out)} kept)")


if __name__ == "__main__":
    main()
