"""
Scrape past Wordle answers from wordlehints.co.uk and write a dictionary file.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Normalizes the answers the same way the game does, de-duplicates while
  keeping calendar order, and writes one word per line.

Usage:
    python -m script.fetch_words --out wordlekit/datasets/data/answers_5.txt
    python -m script.fetch_words --sort --out wordlekit/datasets/data/answers_5.txt
"""

import re
import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from wordlekit.engine import sanitize

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def parse_answers(html: str) -> list[str]:
    """Extract answers from the page HTML, normalized and de-duplicated."""
    text = BeautifulSoup(html, "html.parser").get_text("\n", strip=True)
    answers = [sanitize(m.group(2)) for m in ROW_RE.finditer(text)]
    return list(dict.fromkeys(answers))


def fetch_answers(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return parse_answers(r.text)


def main():
    ap = argparse.ArgumentParser(description="Download past Wordle answers as a dictionary")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="wordlekit/datasets/data/answers_5.txt")
    ap.add_argument("--sort", action="store_true",
                    help="sort alphabetically instead of keeping calendar order")
    args = ap.parse_args()

    answers = fetch_answers(args.url)
    if args.sort:
        answers = sorted(answers)

    Path(args.out).write_text("\n".join(answers) + "\n", encoding="utf-8")
    print(f"Wrote {len(answers)} unique answers -> {args.out}")


if __name__ == "__main__":
    main()
