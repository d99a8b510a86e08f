"""
Word normalization shared by dictionary entries, secrets and guesses.

sanitize("  Animé ") -> "ANIME"
"""

import unicodedata


def sanitize(raw: str) -> str:
    """
    Uppercase, drop diacritical marks and trim surrounding whitespace.

    Uppercasing runs before the NFD decomposition because a few characters
    only grow a combining mark once uppercased; doing it first keeps the
    function idempotent.
    """
    decomposed = unicodedata.normalize("NFD", raw.upper())
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn").strip()
