from pathlib import Path

from .validator import validate_dictionary, pretty_summary
from .io import read_lines, write_lines, load_words

# Small bundled English list, enough for local games and simulations.
DEFAULT_WORDS_PATH = str(Path(__file__).parent / "data" / "words_5.txt")

__all__ = ["validate_dictionary", "pretty_summary", "read_lines", "write_lines",
           "load_words", "DEFAULT_WORDS_PATH"]
