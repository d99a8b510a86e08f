from .errors import WordleError, ConfigurationError, InvalidInputError
from .sanitize import sanitize
from .scoring import LetterFlag, GuessResult, evaluate
from .validation import InputStatus, check_word, is_wordle_word
from .constraints import filter_candidates

__all__ = [
    "WordleError", "ConfigurationError", "InvalidInputError",
    "sanitize",
    "LetterFlag", "GuessResult", "evaluate",
    "InputStatus", "check_word", "is_wordle_word",
    "filter_candidates",
]
