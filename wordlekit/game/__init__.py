from .outcome import GameOutcome, Playing, Won, Lost
from .session import GameSession, DEFAULT_MAX_ATTEMPTS
from .alphabet import letter_summary

__all__ = [
    "GameOutcome", "Playing", "Won", "Lost",
    "GameSession", "DEFAULT_MAX_ATTEMPTS",
    "letter_summary",
]
