from .scoring import calculate_score, word_points
from .rules import (
    DEFAULT_LANGUAGE,
    MIN_WORD_LENGTH,
    is_long_enough,
    is_not_root,
    is_original,
    is_possible,
    is_real,
    normalize,
)
from .game import (
    DEFAULT_ROOT_WORD,
    Accepted,
    Game,
    GameConfig,
    GameState,
    Rejected,
    RejectionReason,
    WordPoolUnavailable,
    start_round,
    submit,
)

__all__ = [
    "calculate_score", "word_points",
    "normalize", "is_original", "is_possible", "is_real", "is_long_enough", "is_not_root",
    "MIN_WORD_LENGTH", "DEFAULT_LANGUAGE", "DEFAULT_ROOT_WORD",
    "GameState", "GameConfig", "Game", "Accepted", "Rejected", "RejectionReason",
    "WordPoolUnavailable", "start_round", "submit",
]
