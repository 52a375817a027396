"""
Round scoring.

Conventions:
  - every accepted word is worth one point per letter
  - a round's score is the sum over all accepted words

The engine keeps a running total on the game state and adds each new word's
points as it is accepted; calculate_score() re-sums the whole history and is
the reference the running total must always agree with.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Union

if TYPE_CHECKING:
    from .game import GameState


def word_points(word: str) -> int:
    """Points awarded for a single accepted word."""
    return len(word)


def calculate_score(words_or_state: Union[Iterable[str], "GameState"]) -> int:
    """
    Sum of letter counts across accepted words.

    Accepts either a GameState (anything with a `used_words` attribute) or a
    plain iterable of words.

    Examples:
      calculate_score(["silk", "worm"]) -> 8
      calculate_score([])               -> 0
    """
    words = getattr(words_or_state, "used_words", words_or_state)
    return sum(word_points(w) for w in words)
