"""
Candidate word rules.

This module answers the question: "May this word be added to the round?"
A candidate is acceptable iff, in this order:
  1) it has not been accepted already in the round      (is_original)
  2) it can be spelled from the root word's letters     (is_possible)
  3) the dictionary recognizes it in the given language (is_real)
  4) it is at least MIN_WORD_LENGTH letters long        (is_long_enough)
  5) it is not the root word itself                     (is_not_root)

The order matters: the first failing rule decides which rejection the
player sees, so callers must evaluate them in the sequence above.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

# Single source of truth for rule defaults.
MIN_WORD_LENGTH = 3
DEFAULT_LANGUAGE = "en"


def normalize(candidate: str) -> str:
    """Strip surrounding whitespace and lowercase; answers are stored this way."""
    return candidate.strip().lower()


def is_original(word: str, used_words: Iterable[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """
    True if every letter of `word` can be taken from `root_word`, each
    occurrence in the root being usable only once.

    Examples:
      is_possible("silk", "silkworm")  -> True
      is_possible("sills", "silkworm") -> False   (only one 'l' and one 's')
    """
    # Subtracting counters keeps only letters requested more often than
    # the root supplies them; an empty remainder means the word fits.
    return not (Counter(word) - Counter(root_word))


def is_real(word: str, dictionary, language: str = DEFAULT_LANGUAGE) -> bool:
    return bool(dictionary.is_real_word(word, language))


def is_long_enough(word: str, min_length: int = MIN_WORD_LENGTH) -> bool:
    return len(word) >= min_length


def is_not_root(word: str, root_word: str) -> bool:
    return word != root_word
