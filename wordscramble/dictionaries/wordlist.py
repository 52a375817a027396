"""
Word-list dictionary.

A word is real iff it appears in a fixed list for the dictionary's language.
Lookups are case-insensitive; lookups in any other language are False.

Typical use:
    d = WordListDictionary.from_file("words_en.txt")
    d.is_real_word("silk", "en")  -> True
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Set

from wordscramble.datasets.io import read_lines
from .base import BaseDictionary, register


@register
class WordListDictionary(BaseDictionary):
    id = "wordlist"
    name = "Word list"

    def __init__(self, words: Iterable[str] = (), language: str = "en"):
        self.language = language.lower()
        self.words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: Path | str, language: str = "en") -> "WordListDictionary":
        """Load one word per line (UTF-8). Raises FileNotFoundError if missing."""
        return cls(read_lines(path), language=language)

    def is_real_word(self, word: str, language: str) -> bool:
        if language.lower() != self.language:
            return False
        return word.strip().lower() in self.words

    def __len__(self) -> int:
        return len(self.words)
