"""
Frequency-backed dictionary (wordfreq).

Strategy:
  - Ask wordfreq how common the word is in the requested language, on the
    Zipf scale (roughly 0 = never seen, 3 = once per million words, 7+ for
    words like "the").
  - Treat the word as real when its Zipf frequency reaches `min_zipf`.

Notes:
  - Works for every language wordfreq ships data for.
  - The default threshold keeps ordinary vocabulary ("silk", "worm") and
    drops most typos and keyboard mashing.
"""

from __future__ import annotations

from wordfreq import zipf_frequency

from .base import BaseDictionary, register

DEFAULT_MIN_ZIPF = 1.5


@register
class FrequencyDictionary(BaseDictionary):
    id = "wordfreq"
    name = "wordfreq Zipf threshold"

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF):
        self.min_zipf = float(min_zipf)

    def frequency(self, word: str, language: str) -> float:
        return zipf_frequency(word.strip().lower(), language)

    def is_real_word(self, word: str, language: str) -> bool:
        # Multi-token strings ("ice cream") are never single words.
        w = word.strip().lower()
        if not w.isalpha():
            return False
        return self.frequency(w, language) >= self.min_zipf
