"""
Word sources: where root words come from.

Every source exposes load_word_pool() -> list[str]. An empty list means
"nothing available"; the engine then falls back to its default root word
(or refuses to start in strict mode). Sources therefore report unavailability
by logging a warning and returning [], not by raising.

- StaticWordSource: an in-memory list (tests, embedding).
- FileWordSource:   one word per line in a UTF-8 text file (e.g. start.txt).
- HttpWordSource:   a plain-text list served over HTTP(S).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import requests

from .io import read_lines

logger = logging.getLogger(__name__)


def _clean(lines: Iterable[str]) -> List[str]:
    return [w.strip().lower() for w in lines if w.strip()]


class StaticWordSource:
    def __init__(self, words: Iterable[str]):
        self.words = list(words)

    def load_word_pool(self) -> List[str]:
        return _clean(self.words)

    def __repr__(self) -> str:
        return f"StaticWordSource({len(self.words)} words)"


class FileWordSource:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load_word_pool(self) -> List[str]:
        try:
            lines = read_lines(self.path)
        except FileNotFoundError:
            logger.warning("word list not found: %s", self.path)
            return []
        return _clean(lines)

    def __repr__(self) -> str:
        return f"FileWordSource({str(self.path)!r})"


class HttpWordSource:
    """
    Fetch a newline-separated word list with a GET request.

    Network errors and non-2xx responses are logged and yield an empty pool.
    """

    def __init__(self, url: str, timeout: float = 30):
        self.url = url
        self.timeout = timeout

    def load_word_pool(self) -> List[str]:
        try:
            r = requests.get(self.url, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            logger.warning("could not fetch word list from %s: %s", self.url, e)
            return []
        return _clean(r.text.splitlines())

    def __repr__(self) -> str:
        return f"HttpWordSource({self.url!r})"


def source_from_location(location: str):
    """http(s):// URLs become HttpWordSource; anything else is a file path."""
    if location.startswith(("http://", "https://")):
        return HttpWordSource(location)
    return FileWordSource(location)
