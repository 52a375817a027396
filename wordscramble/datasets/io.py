from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    A leading byte-order mark is dropped. Raises FileNotFoundError if the
    path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8-sig").splitlines()]


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def read_words(p: Path | str, *, unique: bool = False) -> List[str]:
    """
    Read a newline-separated word list, normalize to lowercase, drop blanks.
    With unique=True repeated words are kept once, in first-seen order.
    """
    words = [w.strip().lower() for w in read_lines(p) if w.strip()]
    return unique_preserve_order(words) if unique else words


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
