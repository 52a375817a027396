from .validator import validate_word_pool, pretty_summary
from .io import read_lines, read_words, write_lines
from .sources import StaticWordSource, FileWordSource, HttpWordSource, source_from_location

__all__ = [
    "validate_word_pool", "pretty_summary",
    "read_lines", "read_words", "write_lines",
    "StaticWordSource", "FileWordSource", "HttpWordSource", "source_from_location",
]
