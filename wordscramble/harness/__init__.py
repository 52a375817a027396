from .core import find_words, analyze_root, run_batch, sample_roots
from .io import write_csv, write_manifest

__all__ = ["find_words", "analyze_root", "run_batch", "sample_roots", "write_csv", "write_manifest"]
