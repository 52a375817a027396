# apps/cli/analyze.py
"""
CLI entry point for analyzing a root-word list.

This script:
  1) Validates the root-word list (prints counts + SHA, flags bad lines).
  2) Loads the roots and a vocabulary, and instantiates the requested dictionary.
  3) Finds every acceptable word for each root (tqdm progress bar) and writes:
       - CSV:  per-root results (word count, max score, longest word, words)
       - JSON: manifest with config, word-list hash, git commit, dead roots

Roots with few findable words make for frustrating rounds; the CSV is meant
for pruning start.txt.
"""

from __future__ import annotations

import argparse
import logging
import sys
from functools import partial
from pathlib import Path
from typing import Dict, List, Tuple

from tqdm import tqdm

from wordscramble.datasets import pretty_summary, read_words, validate_word_pool
from wordscramble.dictionaries import WordListDictionary, create_dictionary, get_dictionary_ids
from wordscramble.engine.rules import DEFAULT_LANGUAGE, MIN_WORD_LENGTH
from wordscramble.harness import run_batch, write_csv, write_manifest
from wordscramble.harness.io import git_commit_or_unknown, timestamp_id

logger = logging.getLogger(__name__)


def _parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="wordscramble: analyze root words")
    ap.add_argument("--roots", default="data/start.txt",
                    help="path to the root-word list")
    ap.add_argument("--vocab", required=True,
                    help="vocabulary to search for sub-words (one word per line)")
    ap.add_argument("--dictionary", default="wordfreq",
                    help=f"dictionary id (one of: {', '.join(get_dictionary_ids())}); "
                         "'wordlist' uses --vocab itself")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE)
    ap.add_argument("--min-length", type=int, default=MIN_WORD_LENGTH)
    ap.add_argument("--sample", type=int,
                    help="analyze only a subset of roots (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar (auto = only on a terminal)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap.parse_args(argv)


def _write_outputs(results: List[Dict], manifest: Dict, outdir: Path) -> Tuple[Path, Path]:
    """run_<id>.csv and run_<id>_manifest.json under outdir."""
    run_id = timestamp_id()
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"
    write_csv(results, str(csv_path))
    write_manifest({"run_id": run_id, "git_commit": git_commit_or_unknown(), **manifest},
                   str(manifest_path))
    return csv_path, manifest_path


def main(argv=None):
    """
    Parse CLI args, validate the root list, run the batch with progress, and write outputs.
    """
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="[%(levelname)s] %(name)s: %(message)s")

    rep = validate_word_pool(args.roots, min_length=args.min_length)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        logger.warning(issue)

    try:
        roots = read_words(args.roots)
        vocab = read_words(args.vocab, unique=True)
    except FileNotFoundError as e:
        raise SystemExit(f"error: word list not found: {e}")

    if args.dictionary == "wordlist":
        dictionary = WordListDictionary(vocab, language=args.language)
    else:
        dictionary = create_dictionary(args.dictionary)

    show_bar = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    results = run_batch(
        roots, vocab, dictionary,
        language=args.language,
        min_length=args.min_length,
        sample=args.sample,
        seed=args.seed,
        progress=partial(tqdm, ncols=80, desc="Analyzing", unit="root", disable=not show_bar),
    )

    csv_path, manifest_path = _write_outputs(results, {
        "config": vars(args),
        "word_pool": rep,
        "num_roots": len(results),
        "dictionary_id": dictionary.id,
        "dead_roots": [r["root"] for r in results if r["num_words"] == 0],
    }, Path(args.outdir))

    print(f"{len(results)} roots analyzed -> {csv_path}, {manifest_path}")


if __name__ == "__main__":
    main()
