"""
Root-word analysis primitives.

- find_words:   every vocabulary word a fresh round on `root` would accept.
- analyze_root: summary for one root word (count, max score, longest word).
- sample_roots: seeded sample of a root list.
- run_batch:    analyze many root words in sequence (optionally a seeded sample).

Words are pushed through the same submit() the game uses, so the analysis
can never disagree with what a player would be allowed to enter. Rule order
also keeps the dictionary out of the loop for words the root cannot spell.
"""

from __future__ import annotations

import random
import time
from typing import Callable, Dict, Iterable, List

from wordscramble.engine import GameState, submit
from wordscramble.engine.rules import DEFAULT_LANGUAGE, MIN_WORD_LENGTH


def find_words(
        root: str,
        vocabulary: Iterable[str],
        dictionary,
        *,
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
) -> List[str]:
    """
    Return the accepted words for `root`, longest first, then alphabetical.

    Args:
        root:       the root word (normalized like player input)
        vocabulary: candidate words to try (e.g. a large word list)
        dictionary: object exposing is_real_word(word, language)
        language:   language code for the dictionary
        min_length: shortest acceptable word
    """
    state = GameState(root_word=root.strip().lower())
    for w in vocabulary:
        submit(state, w, dictionary, language=language, min_length=min_length)
    return sorted(state.used_words, key=lambda w: (-len(w), w))


def analyze_root(
        root: str,
        vocabulary: Iterable[str],
        dictionary,
        *,
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
) -> Dict:
    """
    Returns:
        dict with keys:
            root (str), num_words (int), max_score (int),
            longest (str, "" if none), words (list[str]), time_ms (float)
    """
    t0 = time.perf_counter_ns()
    words = find_words(root, vocabulary, dictionary, language=language, min_length=min_length)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0
    return {
        "root": root.strip().lower(),
        "num_words": len(words),
        "max_score": sum(len(w) for w in words),
        "longest": words[0] if words else "",
        "words": words,
        "time_ms": dt,
    }



def sample_roots(roots: List[str], sample: int | None, seed: int | None = None) -> List[str]:
    """
    Deterministic sample without replacement: shuffle a copy with `seed` and
    keep the first `sample` roots. No sample (or one covering the whole list)
    keeps every root in its original order.
    """
    if not sample or sample >= len(roots):
        return list(roots)
    pool = list(roots)
    random.Random(seed).shuffle(pool)
    return pool[:sample]


def run_batch(
        roots: List[str],
        vocabulary: Iterable[str],
        dictionary,
        *,
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
        sample: int | None = None,
        seed: int | None = None,
        progress: Callable[[List[str]], Iterable[str]] | None = None,
) -> List[Dict]:
    """
    Analyze many root words back-to-back.

    Args:
        sample:   analyze only K roots, picked by sample_roots() with `seed`
        progress: optional wrapper around the root list (e.g. a tqdm partial)
    """
    # Vocabulary may be a one-shot iterator; every root needs the full list.
    vocab = list(vocabulary)
    cases = sample_roots(roots, sample, seed)
    iterator = progress(cases) if progress else cases
    return [
        analyze_root(r, vocab, dictionary, language=language, min_length=min_length)
        for r in iterator
    ]
