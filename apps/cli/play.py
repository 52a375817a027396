# apps/cli/play.py
"""
Terminal front-end for wordscramble.

One round at a time: the root word is shown, each line typed is submitted
as a candidate. Accepted words are listed most recent first with their
letter count; rejected ones print the title/message pair for the reason.

Commands:
  :new   start a new round (the best score carries over)
  :quit  exit (EOF works too)

Usage:
    python -m apps.cli.play --words data/start.txt
    python -m apps.cli.play --words data/start.txt --dictionary wordlist --vocab words.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Iterable

from wordscramble.datasets import source_from_location
from wordscramble.dictionaries import WordListDictionary, create_dictionary, get_dictionary_ids
from wordscramble.engine import Accepted, Game, GameConfig, Rejected, WordPoolUnavailable
from wordscramble.engine.rules import DEFAULT_LANGUAGE, MIN_WORD_LENGTH

NEW_ROUND = ":new"
QUIT = ":quit"


def _show_round(game: Game, out: Callable[[str], None]) -> None:
    out(f"== {game.root_word} ==")


def _show_words(game: Game, out: Callable[[str], None]) -> None:
    for w in game.used_words:
        out(f"  ({len(w)}) {w}")
    out(f"Score: {game.score}  Best: {game.best_score}")


def play(game: Game, lines: Iterable[str], out: Callable[[str], None] = print) -> Game:
    """
    Drive a game from an iterable of input lines (stdin, or a list in tests).
    Starts the first round itself; returns the game when input runs out or
    :quit is read.
    """
    game.new_round()
    _show_round(game, out)

    for line in lines:
        cmd = line.strip().lower()
        if cmd == QUIT:
            break
        if cmd == NEW_ROUND:
            game.new_round()
            _show_round(game, out)
            continue

        result = game.submit(line)
        if result is None:
            continue  # blank line
        if isinstance(result, Rejected):
            title, message = result.text()
            out(f"{title}: {message}")
        elif isinstance(result, Accepted):
            _show_words(game, out)

    return game


def _build_dictionary(args):
    if args.dictionary == "wordlist":
        if not args.vocab:
            raise SystemExit("--dictionary wordlist requires --vocab FILE")
        try:
            return WordListDictionary.from_file(args.vocab, language=args.language)
        except FileNotFoundError as e:
            raise SystemExit(f"error: word list not found: {e}")
    return create_dictionary(args.dictionary)


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordscramble: spell words from a root word")
    ap.add_argument("--words", default="data/start.txt",
                    help="root-word list: file path or http(s) URL, one word per line")
    ap.add_argument("--dictionary", default="wordfreq",
                    help=f"dictionary id (one of: {', '.join(get_dictionary_ids())})")
    ap.add_argument("--vocab", help="word list backing --dictionary wordlist")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language code")
    ap.add_argument("--min-length", type=int, default=MIN_WORD_LENGTH,
                    help="shortest accepted word")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word draws")
    ap.add_argument("--strict", action="store_true",
                    help="exit instead of using the fallback root word when the list is empty")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="[%(levelname)s] %(name)s: %(message)s")

    config = GameConfig(language=args.language, min_length=args.min_length, strict=args.strict)
    game = Game(_build_dictionary(args), source_from_location(args.words),
                config=config, seed=args.seed)

    print(f"Type words made from the root word. {NEW_ROUND} for a new word, {QUIT} to exit.")
    try:
        game = play(game, sys.stdin)
    except WordPoolUnavailable as e:
        raise SystemExit(f"error: {e}")
    print(f"Rounds: {game.rounds_played}  Best: {game.best_score}")


if __name__ == "__main__":
    main()
