"""
Round state and the accept/reject decision.

- GameState:   root word, accepted words (most recent first), running score.
- start_round: draw a root word from a word source and open a fresh state.
- submit:      normalize a candidate, run the rule chain, record or reject.
- Game:        a play session that owns the current round and the best score.

Rejections are ordinary return values (Rejected), never exceptions, so a
front-end can render a distinct title/message pair for each reason. Nothing
here touches the terminal or the filesystem; words come in through the
injected dictionary and word source.

A GameState has a single writer: hosts that accept input concurrently must
serialize submit() calls per state.
"""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .rules import (
    DEFAULT_LANGUAGE,
    MIN_WORD_LENGTH,
    is_long_enough,
    is_not_root,
    is_original,
    is_possible,
    is_real,
    normalize,
)
from .scoring import calculate_score, word_points

logger = logging.getLogger(__name__)

# Root word used when the word source has nothing to offer.
DEFAULT_ROOT_WORD = "silkworm"


class WordPoolUnavailable(RuntimeError):
    """Raised by start_round(strict=True) when the word source is empty."""


class RejectionReason(enum.Enum):
    ALREADY_USED = "already_used"
    NOT_POSSIBLE = "not_possible"
    NOT_REAL = "not_real"
    TOO_SHORT = "too_short"
    SAME_AS_ROOT = "same_as_root"


# (title, message) shown to the player; {root} is filled with the root word.
REJECTION_TEXT = {
    RejectionReason.ALREADY_USED: ("Word used already", "Be more original"),
    RejectionReason.NOT_POSSIBLE: ("Word not possible", "You can't spell that word from '{root}'!"),
    RejectionReason.NOT_REAL: ("Word not recognized", "You can't just make them up, you know!"),
    RejectionReason.TOO_SHORT: ("Word too short", "You can come up with a word longer than that!"),
    RejectionReason.SAME_AS_ROOT: ("Word is the same as root", "That's too easy. At least change the word!"),
}


@dataclass(frozen=True)
class GameConfig:
    language: str = DEFAULT_LANGUAGE
    min_length: int = MIN_WORD_LENGTH
    fallback_root: str = DEFAULT_ROOT_WORD
    strict: bool = False


@dataclass
class GameState:
    """One round: the root word and everything accepted against it so far."""
    root_word: str
    used_words: List[str] = field(default_factory=list)  # most recent first
    score: int = 0


@dataclass(frozen=True)
class Accepted:
    word: str
    points: int


@dataclass(frozen=True)
class Rejected:
    reason: RejectionReason
    root_word: str

    @property
    def title(self) -> str:
        return REJECTION_TEXT[self.reason][0]

    @property
    def message(self) -> str:
        return REJECTION_TEXT[self.reason][1].format(root=self.root_word)

    def text(self) -> Tuple[str, str]:
        return self.title, self.message


SubmitResult = Union[Accepted, Rejected]


def _check(state: GameState, word: str, dictionary, language: str,
           min_length: int) -> Optional[RejectionReason]:
    """Run the rule chain in order; return the first failing reason, or None."""
    if not is_original(word, state.used_words):
        return RejectionReason.ALREADY_USED
    if not is_possible(word, state.root_word):
        return RejectionReason.NOT_POSSIBLE
    if not is_real(word, dictionary, language):
        return RejectionReason.NOT_REAL
    if not is_long_enough(word, min_length):
        return RejectionReason.TOO_SHORT
    if not is_not_root(word, state.root_word):
        return RejectionReason.SAME_AS_ROOT
    return None


def submit(
        state: GameState,
        candidate: str,
        dictionary,
        *,
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
) -> Optional[SubmitResult]:
    """
    Evaluate one candidate against the round.

    Args:
        state:      the round being played (mutated only on acceptance)
        candidate:  raw user input; trimmed and lowercased before checking
        dictionary: object exposing is_real_word(word, language) -> bool
        language:   language code handed to the dictionary
        min_length: shortest acceptable word

    Returns:
        None       if the candidate is blank (nothing happens)
        Accepted   if the word was added to the front of used_words
        Rejected   with the first failing reason otherwise
    """
    word = normalize(candidate)
    if not word:
        return None

    reason = _check(state, word, dictionary, language, min_length)
    if reason is not None:
        logger.debug("rejected %r for root %r: %s", word, state.root_word, reason.value)
        return Rejected(reason, state.root_word)

    points = word_points(word)
    state.used_words.insert(0, word)
    state.score += points
    logger.debug("accepted %r (+%d, score=%d)", word, points, state.score)
    return Accepted(word, points)


def start_round(
        word_source,
        *,
        rng: random.Random | None = None,
        fallback: str = DEFAULT_ROOT_WORD,
        strict: bool = False,
) -> GameState:
    """
    Draw a root word uniformly at random from the word source and return a
    fresh state (no used words, score 0).

    An empty pool falls back to `fallback` and logs a warning; with
    strict=True it raises WordPoolUnavailable instead.
    """
    rng = rng or random.Random()

    # Blank lines (e.g. a trailing newline in a word file) are not root words.
    pool = [normalize(w) for w in (word_source.load_word_pool() or [])]
    pool = [w for w in pool if w]

    if pool:
        root = pool[rng.randrange(len(pool))]
    elif strict:
        raise WordPoolUnavailable(f"word source {word_source!r} returned no words")
    else:
        logger.warning("word source %r returned no words; using %r", word_source, fallback)
        root = normalize(fallback)

    logger.debug("new round with root word %r (pool=%d)", root, len(pool))
    return GameState(root_word=root)


class Game:
    """
    A play session: one round in progress at a time, replaced on new_round().

    Tracks the best round score seen in the session. Before the first
    new_round() there is no state and submit() raises RuntimeError.
    """

    def __init__(self, dictionary, word_source, *, config: GameConfig | None = None,
                 seed: int | None = None):
        self.dictionary = dictionary
        self.word_source = word_source
        self.config = config or GameConfig()
        self.rng = random.Random(seed)

        self._state: GameState | None = None
        self.best_score = 0
        self.rounds_played = 0

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise RuntimeError("no round in progress; call new_round() first")
        return self._state

    @property
    def root_word(self) -> str:
        return self.state.root_word

    @property
    def used_words(self) -> List[str]:
        return list(self.state.used_words)

    @property
    def score(self) -> int:
        return self.state.score

    def new_round(self) -> GameState:
        if self._state is not None:
            self.best_score = max(self.best_score, self._state.score)
        self._state = start_round(
            self.word_source,
            rng=self.rng,
            fallback=self.config.fallback_root,
            strict=self.config.strict,
        )
        self.rounds_played += 1
        return self._state

    def submit(self, candidate: str) -> Optional[SubmitResult]:
        result = submit(
            self.state, candidate, self.dictionary,
            language=self.config.language,
            min_length=self.config.min_length,
        )
        if isinstance(result, Accepted):
            self.best_score = max(self.best_score, self.state.score)
        return result

    def recalculated_score(self) -> int:
        """Score re-summed from the history; always equals `score`."""
        return calculate_score(self.state)
