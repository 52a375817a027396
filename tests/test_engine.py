import logging
import random

import pytest
from wordscramble.datasets import StaticWordSource
from wordscramble.dictionaries import WordListDictionary
from wordscramble.engine import (
    Accepted, GameState, Rejected, RejectionReason, WordPoolUnavailable,
    calculate_score, is_possible, normalize, start_round, submit,
)

WORDS = ["silk", "worm", "milk", "owl", "ok", "rows", "silkworm", "zebra", "ab"]


@pytest.fixture
def dictionary():
    return WordListDictionary(WORDS)


@pytest.fixture
def state():
    return GameState(root_word="silkworm")


# --- rule predicates ---
@pytest.mark.parametrize("word,root,expected", [
    ("silk", "silkworm", True),
    ("worm", "silkworm", True),
    ("silkworm", "silkworm", True),
    ("sills", "silkworm", False),   # only one 's' and one 'l'
    ("zebra", "silkworm", False),
    ("ab", "silkworm", False),
    ("", "silkworm", True),
    ("lease", "easel", True),
    ("eases", "easel", False),
])
def test_is_possible(word, root, expected):
    assert is_possible(word, root) is expected


def test_normalize():
    assert normalize("  SiLk \n") == "silk"
    assert normalize("   ") == ""


# --- submit: rule order and outcomes ---
def test_submit_accepts_silk(state, dictionary):
    r = submit(state, "silk", dictionary)
    assert r == Accepted("silk", 4)
    assert state.used_words == ["silk"]
    assert state.score == 4


def test_submit_most_recent_first(state, dictionary):
    for w in ["silk", "worm", "owl"]:
        submit(state, w, dictionary)
    assert state.used_words == ["owl", "worm", "silk"]


@pytest.mark.parametrize("candidate,reason", [
    ("silkworm", RejectionReason.SAME_AS_ROOT),
    ("SILKWORM ", RejectionReason.SAME_AS_ROOT),
    ("zebra", RejectionReason.NOT_POSSIBLE),     # real but not spellable
    ("ab", RejectionReason.NOT_POSSIBLE),        # possibility is checked before reality
    ("milks", RejectionReason.NOT_REAL),         # spellable, unknown word
    ("ok", RejectionReason.TOO_SHORT),           # spellable and real, but 2 letters
])
def test_submit_rejections(state, dictionary, candidate, reason):
    r = submit(state, candidate, dictionary)
    assert isinstance(r, Rejected)
    assert r.reason is reason
    assert state.used_words == [] and state.score == 0


def test_submit_already_used_is_case_insensitive(state, dictionary):
    assert isinstance(submit(state, "silk", dictionary), Accepted)
    r = submit(state, "  SILK ", dictionary)
    assert isinstance(r, Rejected) and r.reason is RejectionReason.ALREADY_USED
    assert state.used_words == ["silk"] and state.score == 4


def test_submit_originality_checked_first(dictionary):
    # A word that is already used wins over every later rule.
    st = GameState(root_word="silkworm", used_words=["ok"], score=2)
    r = submit(st, "ok", dictionary)
    assert r.reason is RejectionReason.ALREADY_USED


@pytest.mark.parametrize("blank", ["", "   ", "\n\t"])
def test_submit_blank_is_noop(state, dictionary, blank):
    assert submit(state, blank, dictionary) is None
    assert state == GameState(root_word="silkworm")


def test_submit_respects_language(state, dictionary):
    r = submit(state, "silk", dictionary, language="fr")
    assert r.reason is RejectionReason.NOT_REAL


def test_submit_min_length_override(state, dictionary):
    assert submit(state, "owl", dictionary, min_length=4).reason is RejectionReason.TOO_SHORT
    assert submit(state, "ok", dictionary, min_length=2) == Accepted("ok", 2)


def test_rejection_text(state, dictionary):
    r = submit(state, "zebra", dictionary)
    assert r.title == "Word not possible"
    assert r.message == "You can't spell that word from 'silkworm'!"
    assert submit(state, "silkworm", dictionary).text() == (
        "Word is the same as root", "That's too easy. At least change the word!")


# --- scoring ---
def test_score_matches_recalculation(state, dictionary):
    accepted = []
    for w in ["silk", "nope", "worm", "silk", "owl", "rows", "ok"]:
        r = submit(state, w, dictionary)
        if isinstance(r, Accepted):
            accepted.append(w)
    assert accepted == ["silk", "worm", "owl", "rows"]
    assert state.score == 4 + 4 + 3 + 4
    assert calculate_score(state) == state.score
    assert calculate_score(state.used_words) == state.score


def test_calculate_score_empty():
    assert calculate_score([]) == 0
    assert calculate_score(GameState(root_word="silkworm")) == 0


# --- start_round ---
def test_start_round_draws_from_pool():
    src = StaticWordSource(["Absolute", "", "  blackout  "])
    st = start_round(src, rng=random.Random(7))
    assert st.root_word in {"absolute", "blackout"}
    assert st.used_words == [] and st.score == 0


def test_start_round_empty_pool_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="wordscramble.engine.game"):
        st = start_round(StaticWordSource([]))
    assert st.root_word == "silkworm"
    assert any("no words" in rec.getMessage() for rec in caplog.records)


def test_start_round_none_pool_falls_back():
    class NoneSource:
        def load_word_pool(self):
            return None

    assert start_round(NoneSource(), fallback="notebook").root_word == "notebook"


def test_start_round_strict_raises():
    with pytest.raises(WordPoolUnavailable):
        start_round(StaticWordSource(["", "  "]), strict=True)
