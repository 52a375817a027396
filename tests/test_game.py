import pytest
from wordscramble.datasets import StaticWordSource
from wordscramble.dictionaries import WordListDictionary
from wordscramble.engine import Accepted, Game, GameConfig, RejectionReason, WordPoolUnavailable


def _game(words=("silkworm",), **kw):
    d = WordListDictionary(["silk", "worm", "milk", "owl", "rows", "skim"])
    return Game(d, StaticWordSource(words), **kw)


def test_submit_before_round_raises():
    g = _game()
    with pytest.raises(RuntimeError):
        g.submit("silk")


def test_silkworm_scenarios():
    g = _game()
    g.new_round()
    assert g.root_word == "silkworm"

    assert g.submit("silk") == Accepted("silk", 4)
    assert g.used_words == ["silk"] and g.score == 4

    assert g.submit("silk").reason is RejectionReason.ALREADY_USED
    assert g.submit("silkworm").reason is RejectionReason.NOT_REAL  # not in this word list
    assert g.submit("   ") is None
    assert g.score == 4


def test_best_score_carries_across_rounds():
    g = _game()
    g.new_round()
    g.submit("silk")
    g.submit("worm")
    assert g.score == 8 and g.best_score == 8

    g.new_round()
    assert g.score == 0 and g.used_words == []
    assert g.best_score == 8
    assert g.rounds_played == 2

    g.submit("silk")  # history was cleared, so it is original again
    assert g.score == 4 and g.best_score == 8
    assert g.recalculated_score() == g.score


def test_best_score_tracks_running_round():
    g = _game()
    g.new_round()
    for w in ["silk", "worm", "owl", "rows"]:
        g.submit(w)
    assert g.best_score == g.score == 15


def test_seeded_rounds_are_reproducible():
    pool = ["absolute", "blackout", "notebook", "umbrella", "treasure"]
    a = _game(pool, seed=42)
    b = _game(pool, seed=42)
    roots_a = [a.new_round().root_word for _ in range(5)]
    roots_b = [b.new_round().root_word for _ in range(5)]
    assert roots_a == roots_b
    assert set(roots_a) <= set(pool)


def test_config_is_applied():
    g = _game(config=GameConfig(min_length=4))
    g.new_round()
    assert g.submit("owl").reason is RejectionReason.TOO_SHORT


def test_strict_config_refuses_empty_pool():
    g = _game(words=(), config=GameConfig(strict=True))
    with pytest.raises(WordPoolUnavailable):
        g.new_round()


def test_custom_fallback_root():
    g = _game(words=(), config=GameConfig(fallback_root="Notebook"))
    assert g.new_round().root_word == "notebook"
