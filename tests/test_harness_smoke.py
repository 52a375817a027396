import csv
import json

from wordscramble.dictionaries import WordListDictionary
from wordscramble.harness import (
    analyze_root, find_words, run_batch, sample_roots, write_csv, write_manifest,
)

VOCAB = ["silk", "worm", "milk", "zebra", "ok", "silkworm", "silk", "milks", "rows"]


def _dictionary():
    return WordListDictionary(["silk", "worm", "milk", "zebra", "ok", "silkworm", "rows"])


def test_find_words_matches_submit_rules():
    words = find_words("silkworm", VOCAB, _dictionary())
    # milks: unknown, ok: too short, silkworm: the root, zebra: not spellable
    assert words == ["milk", "rows", "silk", "worm"]


def test_analyze_root_summary():
    r = analyze_root("SilkWorm", VOCAB, _dictionary())
    assert r["root"] == "silkworm"
    assert r["num_words"] == 4
    assert r["max_score"] == 16
    assert r["longest"] == "milk"


def test_run_batch_sample_and_iterator_vocab():
    out = run_batch(["silkworm", "zebra"], iter(VOCAB), _dictionary())
    assert [r["root"] for r in out] == ["silkworm", "zebra"]
    assert out[1]["num_words"] == 0 and out[1]["longest"] == ""
    assert len(run_batch(["silkworm", "zebra"], VOCAB, _dictionary(), sample=1)) == 1


def test_write_outputs(tmp_path):
    results = run_batch(["silkworm"], VOCAB, _dictionary())
    p = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(p, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["root"] == "silkworm"
    assert rows[0]["max_score"] == "16"
    assert rows[0]["words"] == "milk rows silk worm"

    m = write_manifest({"run_id": "x", "num_roots": 1}, str(tmp_path / "m.json"))
    assert json.loads(open(m, encoding="utf-8").read())["num_roots"] == 1


def test_sample_roots_is_seeded():
    roots = ["absolute", "blackout", "notebook", "silkworm", "umbrella"]
    picked = sample_roots(roots, 3, seed=11)
    assert picked == sample_roots(roots, 3, seed=11)
    assert len(picked) == 3 and set(picked) <= set(roots)
    # no sample, or one covering the list, keeps the original order
    assert sample_roots(roots, None) == roots
    assert sample_roots(roots, 10, seed=11) == roots


def test_run_batch_uses_sample_roots_and_progress():
    roots = ["silkworm", "zebra", "notebook"]
    wrapped = []

    def progress(cases):
        wrapped.append(list(cases))
        return cases

    out = run_batch(roots, VOCAB, _dictionary(), sample=2, seed=3, progress=progress)
    assert [r["root"] for r in out] == sample_roots(roots, 2, seed=3)
    assert wrapped == [sample_roots(roots, 2, seed=3)]
