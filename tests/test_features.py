import math

import pytest

from textcraft.config import BM25Config
from textcraft.features import (compute_tf, compute_idf, compute_idf_smoothed, compute_tfidf,
                                compute_bm25plus, extract_phrases, rank_terms)


def test_tf_counts_over_all_tokens():
    tf = compute_tf("data science data analysis data mining")
    assert tf["data"] == pytest.approx(0.5)
    assert tf["science"] == pytest.approx(1 / 6)


def test_tf_excludes_stopwords_and_short_tokens():
    tf = compute_tf("The cat and the hat on a mat")
    assert set(tf) == {"cat", "hat", "mat"}
    assert tf["cat"] == pytest.approx(1 / 8)


def test_tf_values_are_fractions():
    tf = compute_tf("Rivers carry water. Water feeds rivers and the sea.")
    assert all(0 < v <= 1 for v in tf.values())
    assert sum(tf.values()) <= 1.0


def test_tf_of_empty_text():
    assert compute_tf("   ") == {}


def test_idf_log10_smoothing():
    idf = compute_idf(["cats purr", "dogs bark", "cats sleep"])
    assert idf["cats"] == pytest.approx(math.log10(4 / 3) + 1)
    assert idf["dogs"] == pytest.approx(math.log10(4 / 2) + 1)


def test_idf_never_below_one():
    idf = compute_idf(["shared words here", "shared words there", "shared words everywhere"])
    assert idf["shared"] == pytest.approx(1.0)
    assert all(v >= 1.0 for v in idf.values())


def test_idf_counts_each_document_once():
    idf = compute_idf(["cats cats cats", "dogs"])
    assert idf["cats"] == pytest.approx(math.log10(3 / 2) + 1)


def test_smoothed_idf_natural_log():
    idf = compute_idf_smoothed(["cats purr", "dogs bark", "cats sleep"])
    assert idf["cats"] == pytest.approx(math.log(4 / 3 + 1))
    assert idf["purr"] == pytest.approx(math.log(4 / 2 + 1))


def test_tfidf_defaults_missing_idf_to_one():
    tfidf = compute_tfidf({"alpha": 0.2, "beta": 0.1}, {"alpha": 2.0})
    assert tfidf == {"alpha": pytest.approx(0.4), "beta": pytest.approx(0.1)}


def test_bm25plus_mean_over_sentences():
    sentences = ["apple banana.", "apple cherry."]
    weights = compute_bm25plus("apple banana. apple cherry.", sentences)
    # both sentences have average length, so the length norm is k1
    assert weights["apple"] == pytest.approx(2.0)
    assert weights["banana"] == pytest.approx(1.5)
    assert weights["cherry"] == pytest.approx(1.5)


def test_bm25plus_floor_is_delta():
    text = "Rockets launch satellites. Engineers build rockets carefully. Weather delays launches."
    weights = compute_bm25plus(text, ["Rockets launch satellites.", "Engineers build rockets carefully.",
                                      "Weather delays launches."], BM25Config(delta=0.5))
    assert weights
    assert all(w >= 0.5 for w in weights.values())


def test_bm25plus_without_sentences():
    assert compute_bm25plus("anything", []) == {}


def test_phrases_count_overlapping_windows():
    text = "big data tools and big data tools"
    assert extract_phrases(text, 2) == {"big data": 2, "data tools": 2, "tools big": 1}
    assert extract_phrases(text, 3)["big data tools"] == 2


def test_phrases_keep_single_occurrences():
    assert extract_phrases("solar panels generate power", 3) == {
        "solar panels generate": 1,
        "panels generate power": 1,
    }


def test_rank_terms_is_stable():
    assert rank_terms({"b": 1, "a": 1, "c": 2}) == [("c", 2), ("b", 1), ("a", 1)]
    assert rank_terms({"b": 1, "a": 1, "c": 2}, 1) == [("c", 2)]
