import pytest

from textcraft.errors import InvalidInputError
from textcraft.keywords import extract_keywords, normalize_scores, standard_tfidf
from textcraft.datatypes import KeywordResult

DATA = "data science data analysis data mining"

ML = ("Machine learning models need data. Machine learning models improve with data. "
      "Data quality matters.")


def test_standard_tfidf_ranks_most_frequent_first():
    result = extract_keywords(DATA, count=2, method="standard_tfidf")
    assert result.method == "standard_tfidf"
    assert [k.keyword for k in result.keywords] == ["data", "science"]
    assert result.keywords[0].score == 1.0
    assert result.keywords[1].score == pytest.approx(1 / 3)


def test_enhanced_includes_repeated_phrases():
    result = extract_keywords(ML, count=5)
    keywords = [k.keyword for k in result.keywords]
    assert result.method == "enhanced_tfidf"
    assert keywords[0] == "machine learning models"
    assert "machine learning" in keywords
    assert result.keywords[0].score == 1.0


def test_bert_based_drops_contained_candidates():
    result = extract_keywords(ML, count=5, method="bert_based")
    keywords = [k.keyword for k in result.keywords]
    assert keywords[0] == "machine learning models"
    assert "machine learning" not in keywords
    assert "machine" not in keywords
    assert "data" in keywords
    for i, a in enumerate(keywords):
        for b in keywords[:i]:
            assert a not in b


@pytest.mark.parametrize("method", ["standard_tfidf", "enhanced_tfidf", "bert_based"])
def test_keyword_list_shape(method):
    result = extract_keywords(ML, count=3, method=method)
    scores = [k.score for k in result.keywords]
    assert 0 < len(scores) <= 3
    assert scores == sorted(scores, reverse=True)
    assert max(scores) == 1.0
    assert all(0 <= s <= 1 for s in scores)


def test_stopword_only_text_yields_no_keywords():
    result = extract_keywords("the and of it", count=5)
    assert result.keywords == []


def test_to_dict():
    result = extract_keywords(DATA, count=1, method="standard_tfidf")
    assert result.to_dict() == {"keywords": [{"keyword": "data", "score": 1.0}], "method": "standard_tfidf"}


def test_blank_text_rejected():
    with pytest.raises(InvalidInputError):
        extract_keywords("  ")


@pytest.mark.parametrize("count", [0, -3, True])
def test_bad_count_rejected(count):
    with pytest.raises(InvalidInputError):
        extract_keywords(DATA, count=count)


def test_unknown_method_rejected():
    with pytest.raises(InvalidInputError):
        extract_keywords(DATA, method="lda")


def test_normalize_scores():
    out = normalize_scores([KeywordResult("a", 4.0), KeywordResult("b", 1.0)])
    assert [(k.keyword, k.score) for k in out] == [("a", 1.0), ("b", 0.25)]
    assert normalize_scores([]) == []


def test_standard_tfidf_direct():
    keywords = standard_tfidf(DATA, [DATA], 1)
    assert keywords == [KeywordResult("data", 1.0)]


@pytest.mark.parametrize("method", ["standard_tfidf", "enhanced_tfidf", "bert_based"])
def test_method_name_is_echoed(method):
    assert extract_keywords(DATA, count=2, method=method).method == method
