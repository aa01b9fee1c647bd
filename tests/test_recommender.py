import pytest

from textcraft.datatypes import RecommendationRequest
from textcraft.errors import InvalidInputError, NoCompatibleAlgorithmError
from textcraft.recommender import ALGORITHM_PROFILES, recommend, score_profile


def _profile(name):
    return next(p for p in ALGORITHM_PROFILES if p.name == name)


def test_fast_keyword_extraction_on_long_text():
    result = recommend(RecommendationRequest(task_type="keyword_extraction", text_length=6000,
                                             priority_factor="speed"))
    assert result.recommended_algorithm == "enhanced_tfidf"
    assert result.confidence == 1.0
    assert [a.name for a in result.alternative_algorithms] == ["bert_keyword"]
    assert result.alternative_algorithms[0].score == pytest.approx(1 / 3)
    assert result.suggested_parameters == {"count": 15, "method": "enhanced_tfidf"}


def test_length_bonus_only_for_low_and_medium_tiers():
    request = RecommendationRequest(task_type="keyword_extraction", text_length=6000, priority_factor="speed")
    assert score_profile(_profile("enhanced_tfidf"), request) == 3
    assert score_profile(_profile("bert_keyword"), request) == 1
    short = RecommendationRequest(task_type="keyword_extraction", text_length=500, priority_factor="speed")
    assert score_profile(_profile("enhanced_tfidf"), short) == 3


def test_quality_summarization_of_complex_text():
    request = RecommendationRequest(task_type="summarization", text_length=2000, priority_factor="quality",
                                    language_complexity="complex", content_domain="legal")
    assert score_profile(_profile("bert_extractive"), request) == 5.5
    assert score_profile(_profile("bart_abstractive"), request) == 5.5
    assert score_profile(_profile("enhanced_extractive_tfidf"), request) == 0

    result = recommend(request)
    assert result.recommended_algorithm == "bert_extractive"
    assert [a.name for a in result.alternative_algorithms] == ["bart_abstractive", "enhanced_extractive_tfidf"]
    assert [a.score for a in result.alternative_algorithms] == [1.0, 0.0]


def test_balanced_content_generation_for_short_text():
    result = recommend(RecommendationRequest(task_type="content_generation", text_length=500))
    assert result.recommended_algorithm == "enhanced_template"
    assert result.suggested_parameters == {
        "creativityLevel": 50,
        "length": "Short (100-200 words)",
        "tone": "Professional",
    }
    assert len(result.alternative_algorithms) == 2


def test_marketing_template_tone():
    result = recommend(RecommendationRequest(task_type="content_generation", text_length=500,
                                             content_domain="marketing"))
    assert result.recommended_algorithm == "enhanced_template"
    assert result.suggested_parameters["tone"] == "Enthusiastic"


def test_special_requirements_in_explanation():
    result = recommend(RecommendationRequest(task_type="summarization", text_length=2000, priority_factor="speed",
                                             special_requirements=["copyright_friendly", "local_processing"]))
    assert result.recommended_algorithm == "enhanced_extractive_tfidf"
    assert result.suggested_parameters == {"method": "enhanced_tfidf", "length": "medium", "style": "informative"}
    assert "copyright_friendly, local_processing" in result.explanation
    assert result.explanation.startswith("Based on your requirements for summarization with priority on speed")


def test_special_requirement_adds_one_per_match():
    base = RecommendationRequest(task_type="summarization", text_length=2000, priority_factor="speed")
    extra = RecommendationRequest(task_type="summarization", text_length=2000, priority_factor="speed",
                                  special_requirements=["local-processing", "unknown-feature"])
    profile = _profile("enhanced_extractive_tfidf")
    assert score_profile(profile, extra) == score_profile(profile, base) + 1


def test_generic_parameters():
    result = recommend(RecommendationRequest(task_type="translation", text_length=2000, priority_factor="quality"))
    assert result.recommended_algorithm == "neural_transformer"
    assert result.suggested_parameters == {"quality": "high", "speed": "medium"}


def test_scores_are_normalized():
    result = recommend(RecommendationRequest(task_type="summarization", text_length=8000))
    assert result.confidence == 1.0
    assert all(0 <= a.score <= 1 for a in result.alternative_algorithms)


def test_no_compatible_algorithm():
    summarizers = [p for p in ALGORITHM_PROFILES if "summarization" in p.task_types]
    with pytest.raises(NoCompatibleAlgorithmError) as err:
        recommend(RecommendationRequest(task_type="translation", text_length=100), profiles=summarizers)
    assert err.value.task_type == "translation"
    assert "translation" in str(err.value)


@pytest.mark.parametrize("kwargs", [
    {"task_type": "poetry", "text_length": 100},
    {"task_type": "summarization", "text_length": 0},
    {"task_type": "summarization", "text_length": 100, "priority_factor": "fast"},
    {"task_type": "summarization", "text_length": 100, "language_complexity": "hard"},
])
def test_invalid_requests(kwargs):
    with pytest.raises(InvalidInputError):
        RecommendationRequest(**kwargs)


def test_request_from_dict():
    request = RecommendationRequest.from_dict({
        "taskType": "keyword_extraction",
        "textLength": 6000,
        "priorityFactor": "speed",
        "specialRequirements": ["local-processing"],
    })
    assert request.task_type == "keyword_extraction"
    assert request.priority_factor == "speed"
    assert request.special_requirements == ["local-processing"]
    assert request.content_domain is None


def test_recommendation_to_dict():
    out = recommend(RecommendationRequest(task_type="keyword_extraction", text_length=6000,
                                          priority_factor="speed")).to_dict()
    assert out["recommendedAlgorithm"] == "enhanced_tfidf"
    assert out["alternativeAlgorithms"][0]["name"] == "bert_keyword"
    assert set(out) == {"recommendedAlgorithm", "confidence", "alternativeAlgorithms",
                        "suggestedParameters", "explanation"}
