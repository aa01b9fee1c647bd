from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .datatypes import AlgorithmProfile, Recommendation, RecommendationRequest, ScoredAlgorithm
from .errors import NoCompatibleAlgorithmError

logger = logging.getLogger(__name__)

ALGORITHM_PROFILES: Tuple[AlgorithmProfile, ...] = (
    # summarization
    AlgorithmProfile(
        name="enhanced_extractive_tfidf",
        task_types=("summarization",),
        strengths=("Resource efficiency", "Speed", "No external API dependency"),
        weaknesses=("Less coherent than abstractive methods", "Limited understanding of context"),
        resource_requirements="low", quality="medium", speed="high",
        special_features=("copyright-friendly", "extractive", "local-processing"),
    ),
    AlgorithmProfile(
        name="bert_extractive",
        task_types=("summarization",),
        strengths=("Better semantic understanding", "Improved coherence", "Good with medium texts"),
        weaknesses=("Higher resource requirements", "Slower than TF-IDF", "May require API access"),
        resource_requirements="medium", quality="high", speed="medium",
        special_features=("contextual-understanding", "extractive"),
    ),
    AlgorithmProfile(
        name="bart_abstractive",
        task_types=("summarization",),
        strengths=("Generates new text", "Highest coherence", "Best semantic understanding"),
        weaknesses=("Highest resource requirements", "Slowest option", "Requires API access"),
        resource_requirements="high", quality="very high", speed="low",
        special_features=("paraphrasing", "abstractive", "contextual-understanding"),
    ),
    # translation
    AlgorithmProfile(
        name="statistical_mt",
        task_types=("translation",),
        strengths=("Fast processing", "Low resource requirements", "Works offline"),
        weaknesses=("Lower quality than neural methods", "Limited language support", "Literal translations"),
        resource_requirements="low", quality="medium", speed="high",
        special_features=("local-processing",),
    ),
    AlgorithmProfile(
        name="neural_transformer",
        task_types=("translation",),
        strengths=("High quality translations", "Preserves context", "Good language support"),
        weaknesses=("Requires API access", "Medium processing speed", "Medium cost"),
        resource_requirements="medium", quality="high", speed="medium",
        special_features=("contextual-understanding",),
    ),
    # content generation
    AlgorithmProfile(
        name="enhanced_template",
        task_types=("content_generation",),
        strengths=("Very fast", "Consistent structure", "No API dependency"),
        weaknesses=("Limited creativity", "Repetitive patterns", "Less contextual understanding"),
        resource_requirements="low", quality="medium", speed="very high",
        special_features=("local-processing", "copyright-friendly"),
    ),
    AlgorithmProfile(
        name="fine_tuned_gpt",
        task_types=("content_generation",),
        strengths=("Highest creativity", "Natural language flow", "Best contextual understanding"),
        weaknesses=("API dependency", "Higher costs", "Potential copyright concerns"),
        resource_requirements="high", quality="very high", speed="low",
        special_features=("creative", "contextual-understanding", "coherent"),
    ),
    AlgorithmProfile(
        name="open_source_llm",
        task_types=("content_generation",),
        strengths=("Good quality", "More control", "Self-hosted option"),
        weaknesses=("High local resource needs", "Setup complexity", "Model size limitations"),
        resource_requirements="high", quality="high", speed="medium",
        special_features=("creative", "configurable"),
    ),
    # keyword extraction
    AlgorithmProfile(
        name="enhanced_tfidf",
        task_types=("keyword_extraction",),
        strengths=("Very efficient", "Works with any domain", "No external dependencies"),
        weaknesses=("Misses semantic relationships", "Word frequency bias", "Less context awareness"),
        resource_requirements="very low", quality="medium", speed="very high",
        special_features=("local-processing", "domain-agnostic"),
    ),
    AlgorithmProfile(
        name="bert_keyword",
        task_types=("keyword_extraction",),
        strengths=("Semantic understanding", "Context awareness", "Better phrase extraction"),
        weaknesses=("Higher resource requirements", "API dependency", "Slower processing"),
        resource_requirements="medium", quality="high", speed="medium",
        special_features=("contextual-understanding", "semantic-relationships"),
    ),
)

TIER_SCORES = {"low": 0.5, "medium": 1.0, "high": 1.5, "very high": 2.0}
HIGH_TIERS = ("high", "very high")

SHORT_TEXT = 1000
LONG_TEXT = 5000


def _normalize_feature(tag: str) -> str:
    return tag.lower().replace("_", "-")


def score_profile(profile: AlgorithmProfile, request: RecommendationRequest) -> float:
    score = 0.0

    # priority factor
    if request.priority_factor == "speed" and profile.speed in HIGH_TIERS:
        score += 3
    elif request.priority_factor == "quality" and profile.quality in HIGH_TIERS:
        score += 3
    elif request.priority_factor == "balanced":
        score += TIER_SCORES.get(profile.speed, 0.5) + TIER_SCORES.get(profile.quality, 0.5)

    # text length
    if request.text_length < SHORT_TEXT:
        if profile.resource_requirements == "low":
            score += 1
    elif request.text_length > LONG_TEXT:
        if profile.resource_requirements == "low":
            score += 2
        elif profile.resource_requirements == "medium":
            score += 1

    # language complexity
    if request.language_complexity == "complex" and profile.quality in HIGH_TIERS:
        score += 1.5
    elif request.language_complexity == "simple" and profile.speed == "high":
        score += 1

    # specialized domains want semantic understanding
    if request.content_domain and "contextual-understanding" in profile.special_features:
        score += 1

    score += sum(1 for req in request.special_requirements
                 if _normalize_feature(req) in profile.special_features)
    return score


def suggest_parameters(name: str, request: RecommendationRequest) -> Dict[str, Any]:
    length = request.text_length
    if name == "enhanced_extractive_tfidf":
        return {
            "method": "enhanced_tfidf",
            "length": "short" if length > 3000 else "medium" if length > 1000 else "long",
            "style": "simplified" if request.language_complexity == "complex" else "informative",
        }
    if name == "enhanced_template":
        if request.language_complexity == "complex":
            tone = "Technical"
        elif request.content_domain == "marketing":
            tone = "Enthusiastic"
        else:
            tone = "Professional"
        return {
            "creativityLevel": 80 if request.priority_factor == "quality" else 50,
            "length": ("Long (600+ words)" if length > 3000
                       else "Medium (300-500 words)" if length > 1000
                       else "Short (100-200 words)"),
            "tone": tone,
        }
    if name == "enhanced_tfidf":
        return {"count": 15 if length > 3000 else 10, "method": "enhanced_tfidf"}
    return {
        "quality": "high" if request.priority_factor == "quality" else "medium",
        "speed": "high" if request.priority_factor == "speed" else "medium",
    }


def build_explanation(name: str, request: RecommendationRequest) -> str:
    task = request.task_type.replace("_", " ")
    parts = [
        f"Based on your requirements for {task} with priority on {request.priority_factor}, "
        f"the {name} algorithm is recommended."
    ]
    if request.priority_factor == "speed":
        parts.append("It offers excellent processing speed while maintaining acceptable quality.")
    elif request.priority_factor == "quality":
        parts.append("It provides the best output quality for your specific needs.")
    else:
        parts.append("It offers a good balance between processing speed and output quality.")
    if request.special_requirements:
        parts.append(f"It also addresses your special requirements for {', '.join(request.special_requirements)}.")
    return " ".join(parts)


def recommend(request: RecommendationRequest,
              profiles: Optional[Sequence[AlgorithmProfile]] = None) -> Recommendation:
    profiles = ALGORITHM_PROFILES if profiles is None else profiles
    compatible = [p for p in profiles if request.task_type in p.task_types]
    if not compatible:
        logger.warning("No algorithm profile supports task type %s", request.task_type)
        raise NoCompatibleAlgorithmError(request.task_type)

    scored: List[Tuple[AlgorithmProfile, float]] = [(p, score_profile(p, request)) for p in compatible]
    scored.sort(key=lambda ps: ps[1], reverse=True)

    top = scored[0][1]
    ranked = [
        ScoredAlgorithm(
            name=p.name,
            score=(s / top) if top > 0 else 0.0,
            strengths=list(p.strengths),
            weaknesses=list(p.weaknesses),
        )
        for p, s in scored
    ]
    best = ranked[0]
    logger.debug("Recommendation for %s: %s (raw scores %s)",
                 request.task_type, best.name, [(p.name, s) for p, s in scored])

    return Recommendation(
        recommended_algorithm=best.name,
        confidence=best.score,
        alternative_algorithms=ranked[1:3],
        suggested_parameters=suggest_parameters(best.name, request),
        explanation=build_explanation(best.name, request),
    )
