from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Dict, Tuple, Optional, Any

from .errors import InvalidInputError

logger = logging.getLogger(__name__)

TermWeights = Dict[str, float]  # token or phrase -> score

SUMMARY_LENGTHS = ("short", "medium", "long")
SUMMARY_STYLES = ("informative", "bullet_points", "simplified")
KEYWORD_METHODS = ("enhanced_tfidf", "bert_based", "standard_tfidf")
TASK_TYPES = ("summarization", "translation", "content_generation", "keyword_extraction")
PRIORITY_FACTORS = ("speed", "quality", "balanced")
LANGUAGE_COMPLEXITIES = ("simple", "moderate", "complex")
OPERATIONS = ("summarization", "keyword_extraction")


def require_text(value: Any, what: str) -> None:
    if not isinstance(value, str) or not value.strip():
        logger.warning("Rejected blank text for %s", what)
        raise InvalidInputError(f"No text provided for {what}")


def _require_choice(value: Any, choices: Tuple[str, ...], name: str) -> None:
    if value not in choices:
        logger.warning("Rejected %s %r", name, value)
        raise InvalidInputError(f"Invalid {name} {value!r}; expected one of {', '.join(choices)}")


def _require_positive(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        logger.warning("Rejected %s %r", name, value)
        raise InvalidInputError(f"{name} must be a positive integer, got {value!r}")


@dataclass
class Sentence:
    idx: int
    text: str
    tokens: List[str] = field(default_factory=list)


@dataclass
class Document:
    raw_text: str
    sentences: List[Sentence]
    documents: List[str]  # unit of IDF: paragraphs, or the sentences themselves


@dataclass
class Edge:
    i: int
    j: int
    weight: float  # similarity


@dataclass
class Graph:
    nodes: List[Sentence]
    edges: List[Edge]  # undirected weighted edges


@dataclass
class ScoredSentence:
    sentence: str
    index: int
    score: float
    cluster: int


@dataclass
class SummaryDetails:
    """Every intermediate of one summarizer run, kept for inspection."""
    summary: str
    sentences: List[str]
    documents: List[str]
    target_count: int
    clusters: List[int]
    bm25: TermWeights
    idf: TermWeights
    tfidf: TermWeights
    phrases: Dict[str, int]
    keyword_weights: TermWeights
    scored: List[ScoredSentence]
    selected: List[int]  # original indices, reading order

    def to_dict(self) -> Dict[str, Any]:
        return {"summary": self.summary}


@dataclass
class KeywordResult:
    keyword: str
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return {"keyword": self.keyword, "score": self.score}


@dataclass
class KeywordExtraction:
    keywords: List[KeywordResult]
    method: str

    def to_dict(self) -> Dict[str, Any]:
        return {"keywords": [k.to_dict() for k in self.keywords], "method": self.method}


@dataclass(frozen=True)
class AlgorithmProfile:
    name: str
    task_types: Tuple[str, ...]
    strengths: Tuple[str, ...]
    weaknesses: Tuple[str, ...]
    resource_requirements: str
    quality: str
    speed: str
    special_features: Tuple[str, ...]


@dataclass
class ScoredAlgorithm:
    name: str
    score: float
    strengths: List[str]
    weaknesses: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "score": self.score,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
        }


@dataclass
class Recommendation:
    recommended_algorithm: str
    confidence: float
    alternative_algorithms: List[ScoredAlgorithm]
    suggested_parameters: Dict[str, Any]
    explanation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recommendedAlgorithm": self.recommended_algorithm,
            "confidence": self.confidence,
            "alternativeAlgorithms": [a.to_dict() for a in self.alternative_algorithms],
            "suggestedParameters": dict(self.suggested_parameters),
            "explanation": self.explanation,
        }


@dataclass
class SummarizeRequest:
    text: str
    length: str = "medium"
    style: str = "informative"

    def __post_init__(self):
        require_text(self.text, "summarization")
        _require_choice(self.length, SUMMARY_LENGTHS, "length")
        _require_choice(self.style, SUMMARY_STYLES, "style")


@dataclass
class KeywordRequest:
    text: str
    count: int = 10
    method: str = "enhanced_tfidf"

    def __post_init__(self):
        require_text(self.text, "keyword extraction")
        _require_positive(self.count, "count")
        _require_choice(self.method, KEYWORD_METHODS, "method")


@dataclass
class RecommendationRequest:
    task_type: str
    text_length: int
    priority_factor: str = "balanced"
    content_domain: Optional[str] = None
    language_complexity: Optional[str] = None
    special_requirements: List[str] = field(default_factory=list)

    def __post_init__(self):
        _require_choice(self.task_type, TASK_TYPES, "task type")
        _require_positive(self.text_length, "textLength")
        _require_choice(self.priority_factor, PRIORITY_FACTORS, "priority factor")
        if self.language_complexity is not None:
            _require_choice(self.language_complexity, LANGUAGE_COMPLEXITIES, "language complexity")
        self.special_requirements = list(self.special_requirements or [])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RecommendationRequest":
        """Build from the camelCase request shape used by HTTP callers."""
        return cls(
            task_type=data.get("taskType"),
            text_length=data.get("textLength"),
            priority_factor=data.get("priorityFactor", "balanced"),
            content_domain=data.get("contentDomain"),
            language_complexity=data.get("languageComplexity"),
            special_requirements=data.get("specialRequirements") or [],
        )


@dataclass
class ProcessingOptions:
    operation: str
    summary_length: str = "medium"
    keyword_count: int = 15
    keyword_method: str = "enhanced_tfidf"

    def __post_init__(self):
        _require_choice(self.operation, OPERATIONS, "operation")
        _require_choice(self.summary_length, SUMMARY_LENGTHS, "summary length")
        _require_positive(self.keyword_count, "keyword count")
        _require_choice(self.keyword_method, KEYWORD_METHODS, "keyword method")


@dataclass
class ProcessingResult:
    extracted_text: str
    operation: str
    processed_text: Optional[str] = None
    keywords: Optional[List[KeywordResult]] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"extractedText": self.extracted_text, "operation": self.operation}
        if self.processed_text is not None:
            out["processedText"] = self.processed_text
        if self.keywords is not None:
            out["keywords"] = [k.to_dict() for k in self.keywords]
        return out
