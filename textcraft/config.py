from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class BM25Config:
    k1: float = 1.2      # term frequency saturation
    b: float = 0.75      # length normalization
    delta: float = 1.0   # BM25+ lower bound


def _default_length_ratios() -> Dict[str, float]:
    return {"short": 0.15, "medium": 0.30, "long": 0.45}


@dataclass(frozen=True)
class SummaryConfig:
    length_ratios: Dict[str, float] = field(default_factory=_default_length_ratios)
    cluster_threshold: float = 0.5
    diversity_override: float = 0.8  # score that lets a sentence share a cluster
    phrase_size: int = 3
    phrase_weight: float = 1.5
    phrase_length_step: float = 0.25
    top_phrase_count: int = 5
    phrase_boost: float = 0.2
    short_text_sentences: int = 5  # below this, no positional weighting
    short_sentence_tokens: int = 5
    long_sentence_tokens: int = 40
    short_sentence_penalty: float = 0.7
    long_sentence_penalty: float = 0.8


@dataclass(frozen=True)
class KeywordConfig:
    candidate_factor: float = 1.5
    bigram_boost: float = 1.2
    trigram_boost: float = 1.3
    bert_tfidf_factor: float = 1.2
    bert_phrase_factor: float = 0.8
    title_word_boost: float = 0.4
    title_phrase_boost: float = 0.3


DEFAULT_BM25 = BM25Config()
DEFAULT_SUMMARY = SummaryConfig()
DEFAULT_KEYWORDS = KeywordConfig()
