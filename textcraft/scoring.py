from __future__ import annotations
from typing import Dict, List, Optional

from .config import SummaryConfig, DEFAULT_SUMMARY
from .datatypes import TermWeights
from .features import rank_terms
from .preprocessing import tokenize_words


def merge_keyword_weights(tfidf: TermWeights, phrases: Dict[str, int], doc_count: int,
                          cfg: Optional[SummaryConfig] = None) -> TermWeights:
    """
    Single-word TF-IDF weights plus every phrase seen more than once:

        w(p) = (count / #documents) * (1 + (words - 1) * step) * phrase_weight
    """
    cfg = cfg or DEFAULT_SUMMARY
    weights = dict(tfidf)
    for phrase, count in phrases.items():
        if count > 1:
            n_words = len(phrase.split())
            multiplier = 1.0 + (n_words - 1) * cfg.phrase_length_step
            weights[phrase] = (count / max(1, doc_count)) * multiplier * cfg.phrase_weight
    return weights


def score_sentences(sentences: List[str], weights: TermWeights) -> List[float]:
    """Sum of the merged weights of a sentence's tokens, over (tokens + 0.1)."""
    scores: List[float] = []
    for s in sentences:
        tokens = tokenize_words(s)
        score = sum(weights.get(t, 0.0) for t in tokens)
        scores.append(score / (len(tokens) + 0.1))
    return scores


def position_weight(index: int, total: int, cfg: Optional[SummaryConfig] = None) -> float:
    """Intro sentences x1.3, conclusion x1.2, the middle fifth x0.9."""
    cfg = cfg or DEFAULT_SUMMARY
    if total < cfg.short_text_sentences:
        return 1.0
    rel = index / (total - 1)
    if rel <= 0.1:
        return 1.3
    if rel >= 0.9:
        return 1.2
    if 0.4 <= rel <= 0.6:
        return 0.9
    return 1.0


def length_factor(n_tokens: int, cfg: Optional[SummaryConfig] = None) -> float:
    cfg = cfg or DEFAULT_SUMMARY
    if n_tokens < cfg.short_sentence_tokens:
        return cfg.short_sentence_penalty
    if n_tokens > cfg.long_sentence_tokens:
        return cfg.long_sentence_penalty
    return 1.0


def top_phrases(phrases: Dict[str, int], k: int = 5) -> List[str]:
    return [p for p, _ in rank_terms(phrases, k)]


def phrase_boost(sentence: str, phrases: List[str], cfg: Optional[SummaryConfig] = None) -> float:
    """1 + boost per top phrase found verbatim in the raw sentence text."""
    cfg = cfg or DEFAULT_SUMMARY
    matches = sum(1 for p in phrases if p in sentence)
    return 1.0 + cfg.phrase_boost * matches


def composite_scores(sentences: List[str], weights: TermWeights, phrases: Dict[str, int],
                     cfg: Optional[SummaryConfig] = None) -> List[float]:
    cfg = cfg or DEFAULT_SUMMARY
    base = score_sentences(sentences, weights)
    best = top_phrases(phrases, cfg.top_phrase_count)
    total = len(sentences)
    scores: List[float] = []
    for i, s in enumerate(sentences):
        score = base[i] * position_weight(i, total, cfg)
        score *= length_factor(len(tokenize_words(s)), cfg)
        score *= phrase_boost(s, best, cfg)
        scores.append(score)
    return scores
