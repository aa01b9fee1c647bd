from __future__ import annotations
import logging
import math
from collections import Counter
from typing import List, Optional

from .config import KeywordConfig, DEFAULT_KEYWORDS
from .datatypes import KeywordExtraction, KeywordRequest, KeywordResult
from .features import compute_idf, compute_tf, compute_tfidf, extract_phrases, rank_terms
from .preprocessing import STOPWORDS, build_documents, content_words, tokenize_sentences

logger = logging.getLogger(__name__)


def _rank(candidates: List[KeywordResult]) -> List[KeywordResult]:
    # stable: equal scores keep first-seen order
    return sorted(candidates, key=lambda k: k.score, reverse=True)


def normalize_scores(keywords: List[KeywordResult]) -> List[KeywordResult]:
    """Divide by the best score so the top keyword scores 1.0."""
    if not keywords:
        return []
    top = max(k.score for k in keywords)
    if top <= 0:
        return [KeywordResult(k.keyword, 0.0) for k in keywords]
    return [KeywordResult(k.keyword, min(1.0, k.score / top)) for k in keywords]


def _tfidf_candidates(text: str, documents: List[str], count: int) -> List[KeywordResult]:
    tfidf = compute_tfidf(compute_tf(text), compute_idf(documents))
    return [KeywordResult(t, s) for t, s in rank_terms(tfidf, count)]


def _phrase_candidates(text: str, n: int, doc_count: int, boost: float) -> List[KeywordResult]:
    out: List[KeywordResult] = []
    for phrase, freq in extract_phrases(text, n).items():
        words = phrase.split(" ")
        if freq <= 1 or words[0] in STOPWORDS or words[-1] in STOPWORDS:
            continue
        out.append(KeywordResult(phrase, freq / doc_count * boost))
    return out


def standard_tfidf(text: str, documents: List[str], count: int) -> List[KeywordResult]:
    return normalize_scores(_tfidf_candidates(text, documents, count))


def enhanced_tfidf(text: str, documents: List[str], count: int,
                   cfg: Optional[KeywordConfig] = None) -> List[KeywordResult]:
    """TF-IDF words plus repeated bigrams (x1.2) and trigrams (x1.3)."""
    cfg = cfg or DEFAULT_KEYWORDS
    doc_count = len(documents)
    candidates = _tfidf_candidates(text, documents, math.ceil(count * cfg.candidate_factor))
    candidates += _phrase_candidates(text, 2, doc_count, cfg.bigram_boost)
    candidates += _phrase_candidates(text, 3, doc_count, cfg.trigram_boost)
    return normalize_scores(_rank(candidates)[:count])


def bert_based(text: str, documents: List[str], count: int,
               cfg: Optional[KeywordConfig] = None) -> List[KeywordResult]:
    """
    Context-weighted keywords without a language model.

    Candidates are TF-IDF words plus multi-word phrases from the enhanced
    ranking. A candidate is boosted when its words show up in the first
    sentence of each document (the title-like position). Candidates contained
    in an already accepted, higher-scoring one are dropped.
    """
    cfg = cfg or DEFAULT_KEYWORDS
    words = _tfidf_candidates(text, documents, math.ceil(count * cfg.bert_tfidf_factor))
    phrases = [k for k in enhanced_tfidf(text, documents, math.ceil(count * cfg.bert_phrase_factor), cfg)
               if " " in k.keyword]

    titles = [(tokenize_sentences(doc) or [""])[0] for doc in documents]
    title_counts = Counter(w for t in titles for w in content_words(t))

    boosted: List[KeywordResult] = []
    for k in words + phrases:
        factor = 1.0
        if " " not in k.keyword:
            if title_counts[k.keyword]:
                factor += cfg.title_word_boost * (title_counts[k.keyword] / len(titles))
        else:
            parts = k.keyword.split(" ")
            covered = sum(1 for p in parts if title_counts[p])
            if covered:
                factor += cfg.title_phrase_boost * (covered / len(parts))
        boosted.append(KeywordResult(k.keyword, k.score * factor))

    accepted: List[KeywordResult] = []
    for k in _rank(boosted):
        if any(k.keyword in seen.keyword for seen in accepted):
            continue
        accepted.append(k)
        if len(accepted) >= count:
            break
    return normalize_scores(accepted)


def extract_keywords(text: str, count: int = 10, method: str = "enhanced_tfidf",
                     cfg: Optional[KeywordConfig] = None) -> KeywordExtraction:
    """Rank keywords with `method`; the result carries the method name exactly as requested."""
    request = KeywordRequest(text=text, count=count, method=method)
    documents = build_documents(request.text)
    logger.debug("Extracting %d keywords with %s over %d documents",
                 request.count, request.method, len(documents))

    if request.method == "standard_tfidf":
        keywords = standard_tfidf(request.text, documents, request.count)
    elif request.method == "bert_based":
        keywords = bert_based(request.text, documents, request.count, cfg)
    else:
        keywords = enhanced_tfidf(request.text, documents, request.count, cfg)
    return KeywordExtraction(keywords=keywords, method=request.method)
