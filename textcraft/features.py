from __future__ import annotations
from typing import Dict, List, Tuple, Optional, Iterable
from collections import Counter
import math

from .config import BM25Config, DEFAULT_BM25
from .datatypes import TermWeights
from .preprocessing import tokenize_words, content_words, is_content_word


def compute_tf(text: str) -> TermWeights:
    """
    TF(t) = count(t) / |text|

    Only content words (not a stopword, 3+ characters) get an entry, but the
    denominator is the total token count, stopwords included.
    """
    words = tokenize_words(text)
    if not words:
        return {}
    total = len(words)
    counts = Counter(w for w in words if is_content_word(w))
    return {t: c / total for t, c in counts.items()}


def _document_frequencies(documents: Iterable[str]) -> Tuple[Counter, int]:
    df: Counter = Counter()
    n_docs = 0
    for doc in documents:
        n_docs += 1
        df.update(set(content_words(doc)))  # once per document
    return df, n_docs


def compute_idf(documents: List[str]) -> TermWeights:
    """
    IDF(t) = log10((N + 1) / (DF + 1)) + 1

    Never below 1, so TF-IDF never vanishes for a term that occurs.
    """
    df, n_docs = _document_frequencies(documents)
    return {t: math.log10((n_docs + 1.0) / (d + 1.0)) + 1.0 for t, d in df.items()}


def compute_idf_smoothed(documents: List[str]) -> TermWeights:
    """IDF(t) = ln((N + 1) / (DF + 1) + 1), the summarizer's variant."""
    df, n_docs = _document_frequencies(documents)
    return {t: math.log((n_docs + 1.0) / (d + 1.0) + 1.0) for t, d in df.items()}


def compute_tfidf(tf: TermWeights, idf: TermWeights) -> TermWeights:
    """TF-IDF(t) = TF(t) * IDF(t); a term missing from the IDF map counts 1."""
    return {t: w * idf.get(t, 1.0) for t, w in tf.items()}


def compute_bm25plus(text: str, sentences: List[str], cfg: Optional[BM25Config] = None) -> TermWeights:
    """
    BM25+ weight of every content word, with each sentence as a mini-document.

        s(t, S) = (k1 + 1) * f / (k1 * (1 - b + b * |S| / avgdl) + f) + delta

    where f is the count of t in S and avgdl = tokens(text) / #sentences.
    The word's weight is the mean of s(t, S) over all sentences; a sentence
    without the word still adds delta.
    """
    cfg = cfg or DEFAULT_BM25
    if not sentences:
        return {}
    words = tokenize_words(text)
    if not words:
        return {}
    avg_len = len(words) / len(sentences)

    sent_counts = []
    for s in sentences:
        toks = tokenize_words(s)
        sent_counts.append((Counter(toks), len(toks)))

    result: TermWeights = {}
    for word in Counter(w for w in words if is_content_word(w)):
        total = 0.0
        for counts, length in sent_counts:
            f = counts.get(word, 0)
            norm = cfg.k1 * (1.0 - cfg.b + cfg.b * (length / avg_len))
            total += ((cfg.k1 + 1.0) * f) / (norm + f) + cfg.delta
        result[word] = total / len(sentences)
    return result


def extract_phrases(text: str, n: int = 2) -> Dict[str, int]:
    """Counts of every run of n consecutive content words, overlaps included."""
    words = content_words(text)
    phrases: Counter = Counter()
    for i in range(len(words) - n + 1):
        phrases[" ".join(words[i:i + n])] += 1
    return dict(phrases)


def rank_terms(weights: Dict[str, float], limit: Optional[int] = None) -> List[Tuple[str, float]]:
    """Sort by score descending; equal scores keep first-seen order."""
    ranked = sorted(weights.items(), key=lambda kv: kv[1], reverse=True)
    return ranked if limit is None else ranked[:limit]
