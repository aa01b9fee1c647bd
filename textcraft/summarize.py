from __future__ import annotations
import logging
import math
import random
from typing import List, Optional

from .config import SummaryConfig, BM25Config, DEFAULT_SUMMARY
from .datatypes import ScoredSentence, SummaryDetails, SummarizeRequest
from .features import compute_bm25plus, compute_idf_smoothed, compute_tf, compute_tfidf, extract_phrases
from .graphing import cluster_sentences
from .paraphrase import light_paraphrase, simplify_sentence
from .preprocessing import preprocess_text
from .scoring import composite_scores, merge_keyword_weights

logger = logging.getLogger(__name__)


def target_sentence_count(n_sentences: int, length: str, cfg: Optional[SummaryConfig] = None) -> int:
    cfg = cfg or DEFAULT_SUMMARY
    return max(1, math.ceil(n_sentences * cfg.length_ratios[length]))


def select_sentences(scored: List[ScoredSentence], k: int,
                     diversity_override: float = 0.8) -> List[ScoredSentence]:
    """
    Take the top-k by score, at most one per cluster unless a sentence scores
    at least `diversity_override`. Short of k after that pass, fill up from
    the ranking regardless of cluster. Result is in reading order.
    """
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    selected: List[ScoredSentence] = []
    taken_clusters = set()
    for s in ranked:
        if len(selected) >= k:
            break
        if s.cluster in taken_clusters and s.score < diversity_override:
            continue
        selected.append(s)
        taken_clusters.add(s.cluster)

    if len(selected) < k:
        chosen = {s.index for s in selected}
        for s in ranked:
            if len(selected) >= k:
                break
            if s.index not in chosen:
                selected.append(s)
                chosen.add(s.index)

    selected.sort(key=lambda s: s.index)
    return selected


def render_summary(sentences: List[str], style: str = "informative",
                   rng: Optional[random.Random] = None) -> str:
    if style == "bullet_points":
        return "\n\n".join(f"• {s}" for s in sentences)
    if style == "simplified":
        return " ".join(simplify_sentence(s) for s in sentences)
    # informative: light rewrite of every other sentence
    rng = rng or random.Random()
    out = [light_paraphrase(s, rng) if i % 2 == 1 else s for i, s in enumerate(sentences)]
    return " ".join(out)


def summarize_with_details(text: str, length: str = "medium", style: str = "informative",
                           rng: Optional[random.Random] = None,
                           cfg: Optional[SummaryConfig] = None,
                           bm25_cfg: Optional[BM25Config] = None) -> SummaryDetails:
    request = SummarizeRequest(text=text, length=length, style=style)
    cfg = cfg or DEFAULT_SUMMARY

    doc = preprocess_text(request.text)
    sentences = [s.text for s in doc.sentences]
    documents = doc.documents
    k = target_sentence_count(len(sentences), request.length, cfg)
    logger.debug("Summarizing %d sentences over %d documents, target %d", len(sentences), len(documents), k)

    bm25 = compute_bm25plus(request.text, sentences, bm25_cfg)
    idf = compute_idf_smoothed(documents)
    tfidf = compute_tfidf(compute_tf(request.text), idf)
    phrases = extract_phrases(request.text, cfg.phrase_size)
    weights = merge_keyword_weights(tfidf, phrases, len(documents), cfg)

    scores = composite_scores(sentences, weights, phrases, cfg)
    clusters = cluster_sentences(sentences, threshold=cfg.cluster_threshold)
    scored = [ScoredSentence(sentence=s, index=i, score=scores[i], cluster=clusters[i])
              for i, s in enumerate(sentences)]

    selected = select_sentences(scored, k, diversity_override=cfg.diversity_override)
    logger.debug("Selected sentences %s", [s.index for s in selected])

    summary = render_summary([s.sentence for s in selected], request.style, rng=rng)
    return SummaryDetails(
        summary=summary,
        sentences=sentences,
        documents=documents,
        target_count=k,
        clusters=clusters,
        bm25=bm25,
        idf=idf,
        tfidf=tfidf,
        phrases=phrases,
        keyword_weights=weights,
        scored=scored,
        selected=[s.index for s in selected],
    )


def summarize(text: str, length: str = "medium", style: str = "informative",
              rng: Optional[random.Random] = None, cfg: Optional[SummaryConfig] = None) -> str:
    # Pipeline glue
    return summarize_with_details(text, length=length, style=style, rng=rng, cfg=cfg).summary
