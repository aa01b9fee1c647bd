from __future__ import annotations
from typing import Dict, List
from collections import Counter
import logging
import math

from .datatypes import Edge, Graph, Sentence
from .preprocessing import tokenize_words

logger = logging.getLogger(__name__)


def cosine_similarity(v1: Dict[str, float], v2: Dict[str, float]) -> float:
    """Cosine of two sparse vectors (dict term -> weight); 0 when either is empty."""
    if not v1 or not v2:
        return 0.0
    dot = sum(w * v2[t] for t, w in v1.items() if t in v2)
    n1 = math.sqrt(sum(w * w for w in v1.values()))
    n2 = math.sqrt(sum(w * w for w in v2.values()))
    if n1 == 0.0 or n2 == 0.0:
        return 0.0
    return dot / (n1 * n2)


def term_counts(text: str) -> Counter:
    # raw counts, stopwords included
    return Counter(tokenize_words(text))


def sentence_similarity(a: str, b: str) -> float:
    return cosine_similarity(term_counts(a), term_counts(b))


def similarity_matrix(sentences: List[str]) -> List[List[float]]:
    n = len(sentences)
    vecs = [term_counts(s) for s in sentences]
    M = [[0.0] * n for _ in range(n)]
    for i in range(n):
        M[i][i] = 1.0 if vecs[i] else 0.0
        for j in range(i + 1, n):
            M[i][j] = M[j][i] = cosine_similarity(vecs[i], vecs[j])
    return M


def cluster_sentences(sentences: List[str], threshold: float = 0.5) -> List[int]:
    """
    Greedy single-pass clustering.

    Each unassigned sentence opens the next cluster id and pulls in every later
    unassigned sentence whose similarity to it (the opener only) exceeds the
    threshold. Members are not compared with each other, and assigned
    sentences are never revisited.
    """
    n = len(sentences)
    clusters = [-1] * n
    vecs = [term_counts(s) for s in sentences]
    next_id = 0
    for i in range(n):
        if clusters[i] != -1:
            continue
        clusters[i] = next_id
        for j in range(i + 1, n):
            if clusters[j] == -1 and cosine_similarity(vecs[i], vecs[j]) > threshold:
                clusters[j] = next_id
        next_id += 1
    logger.debug("Clustered %d sentences into %d clusters", n, next_id)
    return clusters


def cluster_members(clusters: List[int]) -> Dict[int, List[int]]:
    members: Dict[int, List[int]] = {}
    for idx, cid in enumerate(clusters):
        members.setdefault(cid, []).append(idx)
    return members


def build_graph(nodes: List[Sentence], simM: List[List[float]], threshold: float = 0.5) -> Graph:
    edges: List[Edge] = []
    n = len(nodes)
    for i in range(n):
        for j in range(i + 1, n):
            w = simM[i][j]
            if w > threshold:
                edges.append(Edge(i=i, j=j, weight=w))
    return Graph(nodes=nodes, edges=edges)
