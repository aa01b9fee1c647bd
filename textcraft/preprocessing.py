from __future__ import annotations
import re
from typing import Iterator, List, Optional

from .datatypes import Document, Sentence

# English stopwords excluded from every scoring function
STOPWORDS = frozenset({
    'a', 'about', 'above', 'after', 'again', 'against', 'all', 'am', 'an', 'and', 'any', 'are', "aren't", 'as', 'at',
    'be', 'because', 'been', 'before', 'being', 'below', 'between', 'both', 'but', 'by', "can't", 'cannot', 'could',
    "couldn't", 'did', "didn't", 'do', 'does', "doesn't", 'doing', "don't", 'down', 'during', 'each', 'few', 'for',
    'from', 'further', 'had', "hadn't", 'has', "hasn't", 'have', "haven't", 'having', 'he', "he'd", "he'll", "he's",
    'her', 'here', "here's", 'hers', 'herself', 'him', 'himself', 'his', 'how', "how's", 'i', "i'd", "i'll", "i'm",
    "i've", 'if', 'in', 'into', 'is', "isn't", 'it', "it's", 'its', 'itself', "let's", 'me', 'more', 'most', "mustn't",
    'my', 'myself', 'no', 'nor', 'not', 'of', 'off', 'on', 'once', 'only', 'or', 'other', 'ought', 'our', 'ours',
    'ourselves', 'out', 'over', 'own', 'same', "shan't", 'she', "she'd", "she'll", "she's", 'should', "shouldn't",
    'so', 'some', 'such', 'than', 'that', "that's", 'the', 'their', 'theirs', 'them', 'themselves', 'then', 'there',
    "there's", 'these', 'they', "they'd", "they'll", "they're", "they've", 'this', 'those', 'through', 'to', 'too',
    'under', 'until', 'up', 'very', 'was', "wasn't", 'we', "we'd", "we'll", "we're", "we've", 'were', "weren't",
    'what', "what's", 'when', "when's", 'where', "where's", 'which', 'while', 'who', "who's", 'whom', 'why', "why's",
    'with', "won't", 'would', "wouldn't", 'you', "you'd", "you'll", "you're", "you've", 'your', 'yours', 'yourself',
    'yourselves',
})

# Words that end in a period without ending the sentence
ABBREVIATIONS = frozenset({
    'mr', 'mrs', 'ms', 'dr', 'prof', 'sr', 'jr', 'st', 'mt', 'vs', 'etc', 'inc', 'ltd', 'co', 'corp',
    'dept', 'gen', 'gov', 'rev', 'sgt', 'capt', 'col', 'lt', 'no', 'fig', 'vol', 'approx',
})

MIN_TOKEN_LENGTH = 3

_BOUNDARY_RE = re.compile(r"([.?!])\s+(?=[A-Z])")
_LAST_WORD_RE = re.compile(r"([A-Za-z]+)$")
_NON_WORD_RE = re.compile(r"[^\w\s']|\d+")
_PARAGRAPH_RE = re.compile(r"\n[ \t]*\n+")


def _is_abbreviation(head: str) -> bool:
    m = _LAST_WORD_RE.search(head)
    if not m:
        return False
    word = m.group(1)
    if len(word) == 1:
        return word.isupper()  # initials: "J. Smith"
    return word.lower() in ABBREVIATIONS


def iter_sentences(text: str) -> Iterator[str]:
    """
    Yield sentences in reading order.

    A boundary is a line break, or `.`/`?`/`!` followed by whitespace and an
    uppercase letter. A period after an initial ("A.") or a known short
    abbreviation ("Mr.", "Dr.") is not a boundary. Blank pieces are dropped.
    """
    for line in text.split("\n"):
        start = 0
        for m in _BOUNDARY_RE.finditer(line):
            if m.group(1) == "." and _is_abbreviation(line[start:m.start(1)]):
                continue
            piece = line[start:m.end(1)].strip()
            if piece:
                yield piece
            start = m.end()
        piece = line[start:].strip()
        if piece:
            yield piece


def tokenize_sentences(text: str) -> List[str]:
    return list(iter_sentences(text))


def tokenize_words(text: str) -> List[str]:
    # keep apostrophes for contractions, drop digits and punctuation
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return cleaned.split()


def is_content_word(word: str) -> bool:
    return len(word) >= MIN_TOKEN_LENGTH and word not in STOPWORDS


def content_words(text: str) -> List[str]:
    return [w for w in tokenize_words(text) if is_content_word(w)]


def split_paragraphs(text: str) -> List[str]:
    return [p for p in _PARAGRAPH_RE.split(text) if p.strip()]


def build_documents(text: str, sentences: Optional[List[str]] = None) -> List[str]:
    """Paragraphs when the text has more than one, otherwise its sentences."""
    paragraphs = split_paragraphs(text)
    if len(paragraphs) > 1:
        return paragraphs
    return sentences if sentences is not None else tokenize_sentences(text)


def preprocess_text(text: str) -> Document:
    sents_raw = tokenize_sentences(text)
    sentences = [Sentence(idx=i, text=s, tokens=tokenize_words(s)) for i, s in enumerate(sents_raw)]
    return Document(raw_text=text, sentences=sentences, documents=build_documents(text, sents_raw))
