from __future__ import annotations
import random
import re
from typing import Callable, List, Optional

TRANSITIONS = ("Moreover, ", "Additionally, ", "Furthermore, ", "In addition, ", "Also, ")

_TRANSITION_START_RE = re.compile(r"^(Moreover|Additionally|Furthermore|In addition|Also|However)")
_ACTIVE_RE = re.compile(r"([A-Z]\S*)\s+([a-z]+ed|[a-z]+s)\s+([a-z]+)")
_OPENINGS = (
    (re.compile(r"^It is "), "This is "),
    (re.compile(r"^There (is|are) "), "We can observe "),
    (re.compile(r"^The ([a-z]+) "), r"This \1 "),
    (re.compile(r"^([A-Z][a-z]+) ([a-z]+) "), r"The \1 \2 "),
)

_PARENTHETICAL_RE = re.compile(r"\([^)]*\)")
_COMMA_CLAUSE_RE = re.compile(r",\s*[^,]+(,|$)")
_WHICH_CLAUSE_RE = re.compile(r"which\s[^,]+")
_SPACES_RE = re.compile(r"\s{2,}")


def _add_transition(s: str, rng: random.Random) -> str:
    if _TRANSITION_START_RE.match(s):
        return s
    return rng.choice(TRANSITIONS) + s[0].lower() + s[1:]


def _to_passive(s: str, rng: random.Random) -> str:
    # naive "Subject verbs object" -> "object was verbs by subject"
    return _ACTIVE_RE.sub(lambda m: f"{m.group(3)} was {m.group(2)} by {m.group(1).lower()}", s, count=1)


def _reword_opening(s: str, rng: random.Random) -> str:
    for pattern, replacement in _OPENINGS:
        if pattern.search(s):
            return pattern.sub(replacement, s, count=1)
    return s


TRANSFORMS: List[Callable[[str, random.Random], str]] = [_add_transition, _to_passive, _reword_opening]


def light_paraphrase(sentence: str, rng: Optional[random.Random] = None) -> str:
    """Apply one randomly chosen surface rewrite; sentences under 4 words are kept."""
    if len(sentence.split()) < 4:
        return sentence
    rng = rng or random.Random()
    transform = rng.choice(TRANSFORMS)
    return transform(sentence, rng)


def simplify_sentence(sentence: str) -> str:
    """Drop parentheticals, trailing comma clauses and "which" clauses."""
    s = _PARENTHETICAL_RE.sub("", sentence)
    s = _COMMA_CLAUSE_RE.sub(r"\1", s)
    s = _WHICH_CLAUSE_RE.sub("", s)
    s = _SPACES_RE.sub(" ", s)
    return s.strip()
