"""Relevancy scores for completion candidates (history entries, bookmarks, ...).

Word relevancy measures how well query terms match a candidate's url and title,
in [0, 1]. Recency measures how recently it was visited, in
[0, weights.recency_calibrator]. Combining the two and ordering is left to the
caller.
"""

import time
from collections.abc import Sequence
from datetime import datetime

from .cache import PatternCache
from .core import MATCH_WEIGHTS, MatchWeights

WORD_BOUNDARY = r"\b"
RECENCY_WINDOW = 60 * 60 * 24 * 30  # seconds

_default_cache: PatternCache | None = None


def default_cache() -> PatternCache:
    global _default_cache
    if _default_cache is None:
        _default_cache = PatternCache()
    return _default_cache


def reset_default_cache():
    default_cache().clear()


def _require_sequence(name: str, value):
    if isinstance(value, str):
        raise TypeError(f"{name} must be a sequence of strings, not a str: {value!r}")


def matches(
    terms: Sequence[str], fields: Sequence[str], cache: PatternCache | None = None
) -> bool:
    """True when every term matches at least one of `fields`.

    Used to prune irrelevant candidates before ranking them.
    """
    _require_sequence("terms", terms)
    _require_sequence("fields", fields)
    cache = default_cache() if cache is None else cache
    for term in terms:
        pattern = cache.get(term)
        if not any(pattern.search(f) for f in fields):
            return False
    return True


def score_term(
    term: str,
    field: str,
    cache: PatternCache | None = None,
    weights: MatchWeights = MATCH_WEIGHTS,
) -> tuple[float, int]:
    """Score `term` against `field`.

    Returns (score, count): score is in [0, weights.maximum_score] and count is
    the number of characters of `field` covered by matches.
    """
    cache = default_cache() if cache is None else cache
    score = 0
    count = 0
    non_matching = cache.get(term).split(field)
    if len(non_matching) > 1:
        score = weights.match_anywhere
        count = len(field) - sum(len(part) for part in non_matching)
        if cache.get(term, WORD_BOUNDARY).search(field):
            score += weights.match_start_of_word
            if cache.get(term, WORD_BOUNDARY, WORD_BOUNDARY).search(field):
                score += weights.match_whole_word
    return score, min(count, len(field))


def normalize_difference(count: int, length: int) -> float:
    """Percentage closeness of two numbers, in [0, 1].

    Both zero counts as a perfect fit (1.0).
    """
    top = max(count, length)
    if top == 0:
        return 1.0
    return (top - abs(count - length)) / top


def word_relevancy(
    terms: Sequence[str],
    url: str,
    title: str | None = None,
    cache: PatternCache | None = None,
    weights: MatchWeights = MATCH_WEIGHTS,
) -> float:
    """How well `terms` match `url` and `title`, in [0, 1]."""
    _require_sequence("terms", terms)
    if not terms:
        return 0.0
    cache = default_cache() if cache is None else cache

    url_score = title_score = 0.0
    url_count = title_count = 0
    for term in terms:
        s, c = score_term(term, url, cache, weights)
        url_score += s
        url_count += c
        if title:
            s, c = score_term(term, title, cache, weights)
            title_score += s
            title_count += c

    maximum_possible = weights.maximum_score * len(terms)

    url_score /= maximum_possible
    url_score *= normalize_difference(url_count, len(url))

    if title:
        title_score /= maximum_possible
        title_score *= normalize_difference(title_count, len(title))
    else:
        title_score = url_score

    # A long url can score poorly; don't let it pull down a good title match.
    if url_score < title_score:
        url_score = title_score

    return (url_score + title_score) / 2


def recency_score(
    last_accessed: float | datetime,
    now: float | None = None,
    window: float = RECENCY_WINDOW,
    weights: MatchWeights = MATCH_WEIGHTS,
) -> float:
    """Cubic decay over `window` seconds, scaled by the recency calibrator.

    Anything visited `window` or more seconds ago scores 0.
    """
    if window <= 0:
        raise ValueError(f"window must be positive, got {window}")
    if isinstance(last_accessed, datetime):
        last_accessed = last_accessed.timestamp()
    if now is None:
        now = time.time()
    age = now - last_accessed
    difference = min(1.0, max(0.0, window - age) / window)
    return difference**3 * weights.recency_calibrator
