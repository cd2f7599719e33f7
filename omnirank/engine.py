import time
from collections.abc import Callable, Sequence

from . import ranking
from .cache import PatternCache
from .config import Settings
from .core import MATCH_WEIGHTS, Candidate, MatchWeights, ScoredCandidate

SECONDS_PER_DAY = 60 * 60 * 24


class RelevancyEngine:
    """
    Scores candidates against query terms with a cache it owns.

    Engines never share patterns unless they are handed the same cache (or
    `settings.shared_cache` points them at the process-wide one).
    """

    def __init__(
        self,
        cache: PatternCache | None = None,
        weights: MatchWeights = MATCH_WEIGHTS,
        recency_window_days: float | None = None,
        clock: Callable[[], float] = time.time,
        settings: Settings | None = None,
    ):
        settings = settings or Settings()
        if cache is None:
            cache = ranking.default_cache() if settings.shared_cache else PatternCache()
        if recency_window_days is None:
            recency_window_days = settings.recency_window_days
        if recency_window_days <= 0:
            raise ValueError(
                f"recency_window_days must be positive, got {recency_window_days}"
            )
        self.cache = cache
        self.weights = weights
        self.window = recency_window_days * SECONDS_PER_DAY
        self.clock = clock

    def matches(self, terms: Sequence[str], fields: Sequence[str]) -> bool:
        return ranking.matches(terms, fields, self.cache)

    def score_term(self, term: str, field: str) -> tuple[float, int]:
        return ranking.score_term(term, field, self.cache, self.weights)

    def word_relevancy(
        self, terms: Sequence[str], url: str, title: str | None = None
    ) -> float:
        return ranking.word_relevancy(terms, url, title, self.cache, self.weights)

    def recency_score(self, last_accessed) -> float:
        return ranking.recency_score(
            last_accessed, now=self.clock(), window=self.window, weights=self.weights
        )

    def score(self, terms: Sequence[str], candidate: Candidate) -> ScoredCandidate:
        return ScoredCandidate(
            candidate=candidate,
            relevancy=self.word_relevancy(terms, candidate.url, candidate.title),
            recency=self.recency_score(candidate.last_accessed),
        )

    def clear_cache(self):
        self.cache.clear()
