from .cache import PatternCache
from .config import Settings
from .core import (
    MATCH_WEIGHTS,
    Candidate,
    MatchWeights,
    ScoredCandidate,
    Session,
    TraceEvent,
)
from .engine import RelevancyEngine
from .ops import Lambda, Op, Prune, Score, Stack
from .ranking import (
    default_cache,
    matches,
    normalize_difference,
    recency_score,
    reset_default_cache,
    score_term,
    word_relevancy,
)
from .report import render_scores, render_timings, render_trace

__version__ = "0.1.0"
