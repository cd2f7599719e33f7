import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class MatchWeights:
    match_anywhere: float = 1
    match_start_of_word: float = 1
    match_whole_word: float = 1
    # Sum of the three weights above, used for normalization.
    maximum_score: float = 3
    # Balances recency against word relevancy. At 2/3, recency outweighs a
    # mid-word match (1/3) but a whole-word match (3/3) outweighs recency.
    recency_calibrator: float = 2.0 / 3.0

    def __post_init__(self):
        total = self.match_anywhere + self.match_start_of_word + self.match_whole_word
        if self.maximum_score != total:
            raise ValueError(
                f"maximum_score must equal the sum of the match weights ({total}), "
                f"got {self.maximum_score}"
            )


MATCH_WEIGHTS = MatchWeights()


@dataclass
class Candidate:
    url: str
    title: str | None = None
    last_accessed: float | datetime = 0.0

    @property
    def fields(self) -> list[str]:
        return [self.url, self.title or ""]


@dataclass
class ScoredCandidate:
    candidate: Candidate
    relevancy: float = 0.0
    recency: float = 0.0

    @property
    def score(self) -> float:
        return self.relevancy + self.recency


@dataclass
class TraceEvent:
    op: str
    payload: dict[str, Any]
    t: float = field(default_factory=time.time)


@dataclass
class Session:
    terms: list[str]
    candidates: list[Candidate] = field(default_factory=list)
    scored: list[ScoredCandidate] = field(default_factory=list)
    trace: list[TraceEvent] = field(default_factory=list)

    @classmethod
    def from_query(cls, text: str, candidates=None) -> "Session":
        from .utils import split_terms

        return cls(terms=split_terms(text), candidates=list(candidates or []))

    def log(self, op, **payload):
        self.trace.append(TraceEvent(op, payload))
