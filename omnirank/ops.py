from .core import Session
from .engine import RelevancyEngine
from .utils import timer


def _as_session(value) -> Session:
    match value:
        case Session():
            return value
        case str():
            return Session.from_query(value)
        case list() | tuple():
            return Session(terms=list(value))
        case _:
            raise ValueError(f"Expected Session, str or list of terms, got {type(value)}")


class Op:
    name: str = "Op"

    def __call__(self, session: Session) -> Session:
        return self.forward(session)

    def forward(self, session: Session) -> Session:
        raise NotImplementedError


class Stack(Op):
    def __init__(self, *ops, name="Stack"):
        self.ops = list(ops)
        self.name = name

    def __call__(self, session: Session | str | list[str]) -> Session:
        return self.forward(_as_session(session))

    def forward(self, session: Session) -> Session:
        with timer() as t_all:
            for op in self.ops:
                with timer() as t:
                    session = op(session)
                session.log(
                    "time", name=getattr(op, "name", op.__class__.__name__), seconds=t()
                )
        session.log("time_overall", name=self.name, seconds=t_all())
        return session


class Prune(Op):
    """Drop candidates that don't match every query term in their url or title."""

    def __init__(self, engine: RelevancyEngine | None = None):
        self.engine = engine or RelevancyEngine()
        self.name = "Prune"

    def forward(self, session: Session) -> Session:
        before = len(session.candidates)
        session.candidates = [
            c for c in session.candidates if self.engine.matches(session.terms, c.fields)
        ]
        session.log(
            "prune",
            kept=len(session.candidates),
            dropped=before - len(session.candidates),
        )
        return session


class Score(Op):
    """Attach relevancy and recency to each candidate, keeping candidate order."""

    def __init__(self, engine: RelevancyEngine | None = None):
        self.engine = engine or RelevancyEngine()
        self.name = "Score"

    def forward(self, session: Session) -> Session:
        session.scored = [self.engine.score(session.terms, c) for c in session.candidates]
        cache = self.engine.cache
        session.log(
            "score",
            n=len(session.scored),
            cache=len(cache),
            hits=cache.hits,
            misses=cache.misses,
        )
        return session


class Lambda(Op):
    def __init__(self, func):
        self.func = func
        self.name = "Lambda"

    def forward(self, session: Session) -> Session:
        session.log("lambda", func=self.func.__name__)
        return self.func(session)
