"""Rank a small history/bookmark list the way an omnibar completer would."""
import omnirank as orank

DAY = 60 * 60 * 24
NOW = 1_700_000_000.0

HISTORY = [
    orank.Candidate(
        url="https://stackoverflow.com/questions",
        title="Stack Overflow - Where Developers Learn",
        last_accessed=NOW - 1 * DAY,
    ),
    orank.Candidate(
        url="https://github.com/stack-auth/stack",
        title="stack-auth/stack",
        last_accessed=NOW - 10 * DAY,
    ),
    orank.Candidate(
        url="https://en.wikipedia.org/wiki/Haystack",
        title="Haystack - Wikipedia",
        last_accessed=NOW - DAY / 12,
    ),
    orank.Candidate(
        url="https://news.ycombinator.com",
        title="Hacker News",
        last_accessed=NOW - DAY / 24,
    ),
    orank.Candidate(
        url="https://docs.python.org/3/library/re.html",
        title="re - Regular expression operations",
        last_accessed=NOW - 40 * DAY,
    ),
]


def by_score(session: orank.Session) -> orank.Session:
    session.scored = sorted(session.scored, key=lambda s: s.score, reverse=True)
    return session


def build_completer(settings: orank.Settings | None = None) -> orank.Stack:
    engine = orank.RelevancyEngine(clock=lambda: NOW, settings=settings)
    return orank.Stack(
        orank.Prune(engine),
        orank.Score(engine),
        orank.Lambda(by_score),
        name="HistoryCompleter",
    )


completer = build_completer()


def complete(query: str, candidates=None) -> orank.Session:
    return completer(orank.Session.from_query(query, candidates or HISTORY))


if __name__ == "__main__":
    session = complete("stack")
    orank.render_scores(session.scored, title="stack")
    orank.render_trace(session)
