"""Render scored candidates and session traces as Rich tables."""
from collections.abc import Iterable

from rich.console import Console
from rich.table import Table

from .core import ScoredCandidate, Session
from .utils import summarize_timings


def fmt(num: float) -> str:
    return f"{num:.4f}"


def render_scores(
    scored: Iterable[ScoredCandidate],
    title: str = "Scored candidates",
    console: Console | None = None,
) -> Table:
    table = Table(title=title)
    table.add_column("url")
    table.add_column("title")
    table.add_column("relevancy", justify="right")
    table.add_column("recency", justify="right")
    table.add_column("score", justify="right")

    for item in scored:
        table.add_row(
            item.candidate.url,
            item.candidate.title or "",
            fmt(item.relevancy),
            fmt(item.recency),
            fmt(item.score),
        )
    (console or Console()).print(table)
    return table


def render_trace(session: Session, console: Console | None = None) -> Table:
    table = Table(title=f"Trace for {' '.join(session.terms)!r}")
    table.add_column("op")
    table.add_column("payload")
    for ev in session.trace:
        table.add_row(
            ev.op, ", ".join(f"{k}={v}" for k, v in ev.payload.items())
        )
    (console or Console()).print(table)
    return table


def render_timings(session: Session, console: Console | None = None) -> Table:
    timings = summarize_timings(session)
    table = Table(title="Timings (ms)")
    table.add_column("op")
    table.add_column("ms", justify="right")
    for name, seconds in timings["per_op"].items():
        table.add_row(name, f"{seconds * 1000:.3f}")
    if timings["overall"] is not None:
        table.add_row("overall", f"{timings['overall'] * 1000:.3f}")
    (console or Console()).print(table)
    return table
