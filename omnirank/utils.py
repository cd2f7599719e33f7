import re
import time
from contextlib import contextmanager


@contextmanager
def timer():
    start = time.perf_counter()
    yield lambda: (time.perf_counter() - start)


def summarize_timings(session):
    """Return a dict of total time per op name (seconds) based on 'time' trace events."""
    totals = {}
    for ev in getattr(session, "trace", []):
        if ev.op == "time":
            name = ev.payload.get("name", "unknown")
            totals[name] = totals.get(name, 0.0) + ev.payload.get("seconds", 0.0)
    overall = next(
        (ev.payload.get("seconds") for ev in session.trace if ev.op == "time_overall"),
        None,
    )
    return {"per_op": totals, "overall": overall}


def has_uppercase(text: str) -> bool:
    return text != text.lower()


def escape_pattern(text: str) -> str:
    return re.escape(text)


def split_terms(text: str) -> list[str]:
    return text.split()
