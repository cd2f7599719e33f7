import argparse

import omnirank as orank
from examples.history_completer import HISTORY, build_completer


def main(argv=None):
    parser = argparse.ArgumentParser(description="Score the demo history for a query.")
    parser.add_argument("query", help="Query terms, separated by spaces.")
    parser.add_argument("--trace", action="store_true", help="Print the op trace.")
    args = parser.parse_args(argv)

    completer = build_completer(orank.Settings.from_env())
    session = completer(orank.Session.from_query(args.query, HISTORY))
    orank.render_scores(session.scored, title=args.query)
    if args.trace:
        orank.render_trace(session)
        orank.render_timings(session)
    return session


if __name__ == "__main__":
    main()
