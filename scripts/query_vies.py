#!/usr/bin/env python3
from __future__ import annotations
import argparse
import sys
from pathlib import Path

# allow running directly without editable install
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from vies.columns import COLUMNS, parse_sort_option
from vies.config import Settings
from vies.engine import QueryEngine
from vies.fetch import FetchError, fetch_with_fallback
from vies.present import render_headers, render_row


def format_table(engine: QueryEngine) -> str:
    headers = [h["label"] + h["indicator"] for h in render_headers(engine.sort_state)]
    body = [[c.get("href", c["text"]) for c in render_row(r)] for r in engine.view()]
    widths = [max(len(x) for x in col) for col in zip(headers, *body)]
    lines = [" | ".join(h.ljust(w) for h, w in zip(headers, widths))]
    lines.append("-+-".join("-" * w for w in widths))
    for cells in body:
        lines.append(" | ".join(c.ljust(w) for c, w in zip(cells, widths)))
    return "\n".join(lines)


def main():
    ap = argparse.ArgumentParser(description="Search and sort the climbing route log.")
    ap.add_argument("--file", help="CSV export to read (default: fetch the live sheet)")
    ap.add_argument("--search", default="", help="Case-insensitive substring over name, grade, wall and zone")
    ap.add_argument("--sort", help="Sort option such as '2-asc' (column-direction)")
    ap.add_argument("--click", type=int, action="append", default=[],
                    help="Simulate header clicks on a column index; repeat to toggle")
    args = ap.parse_args()

    if args.file:
        text = Path(args.file).read_text(encoding="utf-8")
    else:
        settings = Settings.from_env()
        try:
            text = fetch_with_fallback(settings.sheet_url, settings.proxies, timeout=settings.timeout)
        except FetchError as exc:
            print(f"Could not load routes: {exc}")
            sys.exit(1)

    engine = QueryEngine()
    engine.load_text(text)

    if args.sort:
        try:
            column, direction = parse_sort_option(args.sort)
        except ValueError as exc:
            ap.error(str(exc))
        engine.sort(column, direction)
    for column in args.click:
        if not 0 <= column < len(COLUMNS):
            ap.error(f"column {column} out of range")
        engine.request_sort(column)

    engine.set_query(args.search)
    print(format_table(engine))
    print(f"\n{len(engine.view())} of {len(engine.rows)} routes (sorted {engine.sort_state.option})")


if __name__ == "__main__":
    main()
