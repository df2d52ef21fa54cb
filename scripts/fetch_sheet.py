#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# allow running directly without editable install
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from vies.config import Settings
from vies.csv_parser import load_rows
from vies.fetch import FetchError, fetch_with_fallback


def save(out_csv: Path, settings: Settings) -> int:
    text = fetch_with_fallback(settings.sheet_url, settings.proxies, timeout=settings.timeout)
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    # keep the export byte-for-byte; parse only to report what is usable
    out_csv.write_text(text, encoding="utf-8", newline="")
    return len(load_rows(text))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Download the route log sheet as CSV.")
    parser.add_argument("out_csv", help="Output CSV path")
    parser.add_argument("--url", help="Sheet CSV export URL (default: VIES_SHEET_URL or built-in)")
    parser.add_argument("--proxy", action="append", dest="proxies",
                        help="Proxy prefix to try, in order; repeat for more. Use '' for a direct fetch.")
    parser.add_argument("--timeout", type=float, help="Per-proxy timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each proxy attempt")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    env = Settings.from_env()
    settings = Settings(
        sheet_url=args.url or env.sheet_url,
        proxies=tuple(args.proxies) if args.proxies else env.proxies,
        timeout=args.timeout or env.timeout,
    )
    out_path = Path(args.out_csv)
    try:
        n = save(out_path, settings)
    except FetchError as exc:
        print(f"Fetch failed: {exc}")
        sys.exit(1)
    print(f"Saved {out_path} ({n} routes)")
