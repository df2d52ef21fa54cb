#!/usr/bin/env python3
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from vies.columns import COLUMN_COUNT
from vies.csv_parser import MIN_FIELDS, parse_csv

path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("data/vies.csv")

def peek(path: Path, n_head=5, n_tail=5):
    rows = parse_csv(path.read_text(encoding="utf-8"))
    if not rows:
        print("No rows in", path)
        return
    header, data = rows[0], rows[1:]
    kept = [r for r in data if len(r) >= MIN_FIELDS]
    print("Header:", header)
    print("Total rows:", len(data))
    print("Dropped (fewer than 2 fields):", len(data) - len(kept))
    odd = [r for r in kept if len(r) != COLUMN_COUNT]
    if odd:
        print(f"Rows without {COLUMN_COUNT} fields:", len(odd))
    print("\nFirst rows:")
    for r in kept[:n_head]:
        print(r)
    print("\nLast rows:")
    for r in kept[-n_tail:]:
        print(r)

if __name__ == "__main__":
    if not path.exists():
        print("File not found:", path)
    else:
        peek(path)
