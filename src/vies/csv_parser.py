"""Lenient CSV reader for the spreadsheet export.

The export is not a validated format, so the scanner never fails: an
unbalanced quote simply leaves the rest of the line in quoted mode.
Lines are split on ``\\n`` or ``\\r\\n`` and whitespace-only lines are
skipped. Fields are trimmed when committed.
"""
from __future__ import annotations
import logging
import re
from enum import Enum
from typing import List

from .columns import Row

logger = logging.getLogger(__name__)

LINE_RE = re.compile(r"\r?\n")
MIN_FIELDS = 2


class _State(Enum):
    UNQUOTED = 0
    QUOTED = 1
    QUOTED_SEEN_QUOTE = 2   # inside quotes, just read a '"'


def parse_line(line: str) -> Row:
    fields: Row = []
    buf: List[str] = []
    state = _State.UNQUOTED

    for ch in line:
        if state is _State.QUOTED_SEEN_QUOTE:
            if ch == '"':
                # "" inside quotes is a literal quote
                buf.append('"')
                state = _State.QUOTED
                continue
            state = _State.UNQUOTED  # the quote closed the quoted section

        if state is _State.QUOTED:
            if ch == '"':
                state = _State.QUOTED_SEEN_QUOTE
            else:
                buf.append(ch)
        elif ch == '"':
            state = _State.QUOTED
        elif ch == ",":
            fields.append("".join(buf).strip())
            buf = []
        else:
            buf.append(ch)

    fields.append("".join(buf).strip())
    return fields


def parse_csv(text: str) -> List[Row]:
    """Split ``text`` into rows of trimmed fields, in line order."""
    return [parse_line(line) for line in LINE_RE.split(text) if line.strip()]


def load_rows(text: str, has_header: bool = True) -> List[Row]:
    """
    Parse the export and keep only queryable rows.

    The first row is dropped as the header when ``has_header`` is set, and
    rows with fewer than two fields are discarded as blank/malformed noise.
    """
    rows = parse_csv(text)
    if has_header and rows:
        rows = rows[1:]
    kept = [row for row in rows if len(row) >= MIN_FIELDS]
    if len(kept) != len(rows):
        logger.debug("Dropped %d malformed rows", len(rows) - len(kept))
    return kept
