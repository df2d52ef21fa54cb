"""
Per-type sort keys for table cells.

Grades follow the French sport scale (``5``, ``5+``, ``6a``, ``6a+`` ... ``9c+``)
and map to ``tier*100 + letter*10 + (5 if '+')``. Dates are ``D/M/Y``.
Absent and unparseable values collapse to fixed sentinel keys instead of
raising, so a sort never fails on dirty cells.
"""
from __future__ import annotations
import re
import unicodedata
from datetime import date, timedelta
from typing import NamedTuple, Optional, Tuple

PLACEHOLDER = "-"

GRADE_ABSENT = -1     # "" or "-"
GRADE_MALFORMED = 0   # present but not a grade
DATE_SENTINEL = 0     # absent or unparseable date

GRADE_RE = re.compile(r"^([0-9]+)([A-C]?)(\+?)$")
NUMBER_RE = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def is_absent(token: Optional[str]) -> bool:
    """True for missing cells and the ``-`` placeholder used by the sheet."""
    if token is None:
        return True
    s = token.strip()
    return not s or s == PLACEHOLDER


# ----- grades -----

class Grade(NamedTuple):
    tier: int
    letter: str   # "", "A", "B" or "C"
    plus: bool

    @property
    def sort_value(self) -> int:
        letter_rank = ord(self.letter) - ord("A") + 1 if self.letter else 0
        return self.tier * 100 + letter_rank * 10 + (5 if self.plus else 0)


def parse_grade(token: str) -> Optional[Grade]:
    """Parse ``"6a+"``-style tokens; returns None when the token is not a grade."""
    m = GRADE_RE.match(token.strip().upper())
    if not m:
        return None
    return Grade(int(m.group(1)), m.group(2), bool(m.group(3)))


def grade_to_sort_value(token: Optional[str]) -> int:
    if is_absent(token):
        return GRADE_ABSENT
    grade = parse_grade(token)
    if grade is None:
        return GRADE_MALFORMED
    return grade.sort_value


# ----- dates -----

def parse_date(token: str) -> Optional[date]:
    """
    Parse ``DD/MM/YYYY`` (1-2 digit day/month allowed). Two-digit years are 19xx.

    Out-of-range days and months roll over like a calendar constructor would:
    ``31/04/2021`` is 1 May 2021 and ``0/3/2021`` is 28 February 2021.
    """
    parts = token.strip().split("/")
    if len(parts) != 3:
        return None
    try:
        day, month, year = (int(p) for p in parts)
        if 0 <= year <= 99:
            year += 1900
        year += (month - 1) // 12
        month = (month - 1) % 12 + 1
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def date_to_sort_value(token: Optional[str]) -> int:
    if is_absent(token):
        return DATE_SENTINEL
    parsed = parse_date(token)
    if parsed is None:
        return DATE_SENTINEL
    return parsed.toordinal()


# ----- numbers and text -----

def number_sort_value(token: Optional[str]) -> float:
    """Leading-number coercion: ``"15m"`` -> 15.0, anything unparsable -> 0.0."""
    m = NUMBER_RE.match((token or "").strip())
    return float(m.group(0)) if m else 0.0


def _char_class(c: str) -> int:
    # whitespace < punctuation < symbols < digits < letters
    cat = unicodedata.category(c)
    if c.isspace():
        return 0
    if cat.startswith("P"):
        return 1
    if cat.startswith("S"):
        return 2
    if cat.startswith("N"):
        return 3
    return 4


def text_sort_value(token: Optional[str]) -> Tuple[Tuple[int, str], ...]:
    """
    Base-strength collation key: accents and case are ignored, and
    punctuation such as the Catalan middle dot in ``l·l`` sorts before letters.
    """
    decomposed = unicodedata.normalize("NFKD", (token or "").strip())
    folded = "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()
    return tuple((_char_class(c), c) for c in folded)
