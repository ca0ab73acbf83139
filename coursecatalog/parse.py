"""
Parsing (text lines -> Course records).

Each line of a course file describes exactly one course:

    <category> : <name> : <day>/<month>/<year> : <level>

Important rules:
- 1 line = 1 course
- whitespace around every field is ignored
- blank lines are skipped, any other malformed line raises CourseParseError
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Iterator, Optional

from coursecatalog.model import DATE_FORMAT, Course, Level

log = logging.getLogger(__name__)

SEPARATOR = ":"


class CourseParseError(ValueError):
    """
    Raised when a line cannot be turned into a Course.

    Keeps the raw line, its 1-based number (if known) and the reason.
    """

    def __init__(self, line: str, reason: str, line_number: Optional[int] = None) -> None:
        self.line = line
        self.reason = reason
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"{where}: {reason}: {line!r}")


# ---------------------------------------------------------------------------
# Line parsing (CORE LOGIC)
# ---------------------------------------------------------------------------


def parse_course_line(line: str, line_number: Optional[int] = None) -> tuple[str, Course]:
    """
    Parses exactly one line into (category, Course).

    The category is NOT upper-cased here; that is the catalog's job.
    """

    def fail(reason: str) -> CourseParseError:
        return CourseParseError(line, reason, line_number)

    raw = line.strip()

    # Category is everything before the first separator
    category, sep, rest = raw.partition(SEPARATOR)
    if not sep:
        raise fail("missing ':' separator")

    category = category.strip()
    if not category:
        raise fail("empty category")

    fields = [f.strip() for f in rest.split(SEPARATOR)]
    if len(fields) != 3:
        raise fail(f"expected 3 fields after category, got {len(fields)}")

    name, date_str, level_str = fields
    if not name:
        raise fail("empty course name")

    try:
        publication_date = datetime.strptime(date_str, DATE_FORMAT).date()
    except ValueError:
        raise fail(f"invalid date {date_str!r} (expected day/month/year)") from None

    try:
        level = Level.from_token(level_str)
    except ValueError:
        raise fail(f"unknown level {level_str!r}") from None

    return category, Course(name=name, publication_date=publication_date, level=level)


def parse_lines(lines: Iterable[str]) -> Iterator[tuple[str, Course]]:
    """
    Lazily parses lines, numbering them from 1. Blank lines are skipped.
    """
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            log.debug("skipping blank line %d", number)
            continue
        yield parse_course_line(line, line_number=number)


# ---------------------------------------------------------------------------
# File access
# ---------------------------------------------------------------------------


def read_lines(path: str | Path) -> Iterator[str]:
    """
    Yield the lines of a UTF-8 text file without trailing newlines.
    A leading byte-order mark is dropped.

    The file stays open only while the generator is being consumed.
    """
    file_path = Path(path)
    log.debug("reading courses from %s", file_path)
    with file_path.open(encoding="utf-8-sig") as fh:
        for line in fh:
            yield line.rstrip("\r\n")
