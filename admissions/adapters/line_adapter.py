"""Adapter for whitespace-separated admission record lines.

Line format:
    <first> <last> <Mon>-<day>-<year> <gpa> <status>[ <toefl>]

  - <Mon> is a three-letter month abbreviation (any case)
  - <status> is D (Domestic) or I (International)
  - <toefl> only appears on International lines; if it is left off the
    score defaults to 0. Domestic lines never carry a score.

Validation stops at the first bad line; a blank line counts as a bad line.
Checks run in this order:
format (including the TOEFL range), then date, then GPA.
"""

import math
import re

from .base import BaseAdapter
from admissions.core.errors import (
    InvalidFormatError, InvalidDateError, InvalidGpaError, InvalidToeflError,
)
from admissions.core.models import (
    StudentRecord, normalize_month,
    MIN_YEAR, MAX_YEAR, MIN_DAY, MAX_DAY, MIN_GPA, MAX_GPA,
    MIN_TOEFL, MAX_TOEFL, DOMESTIC, INTERNATIONAL, DEFAULT_INTERNATIONAL_TOEFL,
)


# "Mar-5-1999" -> ("Mar", "5", "1999"); month spelling is checked later
_DATE_RE = re.compile(r'^(\S{3})-([+-]?\d+)-([+-]?\d+)$', re.ASCII)
# Plain ASCII numerals only; no underscores, nan/inf or non-ASCII digits
_GPA_RE = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$', re.ASCII)
_TOEFL_RE = re.compile(r'^[+-]?\d+$', re.ASCII)


class LineAdapter(BaseAdapter):
    """Parse one admission record per line."""

    def parse_lines(self, lines) -> list:
        records = []
        for line_number, line in enumerate(lines, start=1):
            records.append(self.parse_line(line, line_number))
        return records

    def parse_line(self, line: str, line_number: int | None = None) -> StudentRecord:
        """Parse and validate a single line, raising RecordParseError on failure."""
        raw = line.rstrip('\r\n')
        tokens = raw.split()

        if len(tokens) not in (5, 6):
            raise InvalidFormatError(raw, line_number,
                                     f'expected 5 or 6 fields, got {len(tokens)}')

        first_name, last_name, date_text, gpa_text, status = tokens[:5]

        date_match = _DATE_RE.match(date_text)
        if not date_match:
            raise InvalidFormatError(raw, line_number, f'bad date field {date_text!r}')
        month_text, day_text, year_text = date_match.groups()

        if not _GPA_RE.match(gpa_text):
            raise InvalidFormatError(raw, line_number, f'bad GPA field {gpa_text!r}')
        gpa = float(gpa_text)

        toefl = self._parse_toefl(raw, line_number, status, tokens[5:])

        month = normalize_month(month_text)
        day = int(day_text)
        year = int(year_text)
        if month is None or not (MIN_YEAR <= year <= MAX_YEAR) or not (MIN_DAY <= day <= MAX_DAY):
            raise InvalidDateError(raw, line_number)

        if not math.isfinite(gpa) or not (MIN_GPA <= gpa <= MAX_GPA):
            raise InvalidGpaError(raw, line_number)

        return StudentRecord(
            first_name=first_name,
            last_name=last_name,
            birth_month=month,
            birth_day=day,
            birth_year=year,
            gpa=gpa,
            status=status,
            toefl=toefl,
        )

    @staticmethod
    def _parse_toefl(raw: str, line_number, status: str, rest: list) -> int | None:
        """Resolve the TOEFL column for a status; None for Domestic."""
        if status == DOMESTIC and not rest:
            return None

        if status == INTERNATIONAL:
            if not rest:
                return DEFAULT_INTERNATIONAL_TOEFL
            if not _TOEFL_RE.match(rest[0]):
                raise InvalidFormatError(raw, line_number, f'bad TOEFL field {rest[0]!r}')
            score = int(rest[0])
            if not (MIN_TOEFL <= score <= MAX_TOEFL):
                raise InvalidToeflError(raw, line_number)
            return score

        if status == DOMESTIC:
            raise InvalidFormatError(raw, line_number, 'domestic record with a TOEFL score')
        raise InvalidFormatError(raw, line_number, f'unknown status {status!r}')
