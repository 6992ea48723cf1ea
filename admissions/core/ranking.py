"""Ranking comparator for admission records.

Records are ordered by a cascade of keys; the first key that differs decides:
  1. Birth year          ascending
  2. Birth month         ascending (Jan=1 ... Dec=12)
  3. Birth day           ascending
  4. Last name           ascending, ASCII case-insensitive
  5. First name          ascending, ASCII case-insensitive
  6. GPA                 descending
  7. TOEFL               descending; a record with no score ranks ahead of
                         every record that has one
  8. Status              Domestic ahead of International

Records equal on all eight keys compare as 0 and keep their input order
through the stable merge sort.
"""

import functools
import string

from .models import StudentRecord, DOMESTIC


_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(text: str) -> str:
    """Lower-case ASCII letters only; other characters compare as-is."""
    return text.translate(_ASCII_FOLD)


def _sign(a, b) -> int:
    return (a > b) - (a < b)


def _compare_toefl(a: int | None, b: int | None) -> int:
    if a == b:
        return 0
    # Absent score goes first
    if a is None:
        return -1
    if b is None:
        return 1
    return _sign(b, a)


def compare_records(a: StudentRecord, b: StudentRecord) -> int:
    """Compare two records; returns -1, 0 or 1."""
    result = _sign(a.birth_year, b.birth_year)
    if result:
        return result

    result = _sign(a.month_number, b.month_number)
    if result:
        return result

    result = _sign(a.birth_day, b.birth_day)
    if result:
        return result

    result = _sign(_fold(a.last_name), _fold(b.last_name))
    if result:
        return result

    result = _sign(_fold(a.first_name), _fold(b.first_name))
    if result:
        return result

    # GPA is descending
    result = _sign(b.gpa, a.gpa)
    if result:
        return result

    result = _compare_toefl(a.toefl, b.toefl)
    if result:
        return result

    return _sign(b.status == DOMESTIC, a.status == DOMESTIC)


ranking_key = functools.cmp_to_key(compare_records)
