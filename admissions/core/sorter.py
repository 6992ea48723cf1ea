"""Stable merge sort over admission records."""

from .ranking import compare_records


def merge_sort(records, compare=compare_records) -> list:
    """Return a new list with records ordered by compare.

    Top-down merge sort: split at the midpoint, sort each half, then merge.
    On ties the left half's element is taken first, so equal records keep
    their input order. The input sequence is not modified.
    """
    items = list(records)
    if len(items) <= 1:
        return items

    mid = len(items) // 2
    left = merge_sort(items[:mid], compare)
    right = merge_sort(items[mid:], compare)
    return _merge(left, right, compare)


def _merge(left: list, right: list, compare) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if compare(left[i], right[j]) <= 0:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1

    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def rank_records(records) -> list:
    """Order records by the admissions ranking."""
    return merge_sort(records, compare_records)
