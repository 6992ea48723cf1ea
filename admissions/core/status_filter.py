"""Domestic/International filtering selected by the CLI option."""

from .models import DOMESTIC, INTERNATIONAL


OPTION_DOMESTIC = 1
OPTION_INTERNATIONAL = 2
OPTION_ALL = 3

# Option -> status to keep (None keeps everything)
OPTION_STATUS = {
    OPTION_DOMESTIC: DOMESTIC,
    OPTION_INTERNATIONAL: INTERNATIONAL,
    OPTION_ALL: None,
}


def is_valid_option(option) -> bool:
    return option in OPTION_STATUS


def filter_by_option(records, option: int) -> list:
    """Keep the records selected by option, preserving their order."""
    if not is_valid_option(option):
        raise ValueError(f'Invalid option: {option!r}. Must be 1, 2, or 3.')

    status = OPTION_STATUS[option]
    if status is None:
        return list(records)
    return [r for r in records if r.status == status]
