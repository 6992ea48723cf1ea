"""Data models for the student admissions ranker."""

from dataclasses import dataclass


MONTHS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
          'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']

MIN_YEAR = 1950
MAX_YEAR = 2010
MIN_DAY = 1
MAX_DAY = 31          # Not checked against the month's real length
MIN_GPA = 0.0
MAX_GPA = 4.301       # Above 4.0 to allow weighted GPAs
MIN_TOEFL = 0
MAX_TOEFL = 120

DOMESTIC = 'D'
INTERNATIONAL = 'I'

# International records that omit the score are stored with 0, not None
DEFAULT_INTERNATIONAL_TOEFL = 0

_MONTH_ORDINALS = {m.lower(): i + 1 for i, m in enumerate(MONTHS)}


def month_ordinal(text: str) -> int | None:
    """Map a month abbreviation ('mar', 'MAR', 'Mar') to 1-12, or None."""
    if not isinstance(text, str):
        return None
    return _MONTH_ORDINALS.get(text.lower())


def normalize_month(text: str) -> str | None:
    """Canonical spelling of a month abbreviation ('MAR' -> 'Mar')."""
    ordinal = month_ordinal(text)
    if ordinal is None:
        return None
    return MONTHS[ordinal - 1]


@dataclass(frozen=True)
class StudentRecord:
    """One validated admission record."""
    first_name: str
    last_name: str
    birth_month: str          # Canonical abbreviation, e.g. "Mar"
    birth_day: int
    birth_year: int
    gpa: float
    status: str               # DOMESTIC or INTERNATIONAL
    toefl: int | None = None  # None means no score applies

    @property
    def is_domestic(self) -> bool:
        return self.status == DOMESTIC

    @property
    def is_international(self) -> bool:
        return self.status == INTERNATIONAL

    @property
    def month_number(self) -> int | None:
        return month_ordinal(self.birth_month)

    @property
    def birth_date_text(self) -> str:
        return f'{self.birth_month}-{self.birth_day}-{self.birth_year}'


@dataclass
class RosterConfig:
    """Settings for a single ranking run."""
    input_path: str
    output_path: str
    option: int                   # 1 = Domestic, 2 = International, 3 = all
    pdf_path: str | None = None   # Optional PDF copy of the ranked roster
    pdf_title: str = 'Admissions Roster'
    quiet: bool = False
