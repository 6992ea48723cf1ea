"""Exceptions raised while reading admission records."""


class AdmissionsError(Exception):
    """Base exception for the admissions ranker."""


class RecordParseError(AdmissionsError):
    """An input line is malformed or fails validation.

    Attributes:
        line: The offending raw line, without its trailing newline.
        line_number: 1-based position in the input, when known.
    """
    reason = 'Invalid input format'

    def __init__(self, line: str, line_number: int | None = None, detail: str = ''):
        self.line = line
        self.line_number = line_number
        self.detail = detail
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = f' (line {self.line_number})' if self.line_number is not None else ''
        msg = f'{self.reason}{where}: {self.line}'
        if self.detail:
            msg += f' [{self.detail}]'
        return msg


class InvalidFormatError(RecordParseError):
    """Wrong field count, a malformed field, or an unknown status."""


class InvalidDateError(RecordParseError):
    reason = 'Invalid date'


class InvalidGpaError(RecordParseError):
    reason = 'Invalid GPA'


class InvalidToeflError(RecordParseError):
    reason = 'Invalid TOEFL score for international student'
