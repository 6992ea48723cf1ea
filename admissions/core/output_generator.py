"""Text output for ranked admission records.

Each record is written on its own line:
    <first> <last> <Mon>-<day>-<year> <gpa:3 decimals> <status>[ <toefl>]
The TOEFL column is only written for International students.
"""

ERROR_LINE = 'Error: Invalid input format.'


def format_record(record) -> str:
    line = (f'{record.first_name} {record.last_name} {record.birth_date_text} '
            f'{record.gpa:.3f} {record.status}')
    if record.is_international:
        line += f' {record.toefl}'
    return line


def write_roster(records, stream):
    """Write records, one per line, to an open text stream."""
    for record in records:
        stream.write(format_record(record) + '\n')


def write_error(stream):
    """Write the single error line that replaces the roster on bad input."""
    stream.write(ERROR_LINE + '\n')
