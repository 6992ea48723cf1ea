#!/usr/bin/env python3
"""CLI entry point for ranking a file of student admission records.

Usage:
    python process_roster.py students.txt ranked.txt 3
    python process_roster.py students.txt ranked.txt 2 --pdf ranked.pdf \\
        --title "Fall 2026 International Applicants"

Options: 1 = Domestic only, 2 = International only, 3 = all students.
Exit code is 0 on success and 1 on any error. An invalid record stops the
run and leaves a single error line in the output file.
"""

import argparse
import os
import sys

# Add parent directory to path for imports (skip when frozen by PyInstaller)
if not getattr(sys, 'frozen', False):
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from admissions.core.models import RosterConfig
from admissions.core.errors import RecordParseError
from admissions.core.status_filter import filter_by_option, is_valid_option
from admissions.core.sorter import rank_records
from admissions.core.output_generator import write_roster, write_error
from admissions.core.pdf_generator import generate_roster_pdf
from admissions.adapters.line_adapter import LineAdapter


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        print(f'Error: {message}', file=sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog='rank-students',
                             description='Rank student admission records')
    parser.add_argument('input', help='Input file, one record per line')
    parser.add_argument('output', help='Output file for the ranked records')
    parser.add_argument('option', type=int,
                        help='1 = Domestic only, 2 = International only, 3 = all')
    parser.add_argument('--pdf', default=None,
                        help='Also write the ranked roster to this PDF file')
    parser.add_argument('--title', default='Admissions Roster',
                        help='Heading for the PDF roster')
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress progress messages')
    return parser


def run(config: RosterConfig) -> int:
    """Run the parse -> filter -> sort -> write pipeline. Returns the exit code."""
    def report(msg):
        if not config.quiet:
            print(msg)

    adapter = LineAdapter()
    parse_error = None
    records = []

    report(f'Parsing {config.input_path}...')
    try:
        records = adapter.parse(config.input_path)
    except OSError:
        print('Error: Could not open input file.', file=sys.stderr)
        return 1
    except RecordParseError as e:
        parse_error = e

    try:
        out = open(config.output_path, 'w', encoding='utf-8')
    except OSError:
        print('Error: Could not open output file.', file=sys.stderr)
        return 1

    with out:
        if parse_error is not None:
            print(f'Error: {parse_error}', file=sys.stderr)
            write_error(out)
            return 1

        report(f'Parsed {len(records)} records')
        selected = filter_by_option(records, config.option)
        if len(selected) != len(records):
            report(f'Kept {len(selected)} records for option {config.option}')

        ranked = rank_records(selected)
        write_roster(ranked, out)
    report(f'Generated {config.output_path}')

    if config.pdf_path:
        try:
            generate_roster_pdf(ranked, config.pdf_path, title=config.pdf_title)
        except OSError:
            print('Error: Could not write PDF file.', file=sys.stderr)
            return 1
        report(f'Generated {config.pdf_path}')

    report('\nDone!')
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not is_valid_option(args.option):
        print('Error: Invalid option. Must be 1, 2, or 3.', file=sys.stderr)
        return 1

    config = RosterConfig(
        input_path=args.input,
        output_path=args.output,
        option=args.option,
        pdf_path=args.pdf,
        pdf_title=args.title,
        quiet=args.quiet,
    )

    try:
        return run(config)
    except MemoryError:
        print('Memory allocation failed', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
