"""Ranked roster PDF generator.

Renders the ordered admission records as a letter-size table:
- Small-caps title centered at the top of every page
- Column headers with a red rule underneath
- One row per record in rank order, paginated as needed
- "Page n of m" footer
"""

import fitz  # PyMuPDF

from .models import DOMESTIC, INTERNATIONAL

# --- Page layout constants (letter: 612 x 792 pt) ---
PAGE_W = 612
PAGE_H = 792
LEFT_MARGIN = 48
RIGHT_MARGIN = PAGE_W - 48

# (header, left x) for each column
COLUMNS = [
    ('RANK', LEFT_MARGIN),
    ('NAME', 92),
    ('BIRTH DATE', 300),
    ('GPA', 390),
    ('STATUS', 440),
    ('TOEFL', 520),
]

RED = (0.8, 0, 0)
BLACK = (0, 0, 0)
GRAY = (0.4, 0.4, 0.4)

TITLE_Y = 50
HEADERS_Y = 88
RULE_Y = HEADERS_Y + 6
ROWS_START_Y = 112
ROWS_BOTTOM_Y = PAGE_H - 48
FOOTER_Y = PAGE_H - 20

TITLE_LARGE = 18
TITLE_SMALL = 13
HEADER_SIZE = 9
ROW_SIZE = 10
FOOTER_SIZE = 8
ROW_HEIGHT = ROW_SIZE * 1.5

FONT_REGULAR = 'Times-Roman'
FONT_BOLD = 'Times-Bold'

STATUS_LABELS = {DOMESTIC: 'Domestic', INTERNATIONAL: 'International'}


def rows_per_page() -> int:
    return int((ROWS_BOTTOM_Y - ROWS_START_Y) // ROW_HEIGHT) + 1


def generate_roster_pdf(records, output_path: str, title: str = 'Admissions Roster'):
    """Generate the ranked roster PDF.

    Args:
        records: StudentRecords, already in rank order.
        output_path: Where to save the PDF.
        title: Heading drawn on every page.

    Raises:
        OSError: output_path cannot be written.
    """
    records = list(records)
    per_page = rows_per_page()
    chunks = [records[i:i + per_page] for i in range(0, len(records), per_page)] or [[]]

    doc = fitz.open()
    for page_idx, chunk in enumerate(chunks):
        page = doc.new_page(width=PAGE_W, height=PAGE_H)
        _draw_small_caps(page, PAGE_W / 2, TITLE_Y, title, TITLE_LARGE, TITLE_SMALL)
        _draw_headers(page)

        y = ROWS_START_Y
        first_rank = page_idx * per_page + 1
        for offset, record in enumerate(chunk):
            _draw_row(page, y, first_rank + offset, record)
            y += ROW_HEIGHT

        _draw_footer(page, page_idx + 1, len(chunks))

    # Serialize first so an unwritable path surfaces as OSError
    data = doc.tobytes()
    doc.close()
    with open(output_path, 'wb') as f:
        f.write(data)


# --- Drawing functions ---

def _draw_small_caps(page, center_x, y, text, large_size, small_size):
    """Draw text in small caps, centered horizontally.

    First letter of each word at large_size, rest at small_size.
    """
    total_width = _measure_small_caps_width(text, large_size, small_size)
    x = center_x - total_width / 2

    for wi, word in enumerate(text.split()):
        if wi > 0:
            x += fitz.get_text_length(' ', fontname=FONT_BOLD, fontsize=large_size)
        for ci, ch in enumerate(word):
            ch_upper = ch.upper()
            fs = large_size if ci == 0 else small_size
            page.insert_text(fitz.Point(x, y), ch_upper,
                             fontname=FONT_BOLD, fontsize=fs, color=BLACK)
            x += fitz.get_text_length(ch_upper, fontname=FONT_BOLD, fontsize=fs)


def _measure_small_caps_width(text, large_size, small_size):
    total = 0
    for wi, word in enumerate(text.split()):
        if wi > 0:
            total += fitz.get_text_length(' ', fontname=FONT_BOLD, fontsize=large_size)
        for ci, ch in enumerate(word):
            fs = large_size if ci == 0 else small_size
            total += fitz.get_text_length(ch.upper(), fontname=FONT_BOLD, fontsize=fs)
    return total


def _draw_headers(page):
    for header, x in COLUMNS:
        page.insert_text(fitz.Point(x, HEADERS_Y), header,
                         fontname=FONT_BOLD, fontsize=HEADER_SIZE, color=BLACK)
    page.draw_line(fitz.Point(LEFT_MARGIN, RULE_Y),
                   fitz.Point(RIGHT_MARGIN, RULE_Y),
                   color=RED, width=0.75)


def _row_cells(rank: int, record) -> list[str]:
    toefl = str(record.toefl) if record.status == INTERNATIONAL else '-'
    return [
        str(rank),
        f'{record.last_name}, {record.first_name}',
        record.birth_date_text,
        f'{record.gpa:.3f}',
        STATUS_LABELS.get(record.status, record.status),
        toefl,
    ]


def _draw_row(page, y, rank, record):
    for (_, x), cell in zip(COLUMNS, _row_cells(rank, record)):
        page.insert_text(fitz.Point(x, y), cell,
                         fontname=FONT_REGULAR, fontsize=ROW_SIZE, color=BLACK)


def _draw_footer(page, page_number, page_count):
    text = f'Page {page_number} of {page_count}'
    tw = fitz.get_text_length(text, fontname=FONT_REGULAR, fontsize=FOOTER_SIZE)
    page.insert_text(fitz.Point(PAGE_W / 2 - tw / 2, FOOTER_Y), text,
                     fontname=FONT_REGULAR, fontsize=FOOTER_SIZE, color=GRAY)
