"""
Payment rows scraped from a saved MakeEdu class page.

Row contract:
- student: <a class="dl_pop st_..."> (title attribute, else link text)
- book: first <a class="btnPayName"> in the same <tr>
- paid: first <input class="checkPayYn changeCheck"> in the same <tr>, checked or not
Rows without a student name are skipped, as are student links outside a <tr>.
"""
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import List, Optional


@dataclass(frozen=True)
class PaymentRow:
    student_name: str
    book_name: str
    is_paid: bool


class _PaymentTableParser(HTMLParser):

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.rows: List[PaymentRow] = []
        self._open_rows: list = []
        self._capture: Optional[dict] = None

    def handle_starttag(self, tag, attrs):
        attrs = dict(attrs)
        class_attr = attrs.get('class') or ''
        classes = class_attr.split()

        if tag == 'tr':
            self._open_rows.append({'students': [], 'book': None, 'paid': None})
            return

        if not self._open_rows:
            return
        row = self._open_rows[-1]

        if tag == 'a' and 'dl_pop' in classes and 'st_' in class_attr:
            self._capture = {'kind': 'student', 'row': row, 'text': [], 'title': attrs.get('title')}
        elif tag == 'a' and 'btnPayName' in classes and row['book'] is None:
            self._capture = {'kind': 'book', 'row': row, 'text': []}
        elif tag == 'input' and 'checkPayYn' in classes and 'changeCheck' in classes:
            if row['paid'] is None:
                row['paid'] = 'checked' in attrs

    def handle_data(self, data):
        if self._capture is not None:
            self._capture['text'].append(data)

    def handle_endtag(self, tag):
        if tag == 'a' and self._capture is not None:
            capture, self._capture = self._capture, None
            text = ''.join(capture['text']).strip()
            if capture['kind'] == 'student':
                capture['row']['students'].append(capture['title'] or text)
            else:
                capture['row']['book'] = text
        elif tag == 'tr' and self._open_rows:
            self._flush(self._open_rows.pop())

    def close(self):
        super().close()
        while self._open_rows:
            self._flush(self._open_rows.pop())

    def _flush(self, row: dict) -> None:
        for name in row['students']:
            if name:
                self.rows.append(PaymentRow(
                    student_name=name,
                    book_name=row['book'] or '',
                    is_paid=bool(row['paid']),
                ))


def parse_payment_rows(html: str) -> List[PaymentRow]:
    """Extract (student, book, paid) rows from a MakeEdu page."""
    parser = _PaymentTableParser()
    parser.feed(html)
    parser.close()
    return parser.rows
