"""
Tests for parsing payment rows out of a MakeEdu class page.
"""
from services.matching import PaymentRow, parse_payment_rows

PAGE = """
<table>
  <tr>
    <td><a class="dl_pop st_1021" title="김철수">김철수(초5)</a></td>
    <td><a class="btnPayName">초5-1 기본 1권</a></td>
    <td><input type="checkbox" class="checkPayYn changeCheck" checked></td>
  </tr>
  <tr>
    <td><a class="dl_pop st_1022">이영희</a></td>
    <td><a class="btnPayName"> 중1-1 심화 </a><a class="btnPayName">다른 교재</a></td>
    <td><input type="checkbox" class="checkPayYn changeCheck"></td>
  </tr>
  <tr>
    <td><a class="dl_pop st_1023" title=""></a></td>
    <td><a class="btnPayName">초3-1 기본</a></td>
  </tr>
  <tr><td>합계</td></tr>
</table>
<a class="dl_pop st_9999" title="표 밖의 학생">표 밖</a>
"""


def test_rows_extracted_in_page_order():
    rows = parse_payment_rows(PAGE)
    assert rows == [
        PaymentRow(student_name='김철수', book_name='초5-1 기본 1권', is_paid=True),
        PaymentRow(student_name='이영희', book_name='중1-1 심화', is_paid=False),
    ]


def test_title_preferred_over_link_text():
    rows = parse_payment_rows(PAGE)
    assert rows[0].student_name == '김철수'


def test_row_without_checkbox_is_unpaid():
    html = (
        '<table><tr><td><a class="dl_pop st_1" title="박민수">박민수</a></td>'
        '<td><a class="btnPayName">초4-2 심화</a></td></tr></table>'
    )
    assert parse_payment_rows(html) == [
        PaymentRow(student_name='박민수', book_name='초4-2 심화', is_paid=False)
    ]


def test_empty_page():
    assert parse_payment_rows('') == []
