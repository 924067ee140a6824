"""
Tests for the sync_makeedu_page management command.
"""
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.textbook_requests.models import TextbookRequest

PAGE = """
<table>
  <tr>
    <td><a class="dl_pop st_1" title="김철수">김철수</a></td>
    <td><a class="btnPayName">초5-1 기본 1권</a></td>
    <td><input type="checkbox" class="checkPayYn changeCheck" checked></td>
  </tr>
  <tr>
    <td><a class="dl_pop st_2" title="박민수">박민수</a></td>
    <td><a class="btnPayName">중2-1 기본</a></td>
    <td><input type="checkbox" class="checkPayYn changeCheck"></td>
  </tr>
</table>
"""


@pytest.fixture
def page_file(tmp_path):
    path = tmp_path / 'class.html'
    path.write_text(PAGE, encoding='utf-8')
    return path


@pytest.mark.django_db
class TestSyncMakeeduPage:

    def test_applies_matched_rows(self, make_request, page_file):
        record = make_request(student_name='김철수', book_name='초5-1 기본')
        out = StringIO()

        call_command('sync_makeedu_page', str(page_file), stdout=out)

        stored = TextbookRequest.objects.get(pk=record.id)
        assert stored.is_completed and stored.is_paid
        assert 'matched: 1, not found: 1, ambiguous: 0' in out.getvalue()

    def test_dry_run_changes_nothing(self, make_request, page_file):
        record = make_request(student_name='김철수', book_name='초5-1 기본')
        out = StringIO()

        call_command('sync_makeedu_page', str(page_file), '--dry-run', stdout=out)

        assert TextbookRequest.objects.get(pk=record.id).is_completed is False
        assert 'matched: 1' in out.getvalue()

    def test_missing_file(self, tmp_path):
        with pytest.raises(CommandError):
            call_command('sync_makeedu_page', str(tmp_path / 'missing.html'))
