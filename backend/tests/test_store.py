"""
Tests for the request store.
"""
from datetime import date

import pytest

from services.exceptions import AlreadyExists, RecordNotFound, ValidationFailure
from services.store import RequestStore


@pytest.fixture
def store():
    return RequestStore()


def complete(**fields):
    return dict(is_completed=True, is_paid=True, is_ordered=True, **fields)


@pytest.mark.django_db
class TestCreate:

    def test_create_and_get(self, store, clock):
        store.create({
            'id': '박선생_김철수_초51기본_20250303093000000',
            'student_name': '김철수',
            'teacher_name': '박선생',
            'book_name': '초5-1 기본',
            'request_date': date(2025, 3, 3),
            'price': 12000,
            'created_at': clock.now(),
        })
        record = store.get('박선생_김철수_초51기본_20250303093000000')
        assert record.student_name == '김철수'
        assert record.is_completed is False
        assert record.completed_at is None

    def test_duplicate_id_rejected(self, store, make_request, clock):
        existing = make_request()
        with pytest.raises(AlreadyExists):
            store.create({
                'id': existing.id,
                'student_name': '다른학생',
                'book_name': '다른 교재',
                'request_date': date(2025, 3, 3),
                'created_at': clock.now(),
            })
        assert store.get(existing.id).student_name == '김철수'

    def test_missing_id_rejected(self, store):
        with pytest.raises(ValidationFailure):
            store.create({'student_name': '김철수'})


@pytest.mark.django_db
class TestList:

    def test_partitions_cover_every_record_newest_first(self, store, make_request):
        first = make_request(student_name='가')
        done = make_request(student_name='나', **complete())
        last = make_request(student_name='다', is_completed=True, is_paid=True)

        incomplete = store.list(filter='incomplete', page=1, page_size=20)
        finished = store.list(filter='complete', page=1, page_size=20)

        assert [r.id for r in incomplete.requests] == [last.id, first.id]
        assert [r.id for r in finished.requests] == [done.id]
        assert incomplete.total_count + finished.total_count == 3
        assert incomplete.opposite_count == finished.total_count == 1
        assert finished.opposite_count == incomplete.total_count == 2

    def test_pagination(self, store, make_request):
        records = [make_request(student_name=f'학생{i}') for i in range(5)]

        page = store.list(filter='incomplete', page=2, page_size=2)

        assert [r.id for r in page.requests] == [records[2].id, records[1].id]
        assert page.total_count == 5
        assert page.total_pages == 3
        assert page.current_page == 2
        assert page.has_next_page and page.has_prev_page

    def test_page_past_end_is_empty(self, store, make_request):
        make_request()
        page = store.list(filter='incomplete', page=3, page_size=20)
        assert page.requests == []
        assert page.total_count == 1
        assert not page.has_next_page

    def test_empty_store(self, store, db):
        page = store.list(filter='incomplete', page=1, page_size=20)
        assert page.total_count == 0
        assert page.total_pages == 0
        assert not page.has_next_page
        assert not page.has_prev_page

    def test_search_matches_student_book_or_teacher(self, store, make_request):
        make_request(student_name='김철수', book_name='초5-1 기본', teacher_name='박선생')
        make_request(student_name='이영희', book_name='중1-1 심화', teacher_name='최선생')

        assert store.list(search='철수').total_count == 1
        assert store.list(search='심화').total_count == 1
        assert store.list(search='최선생').total_count == 1
        assert store.list(search='없는이름').total_count == 0

    def test_search_applies_to_opposite_count(self, store, make_request):
        make_request(student_name='김철수')
        make_request(student_name='김철수', book_name='초5-2 기본', **complete())
        make_request(student_name='이영희', **complete())

        page = store.list(filter='incomplete', search='김철수')
        assert page.total_count == 1
        assert page.opposite_count == 1

    @pytest.mark.parametrize('kwargs', [
        {'filter': 'all'},
        {'page': 0},
        {'page_size': 0},
        {'page_size': 101},
    ])
    def test_invalid_arguments(self, store, db, kwargs):
        with pytest.raises(ValidationFailure):
            store.list(**kwargs)


@pytest.mark.django_db
class TestUpdateDelete:

    def test_update_merges_fields(self, store, make_request, clock):
        record = make_request()
        updated = store.update(record.id, {'is_ordered': True, 'ordered_at': clock.now()})
        assert updated.is_ordered is True
        assert updated.ordered_at == clock.now()
        assert updated.book_name == record.book_name

    def test_update_missing(self, store, db):
        with pytest.raises(RecordNotFound):
            store.update('없는_요청', {'is_paid': True})

    def test_delete(self, store, make_request):
        record = make_request()
        store.delete(record.id)
        with pytest.raises(RecordNotFound):
            store.get(record.id)

    def test_delete_missing(self, store, db):
        with pytest.raises(RecordNotFound):
            store.delete('없는_요청')


@pytest.mark.django_db
def test_count_by_status_counts_unset_flags(store, make_request):
    make_request(student_name='가')
    make_request(student_name='나', is_completed=True)
    make_request(student_name='다', is_completed=True, is_paid=True)
    make_request(student_name='라', **complete())

    counts = store.count_by_status()

    assert counts.to_dict() == {'registered': 1, 'paid': 2, 'ordered': 3, 'total': 4}
