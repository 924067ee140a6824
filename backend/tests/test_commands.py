"""
Tests for the write commands.
"""
from datetime import timedelta

import pytest

from apps.catalog.models import AccountSettings
from apps.textbook_requests.models import TextbookRequest
from infrastructure.cache import Cache, FakeCache
from infrastructure.event_bus import EventBus
from services.commands import (
    BulkUpdateStatusCommand,
    CreateRequestCommand,
    DeleteRequestCommand,
    SyncPaymentStatusCommand,
    UpdateRequestStatusCommand,
    build_request_id,
)
from services.sync_log import SyncLog


class BrokenEventBus(EventBus):
    def publish(self, event_type, payload):
        raise ConnectionError('broker down')


class UnreachableListCache(FakeCache):
    def push_capped(self, key, value, limit):
        raise ConnectionError('redis down')


def test_request_id_drops_symbols_from_book_name():
    request_id = build_request_id('박선생', '김철수', '초5-1 기본 (개정)', '20250303093000000')
    assert request_id == '박선생_김철수_초51기본개정_20250303093000000'


@pytest.mark.django_db
class TestCreateRequest:

    def test_creates_request(self, container, event_bus):
        result = container.get(CreateRequestCommand).execute(
            student_name='김철수',
            teacher_name='박선생',
            book_name='초5-1 기본 (개정)',
            price=12000,
            bank_name='국민은행',
            account_number='123-45-6789',
            account_holder='수학학원',
        )

        assert result.success
        assert result.request['id'] == '박선생_김철수_초51기본개정_20250303093000000'
        assert result.request['request_date'] == '2025-03-03'
        assert result.request['is_completed'] is False
        assert result.request['fully_complete'] is False
        assert TextbookRequest.objects.filter(pk=result.request['id']).exists()

        event = event_bus.assert_event_published('request.created')
        assert event['payload']['request_id'] == result.request['id']

    def test_blank_account_filled_from_settings(self, container):
        AccountSettings.objects.create(
            pk=AccountSettings.SINGLETON_ID,
            bank_name='신한은행',
            account_number='110-222-333333',
            account_holder='수학학원',
        )

        result = container.get(CreateRequestCommand).execute(
            student_name='김철수', book_name='초5-1 기본', price=12000
        )

        assert result.success
        assert result.request['bank_name'] == '신한은행'
        assert result.request['account_number'] == '110-222-333333'

    def test_given_account_kept(self, container):
        AccountSettings.objects.create(pk=AccountSettings.SINGLETON_ID, bank_name='신한은행')

        result = container.get(CreateRequestCommand).execute(
            student_name='김철수', book_name='초5-1 기본', bank_name='우리은행'
        )

        assert result.request['bank_name'] == '우리은행'
        assert result.request['account_holder'] == ''

    def test_same_millisecond_collides(self, container, event_bus):
        command = container.get(CreateRequestCommand)
        first = command.execute(student_name='김철수', teacher_name='박선생', book_name='초5-1 기본')
        event_bus.clear()

        second = command.execute(student_name='김철수', teacher_name='박선생', book_name='초5-1 기본')

        assert first.success
        assert not second.success
        assert second.error_code == 'ALREADY_EXISTS'
        assert TextbookRequest.objects.count() == 1
        event_bus.assert_no_events()

    def test_later_millisecond_is_new_request(self, container, clock):
        command = container.get(CreateRequestCommand)
        command.execute(student_name='김철수', book_name='초5-1 기본')
        clock.advance(milliseconds=1)

        result = command.execute(student_name='김철수', book_name='초5-1 기본')

        assert result.success
        assert result.request['id'].endswith('20250303093000001')
        assert TextbookRequest.objects.count() == 2

    @pytest.mark.parametrize('fields', [
        {'student_name': '  ', 'book_name': '초5-1 기본'},
        {'student_name': '김철수', 'book_name': ''},
        {'student_name': '김철수', 'book_name': '초5-1 기본', 'price': -1},
    ])
    def test_invalid_input(self, container, fields):
        result = container.get(CreateRequestCommand).execute(**fields)
        assert not result.success
        assert result.error_code == 'VALIDATION_ERROR'
        assert TextbookRequest.objects.count() == 0

    def test_event_bus_failure_does_not_fail(self, container):
        container.register_singleton(EventBus, BrokenEventBus())

        result = container.get(CreateRequestCommand).execute(
            student_name='김철수', book_name='초5-1 기본'
        )

        assert result.success
        assert TextbookRequest.objects.count() == 1


@pytest.mark.django_db
class TestUpdateStatus:

    def test_set_stamps_and_clear_nulls(self, container, make_request, clock):
        record = make_request()
        command = container.get(UpdateRequestStatusCommand)

        result = command.execute(record.id, {'is_paid': True})
        assert result.success and result.changed
        assert result.request['paid_at'] == clock.now().isoformat()

        result = command.execute(record.id, {'is_paid': False})
        assert result.request['is_paid'] is False
        assert result.request['paid_at'] is None

    def test_repeat_keeps_timestamp(self, container, make_request, clock, event_bus):
        record = make_request()
        command = container.get(UpdateRequestStatusCommand)
        command.execute(record.id, {'is_ordered': True})
        first_stamp = TextbookRequest.objects.get(pk=record.id).ordered_at
        event_bus.clear()
        clock.advance(hours=1)

        result = command.execute(record.id, {'is_ordered': True})

        assert result.success
        assert result.changed is False
        assert TextbookRequest.objects.get(pk=record.id).ordered_at == first_stamp
        event_bus.assert_no_events()

    def test_all_flags_make_fully_complete(self, container, make_request):
        record = make_request()
        result = container.get(UpdateRequestStatusCommand).execute(
            record.id, {'is_completed': True, 'is_paid': True, 'is_ordered': True}
        )
        assert result.request['fully_complete'] is True

    def test_missing_request(self, container, db):
        result = container.get(UpdateRequestStatusCommand).execute('없는_요청', {'is_paid': True})
        assert result.error_code == 'REQUEST_NOT_FOUND'

    @pytest.mark.parametrize('changes', [{}, {'is_shipped': True}])
    def test_unknown_or_empty_flags(self, container, make_request, changes):
        record = make_request()
        result = container.get(UpdateRequestStatusCommand).execute(record.id, changes)
        assert result.error_code == 'VALIDATION_ERROR'


@pytest.mark.django_db
class TestBulkStatus:

    def test_missing_id_does_not_stop_others(self, container, make_request):
        first = make_request(student_name='가')
        second = make_request(student_name='나')

        result = container.get(BulkUpdateStatusCommand).execute(
            [first.id, '없는_요청', second.id], is_completed=True
        )

        assert result.updated_ids == [first.id, second.id]
        assert result.failed_ids == ['없는_요청']
        assert result.error_code == 'PARTIAL_FAILURE'
        assert TextbookRequest.objects.filter(is_completed=True).count() == 2

    def test_clear(self, container, make_request, clock):
        record = make_request(is_completed=True, completed_at=clock.now())

        result = container.get(BulkUpdateStatusCommand).execute([record.id], is_completed=False)

        assert result.success
        stored = TextbookRequest.objects.get(pk=record.id)
        assert stored.is_completed is False
        assert stored.completed_at is None

    def test_empty_selection(self, container, db):
        result = container.get(BulkUpdateStatusCommand).execute([], is_completed=True)
        assert result.error_code == 'VALIDATION_ERROR'


@pytest.mark.django_db
class TestDeleteRequest:

    def test_delete(self, container, make_request, event_bus):
        record = make_request()
        result = container.get(DeleteRequestCommand).execute(record.id)
        assert result.success
        assert not TextbookRequest.objects.exists()
        event_bus.assert_event_published('request.deleted')

    def test_delete_missing(self, container, db):
        result = container.get(DeleteRequestCommand).execute('없는_요청')
        assert result.error_code == 'REQUEST_NOT_FOUND'


@pytest.mark.django_db
class TestSyncPaymentStatus:

    def test_match_sets_registered_and_paid(self, container, make_request, clock):
        record = make_request()

        result = container.get(SyncPaymentStatusCommand).execute(
            student_name='김 철수', book_name='초5-1 기본 1권', is_paid=True
        )

        assert result.success
        assert result.outcome == 'matched'
        stored = TextbookRequest.objects.get(pk=record.id)
        assert stored.is_completed and stored.is_paid
        assert stored.completed_at == clock.now()
        assert stored.paid_at == clock.now()

    def test_unchecked_payment_never_clears_paid(self, container, make_request, clock):
        paid_at = clock.now() - timedelta(days=1)
        record = make_request(is_paid=True, paid_at=paid_at)

        result = container.get(SyncPaymentStatusCommand).execute(
            student_name='김철수', book_name='초5-1 기본', is_paid=False
        )

        assert result.success
        stored = TextbookRequest.objects.get(pk=record.id)
        assert stored.is_paid is True
        assert stored.paid_at == paid_at
        assert stored.is_completed is True

    def test_registration_restamped_on_every_sync(self, container, make_request, clock):
        record = make_request(is_completed=True, completed_at=clock.now() - timedelta(days=2))

        container.get(SyncPaymentStatusCommand).execute(
            student_name='김철수', book_name='초5-1 기본', is_paid=False
        )

        assert TextbookRequest.objects.get(pk=record.id).completed_at == clock.now()

    def test_not_found_writes_nothing(self, container, make_request, event_bus):
        make_request()

        result = container.get(SyncPaymentStatusCommand).execute(
            student_name='이영희', book_name='초5-1 기본', is_paid=True
        )

        assert result.outcome == 'not_found'
        assert result.error_code == 'NOT_FOUND'
        assert not TextbookRequest.objects.filter(is_completed=True).exists()
        event_bus.assert_no_events()

    def test_ambiguous_writes_nothing(self, container, make_request, event_bus):
        make_request(book_name='초5-1 기본')
        make_request(book_name='초5-1 기본 2권')

        result = container.get(SyncPaymentStatusCommand).execute(
            student_name='김철수', book_name='초5-1', is_paid=True
        )

        assert result.outcome == 'ambiguous'
        assert result.error_code == 'AMBIGUOUS'
        assert len(result.candidates) == 2
        assert not TextbookRequest.objects.filter(is_completed=True).exists()
        event_bus.assert_no_events()

    def test_chosen_candidate_resolves_ambiguity(self, container, make_request):
        make_request(book_name='초5-1 기본')
        chosen = make_request(book_name='초5-1 기본 2권')

        result = container.get(SyncPaymentStatusCommand).execute(
            student_name='김철수', book_name='초5-1', is_paid=True, request_id=chosen.id
        )

        assert result.outcome == 'matched'
        assert list(TextbookRequest.objects.filter(is_paid=True).values_list('id', flat=True)) == [chosen.id]

    def test_chosen_id_must_be_a_candidate(self, container, make_request):
        make_request(book_name='초5-1 기본')
        other = make_request(student_name='이영희', book_name='중1-1 심화')

        result = container.get(SyncPaymentStatusCommand).execute(
            student_name='김철수', book_name='초5-1', is_paid=True, request_id=other.id
        )

        assert result.outcome == 'not_found'

    def test_match_appends_sync_log(self, container, make_request):
        make_request()

        container.get(SyncPaymentStatusCommand).execute(
            student_name='김철수', book_name='초5-1 기본', is_paid=True
        )

        entries = SyncLog(container.get(Cache)).entries()
        assert len(entries) == 1
        assert entries[0].student_name == '김철수'
        assert entries[0].is_paid is True
        assert entries[0].synced_at == '2025-03-03T09:30:00+00:00'

    def test_sync_log_outage_keeps_match(self, container, make_request, event_bus):
        record = make_request()
        container.register_singleton(Cache, UnreachableListCache())

        result = container.get(SyncPaymentStatusCommand).execute(
            student_name='김철수', book_name='초5-1 기본', is_paid=True
        )

        assert result.success
        assert result.outcome == 'matched'
        stored = TextbookRequest.objects.get(pk=record.id)
        assert stored.is_completed and stored.is_paid
        event_bus.assert_event_published('request.synced')
