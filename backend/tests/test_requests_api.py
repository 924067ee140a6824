"""
Tests for the request history API.
"""
from urllib.parse import quote

import pytest

from apps.textbook_requests.models import TextbookRequest
from services.messaging import FALLBACK_MESSAGE

BASE = '/api/v1/requests/'


def detail_url(request_id, suffix='/'):
    return f'{BASE}{quote(request_id)}{suffix}'


@pytest.mark.django_db
class TestCreate:

    def test_create(self, api_client, event_bus):
        response = api_client.post(BASE, {
            'student_name': '김철수',
            'teacher_name': '박선생',
            'book_name': '초5-1 기본',
            'book_detail': '01. 수와 연산',
            'price': 12000,
            'bank_name': '국민은행',
            'account_number': '123-45-6789',
            'account_holder': '수학학원',
        }, content_type='application/json')

        assert response.status_code == 201
        body = response.json()
        assert body['success'] is True
        assert body['request']['id'] == '박선생_김철수_초51기본_20250303093000000'
        assert body['request']['export_filename'] == '2025-03-03_김철수_초5-1 기본.png'
        event_bus.assert_event_published('request.created')

    def test_missing_book_name(self, api_client):
        response = api_client.post(BASE, {'student_name': '김철수'}, content_type='application/json')

        assert response.status_code == 400
        assert response.json()['code'] == 'VALIDATION_ERROR'
        assert not TextbookRequest.objects.exists()

    def test_blank_student_name(self, api_client):
        response = api_client.post(
            BASE, {'student_name': '   ', 'book_name': '초5-1 기본'}, content_type='application/json'
        )
        assert response.status_code == 400

    def test_duplicate_id_conflict(self, api_client):
        body = {'student_name': '김철수', 'teacher_name': '박선생', 'book_name': '초5-1 기본'}
        api_client.post(BASE, body, content_type='application/json')

        response = api_client.post(BASE, body, content_type='application/json')

        assert response.status_code == 409
        assert response.json()['code'] == 'ALREADY_EXISTS'


@pytest.mark.django_db
class TestList:

    def test_default_lists_incomplete_newest_first(self, api_client, make_request):
        older = make_request(student_name='가')
        newer = make_request(student_name='나')
        make_request(student_name='다', is_completed=True, is_paid=True, is_ordered=True)

        response = api_client.get(BASE)

        assert response.status_code == 200
        body = response.json()
        assert [r['id'] for r in body['requests']] == [newer.id, older.id]
        assert body['pagination'] == {
            'total_count': 2,
            'total_pages': 1,
            'current_page': 1,
            'has_next_page': False,
            'has_prev_page': False,
        }
        assert body['opposite_count'] == 1

    def test_complete_filter(self, api_client, make_request):
        make_request(student_name='가')
        done = make_request(student_name='나', is_completed=True, is_paid=True, is_ordered=True)

        body = api_client.get(BASE, {'filter': 'complete'}).json()

        assert [r['id'] for r in body['requests']] == [done.id]
        assert body['requests'][0]['fully_complete'] is True
        assert body['opposite_count'] == 1

    def test_paging_and_search(self, api_client, make_request):
        for i in range(3):
            make_request(student_name=f'김학생{i}')
        make_request(student_name='이영희')

        body = api_client.get(BASE, {'search': '김학생', 'page': 2, 'page_size': 2}).json()

        assert body['pagination']['total_count'] == 3
        assert body['pagination']['current_page'] == 2
        assert body['pagination']['has_prev_page'] is True
        assert [r['student_name'] for r in body['requests']] == ['김학생0']

    @pytest.mark.parametrize('params', [
        {'filter': 'all'},
        {'page': 0},
        {'page_size': 500},
        {'page': 'abc'},
    ])
    def test_invalid_params(self, api_client, db, params):
        response = api_client.get(BASE, params)
        assert response.status_code == 400
        assert response.json()['code'] == 'VALIDATION_ERROR'


@pytest.mark.django_db
class TestDetailAndDelete:

    def test_retrieve(self, api_client, make_request):
        record = make_request()

        response = api_client.get(detail_url(record.id))

        assert response.status_code == 200
        assert response.json()['request']['student_name'] == '김철수'

    def test_retrieve_missing(self, api_client, db):
        response = api_client.get(detail_url('없는_요청'))
        assert response.status_code == 404
        assert response.json()['code'] == 'REQUEST_NOT_FOUND'

    def test_delete(self, api_client, make_request):
        record = make_request()

        response = api_client.delete(detail_url(record.id))

        assert response.status_code == 200
        assert not TextbookRequest.objects.exists()
        assert api_client.delete(detail_url(record.id)).status_code == 404


@pytest.mark.django_db
class TestStatus:

    def test_requires_admin_token(self, api_client, make_request):
        record = make_request()

        response = api_client.patch(
            detail_url(record.id, '/status'), {'is_paid': True}, content_type='application/json'
        )

        assert response.status_code == 401
        assert TextbookRequest.objects.get(pk=record.id).is_paid is False

    def test_invalid_token(self, api_client, make_request):
        record = make_request()

        response = api_client.patch(
            detail_url(record.id, '/status'),
            {'is_paid': True},
            content_type='application/json',
            HTTP_AUTHORIZATION='Bearer not-a-token',
        )

        assert response.status_code == 401
        assert response.json()['code'] == 'AUTHENTICATION_FAILED'

    def test_set_flag_stamps_time(self, api_client, make_request, admin_headers):
        record = make_request()

        response = api_client.patch(
            detail_url(record.id, '/status'),
            {'is_paid': True},
            content_type='application/json',
            **admin_headers
        )

        assert response.status_code == 200
        body = response.json()
        assert body['changed'] is True
        assert body['request']['is_paid'] is True
        assert body['request']['paid_at'] == '2025-03-03T09:30:00+00:00'

    def test_repeat_keeps_timestamp(self, api_client, make_request, admin_headers, clock):
        record = make_request()
        url = detail_url(record.id, '/status')
        api_client.patch(url, {'is_ordered': True}, content_type='application/json', **admin_headers)
        clock.advance(hours=2)

        body = api_client.patch(
            url, {'is_ordered': True}, content_type='application/json', **admin_headers
        ).json()

        assert body['changed'] is False
        assert body['request']['ordered_at'] == '2025-03-03T09:30:00+00:00'

    def test_clear_nulls_timestamp(self, api_client, make_request, admin_headers, clock):
        record = make_request(is_completed=True, completed_at=clock.now())

        body = api_client.patch(
            detail_url(record.id, '/status'),
            {'is_completed': False},
            content_type='application/json',
            **admin_headers
        ).json()

        assert body['request']['is_completed'] is False
        assert body['request']['completed_at'] is None

    @pytest.mark.parametrize('payload', [{}, {'is_shipped': True}, {'is_paid': None}])
    def test_invalid_body(self, api_client, make_request, admin_headers, payload):
        record = make_request()

        response = api_client.patch(
            detail_url(record.id, '/status'), payload, content_type='application/json', **admin_headers
        )

        assert response.status_code == 400

    def test_missing_request(self, api_client, db, admin_headers):
        response = api_client.patch(
            detail_url('없는_요청', '/status'),
            {'is_paid': True},
            content_type='application/json',
            **admin_headers
        )
        assert response.status_code == 404


@pytest.mark.django_db
class TestBulkStatus:

    URL = f'{BASE}bulk-status'

    def test_requires_admin_token(self, api_client, make_request):
        record = make_request()
        response = api_client.post(
            self.URL, {'ids': [record.id], 'is_completed': True}, content_type='application/json'
        )
        assert response.status_code == 401

    def test_partial_failure(self, api_client, make_request, admin_headers):
        first = make_request(student_name='가')
        second = make_request(student_name='나')

        response = api_client.post(
            self.URL,
            {'ids': [first.id, '없는_요청', second.id], 'is_completed': True},
            content_type='application/json',
            **admin_headers
        )

        assert response.status_code == 200
        body = response.json()
        assert body['success'] is False
        assert body['updated_ids'] == [first.id, second.id]
        assert body['failed_ids'] == ['없는_요청']
        assert TextbookRequest.objects.filter(is_completed=True).count() == 2

    def test_empty_ids(self, api_client, db, admin_headers):
        response = api_client.post(
            self.URL, {'ids': [], 'is_completed': True}, content_type='application/json', **admin_headers
        )
        assert response.status_code == 400


@pytest.mark.django_db
class TestParentMessage:

    def test_without_api_key_returns_fallback(self, api_client, make_request):
        record = make_request()

        response = api_client.post(detail_url(record.id, '/message'))

        assert response.status_code == 200
        assert response.json() == {'message': FALLBACK_MESSAGE, 'generated': False}

    def test_missing_request(self, api_client, db):
        response = api_client.post(detail_url('없는_요청', '/message'))
        assert response.status_code == 404
