"""
Pytest configuration and fixtures for textbook request desk tests.
"""
import os
from datetime import date, timedelta

import pytest
from django.test import Client

# Use fakes for testing
os.environ.setdefault('USE_FAKES', 'true')


@pytest.fixture(autouse=True)
def reset_container():
    """Reset DI container before each test."""
    from infrastructure.bootstrap import Container
    Container.reset()
    yield
    Container.reset()


@pytest.fixture
def api_client():
    """Django test client for API requests."""
    return Client()


@pytest.fixture
def container():
    from infrastructure.bootstrap import get_container
    return get_container()


@pytest.fixture
def clock(container):
    """The FakeClock every command in this test reads."""
    from infrastructure.clock import Clock
    return container.get(Clock)


@pytest.fixture
def event_bus(container):
    from infrastructure.event_bus import EventBus
    return container.get(EventBus)


@pytest.fixture
def make_request(db, clock):
    """
    Factory for stored requests.

    Each call is created one minute after the previous one, so listings
    have a stable newest-first order.
    """
    from apps.textbook_requests.models import TextbookRequest
    from services.commands import build_request_id

    created = []

    def factory(student_name='김철수', book_name='초5-1 기본', teacher_name='박선생', **fields):
        created_at = clock.now() + timedelta(minutes=len(created))
        defaults = {
            'id': build_request_id(teacher_name, student_name, book_name, str(len(created))),
            'request_date': date(2025, 3, 3),
            'price': 12000,
            'bank_name': '국민은행',
            'account_number': '123-45-6789',
            'account_holder': '수학학원',
            'created_at': created_at,
        }
        defaults.update(fields)
        record = TextbookRequest.objects.create(
            student_name=student_name,
            book_name=book_name,
            teacher_name=teacher_name,
            **defaults
        )
        created.append(record)
        return record

    return factory


@pytest.fixture
def admin_token(container):
    """Token from a successful unlock with the test secret."""
    from services.admin_gate import AdminGateService
    return container.get(AdminGateService).unlock('test-admin-secret').token


@pytest.fixture
def admin_headers(admin_token):
    """Authorization headers for admin-only requests."""
    return {'HTTP_AUTHORIZATION': f'Bearer {admin_token}'}


@pytest.fixture
def sync_headers():
    """Headers the browser extension sends."""
    return {'HTTP_X_SYNC_SECRET': 'test-sync-secret'}
