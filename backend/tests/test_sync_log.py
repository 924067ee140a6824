"""
Tests for the capped sync log.
"""
import pytest

from infrastructure.cache import FakeCache
from services.sync_log import SyncLog, SyncLogEntry


def entry(i):
    return SyncLogEntry(
        student_name=f'학생{i}',
        book_name='초5-1 기본',
        is_completed=True,
        is_paid=i % 2 == 0,
        synced_at=f'2025-03-03T09:{i:02d}:00+00:00',
    )


def test_newest_first():
    log = SyncLog(FakeCache())
    log.append(entry(1))
    log.append(entry(2))
    assert [e.student_name for e in log.entries()] == ['학생2', '학생1']


def test_fifty_first_append_evicts_oldest():
    log = SyncLog(FakeCache(), limit=50)
    for i in range(51):
        log.append(entry(i))

    entries = log.entries()
    assert len(entries) == 50
    assert entries[0].student_name == '학생50'
    assert entries[-1].student_name == '학생1'
    assert '학생0' not in {e.student_name for e in entries}


def test_entries_limit():
    log = SyncLog(FakeCache())
    for i in range(5):
        log.append(entry(i))
    assert [e.student_name for e in log.entries(limit=2)] == ['학생4', '학생3']


def test_empty_and_clear():
    log = SyncLog(FakeCache())
    assert log.entries() == []
    log.append(entry(1))
    log.clear()
    assert log.entries() == []


def test_invalid_limit():
    with pytest.raises(ValueError):
        SyncLog(FakeCache(), limit=0)
