"""
Tests for the log formatters.
"""
import json
import sys
import logging

from infrastructure.logging import DevelopmentFormatter, StructuredFormatter


def make_record(**extra):
    record = logging.LogRecord(
        name='CreateRequestCommand',
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg='Request created',
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_structured_formatter_keeps_extra_fields():
    line = StructuredFormatter().format(make_record(request_id='abc', student_name='김철수'))

    data = json.loads(line)
    assert data['level'] == 'INFO'
    assert data['logger'] == 'CreateRequestCommand'
    assert data['message'] == 'Request created'
    assert data['request_id'] == 'abc'
    assert data['student_name'] == '김철수'


def test_structured_formatter_includes_exception():
    try:
        raise ValueError('broken')
    except ValueError:
        record = make_record()
        record.exc_info = sys.exc_info()

    data = json.loads(StructuredFormatter().format(record))
    assert 'ValueError: broken' in data['exception']


def test_development_formatter_lists_extra_fields():
    line = DevelopmentFormatter().format(make_record(request_id='abc'))

    assert '[CreateRequestCommand]' in line
    assert 'Request created' in line
    assert 'request_id=abc' in line
