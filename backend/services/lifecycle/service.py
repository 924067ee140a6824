"""
Status lifecycle for textbook requests.

Each request carries three independent flags (registered, paid, ordered).
Every flag moves between pending and set; setting stamps the paired timestamp,
clearing nulls it. The functions here only compute field updates; writing them
is the record store's job.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping


class StatusFlag(str, Enum):
    """Status flags and the timestamp column paired with each."""
    COMPLETED = 'is_completed'
    PAID = 'is_paid'
    ORDERED = 'is_ordered'

    @property
    def timestamp_field(self) -> str:
        return _TIMESTAMP_FIELDS[self]


_TIMESTAMP_FIELDS = {
    StatusFlag.COMPLETED: 'completed_at',
    StatusFlag.PAID: 'paid_at',
    StatusFlag.ORDERED: 'ordered_at',
}


def is_fully_complete(record) -> bool:
    """True when all three flags are set. Never stored."""
    return all(bool(getattr(record, flag.value, False)) for flag in StatusFlag)


def transition(record, changes: Mapping[str, bool], now: datetime) -> Dict[str, Any]:
    """
    Compute the updates that move `record` to the requested flag values.

    Args:
        record: Object exposing the flag and timestamp attributes
        changes: Mapping of flag field name -> desired value
        now: Timestamp stamped on pending -> set transitions

    Returns:
        Field updates (possibly empty). A flag already in the requested state
        keeps its timestamp; a stale timestamp is repaired.

    Raises:
        ValueError: on an unknown flag name
    """
    updates: Dict[str, Any] = {}

    for name, value in changes.items():
        flag = StatusFlag(name)
        target = bool(value)
        current = bool(getattr(record, flag.value, False))
        stamped = getattr(record, flag.timestamp_field, None)

        if target and not current:
            updates[flag.value] = True
            updates[flag.timestamp_field] = now
        elif target and stamped is None:
            updates[flag.timestamp_field] = now
        elif not target and (current or stamped is not None):
            updates[flag.value] = False
            updates[flag.timestamp_field] = None

    return updates


def reconciliation_updates(is_paid: bool, now: datetime) -> Dict[str, Any]:
    """
    Updates applied when an external payment row matches a request.

    Registration is always (re)stamped. Payment is only ever set, never
    cleared: an unchecked external box leaves the paid flag untouched.
    """
    updates: Dict[str, Any] = {
        StatusFlag.COMPLETED.value: True,
        StatusFlag.COMPLETED.timestamp_field: now,
    }
    if is_paid:
        updates[StatusFlag.PAID.value] = True
        updates[StatusFlag.PAID.timestamp_field] = now
    return updates

