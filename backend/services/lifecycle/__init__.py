from .service import (
    StatusFlag,
    is_fully_complete,
    transition,
    reconciliation_updates,
)

__all__ = [
    'StatusFlag',
    'is_fully_complete',
    'transition',
    'reconciliation_updates',
]
