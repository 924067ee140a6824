from .service import (
    ReconciliationMatcher,
    MatchCandidate,
    MatchOutcome,
    MatchResult,
    normalize,
)
from .page_rows import PaymentRow, parse_payment_rows

__all__ = [
    'ReconciliationMatcher',
    'MatchCandidate',
    'MatchOutcome',
    'MatchResult',
    'normalize',
    'PaymentRow',
    'parse_payment_rows',
]
