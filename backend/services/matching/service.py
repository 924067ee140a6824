"""
Reconciliation Matcher - ties a payment row seen on the MakeEdu site to one
stored textbook request.

The two systems share no identifier, so matching works on names:
- student name must match exactly after normalization
- book name matches loosely: either normalized title contains the other,
  because MakeEdu abbreviates or extends the titles we store
"""
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r'\s+')


def normalize(text: Optional[str]) -> str:
    """Remove all whitespace and lower-case. '김 철수' and '김철수' become equal."""
    if not text:
        return ''
    return _WHITESPACE.sub('', text).lower()


class MatchOutcome(str, Enum):
    MATCHED = 'matched'
    NOT_FOUND = 'not_found'
    AMBIGUOUS = 'ambiguous'


@dataclass
class MatchCandidate:
    """A stored request offered to the operator for disambiguation."""
    request_id: str
    student_name: str
    book_name: str
    teacher_name: str
    created_at: Optional[str]

    def to_dict(self) -> dict:
        return {
            'id': self.request_id,
            'student_name': self.student_name,
            'book_name': self.book_name,
            'teacher_name': self.teacher_name,
            'created_at': self.created_at,
        }


@dataclass
class MatchResult:
    outcome: MatchOutcome
    record: object = None
    candidates: List[MatchCandidate] = field(default_factory=list)

    @property
    def matched(self) -> bool:
        return self.outcome == MatchOutcome.MATCHED


class ReconciliationMatcher:
    """MakeEdu 학생/교재 → 교재 요청서 매칭"""

    def is_candidate(self, record, student_key: str, book_key: str) -> bool:
        """
        Check one stored record against normalized query keys.

        Records without a student name never match, and neither does an
        empty book name on either side (an empty string is a substring of
        everything).
        """
        record_student = normalize(getattr(record, 'student_name', ''))
        if not record_student or record_student != student_key:
            return False

        record_book = normalize(getattr(record, 'book_name', ''))
        if not record_book or not book_key:
            return False

        return book_key in record_book or record_book in book_key

    def find_candidates(self, student_name: str, book_name: str, records: Iterable) -> list:
        student_key = normalize(student_name)
        book_key = normalize(book_name)
        return [r for r in records if self.is_candidate(r, student_key, book_key)]

    def match(self, student_name: str, book_name: str, records: Iterable) -> MatchResult:
        """
        Find the single record for an external (student, book) pair.

        Returns:
            MatchResult with MATCHED and the record, NOT_FOUND, or AMBIGUOUS
            with every candidate. Never raises for zero or many matches.
        """
        candidates = self.find_candidates(student_name, book_name, records)

        if not candidates:
            logger.info(
                "No request matched",
                extra={'student_name': student_name, 'book_name': book_name}
            )
            return MatchResult(outcome=MatchOutcome.NOT_FOUND)

        if len(candidates) == 1:
            return MatchResult(outcome=MatchOutcome.MATCHED, record=candidates[0])

        logger.info(
            "Multiple requests matched",
            extra={'student_name': student_name, 'book_name': book_name, 'count': len(candidates)}
        )
        return MatchResult(
            outcome=MatchOutcome.AMBIGUOUS,
            candidates=[self._to_candidate(r) for r in candidates]
        )

    def _to_candidate(self, record) -> MatchCandidate:
        created_at = getattr(record, 'created_at', None)
        return MatchCandidate(
            request_id=record.id,
            student_name=record.student_name,
            book_name=record.book_name,
            teacher_name=getattr(record, 'teacher_name', ''),
            created_at=created_at.isoformat() if created_at else None,
        )
