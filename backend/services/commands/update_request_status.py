"""
Update Request Status Commands - operator flag transitions.

PATCH /requests/{id}/status and POST /requests/bulk-status
Both go through the lifecycle manager so timestamps always follow their flags.
"""
from typing import Optional, List, Dict, Any, Mapping
from dataclasses import dataclass, field

from services.exceptions import ServiceError, ValidationFailure
from services.lifecycle import StatusFlag, transition
from services.store import to_dict

from .base import BaseCommand

FLAG_NAMES = tuple(flag.value for flag in StatusFlag)


@dataclass
class UpdateRequestStatusResult:
    """Result of a status change. `request` is the stored record after the write."""
    success: bool
    request: Optional[Dict[str, Any]] = None
    changed: bool = False
    error: Optional[str] = None
    error_code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None


@dataclass
class BulkUpdateStatusResult:
    success: bool
    updated_ids: List[str] = field(default_factory=list)
    failed_ids: List[str] = field(default_factory=list)
    error: Optional[str] = None
    error_code: Optional[str] = None


class UpdateRequestStatusCommand(BaseCommand[UpdateRequestStatusResult]):
    """
    등록/납부/주문 상태 변경

    PATCH /requests/{id}/status
    Setting a flag that is already set keeps its original timestamp.
    """

    def execute(self, request_id: str, changes: Mapping[str, bool]) -> UpdateRequestStatusResult:
        unknown = sorted(set(changes) - set(FLAG_NAMES))
        if not changes or unknown:
            error = ValidationFailure(
                f"변경할 상태는 {', '.join(FLAG_NAMES)} 중에서 지정해야 합니다.",
                details={'unknown': unknown} if unknown else None
            )
            return self.failure(UpdateRequestStatusResult, error, details=error.details)

        try:
            record = self._store.get(request_id)
            updates = transition(record, changes, self._clock.now())
            if updates:
                record = self._store.update(request_id, updates)
        except ServiceError as e:
            self.log_warning("Status change failed", request_id=request_id, error_code=e.code)
            return self.failure(UpdateRequestStatusResult, e, details=e.details)

        if updates:
            self.publish_event('request.status_changed', {
                'request_id': request_id,
                'changes': {k: v for k, v in updates.items() if k in FLAG_NAMES},
                'source': 'operator',
            })
            self.log_info(
                "Request status changed",
                request_id=request_id,
                fields=sorted(updates)
            )

        return UpdateRequestStatusResult(
            success=True,
            request=to_dict(record),
            changed=bool(updates)
        )


class BulkUpdateStatusCommand(BaseCommand[BulkUpdateStatusResult]):
    """
    여러 요청의 등록 상태 일괄 변경

    POST /requests/bulk-status
    Each id is handled on its own; one missing id does not stop the rest.
    """

    def execute(self, request_ids: List[str], is_completed: bool) -> BulkUpdateStatusResult:
        if not request_ids:
            error = ValidationFailure("선택된 요청이 없습니다.")
            return self.failure(BulkUpdateStatusResult, error)

        now = self._clock.now()
        changes = {StatusFlag.COMPLETED.value: is_completed}
        updated_ids, failed_ids = [], []

        for request_id in dict.fromkeys(request_ids):
            try:
                record = self._store.get(request_id)
                updates = transition(record, changes, now)
                if updates:
                    self._store.update(request_id, updates)
            except ServiceError as e:
                self.log_warning("Bulk status change skipped", request_id=request_id, error_code=e.code)
                failed_ids.append(request_id)
                continue
            updated_ids.append(request_id)

        if updated_ids:
            self.publish_event('request.status_changed', {
                'request_ids': updated_ids,
                'changes': changes,
                'source': 'bulk',
            })

        self.log_info(
            "Bulk status change",
            updated=len(updated_ids),
            failed=len(failed_ids),
            is_completed=is_completed
        )

        return BulkUpdateStatusResult(
            success=not failed_ids,
            updated_ids=updated_ids,
            failed_ids=failed_ids,
            error="일부 요청을 변경하지 못했습니다." if failed_ids else None,
            error_code="PARTIAL_FAILURE" if failed_ids else None
        )
