from datetime import datetime
from typing import Optional

from crm_core.app.use_cases.errors import NOT_FOUND, VALIDATION_ERROR
from crm_core.domain.base import to_naive_utc
from crm_core.domain.entities import FollowUpStatus
from crm_core.libs.result import Error, Result, Return

REASON_MAX_LENGTH = 500


def follow_up_not_found() -> Error:
    return Error(NOT_FOUND, "Follow-up not found")


def check_fields(
    reason: Optional[str] = None,
    due_date: Optional[datetime] = None,
    status: Optional[str] = None,
) -> Result[dict]:
    """Validate the provided subset of follow-up fields; None means not provided"""
    cleaned = {}

    if reason is not None:
        reason = reason.strip()
        if not reason:
            return Return.err(Error(VALIDATION_ERROR, "Reason is required"))
        if len(reason) > REASON_MAX_LENGTH:
            return Return.err(
                Error(VALIDATION_ERROR, f"Reason must be at most {REASON_MAX_LENGTH} characters")
            )
        cleaned["reason"] = reason

    if due_date is not None:
        cleaned["due_date"] = to_naive_utc(due_date)

    if status is not None:
        try:
            cleaned["status"] = FollowUpStatus(status.upper())
        except ValueError:
            return Return.err(Error(VALIDATION_ERROR, "Status must be OPEN or DONE"))

    return Return.ok(cleaned)
