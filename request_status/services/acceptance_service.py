"""Guarded request acceptance."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Sequence

from structlog.stdlib import BoundLogger

from request_status.constants import DEFAULT_USERS_NEEDED, STATUS_TIME_FORMAT
from request_status.domain.models import Request, normalize_status
from request_status.services.status_service import accept_request, can_accept

REASON_NOT_FOUND = "not_found"
REASON_NOT_ELIGIBLE = "not_eligible"


@dataclass(slots=True)
class AcceptanceResult:
    requests: list[Request]
    accepted: bool
    request: Request | None = None
    reason: str | None = None


def find_request(requests: Sequence[Request], request_id: str) -> Request | None:
    for request in requests:
        if request.id == request_id:
            return request
    return None


def process_acceptance(
    requests: Sequence[Request],
    request_id: str,
    username: str,
    user_department: str | None,
    now: datetime | None = None,
    logger: BoundLogger | None = None,
    *,
    default_users_needed: int = DEFAULT_USERS_NEEDED,
    time_format: str = STATUS_TIME_FORMAT,
) -> AcceptanceResult:
    """Check eligibility, then apply the acceptance.

    The input collection is returned as a new list untouched when the
    request is missing or the user may not accept it.
    """

    target = find_request(requests, request_id)
    if target is None:
        if logger is not None:
            logger.info(
                "request_acceptance_rejected",
                request_id=request_id,
                username=username,
                reason=REASON_NOT_FOUND,
            )
        return AcceptanceResult(requests=list(requests), accepted=False, reason=REASON_NOT_FOUND)

    if not can_accept(target, username, user_department):
        if logger is not None:
            logger.info(
                "request_acceptance_rejected",
                request_id=request_id,
                username=username,
                user_department=user_department,
                reason=REASON_NOT_ELIGIBLE,
            )
        return AcceptanceResult(
            requests=list(requests),
            accepted=False,
            request=target,
            reason=REASON_NOT_ELIGIBLE,
        )

    if now is None:
        now = datetime.now(timezone.utc)

    updated_requests = accept_request(
        requests,
        request_id,
        username,
        now,
        default_users_needed=default_users_needed,
        time_format=time_format,
    )
    updated = find_request(updated_requests, request_id)

    if logger is not None and updated is not None:
        logger.info(
            "request_accepted",
            request_id=request_id,
            username=username,
            users_accepted=updated.users_accepted,
            status=normalize_status(updated.status),
        )

    return AcceptanceResult(requests=updated_requests, accepted=True, request=updated)
