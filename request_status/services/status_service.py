"""Request status derivation and acceptance rules."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from request_status.constants import DEFAULT_USERS_NEEDED, STATUS_TIME_FORMAT
from request_status.domain.enums import RequestStatus
from request_status.domain.models import Request


def resolve_accepted_by(request: Request) -> tuple[str, ...]:
    accepted_by = request.accepted_by
    if isinstance(accepted_by, (list, tuple)):
        return tuple(accepted_by)
    return ()


def resolve_users_needed(request: Request, default_users_needed: int = DEFAULT_USERS_NEEDED) -> int:
    users_needed = request.users_needed
    if users_needed is None or users_needed == 0:
        return default_users_needed
    return users_needed


def resolve_target_departments(request: Request) -> tuple[str | None, ...]:
    departments = request.departments
    if isinstance(departments, (list, tuple)) and len(departments) > 0:
        return tuple(departments)
    return (request.department,)


def status_for_count(accepted_count: int, users_needed: int) -> RequestStatus:
    if accepted_count < users_needed:
        return RequestStatus.PENDING
    return RequestStatus.IN_PROCESS


def derive_status(
    request: Request | None,
    *,
    default_users_needed: int = DEFAULT_USERS_NEEDED,
) -> Request | None:
    """Recompute status and accepted count of a multi-department request.

    Single-department requests come back unchanged: their status is owned
    by whoever processes them.
    """

    if request is None:
        return None

    if not request.is_multi_department:
        return request

    accepted_count = len(resolve_accepted_by(request))
    users_needed = resolve_users_needed(request, default_users_needed)

    return request.model_copy(
        update={
            "status": status_for_count(accepted_count, users_needed),
            "users_accepted": accepted_count,
        }
    )


def can_accept(request: Request, username: str, user_department: str | None) -> bool:
    """Decide whether ``username`` from ``user_department`` may accept ``request``.

    Rejected multi-department requests and projects stay open for acceptance.
    """

    if request.creator == username:
        return False

    if request.status == RequestStatus.COMPLETED:
        return False
    if request.status == RequestStatus.REJECTED and not request.is_multi_department:
        return False

    accepted_by = resolve_accepted_by(request)

    if not request.is_multi_department:
        return user_department == request.department and len(accepted_by) == 0

    from_target_department = user_department in resolve_target_departments(request)
    return from_target_department and username not in accepted_by


def format_status_timestamps(now: datetime, time_format: str = STATUS_TIME_FORMAT) -> tuple[str, str]:
    """Return (local display time, ISO-8601 UTC timestamp) for ``now``."""

    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    local_time = now.astimezone().strftime(time_format)
    iso_timestamp = now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return local_time, iso_timestamp


def apply_acceptance(
    request: Request,
    username: str,
    now: datetime,
    *,
    default_users_needed: int = DEFAULT_USERS_NEEDED,
    time_format: str = STATUS_TIME_FORMAT,
) -> Request:
    accepted_by = resolve_accepted_by(request) + (username,)
    users_accepted = len(accepted_by)
    users_needed = resolve_users_needed(request, default_users_needed)

    if request.is_multi_department:
        status = status_for_count(users_accepted, users_needed)
    else:
        status = RequestStatus.IN_PROCESS

    last_status_update_time, last_status_update = format_status_timestamps(now, time_format)

    return request.model_copy(
        update={
            "accepted_by": accepted_by,
            "users_accepted": users_accepted,
            "status": status,
            "last_status_update_time": last_status_update_time,
            "last_status_update": last_status_update,
        }
    )


def accept_request(
    requests: Iterable[Request],
    request_id: str,
    username: str,
    now: datetime | None = None,
    *,
    default_users_needed: int = DEFAULT_USERS_NEEDED,
    time_format: str = STATUS_TIME_FORMAT,
) -> list[Request]:
    """Record ``username`` as accepting the request with ``request_id``.

    Eligibility is not checked here and a repeated call with the same user
    appends the user again; use ``process_acceptance`` for the guarded path.
    """

    if now is None:
        now = datetime.now(timezone.utc)

    return [
        apply_acceptance(
            request,
            username,
            now,
            default_users_needed=default_users_needed,
            time_format=time_format,
        )
        if request.id == request_id
        else request
        for request in requests
    ]
