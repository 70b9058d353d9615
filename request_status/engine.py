"""Request status engine bound to settings, clock and logger."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Iterable, Sequence

from structlog.stdlib import BoundLogger

from request_status.config import Settings, get_settings
from request_status.domain.models import Request
from request_status.logging_setup import configure_logging, get_logger
from request_status.services import status_service
from request_status.services.acceptance_service import AcceptanceResult, process_acceptance

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RequestStatusEngine:
    """Entry point for callers that own request persistence."""

    def __init__(
        self,
        settings: Settings,
        clock: Clock = utc_now,
        logger: BoundLogger | None = None,
    ) -> None:
        self.settings = settings
        self.clock = clock
        self.logger = logger if logger is not None else get_logger("request_status")

    def derive_status(self, request: Request | None) -> Request | None:
        return status_service.derive_status(
            request,
            default_users_needed=self.settings.default_users_needed,
        )

    def derive_statuses(self, requests: Iterable[Request]) -> list[Request]:
        derived: list[Request] = []
        for request in requests:
            updated = self.derive_status(request)
            if updated is not None:
                derived.append(updated)
        return derived

    def can_accept(self, request: Request, username: str, user_department: str | None) -> bool:
        return status_service.can_accept(request, username, user_department)

    def accept_request(self, requests: Iterable[Request], request_id: str, username: str) -> list[Request]:
        """Unguarded acceptance; see ``process_acceptance``."""

        return status_service.accept_request(
            requests,
            request_id,
            username,
            self.clock(),
            default_users_needed=self.settings.default_users_needed,
            time_format=self.settings.status_time_format,
        )

    def process_acceptance(
        self,
        requests: Sequence[Request],
        request_id: str,
        username: str,
        user_department: str | None,
    ) -> AcceptanceResult:
        return process_acceptance(
            requests,
            request_id,
            username,
            user_department,
            self.clock(),
            self.logger,
            default_users_needed=self.settings.default_users_needed,
            time_format=self.settings.status_time_format,
        )


def build_engine(settings: Settings | None = None, clock: Clock = utc_now) -> RequestStatusEngine:
    if settings is None:
        settings = get_settings()

    configure_logging(settings.log_level, json_output=settings.log_json)
    logger = get_logger("request_status", component="engine")
    return RequestStatusEngine(settings, clock=clock, logger=logger)
