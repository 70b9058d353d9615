from datetime import datetime, timezone

from request_status.config import Settings
from request_status.domain.enums import RequestStatus
from request_status.domain.models import Request
from request_status.engine import RequestStatusEngine, build_engine

FIXED_NOW = datetime(2026, 10, 17, 8, 15, 0, tzinfo=timezone.utc)


def _build_engine(**overrides: object) -> RequestStatusEngine:
    settings = Settings(_env_file=None, **overrides)
    return RequestStatusEngine(settings, clock=lambda: FIXED_NOW)


def test_engine_applies_configured_threshold() -> None:
    engine = _build_engine(default_users_needed=3)
    request = Request(id="r1", creator="dana", multi_department=True, accepted_by=("bob", "alice"))

    derived = engine.derive_status(request)

    assert derived is not None
    assert derived.status == RequestStatus.PENDING


def test_engine_derive_statuses_keeps_order() -> None:
    engine = _build_engine()
    requests = [
        Request(id="r1", multi_department=True, accepted_by=("bob", "alice")),
        Request(id="r2", department="Eng", status=RequestStatus.COMPLETED),
    ]

    derived = engine.derive_statuses(requests)

    assert [request.id for request in derived] == ["r1", "r2"]
    assert derived[0].status == RequestStatus.IN_PROCESS
    assert derived[1] == requests[1]


def test_engine_accept_request_uses_clock_and_time_format() -> None:
    engine = _build_engine(status_time_format="%Y")
    request = Request(id="r2", department="Eng", accepted_by=())

    (updated,) = engine.accept_request([request], "r2", "carol")

    assert updated.status == RequestStatus.IN_PROCESS
    assert updated.last_status_update == "2026-10-17T08:15:00.000Z"
    assert updated.last_status_update_time == "2026"


def test_engine_process_acceptance_guards_eligibility() -> None:
    engine = _build_engine()
    request = Request(id="r2", creator="dana", department="Eng", accepted_by=("carol",))

    assert engine.can_accept(request, "erin", "Eng") is False
    result = engine.process_acceptance([request], "r2", "erin", "Eng")

    assert result.accepted is False
    assert result.requests == [request]


def test_build_engine_uses_given_settings() -> None:
    settings = Settings(_env_file=None, log_level="warning", log_json=False)

    engine = build_engine(settings, clock=lambda: FIXED_NOW)

    assert engine.settings is settings
    assert engine.clock() == FIXED_NOW
