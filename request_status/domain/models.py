"""Request value model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from request_status.constants import PROJECT_REQUEST_TYPE
from request_status.domain.enums import RequestStatus


class Request(BaseModel):
    """A work request or project as stored by the caller.

    Wire records use camelCase keys (``acceptedBy``, ``usersNeeded``);
    keys the engine does not interpret are kept as model extras.
    Instances are frozen; updates go through ``model_copy``.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: str
    creator: str | None = None
    department: str | None = None
    departments: tuple[str, ...] | None = None
    multi_department: bool | None = None
    type: str | None = None
    users_needed: int | None = None
    accepted_by: tuple[str, ...] | None = None
    users_accepted: int | None = None
    status: RequestStatus | str | None = Field(default=None, union_mode="left_to_right")
    last_status_update: str | None = None
    last_status_update_time: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: object) -> str:
        return "" if value is None else str(value)

    @field_validator("departments", "accepted_by", mode="before")
    @classmethod
    def drop_malformed_sequence(cls, value: object) -> tuple[Any, ...] | None:
        """Anything but a list or tuple is read as absent."""

        if isinstance(value, (list, tuple)):
            return tuple(value)
        return None

    @field_validator("users_needed", "users_accepted", mode="before")
    @classmethod
    def drop_malformed_count(cls, value: object) -> int | None:
        if isinstance(value, bool) or value is None:
            return None

        try:
            return int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None

    @property
    def is_multi_department(self) -> bool:
        """Projects are treated exactly like multi-department requests."""

        return bool(self.multi_department) or self.type == PROJECT_REQUEST_TYPE

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def normalize_status(raw_status: object) -> str:
    if hasattr(raw_status, "value"):
        return str(getattr(raw_status, "value"))
    return str(raw_status)
