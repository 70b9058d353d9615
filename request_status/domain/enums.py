"""Request enums."""

from enum import Enum


class RequestStatus(str, Enum):
    PENDING = "Pending"
    IN_PROCESS = "In Process"
    COMPLETED = "Completed"
    REJECTED = "Rejected"
