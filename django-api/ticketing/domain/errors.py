"""Domain error codes for the ticketing module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_EVENT_DATA = "INVALID_EVENT_DATA"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    CAPACITY_BELOW_SOLD = "CAPACITY_BELOW_SOLD"
    STORAGE_FAILURE = "STORAGE_FAILURE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidEventDataError(DomainError):
    """Raised when event fields break a domain rule."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_DATA,
            message=reason,
        )


class InvalidQuantityError(DomainError):
    """Raised when a purchase asks for zero or a negative number of tickets."""

    def __init__(self, quantity: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_QUANTITY,
            message="Quantity must be a positive integer",
        )
        self.quantity = quantity


class CapacityExceededError(DomainError):
    """Raised when a purchase would oversell an event."""

    def __init__(self, event_id: str, requested: int, available: int) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message="Not enough tickets available",
        )
        self.event_id = event_id
        self.requested = requested
        self.available = available


class CapacityBelowSoldError(DomainError):
    """Raised when an event's capacity would drop below its sold count."""

    def __init__(self, event_id: str, requested: int, sold: int) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_BELOW_SOLD,
            message=f"Total tickets cannot be lower than the {sold} already sold",
        )
        self.event_id = event_id
        self.requested = requested
        self.sold = sold


class StorageFailureError(DomainError):
    """Raised when persistence fails; the unit of work has been rolled back."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_FAILURE,
            message="The request could not be completed, please try again",
        )
