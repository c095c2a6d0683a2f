"""Error vocabulary for the delivery domain.

Every expected business failure is a ``DeliveryError`` carrying an
``ErrorKind``. It subclasses Protean's ``ValidationError`` so that callers
which only know the framework exception (command processing, API error
handling) keep treating it as a rejected operation.
"""

from enum import Enum

from protean.exceptions import ValidationError


class ErrorKind(Enum):
    REQUIRED = "Required"
    INVALID = "Invalid"
    INVALID_LENGTH = "InvalidLength"
    OUT_OF_RANGE = "OutOfRange"
    INVALID_VOLUME = "InvalidVolume"
    OCCUPIED = "Occupied"
    NO_SUITABLE_STORAGE_PLACE = "NoSuitableStoragePlace"
    ALREADY_ASSIGNED = "AlreadyAssigned"
    NOT_ASSIGNED = "NotAssigned"
    SUITABLE_COURIER_NOT_FOUND = "SuitableCourierNotFound"
    NO_AVAILABLE_COURIERS = "NoAvailableCouriers"
    NO_AVAILABLE_ORDERS = "NoAvailableOrders"
    INVALID_STATE = "InvalidState"


class DeliveryError(ValidationError):
    """A rejected domain operation.

    ``messages`` follows Protean's field-keyed shape (``{"field": ["message"]}``);
    ``kind`` identifies the failure for programmatic handling.
    """

    def __init__(self, kind: ErrorKind, field: str, message: str) -> None:
        super().__init__({field: [message]})
        self.kind = kind

    @property
    def message(self) -> str:
        return "; ".join(msg for msgs in self.messages.values() for msg in msgs)

    @classmethod
    def required(cls, field: str) -> "DeliveryError":
        return cls(ErrorKind.REQUIRED, field, f"Value is required for {field}")
