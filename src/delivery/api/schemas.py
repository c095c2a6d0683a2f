"""Pydantic API schemas for the Delivery domain.

These are the external API contracts — separate from domain commands.
The API layer translates between these schemas and domain commands.
"""

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    street: str
    volume: int
    order_id: str | None = None


class RegisterCourierRequest(BaseModel):
    name: str
    speed: int
    x: int
    y: int


class AddStoragePlaceRequest(BaseModel):
    name: str
    volume: int


class AssignOrdersRequest(BaseModel):
    batch: bool = False


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
class LocationResponse(BaseModel):
    x: int
    y: int


class OrderIdResponse(BaseModel):
    order_id: str


class CourierIdResponse(BaseModel):
    courier_id: str


class StoragePlaceIdResponse(BaseModel):
    storage_place_id: str


class OrderResponse(BaseModel):
    id: str
    location: LocationResponse


class CourierResponse(BaseModel):
    id: str
    name: str
    location: LocationResponse


class AssignmentResponse(BaseModel):
    order_id: str
    courier_id: str


class AssignOrdersResponse(BaseModel):
    assignments: list[AssignmentResponse]


class MoveCouriersResponse(BaseModel):
    completed_order_ids: list[str]
