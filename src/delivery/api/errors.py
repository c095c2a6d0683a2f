"""HTTP translation of delivery errors.

Registered on top of Protean's standard handlers; Starlette resolves
handlers by exception class, so ``DeliveryError`` gets a status code per
kind while other Protean exceptions keep the generic mapping.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from delivery.shared.errors import DeliveryError, ErrorKind

STATUS_BY_KIND = {
    ErrorKind.REQUIRED: 400,
    ErrorKind.OUT_OF_RANGE: 400,
    ErrorKind.INVALID: 400,
    ErrorKind.INVALID_VOLUME: 400,
    ErrorKind.INVALID_LENGTH: 400,
    ErrorKind.OCCUPIED: 409,
    ErrorKind.ALREADY_ASSIGNED: 409,
    ErrorKind.NOT_ASSIGNED: 409,
    ErrorKind.NO_SUITABLE_STORAGE_PLACE: 409,
    ErrorKind.SUITABLE_COURIER_NOT_FOUND: 422,
    ErrorKind.NO_AVAILABLE_COURIERS: 422,
    ErrorKind.NO_AVAILABLE_ORDERS: 422,
    ErrorKind.INVALID_STATE: 500,
}


def register_delivery_error_handler(app: FastAPI) -> None:
    @app.exception_handler(DeliveryError)
    async def delivery_error_handler(request: Request, exc: DeliveryError) -> JSONResponse:
        return JSONResponse(
            status_code=STATUS_BY_KIND.get(exc.kind, 400),
            content={"error": exc.messages, "kind": exc.kind.value},
        )
