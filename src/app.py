"""Delivery FastAPI application.

Processes commands synchronously via HTTP. Every domain route runs inside
the delivery domain context; the dispatch ticks can also be triggered here
for maintenance, while ``server.py`` runs them periodically.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied.
from delivery.domain import delivery  # noqa: E402
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

delivery.init()

_DOMAIN_PREFIXES = ("/orders", "/couriers", "/dispatch")


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Delivery API",
    description="Courier dispatch — orders, couriers and delivery ticks",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the delivery domain context for domain routes."""
    if request.url.path.startswith(_DOMAIN_PREFIXES):
        with delivery.domain_context():
            response = await call_next(request)
        return response
    # No domain match, pass through
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers and error handling
# ---------------------------------------------------------------------------
from delivery.api import (  # noqa: E402
    courier_router,
    dispatch_router,
    order_router,
    register_delivery_error_handler,
)

app.include_router(order_router)
app.include_router(courier_router)
app.include_router(dispatch_router)

register_exception_handlers(app)
register_delivery_error_handler(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "delivery": {"name": delivery.name},
            },
        }
    )
