"""Delivery bounded context — Courier Dispatch and Last-Mile Movement.

Assigns delivery orders to couriers with spare storage capacity and advances
couriers toward their destinations on a periodic tick. Orders and couriers
are separate aggregates linked only by identifier; each tick persists both
sides in a single unit of work.
"""

from protean.domain import Domain

from delivery.utils.logging import configure_logging

configure_logging()

delivery = Domain(name="delivery")
