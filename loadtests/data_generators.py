"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the domain's validation rules
(grid bounds, positive speed and volume, non-empty names) and match the
exact field names expected by the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

GRID_MIN = 1
GRID_MAX = 10


def unique_order_id() -> str:
    """Generate order ids the way the basket service would: a fresh UUID."""
    return str(uuid.uuid4())


def order_data(max_volume: int = 10) -> dict:
    """Generate CreateOrderRequest payload; volume fits the default bag by default."""
    return {
        "order_id": unique_order_id(),
        "street": fake.street_name()[:255],
        "volume": random.randint(1, max_volume),
    }


def courier_data() -> dict:
    """Generate RegisterCourierRequest payload at a random grid position."""
    return {
        "name": fake.first_name()[:100],
        "speed": random.randint(1, 4),
        "x": random.randint(GRID_MIN, GRID_MAX),
        "y": random.randint(GRID_MIN, GRID_MAX),
    }


def storage_place_data() -> dict:
    """Generate AddStoragePlaceRequest payload."""
    return {
        "name": random.choice(["Trunk", "Box", "Backpack", "Crate"]),
        "volume": random.randint(5, 40),
    }
