"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state — no cross-user sharing.
State tracks entity IDs returned by creation endpoints so follow-up
operations can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class OrderState:
    """Tracks orders placed by one simulated storefront."""

    order_ids: list[str] = field(default_factory=list)
    replayed: int = 0


@dataclass
class CourierState:
    """Tracks one simulated courier onboarding."""

    courier_id: str | None = None
    storage_place_count: int = 1
