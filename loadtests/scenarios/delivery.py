"""Delivery domain load test scenarios.

Stateful SequentialTaskSet journeys for order intake and courier
onboarding, plus a dispatch operator that keeps triggering the assign and
move ticks so orders actually flow to completion while load is applied.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import courier_data, order_data, storage_place_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import CourierState, OrderState


class OrderIntakeJourney(SequentialTaskSet):
    """Place orders -> Replay one (idempotency) -> List open orders."""

    def on_start(self):
        self.state = OrderState()

    @task
    def place_orders(self):
        for _ in range(random.randint(1, 3)):
            with self.client.post(
                "/orders",
                json=order_data(),
                catch_response=True,
                name="POST /orders",
            ) as resp:
                if resp.status_code == 201:
                    self.state.order_ids.append(resp.json()["order_id"])
                else:
                    resp.failure(f"Create order failed: {resp.status_code} — {extract_error_detail(resp)}")
                    self.interrupt()

    @task
    def replay_order(self):
        order_id = random.choice(self.state.order_ids)
        with self.client.post(
            "/orders",
            json={"order_id": order_id, "street": "Replay", "volume": 1},
            catch_response=True,
            name="POST /orders (replay)",
        ) as resp:
            if resp.status_code == 201 and resp.json()["order_id"] == order_id:
                self.state.replayed += 1
            else:
                resp.failure(f"Replay not idempotent: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def list_open_orders(self):
        with self.client.get("/orders", catch_response=True, name="GET /orders") as resp:
            if resp.status_code != 200:
                resp.failure(f"List orders failed: {resp.status_code} — {extract_error_detail(resp)}")
        self.interrupt()


class CourierOnboardingJourney(SequentialTaskSet):
    """Register courier -> Maybe add a storage place -> List couriers."""

    def on_start(self):
        self.state = CourierState()

    @task
    def register_courier(self):
        with self.client.post(
            "/couriers",
            json=courier_data(),
            catch_response=True,
            name="POST /couriers",
        ) as resp:
            if resp.status_code == 201:
                self.state.courier_id = resp.json()["courier_id"]
            else:
                resp.failure(f"Register courier failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def add_storage_place(self):
        if random.random() < 0.5:
            return
        with self.client.post(
            f"/couriers/{self.state.courier_id}/storage-places",
            json=storage_place_data(),
            catch_response=True,
            name="POST /couriers/{id}/storage-places",
        ) as resp:
            if resp.status_code == 201:
                self.state.storage_place_count += 1
            else:
                resp.failure(f"Add storage place failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def list_couriers(self):
        with self.client.get("/couriers", catch_response=True, name="GET /couriers") as resp:
            if resp.status_code != 200:
                resp.failure(f"List couriers failed: {resp.status_code} — {extract_error_detail(resp)}")
        self.interrupt()


class OrderIntakeUser(HttpUser):
    """Storefront traffic: mostly order placement."""

    wait_time = between(0.5, 2.0)
    tasks = [OrderIntakeJourney]


class CourierFleetUser(HttpUser):
    """Occasional courier onboarding."""

    wait_time = between(2.0, 5.0)
    tasks = [CourierOnboardingJourney]


class DispatchOperatorUser(HttpUser):
    """Triggers the ticks the way the scheduler does, at a faster pace.

    A 422 from assign (no free courier, or nobody can carry the order) is an
    expected business outcome under load, not a failure.
    """

    fixed_count = 1
    wait_time = between(0.5, 1.0)

    @task(2)
    def assign(self):
        with self.client.post(
            "/dispatch/assign",
            json={"batch": random.random() < 0.3},
            catch_response=True,
            name="POST /dispatch/assign",
        ) as resp:
            if resp.status_code in (200, 422):
                resp.success()
            else:
                resp.failure(f"Assign failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task(3)
    def move(self):
        with self.client.post("/dispatch/move", catch_response=True, name="POST /dispatch/move") as resp:
            if resp.status_code != 200:
                resp.failure(f"Move failed: {resp.status_code} — {extract_error_detail(resp)}")
