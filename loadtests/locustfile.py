"""Locust entry point for the Delivery API.

Usage:
    # Every user class, web UI:
    locust -f loadtests/locustfile.py --host http://localhost:8000

    # Only order intake:
    locust -f loadtests/locustfile.py OrderIntakeUser

    # Headless:
    locust -f loadtests/locustfile.py --headless -u 30 -r 3 -t 120s --csv=results/delivery
"""

import logging
from collections import Counter

from locust import events

from loadtests.helpers.response import error_kind, extract_error_detail
from loadtests.scenarios.delivery import CourierFleetUser, DispatchOperatorUser, OrderIntakeUser  # noqa: F401

logger = logging.getLogger("loadtest")

# Delivery error kinds seen during the run, e.g. NoAvailableCouriers
rejections: Counter = Counter()


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    if exception:
        logger.error("%s %s raised %s", request_type, name, exception)
        return
    if response is None or response.status_code < 400:
        return

    kind = error_kind(response)
    if kind:
        rejections[kind] += 1
    logger.warning("%s %s -> %s %s", request_type, name, response.status_code, extract_error_detail(response))


@events.test_start.add_listener
def on_test_start(environment, **_kw):
    rejections.clear()
    logger.info("Load test against %s started", environment.host)


@events.test_stop.add_listener
def on_test_stop(environment, **_kw):
    stats = environment.stats.total
    logger.info(
        "Load test stopped: %d requests, %d failures",
        stats.num_requests,
        stats.num_failures,
    )
    for kind, count in rejections.most_common():
        logger.info("  %s: %d", kind, count)
