"""Periodic tick scheduling.

A ``TickRunner`` fires one command every ``interval`` seconds. A firing is
skipped while the previous run of the same runner is still in flight, and
runners created by the same ``DispatchScheduler`` share an execution lock so
assign and move never touch aggregates at the same time.

Commands are processed in a worker thread inside a fresh domain context;
failures are logged and the runner keeps going.
"""

import asyncio
from collections.abc import Callable

import structlog
from protean.domain import Domain
from protean.exceptions import ValidationError

from delivery.dispatch.assignment import AssignOrders
from delivery.dispatch.movement import MoveCouriers
from delivery.domain import delivery
from delivery.shared.errors import DeliveryError, ErrorKind
from delivery.utils.logging import log_context

logger = structlog.get_logger(__name__)


class TickRunner:
    def __init__(
        self,
        name: str,
        domain: Domain,
        command_factory: Callable[[], object],
        interval: float,
        execution_lock: asyncio.Lock | None = None,
    ):
        self.name = name
        self.domain = domain
        self.command_factory = command_factory
        self.interval = interval
        self.execution_lock = execution_lock or asyncio.Lock()
        self._in_flight = asyncio.Lock()
        self.runs = 0
        self.skipped = 0
        self.failures = 0
        self._tasks: set[asyncio.Task] = set()

    def _process(self):
        with log_context(tick=self.name), self.domain.domain_context():
            return self.domain.process(self.command_factory(), asynchronous=False)

    async def fire(self) -> bool:
        """Run one tick unless one is already running. Returns True if it ran."""
        if self._in_flight.locked():
            self.skipped += 1
            logger.info("Tick skipped, previous run still in flight", tick=self.name)
            return False

        async with self._in_flight:
            async with self.execution_lock:
                try:
                    result = await asyncio.to_thread(self._process)
                except DeliveryError as exc:
                    self.failures += 1
                    log = logger.error if exc.kind == ErrorKind.INVALID_STATE else logger.info
                    log("Tick rejected", tick=self.name, error_kind=exc.kind.value, error=exc.message)
                except ValidationError as exc:
                    self.failures += 1
                    logger.warning("Tick rejected", tick=self.name, error=str(exc))
                except Exception:
                    self.failures += 1
                    logger.exception("Tick failed", tick=self.name)
                else:
                    logger.debug("Tick finished", tick=self.name, result=result)
                finally:
                    self.runs += 1
        return True

    async def run(self, stop: asyncio.Event) -> None:
        logger.info("Tick runner started", tick=self.name, interval=self.interval)
        while not stop.is_set():
            task = asyncio.create_task(self.fire())
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
            try:
                await asyncio.wait_for(stop.wait(), timeout=self.interval)
            except TimeoutError:
                pass
        if self._tasks:
            await asyncio.gather(*self._tasks)
        logger.info("Tick runner stopped", tick=self.name, runs=self.runs, skipped=self.skipped)


class DispatchScheduler:
    """Owns the assign and move runners of one domain."""

    def __init__(
        self,
        domain: Domain = delivery,
        assign_interval: float | None = None,
        move_interval: float | None = None,
        batch: bool = False,
    ):
        execution_lock = asyncio.Lock()
        self.runners = {
            "assign": TickRunner(
                "assign",
                domain,
                lambda: AssignOrders(batch=batch),
                assign_interval or float(getattr(domain, "ASSIGN_INTERVAL_SECONDS", 1)),
                execution_lock,
            ),
            "move": TickRunner(
                "move",
                domain,
                MoveCouriers,
                move_interval or float(getattr(domain, "MOVE_INTERVAL_SECONDS", 2)),
                execution_lock,
            ),
        }
        self._stop = asyncio.Event()

    async def run(self, ticks: list[str] | None = None) -> None:
        selected = [self.runners[name] for name in (ticks or self.runners)]
        await asyncio.gather(*(runner.run(self._stop) for runner in selected))

    def stop(self) -> None:
        self._stop.set()
