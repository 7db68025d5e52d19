"""
Concurrent emission test runner.

This module provides EmissionTestRunner, which tests a whole fleet at once:

1. Assign each vehicle the identifier Vehicle_<position> (1-based)
2. Submit one task per vehicle to a thread pool
3. Each task drives a fresh EmissionTest through the state machine and, on
   success, records the verdict in the shared ResultRegistry
4. Wait for every task before returning the registry

Failures are isolated per task: an InvalidEmissionValueError (or any other
error) is logged with the vehicle's identifier and stored as a failure
reason. No verdict is written for that vehicle, and sibling tasks carry on.
"""

import logging
import math
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple

from pydantic import BaseModel

from ..exceptions import InvalidEmissionValueError, ValidationError
from ..identifiers import format_vehicle_id
from ..models.vehicle import BaseVehicle
from ..repositories.result_registry import ResultRegistry
from ..state_machine import EmissionTestStateMachine, TestEventListener

logger = logging.getLogger(__name__)

TIMEOUT_REASON = "timed out"


class RunSummary(BaseModel):
    """Counts for one run (incomplete = tests that produced no verdict)."""

    total: int = 0
    passed: int = 0
    failed: int = 0
    incomplete: int = 0
    duration_seconds: float = 0.0


class _RunContext:
    """Per-run bookkeeping shared by the tasks and the joining thread."""

    def __init__(self, registry: ResultRegistry):
        self.registry = registry
        # Serializes "record result" against "declare timed out"
        self.lock = threading.Lock()
        # Signalled when a task starts; shares the lock above
        self.task_started = threading.Condition(self.lock)
        self.started: Dict[str, float] = {}
        self.timed_out: Set[str] = set()


class EmissionTestRunner:
    """
    Runs compliance tests for many vehicles in parallel.

    Holds only configuration, so one runner can serve any number of runs.
    Each run gets its own registry (from registry_factory unless one is
    passed in).
    """

    def __init__(
        self,
        registry_factory: Callable[[], ResultRegistry] = ResultRegistry,
        max_workers: Optional[int] = None,
        task_timeout: Optional[float] = None,
        listener: Optional[TestEventListener] = None
    ):
        """
        Args:
            registry_factory: Creates the registry for each run
            max_workers: Thread pool size; None means one thread per vehicle
            task_timeout: Seconds a test may run, counted from when a worker
                          starts it; None waits indefinitely
            listener: Optional callable receiving TestEvents from every task
        """
        if max_workers is not None and max_workers < 1:
            raise ValidationError(f"max_workers must be >= 1, got: {max_workers}")
        if task_timeout is not None and task_timeout <= 0:
            raise ValidationError(f"task_timeout must be > 0, got: {task_timeout}")

        self.registry_factory = registry_factory
        self.max_workers = max_workers
        self.task_timeout = task_timeout
        self.listener = listener
        self.last_summary: Optional[RunSummary] = None

    def run_all(
        self,
        vehicles: Iterable[BaseVehicle],
        legal_limit: float,
        registry: Optional[ResultRegistry] = None
    ) -> ResultRegistry:
        """
        Test every vehicle concurrently and collect the verdicts.

        Blocks until every task has finished, so the returned registry is
        complete and stable.

        Args:
            vehicles: Ordered sequence of vehicles (order defines identifiers)
            legal_limit: Maximum emission level that still passes (inclusive)
            registry: Optional registry to fill; a new one is created if None

        Returns:
            Registry mapping Vehicle_N → verdict for every completed test

        Raises:
            ValidationError: If legal_limit is not a finite number
        """
        legal_limit = self._validate_legal_limit(legal_limit)
        vehicles = list(vehicles)
        if registry is None:
            registry = self.registry_factory()

        start = time.perf_counter()
        context = _RunContext(registry)
        state_machine = EmissionTestStateMachine(legal_limit, self.listener)

        if vehicles:
            workers = self.max_workers or len(vehicles)
            logger.info(f"Starting emission tests for {len(vehicles)} vehicles ({workers} workers, limit {legal_limit})")

            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="emission-test") as executor:
                futures: List[Tuple[str, Future]] = []
                for position, vehicle in enumerate(vehicles, start=1):
                    vehicle_id = format_vehicle_id(position)
                    future = executor.submit(self._run_single, context, state_machine, vehicle_id, vehicle)
                    futures.append((vehicle_id, future))

                self._join(context, futures)
            # Leaving the executor waits for tasks that outlived their deadline

        duration = time.perf_counter() - start
        verdicts = registry.snapshot()
        ids = [format_vehicle_id(position) for position in range(1, len(vehicles) + 1)]
        completed = [verdicts[vehicle_id] for vehicle_id in ids if vehicle_id in verdicts]
        self.last_summary = RunSummary(
            total=len(vehicles),
            passed=sum(1 for verdict in completed if verdict),
            failed=sum(1 for verdict in completed if not verdict),
            incomplete=len(vehicles) - len(completed),
            duration_seconds=duration,
        )
        logger.info(
            f"Emission tests finished: {self.last_summary.passed} passed, "
            f"{self.last_summary.failed} failed, {self.last_summary.incomplete} incomplete "
            f"in {duration:.3f}s"
        )
        return registry

    def _join(self, context: _RunContext, futures: List[Tuple[str, Future]]) -> None:
        """
        Wait for every task, applying the per-task deadline if configured.

        Each task's deadline counts from when a worker picks it up, so tasks
        queued behind a small pool are not charged for their wait.
        """
        for vehicle_id, future in futures:
            remaining = None
            if self.task_timeout is not None:
                started = self._wait_until_started(context, vehicle_id, future)
                if started is not None:
                    remaining = max(0.0, started + self.task_timeout - time.perf_counter())
            try:
                # Tasks catch their own errors; this only waits
                future.result(timeout=remaining)
            except FutureTimeoutError:
                with context.lock:
                    if vehicle_id in context.registry or future.done():
                        continue
                    context.timed_out.add(vehicle_id)
                    context.registry.record_failure(vehicle_id, TIMEOUT_REASON)
                future.cancel()
                logger.error(f"Test for Vehicle ID {vehicle_id} {TIMEOUT_REASON} after {self.task_timeout}s")

    @staticmethod
    def _wait_until_started(context: _RunContext, vehicle_id: str, future: Future) -> Optional[float]:
        """Block until the task has started; return its start time (None if it never ran)."""
        with context.task_started:
            while vehicle_id not in context.started and not future.done():
                context.task_started.wait()
            return context.started.get(vehicle_id)

    def _run_single(
        self,
        context: _RunContext,
        state_machine: EmissionTestStateMachine,
        vehicle_id: str,
        vehicle: BaseVehicle
    ) -> None:
        """Task body: test one vehicle and record the outcome."""
        with context.task_started:
            context.started[vehicle_id] = time.perf_counter()
            context.task_started.notify_all()
        try:
            record = state_machine.run(vehicle_id, vehicle)
            with context.lock:
                if vehicle_id in context.timed_out:
                    return
                context.registry.record(vehicle_id, record.compliance_status)
        except InvalidEmissionValueError as e:
            logger.error(f"Invalid argument for Vehicle ID {vehicle_id}: {e}")
            self._record_failure(context, vehicle_id, str(e))
        except Exception as e:
            logger.error(f"Error for Vehicle ID {vehicle_id}: {e}")
            self._record_failure(context, vehicle_id, f"{type(e).__name__}: {e}")

    @staticmethod
    def _record_failure(context: _RunContext, vehicle_id: str, reason: str) -> None:
        with context.lock:
            if vehicle_id not in context.timed_out:
                context.registry.record_failure(vehicle_id, reason)

    @staticmethod
    def _validate_legal_limit(legal_limit: float) -> float:
        try:
            value = float(legal_limit)
        except (TypeError, ValueError):
            raise ValidationError(f"Legal limit must be a number, got: {legal_limit!r}")
        if not math.isfinite(value):
            raise ValidationError(f"Legal limit must be finite, got: {legal_limit!r}")
        return value


def run_all(
    vehicles: Iterable[BaseVehicle],
    legal_limit: float,
    registry: Optional[ResultRegistry] = None,
    max_workers: Optional[int] = None,
    task_timeout: Optional[float] = None,
    listener: Optional[TestEventListener] = None
) -> ResultRegistry:
    """
    Test every vehicle concurrently and return the filled registry.

    Shortcut for EmissionTestRunner(...).run_all(vehicles, legal_limit).
    """
    runner = EmissionTestRunner(
        max_workers=max_workers,
        task_timeout=task_timeout,
        listener=listener,
    )
    return runner.run_all(vehicles, legal_limit, registry=registry)
