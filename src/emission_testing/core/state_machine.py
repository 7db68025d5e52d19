"""
Emission test state machine.

This module drives an EmissionTest record through its states:

- PENDING → IN_PROGRESS: bookkeeping only. Logs and announces that the test
  started, then continues straight into evaluation (no suspension).
- IN_PROGRESS → COMPLETED: asks the vehicle for its emission level, rejects
  negative values with InvalidEmissionValueError (record stays IN_PROGRESS),
  otherwise stores the verdict emission_level <= legal_limit.
- COMPLETED → COMPLETED: no-op. Reports "already completed" without calling
  the strategy or touching the stored verdict.

The record is passed explicitly through the transition functions. Callers
can observe progress by passing a listener, a plain callable that receives a
TestEvent for every step.
"""

import logging
import math
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel

from .exceptions import InvalidEmissionValueError
from .models.emission_test import EmissionTest, TestState
from .models.vehicle import BaseVehicle

logger = logging.getLogger(__name__)


class TestEventKind(str, Enum):
    """Observable steps of a test."""

    __test__ = False

    STARTED = "started"
    COMPLETED = "completed"
    FAILED = "failed"
    ALREADY_COMPLETED = "already_completed"


class TestEvent(BaseModel):
    """
    Diagnostic event emitted while a test runs.

    Events are observational only; nothing in the result data depends on
    them.
    """

    __test__ = False

    kind: TestEventKind
    vehicle_id: str
    state: TestState
    emission_level: Optional[float] = None
    compliance_status: Optional[bool] = None
    detail: str = ""


TestEventListener = Callable[[TestEvent], None]


def _emit(listener: Optional[TestEventListener], event: TestEvent) -> None:
    """Deliver an event; a failing listener never affects the test."""
    if listener is None:
        return
    try:
        listener(event)
    except Exception:
        logger.exception(f"Event listener failed on {event.kind.value} for {event.vehicle_id}")


def _start(record: EmissionTest, listener: Optional[TestEventListener]) -> None:
    record.mark_in_progress()
    logger.info(f"Test for {record.vehicle_id} is now in progress.")
    _emit(listener, TestEvent(
        kind=TestEventKind.STARTED,
        vehicle_id=record.vehicle_id,
        state=record.state,
    ))


def _evaluate(
    record: EmissionTest,
    vehicle: BaseVehicle,
    legal_limit: float,
    listener: Optional[TestEventListener]
) -> None:
    emission_level = vehicle.get_emission_level()

    # NaN compares False against everything, so check it explicitly
    if emission_level is None or math.isnan(emission_level) or emission_level < 0:
        reason = f"Invalid emission level {emission_level!r} for {record.vehicle_id}"
        _emit(listener, TestEvent(
            kind=TestEventKind.FAILED,
            vehicle_id=record.vehicle_id,
            state=record.state,
            emission_level=emission_level,
            detail=reason,
        ))
        raise InvalidEmissionValueError(reason)

    compliance_status = emission_level <= legal_limit
    record.complete(compliance_status, emission_level, legal_limit)

    logger.info(
        f"Vehicle ID: {record.vehicle_id} | Emission Level: {emission_level} | "
        f"Compliance: {'Pass' if compliance_status else 'Fail'}"
    )
    _emit(listener, TestEvent(
        kind=TestEventKind.COMPLETED,
        vehicle_id=record.vehicle_id,
        state=record.state,
        emission_level=emission_level,
        compliance_status=compliance_status,
    ))


def perform_test(
    record: EmissionTest,
    vehicle: BaseVehicle,
    legal_limit: float,
    listener: Optional[TestEventListener] = None
) -> EmissionTest:
    """
    Drive a test record to COMPLETED.

    Idempotent once terminal: calling it again on a COMPLETED record only
    reports "already completed". A record left IN_PROGRESS by an earlier
    failure is evaluated again.

    Args:
        record: The test record (mutated in place)
        vehicle: Vehicle under test
        legal_limit: Maximum emission level that still passes (inclusive)
        listener: Optional callable receiving a TestEvent per step

    Returns:
        The same record, for chaining

    Raises:
        InvalidEmissionValueError: If the strategy yields a negative or NaN
                                   emission level (no verdict is stored)
    """
    if record.state is TestState.COMPLETED:
        logger.info(f"Test for {record.vehicle_id} is already completed.")
        _emit(listener, TestEvent(
            kind=TestEventKind.ALREADY_COMPLETED,
            vehicle_id=record.vehicle_id,
            state=record.state,
            emission_level=record.emission_level,
            compliance_status=record.compliance_status,
        ))
        return record

    if record.state is TestState.PENDING:
        _start(record, listener)

    _evaluate(record, vehicle, legal_limit, listener)
    return record


class EmissionTestStateMachine:
    """
    State machine bound to a legal limit and an optional listener.

    Convenience wrapper around perform_test() for callers that test many
    vehicles against the same limit. Holds no per-test state, so one
    instance can be shared between threads.
    """

    def __init__(self, legal_limit: float, listener: Optional[TestEventListener] = None):
        self.legal_limit = legal_limit
        self.listener = listener

    def run(self, vehicle_id: str, vehicle: BaseVehicle) -> EmissionTest:
        """Create a fresh PENDING record for the vehicle and drive it to COMPLETED."""
        record = EmissionTest(vehicle_id=vehicle_id)
        return perform_test(record, vehicle, self.legal_limit, self.listener)

    def perform_test(self, record: EmissionTest, vehicle: BaseVehicle) -> EmissionTest:
        """Drive an existing record (see module-level perform_test)."""
        return perform_test(record, vehicle, self.legal_limit, self.listener)
