"""
Result query service.

This module provides ResultQueryService, the read side used by the CLI and
any other reporting layer once a run has finished. It answers:

- "What was the verdict for Vehicle_N?"   → lookup()
- "Show all results"                      → list_all()
- "Show vehicle N"                        → describe()
- "Why did Vehicle_N not complete?"       → failure_reason()

Errors are recoverable: malformed identifiers raise MalformedIdentifierError
and unknown ones UnknownIdentifierError / VehicleNotFoundError, so the
caller can show a message and let the user try again.
"""

from typing import List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel

from ..exceptions import UnknownIdentifierError, VehicleNotFoundError
from ..identifiers import format_vehicle_id, parse_vehicle_id
from ..models.vehicle import BaseVehicle, VehicleSummary
from ..repositories.result_registry import ResultRegistry

PASS_TEXT = "Pass"
FAIL_TEXT = "Fail"
INCOMPLETE_TEXT = "Incomplete"


class ReportRow(BaseModel):
    """One line of the results report."""

    vehicle_id: str
    category: str
    emission_standard: str
    result: str
    reason: str = ""


def verdict_text(verdict: Optional[bool]) -> str:
    """Render a verdict: True → Pass, False → Fail, None → Incomplete."""
    if verdict is None:
        return INCOMPLETE_TEXT
    return PASS_TEXT if verdict else FAIL_TEXT


class ResultQueryService:
    """
    Read-only queries over a finished run.

    Args:
        vehicles: The fleet, in the order it was tested
        registry: The registry returned by the runner
    """

    def __init__(self, vehicles: Sequence[BaseVehicle], registry: ResultRegistry):
        self.vehicles = list(vehicles)
        self.registry = registry

    def lookup(self, identifier: str) -> Optional[bool]:
        """
        Get the verdict for an identifier.

        Returns:
            True/False for a completed test, None when the vehicle exists but
            its test did not complete

        Raises:
            MalformedIdentifierError: If the identifier doesn't parse
            UnknownIdentifierError: If there is neither a verdict nor a vehicle
        """
        index = parse_vehicle_id(identifier)
        identifier = format_vehicle_id(index + 1)

        verdict = self.registry.lookup(identifier)
        if verdict is not None:
            return verdict
        if index < len(self.vehicles):
            return None
        raise UnknownIdentifierError(f"No test result or vehicle for {identifier}")

    def list_all(self) -> List[Tuple[str, bool]]:
        """All (identifier, verdict) pairs, ordered by vehicle position."""
        return self.registry.list_all()

    def describe(self, vehicle_ref: Union[int, str]) -> VehicleSummary:
        """
        Describe a vehicle.

        Args:
            vehicle_ref: 0-based fleet index, or an identifier like "Vehicle_2"

        Raises:
            MalformedIdentifierError: If a string reference doesn't parse
            VehicleNotFoundError: If the index is outside the fleet
        """
        if isinstance(vehicle_ref, str):
            index = parse_vehicle_id(vehicle_ref)
        else:
            index = vehicle_ref

        if not 0 <= index < len(self.vehicles):
            raise VehicleNotFoundError(
                f"Invalid Vehicle ID: no vehicle at position {index + 1} "
                f"(fleet has {len(self.vehicles)})"
            )
        return self.vehicles[index].describe()

    def failure_reason(self, identifier: str) -> Optional[str]:
        """Why an identifier's test did not complete (None if it did or never ran)."""
        index = parse_vehicle_id(identifier)
        return self.registry.failure_reason(format_vehicle_id(index + 1))

    def build_report_rows(self) -> List[ReportRow]:
        """One row per vehicle in fleet order, including incomplete tests."""
        verdicts = self.registry.snapshot()
        failures = self.registry.failures()

        rows = []
        for position, vehicle in enumerate(self.vehicles, start=1):
            vehicle_id = format_vehicle_id(position)
            verdict = verdicts.get(vehicle_id)
            rows.append(ReportRow(
                vehicle_id=vehicle_id,
                category=vehicle.category.value,
                emission_standard=vehicle.emission_standard,
                result=verdict_text(verdict),
                reason=failures.get(vehicle_id, "") if verdict is None else "",
            ))
        return rows
