"""
Vehicle emission compliance testing.

Runs a fleet of vehicles through per-vehicle compliance tests in parallel
and collects the pass/fail verdicts in a queryable registry.

Typical use:
    vehicles = default_fleet()
    registry = run_all(vehicles, legal_limit=180.0)
    ResultQueryService(vehicles, registry).lookup("Vehicle_1")
"""

from .core.categories import VehicleCategory
from .core.exceptions import (
    EmissionTestingError,
    ValidationError,
    InvalidEmissionValueError,
    TestStateError,
    DuplicateResultError,
    UnknownIdentifierError,
    MalformedIdentifierError,
    VehicleNotFoundError,
    FleetLoadError,
)
from .core.fleet import default_fleet, load_fleet
from .core.models import EmissionTest, ElectricVehicle, GasVehicle, TestState, create_vehicle
from .core.repositories import ResultRegistry
from .core.services import EmissionTestRunner, ResultQueryService, run_all
from .core.state_machine import perform_test
from .core.strategies import (
    EmissionStrategy,
    ElectricEmissionStrategy,
    FunctionEmissionStrategy,
    GasEmissionStrategy,
)

__version__ = "0.1.0"

__all__ = [
    "VehicleCategory",
    "EmissionTestingError",
    "ValidationError",
    "InvalidEmissionValueError",
    "TestStateError",
    "DuplicateResultError",
    "UnknownIdentifierError",
    "MalformedIdentifierError",
    "VehicleNotFoundError",
    "FleetLoadError",
    "default_fleet",
    "load_fleet",
    "EmissionTest",
    "ElectricVehicle",
    "GasVehicle",
    "TestState",
    "create_vehicle",
    "ResultRegistry",
    "EmissionTestRunner",
    "ResultQueryService",
    "run_all",
    "perform_test",
    "EmissionStrategy",
    "ElectricEmissionStrategy",
    "FunctionEmissionStrategy",
    "GasEmissionStrategy",
]
