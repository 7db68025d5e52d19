"""Data models: vehicles and test records."""

from .vehicle import (
    BaseVehicle,
    GasVehicle,
    ElectricVehicle,
    Vehicle,
    VehicleSummary,
    VEHICLE_ADAPTER,
    create_vehicle,
)
from .emission_test import EmissionTest, TestState

__all__ = [
    "BaseVehicle",
    "GasVehicle",
    "ElectricVehicle",
    "Vehicle",
    "VehicleSummary",
    "VEHICLE_ADAPTER",
    "create_vehicle",
    "EmissionTest",
    "TestState"
]
