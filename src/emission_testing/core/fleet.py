"""
Fleet setup.

Builds the ordered list of vehicles a run tests, either the built-in
reference fleet or one read from a JSON file:

    {
      "vehicles": [
        {"category": "Gas", "age": 5, "emission_standard": "BS6", "engine_size": 2000},
        {"category": "Electric", "age": 2, "emission_standard": "EV", "battery_capacity": 50}
      ]
    }

A bare JSON list of entries is accepted too. Vehicles of the same category
share one strategy instance from the strategy registry.
"""

import json
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, model_validator

from .categories import VehicleCategory
from .exceptions import FleetLoadError
from .models.vehicle import BaseVehicle, create_vehicle
from .strategies import EmissionStrategyRegistry


class FleetEntry(BaseModel):
    """
    One vehicle as written in a fleet file.

    Exactly the parameter field of the entry's category must be given
    (engine_size for Gas, battery_capacity for Electric).
    """

    category: VehicleCategory
    age: int = Field(ge=0)
    emission_standard: str = ""
    engine_size: Optional[float] = Field(default=None, ge=0)
    battery_capacity: Optional[float] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def validate_parameter(self):
        """
        Check that the parameter matches the category.

        Raises:
            ValueError: If the category's parameter is missing or the other
                        category's parameter is given
        """
        if self.category is VehicleCategory.GAS:
            expected, unexpected = "engine_size", "battery_capacity"
        else:
            expected, unexpected = "battery_capacity", "engine_size"

        if getattr(self, expected) is None:
            raise ValueError(f"{self.category.value} vehicles require {expected}")
        if getattr(self, unexpected) is not None:
            raise ValueError(f"{self.category.value} vehicles don't have {unexpected}")
        return self

    @property
    def parameter(self) -> float:
        if self.category is VehicleCategory.GAS:
            return self.engine_size
        return self.battery_capacity


def _build(entry: FleetEntry, registry: EmissionStrategyRegistry) -> BaseVehicle:
    return create_vehicle(
        category=entry.category,
        age=entry.age,
        emission_standard=entry.emission_standard,
        parameter=entry.parameter,
        emission_strategy=registry.get(entry.category),
    )


def default_fleet(registry: Optional[EmissionStrategyRegistry] = None) -> List[BaseVehicle]:
    """
    The reference fleet: two gas vehicles and one electric vehicle.

    - Vehicle_1: Gas, 5 years, BS6, 2000 cc
    - Vehicle_2: Electric, 2 years, EV, 50 kWh
    - Vehicle_3: Gas, 10 years, BS4, 1500 cc
    """
    registry = registry or EmissionStrategyRegistry()
    entries = [
        FleetEntry(category=VehicleCategory.GAS, age=5, emission_standard="BS6", engine_size=2000.0),
        FleetEntry(category=VehicleCategory.ELECTRIC, age=2, emission_standard="EV", battery_capacity=50.0),
        FleetEntry(category=VehicleCategory.GAS, age=10, emission_standard="BS4", engine_size=1500.0),
    ]
    return [_build(entry, registry) for entry in entries]


def load_fleet(path: Path, registry: Optional[EmissionStrategyRegistry] = None) -> List[BaseVehicle]:
    """
    Load a fleet from a JSON file.

    Args:
        path: Path to the fleet file
        registry: Strategy registry supplying each category's strategy

    Returns:
        Vehicles in file order

    Raises:
        FleetLoadError: If the file is missing, isn't valid JSON, or an
                        entry fails validation
    """
    path = Path(path)
    registry = registry or EmissionStrategyRegistry()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise FleetLoadError(f"Fleet file not found: {path}")
    except (OSError, json.JSONDecodeError) as e:
        raise FleetLoadError(f"Failed to read fleet file {path}: {e}")

    if isinstance(data, dict):
        data = data.get("vehicles")
    if not isinstance(data, list):
        raise FleetLoadError(f"Fleet file {path} must contain a list of vehicles")

    vehicles = []
    for position, raw in enumerate(data, start=1):
        try:
            entry = FleetEntry.model_validate(raw)
        except PydanticValidationError as e:
            raise FleetLoadError(f"Invalid vehicle #{position} in {path}: {e}")
        vehicles.append(_build(entry, registry))
    return vehicles
