"""
Vehicle models.

This module defines the vehicles that go through compliance testing. A
vehicle is a tagged variant over VehicleCategory: each category has its own
model carrying only its characteristic parameter, so category and parameter
semantics cannot disagree.

Key features:
- Immutable (frozen) models, safe to read from many worker threads
- Category-specific parameter (engine size for Gas, battery capacity for Electric)
- Emission level delegated to an injected EmissionStrategy
- Default strategy chosen by category when none is injected
- Structured summary for the reporting layer
"""

from typing import Annotated, Any, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

from ..categories import VehicleCategory, get_parameter_label
from ..strategies import EmissionStrategy, EmissionStrategyRegistry, FunctionEmissionStrategy

# Default strategies, shared by every vehicle that isn't given one
_DEFAULT_STRATEGIES = EmissionStrategyRegistry()


class VehicleSummary(BaseModel):
    """
    Structured description of a vehicle for reports.

    Example (Gas vehicle):
    - category=Gas, age=5, emission_standard="BS6"
    - parameter_name="Engine Size", parameter=2000.0, parameter_unit="cc"
    """

    model_config = ConfigDict(frozen=True)

    category: VehicleCategory
    age: int
    emission_standard: str
    parameter_name: str
    parameter: float
    parameter_unit: str

    def format_lines(self) -> List[str]:
        """Return the human-readable detail lines for this vehicle."""
        parameter_line = f"{self.parameter_name}: {self.parameter} {self.parameter_unit}".rstrip()
        return [
            f"Vehicle Type: {self.category.value}",
            f"Age: {self.age}",
            f"Emission Standard: {self.emission_standard}",
            parameter_line,
        ]


class BaseVehicle(BaseModel):
    """
    Common vehicle fields and behavior.

    Don't instantiate directly - use GasVehicle or ElectricVehicle. Each
    variant supplies its parameter through the `parameter` property; nothing
    else differs between categories.

    Age and emission standard are descriptive metadata. They are shown in
    reports but never used in the compliance decision.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    category: VehicleCategory

    # Vehicle age in whole years
    age: int = Field(ge=0, description="Vehicle age in years")

    # Free-form emission standard label (e.g., "BS6", "Euro 6")
    emission_standard: str = ""

    # Rule used to turn the parameter into an emission level
    # Filled with the category default when omitted
    emission_strategy: EmissionStrategy = Field(repr=False)

    @model_validator(mode="before")
    @classmethod
    def apply_default_strategy(cls, data: Any) -> Any:
        """Use the category's default strategy if none was given."""
        if not isinstance(data, dict) or data.get("emission_strategy") is not None:
            return data

        category = data.get("category") or cls.model_fields["category"].default
        try:
            strategy = _DEFAULT_STRATEGIES.get(category)
        except ValueError:
            # Unknown category - let field validation report it
            return data

        if strategy is not None:
            data = {**data, "emission_strategy": strategy}
        return data

    @field_validator("emission_strategy", mode="before")
    @classmethod
    def wrap_plain_function(cls, v: Any) -> Any:
        """Accept a bare function f(parameter) -> emission as a strategy."""
        if callable(v) and not isinstance(v, EmissionStrategy):
            return FunctionEmissionStrategy(v)
        return v

    @property
    def parameter(self) -> float:
        """The category-specific parameter fed to the strategy."""
        raise NotImplementedError

    def get_emission_level(self) -> float:
        """
        Compute this vehicle's emission level.

        Delegates to the assigned strategy with the stored parameter. The
        result is not validated here; the test state machine rejects
        negative values.
        """
        return self.emission_strategy.calculate(self.parameter)

    def describe(self) -> VehicleSummary:
        """Build a structured summary (category, age, standard, parameter)."""
        parameter_name, parameter_unit = get_parameter_label(self.category)
        return VehicleSummary(
            category=self.category,
            age=self.age,
            emission_standard=self.emission_standard,
            parameter_name=parameter_name,
            parameter=self.parameter,
            parameter_unit=parameter_unit,
        )


class GasVehicle(BaseVehicle):
    """Combustion vehicle; emission is driven by engine displacement."""

    category: Literal[VehicleCategory.GAS] = VehicleCategory.GAS

    # Engine displacement in cc
    engine_size: float = Field(ge=0, description="Engine displacement in cc")

    @property
    def parameter(self) -> float:
        return self.engine_size


class ElectricVehicle(BaseVehicle):
    """Battery electric vehicle; emission strategy receives battery capacity."""

    category: Literal[VehicleCategory.ELECTRIC] = VehicleCategory.ELECTRIC

    # Battery capacity in kWh
    battery_capacity: float = Field(ge=0, description="Battery capacity in kWh")

    @property
    def parameter(self) -> float:
        return self.battery_capacity


# Tagged union over all vehicle categories, discriminated by `category`
Vehicle = Annotated[Union[GasVehicle, ElectricVehicle], Field(discriminator="category")]

VEHICLE_ADAPTER = TypeAdapter(Vehicle)

# Category -> name of the field holding its parameter
_PARAMETER_FIELDS = {
    VehicleCategory.GAS: "engine_size",
    VehicleCategory.ELECTRIC: "battery_capacity",
}


def create_vehicle(
    category: VehicleCategory,
    age: int,
    emission_standard: str,
    parameter: float,
    emission_strategy: Any = None
) -> BaseVehicle:
    """
    Build a vehicle from a category and a generic parameter value.

    Maps the parameter onto the category's own field (engine_size or
    battery_capacity) so callers that only know "the parameter" don't need
    to branch on category.

    Args:
        category: Vehicle category (enum or its value, e.g. "Gas")
        age: Age in years
        emission_standard: Emission standard label
        parameter: Characteristic parameter in the category's unit
        emission_strategy: Optional strategy or plain function; category default if None

    Returns:
        GasVehicle or ElectricVehicle
    """
    category = VehicleCategory(category)
    data = {
        "category": category,
        "age": age,
        "emission_standard": emission_standard,
        _PARAMETER_FIELDS[category]: parameter,
    }
    if emission_strategy is not None:
        data["emission_strategy"] = emission_strategy
    return VEHICLE_ADAPTER.validate_python(data)
