"""
Vehicle category constants and utilities.

Vehicle categories form a closed set. Each category decides which
characteristic parameter a vehicle exposes and which emission strategy it
uses by default:

- Gas: engine displacement in cc, emission proportional to displacement
- Electric: battery capacity in kWh, zero emission

New categories are added by extending VehicleCategory, adding a vehicle
variant in models.vehicle and registering a default strategy.
"""

from enum import Enum


class VehicleCategory(str, Enum):
    """Closed set of vehicle categories. Values are the display names."""

    GAS = "Gas"
    ELECTRIC = "Electric"


# Name and unit of the characteristic parameter per category
# Used when describing vehicles for reports
CATEGORY_PARAMETERS = {
    VehicleCategory.GAS: ("Engine Size", "cc"),
    VehicleCategory.ELECTRIC: ("Battery Capacity", "kWh"),
}


def get_parameter_label(category: VehicleCategory) -> tuple:
    """
    Get the (name, unit) pair for a category's characteristic parameter.

    Example:
        get_parameter_label(VehicleCategory.GAS) → ("Engine Size", "cc")
    """
    return CATEGORY_PARAMETERS.get(VehicleCategory(category), ("Parameter", ""))
