"""
Emission strategies.

Strategies turn a vehicle's characteristic parameter into an emission level.
They are pure functions wrapped in small objects so they can be registered,
named and shared between vehicles.
"""

from .base import EmissionStrategy
from .builtin import (
    GAS_EMISSION_FACTOR,
    GasEmissionStrategy,
    ElectricEmissionStrategy,
    FunctionEmissionStrategy,
)
from .registry import EmissionStrategyRegistry

__all__ = [
    "EmissionStrategy",
    "GAS_EMISSION_FACTOR",
    "GasEmissionStrategy",
    "ElectricEmissionStrategy",
    "FunctionEmissionStrategy",
    "EmissionStrategyRegistry"
]
