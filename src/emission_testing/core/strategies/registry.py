"""
Emission strategy registry.

This module implements the EmissionStrategyRegistry, which maps each vehicle
category to the strategy instance that vehicles of that category use by
default. Built-in strategies are registered when the registry is created.

The registry pattern allows:
- One shared, read-only strategy instance per category
- Lookup by category
- Easy extension (register a strategy for a new category)

Usage:
    registry = EmissionStrategyRegistry()
    gas = registry.get(VehicleCategory.GAS)
    all_categories = registry.list_all()
"""

from typing import Dict, Optional

from ..categories import VehicleCategory
from .base import EmissionStrategy
from .builtin import ElectricEmissionStrategy, GasEmissionStrategy


class EmissionStrategyRegistry:
    """
    Registry for default emission strategies per vehicle category.

    Each registry owns its own mapping; create one per fleet setup and pass
    it to whatever builds vehicles. Strategy instances handed out by the
    registry are shared by every vehicle of the category, which is safe
    because strategies are stateless.
    """

    def __init__(self):
        # Registry dictionary: category -> EmissionStrategy instance
        self._registry: Dict[VehicleCategory, EmissionStrategy] = {}
        self._initialize()

    def _initialize(self):
        """Register the built-in Gas and Electric strategies."""
        self.register(VehicleCategory.GAS, GasEmissionStrategy())
        self.register(VehicleCategory.ELECTRIC, ElectricEmissionStrategy())

    def register(self, category: VehicleCategory, strategy: EmissionStrategy) -> None:
        """
        Register the default strategy for a category.

        Overwrites any strategy previously registered for the category.

        Args:
            category: Vehicle category
            strategy: Strategy implementation to use for that category
        """
        if not isinstance(strategy, EmissionStrategy):
            raise TypeError(
                f"Strategy must implement EmissionStrategy, got: {type(strategy).__name__}"
            )
        self._registry[VehicleCategory(category)] = strategy

    def get(self, category: VehicleCategory) -> Optional[EmissionStrategy]:
        """
        Get the strategy for a category.

        Returns:
            EmissionStrategy instance if registered, None otherwise
        """
        return self._registry.get(VehicleCategory(category))

    def list_all(self) -> list[VehicleCategory]:
        """List all categories with a registered strategy."""
        return list(self._registry.keys())

    def is_registered(self, category: VehicleCategory) -> bool:
        """Check if a category has a registered strategy."""
        return VehicleCategory(category) in self._registry
