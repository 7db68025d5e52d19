"""
Abstract base class for emission strategies.

This module defines the EmissionStrategy interface, which all emission rules
must implement. Strategies are pluggable components that turn a vehicle's
characteristic parameter into an emission level (e.g., displacement in cc
for gas vehicles, battery capacity in kWh for electric vehicles).

The contract:
- calculate(parameter) is pure and deterministic (no side effects, no state)
- The parameter arrives in the unit the strategy expects (no conversion)
- Range validation is NOT the strategy's job; the test state machine rejects
  negative results

Strategies are stateless, so one instance can be shared by any number of
vehicles and read concurrently from worker threads.
"""

from abc import ABC, abstractmethod


class EmissionStrategy(ABC):
    """
    Abstract base class for all emission strategy implementations.

    Examples of strategies:
    - Gas: emission = displacement * 0.1
    - Electric: emission = 0
    - Function: any injected pure function

    Instances are callable: strategy(x) is the same as strategy.calculate(x).
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the name of this strategy.

        Used for identification, registration and reports.

        Examples: "Gas", "Electric"
        """
        pass

    @property
    def description(self) -> str:
        """Human-readable description of the rule (optional)."""
        return ""

    @abstractmethod
    def calculate(self, parameter: float) -> float:
        """
        Calculate the emission level for a parameter.

        Args:
            parameter: The vehicle's characteristic parameter, already in the
                       unit this strategy expects

        Returns:
            Emission level (expected non-negative; not validated here)
        """
        pass

    def __call__(self, parameter: float) -> float:
        return self.calculate(parameter)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
