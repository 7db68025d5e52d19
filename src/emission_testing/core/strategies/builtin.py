"""
Built-in emission strategies.

- GasEmissionStrategy: emission proportional to engine displacement
- ElectricEmissionStrategy: zero emission regardless of input
- FunctionEmissionStrategy: adapter for any injected pure function
"""

from typing import Callable, Optional

from .base import EmissionStrategy

# Emission units per cc of engine displacement
GAS_EMISSION_FACTOR = 0.1


class GasEmissionStrategy(EmissionStrategy):
    """
    Emission rule for gas vehicles.

    emission = engine_size * GAS_EMISSION_FACTOR

    Example: 2000 cc → 200.0
    """

    def __init__(self, factor: float = GAS_EMISSION_FACTOR):
        self._factor = factor

    @property
    def name(self) -> str:
        return "Gas"

    @property
    def description(self) -> str:
        return f"Engine displacement (cc) x {self._factor}"

    @property
    def factor(self) -> float:
        return self._factor

    def calculate(self, parameter: float) -> float:
        return parameter * self._factor


class ElectricEmissionStrategy(EmissionStrategy):
    """Emission rule for electric vehicles: always zero."""

    @property
    def name(self) -> str:
        return "Electric"

    @property
    def description(self) -> str:
        return "Zero tailpipe emission"

    def calculate(self, parameter: float) -> float:
        return 0.0


class FunctionEmissionStrategy(EmissionStrategy):
    """
    Strategy backed by an injected function f(parameter) -> emission.

    Lets callers plug in any rule without subclassing. The function must be
    pure: it is called from worker threads without locking.

    Example:
        halved = FunctionEmissionStrategy(lambda x: x / 2, name="Half")
    """

    def __init__(
        self,
        func: Callable[[float], float],
        name: Optional[str] = None,
        description: str = ""
    ):
        if not callable(func):
            raise TypeError(f"Emission function must be callable, got: {type(func).__name__}")
        self._func = func
        self._name = name or getattr(func, "__name__", "Custom")
        self._description = description

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    def calculate(self, parameter: float) -> float:
        return float(self._func(parameter))
