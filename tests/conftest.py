"""Pytest fixtures and configuration."""

import pytest

from emission_testing.core.models.vehicle import ElectricVehicle, GasVehicle
from emission_testing.core.repositories.result_registry import ResultRegistry
from emission_testing.core.strategies import (
    ElectricEmissionStrategy,
    FunctionEmissionStrategy,
    GasEmissionStrategy,
)


@pytest.fixture
def gas_strategy():
    """Provide the gas emission strategy (displacement x 0.1)."""
    return GasEmissionStrategy()


@pytest.fixture
def electric_strategy():
    """Provide the electric (zero emission) strategy."""
    return ElectricEmissionStrategy()


@pytest.fixture
def negative_strategy():
    """Provide a faulty strategy that always returns -5."""
    return FunctionEmissionStrategy(lambda x: -5.0, name="Faulty")


@pytest.fixture
def gas_vehicle(gas_strategy):
    """Provide a gas vehicle emitting 200 (2000 cc)."""
    return GasVehicle(
        age=5,
        emission_standard="BS6",
        engine_size=2000.0,
        emission_strategy=gas_strategy
    )


@pytest.fixture
def small_gas_vehicle(gas_strategy):
    """Provide a gas vehicle emitting 150 (1500 cc)."""
    return GasVehicle(
        age=10,
        emission_standard="BS4",
        engine_size=1500.0,
        emission_strategy=gas_strategy
    )


@pytest.fixture
def electric_vehicle(electric_strategy):
    """Provide an electric vehicle (50 kWh)."""
    return ElectricVehicle(
        age=2,
        emission_standard="EV",
        battery_capacity=50.0,
        emission_strategy=electric_strategy
    )


@pytest.fixture
def sample_fleet(gas_vehicle, electric_vehicle, small_gas_vehicle):
    """Provide the three-vehicle reference fleet."""
    return [gas_vehicle, electric_vehicle, small_gas_vehicle]


@pytest.fixture
def registry():
    """Provide an empty result registry."""
    return ResultRegistry()
