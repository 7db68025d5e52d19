"""
Service factory for wiring a test run.

This module provides a factory function that builds everything a run needs
from a RunConfig: the strategy registry, the fleet and the runner. It is the
single point of configuration for the application, which keeps the CLI thin
and makes it easy to swap pieces in tests.
"""

from typing import List, NamedTuple, Optional

from ..core.config import RunConfig
from ..core.fleet import default_fleet, load_fleet
from ..core.models.vehicle import BaseVehicle
from ..core.services.test_runner import EmissionTestRunner
from ..core.state_machine import TestEventListener
from ..core.strategies import EmissionStrategyRegistry


class Services(NamedTuple):
    """Objects wired together for one run."""

    config: RunConfig
    strategies: EmissionStrategyRegistry
    vehicles: List[BaseVehicle]
    runner: EmissionTestRunner


def create_services(
    config: Optional[RunConfig] = None,
    listener: Optional[TestEventListener] = None
) -> Services:
    """
    Create the fleet and runner for a configuration.

    This function:
    1. Creates the strategy registry (one shared strategy per category)
    2. Loads the fleet from config.fleet_path, or uses the reference fleet
    3. Creates the runner with the configured workers and timeout

    Args:
        config: Run configuration; defaults are used if None
        listener: Optional TestEvent listener passed to the runner

    Returns:
        Services(config, strategies, vehicles, runner)

    Raises:
        FleetLoadError: If the fleet file cannot be loaded
    """
    config = config or RunConfig()
    strategies = EmissionStrategyRegistry()

    if config.fleet_path is not None:
        vehicles = load_fleet(config.fleet_path, registry=strategies)
    else:
        vehicles = default_fleet(registry=strategies)

    runner = EmissionTestRunner(
        max_workers=config.max_workers,
        task_timeout=config.task_timeout,
        listener=listener,
    )
    return Services(config, strategies, vehicles, runner)
