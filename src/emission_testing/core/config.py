"""
Run configuration.

This module defines RunConfig, the single place where the settings of a test
run are collected and validated: the legal limit, concurrency and timeout
knobs, an optional fleet file and the log level.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Legal emission limit used when none is given
DEFAULT_LEGAL_LIMIT = 180.0

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


class RunConfig(BaseModel):
    """
    Settings for one emission test run.

    - legal_limit: maximum emission level that still passes (inclusive)
    - max_workers: worker threads; None means one per vehicle
    - task_timeout: seconds each test may take, measured from when a worker
      starts it; None disables the deadline
    - fleet_path: JSON fleet file; None uses the built-in reference fleet
    - log_level: standard logging level name
    """

    model_config = ConfigDict(frozen=True)

    legal_limit: float = Field(default=DEFAULT_LEGAL_LIMIT, ge=0, allow_inf_nan=False)
    max_workers: Optional[int] = Field(default=None, gt=0)
    task_timeout: Optional[float] = Field(default=None, gt=0)
    fleet_path: Optional[Path] = None
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and check the log level name.

        Raises:
            ValueError: If the name is not a standard logging level
        """
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)
