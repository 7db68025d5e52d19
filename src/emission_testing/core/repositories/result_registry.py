"""
In-memory result registry.

This module provides ResultRegistry, the shared store every test task writes
its verdict into. It is the only mutable object shared between worker
threads, so every access goes through one lock owned by the instance.

Key features:
- Exactly-once writes (a second verdict for an identifier is an error)
- Failure reasons kept apart from verdicts, so a failed test never looks
  like a "Fail" verdict
- Snapshots and listings ordered by vehicle position
"""

import threading
from typing import Dict, List, Optional, Tuple

from ..exceptions import DuplicateResultError, MalformedIdentifierError
from ..identifiers import parse_vehicle_id
from .base import IResultRepository


def _sort_key(identifier: str) -> tuple:
    """Order Vehicle_N identifiers by N, anything else after them by name."""
    try:
        return (0, parse_vehicle_id(identifier), identifier)
    except MalformedIdentifierError:
        return (1, 0, identifier)


class ResultRegistry(IResultRepository):
    """
    Thread-safe mapping of vehicle identifier → compliance verdict.

    Create one per test run and pass it to the runner; there is no global
    instance. Reads after the run has joined see a stable, complete map.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._verdicts: Dict[str, bool] = {}
        self._failures: Dict[str, str] = {}

    def record(self, identifier: str, verdict: bool) -> None:
        with self._lock:
            if identifier in self._verdicts:
                raise DuplicateResultError(f"Result for {identifier} already recorded")
            self._verdicts[identifier] = bool(verdict)

    def record_failure(self, identifier: str, reason: str) -> None:
        with self._lock:
            self._failures[identifier] = reason

    def lookup(self, identifier: str) -> Optional[bool]:
        with self._lock:
            return self._verdicts.get(identifier)

    def list_all(self) -> List[Tuple[str, bool]]:
        with self._lock:
            items = list(self._verdicts.items())
        return sorted(items, key=lambda item: _sort_key(item[0]))

    def failure_reason(self, identifier: str) -> Optional[str]:
        with self._lock:
            return self._failures.get(identifier)

    def failures(self) -> Dict[str, str]:
        """Copy of identifier → reason for every test that did not complete."""
        with self._lock:
            return dict(self._failures)

    def snapshot(self) -> Dict[str, bool]:
        """Copy of the identifier → verdict map."""
        with self._lock:
            return dict(self._verdicts)

    @property
    def passed_count(self) -> int:
        with self._lock:
            return sum(1 for verdict in self._verdicts.values() if verdict)

    @property
    def failed_count(self) -> int:
        with self._lock:
            return sum(1 for verdict in self._verdicts.values() if not verdict)

    def __len__(self) -> int:
        with self._lock:
            return len(self._verdicts)

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._verdicts

    def __repr__(self) -> str:
        return f"ResultRegistry(results={len(self)}, failures={len(self.failures())})"
