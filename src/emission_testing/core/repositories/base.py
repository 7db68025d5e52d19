"""
Abstract result repository interface.

This module defines IResultRepository, the interface the test runner writes
verdicts to and the query layer reads them from. Implementations decide
where results live and how concurrent writes are serialized.

The repository pattern:
- Encapsulates result storage
- Lets the runner stay unaware of locking details
- Enables easy testing (swap in a Mock or an alternative store)
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple


class IResultRepository(ABC):
    """
    Abstract store of compliance verdicts keyed by vehicle identifier.

    A missing key means "test did not complete" (or unknown identifier); a
    False value means "completed, non-compliant".
    """

    @abstractmethod
    def record(self, identifier: str, verdict: bool) -> None:
        """
        Store the verdict for an identifier.

        Raises:
            DuplicateResultError: If a verdict already exists for the identifier
        """
        pass

    @abstractmethod
    def record_failure(self, identifier: str, reason: str) -> None:
        """Remember why an identifier's test did not complete."""
        pass

    @abstractmethod
    def lookup(self, identifier: str) -> Optional[bool]:
        """
        Get the verdict for an identifier.

        Returns:
            True/False if a verdict exists, None otherwise
        """
        pass

    @abstractmethod
    def list_all(self) -> List[Tuple[str, bool]]:
        """Get all (identifier, verdict) pairs."""
        pass

    def contains(self, identifier: str) -> bool:
        """Check whether a verdict exists for an identifier."""
        return self.lookup(identifier) is not None
