"""
Result storage.

Repositories provided:
- IResultRepository: abstract verdict store
- ResultRegistry: in-memory, lock-guarded implementation used by test runs
"""

from .base import IResultRepository
from .result_registry import ResultRegistry

__all__ = [
    "IResultRepository",
    "ResultRegistry"
]
