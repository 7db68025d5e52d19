"""
Business logic services.

This module provides the service layer that runs tests and answers queries
about their results. Services receive their collaborators (registry,
vehicles) explicitly, enabling:
- Easy testing (can pass a Mock registry)
- One independent registry per run
- Clean separation between running and reporting

Services provided:
- EmissionTestRunner: concurrent execution of a fleet's tests
- ResultQueryService: lookups and report rows over a finished run
"""

from .test_runner import EmissionTestRunner, RunSummary, run_all
from .query_service import ResultQueryService, ReportRow, verdict_text

__all__ = [
    "EmissionTestRunner",
    "RunSummary",
    "run_all",
    "ResultQueryService",
    "ReportRow",
    "verdict_text"
]
