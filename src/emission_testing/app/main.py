"""
Main application entry point.

Runs the emission tests for a fleet, then lets the user browse the results:

    emission-testing [--legal-limit 180] [--fleet fleet.json] [--no-interactive]

Menu:
    1. View Test Results
    2. Check Vehicle Details
    3. Exit
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from pydantic import ValidationError as PydanticValidationError
from tabulate import tabulate

from ..core.config import DEFAULT_LEGAL_LIMIT, LOG_FORMAT, RunConfig
from ..core.exceptions import EmissionTestingError
from ..core.services.query_service import ResultQueryService
from .error_handler import format_error
from .service_factory import create_services

logger = logging.getLogger(__name__)

MENU_TEXT = """
Menu:
1. View Test Results
2. Check Vehicle Details
3. Exit
Enter your choice: """


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emission-testing",
        description="Run vehicle emission compliance tests concurrently and report the results.",
    )
    parser.add_argument(
        "--legal-limit", type=float, default=DEFAULT_LEGAL_LIMIT,
        help=f"Maximum emission level that still passes (default: {DEFAULT_LEGAL_LIMIT})",
    )
    parser.add_argument("--fleet", help="JSON fleet file (default: built-in reference fleet)")
    parser.add_argument("--max-workers", type=int, help="Worker threads (default: one per vehicle)")
    parser.add_argument("--timeout", type=float, help="Seconds each test may run once a worker starts it")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    parser.add_argument(
        "--no-interactive", action="store_true",
        help="Print the results table and exit instead of showing the menu",
    )
    return parser


def render_results(query: ResultQueryService) -> str:
    """Results table for every vehicle in the fleet."""
    rows = [
        [row.vehicle_id, row.category, row.emission_standard, row.result, row.reason or "-"]
        for row in query.build_report_rows()
    ]
    if not rows:
        return "No vehicles were tested."
    return tabulate(rows, headers=["Vehicle ID", "Type", "Standard", "Result", "Reason"])


def render_vehicle(query: ResultQueryService, identifier: str) -> str:
    """Detail lines for one vehicle, or the error message for a bad identifier."""
    try:
        summary = query.describe(identifier)
    except EmissionTestingError as e:
        return format_error(e)
    return "\n".join(summary.format_lines())


def run_menu(query: ResultQueryService, stdin: TextIO, stdout: TextIO) -> None:
    """
    Interactive menu loop.

    Returns when the user picks Exit or input ends.
    """
    while True:
        stdout.write(MENU_TEXT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return

        choice = line.strip()
        if choice == "1":
            stdout.write("\nTest Results:\n")
            stdout.write(render_results(query) + "\n")
        elif choice == "2":
            stdout.write("\nEnter Vehicle ID to see details (e.g., Vehicle_1): ")
            stdout.flush()
            identifier = stdin.readline()
            if not identifier:
                stdout.write("\n")
                return
            stdout.write(render_vehicle(query, identifier.strip()) + "\n")
        elif choice == "3":
            return
        else:
            stdout.write("Invalid choice. Please try again.\n")


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None
) -> int:
    """
    Main entry point for the application.

    Builds the configuration, runs all tests, then reports.

    Returns:
        Process exit code (0 on success, 1 on startup errors)
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    args = build_parser().parse_args(argv)

    try:
        config = RunConfig(
            legal_limit=args.legal_limit,
            max_workers=args.max_workers,
            task_timeout=args.timeout,
            fleet_path=args.fleet,
            log_level=args.log_level,
        )
    except PydanticValidationError as e:
        stdout.write(f"Invalid configuration: {e}\n")
        return 1

    logging.basicConfig(level=config.log_level_value, format=LOG_FORMAT)

    try:
        services = create_services(config)
        registry = services.runner.run_all(services.vehicles, config.legal_limit)
    except EmissionTestingError as e:
        logger.error(format_error(e, "Startup"))
        stdout.write(format_error(e, "Failed to start") + "\n")
        return 1

    query = ResultQueryService(services.vehicles, registry)

    if args.no_interactive:
        stdout.write(render_results(query) + "\n")
        return 0

    run_menu(query, stdin, stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
