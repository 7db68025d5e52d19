"""
Error message helpers for the CLI.

Maps application exceptions to the one-line messages shown to the user.
Query errors (bad or unknown identifiers) are recoverable: the menu prints
the message and keeps going. Anything unexpected is reported with its type.
"""

from ..core.exceptions import (
    EmissionTestingError,
    FleetLoadError,
    MalformedIdentifierError,
    UnknownIdentifierError,
    ValidationError,
    VehicleNotFoundError,
)


def format_error(exception: Exception, context: str = "") -> str:
    """
    Build a user-facing message for an exception.

    Args:
        exception: Exception that was raised
        context: Optional context (e.g., "Loading fleet")

    Returns:
        Message text
    """
    prefix = f"{context}: " if context else ""

    if isinstance(exception, VehicleNotFoundError):
        return f"{prefix}Invalid Vehicle ID. {exception}"
    if isinstance(exception, MalformedIdentifierError):
        return f"{prefix}Invalid Vehicle ID. {exception}"
    if isinstance(exception, UnknownIdentifierError):
        return f"{prefix}{exception}"
    if isinstance(exception, FleetLoadError):
        return f"{prefix}{exception}"
    if isinstance(exception, ValidationError):
        return f"{prefix}Validation error: {exception}"
    if isinstance(exception, EmissionTestingError):
        return f"{prefix}{exception}"
    return f"{prefix}An unexpected error occurred: {type(exception).__name__}: {exception}"
