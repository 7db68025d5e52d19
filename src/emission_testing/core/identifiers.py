"""
Vehicle identifier constants and utilities.

Every vehicle in a test run gets a deterministic identifier derived from its
1-based position in the input sequence: the first vehicle is "Vehicle_1",
the second "Vehicle_2", and so on. The same identifier keys the result
registry and is what users type to look up a vehicle.

The module provides:
- The identifier prefix (for formatting and parsing)
- Formatting from a position
- Parsing back to a 0-based fleet index
- A non-raising validity check
"""

from .exceptions import MalformedIdentifierError

VEHICLE_ID_PREFIX = "Vehicle_"


def format_vehicle_id(position: int) -> str:
    """
    Build the identifier for a vehicle.

    Args:
        position: 1-based position of the vehicle in the fleet

    Returns:
        Identifier string

    Example:
        format_vehicle_id(1) → "Vehicle_1"
    """
    if position < 1:
        raise ValueError(f"Vehicle position must be >= 1, got: {position}")
    return f"{VEHICLE_ID_PREFIX}{position}"


def parse_vehicle_id(identifier: str) -> int:
    """
    Parse an identifier back to a 0-based fleet index.

    Surrounding whitespace is ignored. The suffix must be a plain base-10
    integer >= 1 (no sign, no spaces).

    Args:
        identifier: Identifier string (e.g., "Vehicle_3")

    Returns:
        0-based index into the fleet (e.g., 2)

    Raises:
        MalformedIdentifierError: If the identifier doesn't follow Vehicle_N

    Example:
        parse_vehicle_id("Vehicle_3") → 2
        parse_vehicle_id("Car_3") → MalformedIdentifierError
    """
    if not isinstance(identifier, str):
        raise MalformedIdentifierError(
            f"Vehicle ID must be a string, got: {type(identifier).__name__}"
        )

    text = identifier.strip()
    if not text.startswith(VEHICLE_ID_PREFIX):
        raise MalformedIdentifierError(
            f"Vehicle ID must be in format {VEHICLE_ID_PREFIX}N, got: {identifier!r}"
        )

    suffix = text[len(VEHICLE_ID_PREFIX):]
    # isdecimal() rejects signs, spaces and unicode superscripts
    if not suffix.isascii() or not suffix.isdecimal():
        raise MalformedIdentifierError(
            f"Vehicle ID must end with a number, got: {identifier!r}"
        )

    position = int(suffix)
    if position < 1:
        raise MalformedIdentifierError(
            f"Vehicle numbers start at 1, got: {identifier!r}"
        )

    return position - 1


def is_valid_vehicle_id(identifier: str) -> bool:
    """
    Check whether an identifier parses.

    Example:
        is_valid_vehicle_id("Vehicle_1") → True
        is_valid_vehicle_id("Vehicle_x") → False
    """
    try:
        parse_vehicle_id(identifier)
    except MalformedIdentifierError:
        return False
    return True
