"""
Custom exception classes for the application.

This module defines a hierarchy of custom exceptions used throughout the
application. All exceptions inherit from EmissionTestingError, allowing
catch-all exception handling while maintaining specific error types for
better error messages and debugging.

Exception hierarchy:
- EmissionTestingError (base)
  - ValidationError (validation failures)
    - MalformedIdentifierError (identifier does not parse)
  - InvalidEmissionValueError (strategy produced a negative emission level)
  - TestStateError (illegal state transition on a test record)
  - DuplicateResultError (verdict recorded twice for one identifier)
  - UnknownIdentifierError (identifier not in registry or fleet)
    - VehicleNotFoundError (vehicle index outside the fleet)
  - FleetLoadError (fleet file loading/parsing failures)
"""


class EmissionTestingError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions should inherit from this class. This allows:
    - Catch-all exception handling (catch EmissionTestingError)
    - Type checking and error categorization
    - Consistent error handling patterns

    Don't raise this directly - use more specific exceptions instead.
    """
    pass


class ValidationError(EmissionTestingError):
    """
    Raised when validation fails.

    Used for configuration and input values that aren't specific enough to
    warrant their own exception class (e.g., a legal limit that is not a
    finite number).
    """
    pass


class MalformedIdentifierError(ValidationError):
    """
    Raised when a vehicle identifier does not parse.

    Identifiers must follow the format Vehicle_N where N is a positive
    base-10 integer. Raised by the query boundary so the caller can show a
    message and ask again.
    """
    pass


class InvalidEmissionValueError(EmissionTestingError):
    """
    Raised when a strategy yields an invalid emission level.

    A negative (or NaN) emission level is physically meaningless and points
    to a faulty strategy or corrupted input. Raised during the
    InProgress -> Completed transition; the test record stays InProgress and
    no verdict is stored.
    """
    pass


class TestStateError(EmissionTestingError):
    """
    Raised when an illegal state transition is attempted.

    Examples:
    - Completing a record that is still Pending (skipping InProgress)
    - Writing a verdict on a record that is already Completed
    """
    # Keep pytest from collecting this class as a test case
    __test__ = False


class DuplicateResultError(EmissionTestingError):
    """
    Raised when a verdict is recorded twice for the same identifier.

    The result registry accepts exactly one verdict per identifier per run.
    """
    pass


class UnknownIdentifierError(EmissionTestingError):
    """
    Raised when an identifier has no registry entry and no vehicle.

    Non-fatal: surfaced to the caller as a reportable condition.
    """
    pass


class VehicleNotFoundError(UnknownIdentifierError):
    """
    Raised when a vehicle index is outside the fleet.

    Typically raised by the query service when describing a vehicle.
    """
    pass


class FleetLoadError(EmissionTestingError):
    """
    Raised when a fleet file cannot be loaded.

    Used for:
    - File not found / unreadable
    - Invalid JSON
    - Entries that fail model validation
    """
    pass


# Names used by the data contract
InvalidEmissionValue = InvalidEmissionValueError
UnknownIdentifier = UnknownIdentifierError
MalformedIdentifierInput = MalformedIdentifierError
