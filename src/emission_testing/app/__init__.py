"""Command-line application: wiring, menu and error messages."""

from .error_handler import format_error
from .service_factory import Services, create_services

__all__ = [
    "format_error",
    "Services",
    "create_services"
]
