"""
Validation and error handling for the procstats package.

This module provides configuration value validation and the logging
helpers used to report and propagate I/O and configuration errors.
"""

from .exceptions import (
    ErrorSeverity,
    ValidationError,
    handle_error,
    handle_config_error,
    handle_file_error,
)

from .validators import (
    validate_enum_choice,
    validate_positive_float,
    validate_positive_integer,
)

__all__ = [
    "ErrorSeverity",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    "handle_file_error",
    "validate_enum_choice",
    "validate_positive_float",
    "validate_positive_integer",
]
