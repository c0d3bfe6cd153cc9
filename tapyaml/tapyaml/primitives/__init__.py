"""tapyaml primitives: value coercion and error types."""

from tapyaml.primitives.coerce import ScalarValue, coerce_value, parse_number, to_text
from tapyaml.primitives.errors import (
    AssertionFailure,
    ConfigurationError,
    PlainError,
    ReconstructedError,
    WrappedTestFailure,
    error_to_dict,
)

__all__ = [
    # Coercion
    "ScalarValue",
    "coerce_value",
    "parse_number",
    "to_text",
    # Errors
    "PlainError",
    "AssertionFailure",
    "WrappedTestFailure",
    "ReconstructedError",
    "error_to_dict",
    "ConfigurationError",
]
