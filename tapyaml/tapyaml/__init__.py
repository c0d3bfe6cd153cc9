"""tapyaml: read the YAML diagnostic block of TAP test output."""

from tapyaml.loaders.config_loader import DEFAULT_CONFIG, ConfigLoader, TapYamlConfig
from tapyaml.parser import Diagnostic, build_error, parse_lines, reconstruct_error
from tapyaml.primitives.coerce import coerce_value
from tapyaml.primitives.errors import (
    AssertionFailure,
    ConfigurationError,
    PlainError,
    ReconstructedError,
    WrappedTestFailure,
    error_to_dict,
)
from tapyaml.reader import yaml_to_py

__version__ = "1.0.0"

__all__ = [
    "yaml_to_py",
    "parse_lines",
    "reconstruct_error",
    "build_error",
    "coerce_value",
    "Diagnostic",
    # Errors
    "PlainError",
    "AssertionFailure",
    "WrappedTestFailure",
    "ReconstructedError",
    "error_to_dict",
    "ConfigurationError",
    # Config
    "TapYamlConfig",
    "ConfigLoader",
    "DEFAULT_CONFIG",
]
