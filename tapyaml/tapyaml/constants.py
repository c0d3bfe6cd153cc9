"""tapyaml constants

Sentinel codes and reserved keys for the YAML diagnostic block written by
the TAP reporter.
"""

# Project override directory: project_path / CONFIG_DIR / CONFIG_NAME
CONFIG_DIR = ".tapyaml"
CONFIG_NAME = "tap_yaml.yaml"

# Continuation lines of a block scalar sit this far right of their key.
BLOCK_INDENT = 2

# Prefix of every reconstructed stack frame line.
STACK_DELIMITER = "    at "

DEFAULT_ERROR_NAME = "Error"


class ErrorCode:
    """Sentinel values of the ``code`` diagnostic field."""

    ASSERTION = "ERR_ASSERTION"
    TEST_FAILURE = "ERR_TEST_FAILURE"


class DiagnosticKey:
    """Reserved keys consumed by the error reconstructor."""

    ERROR = "error"
    CODE = "code"
    NAME = "name"
    STACK = "stack"
    FAILURE_TYPE = "failureType"
    ACTUAL = "actual"
    EXPECTED = "expected"
    OPERATOR = "operator"

    ASSERTION_FIELDS = [ACTUAL, EXPECTED, OPERATOR]

    # Removed from the mapping once the error object is built
    CONSUMED = [STACK, CODE, FAILURE_TYPE, ACTUAL, EXPECTED, OPERATOR]
