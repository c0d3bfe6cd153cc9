"""Error types for tapyaml.

Two families live here:
- Reconstructed errors: the closed set of values a diagnostic block turns
  into (PlainError, AssertionFailure, WrappedTestFailure). They are data
  returned under the ``error`` key; callers decide whether to raise them.
- ConfigurationError: raised by the config layer for invalid config files.
  Parsing itself never raises.
"""

from typing import Any, Dict, Optional, Union

from tapyaml.constants import DEFAULT_ERROR_NAME, ErrorCode


class PlainError(Exception):
    """Diagnostic error that is neither an assertion nor a test failure.

    Attributes:
        message: Text of the ``error`` field.
        name: Display name used in the stack header.
        stack: ``"<name>: <message>"`` followed by the frame lines.
        code: The ``code`` field carried over as metadata, or None.
    """

    def __init__(self, message: str, code: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.name = DEFAULT_ERROR_NAME
        self.stack = ""
        self.code = code


class AssertionFailure(AssertionError):
    """Failed assertion with its comparison operands.

    Attributes:
        message: Text of the ``error`` field.
        name: Display name used in the stack header.
        stack: ``"<name>: <message>"`` followed by the frame lines.
        actual: Value the assertion received.
        expected: Value the assertion wanted.
        operator: Comparison used, e.g. ``strictEqual``.
        generated_message: Always False; the message comes from the report.
    """

    code = ErrorCode.ASSERTION

    def __init__(
        self,
        message: str,
        actual: Any = None,
        expected: Any = None,
        operator: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.name = "AssertionError"
        self.stack = ""
        self.actual = actual
        self.expected = expected
        self.operator = operator
        self.generated_message = False


class WrappedTestFailure(Exception):
    """Test-runner failure wrapping the error that caused it.

    Attributes:
        cause: The PlainError or AssertionFailure being wrapped.
        failure_type: Failure category tag (e.g. ``testCodeFailure``), or None.
        message: Message of the cause.
        stack: Frame lines only, without a header.
    """

    code = ErrorCode.TEST_FAILURE

    def __init__(self, cause: Exception, failure_type: Optional[Any] = None):
        message = getattr(cause, "message", None)
        if message is None:
            message = str(cause)
        super().__init__(message)
        self.__cause__ = cause
        self.cause = cause
        self.failure_type = failure_type
        self.message = message
        self.name = DEFAULT_ERROR_NAME
        self.stack = ""


ReconstructedError = Union[PlainError, AssertionFailure, WrappedTestFailure]


def error_to_dict(err: ReconstructedError) -> Dict[str, Any]:
    """Serialize a reconstructed error to a plain dict.

    Raises:
        TypeError: If err is not one of the reconstructed error types.
    """
    if isinstance(err, WrappedTestFailure):
        return {
            "type": "test_failure",
            "message": err.message,
            "code": err.code,
            "failure_type": err.failure_type,
            "stack": err.stack,
            "cause": error_to_dict(err.cause),
        }
    if isinstance(err, AssertionFailure):
        return {
            "type": "assertion",
            "name": err.name,
            "message": err.message,
            "code": err.code,
            "actual": err.actual,
            "expected": err.expected,
            "operator": err.operator,
            "stack": err.stack,
        }
    if isinstance(err, PlainError):
        return {
            "type": "error",
            "name": err.name,
            "message": err.message,
            "code": err.code,
            "stack": err.stack,
        }
    raise TypeError(f"Not a reconstructed error: {type(err).__name__}")


class ConfigurationError(Exception):
    """Configuration error (unknown key, invalid value).

    Attributes:
        message: Description of the error.
        field: Optional config key that caused the error.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        """Initialize ConfigurationError.

        Args:
            message: Description of the error.
            field: Optional config key that caused the error.
        """
        super().__init__(message)
        self.message = message
        self.field = field
