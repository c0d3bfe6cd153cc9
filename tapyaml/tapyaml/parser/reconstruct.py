"""Rebuild an error object from the diagnostic fields of a parsed block.

Classification, in order of precedence:
    assertion    - code is ERR_ASSERTION, or actual/expected/operator present
    test failure - code is ERR_TEST_FAILURE, or failureType present
Both may hold at once: the assertion becomes the cause of the test failure.
"""

import logging
from typing import Any, Dict, List, Optional

from tapyaml.constants import DiagnosticKey
from tapyaml.loaders.config_loader import DEFAULT_CONFIG, TapYamlConfig
from tapyaml.parser.diagnostic import Diagnostic
from tapyaml.primitives.coerce import to_text
from tapyaml.primitives.errors import (
    AssertionFailure,
    PlainError,
    ReconstructedError,
    WrappedTestFailure,
)

logger = logging.getLogger(__name__)


def format_stack(stack: Any, delimiter: str) -> str:
    """Join frame lines, each prefixed with the delimiter.

    None or an empty scalar gives empty text; any other scalar is treated
    as a single frame. A list counts even when empty.
    """
    if stack is None or (not isinstance(stack, list) and not stack):
        return ""
    frames: List[str] = stack if isinstance(stack, list) else [stack]
    return delimiter + f"\n{delimiter}".join(to_text(frame) for frame in frames)


def build_error(
    diagnostic: Diagnostic, config: Optional[TapYamlConfig] = None
) -> ReconstructedError:
    """Build the error variant for a diagnostic whose ``error`` is present."""
    config = config or DEFAULT_CONFIG
    code = diagnostic.get(DiagnosticKey.CODE)
    is_assertion = code == config.assertion_code or any(
        diagnostic.has(key) for key in DiagnosticKey.ASSERTION_FIELDS
    )
    is_test_failure = code == config.test_failure_code or diagnostic.has(
        DiagnosticKey.FAILURE_TYPE
    )
    logger.debug(
        f"Reconstructing error: assertion={is_assertion}, "
        f"test_failure={is_test_failure}"
    )

    message = to_text(diagnostic.get(DiagnosticKey.ERROR))
    stack = format_stack(diagnostic.get(DiagnosticKey.STACK), config.stack_delimiter)

    if is_assertion:
        cause = AssertionFailure(
            message,
            actual=diagnostic.get(DiagnosticKey.ACTUAL),
            expected=diagnostic.get(DiagnosticKey.EXPECTED),
            operator=diagnostic.get(DiagnosticKey.OPERATOR),
        )
    else:
        cause = PlainError(message)

    name = diagnostic.get(DiagnosticKey.NAME)
    name = config.default_error_name if name is None else to_text(name)
    cause.name = name
    cause.stack = f"{name}: {message}\n{stack}"

    if not is_assertion and not is_test_failure:
        cause.code = code

    if is_test_failure:
        error = WrappedTestFailure(cause, diagnostic.get(DiagnosticKey.FAILURE_TYPE))
        error.stack = stack
        return error
    return cause


def reconstruct_error(
    parsed: Dict[str, Any], config: Optional[TapYamlConfig] = None
) -> Dict[str, Any]:
    """Replace the diagnostic fields of a parsed mapping with one ``error``.

    A mapping without an ``error`` key is returned as is. Otherwise a new
    mapping is returned; ``parsed`` is not modified.
    """
    diagnostic = Diagnostic.from_mapping(parsed)
    if not diagnostic.has(DiagnosticKey.ERROR):
        return parsed
    error = build_error(diagnostic, config)
    return diagnostic.without_consumed(error).to_dict()
