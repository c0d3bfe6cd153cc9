"""Parse the YAML diagnostic block of a TAP test point.

This reads the subset of YAML the TAP reporter writes, not YAML in
general. Use yaml.safe_load for anything else.
"""

from typing import Any, Dict, Iterable, Optional

from tapyaml.loaders.config_loader import TapYamlConfig
from tapyaml.parser.reconstruct import reconstruct_error
from tapyaml.parser.scanner import parse_lines


def yaml_to_py(
    lines: Optional[Iterable[str]], config: Optional[TapYamlConfig] = None
) -> Optional[Dict[str, Any]]:
    """Parse diagnostic lines and rebuild the reported error, if any.

    Args:
        lines: The lines between the ``---`` and ``...`` markers, or None.
        config: Parser settings. Defaults to the built-in values.

    Returns:
        Mapping of key to value, with the error fields folded into a single
        ``error`` entry holding a PlainError, AssertionFailure or
        WrappedTestFailure. None when lines is None or empty.
    """
    parsed = parse_lines(lines, config)
    if parsed is None:
        return None
    return reconstruct_error(parsed, config)
