"""Line scanner for the YAML subset written by the TAP reporter.

Supported: ``key: value`` flow scalars, ``'quoted'`` single-line strings
and block scalars opened by ``>`` or ``|`` (optionally with a ``+``/``-``
chomping indicator, which is accepted and ignored). Nothing else; lines
that do not look like a key line are skipped.

The scanner is an explicit two-state machine:

    Scanning --key line with block indicator--> InBlock(key, indent, buffer)
    InBlock  --line indented >= indent--------> InBlock (line appended)
    InBlock  --any other line / end of input--> Scanning (block closed)

Closing a block joins its lines with "\\n", except for the stack key,
whose lines stay a list for the error reconstructor.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

from tapyaml.constants import DiagnosticKey
from tapyaml.loaders.config_loader import DEFAULT_CONFIG, TapYamlConfig
from tapyaml.primitives.coerce import coerce_value

logger = logging.getLogger(__name__)

# leading spaces, key, separator, block indicator, value
_KEY_LINE_RE = re.compile(r"^(\s+)?(\w+):(\s)+([>|][-+]?)?(.*)$", re.ASCII)


@dataclass(frozen=True)
class Scanning:
    """Not inside a block scalar."""


@dataclass
class InBlock:
    """Collecting continuation lines of a block scalar.

    Attributes:
        key: Key that opened the block.
        indent: Minimum leading whitespace of a continuation line. Fixed
            when the block opens, from the key line's own indentation.
        buffer: Continuation lines with ``indent`` characters removed.
    """

    key: str
    indent: int
    buffer: List[str] = field(default_factory=list)


ScanState = Union[Scanning, InBlock]

SCANNING = Scanning()


def leading_whitespace(line: str) -> int:
    return len(line) - len(line.lstrip())


class LineScanner:
    """Feeds lines one at a time into a flat key -> value mapping."""

    def __init__(self, config: Optional[TapYamlConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.state: ScanState = SCANNING
        self.result: Dict[str, Any] = {}

    def feed(self, line: str) -> ScanState:
        """Consume one line and return the state after it."""
        state = self.state
        if isinstance(state, InBlock) and leading_whitespace(line) < state.indent:
            self._close_block(state)
            state = self.state

        if isinstance(state, InBlock):
            state.buffer.append(line[state.indent:])
            return state

        match = _KEY_LINE_RE.match(line)
        if match is None:
            logger.debug(f"Skipping non-key line: {line!r}")
            return state

        leading, key, _, block, value = match.groups()
        if block:
            indent = len(leading or "") + self.config.block_indent
            self.state = InBlock(key=key, indent=indent)
            self.result[key] = self.state.buffer
            logger.debug(f"Opened block '{key}' at indent {indent}")
        else:
            self.result[key] = coerce_value(value)
        return self.state

    def finish(self) -> Dict[str, Any]:
        """Close any open block and return the mapping."""
        if isinstance(self.state, InBlock):
            self._close_block(self.state)
        return self.result

    def _close_block(self, block: InBlock):
        if block.key == DiagnosticKey.STACK:
            self.result[block.key] = list(block.buffer)
        else:
            self.result[block.key] = "\n".join(block.buffer)
        logger.debug(f"Closed block '{block.key}' after {len(block.buffer)} lines")
        self.state = SCANNING


def parse_lines(
    lines: Optional[Iterable[str]], config: Optional[TapYamlConfig] = None
) -> Optional[Dict[str, Any]]:
    """Parse diagnostic lines into a flat mapping, without error reconstruction.

    Returns None when lines is None or empty.
    """
    if lines is None:
        return None
    scanner = LineScanner(config)
    seen = False
    for line in lines:
        seen = True
        scanner.feed(line)
    if not seen:
        return None
    return scanner.finish()
