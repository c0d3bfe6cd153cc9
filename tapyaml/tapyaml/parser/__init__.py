"""Line scanner, diagnostic record and error reconstructor."""

from tapyaml.parser.diagnostic import Diagnostic
from tapyaml.parser.reconstruct import build_error, format_stack, reconstruct_error
from tapyaml.parser.scanner import (
    SCANNING,
    InBlock,
    LineScanner,
    Scanning,
    ScanState,
    parse_lines,
)

__all__ = [
    "Diagnostic",
    "build_error",
    "format_stack",
    "reconstruct_error",
    "SCANNING",
    "InBlock",
    "LineScanner",
    "Scanning",
    "ScanState",
    "parse_lines",
]
