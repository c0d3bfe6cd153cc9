"""Scalar value coercion for TAP diagnostic values.

Numbers are recognised in the literal forms a JavaScript reporter writes:
decimal (with optional fraction and exponent), 0x/0o/0b prefixed integers
and signed Infinity. Surrounding whitespace is ignored for numbers only.
"""

import math
import re
from decimal import Decimal
from typing import Any, Union

ScalarValue = Union[bool, int, float, str]

_DECIMAL_INT_RE = re.compile(r"^[+-]?\d+$", re.ASCII)
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
_PREFIXED_RE = re.compile(r"^0([xXoObB])([0-9a-fA-F]+)$")
_INFINITY_RE = re.compile(r"^([+-]?)Infinity$")

_PREFIX_BASES = {"x": 16, "o": 8, "b": 2}


def parse_number(text: str) -> Union[int, float]:
    """Parse a numeric literal, returning NaN when text is not one.

    Integral decimal and prefixed literals come back as int.
    """
    text = text.strip()
    if _DECIMAL_INT_RE.match(text):
        return int(text)
    if _DECIMAL_RE.match(text):
        return float(text)
    match = _PREFIXED_RE.match(text)
    if match:
        try:
            return int(match.group(2), _PREFIX_BASES[match.group(1).lower()])
        except ValueError:
            return math.nan
    match = _INFINITY_RE.match(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf
    return math.nan


def coerce_value(value: str) -> ScalarValue:
    """Coerce the trailing text of a ``key: value`` line.

    - ``'...'`` -> inner text, verbatim
    - ``true`` / ``false`` -> bool
    - numeric literal -> int or float
    - anything else, including empty text -> unchanged
    """
    if value.startswith("'") and value.endswith("'"):
        return value[1:-1]
    if value == "true":
        return True
    if value == "false":
        return False
    if value != "":
        number = parse_number(value)
        return value if isinstance(number, float) and math.isnan(number) else number
    return value


def to_text(value: Any) -> str:
    """Render a coerced value the way the reporter spells it.

    Booleans are lowercase, integral floats drop ``.0``, infinities are
    ``Infinity`` and exponents have no zero padding (``1e-7``, ``1e+21``).
    Plain decimals are used for exponents from -6 to 20.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "-Infinity" if value < 0 else "Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        text = repr(value)
        if "e" not in text:
            return text
        mantissa, exponent = text.split("e")
        power = int(exponent)
        if -7 < power < 21:
            return format(Decimal(text), "f")
        return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"
    return str(value)
