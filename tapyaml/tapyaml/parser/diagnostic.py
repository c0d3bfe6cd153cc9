"""Typed view of a parsed diagnostic block.

The reserved keys the error reconstructor reads get their own fields;
every other key lands in ``extras``. An absent key holds MISSING, so a key
that is present with a None value still counts as present.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict

from tapyaml.constants import DiagnosticKey


class _Missing:
    def __repr__(self):
        return "MISSING"


MISSING: Any = _Missing()


@dataclass
class Diagnostic:
    """Parsed diagnostic fields plus the open set of other keys."""

    error: Any = MISSING
    code: Any = MISSING
    name: Any = MISSING
    stack: Any = MISSING
    failure_type: Any = MISSING
    actual: Any = MISSING
    expected: Any = MISSING
    operator: Any = MISSING
    extras: Dict[str, Any] = field(default_factory=dict)

    # field name -> key in the diagnostic block
    _KEYS = {
        "error": DiagnosticKey.ERROR,
        "code": DiagnosticKey.CODE,
        "name": DiagnosticKey.NAME,
        "stack": DiagnosticKey.STACK,
        "failure_type": DiagnosticKey.FAILURE_TYPE,
        "actual": DiagnosticKey.ACTUAL,
        "expected": DiagnosticKey.EXPECTED,
        "operator": DiagnosticKey.OPERATOR,
    }

    @classmethod
    def from_mapping(cls, mapping: Dict[str, Any]) -> "Diagnostic":
        """Split a parser mapping into reserved fields and extras."""
        reserved = {}
        extras = {}
        by_key = {key: attr for attr, key in cls._KEYS.items()}
        for key, value in mapping.items():
            if key in by_key:
                reserved[by_key[key]] = value
            else:
                extras[key] = value
        return cls(extras=extras, **reserved)

    def to_dict(self) -> Dict[str, Any]:
        """Merge back into a flat mapping, dropping absent fields."""
        result = dict(self.extras)
        for attr, key in self._KEYS.items():
            value = getattr(self, attr)
            if value is not MISSING:
                result[key] = value
        return result

    def has(self, key: str) -> bool:
        """True if the block key is present, whatever its value."""
        for attr, reserved_key in self._KEYS.items():
            if reserved_key == key:
                return getattr(self, attr) is not MISSING
        return key in self.extras

    def get(self, key: str, default: Any = None) -> Any:
        """Value of a block key, or default when absent."""
        for attr, reserved_key in self._KEYS.items():
            if reserved_key == key:
                value = getattr(self, attr)
                return default if value is MISSING else value
        return self.extras.get(key, default)

    def without_consumed(self, error: Any) -> "Diagnostic":
        """Copy with ``error`` replaced and the consumed fields removed."""
        cleared = {
            attr: MISSING
            for attr, key in self._KEYS.items()
            if key in DiagnosticKey.CONSUMED
        }
        return replace(self, error=error, extras=dict(self.extras), **cleared)
