# bhom_converter/utils/json_document.py
"""
Parsed JSON document elements.

`json.loads` normally turns numbers into int/float and objects into dict,
which already decides the numeric type and drops duplicate keys.
The converters need to make those decisions themselves, so the reader keeps:
  - every number as `JsonNumber` (original literal text),
  - every object as `JsonObject` (all members, in document order).
Strings, lists, booleans and null stay as their usual Python values.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class JsonNumber:
    """A JSON number token, kept as written in the source."""
    literal: str

    @property
    def is_integral(self) -> bool:
        """True when the literal has no fraction and no exponent part."""
        return not any(c in self.literal for c in ".eE")

    def __str__(self) -> str:
        return self.literal


class JsonObject:
    """JSON object members in document order, duplicates included."""

    __slots__ = ("_members",)

    def __init__(self, members: List[Tuple[str, Any]]):
        self._members = list(members)

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return self._members == other._members

    def __repr__(self) -> str:
        return f"JsonObject({self._members!r})"

    def get(self, name: str, default: Optional[Any] = None) -> Any:
        """Exact (case-sensitive) member lookup; the last duplicate wins."""
        for key, value in reversed(self._members):
            if key == name:
                return value
        return default

    def keys(self) -> List[str]:
        return [key for key, _ in self._members]
