# bhom_converter/processors/converters/value_tree.py
from collections.abc import MutableMapping
from typing import Any, Dict, Iterator, Tuple, Union
import math

from bhom_converter.utils import JsonNumber, JsonObject

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def fold_key(key: str) -> str:
    """Per-character upper-casing; characters whose upper case is longer (ß, ﬁ) stay as they are."""
    return "".join(c.upper() if len(c.upper()) == 1 else c for c in key)


class CaseInsensitiveDict(MutableMapping):
    """
    Ordered str -> value mapping with case-insensitive keys.
    Re-assigning a key under another spelling keeps the first spelling and
    replaces the value.
    """

    def __init__(self, data=None, **kwargs):
        self._store: Dict[str, Tuple[str, Any]] = {}
        self.update(data or {}, **kwargs)

    def __setitem__(self, key: str, value: Any) -> None:
        folded = fold_key(key)
        if folded in self._store:
            key = self._store[folded][0]
        self._store[folded] = (key, value)

    def __getitem__(self, key: str) -> Any:
        return self._store[fold_key(key)][1]

    def __delitem__(self, key: str) -> None:
        del self._store[fold_key(key)]

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"


def convert_number(number: JsonNumber) -> Union[int, float, str]:
    """int64 -> float -> original literal, in that order."""
    literal = number.literal
    if number.is_integral:
        value = int(literal)
        if INT64_MIN <= value <= INT64_MAX:
            return value
    value = float(literal)
    # 1e400 처럼 double 범위를 넘으면 inf 가 되므로 원문 유지
    if not math.isfinite(value):
        return literal
    return value


def to_value_tree(element: Any) -> Any:
    """Convert a parsed JSON element into the generic value tree."""
    if isinstance(element, JsonObject):
        tree = CaseInsensitiveDict()
        for key, value in element:
            tree[key] = to_value_tree(value)
        return tree
    if isinstance(element, list):
        return [to_value_tree(item) for item in element]
    if isinstance(element, JsonNumber):
        return convert_number(element)
    # str, bool, None
    return element
