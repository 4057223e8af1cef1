# bhom_converter/serialization/strategies.py
import functools
import json
from collections.abc import Mapping
from typing import Any, Callable, Optional

from bhom_converter.errors import SerializationError
from bhom_converter.utils import Log
from . import bhom_serializer

# serialize(value) -> text
Serializer = Callable[[Any], str]


def _mapping_default(obj: Any) -> Any:
    if isinstance(obj, Mapping):
        return dict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def json_serialize(value: Any, indent: Optional[int] = None) -> str:
    """Standard-library JSON text (used as the fallback)."""
    return json.dumps(value, indent=indent, ensure_ascii=False, default=_mapping_default)


class FallbackSerializer:
    """
    Primary serializer with an optional fallback.
    - primary 가 None 이면 '사용 불가'로 간주합니다.
    - fallback 이 None 이면 primary 실패는 SerializationError 로 전달됩니다.
    """

    def __init__(self, primary: Optional[Serializer], fallback: Optional[Serializer] = None):
        self.primary = primary
        self.fallback = fallback

    def __call__(self, value: Any) -> str:
        if self.primary is None:
            if self.fallback is None:
                raise SerializationError("BHoM serializer is not available")
            Log.warning("BHoM serializer is not available. Using standard JSON serializer.")
            return self._run_fallback(value)

        try:
            return self.primary(value)
        except Exception as e:
            if self.fallback is None:
                raise SerializationError(str(e)) from e
            Log.warning(f"BHoM serialization failed ({e}). Using standard JSON serializer.")
            return self._run_fallback(value)

    def _run_fallback(self, value: Any) -> str:
        try:
            return self.fallback(value)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Standard JSON serialization failed: {e}") from e


def build_serializer(use_bhom: bool = True, allow_fallback: bool = True,
                     indent: Optional[int] = None) -> FallbackSerializer:
    primary = functools.partial(bhom_serializer.to_json, indent=indent) if use_bhom else None
    fallback = functools.partial(json_serialize, indent=indent) if allow_fallback else None
    return FallbackSerializer(primary, fallback)
