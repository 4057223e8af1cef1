# bhom_converter/serialization/__init__.py
"""
Serialization Package
=====================
변환 결과를 출력 텍스트로 직렬화합니다.

- bhom_serializer.py: BHoM 객체 모델 직렬화 ("_t" 타입 태그) 및 역직렬화.
- strategies.py: 주입 가능한 serialize(value) -> text 와 표준 JSON fallback 조합.
"""

from .bhom_serializer import to_dict, to_json, from_json, is_bhom_object
from .strategies import Serializer, FallbackSerializer, json_serialize, build_serializer

__all__ = [
    "to_dict",
    "to_json",
    "from_json",
    "is_bhom_object",
    "Serializer",
    "FallbackSerializer",
    "json_serialize",
    "build_serializer",
]
