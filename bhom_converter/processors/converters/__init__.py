# bhom_converter/processors/converters/__init__.py
"""
Converters Sub-package
======================
Raw JSON 데이터를 입력받아 선택된 해석기(Interpreter)로 변환하고,
직렬화하여 저장하는 로직을 담당합니다.

Modules:
--------
1. value_tree.py
   - 임의의 JSON -> 범용 값 트리 (대소문자 무시 dict / list / scalar).
   - 숫자: int64 -> float -> 원문 문자열 순으로 보존.

2. series_extractor.py
   - 점(Point2D) 추출: {"x","y"} 객체 또는 [x, y] 배열.
   - DataSeries 추출: 배열 / {"Data": [...]} / 단일 점 객체.

3. interpreters.py (GenericInterpreter, DataSeriesInterpreter)
   - BatchProcessor 에 주입되는 변환 모드.

4. batch_processor.py (BatchProcessor)
   - 입력 디렉토리 순회 및 파일 입출력(I/O) 관리.
   - 전체 변환 파이프라인(Reader -> Interpreter -> Serializer -> Saver) 실행 제어.
"""

from .value_tree import CaseInsensitiveDict, convert_number, fold_key, to_value_tree
from .series_extractor import extract_point, extract_points, extract_series, to_float
from .interpreters import (
    ValueInterpreter,
    GenericInterpreter,
    DataSeriesInterpreter,
    INTERPRETERS,
    get_interpreter,
)
from .batch_processor import BatchProcessor, FileResult

__all__ = [
    "CaseInsensitiveDict",
    "convert_number",
    "fold_key",
    "to_value_tree",
    "extract_point",
    "extract_points",
    "extract_series",
    "to_float",
    "ValueInterpreter",
    "GenericInterpreter",
    "DataSeriesInterpreter",
    "INTERPRETERS",
    "get_interpreter",
    "BatchProcessor",
    "FileResult",
]
