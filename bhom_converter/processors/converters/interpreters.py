# bhom_converter/processors/converters/interpreters.py
from typing import Any, Dict, Type

from bhom_converter.errors import SeriesShapeError
from bhom_converter.utils import log_lifecycle
from .series_extractor import extract_series
from .value_tree import CaseInsensitiveDict, to_value_tree


class ValueInterpreter:
    """
    파싱된 JSON 문서를 출력 값으로 해석하는 인터페이스.
    BatchProcessor 는 모드와 무관하게 interpret() 만 호출합니다.
    """

    mode: str = ""
    # BHoM 직렬화 실패 시 표준 JSON 으로 대체 허용 여부
    allow_fallback: bool = False

    def interpret(self, document: Any, name: str) -> Any:
        raise NotImplementedError

    def describe(self, value: Any) -> str:
        return type(value).__name__


class GenericInterpreter(ValueInterpreter):
    """Any JSON -> value tree (mapping / list / scalar)."""

    mode = "generic"
    allow_fallback = True

    @log_lifecycle
    def interpret(self, document: Any, name: str) -> Any:
        return to_value_tree(document)

    def describe(self, value: Any) -> str:
        if value is None:
            return "null"
        if isinstance(value, CaseInsensitiveDict):
            return f"dict (keys: {len(value)})"
        if isinstance(value, list):
            return f"list (count: {len(value)})"
        return type(value).__name__


class DataSeriesInterpreter(ValueInterpreter):
    """JSON -> DataSeries named after the source file."""

    mode = "series"
    allow_fallback = False

    @log_lifecycle
    def interpret(self, document: Any, name: str) -> Any:
        series = extract_series(document, name=name)
        if series is None:
            raise SeriesShapeError(
                "does not contain a valid DataSeries "
                "(expected array of points or object with 'Data' array)"
            )
        return series

    def describe(self, value: Any) -> str:
        return f"DataSeries (points: {len(value)})"


INTERPRETERS: Dict[str, Type[ValueInterpreter]] = {
    GenericInterpreter.mode: GenericInterpreter,
    DataSeriesInterpreter.mode: DataSeriesInterpreter,
}


def get_interpreter(mode: str) -> ValueInterpreter:
    try:
        return INTERPRETERS[mode]()
    except KeyError:
        raise ValueError(
            f"Unknown mode '{mode}' (expected one of: {', '.join(sorted(INTERPRETERS))})"
        ) from None
