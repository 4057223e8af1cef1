# bhom_converter/processors/converters/series_extractor.py
import locale
import re
from typing import Any, List, Optional

from bhom_converter.models import DataSeries, Point2D
from bhom_converter.utils import JsonNumber, JsonObject

DATA_KEY = "Data"

# 로케일 무관(invariant) 실수 표기: 부호, 소수점 ".", 지수, NaN/Infinity
_INVARIANT_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|nan|infinity)", re.IGNORECASE)


def to_float(value: Any) -> Optional[float]:
    """
    JSON number 또는 숫자 문자열을 float 로 변환합니다.
    문자열은 로케일 무관 파싱을 먼저 시도하고, 실패하면 현재 로케일(locale.atof)로 재시도합니다.
    변환할 수 없으면 None.
    """
    if isinstance(value, JsonNumber):
        return float(value.literal)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if _INVARIANT_FLOAT_RE.fullmatch(text):
        return float(text)
    # "1_000" 같은 Python 전용 표기는 어느 로케일에서도 숫자가 아님
    if "_" in text:
        return None
    try:
        return locale.atof(text)
    except ValueError:
        return None


def extract_point(element: Any) -> Optional[Point2D]:
    """
    Interpret one JSON element as a point. Returns None when the shape does not match.
      - {"x": .., "y": ..} (member names are case-insensitive)
      - [x, y]            (exactly two elements)
    """
    if isinstance(element, JsonObject):
        x = y = None
        for key, value in element:
            name = key.lower()
            if name == "x":
                parsed = to_float(value)
                if parsed is not None:
                    x = parsed
            elif name == "y":
                parsed = to_float(value)
                if parsed is not None:
                    y = parsed
        if x is None or y is None:
            return None
        return Point2D(x, y)

    if isinstance(element, list):
        if len(element) != 2:
            return None
        x, y = to_float(element[0]), to_float(element[1])
        if x is None or y is None:
            return None
        return Point2D(x, y)

    return None


def extract_points(elements: List[Any]) -> List[Point2D]:
    """Every element that is a point, in order. Non-points are skipped."""
    points = []
    for item in elements:
        point = extract_point(item)
        if point is not None:
            points.append(point)
    return points


def extract_series(root: Any, name: str = "") -> Optional[DataSeries]:
    """
    Build a DataSeries from a document root, or None if it holds no point.
      1. root array            -> its points
      2. object["Data"] array  -> its points
      3. object itself         -> single point
    """
    points: List[Point2D] = []

    if isinstance(root, list):
        points = extract_points(root)
    elif isinstance(root, JsonObject):
        data = root.get(DATA_KEY)
        if isinstance(data, list):
            points = extract_points(data)
        if not points:
            single = extract_point(root)
            if single is not None:
                points = [single]

    if not points:
        return None
    return DataSeries(name=name, data_points=points)
