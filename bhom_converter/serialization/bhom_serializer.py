# bhom_converter/serialization/bhom_serializer.py
"""
BHoM object-model serializer.

BHoM objects (dataclasses carrying a `BHOM_TYPE` class attribute) are written
as JSON objects whose first member is the "_t" type discriminator, followed by
their fields under the BHoM property names stored in field metadata:

    {"_t": "BH.oM.PlantRoomSizer.DataSeries",
     "Name": "pump_curve", "BHoM_Guid": "...", "Tags": [], "CustomData": {},
     "Fragments": [],
     "DataPoints": [{"_t": "BH.oM.PlantRoomSizer.CurvePoint", "X": 1.0, "Y": 2.0}]}

Plain containers and scalars (dict, list, tuple, str, int, float, bool, None)
and NumPy arrays/scalars are written directly.
"""

import dataclasses
import json
import math
from collections.abc import Mapping
from typing import Any, Dict, Optional, Type

import numpy as np

from bhom_converter.errors import DocumentParseError, SerializationError
from bhom_converter.models import DataSeries, DoubleDataSeries, Point2D

TYPE_KEY = "_t"

# "_t" 값 -> 복원할 클래스
BHOM_TYPES: Dict[str, Type] = {
    cls.BHOM_TYPE: cls for cls in (Point2D, DataSeries, DoubleDataSeries)
}


def is_bhom_object(obj: Any) -> bool:
    return (
        dataclasses.is_dataclass(obj)
        and not isinstance(obj, type)
        and hasattr(obj, "BHOM_TYPE")
    )


def _bhom_name(f: dataclasses.Field) -> str:
    return f.metadata.get("bhom", f.name)


def _to_float(val: float) -> float:
    if not math.isfinite(val):
        raise SerializationError(f"Non-finite number {val!r} cannot be written as JSON")
    return float(val)


def to_dict(obj: Any) -> Any:
    """Convert a value to a JSON-safe structure."""
    if obj is None or isinstance(obj, (bool, str)):
        return obj
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, (int, np.integer)):
        return int(obj)
    if isinstance(obj, (float, np.floating)):
        return _to_float(obj)
    if isinstance(obj, np.ndarray):
        return to_dict(obj.tolist())
    if is_bhom_object(obj):
        out = {TYPE_KEY: obj.BHOM_TYPE}
        for f in dataclasses.fields(obj):
            out[_bhom_name(f)] = to_dict(getattr(obj, f.name))
        return out
    if isinstance(obj, Mapping):
        out = {}
        for key, val in obj.items():
            if not isinstance(key, str):
                raise SerializationError(
                    f"Dictionary key {key!r} ({type(key).__name__}) is not a string")
            out[key] = to_dict(val)
        return out
    if isinstance(obj, (list, tuple)):
        return [to_dict(item) for item in obj]
    raise SerializationError(f"Cannot serialise object of type '{type(obj).__name__}'")


def to_json(obj: Any, indent: Optional[int] = None) -> str:
    return json.dumps(to_dict(obj), indent=indent, ensure_ascii=False)


def _from_dict(d: Dict[str, Any]) -> Any:
    cls = BHOM_TYPES.get(d.get(TYPE_KEY))
    if cls is None:
        return d

    kwargs = {}
    for f in dataclasses.fields(cls):
        key = _bhom_name(f)
        if key in d:
            kwargs[f.name] = d[key]
    return cls(**kwargs)


def from_json(text: str) -> Any:
    """Rebuild BHoM objects from text written by `to_json`. Unknown "_t" values stay dicts."""
    try:
        return json.loads(text, object_hook=_from_dict)
    except (TypeError, ValueError) as e:
        raise DocumentParseError(f"Not a BHoM JSON document: {e}") from e
