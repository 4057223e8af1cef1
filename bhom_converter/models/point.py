# bhom_converter/models/point.py
from dataclasses import dataclass, field
from typing import ClassVar, Tuple


@dataclass(frozen=True)
class Point2D:
    """2D curve point (X, Y). Immutable once created."""

    BHOM_TYPE: ClassVar[str] = "BH.oM.PlantRoomSizer.CurvePoint"

    x: float = field(default=0.0, metadata={"bhom": "X"})
    y: float = field(default=0.0, metadata={"bhom": "Y"})

    def __post_init__(self):
        # int/numpy 스칼라가 들어와도 float 로 고정
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)
