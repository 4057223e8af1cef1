# bhom_converter/models/data_series.py
import uuid
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional

import numpy as np

from .point import Point2D


@dataclass
class BHoMObject:
    """
    Common BHoM object properties.
    Field metadata "bhom" holds the property name used in serialized JSON.
    """

    BHOM_TYPE: ClassVar[str] = "BH.oM.Base.BHoMObject"

    name: str = field(default="", metadata={"bhom": "Name"})
    bhom_guid: str = field(default_factory=lambda: str(uuid.uuid4()), metadata={"bhom": "BHoM_Guid"})
    tags: List[str] = field(default_factory=list, metadata={"bhom": "Tags"})
    custom_data: Dict[str, Any] = field(default_factory=dict, metadata={"bhom": "CustomData"})
    fragments: List[Any] = field(default_factory=list, metadata={"bhom": "Fragments"})


@dataclass
class DataSeries(BHoMObject):
    """Named, ordered sequence of 2D curve points."""

    BHOM_TYPE: ClassVar[str] = "BH.oM.PlantRoomSizer.DataSeries"

    data_points: List[Point2D] = field(default_factory=list, metadata={"bhom": "DataPoints"})

    def __len__(self) -> int:
        return len(self.data_points)

    def to_array(self) -> np.ndarray:
        """Points as an (n, 2) float array: column 0 = X, column 1 = Y."""
        if not self.data_points:
            return np.empty((0, 2), dtype=float)
        return np.array([p.as_tuple() for p in self.data_points], dtype=float)


@dataclass
class DoubleDataSeries:
    """Upper/Lower pair of data series (envelope curves)."""

    BHOM_TYPE: ClassVar[str] = "BH.oM.PlantRoomSizer.DoubleDataSeries"

    upper: Optional[DataSeries] = field(default=None, metadata={"bhom": "Upper"})
    lower: Optional[DataSeries] = field(default=None, metadata={"bhom": "Lower"})
