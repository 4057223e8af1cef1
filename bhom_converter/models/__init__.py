# bhom_converter/models/__init__.py
"""
Models Package
==============
BHoM 도메인 객체 정의 (PlantRoomSizer).

- point.py: Point2D (X, Y 불변 좌표)
- data_series.py: BHoMObject, DataSeries, DoubleDataSeries
"""

from .point import Point2D
from .data_series import BHoMObject, DataSeries, DoubleDataSeries

__all__ = ["Point2D", "BHoMObject", "DataSeries", "DoubleDataSeries"]
