# bhom_converter/processors/visualizers/__init__.py
"""
Visualizers Sub-package
=======================
처리된 BHoM 결과물(Output)을 로드하여 사용자에게 시각적으로 보여주는 로직을 담당합니다.

Modules:
--------
- series_visualizer.py: DataSeries 점 데이터를 Matplotlib 2D 그래프로 렌더링 (SeriesVisualizer)
- batch_visualizer.py: 결과 디렉토리 순회 및 순차적 시각화 실행 (BatchVisualizer)
"""

from .series_visualizer import SeriesVisualizer
from .batch_visualizer import BatchVisualizer

__all__ = ["SeriesVisualizer", "BatchVisualizer"]
