"""
Processors Package
==================
데이터 처리 파이프라인의 핵심 로직을 제공하는 패키지입니다.
크게 '데이터 변환(Converters)'과 '시각화(Visualizers)' 두 가지 서브 패키지로 구성됩니다.

Sub-packages:
-------------
1. converters
   - JSON 데이터를 읽어 범용 값 트리 또는 DataSeries 로 변환하고 저장하는 배치 작업을 담당합니다.
   - 주요 모듈: batch_processor, interpreters, value_tree, series_extractor

2. visualizers
   - 저장된 DataSeries 결과를 2D 그래프로 시각화합니다.
   - 주요 모듈: batch_visualizer, series_visualizer
"""

# 하위 패키지에서 주요 클래스를 끌어올려(Re-export) 외부에서 접근하기 쉽게 만듭니다.
# 사용 예: from bhom_converter.processors import BatchProcessor
#
# visualizers 는 matplotlib 을 import 하므로 여기서 끌어올리지 않습니다.
# 사용 예: from bhom_converter.processors.visualizers import BatchVisualizer

from .converters import (
    BatchProcessor,
    FileResult,
    GenericInterpreter,
    DataSeriesInterpreter,
    get_interpreter,
)

__all__ = [
    "BatchProcessor",
    "FileResult",
    "GenericInterpreter",
    "DataSeriesInterpreter",
    "get_interpreter",
]
