from pathlib import Path
from typing import List, Optional
from bhom_converter.config import Config
from bhom_converter.errors import DocumentParseError
from bhom_converter.models import DataSeries, DoubleDataSeries
from bhom_converter.serialization import from_json
from bhom_converter.utils import Log
from .series_visualizer import SeriesVisualizer


class BatchVisualizer:
    """
    Output 디렉토리의 BHoM 결과물들을 일괄적으로 로드하여 2D 그래프로 시각화합니다.
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    @staticmethod
    def load_series(filepath: Path) -> List[DataSeries]:
        """결과 파일에서 DataSeries 를 복원 (DoubleDataSeries 는 Upper/Lower 로 분리)"""
        with open(filepath, 'r', encoding=Config.ENCODING) as f:
            value = from_json(f.read())

        if isinstance(value, DataSeries):
            return [value]
        if isinstance(value, DoubleDataSeries):
            return [s for s in (value.upper, value.lower) if s is not None]
        return []

    def run(self, show: bool = True, files: Optional[List[Path]] = None) -> int:
        """files 를 주면 그 파일만, 없으면 output 디렉토리 전체를 시각화"""
        Log.section("Result Visualization Phase")

        if files is None:
            output_files = sorted(self.output_dir.glob(Config.FILE_PATTERN), key=lambda p: p.name.lower())
        else:
            output_files = [Path(p) for p in files]
        if not output_files:
            Log.warning("No result files to visualize.")
            return 0

        shown = 0
        for filepath in output_files:
            Log.info(f"Visualizing: {filepath.name}")
            try:
                series = self.load_series(filepath)
            except (DocumentParseError, OSError) as e:
                Log.error(f"Failed to load ({filepath.name}): {e}")
                continue

            if not series:
                Log.warning(f"{filepath.name} holds no DataSeries. Skipped.")
                continue

            # 창을 닫을 때까지 대기 (show=True)
            SeriesVisualizer(series, title=filepath.stem).process(show=show)
            shown += 1
        return shown
