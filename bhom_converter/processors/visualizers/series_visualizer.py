import matplotlib.pyplot as plt
import numpy as np
from typing import List, Optional
from bhom_converter.models import DataSeries
from bhom_converter.utils import Log


class SeriesVisualizer:
    """
    DataSeries 목록을 하나의 2D 그래프에 선(Line) + 점(Marker)으로 그립니다.
    """

    # 빨주노초파남보 색상 정의 (Matplotlib 색상 코드)
    RAINBOW_COLORS = ['red', 'orange', 'gold', 'green', 'blue', 'indigo', 'violet']

    def __init__(self, series: List[DataSeries], title: Optional[str] = None):
        self.series = [s for s in series if len(s) > 0]
        self.title = title

    def process(self, show: bool = True):
        """그래프 생성 후 창 표시 (show=False 면 Figure 만 반환)"""
        if not self.series:
            Log.warning("No series found to visualize.")
            return None

        fig = self._plot_2d()
        if show:
            plt.show()
        return fig

    def _plot_2d(self):
        fig, ax = plt.subplots(figsize=(10, 6))

        all_points = []
        for i, series in enumerate(self.series):
            pts = series.to_array()
            color = self.RAINBOW_COLORS[i % len(self.RAINBOW_COLORS)]
            label = series.name or f"Series {i + 1}"
            ax.plot(pts[:, 0], pts[:, 1], marker='o', markersize=3, color=color, label=label)
            all_points.append(pts)

        # 축 범위 자동 설정 (점이 하나뿐이어도 범위가 0 이 되지 않게 여유 추가)
        merged = np.vstack(all_points)
        x_min, y_min = merged.min(axis=0)
        x_max, y_max = merged.max(axis=0)
        x_pad = (x_max - x_min) * 0.05 or 1.0
        y_pad = (y_max - y_min) * 0.05 or 1.0
        ax.set_xlim(x_min - x_pad, x_max + x_pad)
        ax.set_ylim(y_min - y_pad, y_max + y_pad)

        ax.set_xlabel('X')
        ax.set_ylabel('Y')
        ax.grid(True, alpha=0.3)
        ax.legend(loc='best')
        ax.set_title(self.title or f'DataSeries Visualization ({len(self.series)} series)')
        return fig
