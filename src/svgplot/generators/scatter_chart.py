"""Scatter plot: semi-transparent markers, no connecting line."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.mapper import CoordinateMapper
from ..core.models import Bounds, ChartType, Point
from .base import BaseChartRenderer
from .canvas import SvgDocument
from .styles import Layout


class ScatterChartRenderer(BaseChartRenderer[Point]):
    chart_type = ChartType.SCATTER

    def _draw(self, doc: SvgDocument, data: Sequence[Point]) -> None:
        mapper = CoordinateMapper.from_config(Bounds.from_points(data), self.config)
        for point in data:
            cx, cy = mapper.map_point(point)
            doc.circle(
                cx, cy, Layout.SCATTER_MARKER_RADIUS,
                fill=self.config.color,
                opacity=Layout.SCATTER_OPACITY,
            )
