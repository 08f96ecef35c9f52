"""Line chart: one polyline through the points plus a marker per point."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.mapper import CoordinateMapper
from ..core.models import Bounds, ChartType, Point
from .base import BaseChartRenderer
from .canvas import SvgDocument
from .styles import Layout


class LineChartRenderer(BaseChartRenderer[Point]):
    """Connect the points in input order."""

    chart_type = ChartType.LINE

    def _draw(self, doc: SvgDocument, data: Sequence[Point]) -> None:
        mapper = CoordinateMapper.from_config(Bounds.from_points(data), self.config)
        coords = [mapper.map_point(p) for p in data]

        doc.polyline(
            coords,
            fill="none",
            stroke=self.config.color,
            stroke_width=Layout.LINE_STROKE_WIDTH,
        )
        for cx, cy in coords:
            doc.circle(cx, cy, Layout.LINE_MARKER_RADIUS, fill=self.config.color)
