"""Bar chart renderer.

Bars sit in equal-width slots along the X axis, one slot per data
point, in input order. The explicit X of a pair is not used for
placement; only its position in the input is.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..core.mapper import CoordinateMapper
from ..core.models import Bounds, ChartType, Point
from .base import BaseChartRenderer
from .canvas import SvgDocument
from .styles import Colors, Fonts, Layout


def bar_width(plot_width: float, count: int) -> float:
    """Width of a single bar for *count* slots."""
    return plot_width / (count * Layout.BAR_WIDTH_FACTOR)


def slot_center(left: float, plot_width: float, index: int, count: int) -> float:
    """Horizontal midpoint of slot *index*."""
    return left + plot_width * (index + 0.5) / count


def value_label(value: float) -> str:
    """Bar labels show the value truncated toward zero."""
    return str(int(value))


class BarChartRenderer(BaseChartRenderer[Point]):
    chart_type = ChartType.BAR

    def _draw(self, doc: SvgDocument, data: Sequence[Point]) -> None:
        mapper = CoordinateMapper.from_config(Bounds.for_bars(data), self.config)
        count = len(data)
        width = bar_width(mapper.plot_width, count)

        for i, point in enumerate(data):
            cx = slot_center(mapper.left, mapper.plot_width, i, count)
            # Bars grow up from the zero baseline; negatives collapse to it.
            top = min(mapper.map_y(point.y), mapper.bottom)
            height = mapper.bottom - top

            doc.rect(
                cx - width / 2, top, width, height,
                fill=self.config.color,
                opacity=Layout.BAR_OPACITY,
            )
            doc.text(
                cx, top - Layout.BAR_LABEL_GAP, value_label(point.y),
                text_anchor="middle",
                font_size=Fonts.VALUE_SIZE,
                fill=Colors.VALUE_LABEL,
            )
