"""Chart renderers and the shared SVG canvas."""

from .bar_chart import BarChartRenderer
from .base import BaseChartRenderer
from .canvas import SvgDocument, build_canvas
from .line_chart import LineChartRenderer
from .pie_chart import PieChartRenderer, Wedge, compute_wedges
from .scatter_chart import ScatterChartRenderer

__all__ = [
    "BarChartRenderer",
    "BaseChartRenderer",
    "LineChartRenderer",
    "PieChartRenderer",
    "ScatterChartRenderer",
    "SvgDocument",
    "Wedge",
    "build_canvas",
    "compute_wedges",
]
