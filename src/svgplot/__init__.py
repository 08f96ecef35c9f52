"""svgplot — render simple SVG charts from delimited text.

Usage::

    import svgplot

    svgplot.line("1:1,2:4,3:9", "Squares")   # writes graph_line.svg
    svgplot.pie("25,25,50")                  # writes graph_pie.svg
"""

__version__ = "0.1.0"

from .config import OutputSettings
from .core.models import ChartConfig, ChartType, Point, RenderResult
from .pipeline import bar, line, pie, render_chart, scatter

__all__ = [
    "ChartConfig",
    "ChartType",
    "OutputSettings",
    "Point",
    "RenderResult",
    "bar",
    "line",
    "pie",
    "render_chart",
    "scatter",
]
