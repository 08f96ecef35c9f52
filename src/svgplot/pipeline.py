"""Orchestration — ties parser, renderers and output sink together.

The module-level ``line``/``bar``/``scatter``/``pie`` functions are the
public entry points. Each takes a data string and an optional title and
returns *True* when a chart was written; no exception crosses them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .config import OutputSettings
from .core.models import ChartConfig, ChartType, ParseReport, RenderResult
from .core.parser import scan_bar_data, scan_pairs, scan_values
from .generators.bar_chart import BarChartRenderer
from .generators.base import BaseChartRenderer
from .generators.line_chart import LineChartRenderer
from .generators.pie_chart import DEFAULT_PIE_TITLE, PieChartRenderer
from .generators.scatter_chart import ScatterChartRenderer
from .output.sink import open_viewer, write_file

logger = logging.getLogger(__name__)

# Map chart type → (parser, renderer class)
_PARSERS: dict[ChartType, Callable[[str], ParseReport]] = {
    ChartType.LINE: scan_pairs,
    ChartType.BAR: scan_bar_data,
    ChartType.SCATTER: scan_pairs,
    ChartType.PIE: scan_values,
}

_RENDERERS: dict[ChartType, type[BaseChartRenderer]] = {
    ChartType.LINE: LineChartRenderer,
    ChartType.BAR: BarChartRenderer,
    ChartType.SCATTER: ScatterChartRenderer,
    ChartType.PIE: PieChartRenderer,
}

_DEFAULT_TITLES = {
    ChartType.PIE: DEFAULT_PIE_TITLE,
}


def _fail(result: RenderResult, error: str) -> RenderResult:
    logger.warning("%s chart not rendered: %s", result.chart_type.value, error)
    result.success = False
    result.error = error
    return result


def render_chart(
    chart_type: ChartType | str,
    data: str,
    title: str | None = None,
    *,
    settings: OutputSettings | None = None,
) -> RenderResult:
    """Parse *data*, render it, write the SVG and optionally open it.

    Parameters
    ----------
    chart_type
        ``line``, ``bar``, ``scatter`` or ``pie``.
    data
        ``"x1:y1,x2:y2,..."`` for line/scatter, ``"v1,v2,..."`` for pie,
        either form for bar.
    title
        Chart title; each chart type has its own default.
    settings
        Output directory and viewer behaviour. Defaults to
        ``OutputSettings.from_env()``.
    """
    chart_type = ChartType(chart_type)
    settings = settings or OutputSettings.from_env()
    result = RenderResult(chart_type=chart_type)

    # -- Parse ------------------------------------------------------------
    report = _PARSERS[chart_type](data)
    items = report.values if chart_type is ChartType.PIE else report.points
    result.points = len(items)
    result.discarded = report.discarded
    if not items:
        return _fail(result, "no valid data points")
    if report.discarded:
        logger.info("Skipped %d malformed token(s)", report.discarded)

    # -- Render -----------------------------------------------------------
    if title is None:
        title = _DEFAULT_TITLES.get(chart_type, ChartConfig().title)
    renderer = _RENDERERS[chart_type](ChartConfig(title=title))
    try:
        svg = renderer.render(items)
    except ValueError as exc:
        return _fail(result, f"cannot scale data: {exc}")
    if svg is None:
        return _fail(result, "nothing to draw")

    # -- Write ------------------------------------------------------------
    path = settings.path_for(chart_type)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return _fail(result, f"cannot create {path.parent}: {exc}")
    if not write_file(path, svg):
        return _fail(result, f"cannot write {path}")
    result.output_path = path

    # -- View -------------------------------------------------------------
    if settings.open_viewer:
        result.viewer_opened = open_viewer(path)
    return result


def _call(chart_type: ChartType, data: object, title: object, settings: OutputSettings | None) -> bool:
    """Boolean facade over ``render_chart`` for host callers."""
    if not isinstance(data, str):
        logger.warning("%s chart: data must be a string, got %s", chart_type.value, type(data).__name__)
        return False
    if not isinstance(title, str):
        title = None
    try:
        return render_chart(chart_type, data, title, settings=settings).success
    except ValueError as exc:
        logger.warning("%s chart not rendered: %s", chart_type.value, exc)
        return False


def line(data: str, title: str | None = None, *, settings: OutputSettings | None = None) -> bool:
    """Line chart from ``"x1:y1,x2:y2,..."``; writes ``graph_line.svg``."""
    return _call(ChartType.LINE, data, title, settings)


def bar(data: str, title: str | None = None, *, settings: OutputSettings | None = None) -> bool:
    """Bar chart from ``"v1,v2,..."`` or ``"x1:y1,..."``; writes ``graph_bar.svg``."""
    return _call(ChartType.BAR, data, title, settings)


def scatter(data: str, title: str | None = None, *, settings: OutputSettings | None = None) -> bool:
    """Scatter plot from ``"x1:y1,x2:y2,..."``; writes ``graph_scatter.svg``."""
    return _call(ChartType.SCATTER, data, title, settings)


def pie(data: str, title: str | None = None, *, settings: OutputSettings | None = None) -> bool:
    """Pie chart from ``"v1,v2,..."``; writes ``graph_pie.svg``."""
    return _call(ChartType.PIE, data, title, settings)
