"""Pie chart renderer.

Wedges start at the top of the circle (-90°) and sweep clockwise, each
proportional to its value's share of the total. The pie uses the
radial canvas: background and title only, no grid or axes.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from ..core.models import CanvasMode, ChartConfig, ChartType
from .base import BaseChartRenderer
from .canvas import SvgDocument, fmt
from .styles import Colors, Fonts, Layout

logger = logging.getLogger(__name__)

DEFAULT_PIE_TITLE = "Pie Chart"


@dataclass(frozen=True)
class Wedge:
    """One angular slice of the pie, angles in degrees."""

    index: int
    value: float
    share: float
    start: float
    end: float

    @property
    def sweep(self) -> float:
        return self.end - self.start

    @property
    def mid(self) -> float:
        return self.start + self.sweep / 2

    @property
    def large_arc(self) -> int:
        return 1 if self.sweep >= 180 else 0

    @property
    def percent(self) -> int:
        """Share as a whole percentage, truncated."""
        return int(self.share * 100)

    @property
    def color(self) -> str:
        return Colors.PALETTE[self.index % len(Colors.PALETTE)]


def compute_wedges(values: Sequence[float], start_angle: float = Layout.PIE_START_ANGLE) -> list[Wedge]:
    """Split 360° among *values*.

    Negative values are ignored; kept wedges retain their input index so
    palette colors follow input position. End angles come from the
    running sum, so the last wedge always ends exactly one turn after
    *start_angle*.
    """
    kept = [(i, v) for i, v in enumerate(values) if v >= 0]
    if len(kept) != len(values):
        logger.debug("Ignoring %d negative pie value(s)", len(values) - len(kept))

    total = sum(v for _, v in kept)
    if total <= 0 or not math.isfinite(total):
        return []

    wedges: list[Wedge] = []
    running = 0.0
    start = start_angle
    for i, value in kept:
        running += value
        end = start_angle + 360.0 * (running / total)
        wedges.append(Wedge(index=i, value=value, share=value / total, start=start, end=end))
        start = end
    return wedges


def _polar(cx: float, cy: float, radius: float, angle: float) -> tuple[float, float]:
    rad = math.radians(angle)
    return cx + radius * math.cos(rad), cy + radius * math.sin(rad)


def wedge_path(wedge: Wedge, cx: float, cy: float, radius: float) -> str:
    """SVG path data for a filled sector."""
    x1, y1 = _polar(cx, cy, radius, wedge.start)
    x2, y2 = _polar(cx, cy, radius, wedge.end)
    return (
        f"M {fmt(cx)} {fmt(cy)} "
        f"L {fmt(x1)} {fmt(y1)} "
        f"A {fmt(radius)} {fmt(radius)} 0 {wedge.large_arc} 1 {fmt(x2)} {fmt(y2)} Z"
    )


class PieChartRenderer(BaseChartRenderer[float]):
    chart_type = ChartType.PIE
    mode = CanvasMode.RADIAL

    def __init__(self, config: ChartConfig | None = None) -> None:
        super().__init__(config or ChartConfig(title=DEFAULT_PIE_TITLE))

    @property
    def center(self) -> tuple[float, float]:
        return self.config.width / 2, self.config.height / 2 + Layout.PIE_CENTER_DROP

    def _accepts(self, data: Sequence[float]) -> bool:
        if not compute_wedges(data):
            logger.warning("Pie chart values sum to zero or overflow; nothing to draw")
            return False
        return True

    def _draw(self, doc: SvgDocument, data: Sequence[float]) -> None:
        cx, cy = self.center
        radius = Layout.PIE_RADIUS

        for wedge in compute_wedges(data):
            style = {
                "fill": wedge.color,
                "stroke": Colors.WEDGE_STROKE,
                "stroke_width": Layout.PIE_STROKE_WIDTH,
            }
            # A single full turn has coincident arc endpoints, which SVG
            # renders as nothing.
            if wedge.sweep >= 360:
                doc.circle(cx, cy, radius, **style)
            else:
                doc.path(wedge_path(wedge, cx, cy, radius), **style)

            lx, ly = _polar(cx, cy, radius * Layout.PIE_LABEL_RADIUS, wedge.mid)
            doc.text(
                lx, ly, f"{wedge.percent}%",
                text_anchor="middle",
                font_size=Fonts.WEDGE_SIZE,
                fill=Colors.WEDGE_LABEL,
                font_weight="bold",
            )
