"""Affine mapping from data space to canvas pixels.

The drawable interior is ``[padding, width - padding]`` horizontally and
``[padding, height - padding]`` vertically. The Y axis is inverted
because SVG puts the origin in the top-left corner.
"""

from __future__ import annotations

from .models import Bounds, ChartConfig, Point


class CoordinateMapper:
    """Map data coordinates into the interior rectangle of a canvas.

    Parameters
    ----------
    bounds
        Data-space extent. Both axes must have a nonzero span; use the
        ``Bounds`` constructors, which widen degenerate ranges.
    width, height
        Canvas size in pixels.
    padding
        Margin between the canvas edge and the interior rectangle.
    """

    def __init__(self, bounds: Bounds, width: int = 800, height: int = 600, padding: int = 60) -> None:
        if bounds.span_x <= 0 or bounds.span_y <= 0:
            raise ValueError(f"degenerate bounds: {bounds!r}")
        self.bounds = bounds
        self.width = width
        self.height = height
        self.padding = padding

    @classmethod
    def from_config(cls, bounds: Bounds, config: ChartConfig) -> "CoordinateMapper":
        return cls(bounds, width=config.width, height=config.height, padding=config.padding)

    # -- Interior rectangle ----------------------------------------------

    @property
    def left(self) -> float:
        return float(self.padding)

    @property
    def right(self) -> float:
        return float(self.width - self.padding)

    @property
    def top(self) -> float:
        return float(self.padding)

    @property
    def bottom(self) -> float:
        return float(self.height - self.padding)

    @property
    def plot_width(self) -> float:
        return self.right - self.left

    @property
    def plot_height(self) -> float:
        return self.bottom - self.top

    # -- Mapping ---------------------------------------------------------

    def map_x(self, x: float) -> float:
        b = self.bounds
        return self.left + (x - b.min_x) / b.span_x * self.plot_width

    def map_y(self, y: float) -> float:
        b = self.bounds
        return self.bottom - (y - b.min_y) / b.span_y * self.plot_height

    def map_point(self, point: Point) -> tuple[float, float]:
        return self.map_x(point.x), self.map_y(point.y)
