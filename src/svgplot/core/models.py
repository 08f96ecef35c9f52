"""Pydantic models for chart data and rendering results.

These models form the intermediate representation between the text
parser and the chart renderers. Every renderer consumes a list of
``Point`` objects plus a ``ChartConfig`` and produces an SVG string.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ChartType(str, Enum):
    """Supported chart types."""
    LINE = "line"
    BAR = "bar"
    SCATTER = "scatter"
    PIE = "pie"

    @property
    def filename(self) -> str:
        """Fixed output file name, e.g. ``graph_line.svg``."""
        return f"graph_{self.value}.svg"


class CanvasMode(str, Enum):
    """How much of the shared canvas a renderer draws.

    ``CARTESIAN`` charts get grid, axes and axis labels; ``RADIAL``
    charts only get the background and the title.
    """
    CARTESIAN = "cartesian"
    RADIAL = "radial"


# ---------------------------------------------------------------------------
# Data points
# ---------------------------------------------------------------------------

class Point(BaseModel):
    """A single (x, y) data point."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def __init__(self, x: float, y: float, **data) -> None:
        super().__init__(x=x, y=y, **data)

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if isinstance(other, tuple):
            return (self.x, self.y) == other
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash((self.x, self.y))


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class ChartConfig(BaseModel):
    """Canvas geometry, labels and colors for a single render call."""
    model_config = ConfigDict(frozen=True)

    width: int = Field(default=800, gt=0)
    height: int = Field(default=600, gt=0)
    padding: int = Field(default=60, ge=0)
    title: str = "Graph"
    x_label: str = "X"
    y_label: str = "Y"
    color: str = "#2563eb"
    background: str = "#ffffff"
    show_grid: bool = True
    show_legend: bool = True  # not drawn by any renderer yet

    @model_validator(mode="after")
    def check_interior(self) -> "ChartConfig":
        if self.width - 2 * self.padding <= 0 or self.height - 2 * self.padding <= 0:
            raise ValueError(
                f"padding {self.padding} leaves no drawable area on a "
                f"{self.width}x{self.height} canvas"
            )
        return self


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------

# Half-width used when every value on an axis is identical
_MIN_HALF_SPAN = 0.5
# Relative half-width for large values, where ±0.5 is below float resolution
_REL_HALF_SPAN = 1e-9


def _widen(lo: float, hi: float) -> tuple[float, float]:
    """Turn a zero-width range into a small span centred on the value."""
    if hi > lo:
        return lo, hi
    half = max(_MIN_HALF_SPAN, abs(lo) * _REL_HALF_SPAN)
    lo, hi = lo - half, hi + half
    if not hi > lo:
        raise ValueError(f"cannot widen degenerate range at {lo!r}")
    return lo, hi


class Bounds(BaseModel):
    """Data-space extent of a chart, always with ``max > min`` per axis."""
    model_config = ConfigDict(frozen=True)

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @model_validator(mode="after")
    def check_finite(self) -> "Bounds":
        extents = (self.min_x, self.max_x, self.min_y, self.max_y, self.span_x, self.span_y)
        if not all(math.isfinite(v) for v in extents):
            raise ValueError("data range is too large to scale onto the canvas")
        return self

    @property
    def span_x(self) -> float:
        return self.max_x - self.min_x

    @property
    def span_y(self) -> float:
        return self.max_y - self.min_y

    @classmethod
    def from_points(cls, points: Sequence[Point], margin: float = 0.05) -> "Bounds":
        """Extrema of *points*, each side pushed out by ``margin`` of the span.

        Used by line and scatter charts.
        """
        if not points:
            raise ValueError("cannot compute bounds of an empty point set")

        xs = [p.x for p in points]
        ys = [p.y for p in points]
        min_x, max_x = _widen(min(xs), max(xs))
        min_y, max_y = _widen(min(ys), max(ys))

        dx = (max_x - min_x) * margin
        dy = (max_y - min_y) * margin
        return cls(
            min_x=min_x - dx,
            max_x=max_x + dx,
            min_y=min_y - dy,
            max_y=max_y + dy,
        )

    @classmethod
    def for_bars(cls, points: Sequence[Point], headroom: float = 1.1) -> "Bounds":
        """Bar chart domain: X is the slot range, Y starts at zero."""
        if not points:
            raise ValueError("cannot compute bounds of an empty point set")

        top = max(p.y for p in points) * headroom
        if top <= 0:
            top = 1.0
        return cls(min_x=0.0, max_x=float(len(points)), min_y=0.0, max_y=top)


# ---------------------------------------------------------------------------
# Parse & render results
# ---------------------------------------------------------------------------

class ParseReport(BaseModel):
    """Parsed items plus the number of tokens that were thrown away."""
    values: list[float] = Field(default_factory=list)
    points: list[Point] = Field(default_factory=list)
    discarded: int = 0

    @property
    def empty(self) -> bool:
        return not self.values and not self.points


class RenderResult(BaseModel):
    """Result of a single chart render."""
    chart_type: ChartType
    output_path: Optional[Path] = None
    success: bool = True
    error: Optional[str] = None
    points: int = 0
    discarded: int = 0
    viewer_opened: bool = False
