"""Data model, text parser and coordinate mapping."""

from .mapper import CoordinateMapper
from .models import Bounds, CanvasMode, ChartConfig, ChartType, ParseReport, Point, RenderResult
from .parser import parse_bar_data, parse_pairs, parse_values

__all__ = [
    "Bounds",
    "CanvasMode",
    "ChartConfig",
    "ChartType",
    "CoordinateMapper",
    "ParseReport",
    "Point",
    "RenderResult",
    "parse_bar_data",
    "parse_pairs",
    "parse_values",
]
