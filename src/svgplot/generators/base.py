"""Abstract base class for chart renderers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

from ..core.models import CanvasMode, ChartConfig, ChartType
from .canvas import SvgDocument, build_canvas

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseChartRenderer(ABC, Generic[T]):
    """Every chart renderer inherits from this class.

    Subclasses set ``chart_type`` and ``mode`` and implement
    ``_draw``, which appends the chart-specific primitives to a canvas
    that already carries the shared furniture for the renderer's mode.
    """

    chart_type: ChartType  # set by subclasses
    mode: CanvasMode = CanvasMode.CARTESIAN

    def __init__(self, config: ChartConfig | None = None) -> None:
        self.config = config or ChartConfig()

    def render(self, data: Sequence[T]) -> str | None:
        """Render *data* to an SVG string, or *None* when there is nothing to draw."""
        if not data:
            logger.debug("%s chart: no data, nothing rendered", self.chart_type.value)
            return None
        if not self._accepts(data):
            return None

        doc = build_canvas(self.config, self.mode)
        self._draw(doc, data)
        return doc.close()

    def _accepts(self, data: Sequence[T]) -> bool:
        """Extra precondition hook; the default accepts any non-empty data."""
        return True

    @abstractmethod
    def _draw(self, doc: SvgDocument, data: Sequence[T]) -> None:
        """Append the chart primitives for *data* to *doc*."""
        ...
