"""Append-only SVG document builder.

``SvgDocument`` collects markup fragments in drawing order and knows how
to emit the pieces every chart shares: header, background, grid, axes
and the title/axis labels. Chart-specific primitives are appended by the
renderers through the small ``line``/``circle``/``rect``/``path``/
``text`` helpers.
"""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

from ..core.models import CanvasMode, ChartConfig
from .styles import Colors, Fonts, Layout

_XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>'
_SVG_NS = "http://www.w3.org/2000/svg"


def fmt(value: float) -> str:
    """Format a coordinate with two decimals."""
    return f"{value:.2f}"


def _attrs(attributes: dict[str, object]) -> str:
    """Render ``{"stroke_width": 2}`` as ``stroke-width="2"``."""
    parts = []
    for key, value in attributes.items():
        if value is None:
            continue
        if isinstance(value, float):
            value = fmt(value)
        parts.append(f"{key.rstrip('_').replace('_', '-')}={quoteattr(str(value))}")
    return " ".join(parts)


class SvgDocument:
    """Ordered list of SVG fragments; closed exactly once."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._parts: list[str] = [
            _XML_HEADER,
            f'<svg xmlns="{_SVG_NS}" width="{width}" height="{height}">',
        ]
        self._closed = False

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def append(self, fragment: str) -> None:
        if self._closed:
            raise RuntimeError("cannot append to a closed SVG document")
        self._parts.append(fragment)

    def element(self, tag: str, text: str | None = None, **attributes: object) -> None:
        """Append a single element; *text* is XML-escaped."""
        attrs = _attrs(attributes)
        head = f"<{tag} {attrs}" if attrs else f"<{tag}"
        if text is None:
            self.append(f"{head}/>")
        else:
            self.append(f"{head}>{escape(text)}</{tag}>")

    def open_group(self, **attributes: object) -> None:
        self.append(f"<g {_attrs(attributes)}>")

    def close_group(self) -> None:
        self.append("</g>")

    def close(self) -> str:
        """Emit ``</svg>`` and return the finished document."""
        if not self._closed:
            self._parts.append("</svg>")
            self._closed = True
        return self.to_string()

    def to_string(self) -> str:
        return "\n".join(self._parts)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def line(self, x1: float, y1: float, x2: float, y2: float, **attributes: object) -> None:
        self.element("line", x1=float(x1), y1=float(y1), x2=float(x2), y2=float(y2), **attributes)

    def circle(self, cx: float, cy: float, r: float, **attributes: object) -> None:
        self.element("circle", cx=float(cx), cy=float(cy), r=r, **attributes)

    def rect(self, x: float, y: float, width: float, height: float, **attributes: object) -> None:
        self.element("rect", x=float(x), y=float(y), width=float(width), height=float(height), **attributes)

    def polyline(self, coords: list[tuple[float, float]], **attributes: object) -> None:
        points = " ".join(f"{fmt(x)},{fmt(y)}" for x, y in coords)
        self.element("polyline", points=points, **attributes)

    def path(self, d: str, **attributes: object) -> None:
        self.element("path", d=d, **attributes)

    def text(self, x: float, y: float, content: str, **attributes: object) -> None:
        self.element("text", content, x=float(x), y=float(y), **attributes)

    # ------------------------------------------------------------------
    # Shared chart furniture
    # ------------------------------------------------------------------

    def background(self, color: str) -> None:
        self.element("rect", width="100%", height="100%", fill=color)

    def grid(self, config: ChartConfig) -> None:
        """10×10 grid over the interior rectangle."""
        left, top = config.padding, config.padding
        right = config.width - config.padding
        bottom = config.height - config.padding
        n = Layout.GRID_DIVISIONS

        self.open_group(id="grid", stroke=Colors.GRID, stroke_width=Layout.GRID_STROKE_WIDTH)
        for i in range(n + 1):
            x = left + (right - left) * i / n
            self.line(x, top, x, bottom)
        for i in range(n + 1):
            y = top + (bottom - top) * i / n
            self.line(left, y, right, y)
        self.close_group()

    def axes(self, config: ChartConfig) -> None:
        left, top = config.padding, config.padding
        right = config.width - config.padding
        bottom = config.height - config.padding

        self.open_group(id="axes", stroke=Colors.AXIS, stroke_width=Layout.AXIS_STROKE_WIDTH)
        self.line(left, bottom, right, bottom)
        self.line(left, top, left, bottom)
        self.close_group()

    def title(self, config: ChartConfig) -> None:
        self.text(
            config.width / 2, Layout.TITLE_Y, config.title,
            text_anchor="middle", font_size=Fonts.TITLE_SIZE,
            font_weight="bold", fill=Colors.TITLE,
        )

    def axis_labels(self, config: ChartConfig) -> None:
        self.text(
            config.width / 2, config.height - Layout.X_LABEL_OFFSET, config.x_label,
            text_anchor="middle", font_size=Fonts.LABEL_SIZE, fill=Colors.LABEL,
        )
        cx, cy = Layout.Y_LABEL_X, config.height / 2
        self.text(
            cx, cy, config.y_label,
            text_anchor="middle", font_size=Fonts.LABEL_SIZE, fill=Colors.LABEL,
            transform=f"rotate(-90 {cx} {fmt(cy)})",
        )


def build_canvas(config: ChartConfig, mode: CanvasMode) -> SvgDocument:
    """Start a document with everything that precedes the chart primitives.

    Cartesian charts get background, grid (when enabled), axes, title
    and both axis labels in that order. Radial charts get the
    background and the title only.
    """
    doc = SvgDocument(config.width, config.height)
    doc.background(config.background)
    if mode is CanvasMode.RADIAL:
        doc.title(config)
        return doc

    if config.show_grid:
        doc.grid(config)
    doc.axes(config)
    doc.title(config)
    doc.axis_labels(config)
    return doc
