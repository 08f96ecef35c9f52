"""Tests for the SVG document builder."""

from __future__ import annotations

import pytest

from svgplot.core.models import CanvasMode, ChartConfig
from svgplot.generators.canvas import SvgDocument, build_canvas, fmt


class TestSvgDocument:
    def test_header_and_root(self):
        svg = SvgDocument(800, 600).close()
        assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert 'width="800" height="600"' in svg
        assert svg.endswith("</svg>")

    def test_append_after_close_raises(self):
        doc = SvgDocument(10, 10)
        doc.close()
        assert doc.closed
        with pytest.raises(RuntimeError):
            doc.circle(1, 1, 1)

    def test_close_is_idempotent(self):
        doc = SvgDocument(10, 10)
        assert doc.close() == doc.close()
        assert doc.to_string().count("</svg>") == 1

    def test_attribute_names_are_hyphenated(self):
        doc = SvgDocument(10, 10)
        doc.line(0, 0, 5, 5, stroke_width=2)
        assert '<line x1="0.00" y1="0.00" x2="5.00" y2="5.00" stroke-width="2"/>' in doc.to_string()

    def test_text_is_escaped(self):
        doc = SvgDocument(10, 10)
        doc.text(1, 2, "A & B <c>")
        assert ">A &amp; B &lt;c&gt;</text>" in doc.to_string()

    def test_polyline_points(self):
        doc = SvgDocument(10, 10)
        doc.polyline([(1, 2), (3.456, 4)])
        assert 'points="1.00,2.00 3.46,4.00"' in doc.to_string()

    def test_fmt(self):
        assert fmt(1) == "1.00"
        assert fmt(2.005) in {"2.00", "2.01"}


class TestBuildCanvas:
    def test_cartesian_order(self):
        cfg = ChartConfig(title="T", x_label="XL", y_label="YL")
        svg = build_canvas(cfg, CanvasMode.CARTESIAN).close()
        markers = [
            "<?xml",
            "<svg ",
            'fill="#ffffff"',
            'id="grid"',
            'id="axes"',
            ">T</text>",
            ">XL</text>",
            ">YL</text>",
            "</svg>",
        ]
        positions = [svg.index(m) for m in markers]
        assert positions == sorted(positions)

    def test_grid_has_eleven_lines_each_way(self):
        svg = build_canvas(ChartConfig(), CanvasMode.CARTESIAN).close()
        grid = svg[svg.index('id="grid"'):svg.index('id="axes"')]
        assert grid.count("<line ") == 22

    def test_grid_hidden(self):
        svg = build_canvas(ChartConfig(show_grid=False), CanvasMode.CARTESIAN).close()
        assert 'id="grid"' not in svg
        assert 'id="axes"' in svg

    def test_y_label_rotated(self):
        svg = build_canvas(ChartConfig(), CanvasMode.CARTESIAN).close()
        assert 'transform="rotate(-90 20 300.00)"' in svg

    def test_radial_has_title_only(self):
        svg = build_canvas(ChartConfig(title="Pie"), CanvasMode.RADIAL).close()
        assert ">Pie</text>" in svg
        assert 'id="grid"' not in svg
        assert 'id="axes"' not in svg
        assert ">X</text>" not in svg

    def test_background_color(self):
        svg = build_canvas(ChartConfig(background="#000000"), CanvasMode.CARTESIAN).close()
        assert '<rect width="100%" height="100%" fill="#000000"/>' in svg
