"""Fixed styling constants shared by all renderers.

Per-call colors (primary series color, background) live on
``ChartConfig``; everything else a chart draws uses these values.
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Color palette (hex strings)
# ---------------------------------------------------------------------------

class Colors:
    GRID = "#e5e7eb"          # Light gray grid lines
    AXIS = "#1f2937"          # Near-black axes
    TITLE = "#1f2937"
    LABEL = "#4b5563"         # Muted gray axis labels
    VALUE_LABEL = "#1f2937"   # Numbers above bars
    WEDGE_STROKE = "white"
    WEDGE_LABEL = "white"

    # Pie wedges cycle through this palette by index
    PALETTE = (
        "#3b82f6",  # Blue
        "#ef4444",  # Red
        "#10b981",  # Green
        "#f59e0b",  # Amber
        "#8b5cf6",  # Violet
        "#ec4899",  # Pink
    )


# ---------------------------------------------------------------------------
# Font sizes (px)
# ---------------------------------------------------------------------------

class Fonts:
    TITLE_SIZE = 20
    LABEL_SIZE = 14
    VALUE_SIZE = 12
    WEDGE_SIZE = 14


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

class Layout:
    """Canvas geometry constants."""
    GRID_DIVISIONS = 10
    GRID_STROKE_WIDTH = 1
    AXIS_STROKE_WIDTH = 2
    LINE_STROKE_WIDTH = 2

    TITLE_Y = 30
    X_LABEL_OFFSET = 10   # distance of the x-label baseline from the bottom edge
    Y_LABEL_X = 20

    LINE_MARKER_RADIUS = 4
    SCATTER_MARKER_RADIUS = 5
    SCATTER_OPACITY = 0.7

    BAR_WIDTH_FACTOR = 1.5  # bar width = plot width / (count * factor)
    BAR_OPACITY = 0.8
    BAR_LABEL_GAP = 5

    PIE_RADIUS = 180
    PIE_CENTER_DROP = 20    # pie centre sits this far below the canvas middle
    PIE_START_ANGLE = -90.0
    PIE_LABEL_RADIUS = 0.7  # fraction of the radius
    PIE_STROKE_WIDTH = 2
