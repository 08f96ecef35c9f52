"""Permissive text → numbers parser for chart input.

Data arrives as a single delimited string, either plain values::

    "10,20,15,30"

or ``x:y`` pairs::

    "1:2,3:4,5:6"

Each token contributes its leading number, like ``strtod``; tokens that
do not start with one are silently dropped, so malformed
input degrades to fewer data points instead of raising.
"""

from __future__ import annotations

import logging
import math
import re

from .models import ParseReport, Point

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
PAIR_SEPARATOR = ":"

# Optional sign, digits with optional fraction, optional exponent
_LEADING_NUMBER_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


# ---------------------------------------------------------------------------
# Token helpers
# ---------------------------------------------------------------------------

def _to_float(token: str) -> float | None:
    """Convert the token's leading number to a finite float.

    Trailing text is ignored (``"10px"`` → 10.0). Returns *None* when
    the token does not start with a number or the number is not finite.
    """
    m = _LEADING_NUMBER_RE.match(token)
    if not m:
        return None
    value = float(m.group(1))
    if not math.isfinite(value):
        return None
    return value


def _tokens(text: str) -> list[str]:
    """Split on the field separator, dropping empty tokens."""
    if not text:
        return []
    return [t for t in text.split(FIELD_SEPARATOR) if t.strip()]


# ---------------------------------------------------------------------------
# Scanners (with discard counts)
# ---------------------------------------------------------------------------

def scan_values(text: str) -> ParseReport:
    """Parse ``"v1,v2,..."`` and report how many tokens were discarded."""
    report = ParseReport()
    for token in _tokens(text):
        value = _to_float(token)
        if value is None:
            logger.debug("Discarding non-numeric value token %r", token)
            report.discarded += 1
            continue
        report.values.append(value)
    return report


def scan_pairs(text: str) -> ParseReport:
    """Parse ``"x1:y1,x2:y2,..."`` and report how many tokens were discarded."""
    report = ParseReport()
    for token in _tokens(text):
        x_raw, sep, y_raw = token.partition(PAIR_SEPARATOR)
        x = _to_float(x_raw) if sep else None
        y = _to_float(y_raw) if sep else None
        if x is None or y is None:
            logger.debug("Discarding malformed pair token %r", token)
            report.discarded += 1
            continue
        report.points.append(Point(x, y))
    return report


def scan_bar_data(text: str) -> ParseReport:
    """Bar input is pairs when it contains ``:``, else indexed values."""
    if text and PAIR_SEPARATOR in text:
        return scan_pairs(text)
    report = scan_values(text)
    report.points = [Point(float(i), v) for i, v in enumerate(report.values)]
    return report


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_values(text: str) -> list[float]:
    """Parse comma-separated numbers, skipping invalid tokens.

    >>> parse_values("1,x,3")
    [1.0, 3.0]
    """
    return scan_values(text).values


def parse_pairs(text: str) -> list[Point]:
    """Parse comma-separated ``x:y`` pairs, skipping invalid tokens.

    >>> [tuple(p) for p in parse_pairs("1:2,bad,3:4")]
    [(1.0, 2.0), (3.0, 4.0)]
    """
    return scan_pairs(text).points


def parse_bar_data(text: str) -> list[Point]:
    """Parse bar chart input; plain values get their index as X."""
    return scan_bar_data(text).points
