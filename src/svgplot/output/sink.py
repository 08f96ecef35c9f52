"""Write rendered charts to disk and hand them to a viewer.

Both operations report success as a bool instead of raising: a failed
write is an operation failure the caller reports, a failed viewer
launch is logged and otherwise ignored.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def write_file(path: Path | str, content: str) -> bool:
    """Write *content* as UTF-8 text; return *False* on any OS error."""
    path = Path(path)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to write %s: %s", path, exc)
        return False
    logger.info("Wrote %s (%d chars)", path, len(content))
    return True


def _viewer_command(path: Path) -> list[str] | None:
    """Platform file-opener command, or *None* if none is installed."""
    if sys.platform == "darwin":
        opener = "open"
    else:
        opener = "xdg-open"
    if shutil.which(opener) is None:
        return None
    return [opener, str(path)]


def open_viewer(path: Path | str) -> bool:
    """Best-effort launch of the system viewer for *path*.

    Does not wait for the viewer. Returns *True* when a launcher was
    started, *False* otherwise; never raises.
    """
    path = Path(path)
    if sys.platform == "win32":
        try:
            os.startfile(str(path))  # type: ignore[attr-defined]
            return True
        except OSError as exc:
            logger.warning("Could not open %s: %s", path, exc)
            return False

    cmd = _viewer_command(path)
    if cmd is None:
        logger.warning("No viewer available to open %s", path)
        return False
    try:
        subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as exc:
        logger.warning("Viewer launch failed for %s: %s", path, exc)
        return False
    return True
