"""Output location and viewer settings."""

from __future__ import annotations

import os
import uuid
from dataclasses import dataclass, field
from pathlib import Path

from .core.models import ChartType

ENV_OUTPUT_DIR = "SVGPLOT_OUTPUT_DIR"
ENV_NO_VIEWER = "SVGPLOT_NO_VIEWER"
ENV_UNIQUE_NAMES = "SVGPLOT_UNIQUE_NAMES"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


@dataclass
class OutputSettings:
    """Where charts are written and whether they are opened afterwards."""

    output_dir: Path = field(default_factory=Path.cwd)
    open_viewer: bool = True
    # Fixed names are last-write-wins; unique names add a random suffix
    unique_names: bool = False

    def __post_init__(self) -> None:
        self.output_dir = Path(self.output_dir)

    @classmethod
    def from_env(cls) -> "OutputSettings":
        """Build settings from ``SVGPLOT_*`` environment variables."""
        raw_dir = os.environ.get(ENV_OUTPUT_DIR)
        return cls(
            output_dir=Path(raw_dir) if raw_dir else Path.cwd(),
            open_viewer=not _env_flag(ENV_NO_VIEWER),
            unique_names=_env_flag(ENV_UNIQUE_NAMES),
        )

    def path_for(self, chart_type: ChartType) -> Path:
        """Output path for a chart of *chart_type*."""
        if not self.unique_names:
            return self.output_dir / chart_type.filename
        return self.output_dir / f"graph_{chart_type.value}_{uuid.uuid4().hex[:12]}.svg"
