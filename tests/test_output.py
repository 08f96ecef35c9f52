"""Tests for the output sink and output settings."""

from __future__ import annotations

import re
import subprocess

import pytest

from svgplot.config import OutputSettings
from svgplot.core.models import ChartType
from svgplot.output import sink


# ---------------------------------------------------------------------------
# write_file
# ---------------------------------------------------------------------------

class TestWriteFile:
    def test_writes_content(self, tmp_path):
        target = tmp_path / "out.svg"
        assert sink.write_file(target, "<svg/>") is True
        assert target.read_text(encoding="utf-8") == "<svg/>"

    def test_missing_directory(self, tmp_path):
        assert sink.write_file(tmp_path / "missing" / "out.svg", "<svg/>") is False


# ---------------------------------------------------------------------------
# open_viewer
# ---------------------------------------------------------------------------

@pytest.fixture
def linux(monkeypatch):
    monkeypatch.setattr(sink.sys, "platform", "linux")


class TestOpenViewer:
    def test_launches_xdg_open(self, linux, monkeypatch, tmp_path):
        launched = []
        monkeypatch.setattr(sink.shutil, "which", lambda name: f"/usr/bin/{name}")
        monkeypatch.setattr(sink.subprocess, "Popen", lambda cmd, **kw: launched.append(cmd))
        assert sink.open_viewer(tmp_path / "a.svg") is True
        assert launched == [["xdg-open", str(tmp_path / "a.svg")]]

    def test_mac_uses_open(self, monkeypatch, tmp_path):
        launched = []
        monkeypatch.setattr(sink.sys, "platform", "darwin")
        monkeypatch.setattr(sink.shutil, "which", lambda name: f"/usr/bin/{name}")
        monkeypatch.setattr(sink.subprocess, "Popen", lambda cmd, **kw: launched.append(cmd))
        assert sink.open_viewer(tmp_path / "a.svg") is True
        assert launched[0][0] == "open"

    def test_no_opener_installed(self, linux, monkeypatch, tmp_path):
        monkeypatch.setattr(sink.shutil, "which", lambda name: None)
        assert sink.open_viewer(tmp_path / "a.svg") is False

    def test_launch_error_is_swallowed(self, linux, monkeypatch, tmp_path):
        def _boom(cmd, **kw):
            raise OSError("exec failed")

        monkeypatch.setattr(sink.shutil, "which", lambda name: f"/usr/bin/{name}")
        monkeypatch.setattr(sink.subprocess, "Popen", _boom)
        assert sink.open_viewer(tmp_path / "a.svg") is False


# ---------------------------------------------------------------------------
# OutputSettings
# ---------------------------------------------------------------------------

class TestOutputSettings:
    def test_fixed_names(self, tmp_path):
        s = OutputSettings(output_dir=tmp_path)
        assert s.path_for(ChartType.LINE) == tmp_path / "graph_line.svg"
        assert s.path_for(ChartType.PIE) == tmp_path / "graph_pie.svg"

    def test_unique_names(self, tmp_path):
        s = OutputSettings(output_dir=tmp_path, unique_names=True)
        path = s.path_for(ChartType.BAR)
        assert re.fullmatch(r"graph_bar_[0-9a-f]{12}\.svg", path.name)
        assert path != s.path_for(ChartType.BAR)

    def test_string_dir_coerced(self, tmp_path):
        s = OutputSettings(output_dir=str(tmp_path))
        assert s.output_dir == tmp_path

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SVGPLOT_OUTPUT_DIR", str(tmp_path))
        monkeypatch.setenv("SVGPLOT_NO_VIEWER", "true")
        monkeypatch.setenv("SVGPLOT_UNIQUE_NAMES", "0")
        s = OutputSettings.from_env()
        assert s.output_dir == tmp_path
        assert s.open_viewer is False
        assert s.unique_names is False

    def test_from_env_defaults(self, monkeypatch, tmp_path):
        for name in ("SVGPLOT_OUTPUT_DIR", "SVGPLOT_NO_VIEWER", "SVGPLOT_UNIQUE_NAMES"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.chdir(tmp_path)
        s = OutputSettings.from_env()
        assert s.output_dir == tmp_path
        assert s.open_viewer is True
