"""File output and viewer launch."""

from .sink import open_viewer, write_file

__all__ = ["open_viewer", "write_file"]
