"""Scene data, file-name checks, buffered line reading and text helpers for .cub scene files."""

__version__ = "0.1.0"