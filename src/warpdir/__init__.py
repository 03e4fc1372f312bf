"""Warp directory: jump to named directories without typing full paths."""

__version__ = "0.2.0"
