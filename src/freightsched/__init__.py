"""Assign freight orders to scheduled flights under a fixed per-flight capacity."""

__version__ = "0.1.0"
