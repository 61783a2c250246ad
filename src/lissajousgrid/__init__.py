"""Animated grid of Lissajous curves traced by rotating header circles."""

__version__ = "0.1.0"
