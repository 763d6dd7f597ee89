"""Bubble Rush: dodge, collect and race the clock on a single screen."""

__version__ = "0.1.0"
