"""A grid raycasting maze viewer and its supporting string, memory and formatting helpers."""

__version__ = "0.1.0"