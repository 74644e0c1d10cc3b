"""Planar geometry types and clipping to a bounding box."""

__version__ = "0.1.0"