"""Planar geometry, line segments, vector maps with ray casting, and numeric helpers for 2D robotics."""

__version__ = "0.1.0"