"""Zappy client toolkit: server message buffering and description, 2D/3D math, text and file helpers."""

__version__ = "0.1.0"