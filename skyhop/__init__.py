"""Skyhop: pick a cloud, press Play, and hope it does not fall."""

__version__ = "1.0.0"
