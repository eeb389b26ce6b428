"""Cube-based scrambling cipher primitives: base conversion, key derivation, cube turns and tables."""

__version__ = "0.1.0"