"""Electron identification inputs, effective areas, tracks and particle-flow isolation."""

__version__ = "0.1.0"