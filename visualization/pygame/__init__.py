"""
Pygame-based visualization package for the prosperity chart.

Provides:
    - COLORS (shared UI color palette)
    - ChartMonitor (window, frame loop and interaction dispatch)
"""

from .colors import COLORS
from .monitor import ChartMonitor

__all__ = ["COLORS", "ChartMonitor"]
