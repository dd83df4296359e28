import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple


def get_resource_path(relative_path: str) -> str:
    """Absolute path of a project resource, frozen builds included."""
    if hasattr(sys, '_MEIPASS'):
        return os.path.join(getattr(sys, '_MEIPASS'), relative_path)
    # config.py lives in prosperity/, the project root is one level up
    project_root = Path(__file__).resolve().parent.parent
    return os.path.join(str(project_root), relative_path)


DEFAULT_DATA_PATH: str = get_resource_path(os.path.join("data", "data.csv"))


@dataclass
class CFG:
    # Window
    WIDTH: int = 1600
    HEIGHT: int = 900
    FPS: int = 60
    CAPTION: str = "Civilizations - Prosperity Over Time"

    # Layout (pixels)
    MARGIN_TOP: int = 40
    MARGIN_RIGHT: int = 180       # hosts the calendar and line legends
    MARGIN_BOTTOM: int = 60
    MARGIN_LEFT: int = 80
    PANEL_WIDTH: int = 240
    PANEL_GAP: int = 40
    PANEL_PADDING: int = 20
    BUTTON_HEIGHT: int = 36
    BUTTON_SPACING: int = 10

    # Scales
    RADIUS_RANGE: Tuple[float, float] = (5.0, 40.0)
    STROKE_RANGE: Tuple[float, float] = (1.0, 5.0)
    X_TICKS: int = 10
    Y_TICKS: int = 10

    # Highlighting
    OPACITY_NORMAL: float = 0.7
    OPACITY_HIGHLIGHT: float = 1.0
    OPACITY_DIMMED: float = 0.3
    HIGHLIGHT_WIDTH_FACTOR: float = 2.0
    REFERENCE_OPACITY: float = 0.5

    # Shapes
    SPLINE_SAMPLES: int = 12       # points per segment of a trend line
    PATTERN_TILE: int = 20         # pattern cell size in pixels (path units x 2)
    LEGEND_ROW: int = 20
    LEGEND_ENTRY_WIDTH: int = 160

    # Tooltips
    TOOLTIP_MAX_WIDTH: int = 200
    TOOLTIP_PADDING: int = 5

    # Data
    DATA_PATH: str = field(default_factory=lambda: DEFAULT_DATA_PATH)
