from typing import Tuple

COLORS = {
    # Plot
    'PLOT_BG': (255, 255, 255),        # White
    'AXIS': (0, 0, 0),                 # Black
    'GRID': (230, 230, 230),           # Light gray
    'REFERENCE': (0, 0, 0),            # Black, drawn at half opacity
    'MARKER_OUTLINE': (0, 0, 0),
    'PATTERN_STROKE': (0, 0, 0),
    'SWATCH_BG': (255, 255, 255),

    # Side panel
    'PANEL_BG': (245, 245, 245),       # #f5f5f5
    'PANEL_BORDER': (204, 204, 204),   # #ccc
    'SHOW_ALL': (76, 175, 80),         # #4CAF50
    'HIDE_ALL': (244, 67, 54),         # #F44336
    'BUTTON_TEXT': (255, 255, 255),

    # Tooltips
    'TOOLTIP_BG': (255, 255, 255),     # drawn at 90% opacity
    'TOOLTIP_BORDER': (204, 204, 204),

    # UI elements
    'UI_BACKGROUND': (255, 255, 255),
    'UI_TEXT': (50, 50, 50),           # Dark gray
    'UI_ERROR': (211, 47, 47),         # Red
    'UI_WARNING_BG': (255, 243, 205),  # Pale amber
    'UI_WARNING_TEXT': (133, 100, 4),
}


def lighten(color: Tuple[int, int, int], coefficient: float) -> Tuple[int, int, int]:
    """Move a colour towards white; coefficient 0 keeps it, 1 gives white."""
    return tuple(int(round(c + (255 - c) * coefficient)) for c in color)
