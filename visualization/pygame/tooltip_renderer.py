import pygame

from .colors import COLORS
from .ui_renderer import wrap_text


def tooltip_surface(monitor, tooltip):
    """Box with the tooltip text; the first line (the entity name) is bold."""
    cfg = monitor.cfg
    pad = cfg.TOOLTIP_PADDING
    body_font, title_font = monitor.fonts['small'], monitor.fonts['small_bold']

    lines = []
    for i, line in enumerate(tooltip.text.split("\n")):
        font = title_font if i == 0 else body_font
        lines.extend((font, part) for part in wrap_text(font, line, cfg.TOOLTIP_MAX_WIDTH - 2 * pad))

    rendered = [font.render(text, True, COLORS['UI_TEXT']) for font, text in lines]
    width = max((s.get_width() for s in rendered), default=0) + 2 * pad
    height = sum(s.get_height() for s in rendered) + 2 * pad

    box = pygame.Surface((width, height), pygame.SRCALPHA)
    box.fill(COLORS['TOOLTIP_BG'] + (230,))
    pygame.draw.rect(box, COLORS['TOOLTIP_BORDER'], box.get_rect(), 1, border_radius=5)
    y = pad
    for surface in rendered:
        box.blit(surface, (pad, y))
        y += surface.get_height()
    return box


def draw_tooltips(monitor):
    """Drawn last, above every other layer. Tooltips never take part in hit-testing."""
    scene = monitor.scene
    ox, oy = scene.layout.plot_x, scene.layout.plot_y
    for tooltip in scene.tooltips:
        box = tooltip_surface(monitor, tooltip)
        monitor.screen.blit(box, (int(round(ox + tooltip.x)), int(round(oy + tooltip.y))))
