import pygame

from .colors import COLORS, lighten
from .pattern_renderer import legend_swatch


def wrap_text(font, text, max_width):
    """Greedy word wrap; explicit newlines always break."""
    lines = []
    for paragraph in text.split("\n"):
        words = paragraph.split(" ")
        current = ""
        for word in words:
            candidate = f"{current} {word}" if current else word
            if current and font.size(candidate)[0] > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines


def draw_legends(monitor):
    scene = monitor.scene
    ox, oy = scene.layout.plot_x, scene.layout.plot_y
    font = monitor.fonts['small']

    for entry in scene.pattern_legend:
        x, y, _, h = entry.rect
        swatch = legend_swatch(entry.pattern, h - 1)
        monitor.screen.blit(swatch, (ox + x, oy + y))
        label = font.render(entry.label, True, COLORS['UI_TEXT'])
        monitor.screen.blit(label, label.get_rect(midleft=(ox + x + 25, oy + y + h / 2)))

    for entry in scene.line_legend:
        x, y, _, h = entry.rect
        mid = oy + y + h / 2
        pygame.draw.line(monitor.screen, entry.color, (ox + x, mid), (ox + x + 20, mid),
                         max(1, int(round(entry.width))))
        label = font.render(entry.entity, True, COLORS['UI_TEXT'])
        monitor.screen.blit(label, label.get_rect(midleft=(ox + x + 25, mid)))


def _button_colors(monitor, button):
    action = button['action']
    if action == "show_all":
        return COLORS['SHOW_ALL'], COLORS['BUTTON_TEXT'], COLORS['SHOW_ALL']
    if action == "hide_all":
        return COLORS['HIDE_ALL'], COLORS['BUTTON_TEXT'], COLORS['HIDE_ALL']
    color = monitor.scales.color(button['entity'])
    if monitor.state.is_visible(button['entity']):
        return color, COLORS['BUTTON_TEXT'], color
    return lighten(color, 0.9), color, color


def draw_side_panel(monitor):
    layout = monitor.layout
    panel = pygame.Rect(layout.panel_rect)
    pygame.draw.rect(monitor.screen, COLORS['PANEL_BG'], panel)
    pygame.draw.line(monitor.screen, COLORS['PANEL_BORDER'], panel.topleft, panel.bottomleft, 1)

    previous_clip = monitor.screen.get_clip()
    monitor.screen.set_clip(panel)
    for button in monitor.buttons:
        rect = monitor.button_rect(button)
        if rect.bottom < 0 or rect.top > layout.height:
            continue
        fill, text_color, border = _button_colors(monitor, button)
        pygame.draw.rect(monitor.screen, fill, rect, border_radius=4)
        pygame.draw.rect(monitor.screen, border, rect, 1, border_radius=4)
        text_surface = monitor.fonts['medium'].render(button['text'], True, text_color)
        if button['action'] == "toggle":
            monitor.screen.blit(text_surface, text_surface.get_rect(midleft=(rect.x + 10, rect.centery)))
        else:
            monitor.screen.blit(text_surface, text_surface.get_rect(center=rect.center))
    monitor.screen.set_clip(previous_clip)


def draw_warnings(monitor):
    if not monitor.warnings:
        return
    layout = monitor.layout
    count = len(monitor.warnings)
    noun = "row" if count == 1 else "rows"
    text = f"{count} {noun} skipped: {monitor.warnings[0]}"
    rect = pygame.Rect(layout.plot_x, 8, max(layout.plot_width, 1), 24)
    pygame.draw.rect(monitor.screen, COLORS['UI_WARNING_BG'], rect)
    surface = monitor.fonts['small'].render(text, True, COLORS['UI_WARNING_TEXT'])
    previous_clip = monitor.screen.get_clip()
    monitor.screen.set_clip(rect)
    monitor.screen.blit(surface, surface.get_rect(midleft=(rect.x + 6, rect.centery)))
    monitor.screen.set_clip(previous_clip)


def draw_status(monitor):
    """Full-screen placeholder while there is nothing to chart."""
    if monitor.status == "error":
        title = monitor.fonts['title'].render("Error", True, COLORS['UI_ERROR'])
        monitor.screen.blit(title, (24, 24))
        y = 24 + title.get_height() + 12
        for line in wrap_text(monitor.fonts['medium'], monitor.error, monitor.width - 48):
            surface = monitor.fonts['medium'].render(line, True, COLORS['UI_TEXT'])
            monitor.screen.blit(surface, (24, y))
            y += surface.get_height() + 4
    else:
        text = "Loading data..." if monitor.status == "loading" else "No data to display"
        surface = monitor.fonts['large'].render(text, True, COLORS['UI_TEXT'])
        monitor.screen.blit(surface, (24, 24))
