from functools import lru_cache

import pygame

from .colors import COLORS
from .pattern_renderer import marker_surface

TICK_SIZE = 6
DASH = 4
# room around the plot for spline overshoot and line caps
OVERLAY_PAD = 40


def _alpha(opacity):
    return int(round(opacity * 255))


@lru_cache(maxsize=4)
def _overlay_surface(width, height):
    return pygame.Surface((width, height), pygame.SRCALPHA)


def _overlay(layout):
    """Cleared plot-sized overlay shared by the translucent layers."""
    overlay = _overlay_surface(int(layout.plot_width) + 2 * OVERLAY_PAD, int(layout.plot_height) + 2 * OVERLAY_PAD)
    overlay.fill((0, 0, 0, 0))
    return overlay


# ========== Drawing helpers ==========

def _draw_grid(monitor, scene, ox, oy):
    layout = scene.layout
    for gy in scene.grid:
        y = oy + gy
        pygame.draw.line(monitor.screen, COLORS['GRID'], (ox, y), (ox + layout.plot_width, y), 1)


def _draw_reference_line(monitor, scene, ox, oy):
    ref = scene.reference
    if ref is None:
        return
    overlay = _overlay(scene.layout)
    y = OVERLAY_PAD + ref.y
    x = ref.x0
    while x < ref.x1:
        end = min(x + DASH, ref.x1)
        pygame.draw.line(overlay, COLORS['REFERENCE'], (OVERLAY_PAD + x, y), (OVERLAY_PAD + end, y), 1)
        x += 2 * DASH
    overlay.set_alpha(_alpha(ref.opacity))
    monitor.screen.blit(overlay, (ox - OVERLAY_PAD, oy - OVERLAY_PAD))


def _draw_trend_lines(monitor, scene, ox, oy):
    for line in scene.lines:
        if len(line.points) < 2:
            continue
        overlay = _overlay(scene.layout)
        points = [(OVERLAY_PAD + x, OVERLAY_PAD + y) for x, y in line.points]
        pygame.draw.lines(overlay, line.color, False, points, max(1, int(round(line.width))))
        overlay.set_alpha(_alpha(line.opacity))
        monitor.screen.blit(overlay, (ox - OVERLAY_PAD, oy - OVERLAY_PAD))


def _draw_markers(monitor, scene, ox, oy):
    tile = monitor.cfg.PATTERN_TILE
    for marker in scene.markers:
        surface = marker_surface(marker.color, marker.radius, marker.pattern, marker.opacity, tile)
        rect = surface.get_rect(center=(int(round(ox + marker.x)), int(round(oy + marker.y))))
        monitor.screen.blit(surface, rect)


def _draw_axes(monitor, scene, ox, oy):
    layout = scene.layout
    font = monitor.fonts['small']
    bottom = oy + layout.plot_height

    # x axis
    pygame.draw.line(monitor.screen, COLORS['AXIS'], (ox, bottom), (ox + layout.plot_width, bottom), 1)
    for tick in scene.x_axis.ticks:
        x = ox + tick.position
        pygame.draw.line(monitor.screen, COLORS['AXIS'], (x, bottom), (x, bottom + TICK_SIZE), 1)
        label = font.render(tick.label, True, COLORS['UI_TEXT'])
        monitor.screen.blit(label, label.get_rect(midtop=(x, bottom + TICK_SIZE + 3)))

    # y axis
    pygame.draw.line(monitor.screen, COLORS['AXIS'], (ox, oy), (ox, bottom), 1)
    for tick in scene.y_axis.ticks:
        y = oy + tick.position
        pygame.draw.line(monitor.screen, COLORS['AXIS'], (ox - TICK_SIZE, y), (ox, y), 1)
        label = font.render(tick.label, True, COLORS['UI_TEXT'])
        monitor.screen.blit(label, label.get_rect(midright=(ox - TICK_SIZE - 3, y)))

    # titles
    title_font = monitor.fonts['medium']
    x_title = title_font.render(scene.x_axis.label, True, COLORS['UI_TEXT'])
    monitor.screen.blit(x_title, x_title.get_rect(
        center=(ox + layout.plot_width / 2, bottom + monitor.cfg.MARGIN_BOTTOM - 10)))
    y_title = pygame.transform.rotate(title_font.render(scene.y_axis.label, True, COLORS['UI_TEXT']), 90)
    monitor.screen.blit(y_title, y_title.get_rect(
        center=(ox - monitor.cfg.MARGIN_LEFT + 20, oy + layout.plot_height / 2)))


# ========== Main drawing orchestrator ==========

def draw_chart(monitor):
    scene = monitor.scene
    ox, oy = scene.layout.plot_x, scene.layout.plot_y

    pygame.draw.rect(monitor.screen, COLORS['PLOT_BG'], pygame.Rect(scene.layout.plot_rect))
    _draw_grid(monitor, scene, ox, oy)
    _draw_reference_line(monitor, scene, ox, oy)
    _draw_trend_lines(monitor, scene, ox, oy)
    _draw_markers(monitor, scene, ox, oy)
    _draw_axes(monitor, scene, ox, oy)
