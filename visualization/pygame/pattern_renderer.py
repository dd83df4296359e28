from functools import lru_cache

import pygame

from prosperity.patterns import Pattern, path_polylines
from .colors import COLORS

# pattern paths live in a 10x10 cell
PATH_UNITS = 10


@lru_cache(maxsize=None)
def _polylines(path):
    return path_polylines(path)


def pattern_tile(pattern: Pattern, size: int, background=None) -> pygame.Surface:
    """One cell of the pattern, strokes on a transparent (or given) background."""
    tile = pygame.Surface((size, size), pygame.SRCALPHA)
    if background is not None:
        tile.fill(background)
    scale = size / PATH_UNITS
    width = max(1, round(1.5 * scale / 2))
    for line in _polylines(pattern.path):
        points = [(x * scale, y * scale) for x, y in line]
        pygame.draw.lines(tile, COLORS['PATTERN_STROKE'], False, points, width)
    return tile


def tiled(pattern: Pattern, width: int, height: int, tile_size: int) -> pygame.Surface:
    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    tile = pattern_tile(pattern, tile_size)
    for ty in range(0, height, tile_size):
        for tx in range(0, width, tile_size):
            surface.blit(tile, (tx, ty))
    return surface


@lru_cache(maxsize=512)
def marker_surface(color, radius: float, pattern: Pattern, opacity: float, tile_size: int) -> pygame.Surface:
    """Circle filled with the entity colour and overlaid with the calendar pattern."""
    r = max(1, int(round(radius)))
    d = 2 * r + 1
    surface = pygame.Surface((d, d), pygame.SRCALPHA)
    pygame.draw.circle(surface, color, (r, r), r)
    surface.blit(tiled(pattern, d, d, tile_size), (0, 0))

    # Keep only what lies inside the circle
    mask = pygame.Surface((d, d), pygame.SRCALPHA)
    pygame.draw.circle(mask, (255, 255, 255, 255), (r, r), r)
    surface.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)

    pygame.draw.circle(surface, COLORS['MARKER_OUTLINE'], (r, r), r, 1)
    surface.set_alpha(int(round(opacity * 255)))
    return surface


@lru_cache(maxsize=None)
def legend_swatch(pattern: Pattern, size: int) -> pygame.Surface:
    swatch = pattern_tile(pattern, size, background=COLORS['SWATCH_BG'])
    pygame.draw.rect(swatch, COLORS['MARKER_OUTLINE'], swatch.get_rect(), 1)
    return swatch
