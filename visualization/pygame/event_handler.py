# event_handler.py
import logging

import pygame

from prosperity import interaction
from prosperity.utils import clamp

logger = logging.getLogger(__name__)

SCROLL_STEP = 30


def handle_events(monitor):
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            monitor.should_stop = True
            return False
        elif event.type == pygame.VIDEORESIZE:
            monitor.resize(event.w, event.h)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            _handle_click(monitor, event.pos)
        elif event.type == pygame.MOUSEWHEEL:
            _scroll_panel(monitor, event.y)
        elif event.type == pygame.MOUSEMOTION:
            monitor.mouse_pos = event.pos
            _handle_hover(monitor, event.pos)
        elif event.type == pygame.WINDOWLEAVE:
            _handle_hover(monitor, None)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                monitor.should_stop = True
                return False
            elif event.key == pygame.K_a:
                _show_all(monitor)
            elif event.key == pygame.K_h:
                _hide_all(monitor)
    return True


def _handle_hover(monitor, pos):
    """Highlight the entity under the pointer (marker first, then line legend)."""
    if not monitor.ready:
        return
    entity = None
    if pos is not None:
        layout = monitor.layout
        entity = monitor.scene.entity_at(pos[0] - layout.plot_x, pos[1] - layout.plot_y)

    if entity == monitor.state.highlighted:
        return
    if entity is None:
        monitor.dispatch(interaction.hover_leave)
    else:
        monitor.dispatch(interaction.hover, entity, monitor.dataset, monitor.scales)


def _handle_click(monitor, pos):
    if not monitor.ready:
        return
    button = monitor.button_at(pos)
    if button is None:
        return
    action = button['action']
    if action == "show_all":
        _show_all(monitor)
    elif action == "hide_all":
        _hide_all(monitor)
    elif action == "toggle":
        monitor.dispatch(interaction.toggle, button['entity'])
        logger.debug(f"Toggled {button['entity']}: visible={monitor.state.is_visible(button['entity'])}")


def _show_all(monitor):
    if monitor.ready:
        monitor.dispatch(interaction.show_all, monitor.dataset.entities)


def _hide_all(monitor):
    if monitor.ready:
        monitor.dispatch(interaction.hide_all)


def _scroll_panel(monitor, amount):
    monitor.panel_scroll = int(clamp(monitor.panel_scroll - amount * SCROLL_STEP, 0, monitor.max_panel_scroll))
