import logging
from concurrent.futures import ThreadPoolExecutor

import pygame

from prosperity.config import CFG
from prosperity.entities import LoadResult
from prosperity.interaction import InteractionState, hover, initial_state
from prosperity.loader import DatasetError, load_dataset
from prosperity.normalizer import build_dataset
from prosperity.scales import build_scales, compute_layout
from prosperity.scene import build_scene
from .colors import COLORS
from .chart_renderer import draw_chart
from .ui_renderer import draw_legends, draw_side_panel, draw_status, draw_warnings
from .tooltip_renderer import draw_tooltips
from .event_handler import handle_events

logger = logging.getLogger(__name__)


class ChartMonitor:
    def __init__(self, cfg: CFG):
        self.cfg = cfg

        # --- Initialize pygame ---
        pygame.init()
        self.width, self.height = cfg.WIDTH, cfg.HEIGHT
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption(cfg.CAPTION)

        # Fonts
        small_bold = pygame.font.Font(None, 18)
        small_bold.set_bold(True)
        self.fonts = {
            "small": pygame.font.Font(None, 18),
            "small_bold": small_bold,
            "medium": pygame.font.Font(None, 22),
            "large": pygame.font.Font(None, 28),
            "title": pygame.font.Font(None, 40),
        }

        # Data (filled in once the load resolves)
        self.status = "loading"
        self.error = ""
        self.warnings = []
        self.dataset = None
        self.scales = None
        self.layout = compute_layout(self.width, self.height, cfg)

        # UI state
        self.state = InteractionState()
        self.buttons = []
        self.panel_scroll = 0
        self.should_stop = False
        self.mouse_pos = (0, 0)
        self._scene = None

        # One-shot background load
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="csv-loader")
        self._pending = None

        # FPS control
        self.fps_clock = pygame.time.Clock()
        self.fps = cfg.FPS

    # ---------- Data ----------

    def load(self, path=None):
        path = path or self.cfg.DATA_PATH
        self.status = "loading"
        self._pending = self._executor.submit(load_dataset, path)

    def _poll_loader(self):
        if self._pending is None or not self._pending.done():
            return
        future, self._pending = self._pending, None
        try:
            result = future.result()
        except DatasetError as e:
            logger.error(str(e))
            self.status = "error"
            self.error = str(e)
            return
        self.set_data(result)

    def set_data(self, result: LoadResult):
        """Build the dataset of a load; interaction state starts over."""
        self.dataset = build_dataset(result.rows)
        self.warnings = list(result.warnings)
        self.state = initial_state(self.dataset)
        self.status = "ready" if len(self.dataset) else "empty"
        self.panel_scroll = 0
        self._rebuild_scales()
        logger.info(f"Charting {len(self.dataset)} records of {len(self.dataset.entities)} civilizations")

    @property
    def ready(self):
        return self.status == "ready"

    # ---------- Geometry ----------

    def resize(self, width, height):
        self.width, self.height = width, height
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.layout = compute_layout(width, height, self.cfg)
        logger.debug(f"Resized to {width}x{height}")
        if self.dataset is not None:
            self._rebuild_scales()
            if self.state.highlighted is not None:
                # re-anchor tooltips to the new scales
                self.state = hover(self.state, self.state.highlighted, self.dataset, self.scales)

    def _rebuild_scales(self):
        self.scales = build_scales(self.dataset, self.layout, self.cfg)
        self.buttons = self._init_buttons()
        self.panel_scroll = min(self.panel_scroll, self.max_panel_scroll)
        self._scene = None

    @property
    def scene(self):
        if self._scene is None:
            self._scene = build_scene(self.dataset, self.scales, self.state, self.layout, self.cfg)
        return self._scene

    def dispatch(self, handler, *args):
        self.state = handler(self.state, *args)
        self._scene = None
        logger.debug(f"{handler.__name__}: highlighted={self.state.highlighted} "
                     f"visible={len(self.state.visible)}")

    # ---------- Side panel ----------

    def _init_buttons(self):
        cfg = self.cfg
        x = self.layout.panel_x + cfg.PANEL_PADDING
        width = cfg.PANEL_WIDTH - 2 * cfg.PANEL_PADDING
        step = cfg.BUTTON_HEIGHT + cfg.BUTTON_SPACING

        buttons = [
            {"rect": pygame.Rect(x, cfg.PANEL_PADDING, width, cfg.BUTTON_HEIGHT),
             "text": "Show All", "action": "show_all", "entity": None},
            {"rect": pygame.Rect(x, cfg.PANEL_PADDING + step, width, cfg.BUTTON_HEIGHT),
             "text": "Hide All", "action": "hide_all", "entity": None},
        ]
        top = cfg.PANEL_PADDING + 2 * step + cfg.BUTTON_SPACING
        for i, entity in enumerate(self.dataset.entities):
            buttons.append({
                "rect": pygame.Rect(x, top + i * step, width, cfg.BUTTON_HEIGHT),
                "text": entity,
                "action": "toggle",
                "entity": entity,
            })
        return buttons

    @property
    def max_panel_scroll(self):
        if not self.buttons:
            return 0
        content = self.buttons[-1]["rect"].bottom + self.cfg.PANEL_PADDING
        return max(0, content - self.height)

    def button_rect(self, button):
        return button["rect"].move(0, -self.panel_scroll)

    def button_at(self, pos):
        if not pygame.Rect(self.layout.panel_rect).collidepoint(pos):
            return None
        for button in self.buttons:
            if self.button_rect(button).collidepoint(pos):
                return button
        return None

    # ---------- Main loop ----------

    def render(self):
        """Render one frame"""
        if not handle_events(self):
            return False

        self._poll_loader()

        self.screen.fill(COLORS["UI_BACKGROUND"])
        if self.ready:
            draw_chart(self)
            draw_legends(self)
            draw_side_panel(self)
            draw_warnings(self)
            draw_tooltips(self)
        else:
            draw_status(self)
            if self.status == "empty":
                draw_warnings(self)

        pygame.display.flip()
        self.fps_clock.tick(self.fps)
        return True

    # ---------- Utility ----------

    def should_continue(self):
        return not self.should_stop

    def cleanup(self):
        self._executor.shutdown(wait=False, cancel_futures=True)
        self._pending = None
        pygame.quit()
