# portfolio/settings.py — page config, section ids, feature flags
# ----------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Dict, Tuple

PAGE_TITLE = "Gaurav Singh — Systems"
PAGE_ICON = "◼"

# logical section id -> landmark element id rendered on the page
SECTION_IDS: Dict[str, str] = {
    "opening": "opening",
    "principles": "principles",
    "systems": "systems",
    "direction": "direction",
}
SECTION_ORDER: Tuple[str, ...] = ("opening", "principles", "systems", "direction", "footer")

# --- Feature flags ---
SHOW_SCROLL_HINT = True        # thin line under the hero that jumps to principles

# --- Overlay motion ---
FADE_SECONDS = 0.4
FADE_EASE = "cubic-bezier(0.16, 1, 0.3, 1)"

# --- Widget / state keys ---
CONTROLLER_KEY = "page_controller"
OVERLAY_KEY = "focus_overlay"
EXIT_FADE_KEY = "focus_overlay_exit"
CLOSE_BUTTON_KEY = "focus_close"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Attach one handler to the package logger; safe to call on every rerun."""
    logger = logging.getLogger("portfolio")
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
