# portfolio/focus.py — selection slot + focus overlay lifecycle
# --------------------------------------------------------------
# The overlay is the only writer of the document scroll lock and the only
# owner of the global Escape listener. Both are held for exactly as long as
# a project is selected.

from __future__ import annotations
import logging
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union

from portfolio.content import ProjectRecord

log = logging.getLogger(__name__)

ESCAPE = "Escape"


# -----------------------------
# Selection (None | Selected)
# -----------------------------
@dataclass(frozen=True)
class NoSelection:
    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class Selected:
    record: ProjectRecord


Selection = Union[NoSelection, Selected]
NOTHING = NoSelection()


def selected_record(selection: Selection) -> Optional[ProjectRecord]:
    if isinstance(selection, Selected):
        return selection.record
    return None


# -----------------------------
# Host document
# -----------------------------
class HostDocument:
    """Document-level state for one browser session.

    Holds the background scroll-lock flag and the global key listeners, and
    renders them as a script for the parent page so the browser matches.
    """

    def __init__(self):
        self.scroll_locked = False
        self._listeners: Dict[str, List[Callable[[], None]]] = {}

    def add_key_listener(self, key: str, handler: Callable[[], None]) -> None:
        self._listeners.setdefault(key, []).append(handler)

    def remove_key_listener(self, key: str, handler: Callable[[], None]) -> None:
        handlers = self._listeners.get(key, [])
        if handler in handlers:
            handlers.remove(handler)
        if not handlers:
            self._listeners.pop(key, None)

    def key_listeners(self, key: str) -> Tuple[Callable[[], None], ...]:
        return tuple(self._listeners.get(key, ()))

    def press_key(self, key: str) -> None:
        # handlers may detach themselves while running
        for handler in self.key_listeners(key):
            handler()

    def browser_script(self, close_button_key: str) -> str:
        locked = "true" if self.scroll_locked else "false"
        listen = "true" if self.key_listeners(ESCAPE) else "false"
        return f"""
<script>
(function(){{
  const win = window.parent;
  const doc = win.document;
  const locked = {locked};
  const listen = {listen};
  const scrollers = [
    doc.body,
    doc.querySelector('section[data-testid="stMain"]'),
    doc.querySelector('section.main'),
    doc.querySelector('div[data-testid="stAppViewContainer"]')
  ];
  scrollers.forEach(el => {{ if (el) el.style.overflow = locked ? 'hidden' : ''; }});
  if (win.__focusEscape) {{
    doc.removeEventListener('keydown', win.__focusEscape);
    win.__focusEscape = null;
  }}
  if (listen) {{
    win.__focusEscape = function(e){{
      if (e.key !== '{ESCAPE}') return;
      const btn = doc.querySelector('.st-key-{close_button_key} button');
      if (btn) btn.click();
    }};
    doc.addEventListener('keydown', win.__focusEscape);
  }}
}})();
</script>
"""


# -----------------------------
# Focus overlay
# -----------------------------
class FocusOverlay:
    def __init__(self, document: HostDocument, on_close: Callable[[], None]):
        self._document = document
        self._on_close = on_close
        self._record: Optional[ProjectRecord] = None
        self._stack: Optional[ExitStack] = None

    @property
    def record(self) -> Optional[ProjectRecord]:
        return self._record

    @property
    def visible(self) -> bool:
        return self._record is not None

    @contextmanager
    def mounted(self) -> Iterator[FocusOverlay]:
        """Hold the scroll lock and Escape listener; released on every exit path."""
        self._document.add_key_listener(ESCAPE, self._on_escape)
        self._document.scroll_locked = True
        log.debug("focus overlay mounted")
        try:
            yield self
        finally:
            self._document.remove_key_listener(ESCAPE, self._on_escape)
            self._document.scroll_locked = False
            log.debug("focus overlay unmounted")

    def show(self, selection: Selection) -> None:
        record = selected_record(selection)
        if record is None:
            self.close()
            return
        if self._stack is None:
            stack = ExitStack()
            stack.enter_context(self.mounted())
            self._stack = stack
        self._record = record

    def dismiss(self) -> None:
        if not self.visible:
            return
        self._on_close()

    def close(self) -> None:
        self._record = None
        stack, self._stack = self._stack, None
        if stack is not None:
            stack.close()

    def _on_escape(self) -> None:
        self.dismiss()
