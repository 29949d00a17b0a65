# portfolio/page.py — page controller (selection owner + in-page navigation)
# ---------------------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Dict, Optional

from portfolio.content import ProjectRecord
from portfolio.focus import NOTHING, FocusOverlay, HostDocument, Selected, Selection, selected_record
from portfolio.settings import SECTION_IDS

log = logging.getLogger(__name__)


class PageController:
    """Owns the single selection slot and hands it to the focus overlay.

    Lives in ``st.session_state`` so it survives reruns; the renderer reads
    the one-shot scroll / exit-fade requests it queues.
    """

    def __init__(self, sections: Optional[Dict[str, str]] = None, document: Optional[HostDocument] = None):
        self._sections = dict(SECTION_IDS if sections is None else sections)
        self.document = document if document is not None else HostDocument()
        self.overlay = FocusOverlay(self.document, on_close=self.clear_selection)
        self._selection: Selection = NOTHING
        self._pending_scroll: Optional[str] = None
        self._scroll_requests = 0
        self._exit_fade: Optional[ProjectRecord] = None

    def __enter__(self) -> PageController:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # --- selection ---
    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def active_record(self) -> Optional[ProjectRecord]:
        return selected_record(self._selection)

    @property
    def overlay_visible(self) -> bool:
        return self.overlay.visible

    def select_project(self, record: ProjectRecord) -> None:
        self._selection = Selected(record)
        self._exit_fade = None
        self.overlay.show(self._selection)
        log.debug("selected project %s", record.id)

    def clear_selection(self) -> None:
        record = self.active_record
        if record is None:
            return
        self._selection = NOTHING
        self._exit_fade = record
        self.overlay.show(self._selection)
        log.debug("cleared selection (was %s)", record.id)

    # --- navigation ---
    def scroll_to_section(self, section_id: str) -> bool:
        anchor = self._sections.get(section_id)
        if anchor is None:
            return False
        self._pending_scroll = anchor
        self._scroll_requests += 1
        return True

    @property
    def scroll_requests(self) -> int:
        """Count of accepted scroll requests; tags each emitted scroll script."""
        return self._scroll_requests

    def consume_scroll(self) -> Optional[str]:
        anchor, self._pending_scroll = self._pending_scroll, None
        return anchor

    def consume_exit_fade(self) -> Optional[ProjectRecord]:
        record, self._exit_fade = self._exit_fade, None
        return record

    def close(self) -> None:
        self._selection = NOTHING
        self._exit_fade = None
        self.overlay.close()
