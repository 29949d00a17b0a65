# portfolio/views.py — Streamlit rendering for the single-scroll page + focus overlay
# ------------------------------------------------------------------------------------

from __future__ import annotations
import datetime
import json
from html import escape
from typing import Optional, Sequence

import streamlit as st
from streamlit.components.v1 import html as st_html

from portfolio.content import (
    DIRECTION_LINES, HERO_LINES, OWNER_ROLE, PRINCIPLES, SITE_OWNER,
    Principle, ProjectRecord, iter_projects,
)
from portfolio.page import PageController
from portfolio.settings import (
    CLOSE_BUTTON_KEY, EXIT_FADE_KEY, FADE_EASE, FADE_SECONDS, OVERLAY_KEY,
    SECTION_IDS, SECTION_ORDER, SHOW_SCROLL_HINT,
)


# -----------------------------
# HTML builders
# -----------------------------
def hero_html() -> str:
    lines = "<br/>".join(escape(line) for line in HERO_LINES)
    return (
        f"<h1 class='hero'>{lines}</h1>"
        f"<div class='hero-owner'>{escape(SITE_OWNER)}</div>"
        f"<div class='hero-role'>{escape(OWNER_ROLE)}</div>"
    )


def principle_html(index: int, principle: Principle) -> str:
    return (
        "<div class='principle'>"
        f"<h3>{index}. {escape(principle.title)}</h3>"
        f"<p>{escape(principle.description)}</p>"
        "</div>"
    )


def card_html(record: ProjectRecord) -> str:
    return (
        "<div class='system-card'>"
        f"<h3 class='system-title'>{escape(record.title)}</h3>"
        f"<p class='system-tagline'>{escape(record.tagline)}</p>"
        "</div>"
    )


def external_link_html(record: ProjectRecord) -> str:
    if not record.external_link:
        return ""
    return (
        f"<a class='focus-link' href='{escape(record.external_link, quote=True)}' "
        "target='_blank' rel='noopener noreferrer'>View on GitHub</a>"
    )


def focus_header_html(record: ProjectRecord) -> str:
    return (
        "<header class='focus-header'>"
        f"<h2>{escape(record.title)}</h2>"
        f"<p class='focus-tagline'>{escape(record.tagline)}</p>"
        f"{external_link_html(record)}"
        "</header><div class='focus-rule'></div>"
    )


def structure_html(notes: Sequence[str]) -> str:
    if not notes:
        return ""
    items = "".join(f"<li>{escape(n)}</li>" for n in notes)
    return f"<ul class='focus-structure'>{items}</ul>"


def focus_body_html(record: ProjectRecord) -> str:
    return (
        "<section class='focus-section'><h4>What it does</h4>"
        f"<p>{escape(record.description)}</p></section>"
        "<section class='focus-section'><h4>How it is structured</h4>"
        f"{structure_html(record.structure_notes)}</section>"
        "<section class='focus-section'><h4>What it taught me</h4>"
        f"<p>{escape(record.lesson)}</p></section>"
    )


def footer_html(year: Optional[int] = None) -> str:
    if year is None:
        year = datetime.date.today().year
    return f"<footer class='site-footer'>© {year} {escape(SITE_OWNER)}</footer>"


def overlay_css() -> str:
    fade = f"{FADE_SECONDS}s {FADE_EASE}"
    return f"""
<style>
.st-key-{OVERLAY_KEY}, .st-key-{EXIT_FADE_KEY} {{
  position: fixed;
  inset: 0;
  z-index: 1000100;              /* above the Streamlit header */
  background: #1f1f1f;
  overflow-y: auto;
  padding: 6rem max(1.5rem, calc((100vw - 42rem) / 2));
}}
.st-key-{OVERLAY_KEY} {{ animation: focus-fade-in {fade} both; }}
.st-key-{EXIT_FADE_KEY} {{ animation: focus-fade-out {fade} forwards; pointer-events: none; }}
@keyframes focus-fade-in  {{ from {{ opacity: 0; }} to {{ opacity: 1; }} }}
@keyframes focus-fade-out {{ from {{ opacity: 1; }} to {{ opacity: 0; visibility: hidden; }} }}
.st-key-{CLOSE_BUTTON_KEY} {{ position: fixed; top: 2rem; right: 3rem; width: auto !important; }}
</style>
"""


# -----------------------------
# Scroll helper
# -----------------------------
def scroll_script(anchor_id: str, request: int) -> str:
    # request number keeps repeat jumps to the same anchor from reusing the old iframe
    return f"""
<script>
(function(){{
  const request = {int(request)};
  const root = window.parent.document;
  const targetId = {json.dumps(anchor_id)};
  function scrollNow() {{
    const el = root.getElementById(targetId);
    if (!el) return false;
    el.scrollIntoView({{behavior:'smooth', block:'start'}});
    return true;
  }}
  if (!scrollNow()) {{
    const obs = new MutationObserver(() => {{ if (scrollNow()) obs.disconnect(); }});
    obs.observe(root, {{childList:true, subtree:true}});
    setTimeout(() => obs.disconnect(), 2000);
  }}
}})();
</script>
"""


def js_scroll_to_anchor(anchor_id: str, request: int):
    st_html(scroll_script(anchor_id, request), height=0)


def landmark(section: str):
    st.markdown(f"<div id='{SECTION_IDS[section]}' class='section'></div>", unsafe_allow_html=True)


# -----------------------------
# Sidebar
# -----------------------------
def render_sidebar(controller: PageController):
    if st.sidebar.button(SITE_OWNER, key="nav_opening", width="stretch"):
        controller.scroll_to_section("opening"); st.rerun()
    st.sidebar.markdown("---")
    for section in ("principles", "systems", "direction"):
        if st.sidebar.button(section.title(), key=f"nav_{section}", width="stretch"):
            controller.scroll_to_section(section); st.rerun()


# -----------------------------
# Sections
# -----------------------------
def render_opening(controller: PageController):
    landmark("opening")
    st.markdown(f"<div class='opening'>{hero_html()}</div>", unsafe_allow_html=True)
    if SHOW_SCROLL_HINT:
        if st.button("↓", key="scroll_hint", help="Principles"):
            controller.scroll_to_section("principles"); st.rerun()


def render_principles():
    landmark("principles")
    st.markdown('<div class="section-title">Principles</div>', unsafe_allow_html=True)
    for i, principle in enumerate(PRINCIPLES, start=1):
        st.markdown(principle_html(i, principle), unsafe_allow_html=True)


def render_systems(controller: PageController):
    landmark("systems")
    st.markdown('<div class="section-title">Systems</div>', unsafe_allow_html=True)
    cols = st.columns(3)
    for i, record in enumerate(iter_projects()):
        with cols[i % 3]:
            st.markdown(card_html(record), unsafe_allow_html=True)
            if st.button("View system", key=f"open_{record.id}", width="stretch"):
                controller.select_project(record); st.rerun()


def render_direction():
    landmark("direction")
    st.markdown('<div class="section-title">Direction</div>', unsafe_allow_html=True)
    lines = "".join(f"<p>{escape(line)}</p>" for line in DIRECTION_LINES)
    st.markdown(f"<div class='direction'>{lines}</div>", unsafe_allow_html=True)


def render_home(controller: PageController):
    jump_id = controller.consume_scroll()
    if jump_id: js_scroll_to_anchor(jump_id, controller.scroll_requests)

    renderers = {
        "opening": lambda: render_opening(controller),
        "principles": render_principles,
        "systems": lambda: render_systems(controller),
        "direction": render_direction,
        "footer": lambda: st.markdown(footer_html(), unsafe_allow_html=True),
    }
    for section in SECTION_ORDER:
        renderers[section]()


# -----------------------------
# Focus overlay
# -----------------------------
def render_focus(controller: PageController):
    st.markdown(overlay_css(), unsafe_allow_html=True)
    record = controller.active_record
    closed = controller.consume_exit_fade()

    if record is not None:
        with st.container(key=OVERLAY_KEY):
            if st.button("Close ✕", key=CLOSE_BUTTON_KEY):
                controller.overlay.dismiss(); st.rerun()
            st.markdown(focus_header_html(record), unsafe_allow_html=True)
            st.markdown(focus_body_html(record), unsafe_allow_html=True)
    elif closed is not None:
        # non-interactive copy, rendered once for the exit fade
        with st.container(key=EXIT_FADE_KEY):
            st.markdown(focus_header_html(closed) + focus_body_html(closed), unsafe_allow_html=True)

    st_html(controller.document.browser_script(CLOSE_BUTTON_KEY), height=0)
