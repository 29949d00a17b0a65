"""Tests for HTML builders and the rendered app (via Streamlit's AppTest)."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from streamlit.testing.v1 import AppTest

from portfolio import views
from portfolio.content import PRINCIPLES, get_project
from portfolio.settings import CLOSE_BUTTON_KEY, CONTROLLER_KEY
from portfolio.views import (
    card_html,
    focus_body_html,
    focus_header_html,
    footer_html,
    principle_html,
    scroll_script,
    structure_html,
)

APP_PATH = str(Path(__file__).resolve().parent.parent / "streamlit_repo" / "app.py")


def test_focus_header_link_only_for_linked_record() -> None:
    keyforge = focus_header_html(get_project("keyforge"))
    assert "Keyforge Password Manager" in keyforge
    assert "View on GitHub" in keyforge
    assert "target='_blank'" in keyforge
    assert "rel='noopener noreferrer'" in keyforge

    metagrid = focus_header_html(get_project("metagrid"))
    assert "MetaGrid" in metagrid
    assert "View on GitHub" not in metagrid


def test_copy_is_escaped(bare_record) -> None:
    assert "Bare &lt;System&gt;" in focus_header_html(bare_record)
    assert "Tagline &amp; more" in card_html(bare_record)


def test_empty_structure_notes_render_nothing(bare_record) -> None:
    assert structure_html(()) == ""
    body = focus_body_html(bare_record)
    assert "<ul" not in body
    assert "What it taught me" in body


def test_structure_notes_render_in_order() -> None:
    html = structure_html(("first", "second", "third"))
    assert html.index("first") < html.index("second") < html.index("third")
    assert html.count("<li>") == 3


def test_principle_and_footer() -> None:
    assert principle_html(2, PRINCIPLES[1]).startswith("<div class='principle'><h3>2. Clarity")
    assert footer_html(2031) == "<footer class='site-footer'>© 2031 Gaurav Singh</footer>"


def test_scroll_script_targets_anchor_and_varies_per_request() -> None:
    first = scroll_script("direction", 1)
    again = scroll_script("direction", 2)
    assert 'const targetId = "direction";' in first
    assert "scrollIntoView" in first
    assert first != again
    assert '"a\\"b"' in scroll_script('a"b', 1)


# -----------------------------
# App
# -----------------------------
def _markdown_text(at: AppTest) -> str:
    return "\n".join(m.value for m in at.markdown)


def _scripts(at: AppTest) -> list[str]:
    return [el.proto.srcdoc for el in at.get("iframe")]


def _scroll_scripts(at: AppTest) -> list[str]:
    return [s for s in _scripts(at) if "scrollIntoView" in s]


@pytest.fixture
def app() -> AppTest:
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_app_renders_sections_in_order(app: AppTest) -> None:
    text = _markdown_text(app)
    positions = [
        text.index("id='opening'"),
        text.index("id='principles'"),
        text.index("id='systems'"),
        text.index("id='direction'"),
        text.index("<footer class='site-footer'>"),
    ]
    assert positions == sorted(positions)
    assert "Most software is built to function." in text
    controller = app.session_state[CONTROLLER_KEY]
    assert controller.active_record is None


def test_app_open_and_close_overlay(app: AppTest) -> None:
    app.button(key="open_keyforge").click().run()
    assert not app.exception
    controller = app.session_state[CONTROLLER_KEY]
    assert controller.active_record.id == "keyforge"
    assert controller.document.scroll_locked
    text = _markdown_text(app)
    assert "What it does" in text
    assert "View on GitHub" in text

    app.button(key="open_metagrid").click().run()
    text = _markdown_text(app)
    assert "<h2>MetaGrid</h2>" in text
    assert "View on GitHub" not in text

    app.button(key=CLOSE_BUTTON_KEY).click().run()
    assert not app.exception
    controller = app.session_state[CONTROLLER_KEY]
    assert controller.active_record is None
    assert not controller.document.scroll_locked
    assert CLOSE_BUTTON_KEY not in [b.key for b in app.button]


def test_app_sidebar_navigation_emits_scroll(app: AppTest) -> None:
    app.sidebar.button(key="nav_direction").click().run()
    assert not app.exception
    scrolls = _scroll_scripts(app)
    assert len(scrolls) == 1
    assert 'getElementById(targetId)' in scrolls[0]
    assert 'const targetId = "direction";' in scrolls[0]
    # the jump is consumed by the run that renders it
    assert app.session_state[CONTROLLER_KEY].consume_scroll() is None


def test_app_repeat_navigation_emits_fresh_script(app: AppTest) -> None:
    app.sidebar.button(key="nav_direction").click().run()
    first = _scroll_scripts(app)
    app.sidebar.button(key="nav_direction").click().run()
    second = _scroll_scripts(app)
    assert len(first) == len(second) == 1
    assert 'const targetId = "direction";' in second[0]
    assert first[0] != second[0]


def test_app_unknown_section_emits_no_scroll(app: AppTest) -> None:
    controller = app.session_state[CONTROLLER_KEY]
    assert controller.scroll_to_section("nonexistent") is False
    app.run()
    assert not app.exception
    assert _scroll_scripts(app) == []


def test_app_browser_script_tracks_overlay(app: AppTest) -> None:
    assert any("const locked = false;" in s for s in _scripts(app))

    app.button(key="open_studentos").click().run()
    opened = _scripts(app)
    assert any("const locked = true;" in s and "const listen = true;" in s for s in opened)

    app.button(key=CLOSE_BUTTON_KEY).click().run()
    closed = _scripts(app)
    assert any("const locked = false;" in s and "const listen = false;" in s for s in closed)
    assert not any("const locked = true;" in s for s in closed)


def test_render_home_follows_section_order(monkeypatch, controller) -> None:
    calls = []
    monkeypatch.setattr(views, "SECTION_ORDER", ("direction", "footer", "opening"))
    monkeypatch.setattr(views, "render_direction", lambda: calls.append("direction"))
    monkeypatch.setattr(views, "render_opening", lambda page: calls.append("opening"))
    monkeypatch.setattr(views, "st", SimpleNamespace(markdown=lambda *a, **k: calls.append("footer")))

    views.render_home(controller)
    assert calls == ["direction", "footer", "opening"]
