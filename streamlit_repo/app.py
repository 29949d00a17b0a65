# app.py — Home (single scroll) + system focus overlay
# ----------------------------------------------------------------
# Sections, top to bottom: Opening → Principles → Systems → Direction → Footer.
# Clicking a system card selects it; the focus overlay covers the page until
# it is closed (button or Escape).
# ----------------------------------------------------------------

from __future__ import annotations

import streamlit as st
from streamlit.components.v1 import html as st_html

from portfolio.page import PageController
from portfolio.settings import CONTROLLER_KEY, PAGE_ICON, PAGE_TITLE, configure_logging
from portfolio.views import render_focus, render_home, render_sidebar

configure_logging()

# -----------------------------
# Page config + CSS
# -----------------------------
st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
/* Opening: full-height, centered statement */
.opening {
  min-height: 80vh;
  display: flex;
  flex-direction: column;
  justify-content: center;
  align-items: center;
  text-align: center;
}

.hero {
  font-family: Georgia, "Times New Roman", serif;
  font-weight: 400;
  line-height: 1.3;
  letter-spacing: -.01em;
  font-size: clamp(30px, 4.2vw, 60px);
  max-width: 56rem;
  margin: 0 auto 3rem;
}

.hero-owner { font-size: 1.1rem; font-weight: 500; letter-spacing: .05em; opacity: .9; }
.hero-role  { font-size: .95rem; font-weight: 300; letter-spacing: .12em; text-transform: uppercase; opacity: .6; }

.section { scroll-margin-top: 80px; }

.section-title {
  margin: 8rem 0 4rem;
  font-size: .85rem;
  font-weight: 300;
  letter-spacing: .3em;
  text-transform: uppercase;
  text-align: center;
  opacity: .6;
}

/* Principles: title | description */
.principle {
  display: grid;
  grid-template-columns: 1fr 2fr;
  gap: 3rem;
  align-items: baseline;
  max-width: 56rem;
  margin: 0 auto 5rem;
}
.principle h3 { font-family: Georgia, serif; font-weight: 400; font-size: 1.5rem; margin: 0; }
.principle p  { font-weight: 300; font-size: 1.1rem; line-height: 1.6; opacity: .7; margin: 0; }

/* Systems gallery cards */
.system-card {
  border: 1px solid rgba(255,255,255,.12);
  padding: 2.5rem 2rem;
  min-height: 240px;
  display: flex;
  flex-direction: column;
  justify-content: space-between;
  transition: background .5s ease-out;
}
.system-card:hover { background: #1a1a1a; }
.system-title   { font-family: Georgia, serif; font-weight: 400; font-size: 1.5rem; line-height: 1.3; }
.system-tagline { font-size: .9rem; font-weight: 300; line-height: 1.6; opacity: .65; }

/* Direction */
.direction { text-align: center; max-width: 48rem; margin: 0 auto 8rem; }
.direction p {
  font-family: Georgia, serif;
  font-size: clamp(22px, 2.6vw, 36px);
  line-height: 1.6;
  opacity: .8;
  transition: opacity .7s;
}
.direction p:hover { opacity: 1; }

.site-footer {
  padding: 3rem 0;
  text-align: center;
  font-size: .75rem;
  letter-spacing: .2em;
  text-transform: uppercase;
  opacity: .55;
  border-top: 1px solid rgba(255,255,255,.08);
}

/* Focus overlay content */
.focus-header h2  { font-family: Georgia, serif; font-weight: 400; font-size: clamp(32px, 4vw, 48px); line-height: 1.2; }
.focus-tagline    { font-size: 1.2rem; font-weight: 300; letter-spacing: .02em; opacity: .7; }
.focus-link       { font-size: .9rem; font-weight: 300; opacity: .6; text-underline-offset: 4px; }
.focus-link:hover { opacity: 1; }
.focus-rule       { height: 1px; background: rgba(255,255,255,.1); margin: 3rem 0; }
.focus-section    { margin-bottom: 4rem; }
.focus-section h4 { font-size: .85rem; font-weight: 500; letter-spacing: .2em; text-transform: uppercase; opacity: .6; }
.focus-section p  { font-size: 1.1rem; font-weight: 300; line-height: 1.7; opacity: .9; }
.focus-structure  { list-style: none; padding: 0; }
.focus-structure li { padding-left: 1.25rem; margin-bottom: 1.25rem; border-left: 1px solid rgba(255,255,255,.1); }
</style>
""", unsafe_allow_html=True)


# -----------------------------
# Helpers
# -----------------------------
def get_controller() -> PageController:
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = PageController()
    return st.session_state[CONTROLLER_KEY]

def disable_scroll_restoration():
    st_html("""<script>try { window.parent.history.scrollRestoration = 'manual'; } catch(e) {}</script>""", height=0)


# -----------------------------
# Dispatch
# -----------------------------
controller = get_controller()
disable_scroll_restoration()
render_sidebar(controller)
render_home(controller)
render_focus(controller)
