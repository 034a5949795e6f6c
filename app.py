"""
app.py
======
Streamlit web UI for Detective Quest: The Mansion Clues.

Responsibilities:
  - Configure and render the Streamlit page (layout, dark-noir theme).
  - Manage session state initialisation and reset.
  - Render sidebar components (level selector, path, clue notebook, map).
  - Render main-panel components (current room, direction buttons,
    accusation form, verdict).

The exploration engine is driven one command per button click through a
BufferedConsole; this file contains only UI logic.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import html
import logging

import streamlit as st
from dotenv import load_dotenv

# Load .env before any game code runs so the level / log settings apply.
load_dotenv()

from config import GameLevel, settings_from_env

SETTINGS = settings_from_env()

# basicConfig runs once per process regardless of how many times Streamlit
# reruns the script; every detective_quest.* logger inherits the handler.
logging.basicConfig(
    level=getattr(logging, SETTINGS.log_level, logging.WARNING),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("detective_quest.app")

from accusation import verdict_message
from console import BufferedConsole
from game_engine import DetectiveQuestGame
from mansion import render_map
from ui_helpers import build_css, format_clue_list, format_path, verdict_style


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(
    page_title="Detective Quest",
    page_icon="🔍",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)


# ============================================================
# SESSION STATE
# ============================================================

def _new_game(level: GameLevel) -> DetectiveQuestGame:
    game = DetectiveQuestGame(level=level, console=BufferedConsole())
    game.begin_exploration()
    return game


def init_session_state() -> None:
    """Initialise all Streamlit session state variables on first run."""
    defaults: dict = {
        "level":             SETTINGS.level,
        "game":              None,
        "accusation_done":   False,
        "accusation_result": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value
    if st.session_state.game is None:
        st.session_state.game = _new_game(st.session_state.level)


def reset_game(level: GameLevel) -> None:
    """Start a brand-new session at `level`."""
    logger.info("New case requested at level %s.", level.value)
    st.session_state.level             = level
    st.session_state.game              = _new_game(level)
    st.session_state.accusation_done   = False
    st.session_state.accusation_result = None


# ============================================================
# SIDEBAR COMPONENTS
# ============================================================

def render_sidebar() -> None:
    game = st.session_state.game

    st.sidebar.markdown('<div class="sidebar-header">🎚️ LEVEL</div>', unsafe_allow_html=True)
    levels = list(GameLevel)
    chosen = st.sidebar.radio(
        "Game level",
        options=levels,
        index=levels.index(st.session_state.level),
        format_func=lambda lvl: lvl.value.title(),
        label_visibility="collapsed",
    )
    if chosen is not st.session_state.level:
        reset_game(chosen)
        st.rerun()

    st.sidebar.markdown("---")
    st.sidebar.markdown('<div class="sidebar-header">👣 PATH</div>', unsafe_allow_html=True)
    st.sidebar.markdown(format_path(game.state.rooms_visited))

    if game.level.collects_clues:
        st.sidebar.markdown("---")
        st.sidebar.markdown('<div class="sidebar-header">📝 NOTEBOOK</div>', unsafe_allow_html=True)
        st.sidebar.markdown(format_clue_list(game.collected_clues()))

    with st.sidebar.expander("🗺️ Mansion map", expanded=False):
        st.code(render_map(game.root), language=None)

    st.sidebar.markdown("---")
    if st.sidebar.button("🔄 NEW CASE", use_container_width=True):
        reset_game(st.session_state.level)
        st.rerun()


# ============================================================
# MAIN-PANEL COMPONENTS
# ============================================================

def render_room() -> None:
    """Show the console output for the current screen and the direction buttons."""
    game = st.session_state.game

    st.markdown(
        '<div class="room-card"><h3>🏚️ THE MANSION</h3>'
        f'<pre class="room-screen">{html.escape(game.console.screen())}</pre></div>',
        unsafe_allow_html=True,
    )

    if game.exploration_finished:
        return

    directions = game.engine.available_directions()
    labels = {"left": "⬅️ Left", "right": "➡️ Right", "exit": "🚪 Exit"}
    cols = st.columns(len(directions))
    for col, direction in zip(cols, directions):
        if col.button(labels[direction], key=f"go_{direction}", use_container_width=True):
            game.submit(direction)
            st.rerun()


def render_summary() -> None:
    game = st.session_state.game
    if not game.exploration_finished or not game.level.collects_clues:
        return

    st.markdown("---")
    st.markdown("### 🔎 Collected clues (sorted)")
    st.markdown(
        f'<div class="notebook-page">{"<br>".join(map(html.escape, game.collected_clues())) or "(no clues collected)"}</div>',
        unsafe_allow_html=True,
    )


def render_accusation_form() -> None:
    game = st.session_state.game
    if not game.exploration_finished or not game.level.allows_accusation:
        return

    st.markdown("---")
    st.markdown('<div class="main-header">⚖️ MAKE YOUR ACCUSATION</div>', unsafe_allow_html=True)

    if st.session_state.accusation_done:
        render_verdict()
        return

    st.caption("Suspects: " + ", ".join(game.suspects()))
    with st.form("accusation"):
        name = st.text_input("Who do you accuse? Leave blank to walk away.")
        submitted = st.form_submit_button("🔨 I ACCUSE…", type="primary")
    if submitted:
        st.session_state.accusation_result = game.accuse(name)
        st.session_state.accusation_done   = True
        st.rerun()


def render_verdict() -> None:
    result = st.session_state.accusation_result
    icon, colour = verdict_style(result.verdict if result else None)
    label = result.verdict.value.upper() if result else "ABANDONED"

    st.markdown(
        f'<div class="verdict-display" style="color:{colour};">{icon} {label}</div>',
        unsafe_allow_html=True,
    )
    st.markdown(verdict_message(result))
    if result is not None and result.evidence:
        st.markdown("**Supporting clues:**")
        st.markdown(format_clue_list(result.evidence))


# ============================================================
# MAIN
# ============================================================

def main() -> None:
    init_session_state()
    st.markdown('<h1 class="main-header">🔍 DETECTIVE QUEST</h1>', unsafe_allow_html=True)
    st.markdown('<p class="sub-header">Walk the mansion. Gather the clues. Name the culprit.</p>', unsafe_allow_html=True)

    render_sidebar()
    render_room()
    render_summary()
    render_accusation_form()


main()
