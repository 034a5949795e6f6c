"""
ui_helpers.py
=============
Stateless presentation helpers shared by the CLI and the Streamlit UI.

These functions carry no game state of their own — they receive all
required data as arguments, so they can be imported and tested without a
terminal or a live Streamlit session.

Contains:
  - banner()            : framed title block
  - format_clue_list()  : "- clue" lines for the clue notebook
  - format_path()       : "Hall → Biblioteca → Jardim"
  - verdict_style()     : icon / colour pair for a verdict
  - build_css()         : returns the candlelit-manor CSS string
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from config import GAME_CONFIG
from models import Verdict


def banner(subtitle: str = "", width: int = GAME_CONFIG.rule_width) -> str:
    """Framed title block, e.g. for the start and end screens."""
    rule  = "=" * width
    lines = [rule, f"   {GAME_CONFIG.title}"]
    if subtitle:
        lines.append(f"   {subtitle}")
    lines.append(rule)
    return "\n".join(lines)


def format_clue_list(clues: Iterable[str]) -> str:
    """
    One "- clue" line per clue, or a placeholder when there are none.

    Example:
        >>> format_clue_list(["A", "B"])
        '- A\\n- B'
    """
    lines: List[str] = [f"- {c}" for c in clues]
    return "\n".join(lines) if lines else "(no clues collected)"


def format_path(rooms: Iterable[str]) -> str:
    return " → ".join(rooms) or "(nowhere yet)"


# ---------------------------------------------------------------------------
# Verdict styling
# ---------------------------------------------------------------------------

CANDLE     = "#e0a84a"
PARCHMENT  = "#efe2c4"
WALNUT     = "#1c140d"
OXBLOOD    = "#a23b2a"
IVY        = "#6f8f3a"
ASH        = "#8a7f6d"

_VERDICT_STYLES = {
    Verdict.CONFIRMED: ("⚖️", IVY),
    Verdict.WEAK:      ("❔", CANDLE),
    Verdict.UNFOUNDED: ("❌", OXBLOOD),
}


def verdict_style(verdict: Optional[Verdict]) -> Tuple[str, str]:
    """(icon, css colour) for a verdict; None means an abandoned accusation."""
    if verdict is None:
        return ("🚪", ASH)
    return _VERDICT_STYLES[verdict]


# ---------------------------------------------------------------------------
# Candlelit-manor CSS
# ---------------------------------------------------------------------------

def build_css() -> str:
    """
    CSS for the Streamlit UI: a walnut-panelled mansion lit by candlelight.

    Styles the room card and its screen, the direction buttons (keyed
    go_left / go_right / go_exit), the notebook page that lists collected
    clues, and the verdict banner. Returned without <style> tags.
    """
    return f"""
    @import url('https://fonts.googleapis.com/css2?family=IM+Fell+English+SC&family=Cutive+Mono&display=swap');

    .stApp {{
        background: radial-gradient(circle at 50% 0%, #3a2817 0%, {WALNUT} 55%, #100b07 100%) !important;
        color: {PARCHMENT};
    }}
    section[data-testid="stSidebar"] > div {{
        background: #140e09 !important;
        border-right: 3px double #5a4128;
    }}

    .main-header {{
        text-align: center; color: {CANDLE};
        font-family: 'IM Fell English SC', serif; letter-spacing: 4px;
        text-shadow: 0 0 12px rgba(224,168,74,0.45);
    }}
    .sub-header {{
        text-align: center; color: {ASH};
        font-family: 'Cutive Mono', monospace;
    }}
    .sidebar-header {{
        color: {CANDLE}; font-family: 'IM Fell English SC', serif;
        letter-spacing: 3px; border-bottom: 1px dotted #5a4128; padding: 6px 0;
    }}

    /* Room view: a door frame around the console screen */
    .room-card {{
        background: #241a10; border: 2px solid #5a4128; border-radius: 14px 14px 2px 2px;
        padding: 14px 22px; margin-bottom: 8px;
        box-shadow: inset 0 0 24px rgba(0,0,0,0.6), 0 0 18px rgba(224,168,74,0.12);
    }}
    .room-card h3 {{
        margin: 0 0 8px 0; color: {CANDLE};
        font-family: 'IM Fell English SC', serif;
    }}
    .room-screen {{
        margin: 0; white-space: pre-wrap; color: {PARCHMENT};
        font-family: 'Cutive Mono', monospace; font-size: 15px;
    }}

    /* Direction buttons */
    .st-key-go_left button, .st-key-go_right button {{
        background: #2e2114; color: {PARCHMENT}; border: 1px solid #7a5a34;
        font-family: 'IM Fell English SC', serif; min-height: 56px;
    }}
    .st-key-go_left button:hover, .st-key-go_right button:hover {{
        border-color: {CANDLE}; color: {CANDLE};
    }}
    .st-key-go_exit button {{
        background: transparent; color: {ASH}; border: 1px dashed {ASH};
        font-family: 'IM Fell English SC', serif; min-height: 56px;
    }}

    /* Notebook page: ruled paper in the detective's hand */
    .notebook-page {{
        background: repeating-linear-gradient({PARCHMENT} 0 27px, #c9b48c 27px 28px);
        color: #2b1d10; border-left: 4px solid {OXBLOOD};
        padding: 4px 18px; line-height: 28px; min-height: 112px;
        font-family: 'Cutive Mono', monospace;
    }}

    .verdict-display {{
        text-align: center; font-size: 40px;
        font-family: 'IM Fell English SC', serif; letter-spacing: 6px;
        border-top: 1px solid #5a4128; border-bottom: 1px solid #5a4128; padding: 10px 0;
    }}

    .stTextInput input {{
        background: #241a10 !important; color: {PARCHMENT} !important;
        border: 1px solid #7a5a34 !important; font-family: 'Cutive Mono', monospace;
    }}
    .stButton > button[kind="primary"], .stFormSubmitButton > button {{
        background: {OXBLOOD}; color: {PARCHMENT}; border: none;
        font-family: 'IM Fell English SC', serif; letter-spacing: 2px;
    }}
"""
