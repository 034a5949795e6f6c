"""
cli.py
======
Command-line interface for Detective Quest: The Mansion Clues.

Provides the terminal game loop. All game logic is delegated to
DetectiveQuestGame; this module only handles arguments, logging setup,
I/O and the process exit status.

Usage:
    python cli.py [--level {novice,adventurer,master}] [--layout FILE]
                  [--log-level LEVEL] [--no-clear]

Commands during exploration:
    left  (l, e)   — go to the room on the left
    right (r, d)   — go to the room on the right
    exit  (q, s)   — stop exploring

Exit status:
    0   normal completion
    1   the mansion could not be built (bad layout, allocation failure)
    130 interrupted (Ctrl-C / end of input)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from accusation import verdict_message
from config import GameLevel, settings_from_env
from console import Console, TerminalConsole
from game_engine import DetectiveQuestGame
from mansion import load_layout
from models import FatalStructureError, LayoutError
from ui_helpers import banner, format_clue_list, format_path

logger = logging.getLogger("detective_quest.cli")

EXIT_OK          = 0
EXIT_FATAL       = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    settings = settings_from_env()
    parser = argparse.ArgumentParser(
        prog="detective-quest",
        description="Explore the mansion, collect clues and name the culprit.",
    )
    parser.add_argument(
        "--level",
        choices=[lvl.value for lvl in GameLevel],
        default=settings.level.value,
        help="game variant (default: %(default)s)",
    )
    parser.add_argument(
        "--layout",
        metavar="FILE",
        help="JSON mansion layout to explore instead of the built-in mansion",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="logging level for diagnostics on stderr (default: %(default)s)",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="never clear the terminal between rooms",
    )
    return parser


def play(game: DetectiveQuestGame, console: Console) -> None:
    """
    Run one full session: exploration, clue summary and (master) accusation.

    Console EOFError / KeyboardInterrupt propagate to the caller.
    """
    console.clear_screen()
    console.display_message(banner(f"Level: {game.level.value}"))
    console.display_message("")

    game.explore()

    console.clear_screen()
    console.display_message(banner("Path taken"))
    console.display_message(format_path(game.state.rooms_visited))

    if not game.level.collects_clues:
        console.display_message("\nExploration over. The clues stay where you left them.")
        return

    console.display_message("")
    console.display_message(banner("Collected clues (sorted)"))
    console.display_message(format_clue_list(game.collected_clues()))

    if not game.level.allows_accusation:
        console.display_message("\nExploration over. The mystery is almost solved!")
        return

    console.display_message("")
    console.display_message(banner("Accusation"))
    console.display_message("Suspects: " + ", ".join(game.suspects()))
    raw_name = console.read_line("Who do you accuse? (leave blank to walk away) > ")
    result = game.accuse(raw_name)

    console.display_message("")
    console.display_message(verdict_message(result))
    if result is not None and result.evidence:
        console.display_message("Supporting clues:")
        console.display_message(format_clue_list(result.evidence))


def run_cli(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Parse `argv` (default: sys.argv) and run the session; returns the exit status."""
    return run_session(build_parser().parse_args(argv), console)


def run_session(args: argparse.Namespace, console: Optional[Console] = None) -> int:
    """
    Build the session described by parsed arguments and play it.

    Returns:
        The process exit status.
    """
    console = console if console is not None else TerminalConsole(clear=not args.no_clear)

    try:
        layout = load_layout(args.layout) if args.layout else None
        game = DetectiveQuestGame(level=GameLevel(args.level), layout=layout, console=console)
    except (LayoutError, FatalStructureError) as exc:
        logger.critical("Cannot build the mansion: %s", exc)
        console.display_message(f"Error: {exc}")
        return EXIT_FATAL

    try:
        play(game, console)
    except (EOFError, KeyboardInterrupt):
        logger.info("Session interrupted by the player.")
        console.display_message("\nInvestigation interrupted.")
        return EXIT_INTERRUPTED
    except FatalStructureError as exc:
        logger.critical("Fatal structure error during play: %s", exc)
        console.display_message(f"Error: {exc}")
        return EXIT_FATAL

    return EXIT_OK


def main() -> None:
    # Configure logging at the entry point so every detective_quest.* logger
    # emits to stderr; swap the handler here to redirect logs elsewhere.
    load_dotenv()
    args = build_parser().parse_args()
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    sys.exit(run_session(args))


if __name__ == "__main__":
    main()
