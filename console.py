"""
console.py
==========
Console I/O collaborators.

The exploration engine talks to the player only through the three methods
of the Console protocol, so the same engine drives the terminal, the
Streamlit page and the test suite.

Contains:
  Console          — the protocol
  TerminalConsole  — print / input / OS clear-screen
  BufferedConsole  — records output and serves queued input lines
"""

from __future__ import annotations

import os
import sys
from collections import deque
from typing import Iterable, List, Optional, Protocol


class Console(Protocol):
    def display_message(self, text: str) -> None: ...

    def read_line(self, prompt: str = "") -> str: ...

    def clear_screen(self) -> None: ...


class TerminalConsole:
    """
    Interactive terminal console.

    Args:
        clear: When False, clear_screen() is a no-op (handy when piping
               input or keeping scrollback while debugging).
    """

    def __init__(self, clear: bool = True) -> None:
        self.clear = clear

    def display_message(self, text: str) -> None:
        print(text)

    def read_line(self, prompt: str = "") -> str:
        return input(prompt)

    def clear_screen(self) -> None:
        if not self.clear or not sys.stdout.isatty():
            return
        os.system("cls" if os.name == "nt" else "clear")


class BufferedConsole:
    """
    In-memory console.

    Output accumulates in `messages`; `clear_screen()` moves it into
    `history` so a UI can show just the current screen. Input comes from a
    queue filled with `feed()`; reading past the end raises EOFError, the
    same way input() does at end of stream.
    """

    def __init__(self, lines: Optional[Iterable[str]] = None) -> None:
        self.messages: List[str] = []
        self.history:  List[str] = []
        self.prompts:  List[str] = []
        self.clears = 0
        self._pending = deque(lines or ())

    def feed(self, *lines: str) -> None:
        self._pending.extend(lines)

    def display_message(self, text: str) -> None:
        self.messages.append(text)

    def read_line(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._pending:
            raise EOFError("no more queued input")
        return self._pending.popleft()

    def clear_screen(self) -> None:
        self.clears += 1
        self.history.extend(self.messages)
        self.messages = []

    @property
    def transcript(self) -> List[str]:
        """Everything displayed so far, across clears."""
        return self.history + self.messages

    def screen(self) -> str:
        return "\n".join(self.messages)
