"""
Scroll state and key bindings for the terminal reader.

The viewport is pure state: it knows how many lines the document has and
how many fit on screen, and keeps the first visible line within bounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Key(str, Enum):
    """Reader actions bound to keys."""

    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


# Key strings as returned by click.getchar(): POSIX escape sequences and
# the two-character Windows console codes.
KEYMAP: dict[str, Key] = {
    "q": Key.QUIT,
    "Q": Key.QUIT,
    "\x1b": Key.QUIT,
    "k": Key.UP,
    "\x1b[A": Key.UP,
    "\xe0H": Key.UP,
    "j": Key.DOWN,
    "\x1b[B": Key.DOWN,
    "\xe0P": Key.DOWN,
    "b": Key.PAGE_UP,
    "\x1b[5~": Key.PAGE_UP,
    "\xe0I": Key.PAGE_UP,
    " ": Key.PAGE_DOWN,
    "\x1b[6~": Key.PAGE_DOWN,
    "\xe0Q": Key.PAGE_DOWN,
    "g": Key.HOME,
    "\x1b[H": Key.HOME,
    "\x1b[1~": Key.HOME,
    "\x1bOH": Key.HOME,
    "\xe0G": Key.HOME,
    "G": Key.END,
    "\x1b[F": Key.END,
    "\x1b[4~": Key.END,
    "\x1bOF": Key.END,
    "\xe0O": Key.END,
}


@dataclass
class Viewport:
    """Window of ``height`` lines onto a document of ``total_lines`` lines."""

    total_lines: int
    height: int
    top: int = 0

    def __post_init__(self) -> None:
        if self.height < 1:
            raise ValueError(f"Viewport height must be at least 1, got {self.height}")
        self.top = self._clamp(self.top)

    @property
    def max_top(self) -> int:
        return max(0, self.total_lines - self.height)

    def _clamp(self, top: int) -> int:
        return min(max(top, 0), self.max_top)

    def scroll_up(self, lines: int = 1) -> None:
        self.top = self._clamp(self.top - lines)

    def scroll_down(self, lines: int = 1) -> None:
        self.top = self._clamp(self.top + lines)

    def page_up(self) -> None:
        self.scroll_up(self.height)

    def page_down(self) -> None:
        self.scroll_down(self.height)

    def home(self) -> None:
        self.top = 0

    def end(self) -> None:
        self.top = self.max_top

    def visible_range(self) -> tuple[int, int]:
        """Return the half-open ``(first, last)`` line indices on screen."""
        return self.top, min(self.total_lines, self.top + self.height)


def apply_key(viewport: Viewport, key: str) -> bool:
    """
    Apply a key press to the viewport.

    Unbound keys are ignored.

    Returns:
        False if the key quits the reader, True otherwise
    """
    action = KEYMAP.get(key)
    if action is None:
        return True
    if action == Key.QUIT:
        return False

    if action == Key.UP:
        viewport.scroll_up()
    elif action == Key.DOWN:
        viewport.scroll_down()
    elif action == Key.PAGE_UP:
        viewport.page_up()
    elif action == Key.PAGE_DOWN:
        viewport.page_down()
    elif action == Key.HOME:
        viewport.home()
    elif action == Key.END:
        viewport.end()
    return True
