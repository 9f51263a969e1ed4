"""
Single-line terminal progress display for a scan.

The line shows finished codes colored by outcome, the code in flight, and the
codes still waiting. It is redrawn in place; when the visible text no longer
fits the terminal it has wrapped onto a second row, so the redraw moves the
cursor up one row first.
"""

import os
import sys
from typing import Callable, List, Optional, TextIO

from .models import CodeStatus, ScanState
from .utils import strip_ansi


GREEN = "\033[0;32m"
RED = "\033[0;31m"
BLUE = "\033[0;34m"
BLUE_BLINK = "\033[5;34m"
RESET = "\033[0m"

CARRIAGE_RETURN = "\r"
CURSOR_UP = "\033[A"
INDENT = "  "


def terminal_width(stream: TextIO) -> Optional[int]:
    """
    Query the column width of the terminal behind a stream.

    Returns:
        Column count, or None if the stream is not a terminal or reports no width
    """
    try:
        if not stream.isatty():
            return None
        # Some PTYs report 0 columns before their first resize
        return os.get_terminal_size(stream.fileno()).columns or None
    except (AttributeError, ValueError, OSError):
        return None


class ProgressRenderer:
    """Draws the scan progress line to a stream (stdout by default)."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        color: bool = True,
        width_provider: Optional[Callable[[], Optional[int]]] = None
    ):
        """
        Args:
            stream: Output stream, defaults to sys.stdout at render time
            color: Emit ANSI colors around labels
            width_provider: Returns the terminal width or None; defaults to
                querying the stream
        """
        self._stream = stream
        self.color = color
        self._width_provider = width_provider

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _paint(self, text: str, color: str) -> str:
        if not self.color or not text:
            return text
        return f"{color}{text}{RESET}"

    def compose(self, state: ScanState) -> str:
        """Build the progress line for the current state, without cursor control."""
        parts: List[str] = []
        for result in state.results:
            color = GREEN if result.status == CodeStatus.SUCCESS else RED
            parts.append(self._paint(result.code, color))

        if state.in_flight:
            parts.append(self._paint(state.current_code, BLUE_BLINK))

        if state.remaining:
            parts.append(self._paint(", ".join(state.remaining), BLUE))

        return ", ".join(parts)

    def prefix_for(self, line: str) -> str:
        """
        Pick the cursor control that precedes a redraw of a line.

        Width is measured on the visible text only; escape sequences take no
        columns. An unknown width is treated as fitting.
        """
        width = self._width_provider() if self._width_provider else terminal_width(self.stream)
        visible = len(strip_ansi(line))
        if width is not None and visible >= width:
            return CARRIAGE_RETURN + CURSOR_UP
        return CARRIAGE_RETURN

    def start(self):
        print("Searching these area codes or patterns:", file=self.stream)

    def render(self, state: ScanState) -> str:
        """
        Redraw the progress line for a state.

        Returns:
            Exactly what was written to the stream
        """
        line = self.compose(state)
        output = f"{self.prefix_for(line)}{INDENT}{line}"
        self.stream.write(output)
        self.stream.flush()
        return output

    def finish(self):
        print("\n", file=self.stream)
