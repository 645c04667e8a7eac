"""
Terminal canvas for Macro Tracker.
Low-level drawing over a rich Console: cursor addressing, text placement,
box drawing and buffered flushing.
"""

from contextlib import contextmanager
from typing import Optional, Tuple

from rich import box
from rich.console import Console
from rich.control import Control


class Canvas:
    """A character-cell drawing surface.

    Coordinates are zero-based (x = column, y = row). The canvas keeps track
    of where the terminal cursor is after each move or write, counting
    characters rather than bytes.
    """

    def __init__(self, console: Optional[Console] = None, frame_box: box.Box = box.SQUARE):
        self.console = console or Console(highlight=False)
        self.box = frame_box
        self.columns, self.rows = self.console.size
        self.cursor: Tuple[int, int] = (0, 0)
        self.cursor_visible = True

    def size(self) -> Tuple[int, int]:
        return self.columns, self.rows

    def resize(self, columns: int, rows: int):
        self.columns = columns
        self.rows = rows

    # ============== Cursor and Text ==============

    def move_to(self, x: int, y: int):
        x, y = max(x, 0), max(y, 0)
        self.console.control(Control.move_to(x, y))
        self.cursor = (x, y)

    def write_text(self, text: str, style: Optional[str] = None) -> int:
        """Write text at the cursor and return the number of characters written."""
        self.console.out(text, end="", style=style, highlight=False)
        written = len(text)
        x, y = self.cursor
        self.cursor = (x + written, y)
        return written

    def put(self, x: int, y: int, text: str, style: Optional[str] = None) -> int:
        self.move_to(x, y)
        return self.write_text(text, style)

    def show_cursor(self, show: bool = True):
        self.console.control(Control.show_cursor(show))
        self.cursor_visible = show

    def clear(self):
        self.console.control(Control.clear(), Control.home())
        self.cursor = (0, 0)

    # ============== Shapes ==============

    def draw_rect(self, x1: int, y1: int, x2: int, y2: int):
        """Draw a rectangle with (x1, y1) top left and (x2, y2) bottom right."""
        inner = max(x2 - x1 - 1, 0)
        self.put(x1, y1, self.box.top_left + self.box.top * inner + self.box.top_right)
        for y in range(y1 + 1, y2):
            self.put(x1, y, self.box.mid_left)
            self.put(x2, y, self.box.mid_right)
        self.put(x1, y2, self.box.bottom_left + self.box.bottom * inner + self.box.bottom_right)

    # ============== Buffering ==============

    @contextmanager
    def frame(self):
        """Buffer everything drawn inside the block and flush it once."""
        with self.console:
            yield self
        self.flush()

    def flush(self):
        self.console.file.flush()

    # ============== Screen Lifecycle ==============

    def enter(self):
        """Switch to the alternate screen and hide the cursor."""
        with self.frame():
            self.console.set_alt_screen(True)
            self.show_cursor(False)

    def restore(self):
        """Clear, leave the alternate screen and show the cursor again."""
        with self.frame():
            self.clear()
            self.console.set_alt_screen(False)
            self.show_cursor(True)
