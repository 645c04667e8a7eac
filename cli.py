"""
CLI Interface module for Macro Tracker.
Owns the screens, turns keystrokes into state changes, and runs the
event loop.
"""

import logging
import sys
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from blessed import Terminal
from rich.console import Console

import catalog
from app_logging import configure_logging
from canvas import Canvas
from events import KeyCode, KeyEvent, ResizeEvent, read_events
from form import LABELS, FIELD_COUNT, FormBuffer, FormLayout, SubmissionResult, parse_submission
from logic import FoodRecord, MacroTotals, format_macro_ratio, format_totals

logger = logging.getLogger("macro_tracker.cli")

console = Console(highlight=False)

HELP_HEIGHT = 3
HELP_PAD = 5

OVERVIEW_HELP = ("q Quit", "a Add Food")
FORM_HELP = ("Tab Next", "S-Tab Prev", "Ret Submit", "Esc Cancel")


class ViewState(Enum):
    OVERVIEW = "overview"
    FORM_ENTRY = "form_entry"


class Controller:
    """The view controller and add-food form state machine.

    All screen state lives here: which view is shown, the active form field,
    the field buffers and the running totals. The cursor position inside the
    form is always derived from the active field and its buffered length.
    """

    def __init__(self, canvas: Canvas, foods: Sequence[FoodRecord],
                 totals: Optional[MacroTotals] = None):
        self.canvas = canvas
        self.foods: List[FoodRecord] = list(foods)
        self.totals = totals if totals is not None else MacroTotals()
        self.state = ViewState.OVERVIEW
        self.form = FormBuffer()
        self.active_field = 0
        self.last_submission: Optional[SubmissionResult] = None

    @property
    def layout(self) -> FormLayout:
        return FormLayout.centered(*self.canvas.size())

    # ============== Shared Drawing ==============

    def _draw_boundary(self):
        """Draw a box around the whole window, leaving room for the help line."""
        columns, rows = self.canvas.size()
        self.canvas.draw_rect(0, 0, columns - 1, rows - HELP_HEIGHT)

    def _draw_help(self, labels: Iterable[str]):
        _, rows = self.canvas.size()
        written = 0
        for i, label in enumerate(labels):
            key, _, text = label.partition(" ")
            self.canvas.move_to(1 + written + i * HELP_PAD, rows - HELP_HEIGHT + 1)
            written += self.canvas.write_text(key, style="bold")
            written += self.canvas.write_text(" " + text)

    def _place_cursor(self):
        x, y = self.layout.cursor_position(self.active_field, self.form.length(self.active_field))
        self.canvas.move_to(x, y)

    # ============== Overview ==============

    def _draw_today(self):
        columns, rows = self.canvas.size()
        summary = format_totals(self.totals)
        ratio = format_macro_ratio(self.totals)
        x = columns // 2 - len(summary) // 2
        y = rows // 2
        self.canvas.put(x, y, "Today:", style="bold cyan")
        self.canvas.put(x, y + 1, summary)
        self.canvas.put(x, y + 2, ratio, style="dim")

    def show_overview(self):
        self.state = ViewState.OVERVIEW
        with self.canvas.frame():
            self.canvas.show_cursor(False)
            self.canvas.clear()
            self._draw_boundary()
            self._draw_help(OVERVIEW_HELP)
            self._draw_today()

    # ============== Form Entry ==============

    def _draw_form(self):
        layout = self.layout
        self.canvas.clear()
        self._draw_boundary()
        self._draw_help(FORM_HELP)
        for i, label in enumerate(LABELS):
            self.canvas.put(*layout.label_position(i), label)
            self.canvas.draw_rect(*layout.box_rect(i))
            if self.form.value(i):
                self.canvas.put(*layout.input_origin(i), self.form.value(i))
        self._place_cursor()
        self.canvas.show_cursor(True)

    def open_form(self):
        """Switch to the add-food form with empty fields and field 0 active."""
        self.state = ViewState.FORM_ENTRY
        self.form.clear()
        self.active_field = 0
        with self.canvas.frame():
            self._draw_form()

    def _change_field(self, index: int):
        if not 0 <= index < FIELD_COUNT or index == self.active_field:
            return
        self.active_field = index
        with self.canvas.frame():
            self._place_cursor()

    def next_field(self):
        self._change_field(self.active_field + 1)

    def previous_field(self):
        self._change_field(self.active_field - 1)

    def type_char(self, char: str):
        if not char.isprintable():
            return
        if not self.form.append(self.active_field, char):
            return
        x, y = self.layout.cursor_position(self.active_field, self.form.length(self.active_field) - 1)
        with self.canvas.frame():
            self.canvas.put(x, y, char)

    def backspace(self):
        if not self.form.pop(self.active_field):
            return
        with self.canvas.frame():
            self._place_cursor()
            self.canvas.write_text(" ")
            self._place_cursor()

    def submit(self):
        """Parse the form, add it to the totals if valid, and go back to the overview."""
        result = parse_submission(self.form)
        self.last_submission = result
        if result.ok:
            submission = result.submission
            self.totals.add_scaled(submission.record, submission.quantity)
            logger.info("Added %s x %s (%s)", submission.quantity,
                        submission.record.name, submission.record.unit)
        else:
            logger.info("Discarded food entry: %s", result.error)
        self.show_overview()

    def cancel(self):
        self.form.clear()
        self.show_overview()

    def handle_key(self, event: KeyEvent):
        """Apply a key press while the form is shown."""
        if event.code is KeyCode.CHAR:
            self.type_char(event.char)
        elif event.code is KeyCode.BACKSPACE:
            self.backspace()
        elif event.code is KeyCode.TAB:
            self.next_field()
        elif event.code is KeyCode.BACKTAB:
            self.previous_field()
        elif event.code is KeyCode.ENTER:
            self.submit()
        elif event.code is KeyCode.ESCAPE:
            self.cancel()

    # ============== Whole Screen ==============

    def render(self):
        """Redraw whichever screen is active."""
        if self.state is ViewState.FORM_ENTRY:
            with self.canvas.frame():
                self._draw_form()
        else:
            self.show_overview()

    def resize(self, columns: int, rows: int):
        self.canvas.resize(columns, rows)
        self.render()


# ============== Event Loop ==============

def event_loop(controller: Controller, events: Iterable) -> None:
    """Dispatch events until 'q' is pressed on the overview."""
    for event in events:
        if isinstance(event, ResizeEvent):
            controller.resize(event.columns, event.rows)
        elif isinstance(event, KeyEvent):
            if controller.state is ViewState.FORM_ENTRY:
                controller.handle_key(event)
            elif event.is_char('q'):
                break
            elif event.is_char('a'):
                controller.open_form()
        else:
            logger.debug("Ignoring event %r", event)


def run():
    """Entry point for the CLI."""
    configure_logging()
    try:
        foods = catalog.load_foods(catalog.CATALOG_PATH)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read catalog: %s", e)
        console.print(f"[red]Fatal error: {e}[/red]")
        sys.exit(1)

    try:
        main_screen(foods)
    except KeyboardInterrupt:
        sys.exit(0)


def main_screen(foods: Sequence[FoodRecord]):
    """Draw the overview, then read keys in raw mode until quit."""
    term = Terminal()
    canvas = Canvas(console)
    controller = Controller(canvas, foods)

    canvas.enter()
    try:
        controller.render()
        with term.raw(), term.keypad():
            event_loop(controller, read_events(term))
    finally:
        canvas.restore()


if __name__ == "__main__":
    run()
