#!/usr/bin/env python3
"""
Mini Cactpot TUI — Terminal frontend using Textual.

Keyboard-driven: move over the grid with the arrow keys, type the digits the
game has revealed, and read off the best line and the next cell to scratch.
"""
import argparse

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Center, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Footer, Header, Label, Static

from analyzer import format_best_lines, format_cells, format_ev
from board import LINE_POSITIONS, MAX_REVEALS, describe_priority, line_by_name
from frontend_adapter import CalculatorAdapter


# ── Pure renderers ───────────────────────────────────────────────────────────

def render_grid(cells, cursor=None, locked=(), suggested=(), highlighted=()):
    """Render the 3x3 grid as Rich markup.

    Args:
        cells: 9 values (digit or None)
        cursor: position under the keyboard cursor
        locked: positions that can no longer be filled
        suggested: positions recommended for the next reveal
        highlighted: positions on one of the best lines
    """
    rows = ["┌───┬───┬───┐"]
    for r in range(3):
        parts = []
        for c in range(3):
            pos = r * 3 + c
            value = cells[pos]
            if value is not None:
                text = str(value)
            elif pos in locked:
                text = "·"
            elif pos in suggested:
                text = "?"
            else:
                text = " "
            if pos in highlighted:
                text = f"[bold green]{text}[/bold green]"
            elif pos in suggested and value is None:
                text = f"[bold yellow]{text}[/bold yellow]"
            if pos == cursor:
                text = f"[reverse]{text}[/reverse]"
            parts.append(f" {text} ")
        rows.append("│" + "│".join(parts) + "│")
        rows.append("├───┼───┼───┤" if r < 2 else "└───┴───┴───┘")
    return "\n".join(rows)


def render_results(snapshot):
    """Render the analysis section of an adapter snapshot as Rich markup."""
    if snapshot["errors"]:
        return "\n".join(f"[bold red]{e}[/bold red]" for e in snapshot["errors"])

    lines = []
    best = [line_by_name(name) for name in snapshot["best_lines"]]
    lines.append(f"[bold]Best Options:[/bold] {format_best_lines(best)}")
    if snapshot["max_ev"] is not None:
        lines.append(f"[bold]Expected Value:[/bold] {format_ev(snapshot['max_ev'])}")

    revealed = snapshot["revealed_count"]
    if revealed < MAX_REVEALS:
        cells = snapshot["best_cells"]
        tiers = ", ".join(describe_priority(p) for p in cells)
        lines.append(f"[bold]Reveal next:[/bold] {format_cells(cells)}"
                     + (f" [dim]({tiers})[/dim]" if cells else ""))
        lines.append(f"[dim]{MAX_REVEALS - revealed} reveal(s) left[/dim]")
    else:
        lines.append("[dim]All reveals used. Pick a line.[/dim]")

    if snapshot["show_line_evs"] and snapshot["line_evs"]:
        lines.append("")
        for name, ev in snapshot["line_evs"].items():
            marker = "▸" if name in snapshot["best_lines"] else " "
            lines.append(f"{marker} {name:<22}{ev:>9.1f}")
    return "\n".join(lines)


def best_line_positions(snapshot):
    """Positions covered by any of the best lines, once every reveal is used."""
    if snapshot["revealed_count"] < MAX_REVEALS:
        return set()
    positions = set()
    for name in snapshot["best_lines"]:
        positions.update(LINE_POSITIONS[line_by_name(name)])
    return positions


# ── Widgets ──────────────────────────────────────────────────────────────────

class GridDisplay(Static):
    """Renders the 3x3 board with cursor and hints."""

    def render(self):
        app = self.app
        snapshot = app.adapter.snapshot()
        locked = {i for i, flag in enumerate(snapshot["locked"]) if flag}
        return render_grid(
            snapshot["cells"], cursor=app.grid_cursor, locked=locked,
            suggested=set(snapshot["best_cells"]),
            highlighted=best_line_positions(snapshot),
        )


class ResultsDisplay(Static):
    """Shows the best lines, their EV, and the suggested reveal."""

    def render(self):
        return render_results(self.app.adapter.snapshot())


class HelpScreen(ModalScreen):
    """Key reference overlay."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close"),
        Binding("question_mark", "dismiss", "Close"),
    ]

    def compose(self) -> ComposeResult:
        with Center():
            yield Label(
                "[bold]Mini Cactpot Calculator[/bold]\n\n"
                "Arrows     move the cursor\n"
                "1-9        enter the revealed digit\n"
                "0 / Del    clear the cell\n"
                "n          new board\n"
                "e          toggle every line's EV\n"
                "s          toggle single best cell\n"
                "Esc        close / quit",
                id="help-text",
            )


# ── App ──────────────────────────────────────────────────────────────────────

class CactpotApp(App):
    """Textual Mini Cactpot calculator."""

    CSS = """
    #main-area {
        height: auto;
        padding: 1 2;
    }
    #grid-display {
        width: 15;
        margin-right: 4;
    }
    #results-display {
        width: 1fr;
    }
    #help-text {
        padding: 2 4;
        border: thick $accent;
        background: $surface;
        width: 50;
    }
    """

    BINDINGS = [
        Binding("up", "move_cursor(-3)", "Up", show=False),
        Binding("down", "move_cursor(3)", "Down", show=False),
        Binding("left", "move_cursor(-1)", "Left", show=False),
        Binding("right", "move_cursor(1)", "Right", show=False),
        *[Binding(str(d), f"enter_digit({d})", str(d), show=False) for d in range(1, 10)],
        Binding("0", "clear_cell", "Clear", show=False),
        Binding("backspace", "clear_cell", "Clear"),
        Binding("delete", "clear_cell", "Clear", show=False),
        Binding("n", "new_board", "New board"),
        Binding("e", "toggle_evs", "Line EVs"),
        Binding("s", "toggle_single", "Single cell"),
        Binding("question_mark", "help", "Help"),
        Binding("escape", "quit_or_close", "Quit"),
    ]

    def __init__(self, adapter=None):
        super().__init__()
        self.adapter = adapter if adapter is not None else CalculatorAdapter()
        self.grid_cursor = 0

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-area"):
            yield GridDisplay(id="grid-display")
            yield ResultsDisplay(id="results-display")
        yield Footer()

    def on_mount(self):
        self.title = "Mini Cactpot"
        self.adapter.load_settings()
        self._refresh_display()

    def _refresh_display(self):
        self.query_one("#grid-display", GridDisplay).refresh()
        self.query_one("#results-display", ResultsDisplay).refresh()

    # ── Actions ──────────────────────────────────────────────────────────

    def action_move_cursor(self, delta: int):
        row, col = divmod(self.grid_cursor, 3)
        if delta in (-1, 1):
            col = (col + delta) % 3
        else:
            row = (row + delta // 3) % 3
        self.grid_cursor = row * 3 + col
        self._refresh_display()

    def action_enter_digit(self, digit: int):
        if self.adapter.set_cell(self.grid_cursor, digit):
            self._refresh_display()
        else:
            self.bell()

    def action_clear_cell(self):
        if self.adapter.clear_cell(self.grid_cursor):
            self._refresh_display()

    def action_new_board(self):
        self.adapter.reset()
        self.grid_cursor = 0
        self._refresh_display()

    def action_toggle_evs(self):
        self.adapter.toggle_line_evs()
        self._refresh_display()

    def action_toggle_single(self):
        self.adapter.toggle_single_best_cell()
        self._refresh_display()

    def action_help(self):
        self.push_screen(HelpScreen())

    def action_quit_or_close(self):
        if len(self.screen_stack) > 1:
            self.pop_screen()
        else:
            self.exit()


def main(argv=None):
    """Entry point for the TUI."""
    parser = argparse.ArgumentParser(description="Mini Cactpot calculator (terminal UI)")
    parser.add_argument("--settings", metavar="PATH",
                        help="Preferences file (default: ~/.cactpot_settings.json)")
    args = parser.parse_args(argv)

    app = CactpotApp(adapter=CalculatorAdapter(settings_path=args.settings))
    app.run()


if __name__ == "__main__":
    main()
