"""Full-screen path replay (Textual)."""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Static

from gridwalk.render.replay_player import render_frame
from gridwalk.sim.contracts import ReplayFrame
from gridwalk.sim.grid import Grid, Point


class ReplayScreen(Screen):
    CSS = """
    Screen {
        layout: vertical;
    }
    #replay-view {
        height: 1fr;
    }
    #status-bar {
        height: 3;
    }
    """

    BINDINGS = [
        ("enter", "advance", "Next step"),
        ("r", "restart", "Restart"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, grid: Grid, frames: list[ReplayFrame], goal: Point) -> None:
        super().__init__()
        self._grid = grid
        self._frames = frames
        self._goal = goal
        self.index = 0
        self._view: Static | None = None
        self._status_bar: Static | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            yield Static(id="replay-view")
            yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._view = self.query_one("#replay-view", Static)
        self._status_bar = self.query_one("#status-bar", Static)
        self._refresh_ui()

    def action_advance(self) -> None:
        self.index = min(self.index + 1, len(self._frames) - 1)
        self._refresh_ui()

    def action_restart(self) -> None:
        self.index = 0
        self._refresh_ui()

    def action_quit(self) -> None:
        self.app.exit()

    def _refresh_ui(self) -> None:
        if self._view:
            frame = self._frames[self.index]
            self._view.update(render_frame(self._grid, self._frames, frame, self._goal))
        if self._status_bar:
            self._status_bar.update(
                Panel(
                    Text(
                        "Replay controls: enter=step | r=restart | q=quit",
                        style="bold",
                    ),
                    padding=(0, 1),
                )
            )


class ReplayApp(App):
    """Hosts a single replay screen."""

    TITLE = "gridwalk replay"

    def __init__(self, grid: Grid, frames: list[ReplayFrame], goal: Point) -> None:
        super().__init__()
        self.replay = ReplayScreen(grid, frames, goal)

    def on_mount(self) -> None:
        self.push_screen(self.replay)


def run_textual_replay(grid: Grid, frames: list[ReplayFrame], goal: Point) -> None:
    if not frames:
        return
    ReplayApp(grid, frames, goal).run()
