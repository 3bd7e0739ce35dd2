#!/usr/bin/env python3
"""
Rich live UI showing each pipeline stage in its own pane, with
keyboard-controlled per-pane scrolling.
"""
from typing import Callable, List
from rich.console import Console
from rich.panel import Panel
from rich.layout import Layout
from rich.live import Live
from rich.syntax import Syntax
from rich.text import Text
import io
import threading
import time
import sys
import os


# name -> (title, border colour)
PANES = {
    "source": ("Source", "cyan"),
    "tokens": ("Tokens", "green"),
    "ast": ("AST", "yellow"),
    "env": ("Environment", "magenta"),
    "log": ("Debug Output", "indian_red"),
}
PANE_ORDER = list(PANES)


class Tui:

    class Mode:
        LEXER = 1
        PARSER = 2
        EVAL = 3

    def __init__(self, mode=Mode.EVAL, theme="monokai", console: Console | None = None):
        self.console = console or Console()
        self.mode = mode
        self.theme = theme

        self.buffers = {name: io.StringIO() for name in PANE_ORDER}

        # region State
        self.selected_pane = "source"
        self.scroll_offsets = {name: 0 for name in PANE_ORDER}  # lines scrolled up (0 = bottom)
        self.lock = threading.Lock()
        self.running = True
        self.need_refresh = True
        self.last_console_size = self.console.size
        self._live: Live | None = None
        # endregion

        self.layout = self.build_layout()

    def visible_panes(self) -> List[str]:
        panes = ["source", "tokens"]
        if self.mode >= Tui.Mode.PARSER:
            panes.append("ast")
        if self.mode >= Tui.Mode.EVAL:
            panes.append("env")
        return panes + ["log"]

    def log_height(self) -> int:
        return max(4, int(self.console.size.height * 0.25))

    def build_layout(self) -> Layout:
        """Build or rebuild layout based on current console size"""
        layout = Layout()
        console_height = self.console.size.height
        log_height = self.log_height()

        layout.split(
            Layout(name="main", ratio=max(1, console_height - log_height)),
            Layout(name="log", size=log_height),
        )

        if self.mode == Tui.Mode.EVAL:
            layout["main"].split(Layout(name="upper"), Layout(name="lower"))
            layout["main"]["upper"].split_row(
                Layout(name="source", ratio=1),
                Layout(name="tokens", ratio=1),
            )
            layout["main"]["lower"].split_row(
                Layout(name="ast", ratio=1),
                Layout(name="env", ratio=1),
            )
        else:
            layout["main"].split_row(
                *(Layout(name=name, ratio=1) for name in self.visible_panes()[:-1])
            )

        for name in self.visible_panes():
            title, colour = PANES[name]
            layout[name].update(Panel("", title=title, border_style=colour))

        return layout

    # region Helpers
    @staticmethod
    def lines_of(text: str) -> list[str]:
        if not text:
            return []
        return text.rstrip("\n").split("\n")

    @staticmethod
    def process_carriage_returns(text: str) -> List[str]:
        """Splits text in lines, a bare '\\r' clears the line being built."""
        lines = [
            chunk.rsplit("\r", 1)[-1]
            for chunk in text.replace("\r\n", "\n").split("\n")
        ]
        return [line for line in lines if line != ""]

    @staticmethod
    def compute_visible(lines: list[str], pane_height: int, offset: int):
        """
        Bottom-aligned window over `lines`.
        offset == 0 => show bottom-most lines
        offset > 0 => show older lines (scrolled up)
        Returns (visible lines, clamped offset, index of the first visible line).
        """
        usable = max(pane_height - 2, 0)  # borders/title
        total = len(lines)
        offset = max(0, min(offset, max(0, total - usable)))
        start = max(0, total - usable - offset)
        return lines[start : start + usable], offset, start

    def pane_height(self, name: str) -> int:
        region = self.layout.map.get(self.layout[name]) if self.layout.map else None
        if region is not None:
            return region.region.height
        console_height = self.console.size.height
        if name == "log":
            return self.log_height()
        main_height = console_height - self.log_height()
        if self.mode == Tui.Mode.EVAL:
            return max(6, main_height // 2)
        return max(10, main_height)

    def render_box(self, name: str) -> Panel:
        text = self.buffers[name].getvalue()
        lines = self.lines_of(text) if name == "source" else self.process_carriage_returns(text)

        with self.lock:
            visible, offset, start = self.compute_visible(
                lines, self.pane_height(name), self.scroll_offsets[name]
            )
            self.scroll_offsets[name] = offset

        title, colour = PANES[name]
        style = f"bold {colour}" if self.selected_pane == name else colour
        if name == "source":
            body = Syntax(
                "\n".join(visible),
                "typescript",
                theme=self.theme,
                line_numbers=True,
                start_line=start + 1,
            )
            return Panel(body, title=title, border_style=style)
        return Panel(Text("\n".join(visible)), title=title, border_style=style)

    def render(self) -> Layout:
        if self.console.size != self.last_console_size:
            self.layout = self.build_layout()
            self.last_console_size = self.console.size

        for name in self.visible_panes():
            self.layout[name].update(self.render_box(name))
        return self.layout

    # endregion

    # region API used by the pipeline to append data
    def write(self, name: str, line: str = "", end="\n", flush=True):
        with self.lock:
            self.buffers[name].write(f"{line}{end}")
            self.scroll_offsets[name] = 0
        if flush:
            self.update()
        else:
            self.mark_refresh()

    def log_source(self, line: str = "", end="\n", flush=True):
        self.write("source", line, end, flush)

    def log_tokens(self, line: str = "", end="\n", flush=True):
        self.write("tokens", line, end, flush)

    def log_ast(self, line: str = "", end="\n", flush=True):
        self.write("ast", line, end, flush)

    def log_env(self, line: str = "", end="\n", flush=True):
        self.write("env", line, end, flush)

    def log_debug(self, line: str = "", end="\n", flush=True):
        self.write("log", line, end, flush)

    def mark_refresh(self):
        with self.lock:
            self.need_refresh = True

    # endregion

    def update(self):
        if self._live is not None:
            self._live.update(self.render())

    def scroll(self, name: str, delta: int):
        """Positive delta scrolls up (older lines)."""
        with self.lock:
            self.scroll_offsets[name] = max(0, self.scroll_offsets[name] + delta)
        self.mark_refresh()

    def handle_key(self, key: str) -> bool:
        """Applies one keypress. Returns False when the UI should close."""
        if key in ("q", "\x03"):  # q or Ctrl-C
            return False
        panes = self.visible_panes()
        if key in ("1", "2", "3", "4", "5") and int(key) <= len(panes):
            self.selected_pane = panes[int(key) - 1]
            self.mark_refresh()
        elif key in ("j", "\x1b[B"):  # down (newer)
            self.scroll(self.selected_pane, -1)
        elif key in ("k", "\x1b[A"):  # up (older)
            self.scroll(self.selected_pane, 1)
        elif key in ("J", "\x1b[1;2B"):  # shift + down, every pane
            for name in panes:
                self.scroll(name, -1)
        elif key in ("K", "\x1b[1;2A"):  # shift + up, every pane
            for name in panes:
                self.scroll(name, 1)
        elif key == "u":  # page up
            self.scroll(self.selected_pane, 10)
        elif key == "d":  # page down
            self.scroll(self.selected_pane, -10)
        elif key == "g":  # go top, clamped on next render
            self.scroll(self.selected_pane, sys.maxsize // 2)
        elif key == "G":  # go bottom
            with self.lock:
                self.scroll_offsets[self.selected_pane] = 0
            self.mark_refresh()
        return True

    def input_thread(self):
        """Input handling thread (keyboard only)"""
        import select
        import termios
        import tty

        fd = sys.stdin.fileno()
        old = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)  # allow signals (Ctrl-C) but read raw input
            while self.running:
                r, _, _ = select.select([fd], [], [], 0.1)
                if not r:
                    continue
                data = os.read(fd, 32)
                if not data:
                    continue
                if not self.handle_key(data.decode("utf-8", "ignore")):
                    self.running = False
                    break
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old)

    def _run(self, task: Callable[[], None], hold: bool):
        """Live loop around the pipeline task"""
        error: Exception | None = None
        t = threading.Thread(target=self.input_thread, daemon=True)
        last_update_time = time.time()
        t.start()

        with Live(
            self.render(), console=self.console, refresh_per_second=20, screen=True
        ) as live:
            self._live = live
            try:
                task()
            except Exception as e:
                # keep the panes on screen so the failure can be inspected
                self.log_debug(f"{type(e).__name__}: {e}")
                error = e
                hold = True

            self.running = hold
            # Holds the process after task run.
            while self.running:
                if self.need_refresh or (time.time() - last_update_time) > 0.1:
                    with self.lock:
                        self.need_refresh = False
                    self.update()
                    last_update_time = time.time()

                time.sleep(0.03)

        self.running = False
        t.join(timeout=0.2)
        if error is not None:
            raise error

    def run(self, task: Callable[[], None], hold=False):
        try:
            self._run(task, hold)
        except KeyboardInterrupt:
            self.running = False
            print("\nExiting.", file=sys.stderr)
