import curses
import time

from command_dispatcher import CommandDispatcher
from grid_pane import GridPane
from render_projector import RenderProjector
from screen_layout import ScreenLayout
from status_bar import render_status


class Orchestrator:
    def __init__(self, stdscr, session, file_handler, config=None):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.timeout(100)

        self.session = session
        self.file_handler = file_handler
        self.layout = ScreenLayout(stdscr)
        self.grid = GridPane()
        self.projector = RenderProjector()

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

        self.dispatcher = CommandDispatcher(session, self._set_status, config)

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _status_context(self):
        return {
            "status_msg": self.status_msg,
            "status_until": self.status_msg_until,
            "mode": self.session.mode.label,
            "file_path": self.session.file_path,
            "shape": (self.session.grid.row_count, self.session.grid.column_count),
            "cursor": self.session.cursor.position,
            "edit_text": self.session.buffer_text,
            "dirty": self.session.dirty,
        }

    # ---------------- UI ----------------

    def redraw(self):
        h, w = self.layout.table_win.getmaxyx()
        frame = self.projector.project(self.session, h, w)
        self.grid.draw(self.layout.table_win, frame)

        sw = self.layout.status_win
        sw.erase()
        _, sw_w = sw.getmaxyx()
        try:
            sw.addnstr(0, 0, render_status(self._status_context(), sw_w), sw_w - 1)
        except curses.error:
            pass
        sw.refresh()

    def _resize(self):
        curses.update_lines_cols()
        self.stdscr.clear()
        self.stdscr.refresh()
        self.layout = ScreenLayout(self.stdscr)

    # ---------------- saving ----------------

    def _save(self):
        try:
            self.file_handler.save(self.session.grid)
        except (OSError, ValueError) as e:
            msg = f"Save failed: {e}"[: self.layout.W - 2]
            self._set_status(msg, 4)
            return False
        self.session.dirty = False
        self._set_status(f"Saved {self.session.file_path}", 3)
        return True

    def _read_key(self):
        try:
            return self.stdscr.get_wch()
        except curses.error:
            return None

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self._read_key()

            if ch is None:
                self.redraw()
                continue

            if ch in (3, 24, "\x03", "\x18"):  # Ctrl+C / Ctrl+X
                break

            if ch == curses.KEY_RESIZE:
                self._resize()
                self.redraw()
                continue

            if ch in (19, "\x13"):  # Ctrl+S
                self._save()
                self.redraw()
                continue

            self.dispatcher.handle_key(ch)

            if self.session.quit_requested:
                if not self.session.save_requested or self._save():
                    break
                self.session.quit_requested = False
                self.session.save_requested = False

            self.redraw()
