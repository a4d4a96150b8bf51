from typing import Callable, Optional

import pandas as pd

import keys
from config_paths import default_config
from editor_mode import EditorMode


# Visual-mode key -> action name. Insert/HeaderEdit keys are added in
# CommandDispatcher._build_table; printable text there goes to the buffer.
VISUAL_KEYMAP: dict[str, str] = {
    # navigation
    "h": "move_left",
    "l": "move_right",
    "j": "move_down",
    "k": "move_up",
    "{": "jump_up",
    "}": "jump_down",
    "g": "first_row",
    "G": "last_row",
    "I": "first_column",
    "A": "last_column",
    # editing
    "i": "insert",
    keys.ENTER: "insert",
    "r": "replace",
    "H": "header_edit",
    # structure
    "n": "column_after",
    "N": "column_before",
    "o": "row_below",
    "O": "row_above",
    "d": "delete_row",
    "D": "delete_column",
    # register
    "y": "yank",
    "p": "paste",
    ".": "paste_date",
    # session
    "q": "save_and_quit",
}


class CommandDispatcher:
    """Maps one keystroke, given the session's mode, onto the session."""

    def __init__(
        self,
        session,
        set_status_cb: Callable[[str, float], None],
        config: Optional[dict] = None,
    ):
        self.session = session
        self._set_status = set_status_cb
        self.config = config if config is not None else default_config()
        self._table = self._build_table()

    def _build_table(self):
        table = {}
        for key, action in VISUAL_KEYMAP.items():
            table[(EditorMode.VISUAL, key)] = getattr(self, f"_{action}")
        for mode in (EditorMode.INSERT, EditorMode.HEADER_EDIT):
            table[(mode, keys.ENTER)] = self._commit
            table[(mode, keys.BACKSPACE)] = self._backspace
        return table

    # ---------- public API ----------
    def handle_key(self, ch) -> bool:
        key = keys.normalize(ch)
        if key is None:
            return False
        mode = self.session.mode

        action = self._table.get((mode, key))
        if action is not None:
            action()
            return True

        if mode is not EditorMode.VISUAL and keys.is_text(key):
            self.session.edit_buffer.append(key)
            return True

        return False

    # ---------- helpers ----------
    @property
    def grid(self):
        return self.session.grid

    @property
    def cursor(self):
        return self.session.cursor

    # ---------- navigation ----------
    def _move_left(self):
        self.cursor.move_by(0, -1)

    def _move_right(self):
        self.cursor.move_by(0, 1)

    def _move_down(self):
        self.cursor.move_by(1, 0)

    def _move_up(self):
        self.cursor.move_by(-1, 0)

    def _jump_down(self):
        self.cursor.move_by(self.config["ROW_JUMP"], 0)

    def _jump_up(self):
        self.cursor.move_by(-self.config["ROW_JUMP"], 0)

    def _first_row(self):
        self.cursor.jump_to_first_row()

    def _last_row(self):
        self.cursor.jump_to_last_row()

    def _first_column(self):
        self.cursor.jump_to_first_column()

    def _last_column(self):
        self.cursor.jump_to_last_column()

    # ---------- mode transitions ----------
    def _insert(self):
        self.session.enter_insert(seed=True)

    def _replace(self):
        self.session.enter_insert(seed=False)

    def _header_edit(self):
        self.session.enter_header_edit()

    def _commit(self):
        self.session.commit_edit()

    def _backspace(self):
        self.session.edit_buffer.backspace()

    # ---------- structure ----------
    def _insert_column(self, after: bool):
        col = self.cursor.col
        name = self.config["DEFAULT_COLUMN_NAME"]
        if after:
            self.grid.insert_column_after(col, name)
            col += 1
        else:
            self.grid.insert_column_before(col, name)
        self.session.after_structure_change(col=col)
        self._set_status(f"Inserted column {'after' if after else 'before'}", 2)

    def _column_after(self):
        self._insert_column(after=True)

    def _column_before(self):
        self._insert_column(after=False)

    def _row_below(self):
        row = self.cursor.row + 1
        self.grid.insert_row(row)
        self.session.after_structure_change(row=row)
        self._set_status("Inserted row below", 2)

    def _row_above(self):
        row = self.cursor.row
        self.grid.insert_row(row)
        self.session.after_structure_change(row=row)
        self._set_status("Inserted row above", 2)

    def _delete_row(self):
        if self.grid.row_count <= 1:
            self._set_status("Cannot delete the last row", 3)
            return
        self.grid.delete_row(self.cursor.row)
        self.session.after_structure_change()
        self._set_status("Deleted row", 2)

    def _delete_column(self):
        if self.grid.column_count <= 1:
            self._set_status("Cannot delete the last column", 3)
            return
        col = self.cursor.col
        name = self.grid.header[col]
        self.grid.delete_column(col)
        self.session.after_structure_change()
        self._set_status(f"Deleted column '{name}'", 3)

    # ---------- register ----------
    def _yank(self):
        row, col = self.cursor.position
        self.session.register = self.grid.cell_at(row, col)
        self._set_status("Cell copied", 2)

    def _paste(self):
        if self.session.register is None:
            self._set_status("Nothing to paste", 2)
            return
        row, col = self.cursor.position
        self.grid.set_cell(row, col, self.session.register)
        self.session.dirty = True

    def _paste_date(self):
        row, col = self.cursor.position
        today = pd.Timestamp.now().strftime(self.config["DATE_FORMAT"])
        self.grid.set_cell(row, col, today)
        self.session.dirty = True

    # ---------- session ----------
    def _save_and_quit(self):
        self.session.request_quit(save=True)
