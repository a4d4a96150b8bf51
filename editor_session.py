from typing import Optional

from cursor import Cursor
from editor_mode import EditBuffer, EditorMode, check_transition
from grid_model import GridModel, MalformedGrid


class EditorSession:
    """Single owner of the grid, cursor, mode and edit buffer for one file."""

    def __init__(self, grid: GridModel, file_path: Optional[str] = None):
        if grid.row_count < 1 or grid.column_count < 1:
            raise MalformedGrid("Grid needs at least one row and one column")
        if any(len(row) != grid.column_count for row in grid.rows):
            raise MalformedGrid("Row lengths differ from header length")

        self.grid = grid
        self.file_path = file_path
        self.cursor = Cursor(grid)
        self.mode = EditorMode.VISUAL
        self.edit_buffer: Optional[EditBuffer] = None

        # y / p register
        self.register: Optional[str] = None

        self.dirty = False
        self.quit_requested = False
        self.save_requested = False

    # ---------- mode transitions ----------
    def _switch(self, target: EditorMode):
        check_transition(self.mode, target)
        self.mode = target

    def enter_insert(self, seed: bool = True):
        self._switch(EditorMode.INSERT)
        row, col = self.cursor.position
        text = self.grid.cell_at(row, col) if seed else ""
        self.edit_buffer = EditBuffer(col=col, row=row, text=text)

    def enter_header_edit(self):
        self._switch(EditorMode.HEADER_EDIT)
        col = self.cursor.col
        self.edit_buffer = EditBuffer(
            col=col, text=self.grid.header[col], replace_on_type=True
        )

    def commit_edit(self):
        self._switch(EditorMode.VISUAL)
        buf = self.edit_buffer
        self.edit_buffer = None
        if buf is None:
            return
        buf.commit(self.grid)
        self.dirty = True

    # ---------- structural edits ----------
    def after_structure_change(self, row: Optional[int] = None, col: Optional[int] = None):
        """Point the cursor at (row, col) when given, then clamp it."""
        target_row = self.cursor.row if row is None else row
        target_col = self.cursor.col if col is None else col
        self.cursor.move_to(target_row, target_col)
        self.dirty = True

    # ---------- renderer contract ----------
    @property
    def buffer_text(self) -> Optional[str]:
        return self.edit_buffer.text if self.edit_buffer is not None else None

    def request_quit(self, save: bool = True):
        self.save_requested = save
        self.quit_requested = True
