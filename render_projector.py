from dataclasses import dataclass, field
from typing import Optional

from editor_mode import EditorMode


@dataclass
class Frame:
    """What the terminal renderer should draw for one screen."""

    mode: EditorMode
    cursor: tuple[int, int]
    columns: list[int]
    widths: list[int]
    header: list[str]
    rows: list[tuple[int, list[str]]] = field(default_factory=list)
    row_number_width: int = 3
    highlight: Optional[tuple[int, int]] = None
    header_highlight: Optional[int] = None
    edit_text: Optional[str] = None


class RenderProjector:
    MAX_COL_WIDTH = 40

    def __init__(self):
        self.row_offset = 0
        self.col_offset = 0

    # ---------- cell text ----------
    @staticmethod
    def _header_text(session, col):
        buf = session.edit_buffer
        if buf is not None and buf.targets_header and buf.col == col:
            return buf.text
        return session.grid.header[col]

    @staticmethod
    def _cell_text(session, row, col):
        buf = session.edit_buffer
        if buf is not None and buf.row == row and buf.col == col:
            return buf.text
        return session.grid.cell_at(row, col)

    def column_widths(self, session, row_range) -> list[int]:
        """Widths from the header and the rows on screen only."""
        grid = session.grid
        widths = []
        for c in range(grid.column_count):
            max_len = len(self._header_text(session, c))
            for r in row_range:
                max_len = max(max_len, len(self._cell_text(session, r, c)))
            widths.append(min(self.MAX_COL_WIDTH, max_len + 2))
        return widths

    # ---------- viewport ----------
    @staticmethod
    def _fit_columns(widths, offset, avail_w):
        count = 0
        used = 0
        for cw in widths[offset:]:
            if used + cw + 1 > avail_w:
                break
            used += cw + 1
            count += 1
        return max(1, count)

    def _adjust_col_offset(self, cursor_col, widths, avail_w):
        self.col_offset = max(0, min(self.col_offset, len(widths) - 1))
        if cursor_col < self.col_offset:
            self.col_offset = cursor_col
        while cursor_col >= self.col_offset + self._fit_columns(
            widths, self.col_offset, avail_w
        ):
            self.col_offset += 1
        return self._fit_columns(widths, self.col_offset, avail_w)

    def _adjust_row_offset(self, cursor_row, row_count, body_h):
        max_offset = max(0, row_count - body_h)
        self.row_offset = max(0, min(self.row_offset, max_offset))
        if cursor_row < self.row_offset:
            self.row_offset = cursor_row
        elif cursor_row >= self.row_offset + body_h:
            self.row_offset = cursor_row - body_h + 1

    # ---------- projection ----------
    def project(self, session, height: int, width: int) -> Frame:
        grid = session.grid
        row, col = session.cursor.position

        row_w = max(3, len(str(grid.row_count)) + 1)
        avail_w = max(1, width - (row_w + 1))
        body_h = max(1, height - 1)  # first line holds the header

        self._adjust_row_offset(row, grid.row_count, body_h)
        row_end = min(grid.row_count, self.row_offset + body_h)
        page = range(self.row_offset, row_end)

        widths = self.column_widths(session, page)
        visible_count = self._adjust_col_offset(col, widths, avail_w)
        columns = list(
            range(self.col_offset, min(grid.column_count, self.col_offset + visible_count))
        )

        frame = Frame(
            mode=session.mode,
            cursor=(row, col),
            columns=columns,
            widths=[widths[c] for c in columns],
            header=[self._header_text(session, c) for c in columns],
            row_number_width=row_w,
            edit_text=session.buffer_text,
        )
        for r in page:
            frame.rows.append((r, [self._cell_text(session, r, c) for c in columns]))

        if session.mode is EditorMode.HEADER_EDIT:
            frame.header_highlight = col
        else:
            frame.highlight = (row, col)
        return frame
