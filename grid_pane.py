import curses

from editor_mode import EditorMode


class GridPane:
    PAIR_CELL_TEXT = 1
    PAIR_CELL_EDIT = 2
    PAIR_ROW_NUMBER = 3

    def __init__(self):
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_CELL_TEXT, curses.COLOR_WHITE, -1)
            curses.init_pair(self.PAIR_CELL_EDIT, curses.COLOR_BLACK, curses.COLOR_GREEN)
            curses.init_pair(self.PAIR_ROW_NUMBER, curses.COLOR_YELLOW, -1)
        except curses.error:
            pass

    def _cell_attr(self, frame, editing):
        if editing:
            return curses.color_pair(self.PAIR_CELL_EDIT) | curses.A_BOLD
        if frame.mode is EditorMode.VISUAL:
            return curses.color_pair(self.PAIR_CELL_TEXT) | curses.A_REVERSE
        return curses.color_pair(self.PAIR_CELL_TEXT)

    # ---------- rendering ----------
    def draw(self, win, frame):
        win.erase()
        try:
            win.bkgd(" ", curses.color_pair(self.PAIR_CELL_TEXT))
        except curses.error:
            pass
        h, w = win.getmaxyx()
        row_w = frame.row_number_width

        # header
        x = row_w + 1
        for c, cw, name in zip(frame.columns, frame.widths, frame.header):
            eff_cw = min(cw, max(1, w - x - 1))
            attr = curses.A_BOLD
            shown = name[:eff_cw]
            if frame.header_highlight == c:
                attr = self._cell_attr(frame, editing=True)
                shown = name[-eff_cw:]
            try:
                win.addnstr(0, x, shown.ljust(eff_cw), eff_cw, attr)
            except curses.error:
                pass
            x += eff_cw + 1

        # rows, numbered from 1
        y = 1
        for r, cells in frame.rows:
            if y >= h:
                break
            try:
                win.addnstr(
                    y, 0, str(r + 1).rjust(row_w), row_w,
                    curses.color_pair(self.PAIR_ROW_NUMBER),
                )
            except curses.error:
                pass
            x = row_w + 1
            for c, cw, text in zip(frame.columns, frame.widths, cells):
                eff_cw = min(cw, max(1, w - x - 1))
                attr = curses.color_pair(self.PAIR_CELL_TEXT)
                editing = frame.mode is EditorMode.INSERT and frame.highlight == (r, c)
                if frame.highlight == (r, c):
                    attr = self._cell_attr(frame, editing=editing)
                # keep the end of the text visible while composing
                shown = text[-eff_cw:] if editing else text[:eff_cw]
                try:
                    win.addnstr(y, x, shown.ljust(eff_cw), eff_cw, attr)
                except curses.error:
                    pass
                x += eff_cw + 1
            y += 1

        win.refresh()
