class Cursor:
    """Active (row, col) position, always kept inside the grid's bounds."""

    def __init__(self, grid, row=0, col=0):
        self.grid = grid
        self.row = 0
        self.col = 0
        self.move_to(row, col)

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col

    def _max_row(self):
        return max(0, self.grid.row_count - 1)

    def _max_col(self):
        return max(0, self.grid.column_count - 1)

    def move_to(self, row: int, col: int):
        self.row = max(0, min(row, self._max_row()))
        self.col = max(0, min(col, self._max_col()))

    def move_by(self, d_row: int, d_col: int):
        self.move_to(self.row + d_row, self.col + d_col)

    def clamp(self):
        # re-fit after rows/columns were removed
        self.move_to(self.row, self.col)

    def jump_to_first_row(self):
        self.row = 0

    def jump_to_last_row(self):
        self.row = self._max_row()

    def jump_to_first_column(self):
        self.col = 0

    def jump_to_last_column(self):
        self.col = self._max_col()
