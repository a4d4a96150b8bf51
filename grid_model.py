import pandas as pd


class GridError(Exception):
    pass


class OutOfBounds(GridError, IndexError):
    pass


class MalformedGrid(GridError, ValueError):
    pass


class LastRowOrColumn(GridError):
    pass


class GridModel:
    """
    Owns the header row and the data rows of string cells.
    No rendering or input logic.

    Cells live in an object-dtype DataFrame with positional column labels;
    the header is kept beside it and every structural edit updates both.
    """

    def __init__(self, header, frame):
        self._header: list[str] = list(header)
        self._frame: pd.DataFrame = frame

    # ---------- construction ----------
    @classmethod
    def from_rows(cls, header, rows):
        if header is None:
            raise MalformedGrid("Missing header row")
        header = ["" if h is None else str(h) for h in header]
        if not header:
            raise MalformedGrid("Header has no columns")
        rows = [list(r) for r in rows]
        if not rows:
            raise MalformedGrid("Grid has no data rows")
        for idx, row in enumerate(rows):
            if len(row) != len(header):
                raise MalformedGrid(
                    f"Row {idx + 1} has {len(row)} fields, expected {len(header)}"
                )
        cells = [["" if v is None else str(v) for v in row] for row in rows]
        frame = pd.DataFrame(cells, columns=range(len(header)), dtype=object)
        return cls(header, frame)

    @classmethod
    def from_frame(cls, df: pd.DataFrame):
        if df.isna().values.any():
            raise MalformedGrid("Grid has missing fields")
        return cls.from_rows(list(df.columns), df.values.tolist())

    # ---------- shape ----------
    @property
    def row_count(self) -> int:
        return len(self._frame)

    @property
    def column_count(self) -> int:
        return len(self._header)

    @property
    def header(self) -> list[str]:
        return list(self._header)

    @property
    def rows(self) -> list[list[str]]:
        return self._frame.values.tolist()

    def to_frame(self) -> pd.DataFrame:
        df = self._frame.copy()
        df.columns = list(self._header)
        return df

    # ---------- cells ----------
    def _check_row(self, row):
        if not 0 <= row < self.row_count:
            raise OutOfBounds(f"Row {row} out of range (0-{self.row_count - 1})")

    def _check_col(self, col):
        if not 0 <= col < self.column_count:
            raise OutOfBounds(
                f"Column {col} out of range (0-{self.column_count - 1})"
            )

    def cell_at(self, row: int, col: int) -> str:
        self._check_row(row)
        self._check_col(col)
        return self._frame.iat[row, col]

    def set_cell(self, row: int, col: int, value: str):
        self._check_row(row)
        self._check_col(col)
        self._frame.iat[row, col] = value

    # ---------- columns ----------
    def insert_column(self, index: int, name: str = ""):
        if not 0 <= index <= self.column_count:
            raise OutOfBounds(
                f"Column insert position {index} out of range (0-{self.column_count})"
            )
        frame = self._frame.copy()
        frame.insert(index, -1, "")
        frame.columns = range(self.column_count + 1)
        self._frame = frame.astype(object)
        self._header.insert(index, name)

    def insert_column_after(self, col: int, name: str = ""):
        self._check_col(col)
        self.insert_column(col + 1, name)

    def insert_column_before(self, col: int, name: str = ""):
        self._check_col(col)
        self.insert_column(col, name)

    def rename_column(self, index: int, name: str):
        self._check_col(index)
        self._header[index] = name

    def delete_column(self, index: int):
        self._check_col(index)
        if self.column_count == 1:
            raise LastRowOrColumn("Cannot delete the last column")
        frame = self._frame.drop(columns=self._frame.columns[index])
        frame.columns = range(self.column_count - 1)
        self._frame = frame
        del self._header[index]

    # ---------- rows ----------
    def insert_row(self, index: int):
        if not 0 <= index <= self.row_count:
            raise OutOfBounds(
                f"Row insert position {index} out of range (0-{self.row_count})"
            )
        blank = pd.DataFrame(
            [[""] * self.column_count], columns=self._frame.columns, dtype=object
        )
        parts = [self._frame.iloc[:index], blank, self._frame.iloc[index:]]
        self._frame = pd.concat([p for p in parts if len(p)], ignore_index=True)

    def delete_row(self, index: int):
        self._check_row(index)
        if self.row_count == 1:
            raise LastRowOrColumn("Cannot delete the last row")
        self._frame = self._frame.drop(self._frame.index[index]).reset_index(
            drop=True
        )
