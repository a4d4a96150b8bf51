import csv
import os

import pandas as pd

from default_grid_initializer import DefaultGridInitializer
from grid_model import GridModel, MalformedGrid


class CsvFileHandler:
    """Reads a CSV file into a GridModel and writes it back."""

    def __init__(self, path: str):
        self.path = path
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

        if self.ext != ".csv":
            raise ValueError("Unsupported file type (use .csv)")

    def load(self) -> GridModel:
        if not os.path.exists(self.path) or os.path.getsize(self.path) == 0:
            return self._default_grid()

        try:
            # header=None keeps duplicate and empty header names as written
            df = pd.read_csv(
                self.path,
                header=None,
                dtype=str,
                keep_default_na=False,
                na_filter=False,
            )
        except pd.errors.EmptyDataError:
            return self._default_grid()
        except pd.errors.ParserError as exc:
            raise MalformedGrid(f"Malformed CSV: {exc}") from exc

        if df.empty:
            return self._default_grid()
        if df.isna().values.any():
            raise MalformedGrid("Malformed CSV: rows have differing field counts")
        self._check_field_counts()

        header = df.iloc[0].tolist()
        rows = df.iloc[1:].values.tolist()
        if not rows:
            rows = [[""] * len(header)]
        return GridModel.from_rows(header, rows)

    def save(self, grid: GridModel) -> None:
        grid.to_frame().to_csv(self.path, index=False)

    def _check_field_counts(self) -> None:
        # the parser pads short rows instead of rejecting them
        width = None
        with open(self.path, newline="", encoding="utf-8") as f:
            for record in csv.reader(f):
                if not record:
                    continue
                if width is None:
                    width = len(record)
                elif len(record) != width:
                    raise MalformedGrid(
                        f"Malformed CSV: expected {width} fields, saw {len(record)}"
                    )

    def _default_grid(self) -> GridModel:
        return DefaultGridInitializer().create()
