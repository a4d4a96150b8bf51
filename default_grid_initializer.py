from grid_model import GridModel


class DefaultGridInitializer:
    def create(self) -> GridModel:
        cols = ["col_a", "col_b", "col_c"]
        return GridModel.from_rows(cols, [[""] * len(cols)])
