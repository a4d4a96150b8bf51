from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EditorMode(Enum):
    VISUAL = "visual"
    INSERT = "insert"
    HEADER_EDIT = "header_edit"

    @property
    def label(self) -> str:
        return {
            EditorMode.VISUAL: "VISUAL",
            EditorMode.INSERT: "INSERT",
            EditorMode.HEADER_EDIT: "HEADER",
        }[self]


# (from, to) pairs the session may take. Anything else is a programming error.
TRANSITIONS: frozenset[tuple[EditorMode, EditorMode]] = frozenset(
    {
        (EditorMode.VISUAL, EditorMode.INSERT),
        (EditorMode.VISUAL, EditorMode.HEADER_EDIT),
        (EditorMode.INSERT, EditorMode.VISUAL),
        (EditorMode.HEADER_EDIT, EditorMode.VISUAL),
    }
)


class IllegalTransition(RuntimeError):
    pass


def check_transition(current: EditorMode, target: EditorMode):
    if (current, target) not in TRANSITIONS:
        raise IllegalTransition(f"{current.label} -> {target.label} is not allowed")


@dataclass
class EditBuffer:
    """Text being composed for one cell (row set) or one header slot (row None).

    With replace_on_type the seed is shown and can be trimmed, but the first
    typed character discards it.
    """

    col: int
    row: Optional[int] = None
    text: str = ""
    replace_on_type: bool = False

    @property
    def targets_header(self) -> bool:
        return self.row is None

    def append(self, ch: str):
        if self.replace_on_type:
            self.text = ""
            self.replace_on_type = False
        self.text += ch

    def backspace(self):
        self.replace_on_type = False
        self.text = self.text[:-1]

    def commit(self, grid):
        if self.targets_header:
            grid.rename_column(self.col, self.text)
        else:
            grid.set_cell(self.row, self.col, self.text)
