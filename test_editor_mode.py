import unittest
from types import SimpleNamespace

from editor_mode import EditBuffer, EditorMode, IllegalTransition, check_transition
from editor_session import EditorSession
from grid_model import GridModel, MalformedGrid


class TransitionTableTests(unittest.TestCase):
    def test_allowed_transitions(self):
        check_transition(EditorMode.VISUAL, EditorMode.INSERT)
        check_transition(EditorMode.VISUAL, EditorMode.HEADER_EDIT)
        check_transition(EditorMode.INSERT, EditorMode.VISUAL)
        check_transition(EditorMode.HEADER_EDIT, EditorMode.VISUAL)

    def test_edit_modes_cannot_switch_directly(self):
        with self.assertRaises(IllegalTransition):
            check_transition(EditorMode.INSERT, EditorMode.HEADER_EDIT)
        with self.assertRaises(IllegalTransition):
            check_transition(EditorMode.VISUAL, EditorMode.VISUAL)


class EditBufferTests(unittest.TestCase):
    def test_append_and_backspace(self):
        buf = EditBuffer(col=0, row=0, text="ab")
        buf.append("c")
        buf.backspace()
        buf.backspace()
        self.assertEqual(buf.text, "a")
        buf.backspace()
        buf.backspace()
        self.assertEqual(buf.text, "")

    def test_replace_on_type_discards_seed_once(self):
        buf = EditBuffer(col=1, text="age", replace_on_type=True)
        buf.append("y")
        buf.append("r")
        self.assertEqual(buf.text, "yr")

    def test_backspace_keeps_seed_for_editing(self):
        buf = EditBuffer(col=1, text="age", replace_on_type=True)
        buf.backspace()
        buf.append("s")
        self.assertEqual(buf.text, "ags")

    def test_commit_targets_cell_or_header(self):
        grid = GridModel.from_rows(["a", "b"], [["1", "2"]])
        EditBuffer(col=1, row=0, text="x").commit(grid)
        EditBuffer(col=0, text="alpha").commit(grid)
        self.assertEqual(grid.rows, [["1", "x"]])
        self.assertEqual(grid.header, ["alpha", "b"])


class EditorSessionTests(unittest.TestCase):
    def _session(self):
        grid = GridModel.from_rows(["name", "age"], [["Alice", "30"]])
        return EditorSession(grid, "people.csv")

    def test_starts_in_visual_at_origin_without_buffer(self):
        session = self._session()
        self.assertIs(session.mode, EditorMode.VISUAL)
        self.assertEqual(session.cursor.position, (0, 0))
        self.assertIsNone(session.edit_buffer)
        self.assertIsNone(session.buffer_text)

    def test_insert_is_seeded_with_cell_text(self):
        session = self._session()
        session.enter_insert()
        self.assertIs(session.mode, EditorMode.INSERT)
        self.assertEqual(session.buffer_text, "Alice")

    def test_insert_without_seed_starts_empty(self):
        session = self._session()
        session.enter_insert(seed=False)
        self.assertEqual(session.buffer_text, "")

    def test_commit_writes_and_discards_buffer(self):
        session = self._session()
        session.cursor.move_to(0, 1)
        session.enter_insert()
        session.edit_buffer.append("1")
        session.commit_edit()
        self.assertEqual(session.grid.cell_at(0, 1), "301")
        self.assertIsNone(session.edit_buffer)
        self.assertIs(session.mode, EditorMode.VISUAL)
        self.assertTrue(session.dirty)

    def test_header_edit_addresses_column_only(self):
        session = self._session()
        session.cursor.move_to(0, 1)
        session.enter_header_edit()
        self.assertTrue(session.edit_buffer.targets_header)
        self.assertEqual(session.buffer_text, "age")

    def test_commit_from_visual_is_illegal(self):
        session = self._session()
        with self.assertRaises(IllegalTransition):
            session.commit_edit()

    def test_entering_insert_twice_is_illegal(self):
        session = self._session()
        session.enter_insert()
        with self.assertRaises(IllegalTransition):
            session.enter_header_edit()

    def test_empty_grid_refuses_to_start(self):
        grid = SimpleNamespace(row_count=0, column_count=2, rows=[])
        with self.assertRaises(MalformedGrid):
            EditorSession(grid)

    def test_ragged_grid_refuses_to_start(self):
        grid = SimpleNamespace(row_count=1, column_count=2, rows=[["only one"]])
        with self.assertRaises(MalformedGrid):
            EditorSession(grid)

    def test_request_quit(self):
        session = self._session()
        session.request_quit(save=True)
        self.assertTrue(session.quit_requested)
        self.assertTrue(session.save_requested)


if __name__ == "__main__":
    unittest.main()
