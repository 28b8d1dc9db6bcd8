import logging

from app_state import (
    NO_SELECTION,
    CellSelection,
    ColSelection,
    RowSelection,
)


logger = logging.getLogger(__name__)


class NavigationController:
    """Applies navigation commands to the view state.

    Bounds come from the most recent render (``offset``, ``last_cell`` and
    ``text_cut``), so commands never need to know the screen geometry.
    Every command saturates at the edges; nothing here raises.
    """

    COMMANDS = (
        "move_up",
        "move_down",
        "move_left",
        "move_right",
        "page_up",
        "page_down",
        "toggle_select_mode",
        "toggle_row_select",
        "toggle_col_select",
        "toggle_expansion",
        "close",
    )

    def __init__(self, state):
        self.state = state

    @property
    def view(self):
        return self.state.view

    def dispatch(self, command: str) -> bool:
        if command not in self.COMMANDS:
            logger.debug("ignoring unknown command %r", command)
            return False
        # the last render may have left the selection outside the window
        self._clamp_selection()
        getattr(self, command)()
        return True

    def follow_selection(self) -> bool:
        """Scroll one step toward a selection the last render left off-screen.

        Scroll-follow shifts the offset by one line, which is not enough when
        the incoming row or column is taller or wider than the one that left.
        Returns True when the offset moved and the table must be rendered
        again. Once the selection is visible it is clamped and False is
        returned.
        """
        off_row, off_col = self.view.offset
        last_row, last_col = self.view.last_cell
        sel = self.view.selection
        row = getattr(sel, "row", None)
        col = getattr(sel, "col", None)
        if row is not None and off_row < row and last_row < row:
            self.view.offset = (off_row + 1, off_col)
            return True
        if col is not None and off_col < col and last_col < col:
            self.view.offset = (off_row, off_col + 1)
            return True
        self._clamp_selection()
        return False

    # ---------- helpers ----------
    def _clamp_selection(self):
        off_row, off_col = self.view.offset
        last_row, last_col = self.view.last_cell
        last_row = max(off_row, last_row)
        last_col = max(off_col, last_col)
        sel = self.view.selection
        if isinstance(sel, CellSelection):
            row = min(max(sel.row, off_row), last_row)
            col = min(max(sel.col, off_col), last_col)
            if (row, col) != (sel.row, sel.col):
                self.view.selection = CellSelection(row, col)
        elif isinstance(sel, RowSelection):
            row = min(max(sel.row, off_row), last_row)
            if row != sel.row:
                self.view.selection = RowSelection(row)
        elif isinstance(sel, ColSelection):
            col = min(max(sel.col, off_col), last_col)
            if col != sel.col:
                self.view.selection = ColSelection(col)

    def _scroll_rows(self, delta: int):
        rows, _ = self.state.shape
        off_row, off_col = self.view.offset
        if delta < 0:
            if off_row > 0:
                self.view.offset = (off_row - 1, off_col)
            return
        row_cut, _ = self.view.text_cut
        last_row, _ = self.view.last_cell
        more_below = row_cut or last_row < rows - 1
        if more_below and off_row + 1 < rows:
            self.view.offset = (off_row + 1, off_col)

    def _scroll_cols(self, delta: int):
        _, cols = self.state.shape
        off_row, off_col = self.view.offset
        if delta < 0:
            if off_col > 0:
                self.view.offset = (off_row, off_col - 1)
            return
        _, col_cut = self.view.text_cut
        _, last_col = self.view.last_cell
        more_right = col_cut or last_col < cols - 1
        if more_right and off_col + 1 < cols:
            self.view.offset = (off_row, off_col + 1)

    def _step_row(self, row: int, delta: int) -> int:
        rows, _ = self.state.shape
        target = row + delta
        if target < 0 or target >= rows:
            return row
        off_row, off_col = self.view.offset
        last_row, last_col = self.view.last_cell
        if off_row <= target <= last_row:
            return target
        # scroll-follow: keep the selection at the same place on screen
        self.view.offset = (off_row + delta, off_col)
        self.view.last_cell = (last_row + delta, last_col)
        return target

    def _step_col(self, col: int, delta: int) -> int:
        _, cols = self.state.shape
        target = col + delta
        if target < 0 or target >= cols:
            return col
        off_row, off_col = self.view.offset
        last_row, last_col = self.view.last_cell
        if off_col <= target <= last_col:
            return target
        self.view.offset = (off_row, off_col + delta)
        self.view.last_cell = (last_row, last_col + delta)
        return target

    def _move_vertical(self, delta: int):
        self._clamp_selection()
        sel = self.view.selection
        if isinstance(sel, CellSelection):
            self.view.selection = CellSelection(self._step_row(sel.row, delta), sel.col)
        elif isinstance(sel, RowSelection):
            self.view.selection = RowSelection(self._step_row(sel.row, delta))
        else:
            self._scroll_rows(delta)

    def _move_horizontal(self, delta: int):
        self._clamp_selection()
        sel = self.view.selection
        if isinstance(sel, CellSelection):
            self.view.selection = CellSelection(sel.row, self._step_col(sel.col, delta))
        elif isinstance(sel, ColSelection):
            self.view.selection = ColSelection(self._step_col(sel.col, delta))
        else:
            self._scroll_cols(delta)

    def _page_size(self) -> int:
        return max(0, self.view.last_cell[0] - self.view.offset[0])

    # ---------- commands ----------
    def move_up(self):
        self._move_vertical(-1)

    def move_down(self):
        self._move_vertical(1)

    def move_left(self):
        self._move_horizontal(-1)

    def move_right(self):
        self._move_horizontal(1)

    def page_up(self):
        for _ in range(self._page_size()):
            self.move_up()

    def page_down(self):
        for _ in range(self._page_size()):
            self.move_down()

    def toggle_select_mode(self):
        if self.view.selection is not NO_SELECTION:
            self.view.selection = NO_SELECTION
            return
        if self.state.shape[0] == 0:
            return
        off_row, off_col = self.view.offset
        self.view.selection = CellSelection(off_row, off_col)

    def toggle_row_select(self):
        sel = self.view.selection
        if isinstance(sel, RowSelection):
            self.view.selection = NO_SELECTION
            return
        if self.state.shape[0] == 0:
            return
        row = sel.row if isinstance(sel, CellSelection) else self.view.offset[0]
        self.view.selection = RowSelection(row)

    def toggle_col_select(self):
        sel = self.view.selection
        if isinstance(sel, ColSelection):
            self.view.selection = NO_SELECTION
            return
        if self.state.shape[0] == 0:
            return
        col = sel.col if isinstance(sel, CellSelection) else self.view.offset[1]
        self.view.selection = ColSelection(col)

    def toggle_expansion(self):
        sel = self.view.selection
        expanded = self.view.expanded_columns
        if isinstance(sel, (CellSelection, ColSelection)):
            if sel.col in expanded:
                expanded.discard(sel.col)
            else:
                expanded.add(sel.col)
            return

        off_col = self.view.offset[1]
        last_col = self.view.last_cell[1]
        if all(c in expanded for c in range(off_col, last_col)):
            expanded.clear()
        else:
            expanded.update(range(self.state.shape[1]))

    def close(self):
        self.state.close()
