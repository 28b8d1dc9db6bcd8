from dataclasses import dataclass


@dataclass(frozen=True)
class NoSelection:
    mode = "none"

    def highlights(self, row: int, col: int) -> bool:
        return False


@dataclass(frozen=True)
class CellSelection:
    row: int
    col: int
    mode = "cell"

    def highlights(self, row: int, col: int) -> bool:
        return row == self.row and col == self.col


@dataclass(frozen=True)
class RowSelection:
    row: int
    mode = "row"

    def highlights(self, row: int, col: int) -> bool:
        return row == self.row


@dataclass(frozen=True)
class ColSelection:
    col: int
    mode = "col"

    def highlights(self, row: int, col: int) -> bool:
        return col == self.col


NO_SELECTION = NoSelection()


class ViewState:
    """Scroll position, selection and the fields written back by each render.

    ``text_cut`` and ``last_cell`` are owned by the renderer; commands only
    read them (scroll-follow shifts ``last_cell`` together with ``offset``
    until the next render recomputes it).
    """

    def __init__(self):
        self.offset: tuple[int, int] = (0, 0)
        self.selection = NO_SELECTION
        self.text_cut: tuple[bool, bool] = (False, False)
        self.last_cell: tuple[int, int] = (0, 0)
        self.expanded_columns: set[int] = set()

    @property
    def mode(self) -> str:
        return self.selection.mode


class AppState:
    def __init__(self, data_source, styler, file_path=None):
        self.data_source = data_source
        self.styler = styler
        self.file_path = file_path
        self.view = ViewState()
        self.is_open = True

    def close(self):
        self.is_open = False

    @property
    def shape(self) -> tuple[int, int]:
        return self.data_source.shape()
