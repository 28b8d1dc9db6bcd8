import logging
from typing import NamedTuple

from data_sources import fit_text


logger = logging.getLogger(__name__)

SHRINK_WIDTH = 24


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


class BufferSurface:
    """In-memory character grid; the headless counterpart of CursesSurface."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.chars = [[" "] * width for _ in range(height)]
        self.styles = [[None] * width for _ in range(height)]

    def put(self, x, y, text, width, style):
        if y < 0 or y >= self.height:
            return
        for i, ch in enumerate(text[:width]):
            cx = x + i
            if 0 <= cx < self.width:
                self.chars[y][cx] = ch
                self.styles[y][cx] = style

    def line(self, y: int) -> str:
        return "".join(self.chars[y]).rstrip()

    def lines(self) -> list[str]:
        return [self.line(y) for y in range(self.height)]

    def style_at(self, x: int, y: int):
        return self.styles[y][x]

    def snapshot(self):
        return (
            tuple(tuple(row) for row in self.chars),
            tuple(tuple(row) for row in self.styles),
        )


class TableView:
    """Lays out one frame of the table into a rectangle.

    The data source and styler are only borrowed for the duration of a
    render. Besides drawing, a render writes ``text_cut`` and ``last_cell``
    back into the view state; navigation uses them as its bounds for the
    next command.
    """

    def __init__(self, data_source, styler, shrink_width: int = SHRINK_WIDTH):
        self.data_source = data_source
        self.styler = styler
        self.shrink_width = max(1, shrink_width)

    def effective_width(self, col: int, natural: int, expanded_columns) -> int:
        width = natural
        if col not in expanded_columns and width > self.shrink_width:
            width = self.shrink_width
        return max(1, width)

    def render(self, surface, rect: Rect, state) -> None:
        rows, cols = self.data_source.shape()
        state.text_cut = (False, False)
        state.last_cell = (0, 0)
        if rows == 0 or cols == 0 or rect.width <= 0 or rect.height <= 0:
            if rows > 0:
                state.last_cell = state.offset
            return

        off_row, off_col = state.offset
        widths = self.data_source.max_widths()[off_col:]
        row_spacing = self.styler.row_spacing()
        col_spacing = self.styler.col_spacing()
        selection = state.selection
        expanded = state.expanded_columns

        row_cut = col_cut = False
        last_row = last_col = 0
        y = rect.y
        for row in range(off_row, rows):
            height = 1
            x = rect.x
            last_row = row
            for col, natural in zip(range(off_col, cols), widths):
                width = self.effective_width(col, natural, expanded)
                if selection.highlights(row, col):
                    style = self.styler.highlight(row, col)
                else:
                    style = self.styler.normal(row, col)

                lines = self.data_source.value(row, col).splitlines() or [""]
                last_col = col
                for off, text in enumerate(lines):
                    if y + off >= rect.bottom:
                        row_cut = True
                        break
                    if x + width > rect.right:
                        fit = rect.right - x
                        surface.put(x, y + off, fit_text(text, fit), fit, style)
                        col_cut = True
                    else:
                        surface.put(x, y + off, fit_text(text, width), width, style)
                height = max(height, len(lines))

                x += width + col_spacing
                if x >= rect.right and col != cols - 1:
                    break

            y += height + row_spacing
            if y >= rect.bottom and row != rows - 1:
                # rows remain below the viewport
                row_cut = True
                break

        state.text_cut = (row_cut, col_cut)
        state.last_cell = (last_row, last_col)
        logger.debug(
            "render offset=%s last_cell=%s text_cut=%s",
            state.offset,
            state.last_cell,
            state.text_cut,
        )
