from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Style:
    color: str
    reverse: bool = False
    bold: bool = False


class DefaultStyler:
    """Colors columns in a repeating rainbow; highlights by reversing."""

    COLORS = ("red", "yellow", "green", "cyan", "blue", "magenta")

    def __init__(self, row_spacing: int = 1, col_spacing: int = 1):
        self._row_spacing = max(0, int(row_spacing))
        self._col_spacing = max(0, int(col_spacing))

    def normal(self, row: int, col: int) -> Style:
        return Style(self.COLORS[col % len(self.COLORS)])

    def highlight(self, row: int, col: int) -> Style:
        return replace(self.normal(row, col), reverse=True)

    def row_spacing(self) -> int:
        return self._row_spacing

    def col_spacing(self) -> int:
        return self._col_spacing
