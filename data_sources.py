import logging
import unicodedata

import pandas as pd

from default_df_initializer import DefaultDfInitializer
from file_type_handler import DataSourceError, FileTypeHandler


logger = logging.getLogger(__name__)

TAB_STOP = 8

__all__ = [
    "DataSourceError",
    "DemoDataSource",
    "FrameDataSource",
    "cell_text",
    "char_width",
    "fit_text",
    "line_width",
    "load_data_source",
    "text_width",
]


def cell_text(value) -> str:
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        # list-like cells (parquet arrays) are not scalars
        pass
    return str(value)


def char_width(ch: str, col: int) -> int:
    """Terminal columns taken by ``ch`` when it starts at column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def line_width(line: str) -> int:
    col = 0
    for ch in line:
        col += char_width(ch, col)
    return col


def text_width(text: str) -> int:
    lines = text.splitlines()
    if not lines:
        return 0
    return max(line_width(line) for line in lines)


def fit_text(text: str, width: int) -> str:
    """Clip one line to ``width`` columns and pad it with spaces.

    Tabs become spaces so the terminal never moves past the cell, and a
    wide character that would straddle the edge is dropped.
    """
    out = []
    col = 0
    for ch in text:
        w = char_width(ch, col)
        if col + w > width:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
    return "".join(out) + " " * max(0, width - col)


class FrameDataSource:
    """Read-only table over a DataFrame.

    Cells are converted to display text once, and the natural width of each
    column (its widest line) is computed up front. Both stay fixed for the
    lifetime of the source.
    """

    def __init__(self, df: pd.DataFrame, widths: list[int] | None = None):
        if df is None:
            df = pd.DataFrame()
        self._cells = df.map(cell_text) if len(df.columns) else df
        self.columns = [str(c) for c in df.columns]

        if len(df) == 0:
            self._shape = (0, 0)
        else:
            self._shape = (len(df), len(df.columns))

        if widths is not None:
            if len(widths) != len(df.columns):
                raise DataSourceError(
                    f"Expected {len(df.columns)} column widths, got {len(widths)}"
                )
            self._widths = [int(w) for w in widths]
        elif self._shape[0] == 0:
            self._widths = []
        else:
            measured = self._cells.map(text_width).max(axis=0)
            self._widths = [int(w) for w in measured.tolist()]

    def value(self, row: int, col: int) -> str:
        return self._cells.iat[row, col]

    def shape(self) -> tuple[int, int]:
        return self._shape

    def max_widths(self) -> list[int]:
        return self._widths


class DemoDataSource(FrameDataSource):
    def __init__(self):
        init = DefaultDfInitializer()
        super().__init__(init.create(), widths=init.widths())


def load_data_source(path: str, header: bool = True) -> FrameDataSource:
    try:
        df = FileTypeHandler(path, header=header).load()
    except DataSourceError:
        logger.error("failed to load %s", path, exc_info=True)
        raise
    source = FrameDataSource(df)
    logger.info("loaded %s with shape %s", path, source.shape())
    return source
