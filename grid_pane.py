# ~/Apps/tabview/grid_pane.py
import curses
import os

from table_view import Rect, TableView


class CursesSurface:
    def __init__(self, win, attr_for):
        self.win = win
        self.attr_for = attr_for

    def put(self, x, y, text, width, style):
        if width <= 0:
            return
        try:
            self.win.addnstr(y, x, text, width, self.attr_for(style))
        except curses.error:
            # writing the bottom-right cell moves the cursor off-window
            pass


class GridPane:
    COLOR_CODES = {
        "red": curses.COLOR_RED,
        "yellow": curses.COLOR_YELLOW,
        "green": curses.COLOR_GREEN,
        "cyan": curses.COLOR_CYAN,
        "blue": curses.COLOR_BLUE,
        "magenta": curses.COLOR_MAGENTA,
        "white": curses.COLOR_WHITE,
    }

    def __init__(self, state, shrink_width):
        self.state = state
        self.table = TableView(state.data_source, state.styler, shrink_width=shrink_width)
        self.color_pairs = {}
        try:
            curses.start_color()
            curses.use_default_colors()
            for idx, (name, code) in enumerate(self.COLOR_CODES.items(), start=1):
                curses.init_pair(idx, code, -1)
                self.color_pairs[name] = idx
        except curses.error:
            self.color_pairs = {}

    def attr_for(self, style) -> int:
        attr = curses.A_NORMAL
        pair = self.color_pairs.get(style.color)
        if pair is not None:
            attr |= curses.color_pair(pair)
        if style.reverse:
            attr |= curses.A_REVERSE
        if style.bold:
            attr |= curses.A_BOLD
        return attr

    def title(self) -> str:
        if self.state.file_path:
            return os.path.basename(self.state.file_path)
        return "Table"

    def draw(self, win, follow=None):
        """Render the table; ``follow`` is asked after each pass whether the
        offset moved and another pass is needed."""
        h, w = win.getmaxyx()
        inner = Rect(1, 1, max(0, w - 2), max(0, h - 2))
        surface = CursesSurface(win, self.attr_for)
        while True:
            win.erase()
            try:
                win.box()
                label = f" {self.title()} "
                win.addnstr(0, 2, label, max(0, w - 4), curses.A_BOLD)
            except curses.error:
                pass
            self.table.render(surface, inner, self.state.view)
            if follow is None or not follow():
                break
        win.refresh()
