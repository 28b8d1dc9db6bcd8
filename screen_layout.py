import curses


class ScreenLayout:
    """Splits the terminal into the bordered table window and a status line."""

    STATUS_H = 1

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.table_win = None
        self.status_win = None
        self.build()

    def build(self):
        self.H, self.W = self.stdscr.getmaxyx()
        self.table_h = max(1, self.H - self.STATUS_H)

        self.table_win = curses.newwin(self.table_h, self.W, 0, 0)
        # neither pane owns the cursor
        self.table_win.leaveok(True)

        status_y = min(self.table_h, max(0, self.H - self.STATUS_H))
        self.status_win = curses.newwin(self.STATUS_H, self.W, status_y, 0)
        self.status_win.leaveok(True)

    def resize(self):
        curses.update_lines_cols()
        self.stdscr.clear()
        self.stdscr.refresh()
        self.build()
