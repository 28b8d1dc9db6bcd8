# ~/Apps/tabview/orchestrator.py
import curses
import logging

from grid_pane import GridPane
from key_bindings import build_key_map
from navigation import NavigationController
from screen_layout import ScreenLayout
from status_bar import build_context, render_status


logger = logging.getLogger(__name__)

CTRL_C = 3
CTRL_X = 24


class Orchestrator:
    def __init__(self, stdscr, app_state, config):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)

        self.state = app_state
        self.layout = ScreenLayout(stdscr)
        self.grid = GridPane(app_state, shrink_width=config["SHRINK_WIDTH"])
        self.nav = NavigationController(app_state)
        self.key_map = build_key_map(config.get("KEY_BINDINGS"))

    # ---------------- UI ----------------

    def redraw(self):
        self.grid.draw(self.layout.table_win, follow=self.nav.follow_selection)

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        text = render_status(build_context(self.state), w)
        try:
            sw.addnstr(0, 0, text, w, curses.A_REVERSE)
        except curses.error:
            pass
        sw.refresh()

    def handle_key(self, ch):
        if ch in (CTRL_C, CTRL_X):
            self.nav.close()
            return
        if ch == curses.KEY_RESIZE:
            self.layout.resize()
            return
        command = self.key_map.get(ch)
        if command is None:
            return
        logger.debug("key %d -> %s", ch, command)
        self.nav.dispatch(command)

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()

        while self.state.is_open:
            self.redraw()
            ch = self.stdscr.getch()
            if ch == -1:
                continue
            self.handle_key(ch)
