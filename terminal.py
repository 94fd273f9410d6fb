import curses
import locale
import logging
import os

from vec2 import Vec2

log = logging.getLogger(__name__)


class CursesTerminal:
    """Terminal driver on top of curses.

    `initialize()` puts the terminal in raw-ish mode, `shutdown()` gives it
    back. Failures in either are not retried.
    """

    ESCDELAY_FALLBACK = 25

    def __init__(self, escdelay: int | None = None):
        self.escdelay = escdelay
        self.stdscr = None

    @property
    def active(self) -> bool:
        return self.stdscr is not None

    def initialize(self):
        # Make ESC snappy; curses reads this when initscr runs. A configured
        # delay wins over the environment, otherwise the environment wins.
        if self.escdelay is None:
            os.environ.setdefault("ESCDELAY", str(self.ESCDELAY_FALLBACK))
        else:
            os.environ["ESCDELAY"] = str(self.escdelay)
        locale.setlocale(locale.LC_ALL, "")

        self.stdscr = curses.initscr()
        try:
            curses.noecho()
            curses.cbreak()
            self.stdscr.keypad(True)
        except curses.error:
            self.shutdown()
            raise
        try:
            curses.start_color()
        except curses.error:
            # monochrome terminal; init_pair and color_attr degrade to attr 0
            log.info("terminal has no color support")
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        log.info("terminal initialized (%dx%d)", *self.screen_size())

    def shutdown(self):
        if self.stdscr is None:
            return
        try:
            self.stdscr.keypad(False)
            curses.nocbreak()
            curses.echo()
        finally:
            self.stdscr = None
            curses.endwin()
            log.info("terminal restored")

    def set_refresh_timeout(self, ms: int):
        """Milliseconds `poll_key` waits; negative blocks forever."""
        self.stdscr.timeout(ms)

    def screen_size(self) -> Vec2:
        h, w = self.stdscr.getmaxyx()
        return Vec2(w, h)

    def poll_key(self) -> int:
        return self.stdscr.getch()

    def clear(self):
        self.stdscr.erase()

    def refresh(self):
        self.stdscr.refresh()

    def init_pair(self, pair_id: int, fg: int, bg: int):
        try:
            curses.init_pair(pair_id, fg, bg)
        except curses.error:
            # monochrome terminals; everything draws with attr 0
            log.debug("init_pair(%d) not supported", pair_id)

    def color_attr(self, pair_id: int) -> int:
        try:
            return curses.color_pair(pair_id)
        except curses.error:
            return 0

    def set_background(self, pair_id: int):
        self.stdscr.bkgd(" ", self.color_attr(pair_id))

    def print_at(self, y: int, x: int, text: str, attr: int = 0):
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            # writing the bottom-right cell moves the cursor off-screen
            pass
