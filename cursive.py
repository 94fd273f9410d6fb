import logging
import weakref
from typing import Dict, List, Optional

import colors
from event import NO_KEY, Callback, key as to_key
from printer import Printer
from stack_view import StackView
from terminal import CursesTerminal
from vec2 import Vec2
from view import Selector, View

log = logging.getLogger(__name__)


class InvalidScreenError(IndexError):
    """Raised for a screen id that does not exist. Programmer error, never caught."""


class Cursive:
    """Root of the application.

    Initializes the terminal on creation and restores it in `close()`, on
    leaving a `with` block, or when the controller is garbage collected.
    Holds several screens, one active at a time; each screen is a
    StackView. Populate it with layers and global callbacks, then call
    `run()`.
    """

    def __init__(self, terminal=None, config=None):
        self.config = dict(config or {})
        if terminal is None:
            terminal = CursesTerminal(escdelay=self.config.get("ESCDELAY"))
        self.terminal = terminal

        self.screens: List[StackView] = [StackView()]
        self.active_screen = 0
        self.running = True
        self.global_callbacks: Dict[int, Callback] = {}
        self.fps = 0

        self.terminal.initialize()
        # restores the terminal when the controller is collected or the
        # interpreter exits; runs at most once
        self._finalizer = weakref.finalize(self, self.terminal.shutdown)
        try:
            colors.load_legacy(self.terminal)
            self.set_fps(self.config.get("FPS", 0))
        except Exception:
            self.close()
            raise

    # ---------------- terminal bracket ----------------

    def close(self):
        self._finalizer()

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def set_fps(self, fps: int):
        """Redraw at least `fps` times per second even without input. 0 disables."""
        if not isinstance(fps, int) or fps < 0 or fps > 1000:
            raise ValueError(f"fps must be between 0 and 1000, got {fps!r}")
        self.fps = fps
        self.terminal.set_refresh_timeout(1000 // fps if fps else -1)

    # ---------------- screens ----------------

    @property
    def screen_count(self) -> int:
        return len(self.screens)

    @property
    def active_screen_id(self) -> int:
        return self.active_screen

    def screen(self) -> StackView:
        return self.screens[self.active_screen]

    def add_screen(self) -> int:
        res = len(self.screens)
        self.screens.append(StackView())
        log.debug("add_screen -> %d", res)
        return res

    def add_active_screen(self) -> int:
        res = self.add_screen()
        self.set_screen(res)
        return res

    def set_screen(self, screen_id: int):
        if (
            not isinstance(screen_id, int)
            or screen_id < 0
            or screen_id >= len(self.screens)
        ):
            raise InvalidScreenError(
                f"Tried to set an invalid screen ID: {screen_id}, "
                f"but only {len(self.screens)} screens present."
            )
        self.active_screen = screen_id
        log.debug("set_screen %d", screen_id)

    def add_layer(self, view: View):
        self.screen().add_layer(view)

    def pop_layer(self) -> Optional[View]:
        return self.screen().pop_layer()

    # ---------------- lookup ----------------

    def find(self, selector: Selector, expected_type=View):
        """View matching `selector` on the active screen, if it is an `expected_type`.

        A miss and a view of another type both give None.
        """
        found = self.screen().find(selector)
        if found is None or not isinstance(found, expected_type):
            return None
        return found

    def find_id(self, name: str, expected_type=View):
        return self.find(Selector.by_id(name), expected_type)

    # ---------------- events ----------------

    def add_global_callback(self, key, cb):
        """Run `cb(self)` when `key` is pressed and no view consumes it."""
        ch = to_key(key)
        self.global_callbacks[ch] = Callback.wrap(cb)
        log.debug("global callback for key %d", ch)

    def on_event(self, ch: int):
        result = self.screen().on_key_event(ch)
        if result.is_consumed:
            if result.callback is not None:
                log.debug("key %d consumed, running follow-up", ch)
                result.callback(self)
            return

        cb = self.global_callbacks.get(ch)
        if cb is None:
            return
        log.debug("key %d ignored by views, running global callback", ch)
        cb(self)

    # ---------------- frame ----------------

    def screen_size(self) -> Vec2:
        return self.terminal.screen_size()

    def layout(self):
        self.screen().layout(self.screen_size())

    def draw(self):
        printer = Printer(self.terminal, Vec2.zero(), self.screen_size())
        self.screen().draw(printer, True)
        self.terminal.refresh()

    def step(self):
        """One iteration: clear, layout, draw, wait for a key, route it."""
        self.terminal.clear()
        self.layout()
        self.draw()

        ch = self.terminal.poll_key()
        if ch == NO_KEY:
            return
        self.on_event(ch)

    def run(self):
        """Runs the event loop until `quit()` is called."""
        log.info("event loop started")
        try:
            while self.running:
                self.step()
        finally:
            log.info("event loop stopped")

    def quit(self):
        self.running = False
