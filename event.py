import curses
from typing import Callable, Optional

# timed poll with nothing pressed
NO_KEY = -1

KEY_ESC = 27
KEY_UP = curses.KEY_UP
KEY_DOWN = curses.KEY_DOWN
KEY_PAGE_UP = curses.KEY_PPAGE
KEY_PAGE_DOWN = curses.KEY_NPAGE
KEY_HOME = curses.KEY_HOME
KEY_END = curses.KEY_END


def key(value) -> int:
    """Key code for a one-character string; ints pass through unchanged."""
    if isinstance(value, int):
        return value
    if isinstance(value, str) and len(value) == 1:
        return ord(value)
    raise ValueError(f"Not a key: {value!r}")


class Callback:
    """Deferred action applied to the controller.

    Immutable once built so one instance can be bound to several keys.
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable):
        if isinstance(fn, Callback):
            fn = fn._fn
        if not callable(fn):
            raise TypeError(f"Callback needs a callable, got {type(fn).__name__}")
        object.__setattr__(self, "_fn", fn)

    def __setattr__(self, name, value):
        raise AttributeError("Callback is immutable")

    def __call__(self, root):
        self._fn(root)

    def __repr__(self):
        return f"Callback({getattr(self._fn, '__name__', self._fn)!r})"

    @classmethod
    def wrap(cls, fn) -> Optional["Callback"]:
        if fn is None or isinstance(fn, Callback):
            return fn
        return cls(fn)


class EventResult:
    """Outcome of offering a key to a view: ignored, or consumed with an optional follow-up."""

    __slots__ = ("consumed", "callback")

    IGNORED: "EventResult"

    def __init__(self, consumed: bool, callback: Optional[Callback] = None):
        if callback is not None and not consumed:
            raise ValueError("An ignored event cannot carry a callback")
        object.__setattr__(self, "consumed", bool(consumed))
        object.__setattr__(self, "callback", Callback.wrap(callback))

    def __setattr__(self, name, value):
        # IGNORED and CONSUMED are shared by every view
        raise AttributeError("EventResult is immutable")

    @classmethod
    def consumed_with(cls, callback=None) -> "EventResult":
        return cls(True, callback)

    @property
    def is_consumed(self) -> bool:
        return self.consumed

    @property
    def is_ignored(self) -> bool:
        return not self.consumed

    def __eq__(self, other):
        if not isinstance(other, EventResult):
            return NotImplemented
        return self.consumed == other.consumed and self.callback is other.callback

    def __hash__(self):
        return hash((self.consumed, id(self.callback)))

    def __repr__(self):
        if not self.consumed:
            return "EventResult.IGNORED"
        if self.callback is None:
            return "EventResult.CONSUMED"
        return f"EventResult.consumed_with({self.callback!r})"


EventResult.IGNORED = EventResult(False)
EventResult.CONSUMED = EventResult(True)
