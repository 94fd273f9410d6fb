from typing import Optional, Tuple

from event import EventResult
from vec2 import Vec2


class ViewPath:
    """Child indices leading from a root view down to a descendant."""

    __slots__ = ("path",)

    def __init__(self, path=()):
        indices = tuple(path)
        for idx in indices:
            if not isinstance(idx, int) or idx < 0:
                raise ValueError(f"Invalid path index: {idx!r}")
        self.path: Tuple[int, ...] = indices

    @classmethod
    def parse(cls, text: str) -> "ViewPath":
        """'0/2/1' -> ViewPath((0, 2, 1)); '' is the root."""
        text = (text or "").strip().strip("/")
        if not text:
            return cls()
        return cls(int(part) for part in text.split("/"))

    def is_empty(self) -> bool:
        return not self.path

    def head(self) -> Optional[int]:
        return self.path[0] if self.path else None

    def tail(self) -> "ViewPath":
        return ViewPath(self.path[1:])

    def __len__(self):
        return len(self.path)

    def __eq__(self, other):
        return isinstance(other, ViewPath) and self.path == other.path

    def __hash__(self):
        return hash(self.path)

    def __repr__(self):
        return f"ViewPath({'/'.join(str(i) for i in self.path)!r})"


class Selector:
    """How to locate a view: by declared id, or by structural position."""

    ID = "id"
    PATH = "path"

    __slots__ = ("kind", "value")

    def __init__(self, kind: str, value):
        if kind not in (self.ID, self.PATH):
            raise ValueError(f"Unknown selector kind: {kind!r}")
        self.kind = kind
        self.value = value

    @classmethod
    def by_id(cls, name: str) -> "Selector":
        return cls(cls.ID, name)

    @classmethod
    def by_path(cls, path) -> "Selector":
        if isinstance(path, str):
            path = ViewPath.parse(path)
        elif not isinstance(path, ViewPath):
            path = ViewPath(path)
        return cls(cls.PATH, path)

    @property
    def is_id(self) -> bool:
        return self.kind == self.ID

    @property
    def is_path(self) -> bool:
        return self.kind == self.PATH

    def descend(self) -> Optional["Selector"]:
        """Selector to hand to a child once this level consumed its part.

        Id selectors are passed down unchanged; path selectors drop their
        first index. An empty path has nothing left to descend.
        """
        if self.is_id:
            return self
        if self.value.is_empty():
            return None
        return Selector(self.PATH, self.value.tail())

    def __eq__(self, other):
        return (
            isinstance(other, Selector)
            and self.kind == other.kind
            and self.value == other.value
        )

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        return f"Selector.{'by_id' if self.is_id else 'by_path'}({self.value!r})"


class View:
    """Contract every widget satisfies.

    The controller and containers only ever talk to views through these
    methods. Defaults describe an inert, unfocusable leaf.
    """

    def layout(self, size: Vec2):
        """Fit to `size`. Called every frame, so it must not accumulate state."""

    def draw(self, printer, focused: bool):
        """Draw inside `printer`. `focused` is a visual hint only."""

    def on_key_event(self, ch: int) -> EventResult:
        return EventResult.IGNORED

    def take_focus(self) -> bool:
        return False

    def find(self, selector: Selector) -> Optional["View"]:
        if selector.is_path and selector.value.is_empty():
            return self
        return None

    def required_size(self, constraint: Vec2) -> Vec2:
        return constraint


class ViewWrapper(View):
    """View forwarding everything to a single child."""

    def __init__(self, view: View):
        self.view = view

    def get_view(self) -> View:
        return self.view

    def layout(self, size):
        self.view.layout(size)

    def draw(self, printer, focused):
        self.view.draw(printer, focused)

    def on_key_event(self, ch):
        return self.view.on_key_event(ch)

    def take_focus(self):
        return self.view.take_focus()

    def required_size(self, constraint):
        return self.view.required_size(constraint)

    def find(self, selector):
        if selector.is_path:
            path = selector.value
            if path.is_empty():
                return self
            # the only child sits at index 0
            if path.head() != 0:
                return None
        child = selector.descend()
        if child is None:
            return None
        return self.view.find(child)
