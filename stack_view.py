import logging
from typing import List, Optional

from event import EventResult
from vec2 import Vec2
from view import View

log = logging.getLogger(__name__)


class Layer:
    __slots__ = ("view", "last_size")

    def __init__(self, view: View):
        self.view = view
        self.last_size = Vec2.zero()

    def __repr__(self):
        return f"Layer({self.view!r}, last_size={self.last_size})"


class StackView(View):
    """Layers of views drawn bottom to top.

    Only the top layer receives input and the focus hint; the ones below
    stay visible but unreachable until the layers above them are popped.
    """

    def __init__(self):
        self.layers: List[Layer] = []

    def __len__(self):
        return len(self.layers)

    @property
    def layer_count(self) -> int:
        return len(self.layers)

    def add_layer(self, view: View):
        if not isinstance(view, View):
            raise TypeError(f"Expected a View, got {type(view).__name__}")
        self.layers.append(Layer(view))
        log.debug("add_layer %r (depth %d)", view, len(self.layers))

    def pop_layer(self) -> Optional[View]:
        if not self.layers:
            return None
        layer = self.layers.pop()
        log.debug("pop_layer %r (depth %d)", layer.view, len(self.layers))
        return layer.view

    def top_view(self) -> Optional[View]:
        return self.layers[-1].view if self.layers else None

    def layout(self, size):
        size = Vec2.of(size)
        for layer in self.layers:
            layer.view.layout(size)
            layer.last_size = size

    def draw(self, printer, focused):
        last = len(self.layers) - 1
        for i, layer in enumerate(self.layers):
            layer.view.draw(printer, focused and i == last)

    def on_key_event(self, ch):
        if not self.layers:
            return EventResult.IGNORED
        return self.layers[-1].view.on_key_event(ch)

    def take_focus(self):
        return bool(self.layers) and self.layers[-1].view.take_focus()

    def find(self, selector):
        if selector.is_path:
            path = selector.value
            if path.is_empty():
                return self
            idx = path.head()
            if idx >= len(self.layers):
                return None
            return self.layers[idx].view.find(selector.descend())

        for layer in reversed(self.layers):
            found = layer.view.find(selector)
            if found is not None:
                return found
        return None

    def required_size(self, constraint):
        constraint = Vec2.of(constraint)
        size = Vec2.zero()
        for layer in self.layers:
            size = size.max(layer.view.required_size(constraint))
        return size
