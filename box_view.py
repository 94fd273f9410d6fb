from typing import Optional

from vec2 import Vec2, centered
from view import ViewWrapper


class BoxView(ViewWrapper):
    """Centers its child in the available area, at a fixed or natural size.

    With `size=None` the child gets what it asks for through
    `required_size`. `border=True` draws a frame around the child, one cell
    on every side.
    """

    def __init__(self, view, size=None, border: bool = False):
        super().__init__(view)
        self.fixed: Optional[Vec2] = Vec2.of(size) if size is not None else None
        self.border = border
        self.outer = Vec2.zero()
        self.offset = Vec2.zero()

    def _frame(self) -> Vec2:
        return Vec2(2, 2) if self.border else Vec2.zero()

    def required_size(self, constraint):
        constraint = Vec2.of(constraint)
        if self.fixed is not None:
            return self.fixed.min(constraint)
        frame = self._frame()
        inner = self.view.required_size(constraint - frame)
        return (inner + frame).min(constraint)

    def layout(self, size):
        size = Vec2.of(size)
        self.outer = self.required_size(size)
        self.offset = centered(self.outer, size)
        self.view.layout(self.outer - self._frame())

    def draw(self, printer, focused):
        if printer.is_empty():
            return
        box = printer.sub_printer(self.offset, self.outer)
        if box.is_empty():
            return
        # occlude whatever the layers below drew here
        box.fill(" ")
        if self.border:
            box.print_box((0, 0), box.size)
            box = box.sub_printer((1, 1), box.size - Vec2(2, 2))
        self.view.draw(box, focused)
