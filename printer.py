from wcwidth import wcwidth

from vec2 import Vec2


def char_width(ch: str) -> int:
    w = wcwidth(ch)
    # control and combining characters report -1/0; never draw them as cells
    return w if w > 0 else 0


def text_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def clip_to_width(text: str, width: int) -> str:
    """Longest prefix of `text` that fits in `width` cells; wide glyphs are not split."""
    if width <= 0:
        return ""
    used = 0
    out = []
    for ch in text:
        w = char_width(ch)
        if w == 0:
            continue
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out)


class Printer:
    """Drawing view into the terminal, bounded to `offset`/`size`.

    Coordinates given to the print methods are relative to `offset`;
    anything falling outside `size` is dropped.
    """

    def __init__(self, terminal, offset=Vec2.zero(), size=Vec2.zero(), attr=0):
        self.terminal = terminal
        self.offset = Vec2.of(offset)
        self.size = Vec2.of(size)
        self.attr = attr

    def is_empty(self) -> bool:
        return self.size.is_empty()

    def print(self, pos, text: str, attr=None):
        pos = Vec2.of(pos)
        if self.is_empty() or pos.y >= self.size.y or pos.x >= self.size.x:
            return
        clipped = clip_to_width(text, self.size.x - pos.x)
        if not clipped:
            return
        self.terminal.print_at(
            self.offset.y + pos.y,
            self.offset.x + pos.x,
            clipped,
            self.attr if attr is None else attr,
        )

    def print_hline(self, start, length: int, ch: str = "-", attr=None):
        start = Vec2.of(start)
        length = min(length, self.size.x - start.x)
        if length > 0:
            self.print(start, ch * length, attr)

    def print_vline(self, start, length: int, ch: str = "|", attr=None):
        start = Vec2.of(start)
        length = min(length, self.size.y - start.y)
        for i in range(max(0, length)):
            self.print((start.x, start.y + i), ch, attr)

    def print_box(self, start, size, attr=None):
        start = Vec2.of(start)
        size = Vec2.of(size)
        if size.x < 2 or size.y < 2:
            return
        right = start.x + size.x - 1
        bottom = start.y + size.y - 1

        self.print(start, "+", attr)
        self.print((right, start.y), "+", attr)
        self.print((start.x, bottom), "+", attr)
        self.print((right, bottom), "+", attr)

        self.print_hline((start.x + 1, start.y), size.x - 2, "-", attr)
        self.print_hline((start.x + 1, bottom), size.x - 2, "-", attr)
        self.print_vline((start.x, start.y + 1), size.y - 2, "|", attr)
        self.print_vline((right, start.y + 1), size.y - 2, "|", attr)

    def fill(self, ch: str = " ", attr=None):
        for row in range(self.size.y):
            self.print_hline((0, row), self.size.x, ch, attr)

    def with_color(self, pair_id: int) -> "Printer":
        """Same region, drawing with the given color pair."""
        return Printer(
            self.terminal, self.offset, self.size, self.terminal.color_attr(pair_id)
        )

    def sub_printer(self, offset, size) -> "Printer":
        """Printer for a sub-region, clipped to this printer's bounds."""
        offset = Vec2.of(offset).min(self.size)
        size = Vec2.of(size).min(self.size - offset)
        return Printer(self.terminal, self.offset + offset, size, self.attr)
