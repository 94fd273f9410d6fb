from typing import List

from event import EventResult, KEY_DOWN, KEY_END, KEY_HOME, KEY_PAGE_DOWN, KEY_PAGE_UP, KEY_UP
from printer import char_width, text_width
from vec2 import Vec2, div_up
from view import View


def wrap_lines(content: str, width: int) -> List[str]:
    """Word-wrap `content` to `width` cells.

    Leading spaces of a paragraph stay on its first row. Words wider than a
    row get hard-split.
    """
    if width <= 0:
        return []
    rows = []
    for paragraph in content.split("\n"):
        if paragraph == "":
            rows.append("")
            continue
        body = paragraph.lstrip(" ")
        indent = len(paragraph) - len(body)
        current = ""
        current_w = 0
        for word in body.split(" "):
            word_w = text_width(word)
            if current and current_w + 1 + word_w <= width:
                current += " " + word
                current_w += 1 + word_w
                continue
            if current or current_w:
                rows.append(current)
                current, current_w = "", 0
            if indent and indent + word_w <= width:
                # indentation only on the paragraph's first row
                word, word_w = " " * indent + word, indent + word_w
            indent = 0
            while word_w > width:
                head, head_w = _split_at_width(word, width)
                rows.append(head)
                word = word[len(head):]
                word_w -= head_w
            current, current_w = word, word_w
        rows.append(current)
    return rows


def _split_at_width(word: str, width: int):
    used = 0
    for idx, ch in enumerate(word):
        w = char_width(ch)
        if used + w > width:
            # a single glyph wider than the row still has to go somewhere
            if idx == 0:
                return word[:1], w
            return word[:idx], used
        used += w
    return word, used


class TextView(View):
    """Read-only block of text, word-wrapped, scrollable when taller than its area."""

    def __init__(self, content: str = ""):
        self.content = content
        self.rows: List[str] = []
        self.size = Vec2.zero()
        self.scroll = 0

    def set_content(self, content: str):
        self.content = content
        self.scroll = 0

    def get_content(self) -> str:
        return self.content

    def is_scrollable(self) -> bool:
        return len(self.rows) > self.size.y

    def _max_scroll(self) -> int:
        return max(0, len(self.rows) - self.size.y)

    def layout(self, size):
        size = Vec2.of(size)
        self.size = size
        rows = wrap_lines(self.content, size.x)
        if len(rows) > size.y and size.x > 1:
            # keep the last column for the scrollbar
            rows = wrap_lines(self.content, size.x - 1)
        self.rows = rows
        self.scroll = min(self.scroll, self._max_scroll())

    def required_size(self, constraint):
        constraint = Vec2.of(constraint)
        rows = wrap_lines(self.content, constraint.x)
        width = max((text_width(r) for r in rows), default=0)
        return Vec2(width, len(rows)).min(constraint)

    def draw(self, printer, focused):
        if printer.is_empty():
            return
        height = min(printer.size.y, self.size.y)
        for i, row in enumerate(self.rows[self.scroll:self.scroll + height]):
            printer.print((0, i), row)

        if self.is_scrollable() and height > 0:
            self._draw_scrollbar(printer, height, focused)

    def _draw_scrollbar(self, printer, height, focused):
        x = min(printer.size.x, self.size.x) - 1
        total = len(self.rows)
        thumb_h = max(1, min(height, div_up(height * height, total)))
        span = height - thumb_h
        max_scroll = self._max_scroll()
        thumb_y = (span * self.scroll // max_scroll) if max_scroll else 0
        printer.print_vline((x, 0), height, "|")
        printer.print_vline((x, thumb_y), thumb_h, "#" if focused else "*")

    def take_focus(self):
        return self.is_scrollable()

    def on_key_event(self, ch):
        if not self.is_scrollable():
            return EventResult.IGNORED

        page = max(1, self.size.y - 1)
        max_scroll = self._max_scroll()
        if ch == KEY_UP and self.scroll > 0:
            self.scroll -= 1
        elif ch == KEY_DOWN and self.scroll < max_scroll:
            self.scroll += 1
        elif ch == KEY_PAGE_UP and self.scroll > 0:
            self.scroll = max(0, self.scroll - page)
        elif ch == KEY_PAGE_DOWN and self.scroll < max_scroll:
            self.scroll = min(max_scroll, self.scroll + page)
        elif ch == KEY_HOME and self.scroll > 0:
            self.scroll = 0
        elif ch == KEY_END and self.scroll < max_scroll:
            self.scroll = max_scroll
        else:
            return EventResult.IGNORED
        return EventResult.CONSUMED

    def __repr__(self):
        preview = self.content if len(self.content) <= 20 else self.content[:17] + "..."
        return f"TextView({preview!r})"
