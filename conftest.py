import pytest

from printer import char_width
from vec2 import Vec2


class FakeTerminal:
    """In-memory terminal: a character grid plus a scripted key queue."""

    def __init__(self, w=40, h=10, keys=()):
        self.w = w
        self.h = h
        self.keys = list(keys)
        self.calls = []
        self.pairs = {}
        self.background = None
        self.timeout = None
        self.initialized = 0
        self.shutdowns = 0
        self.frames = 0
        self.writes = []
        self.grid = [[" "] * w for _ in range(h)]

    def initialize(self):
        self.initialized += 1
        self.calls.append("initialize")

    def shutdown(self):
        self.shutdowns += 1
        self.calls.append("shutdown")

    def set_refresh_timeout(self, ms):
        self.timeout = ms

    def screen_size(self):
        return Vec2(self.w, self.h)

    def poll_key(self):
        self.calls.append("poll_key")
        if not self.keys:
            raise AssertionError("poll_key called with no scripted keys left")
        ch = self.keys.pop(0)
        if isinstance(ch, str):
            return ord(ch)
        return ch

    def clear(self):
        self.calls.append("clear")
        self.grid = [[" "] * self.w for _ in range(self.h)]

    def refresh(self):
        self.calls.append("refresh")
        self.frames += 1

    def init_pair(self, pair_id, fg, bg):
        self.pairs[pair_id] = (fg, bg)

    def color_attr(self, pair_id):
        return pair_id << 8

    def set_background(self, pair_id):
        self.background = pair_id

    def print_at(self, y, x, text, attr=0):
        self.writes.append((y, x, text, attr))
        for ch in text:
            cw = char_width(ch)
            if y < 0 or y >= self.h or x < 0 or x + cw > self.w:
                raise AssertionError(f"write outside the screen at ({x}, {y})")
            self.grid[y][x] = ch
            if cw == 2:
                self.grid[y][x + 1] = ""
            x += cw

    def row(self, y):
        return "".join(self.grid[y])

    def text(self):
        return "\n".join(self.row(y).rstrip() for y in range(self.h))


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def make_terminal():
    return FakeTerminal
