from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """Screen-space size or position, in cells. Components never go negative."""

    x: int = 0
    y: int = 0

    def __post_init__(self):
        # frozen dataclass, so clamp through object.__setattr__
        object.__setattr__(self, "x", max(0, int(self.x)))
        object.__setattr__(self, "y", max(0, int(self.y)))

    @classmethod
    def zero(cls) -> "Vec2":
        return cls(0, 0)

    @classmethod
    def of(cls, value) -> "Vec2":
        if isinstance(value, Vec2):
            return value
        x, y = value
        return cls(x, y)

    def __add__(self, other):
        other = Vec2.of(other)
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        # saturating: a size can shrink to zero, never below
        other = Vec2.of(other)
        return Vec2(self.x - other.x, self.y - other.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def min(self, other) -> "Vec2":
        other = Vec2.of(other)
        return Vec2(min(self.x, other.x), min(self.y, other.y))

    def max(self, other) -> "Vec2":
        other = Vec2.of(other)
        return Vec2(max(self.x, other.x), max(self.y, other.y))

    def fits_in(self, other) -> bool:
        other = Vec2.of(other)
        return self.x <= other.x and self.y <= other.y

    @property
    def area(self) -> int:
        return self.x * self.y

    def is_empty(self) -> bool:
        return self.x == 0 or self.y == 0


def centered(inner: Vec2, outer: Vec2) -> Vec2:
    """Offset placing `inner` in the middle of `outer` (clamped to the top-left)."""
    return Vec2((outer.x - inner.x) // 2, (outer.y - inner.y) // 2)


def div_up(n: int, d: int) -> int:
    if d <= 0:
        return 0
    return (n + d - 1) // d
