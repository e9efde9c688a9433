"""Axis-aligned rectangle with collision helpers."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Rectangle:
    """Immutable rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def to_vector4(self):
        """The rectangle as ``(x, y, width, height)``."""
        return (self.x, self.y, self.width, self.height)

    def check_collision(self, other):
        """True if the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def get_collision(self, other):
        """The overlapping area, or an empty rectangle if there is none."""
        left = max(self.x, other.x)
        right = min(self.x + self.width, other.x + other.width)
        top = max(self.y, other.y)
        bottom = min(self.y + self.height, other.y + other.height)
        if left < right and top < bottom:
            return Rectangle(left, top, right - left, bottom - top)
        return Rectangle()

    def contains_point(self, point):
        """True if ``(x, y)`` lies inside; the right and bottom edges are excluded."""
        px, py = point
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    def collides_circle(self, center, radius):
        """True if the circle at ``center`` with ``radius`` touches the rectangle."""
        cx, cy = center
        half_w = self.width / 2
        half_h = self.height / 2
        dx = abs(cx - (self.x + half_w))
        dy = abs(cy - (self.y + half_h))
        if dx > half_w + radius or dy > half_h + radius:
            return False
        if dx <= half_w or dy <= half_h:
            return True
        corner_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
        return corner_sq <= radius * radius

    def size(self):
        """``(width, height)``."""
        return (self.width, self.height)

    def position(self):
        """``(x, y)`` of the top-left corner."""
        return (self.x, self.y)

    def with_size(self, width, height):
        """A copy with a new size."""
        return replace(self, width=width, height=height)

    def with_position(self, x, y):
        """A copy moved to a new top-left corner."""
        return replace(self, x=x, y=y)