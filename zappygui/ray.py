"""Rays and ray casting against spheres, boxes, triangles and quads."""

import math
from dataclasses import dataclass, field

from zappygui.vector3 import Vector3

_EPSILON = 0.000001


def _as_vector(value):
    if isinstance(value, Vector3):
        return value
    return Vector3(*value)


def _fmin(a, b):
    """Minimum that ignores NaN operands, like C's fminf."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _fmax(a, b):
    """Maximum that ignores NaN operands, like C's fmaxf."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def _reciprocal(value):
    if value == 0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def _truncate(value):
    return float(int(value)) if math.isfinite(value) else value


@dataclass(frozen=True)
class RayCollision:
    """Result of a ray cast: whether it hit, how far away, where, and the surface normal."""

    hit: bool = False
    distance: float = 0.0
    point: Vector3 = field(default_factory=Vector3)
    normal: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class Ray:
    """A ray starting at ``position`` and heading along ``direction``."""

    position: Vector3 = field(default_factory=Vector3)
    direction: Vector3 = field(default_factory=Vector3)

    def __post_init__(self):
        object.__setattr__(self, "position", _as_vector(self.position))
        object.__setattr__(self, "direction", _as_vector(self.direction))

    def _point_at(self, direction, distance):
        return self.position + direction.scale(distance)

    def collide_sphere(self, center, radius):
        """Collision between the ray and a sphere."""
        center = _as_vector(center)
        to_center = center - self.position
        along = to_center.dot_product(self.direction)
        distance = to_center.length()
        d = radius * radius - (distance * distance - along * along)
        if d < 0.0:
            return RayCollision()
        if distance < radius:
            hit_distance = along + math.sqrt(d)
            point = self._point_at(self.direction, hit_distance)
            normal = (point - center).normalize().negate()
        else:
            hit_distance = along - math.sqrt(d)
            point = self._point_at(self.direction, hit_distance)
            normal = (point - center).normalize()
        return RayCollision(True, hit_distance, point, normal)

    def collide_box(self, box_min, box_max):
        """Collision between the ray and an axis-aligned bounding box."""
        lo, hi = _as_vector(box_min), _as_vector(box_max)
        inside = all(l < p < h for l, p, h in zip(lo, self.position, hi))
        direction = self.direction.negate() if inside else self.direction

        nears = []
        fars = []
        for l, h, p, d in zip(lo, hi, self.position, direction):
            inv = _reciprocal(d)
            t1 = (l - p) * inv
            t2 = (h - p) * inv
            nears.append(_fmin(t1, t2))
            fars.append(_fmax(t1, t2))
        t_near = _fmax(_fmax(nears[0], nears[1]), nears[2])
        t_far = _fmin(_fmin(fars[0], fars[1]), fars[2])

        if t_far < 0 or t_near > t_far:
            return RayCollision()

        distance = t_near
        point = self._point_at(direction, distance)
        raw = (point - lo.lerp(hi, 0.5)).scale(2.01).divide(hi - lo)
        normal = Vector3(*(_truncate(c) for c in raw)).normalize()

        if inside:
            distance = -distance
            point = self._point_at(self.direction, distance)
        return RayCollision(True, distance, point, normal)

    def collide_triangle(self, p1, p2, p3):
        """Collision between the ray and a triangle."""
        p1, p2, p3 = _as_vector(p1), _as_vector(p2), _as_vector(p3)
        edge1 = p2 - p1
        edge2 = p3 - p1
        p = self.direction.cross_product(edge2)
        det = edge1.dot_product(p)
        if -_EPSILON < det < _EPSILON:
            return RayCollision()
        inv_det = 1.0 / det

        tv = self.position - p1
        u = tv.dot_product(p) * inv_det
        if u < 0.0 or u > 1.0:
            return RayCollision()

        q = tv.cross_product(edge1)
        v = self.direction.dot_product(q) * inv_det
        if v < 0.0 or u + v > 1.0:
            return RayCollision()

        t = edge2.dot_product(q) * inv_det
        if t <= _EPSILON:
            return RayCollision()
        return RayCollision(
            True,
            t,
            self._point_at(self.direction, t),
            edge1.cross_product(edge2).normalize(),
        )

    def collide_quad(self, p1, p2, p3, p4):
        """Collision between the ray and a quad given by its corners in order."""
        collision = self.collide_triangle(p1, p2, p4)
        if not collision.hit:
            collision = self.collide_triangle(p2, p3, p4)
        return collision