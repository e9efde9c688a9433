"""Three-component float vector with the usual 3D math operations."""

import math
from dataclasses import dataclass
from numbers import Real


def _vec(value):
    """Accept a Vector3 or any three-item iterable."""
    if isinstance(value, Vector3):
        return value
    return Vector3(*value)


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __str__(self):
        return f"Vector3({self.x:f}, {self.y:f}, {self.z:f})"

    # Arithmetic

    def add(self, other):
        """Component-wise sum."""
        o = _vec(other)
        return Vector3(self.x + o.x, self.y + o.y, self.z + o.z)

    def subtract(self, other):
        """Component-wise difference."""
        o = _vec(other)
        return Vector3(self.x - o.x, self.y - o.y, self.z - o.z)

    def negate(self):
        """Vector pointing the opposite way."""
        return Vector3(-self.x, -self.y, -self.z)

    def multiply(self, other):
        """Component-wise product."""
        o = _vec(other)
        return Vector3(self.x * o.x, self.y * o.y, self.z * o.z)

    def scale(self, scaler):
        """Multiply every component by a scalar."""
        return Vector3(self.x * scaler, self.y * scaler, self.z * scaler)

    def divide(self, other):
        """Divide component-wise by a vector, or every component by a scalar.

        Raises ZeroDivisionError when dividing by zero.
        """
        if isinstance(other, Real):
            return Vector3(self.x / other, self.y / other, self.z / other)
        o = _vec(other)
        return Vector3(self.x / o.x, self.y / o.y, self.z / o.z)

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __neg__(self):
        return self.negate()

    def __mul__(self, other):
        if isinstance(other, Real):
            return self.scale(other)
        return self.multiply(other)

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other):
        return self.divide(other)

    # Geometry

    def length(self):
        """Euclidean length."""
        return math.sqrt(self.length_sqr())

    def length_sqr(self):
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self):
        """Unit vector in the same direction; a zero vector is returned unchanged."""
        length = self.length()
        if length == 0.0:
            return self
        return self.scale(1.0 / length)

    def dot_product(self, other):
        """Scalar product."""
        o = _vec(other)
        return self.x * o.x + self.y * o.y + self.z * o.z

    def distance(self, other):
        """Distance between two points."""
        return self.subtract(other).length()

    def lerp(self, other, amount):
        """Linear interpolation towards ``other``."""
        o = _vec(other)
        return Vector3(
            self.x + amount * (o.x - self.x),
            self.y + amount * (o.y - self.y),
            self.z + amount * (o.z - self.z),
        )

    def cross_product(self, other):
        """Vector product."""
        o = _vec(other)
        return Vector3(
            self.y * o.z - self.z * o.y,
            self.z * o.x - self.x * o.z,
            self.x * o.y - self.y * o.x,
        )

    def perpendicular(self):
        """A vector perpendicular to this one, built from its smallest axis."""
        smallest = abs(self.x)
        axis = Vector3(1.0, 0.0, 0.0)
        if abs(self.y) < smallest:
            smallest = abs(self.y)
            axis = Vector3(0.0, 1.0, 0.0)
        if abs(self.z) < smallest:
            axis = Vector3(0.0, 0.0, 1.0)
        return self.cross_product(axis)

    def project(self, other):
        """Projection of this vector onto ``other``."""
        o = _vec(other)
        return o.scale(self.dot_product(o) / o.dot_product(o))

    def reject(self, other):
        """Component of this vector perpendicular to ``other``."""
        return self.subtract(self.project(other))

    def ortho_normalize(self, other):
        """Return an orthonormal pair: this vector normalised and ``other`` made orthogonal to it."""
        v1 = self.normalize()
        vn1 = v1.cross_product(other).normalize()
        v2 = vn1.cross_product(v1)
        return v1, v2

    def transform(self, matrix):
        """Apply a 4x4 transform matrix, treating this vector as a point."""
        m = matrix
        x, y, z = self
        return Vector3(
            m.m0 * x + m.m4 * y + m.m8 * z + m.m12,
            m.m1 * x + m.m5 * y + m.m9 * z + m.m13,
            m.m2 * x + m.m6 * y + m.m10 * z + m.m14,
        )

    def rotate_by_quaternion(self, quaternion):
        """Rotate by a quaternion given as ``(x, y, z, w)``."""
        qx, qy, qz, qw = quaternion
        x, y, z = self
        return Vector3(
            x * (qx * qx + qw * qw - qy * qy - qz * qz)
            + y * (2 * qx * qy - 2 * qw * qz)
            + z * (2 * qx * qz + 2 * qw * qy),
            x * (2 * qw * qz + 2 * qx * qy)
            + y * (qw * qw - qx * qx + qy * qy - qz * qz)
            + z * (-2 * qw * qx + 2 * qy * qz),
            x * (-2 * qw * qy + 2 * qx * qz)
            + y * (2 * qw * qx + 2 * qy * qz)
            + z * (qw * qw - qx * qx - qy * qy + qz * qz),
        )

    def reflect(self, normal):
        """Reflect this vector about a surface normal."""
        n = _vec(normal)
        return self.subtract(n.scale(2.0 * self.dot_product(n)))

    def min(self, other):
        """Component-wise minimum."""
        o = _vec(other)
        return Vector3(min(self.x, o.x), min(self.y, o.y), min(self.z, o.z))

    def max(self, other):
        """Component-wise maximum."""
        o = _vec(other)
        return Vector3(max(self.x, o.x), max(self.y, o.y), max(self.z, o.z))

    def barycenter(self, a, b, c):
        """Barycentric coordinates (u, v, w) of this point in triangle ``a``, ``b``, ``c``."""
        a, b, c = _vec(a), _vec(b), _vec(c)
        v0 = b - a
        v1 = c - a
        v2 = self - a
        d00 = v0.dot_product(v0)
        d01 = v0.dot_product(v1)
        d11 = v1.dot_product(v1)
        d20 = v2.dot_product(v0)
        d21 = v2.dot_product(v1)
        denom = d00 * d11 - d01 * d01
        v = (d11 * d20 - d01 * d21) / denom
        w = (d00 * d21 - d01 * d20) / denom
        return Vector3(1.0 - (w + v), v, w)

    @staticmethod
    def zero():
        """The zero vector."""
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def one():
        """The vector with every component equal to one."""
        return Vector3(1.0, 1.0, 1.0)

    def check_collision(self, radius1, center2, radius2):
        """True if the sphere here with ``radius1`` touches the sphere at ``center2``."""
        d = _vec(center2) - self
        return d.dot_product(d) <= (radius1 + radius2) * (radius1 + radius2)