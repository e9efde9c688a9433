"""4x4 column-major transform matrix."""

import math
from dataclasses import dataclass

from zappygui.vector3 import Vector3


def _from_values(values):
    """Build a matrix from its sixteen values in m0..m15 order."""
    return Matrix(**{f"m{i}": v for i, v in enumerate(values)})


@dataclass(frozen=True)
class Matrix:
    """OpenGL-style right-handed, column-major 4x4 matrix.

    Positional construction takes the values row by row.
    """

    m0: float = 0.0
    m4: float = 0.0
    m8: float = 0.0
    m12: float = 0.0
    m1: float = 0.0
    m5: float = 0.0
    m9: float = 0.0
    m13: float = 0.0
    m2: float = 0.0
    m6: float = 0.0
    m10: float = 0.0
    m14: float = 0.0
    m3: float = 0.0
    m7: float = 0.0
    m11: float = 0.0
    m15: float = 0.0

    def to_float_v(self):
        """The sixteen values in m0..m15 order."""
        return tuple(getattr(self, f"m{i}") for i in range(16))

    def trace(self):
        """Sum of the diagonal."""
        return self.m0 + self.m5 + self.m10 + self.m15

    def transpose(self):
        """Transposed matrix."""
        v = self.to_float_v()
        return _from_values(v[4 * b + a] for a in range(4) for b in range(4))

    def invert(self):
        """Inverse matrix; raises ZeroDivisionError for a singular matrix."""
        a00, a01, a02, a03, a10, a11, a12, a13, a20, a21, a22, a23, a30, a31, a32, a33 = self.to_float_v()

        b00 = a00 * a11 - a01 * a10
        b01 = a00 * a12 - a02 * a10
        b02 = a00 * a13 - a03 * a10
        b03 = a01 * a12 - a02 * a11
        b04 = a01 * a13 - a03 * a11
        b05 = a02 * a13 - a03 * a12
        b06 = a20 * a31 - a21 * a30
        b07 = a20 * a32 - a22 * a30
        b08 = a20 * a33 - a23 * a30
        b09 = a21 * a32 - a22 * a31
        b10 = a21 * a33 - a23 * a31
        b11 = a22 * a33 - a23 * a32

        det = b00 * b11 - b01 * b10 + b02 * b09 + b03 * b08 - b04 * b07 + b05 * b06
        if det == 0:
            raise ZeroDivisionError("matrix is singular")
        inv = 1.0 / det

        return _from_values(
            value * inv
            for value in (
                a11 * b11 - a12 * b10 + a13 * b09,
                -a01 * b11 + a02 * b10 - a03 * b09,
                a31 * b05 - a32 * b04 + a33 * b03,
                -a21 * b05 + a22 * b04 - a23 * b03,
                -a10 * b11 + a12 * b08 - a13 * b07,
                a00 * b11 - a02 * b08 + a03 * b07,
                -a30 * b05 + a32 * b02 - a33 * b01,
                a20 * b05 - a22 * b02 + a23 * b01,
                a10 * b10 - a11 * b08 + a13 * b06,
                -a00 * b10 + a01 * b08 - a03 * b06,
                a30 * b04 - a31 * b02 + a33 * b00,
                -a20 * b04 + a21 * b02 - a23 * b00,
                -a10 * b09 + a11 * b07 - a12 * b06,
                a00 * b09 - a01 * b07 + a02 * b06,
                -a30 * b03 + a31 * b01 - a32 * b00,
                a20 * b03 - a21 * b01 + a22 * b00,
            )
        )

    @staticmethod
    def identity():
        """The identity matrix."""
        return Matrix(m0=1.0, m5=1.0, m10=1.0, m15=1.0)

    def add(self, right):
        """Element-wise sum."""
        return _from_values(a + b for a, b in zip(self.to_float_v(), right.to_float_v()))

    def subtract(self, right):
        """Element-wise difference."""
        return _from_values(a - b for a, b in zip(self.to_float_v(), right.to_float_v()))

    def multiply(self, right):
        """Combined transform applying this matrix first, then ``right``."""
        l = self.to_float_v()
        r = right.to_float_v()
        return _from_values(
            sum(l[4 * a + k] * r[4 * k + b] for k in range(4))
            for a in range(4)
            for b in range(4)
        )

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, other):
        return self.multiply(other)

    @staticmethod
    def translate(x, y, z):
        """Translation matrix."""
        return Matrix(m0=1.0, m5=1.0, m10=1.0, m15=1.0, m12=x, m13=y, m14=z)

    @staticmethod
    def rotate(axis, angle):
        """Rotation of ``angle`` radians about ``axis``."""
        x, y, z = axis
        length_sq = x * x + y * y + z * z
        if length_sq not in (0.0, 1.0):
            ilength = 1.0 / math.sqrt(length_sq)
            x, y, z = x * ilength, y * ilength, z * ilength
        s = math.sin(angle)
        c = math.cos(angle)
        t = 1.0 - c
        return Matrix(
            m0=x * x * t + c, m1=y * x * t + z * s, m2=z * x * t - y * s,
            m4=x * y * t - z * s, m5=y * y * t + c, m6=z * y * t + x * s,
            m8=x * z * t + y * s, m9=y * z * t - x * s, m10=z * z * t + c,
            m15=1.0,
        )

    @staticmethod
    def rotate_xyz(angle):
        """Rotation by Euler angles (x, y, z) in radians."""
        ax, ay, az = angle
        cosz, sinz = math.cos(-az), math.sin(-az)
        cosy, siny = math.cos(-ay), math.sin(-ay)
        cosx, sinx = math.cos(-ax), math.sin(-ax)
        return Matrix(
            m0=cosz * cosy,
            m1=cosz * siny * sinx - sinz * cosx,
            m2=cosz * siny * cosx + sinz * sinx,
            m4=sinz * cosy,
            m5=sinz * siny * sinx + cosz * cosx,
            m6=sinz * siny * cosx - cosz * sinx,
            m8=-siny,
            m9=cosy * sinx,
            m10=cosy * cosx,
            m15=1.0,
        )

    @staticmethod
    def rotate_x(angle):
        """Rotation about the x axis."""
        c, s = math.cos(angle), math.sin(angle)
        return Matrix(m0=1.0, m5=c, m6=s, m9=-s, m10=c, m15=1.0)

    @staticmethod
    def rotate_y(angle):
        """Rotation about the y axis."""
        c, s = math.cos(angle), math.sin(angle)
        return Matrix(m0=c, m2=-s, m5=1.0, m8=s, m10=c, m15=1.0)

    @staticmethod
    def rotate_z(angle):
        """Rotation about the z axis."""
        c, s = math.cos(angle), math.sin(angle)
        return Matrix(m0=c, m1=s, m4=-s, m5=c, m10=1.0, m15=1.0)

    @staticmethod
    def scale(x, y, z):
        """Scaling matrix."""
        return Matrix(m0=x, m5=y, m10=z, m15=1.0)

    @staticmethod
    def frustum(left, right, bottom, top, near, far):
        """Perspective projection for the given frustum."""
        rl = right - left
        tb = top - bottom
        fn = far - near
        return Matrix(
            m0=near * 2.0 / rl,
            m5=near * 2.0 / tb,
            m8=(right + left) / rl,
            m9=(top + bottom) / tb,
            m10=-(far + near) / fn,
            m11=-1.0,
            m14=-(far * near * 2.0) / fn,
        )

    @staticmethod
    def perspective(fovy, aspect, near, far):
        """Perspective projection; ``fovy`` is in radians."""
        top = near * math.tan(fovy * 0.5)
        right = top * aspect
        return Matrix.frustum(-right, right, -top, top, near, far)

    @staticmethod
    def ortho(left, right, bottom, top, near, far):
        """Orthographic projection."""
        rl = right - left
        tb = top - bottom
        fn = far - near
        return Matrix(
            m0=2.0 / rl,
            m5=2.0 / tb,
            m10=-2.0 / fn,
            m12=-(left + right) / rl,
            m13=-(top + bottom) / tb,
            m14=-(far + near) / fn,
            m15=1.0,
        )

    @staticmethod
    def look_at(eye, target, up):
        """View matrix for a camera at ``eye`` looking at ``target``."""
        eye = Vector3(*eye)
        vz = (eye - Vector3(*target)).normalize()
        vx = Vector3(*up).cross_product(vz).normalize()
        vy = vz.cross_product(vx)
        return Matrix(
            m0=vx.x, m1=vy.x, m2=vz.x,
            m4=vx.y, m5=vy.y, m6=vz.y,
            m8=vx.z, m9=vy.z, m10=vz.z,
            m12=-vx.dot_product(eye),
            m13=-vy.dot_product(eye),
            m14=-vz.dot_product(eye),
            m15=1.0,
        )