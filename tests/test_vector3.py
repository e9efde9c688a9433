import math

import pytest

from zappygui.matrix import Matrix
from zappygui.vector3 import Vector3

A = Vector3(1, 2, 3)
B = Vector3(4, -5, 6)


def approx(v):
    return pytest.approx(tuple(v))


def test_str_format():
    assert str(Vector3(1, 2, 3)) == "Vector3(1.000000, 2.000000, 3.000000)"


def test_defaults_are_zero():
    assert Vector3() == Vector3.zero()


def test_add_is_commutative_and_matches_operator():
    assert A.add(B) == B.add(A)
    assert A + B == A.add(B)


def test_add_then_subtract_round_trip():
    assert (A + B) - B == A
    assert A.subtract(B) == A - B


def test_negate():
    assert A + (-A) == Vector3.zero()
    assert A.negate() == A.scale(-1)


def test_scalar_multiplication_matches_component_multiplication():
    assert A * 2 == A.multiply(Vector3(2, 2, 2))
    assert 2 * A == A * 2
    assert A.multiply(Vector3.one()) == A


def test_divide_scalar_round_trip():
    assert (A * 4) / 4 == A
    assert A.divide(1) == A


def test_divide_vector_round_trip():
    assert tuple(A.multiply(B).divide(B)) == approx(A)
    assert tuple(A * B / B) == approx(A)


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        A.divide(0)
    with pytest.raises(ZeroDivisionError):
        A / Vector3(1, 0, 1)


def test_length_and_square():
    assert A.length_sqr() == A.dot_product(A)
    assert A.length() ** 2 == pytest.approx(A.length_sqr())


def test_normalize():
    assert A.normalize().length() == pytest.approx(1.0)
    assert Vector3.zero().normalize() == Vector3.zero()


def test_distance():
    assert A.distance(B) == pytest.approx((A - B).length())
    assert A.distance(A) == 0


def test_lerp_endpoints():
    assert A.lerp(B, 0) == A
    assert tuple(A.lerp(B, 1)) == approx(B)


def test_cross_product():
    assert Vector3(1, 0, 0).cross_product(Vector3(0, 1, 0)) == Vector3(0, 0, 1)
    c = A.cross_product(B)
    assert c.dot_product(A) == pytest.approx(0)
    assert c.dot_product(B) == pytest.approx(0)


def test_perpendicular_is_orthogonal():
    for v in (A, B, Vector3(0, 5, 1)):
        assert v.perpendicular().dot_product(v) == pytest.approx(0)


def test_project_plus_reject_is_original():
    assert tuple(A.project(B) + A.reject(B)) == approx(A)
    assert A.reject(B).dot_product(B) == pytest.approx(0)


def test_ortho_normalize():
    v1, v2 = A.ortho_normalize(B)
    assert v1.length() == pytest.approx(1.0)
    assert v2.length() == pytest.approx(1.0)
    assert v1.dot_product(v2) == pytest.approx(0)


def test_transform_identity_and_translation():
    assert A.transform(Matrix.identity()) == A
    assert A.transform(Matrix.translate(B.x, B.y, B.z)) == A + B


def test_rotate_by_identity_quaternion():
    assert A.rotate_by_quaternion((0, 0, 0, 1)) == A


def test_rotate_by_quaternion_preserves_length():
    half = math.pi / 8
    q = (0.0, math.sin(half), 0.0, math.cos(half))
    assert A.rotate_by_quaternion(q).length() == pytest.approx(A.length())


def test_reflect_twice_returns_original():
    n = Vector3(0, 1, 0)
    r = A.reflect(n)
    assert r.length() == pytest.approx(A.length())
    assert tuple(r.reflect(n)) == approx(A)


def test_min_max():
    lo = A.min(B)
    hi = A.max(B)
    assert lo == Vector3(A.x, B.y, A.z)
    assert hi == Vector3(B.x, A.y, B.z)


def test_barycenter_reconstructs_point():
    a, b, c = Vector3(0, 0, 0), Vector3(4, 0, 0), Vector3(0, 4, 0)
    p = Vector3(1, 1, 0)
    bary = p.barycenter(a, b, c)
    assert bary.x + bary.y + bary.z == pytest.approx(1.0)
    rebuilt = a * bary.x + b * bary.y + c * bary.z
    assert tuple(rebuilt) == approx(p)


def test_sphere_collision():
    origin = Vector3.zero()
    assert origin.check_collision(1, Vector3(2, 0, 0), 1)
    assert not origin.check_collision(1, Vector3(3, 0, 0), 1)


def test_frozen():
    v = Vector3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5
    assert v == Vector3(1, 2, 3)
    assert v.x == 1