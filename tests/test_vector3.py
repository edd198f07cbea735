import math

import numpy as np
import pytest

from meshview.vector3 import Vector3


def test_default_is_zero():
    assert Vector3() == Vector3(0.0, 0.0, 0.0)


def test_splat_fills_all_components():
    assert tuple(Vector3.splat(2.5)) == (2.5, 2.5, 2.5)


def test_equality_is_tolerant():
    assert Vector3(1.0, 2.0, 3.0) == Vector3(1.0 + 1e-9, 2.0, 3.0 - 1e-9)
    assert not Vector3(1.0, 2.0, 3.0) == Vector3(1.1, 2.0, 3.0)
    assert Vector3(1.0, 2.0, 3.0) != Vector3(1.0, 2.0, 3.5)


def test_equality_with_other_type_is_false():
    assert (Vector3(1, 2, 3) == (1, 2, 3)) is False


def test_negation():
    v = Vector3(1.0, -2.0, 3.0)
    assert -v == Vector3(-1.0, 2.0, -3.0)
    assert -v + v == Vector3()


def test_vector_arithmetic_componentwise():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, 5.0, 6.0)
    assert (a + b) - b == a
    assert (a * b) / b == a
    assert tuple(a * b) == (4.0, 10.0, 18.0)


def test_scalar_arithmetic():
    a = Vector3(1.0, 2.0, 3.0)
    assert (a + 2.0) - 2.0 == a
    assert (a * 4.0) / 4.0 == a
    assert 3 * a == a * 3


def test_unsupported_operand_raises():
    with pytest.raises(TypeError):
        Vector3() + "a"


def test_immutable():
    v = Vector3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5.0
    assert tuple(v) == (1, 2, 3)


def test_min_max():
    v = Vector3(3.0, -1.0, 2.0)
    assert v.max() == 3.0
    assert v.min() == -1.0


def test_normalized_has_unit_length_and_same_direction():
    v = Vector3(3.0, 4.0, 12.0)
    n = v.normalized()
    assert math.isclose(n.length(), 1.0, rel_tol=1e-12)
    assert n.cross(v).length() < 1e-9
    assert n.dot(v) > 0


def test_normalized_with_length():
    v = Vector3(1.0, 1.0, 1.0)
    assert math.isclose(v.normalized(100.0).length(), 100.0, rel_tol=1e-12)


def test_normalized_zero_vector_stays_zero():
    assert Vector3().normalized() == Vector3()
    assert Vector3(1e-9, 0.0, 0.0).normalized(5.0) == Vector3()


def test_cross_of_axes():
    x = Vector3(1, 0, 0)
    y = Vector3(0, 1, 0)
    z = Vector3(0, 0, 1)
    assert x.cross(y) == z
    assert y.cross(x) == -z


def test_cross_is_orthogonal():
    a = Vector3(1.5, -2.0, 0.7)
    b = Vector3(-0.3, 4.0, 2.2)
    c = a.cross(b)
    assert abs(c.dot(a)) < 1e-9
    assert abs(c.dot(b)) < 1e-9


def test_length_and_dot_agree():
    v = Vector3(2.0, -3.0, 6.0)
    assert math.isclose(v.length() ** 2, v.dot(v))


def test_distance_symmetric():
    a = Vector3(1, 2, 3)
    b = Vector3(-4, 0, 8)
    assert math.isclose(a.distance(b), b.distance(a))
    assert math.isclose(a.distance(b), (a - b).length())
    assert a.distance(a) == 0.0


def test_lerp_endpoints_and_midpoint():
    a = Vector3(0, 0, 0)
    b = Vector3(2, 4, 6)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b
    assert a.lerp(b, 0.5) == b / 2


def test_as_array():
    arr = Vector3(1.0, 2.0, 3.0).as_array()
    assert arr.dtype == np.float32
    assert arr.tolist() == [1.0, 2.0, 3.0]


def test_str_format():
    assert str(Vector3(1.0, 2.0, 3.0)) == "Vector3(1.0, 2.0, 3.0)"