import math

import pytest

from cyrengine.vector import Vec2, Vec3, Vec4, VecN


def test_vec2_magnitude_and_dot():
    v = Vec2(3.0, 4.0)
    assert v.magnitude() == pytest.approx(5.0)
    assert v.dot(v) == pytest.approx(v.magnitude() ** 2)


def test_vec2_normalize_unit_length():
    v = Vec2(3.0, -7.0).normalize()
    assert v.magnitude() == pytest.approx(1.0)


def test_vec2_normalize_zero_is_unchanged():
    v = Vec2()
    v.normalize()
    assert v == Vec2(0.0, 0.0)


def test_vec2_is_valid():
    assert Vec2(1.0, 2.0).is_valid()
    assert not Vec2(math.nan, 0.0).is_valid()
    assert not Vec2(0.0, math.inf).is_valid()


def test_vec2_index_out_of_range():
    with pytest.raises(IndexError):
        Vec2()[2]
    with pytest.raises(IndexError):
        Vec2()[-1]


def test_vec3_cross_of_axes():
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_vec3_cross_is_orthogonal_and_anticommutative():
    a = Vec3(1.5, -2.0, 0.25)
    b = Vec3(-0.5, 3.0, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-12)
    assert list(b.cross(a)) == pytest.approx(list(c * -1.0))


def test_vec3_length_sqr_matches_dot():
    v = Vec3(2.0, -3.0, 6.0)
    assert v.length_sqr() == v.dot(v)
    assert v.magnitude() == pytest.approx(math.sqrt(v.length_sqr()))


def test_vec3_normalize_returns_self_and_unit():
    v = Vec3(2.0, -3.0, 6.0)
    result = v.normalize()
    assert result is v
    assert v.magnitude() == pytest.approx(1.0)


def test_vec3_normalize_zero_is_unchanged():
    v = Vec3()
    v.normalize()
    assert v == Vec3(0.0, 0.0, 0.0)


def test_vec3_zero():
    v = Vec3(1.0, 2.0, 3.0)
    v.zero()
    assert v == Vec3()


def test_vec3_arithmetic_round_trip():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 9.0)
    assert (a + b) - b == a
    assert a * 2.0 == a + a
    assert 2.0 * a == a * 2.0
    assert list((a * 4.0) / 4.0) == pytest.approx(list(a))


def test_vec3_in_place_ops_mutate():
    a = Vec3(1.0, 2.0, 3.0)
    original = Vec3(1.0, 2.0, 3.0)
    a += Vec3(1.0, 1.0, 1.0)
    a -= Vec3(1.0, 1.0, 1.0)
    assert a == original
    a *= 3.0
    assert a == original * 3.0
    a /= 3.0
    assert list(a) == pytest.approx(list(original))


def test_vec3_indexing():
    v = Vec3(7.0, 8.0, 9.0)
    assert (v[0], v[1], v[2]) == (7.0, 8.0, 9.0)
    v[1] = -1.0
    assert v.y == -1.0
    with pytest.raises(IndexError):
        v[3]


def test_vec3_is_valid():
    assert Vec3(1.0, 2.0, 3.0).is_valid()
    assert not Vec3(0.0, 0.0, math.nan).is_valid()


@pytest.mark.parametrize(
    "v",
    [Vec3(0.0, 0.0, 1.0), Vec3(1.0, 0.0, 0.0), Vec3(0.3, -2.0, 0.7), Vec3(0.1, 0.1, -5.0)],
)
def test_vec3_ortho_is_orthonormal_basis(v):
    u, w = v.ortho()
    n = Vec3(v.x, v.y, v.z).normalize()
    assert u.magnitude() == pytest.approx(1.0)
    assert w.magnitude() == pytest.approx(1.0)
    assert u.dot(n) == pytest.approx(0.0, abs=1e-9)
    assert w.dot(n) == pytest.approx(0.0, abs=1e-9)
    assert u.dot(w) == pytest.approx(0.0, abs=1e-9)


def test_vec4_componentwise_multiply_and_divide():
    a = Vec4(1.0, 2.0, 3.0, 4.0)
    b = Vec4(2.0, 2.0, 2.0, 2.0)
    c = Vec4(1.0, 2.0, 3.0, 4.0)
    c *= b
    assert c == a * 2.0
    c /= b
    assert c == a


def test_vec4_scalar_in_place_multiply():
    a = Vec4(1.0, -2.0, 3.0, 0.5)
    b = Vec4(1.0, -2.0, 3.0, 0.5)
    b *= 3.0
    assert b == a * 3.0


def test_vec4_dot_normalize_valid():
    v = Vec4(1.0, 2.0, 2.0, 4.0)
    assert v.dot(v) == pytest.approx(v.magnitude() ** 2)
    v.normalize()
    assert v.magnitude() == pytest.approx(1.0)
    assert v.is_valid()
    assert not Vec4(math.inf, 0.0, 0.0, 0.0).is_valid()


def test_vec4_zero_and_index():
    v = Vec4(1.0, 2.0, 3.0, 4.0)
    assert v[3] == 4.0
    v.zero()
    assert v == Vec4()
    with pytest.raises(IndexError):
        v[4]


def test_vecn_size_constructor_is_zeroed():
    v = VecN(5)
    assert len(v) == 5
    assert v.n == 5
    assert list(v) == [0.0] * 5


def test_vecn_negative_size_rejected():
    with pytest.raises(ValueError):
        VecN(-1)


def test_vecn_dot_and_zero():
    a = VecN([1.0, 2.0, 3.0])
    assert a.dot(a) == sum(c * c for c in a)
    a.zero()
    assert list(a) == [0.0, 0.0, 0.0]


def test_vecn_arithmetic_round_trip():
    a = VecN([1.0, -2.0, 3.5, 4.0])
    b = VecN([0.5, 0.5, 0.5, 0.5])
    assert (a + b) - b == a
    assert a * 2.0 == a + a
    c = VecN(a)
    c += b
    c -= b
    assert c == a
    c *= 2.0
    assert c == a * 2.0


def test_vecn_copy_is_independent():
    a = VecN([1.0, 2.0])
    b = VecN(a)
    b[0] = 9.0
    assert a[0] == 1.0


def test_vecn_size_mismatch():
    with pytest.raises(ValueError):
        VecN(2).dot(VecN(3))
    with pytest.raises(ValueError):
        VecN(2) + VecN(3)