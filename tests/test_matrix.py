import pytest

from cyrengine.matrix import Mat2, Mat3, Mat4, MatMN, MatN
from cyrengine.vector import Vec3, Vec4, VecN


def _flat(rows):
    return [float(value) for row in rows for value in row]


def _identity(kind):
    m = kind()
    m.identity()
    return m


A3 = Mat3((4, 7, 2), (3, 6, 1), (2, 5, 3))
B3 = Mat3((1, 2, 0), (0, 1, 4), (5, 0, 1))
A4 = Mat4((5, 1, 0, 1), (1, 6, 1, 0), (0, 1, 7, 1), (1, 0, 1, 8))

IDENTITY3 = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]
IDENTITY4 = [
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]


def test_mat2_determinant():
    assert Mat2((1, 2), (3, 4)).determinant() == pytest.approx(-2.0)


def test_mat2_in_place_ops():
    m = Mat2((1, 2), (3, 4))
    m += Mat2((1, 1), (1, 1))
    m *= 2
    assert m == Mat2((4, 6), (8, 10))


def test_mat3_identity_determinant_and_vector():
    ident = _identity(Mat3)
    assert ident.determinant() == pytest.approx(1.0)
    v = Vec3(3.0, -2.0, 5.0)
    assert ident * v == v


def test_mat3_trace_is_sum_of_squared_diagonal():
    assert Mat3((1, 0, 0), (0, 2, 0), (0, 0, 3)).trace() == pytest.approx(14.0)


def test_mat3_zero():
    m = Mat3((1, 2, 3), (4, 5, 6), (7, 8, 9))
    m.zero()
    assert m == Mat3()


def test_mat3_transpose_roundtrip_and_product_rule():
    assert A3.transpose().transpose() == A3
    assert A3.transpose()[0] == Vec3(4, 3, 2)
    assert _flat((A3 * B3).transpose()) == pytest.approx(
        _flat(B3.transpose() * A3.transpose())
    )


def test_mat3_inverse():
    assert _flat(A3 * A3.inverse()) == pytest.approx(IDENTITY3, abs=1e-9)
    assert _flat(A3.inverse() * A3) == pytest.approx(IDENTITY3, abs=1e-9)


def test_mat3_singular_inverse_raises():
    with pytest.raises(ZeroDivisionError):
        Mat3().inverse()


def test_mat3_determinant_multiplicative():
    assert (A3 * B3).determinant() == pytest.approx(A3.determinant() * B3.determinant())


def test_mat3_minor_and_cofactor():
    minor = A3.minor(0, 1)
    assert minor == Mat2((3, 1), (2, 3))
    assert A3.cofactor(0, 1) == pytest.approx(-minor.determinant())
    assert A3.cofactor(1, 1) == pytest.approx(A3.minor(1, 1).determinant())


def test_mat3_minor_out_of_range():
    with pytest.raises(IndexError):
        A3.minor(3, 0)


def test_mat3_scalar_and_addition():
    assert A3 + A3 == A3 * 2
    assert 2 * A3 == A3 * 2
    v = Vec3(1.0, 2.0, 3.0)
    assert (A3 * 3) * v == (A3 * v) * 3


def test_mat4_inverse_and_determinant():
    assert _flat(A4 * A4.inverse()) == pytest.approx(IDENTITY4, abs=1e-9)
    assert A4.transpose().determinant() == pytest.approx(A4.determinant())
    assert _identity(Mat4).determinant() == pytest.approx(1.0)


def test_mat4_cofactor_sign():
    assert A4.cofactor(0, 1) == pytest.approx(-A4.minor(0, 1).determinant())
    assert A4.cofactor(0, 0) == pytest.approx(A4.minor(0, 0).determinant())


def test_mat4_orient():
    m = Mat4()
    pos = Vec3(1.0, 2.0, 3.0)
    m.orient(pos, Vec3(1.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0))
    assert m * Vec4(0, 0, 0, 1) == Vec4(pos.x, pos.y, pos.z, 1.0)
    assert m[3] == Vec4(0, 0, 0, 1)
    assert _flat(m * m.inverse()) == pytest.approx(IDENTITY4, abs=1e-9)


def test_mat4_look_at():
    m = Mat4()
    pos = Vec3(3.0, 4.0, 5.0)
    target = Vec3(0.0, 0.0, 0.0)
    m.look_at(pos, target, Vec3(0.0, 0.0, 1.0))
    eye = m * Vec4(pos.x, pos.y, pos.z, 1.0)
    assert list(eye) == pytest.approx([0.0, 0.0, 0.0, 1.0], abs=1e-9)
    seen = m * Vec4(0.0, 0.0, 0.0, 1.0)
    assert seen.x == pytest.approx(0.0, abs=1e-9)
    assert seen.y == pytest.approx(0.0, abs=1e-9)
    assert seen.z == pytest.approx(-pos.magnitude())


def test_mat4_perspective_opengl_depth_range():
    m = Mat4()
    near, far = 0.5, 100.0
    m.perspective_opengl(90.0, 1.5, near, far)
    at_near = m * Vec4(0.0, 0.0, -near, 1.0)
    at_far = m * Vec4(0.0, 0.0, -far, 1.0)
    assert at_near.z / at_near.w == pytest.approx(-1.0)
    assert at_far.z / at_far.w == pytest.approx(1.0)


def test_mat4_perspective_vulkan_matches_opengl():
    gl = Mat4()
    gl.perspective_opengl(60.0, 1.25, 0.1, 50.0)
    vk = Mat4()
    vk.perspective_vulkan(60.0, 1.25, 0.1, 50.0)
    assert list(vk[0]) == pytest.approx(list(gl[0]))
    assert list(vk[1]) == pytest.approx(list(gl[1] * -1))
    at_near = vk * Vec4(0.0, 0.0, -0.1, 1.0)
    assert at_near.z / at_near.w == pytest.approx(0.0, abs=1e-9)


def test_mat4_ortho_opengl_maps_corners():
    m = Mat4()
    m.ortho_opengl(-2.0, 6.0, 1.0, 5.0, 0.5, 10.0)
    low = m * Vec4(-2.0, 1.0, -0.5, 1.0)
    high = m * Vec4(6.0, 5.0, -10.0, 1.0)
    assert list(low) == pytest.approx([-1.0, -1.0, -1.0, 1.0], abs=1e-9)
    assert list(high) == pytest.approx([1.0, 1.0, 1.0, 1.0], abs=1e-9)


def test_mat4_ortho_vulkan_maps_depth_to_unit_range():
    m = Mat4()
    m.ortho_vulkan(-2.0, 6.0, 1.0, 5.0, 0.5, 10.0)
    low = m * Vec4(-2.0, 1.0, -0.5, 1.0)
    high = m * Vec4(6.0, 5.0, -10.0, 1.0)
    assert list(low) == pytest.approx([-1.0, 1.0, 0.0, 1.0], abs=1e-9)
    assert list(high) == pytest.approx([1.0, -1.0, 1.0, 1.0], abs=1e-9)


def test_mat4_to_list_and_zero():
    assert A4.to_list()[:4] == [5, 1, 0, 1]
    assert len(A4.to_list()) == 16
    m = Mat4(*A4.rows)
    m.zero()
    assert m.to_list() == [0.0] * 16


def test_mat_wrong_row_count():
    with pytest.raises(ValueError):
        Mat3((1, 2, 3), (4, 5, 6))


def test_matmn_shapes_and_transpose():
    a = MatMN([[1, 2, 3], [4, 5, 6]])
    assert (a.m, a.n) == (2, 3)
    t = a.transpose()
    assert (t.m, t.n) == (3, 2)
    assert t.transpose() == a


def test_matmn_products():
    a = MatMN([[1, 2, 3], [4, 5, 6]])
    b = MatMN([[1, 0], [2, 1], [0, 3]])
    v = VecN([1, -1, 2])
    assert list(a * v) == [5.0, 11.0]
    product = a * b
    assert (product.m, product.n) == (2, 2)
    assert product == MatMN([[5, 11], [14, 23]])
    assert (a * b).transpose() == b.transpose() * a.transpose()


def test_matmn_mismatch_raises():
    a = MatMN(2, 3)
    with pytest.raises(ValueError):
        a * VecN(2)
    with pytest.raises(ValueError):
        a * MatMN(2, 3)


def test_matmn_scalar_and_zero():
    a = MatMN([[1, 2], [3, 4]])
    assert a * 2 == MatMN([[2, 4], [6, 8]])
    a *= 3
    assert a == MatMN([[3, 6], [9, 12]])
    a.zero()
    assert a == MatMN(2, 2)


def test_matn_identity_and_vector():
    m = MatN(3)
    m.identity()
    v = VecN([2.0, -3.0, 7.0])
    assert m * v == v
    m.zero()
    assert m * v == VecN(3)


def test_matn_from_matmn():
    square = MatN(MatMN([[1, 2], [3, 4]]))
    assert square[1] == VecN([3, 4])
    with pytest.raises(ValueError):
        MatN(MatMN(2, 3))
    with pytest.raises(ValueError):
        MatN([[1, 2, 3], [4, 5, 6]])


def test_matn_transpose_in_place():
    m = MatN([[1, 2], [3, 4]])
    original = MatN(m)
    m.transpose()
    assert m[0] == VecN([1, 3])
    m.transpose()
    assert m == original