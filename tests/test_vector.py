import math

import pytest

from hoboengine.vector import (
    Mat2,
    Mat3,
    Vec2,
    Vec3,
    clamp,
    dot_product,
    length,
    lerp,
    normalize,
    sqrt_length,
)


def approx_vec(a, b):
    return all(x == pytest.approx(y, abs=1e-9) for x, y in zip(vars(a).values(), vars(b).values()))


def test_vec2_add_sub_round_trip():
    a, b = Vec2(1.5, -2.0), Vec2(3.25, 4.0)
    assert (a + b) - b == a


def test_vec3_mul_matches_repeated_add():
    v = Vec3(1.0, 2.0, 3.0)
    assert v * 2 == v + v


def test_vec_mul_rejects_vector():
    with pytest.raises(TypeError):
        Vec2(1.0, 2.0) * Vec2(1.0, 1.0)


def test_vec3_xy_and_from_xy_round_trip():
    v = Vec3(4.0, 5.0, 6.0)
    assert Vec3.from_xy(v.xy(), v.z) == v
    assert v.xy() == Vec2(4.0, 5.0)


def test_lerp_endpoints_and_midpoint():
    a, b = Vec3(0.0, 2.0, 4.0), Vec3(6.0, -2.0, 8.0)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    assert approx_vec(lerp(a, b, 0.5), (a + b) * 0.5)


def test_length_and_squared_length_agree():
    v = Vec3(1.0, -2.0, 2.5)
    assert length(v) ** 2 == pytest.approx(sqrt_length(v))
    assert dot_product(v, v) == pytest.approx(sqrt_length(v))


def test_normalize_gives_unit_length_and_same_direction():
    v = Vec2(3.0, 4.0)
    n = normalize(v)
    assert length(n) == pytest.approx(1.0)
    assert approx_vec(n * length(v), v)


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(Vec3())


def test_dot_product_mixed_kinds_raises():
    with pytest.raises(TypeError):
        dot_product(Vec2(1.0, 1.0), Vec3(1.0, 1.0, 1.0))


@pytest.mark.parametrize("value", [-5.0, 0.25, 9.0])
def test_clamp_stays_within_bounds(value):
    low, high = -1.0, 2.0
    result = clamp(value, low, high)
    assert low <= result <= high
    if low <= value <= high:
        assert result == value


def test_mat2_data_is_column_major():
    assert Mat2(1.0, 2.0, 3.0, 4.0).data == (1.0, 3.0, 2.0, 4.0)


def test_mat2_identity_preserves_vector_and_left_product():
    v = Vec2(7.0, -3.0)
    m = Mat2(1.0, 2.0, 3.0, 4.0)
    assert Mat2.identity(1.0) * v == v
    assert Mat2.identity(1.0) * m == m


def test_mat2_scale_scales_each_axis():
    v = Vec2(2.0, 5.0)
    assert Mat2.scale(3.0, 0.5) * v == Vec2(v.x * 3.0, v.y * 0.5)
    assert Mat2.scale(3.0) == Mat2.scale(3.0, 3.0)


def test_mat2_rotation_keeps_length_and_quarter_turn():
    v = Vec2(3.0, -1.0)
    assert length(Mat2.rotate(0.7) * v) == pytest.approx(length(v))
    assert approx_vec(Mat2.rotate(math.pi / 2) * Vec2(1.0, 0.0), Vec2(0.0, 1.0))


def test_mat3_right_identity_and_left_transpose():
    m = Mat3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)
    assert m * Mat3.identity(1.0) == m
    assert (Mat3.identity(1.0) * m).data == (1.0, 4.0, 7.0, 2.0, 5.0, 8.0, 3.0, 6.0, 9.0)


def test_mat3_identity_times_vector():
    v = Vec3(1.5, -2.0, 3.0)
    assert Mat3.identity(1.0) * v == v


@pytest.mark.parametrize("factory", [Mat3.rotate_x, Mat3.rotate_y, Mat3.rotate_z])
def test_mat3_rotation_by_zero_is_identity(factory):
    assert factory(0.0) == Mat3.identity(1.0)


def test_mat3_rotate_x_layout():
    c, s = math.cos(0.3), math.sin(0.3)
    m = Mat3.rotate_x(0.3)
    assert (m.m11, m.m21, m.m12, m.m22) == (c, -s, s, c)


def test_matrix_mul_rejects_number():
    with pytest.raises(TypeError):
        Mat3.identity(1.0) * 2.0