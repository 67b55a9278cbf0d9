import pytest

from konui.color import Color
from konui.geometry import IntSize, Mat2, Rectangle, Transform, Vec2


def test_vec2_add_sub_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.25, 4.0)
    assert (a + b) - b == a


def test_vec2_scalar_and_vector_ops():
    a = Vec2(3.0, -6.0)
    assert a * Vec2.ONE == a
    assert a * 1 == a
    assert 2 * a == a + a
    assert a / a == Vec2.ONE
    assert a - a == Vec2.ZERO


def test_vec2_splat():
    assert Vec2.splat(0.25) == Vec2(0.25, 0.25)


def test_vec2_rejects_bad_operand():
    v = Vec2(1.0, 2.0)
    with pytest.raises(TypeError) as excinfo:
        v + "x"
    assert excinfo.type is TypeError
    assert v == Vec2(1.0, 2.0)
    assert v + Vec2(1.0, 1.0) == Vec2(2.0, 3.0)


def test_mat2_identity_and_diagonal():
    v = Vec2(2.0, -3.0)
    assert Mat2.IDENTITY @ v == v
    assert Mat2.from_diagonal(Vec2(2.0, 3.0)) @ Vec2.ONE == Vec2(2.0, 3.0)


def test_mat2_product_of_diagonals_is_diagonal_of_products():
    m = Mat2.from_diagonal(Vec2(2.0, 3.0)) @ Mat2.from_diagonal(Vec2(4.0, 5.0))
    assert m == Mat2.from_diagonal(Vec2(2.0, 3.0) * Vec2(4.0, 5.0))
    assert Mat2.IDENTITY @ m == m


def test_rectangle_full_and_default():
    assert Rectangle() == Rectangle.FULL
    assert Rectangle.FULL == Rectangle(Vec2.ZERO, Vec2.ONE)


def test_rectangle_subrect_full_is_identity():
    r = Rectangle(Vec2(-1.0, 1.0), Vec2(2.0, -2.0))
    assert r.subrect(Rectangle.FULL) == r
    assert Rectangle.FULL.subrect(r) == r


def test_rectangle_offset_and_mul_size():
    r = Rectangle(Vec2(1.0, 2.0), Vec2(3.0, 4.0))
    assert r.offset(Vec2(1.0, 1.0)).top_left == Vec2(1.0, 2.0) + Vec2(1.0, 1.0)
    assert r.offset(Vec2(1.0, 1.0)).size == r.size
    assert r.mul_size(Vec2.splat(2.0)).size == r.size * 2
    assert r.mul_size(Vec2.splat(2.0)).top_left == r.top_left


def test_transform_identity_is_default():
    assert Transform() == Transform.IDENTITY
    assert Transform.IDENTITY.apply(Vec2(5.0, 7.0)) == Vec2(5.0, 7.0)


def test_transform_new_scale_maps_unit_square():
    t = Transform.new_scale(Vec2(-1.0, 1.0), Vec2(2.0, -2.0), Color.RED, Rectangle.FULL)
    assert t.apply(Vec2.ZERO) == t.translation
    assert t.apply(Vec2.ONE) == t.translation + Vec2(2.0, -2.0)
    assert t.color == Color.RED


def test_int_size_fields():
    s = IntSize(550, 310)
    assert (s.width, s.height) == (550, 310)