import pytest

from shootergame.transformable import FloatRect, IntRect, Transform, Transformable
from shootergame.vector import Vec2


def test_identity_leaves_points_unchanged():
    point = Vec2(3.5, -2.0)
    assert Transform().transform_point(point) == point


def test_default_transformable_has_identity_transform():
    assert Transformable().transform() == Transform.IDENTITY


def test_position_translates_points():
    body = Transformable()
    body.position = Vec2(10.0, 20.0)
    result = body.transform().transform_point(Vec2(1.0, 2.0))
    assert (result.x, result.y) == pytest.approx((11.0, 22.0), abs=1e-9)


def test_origin_is_subtracted():
    body = Transformable()
    body.origin = Vec2(5.0, 5.0)
    result = body.transform().transform_point(Vec2(5.0, 5.0))
    assert (result.x, result.y) == pytest.approx((0.0, 0.0), abs=1e-9)


def test_rotation_by_quarter_turn():
    body = Transformable()
    body.rotation = 90
    result = body.transform().transform_point(Vec2(1.0, 0.0))
    assert (result.x, result.y) == pytest.approx((0.0, 1.0), abs=1e-9)


@pytest.mark.parametrize("angle, expected", [(-90, 270.0), (400, 40.0), (360, 0.0)])
def test_rotation_is_normalised(angle, expected):
    body = Transformable()
    body.rotation = angle
    assert body.rotation == pytest.approx(expected)


def test_rotate_accumulates():
    body = Transformable()
    body.rotate(200)
    body.rotate(200)
    assert body.rotation == pytest.approx(40.0)


def test_move_and_scale_by():
    body = Transformable()
    body.move(Vec2(1.0, 2.0))
    body.move(Vec2(3.0, 4.0))
    body.scale_by(Vec2(2.0, 3.0))
    body.scale_by(Vec2(2.0, 1.0))
    assert body.position == Vec2(4.0, 6.0)
    assert body.scale == Vec2(4.0, 3.0)


def test_setters_reject_non_vectors():
    body = Transformable()
    with pytest.raises(TypeError):
        body.position = (1, 2)
    with pytest.raises(TypeError):
        body.move((1, 2))


def test_inverse_transform_round_trip():
    body = Transformable()
    body.position = Vec2(7.0, -3.0)
    body.rotation = 33
    body.scale = Vec2(2.0, 0.5)
    body.origin = Vec2(1.0, 4.0)
    point = Vec2(12.0, 9.0)
    moved = body.transform().transform_point(point)
    back = body.inverse_transform().transform_point(moved)
    assert (back.x, back.y) == pytest.approx((12.0, 9.0), abs=1e-9)


def test_combine_with_inverse_is_identity():
    transform = Transform(2.0, 1.0, 3.0, -1.0, 4.0, 5.0)
    combined = transform @ transform.inverse()
    for value, expected in zip(
        (combined.a, combined.b, combined.c, combined.d, combined.e, combined.f),
        (1.0, 0.0, 0.0, 0.0, 1.0, 0.0),
    ):
        assert value == pytest.approx(expected, abs=1e-12)


def test_combine_applies_right_operand_first():
    shift = Transform(c=10.0)
    double = Transform(a=2.0, e=2.0)
    point = Vec2(1.0, 1.0)
    assert double.combine(shift).transform_point(point) == double.transform_point(
        shift.transform_point(point)
    )


def test_singular_inverse_is_identity():
    assert Transform(0.0, 0.0, 1.0, 0.0, 0.0, 2.0).inverse() == Transform()


def test_transform_rect_under_translation():
    rect = FloatRect(1.0, 2.0, 3.0, 4.0)
    moved = Transform(c=10.0, f=20.0).transform_rect(rect)
    assert moved == FloatRect(11.0, 22.0, 3.0, 4.0)


def test_transform_rect_is_bounding_box_of_corners():
    body = Transformable()
    body.rotation = 45
    rect = FloatRect(0.0, 0.0, 2.0, 2.0)
    bounds = body.transform().transform_rect(rect)
    for x in (rect.left, rect.right):
        for y in (rect.top, rect.bottom):
            corner = body.transform().transform_point(Vec2(x, y))
            assert bounds.left - 1e-9 <= corner.x <= bounds.right + 1e-9
            assert bounds.top - 1e-9 <= corner.y <= bounds.bottom + 1e-9


def test_rect_defaults_and_contains():
    assert IntRect() == IntRect(0, 0, 0, 0)
    rect = FloatRect(0.0, 0.0, 2.0, 2.0)
    assert rect.contains(Vec2(1.0, 1.0))
    assert not rect.contains(Vec2(2.0, 1.0))