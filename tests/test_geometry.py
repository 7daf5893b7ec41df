import math

import pytest

from flocksim.geometry import Rect, Vec2


def test_add_then_sub_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(-0.25, 7.0)
    assert (a + b) - b == a


def test_mul_matches_repeated_add():
    a = Vec2(3.0, -1.0)
    assert a * 2 == a + a
    assert 2 * a == a + a


def test_length_of_pythagorean_vector():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)


def test_length_sqr_is_square_of_length():
    v = Vec2(-2.5, 1.25)
    assert v.length_sqr() == pytest.approx(v.length() ** 2)


def test_distance_sqr_matches_difference():
    a = Vec2(1.0, 2.0)
    b = Vec2(-3.0, 5.5)
    assert a.distance_sqr(b) == pytest.approx((a - b).length_sqr())
    assert a.distance_sqr(b) == pytest.approx(b.distance_sqr(a))


def test_dot_of_perpendicular_vectors():
    assert Vec2(2.0, 3.0).dot(Vec2(-3.0, 2.0)) == pytest.approx(0.0)


def test_dot_with_itself_is_length_sqr():
    v = Vec2(1.1, -0.7)
    assert v.dot(v) == pytest.approx(v.length_sqr())


def test_normalized_has_unit_length_and_same_direction():
    v = Vec2(-6.0, 2.0)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(v) == pytest.approx(v.length())


def test_zero_vector_normalizes_to_zero():
    assert Vec2().normalized() == Vec2(0.0, 0.0)


def test_adding_non_vector_is_type_error():
    with pytest.raises(TypeError):
        Vec2(1.0, 1.0) + 1


def test_rect_contains_top_left_corner_but_not_far_edges():
    rect = Rect(10.0, 20.0, 30.0, 40.0)
    assert rect.contains_point(Vec2(10.0, 20.0))
    assert not rect.contains_point(Vec2(40.0, 30.0))
    assert not rect.contains_point(Vec2(20.0, 60.0))
    assert rect.contains_point(Vec2(39.999, 59.999))


def test_circle_with_center_inside_intersects():
    rect = Rect(0.0, 0.0, 10.0, 10.0)
    assert rect.intersects_circle(Vec2(5.0, 5.0), 0.5)


def test_far_circle_does_not_intersect():
    rect = Rect(0.0, 0.0, 10.0, 10.0)
    assert not rect.intersects_circle(Vec2(50.0, 5.0), 10.0)


def test_circle_overlapping_an_edge_intersects():
    rect = Rect(0.0, 0.0, 10.0, 10.0)
    assert rect.intersects_circle(Vec2(12.0, 5.0), 2.5)


def test_circle_near_corner_uses_corner_distance():
    rect = Rect(0.0, 0.0, 10.0, 10.0)
    center = Vec2(13.0, 14.0)
    corner_distance = math.hypot(3.0, 4.0)
    assert rect.intersects_circle(center, corner_distance)
    assert not rect.intersects_circle(center, corner_distance - 0.1)