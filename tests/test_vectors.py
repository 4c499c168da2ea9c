import math

import pytest

from quadrato.vectors import (are_anti_parallel, are_colinear, are_parallel, centroid,
                              polygon_is_colinear, polygon_normal, v_angle, v_norm, v_resize)


def test_identical_directions_are_parallel():
    for a in [(1, 0, 0), (0.3, -2.0, 5.0), (0, 0, 1e3)]:
        assert are_parallel(a, a)
        assert are_colinear(a, a)
        assert not are_anti_parallel(a, a)


def test_opposite_directions_are_anti_parallel():
    for a in [(1, 0, 0), (1, 2, 3), (-0.5, 0.25, 4.0)]:
        b = tuple(-c for c in a)
        assert are_anti_parallel(a, b)
        assert not are_parallel(a, b)
        assert are_colinear(a, b)


def test_scaled_direction_is_parallel():
    assert are_parallel((1, 0, 0), (2, 0, 0))
    assert are_anti_parallel((1, 1, 0), (-3, -3, 0))


def test_perpendicular_directions():
    assert not are_colinear((1, 0, 0), (0, 1, 0))
    assert not are_parallel((1, 0, 0), (0, 1, 0))
    assert not are_anti_parallel((1, 0, 0), (0, 1, 0))


def test_zero_vector_is_colinear_with_anything():
    assert are_colinear((0, 0, 0), (1, 2, 3))
    assert not are_parallel((0, 0, 0), (1, 2, 3))
    assert not are_anti_parallel((0, 0, 0), (1, 2, 3))


def test_polygon_is_colinear():
    assert polygon_is_colinear([(0, 0, 0), (1, 0, 0), (2, 0, 0)])
    assert polygon_is_colinear([(0, 0, 0), (3, 3, 3)])
    assert not polygon_is_colinear([(0, 0, 0), (1, 0, 0), (1, 1, 0)])


def test_polygon_checks_need_two_vertices():
    with pytest.raises(ValueError):
        polygon_is_colinear([(0, 0, 0)])
    with pytest.raises(ValueError):
        polygon_normal([])


def test_polygon_normal_uses_first_second_and_last():
    square = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
    assert polygon_normal(square) == pytest.approx((0, 0, 1))
    assert polygon_normal(square[::-1]) == pytest.approx((0, 0, -1))


def test_helpers():
    assert v_norm((0, 0, 0)) == (0.0, 0.0, 0.0)
    assert v_resize((0, 3, 4), 10) == pytest.approx((0, 6, 8))
    assert v_angle((1, 0, 0), (0, 1, 0)) == pytest.approx(math.pi / 2)
    assert v_angle((1, 0, 0), (-2, 0, 0)) == pytest.approx(math.pi)
    assert centroid([(0, 0, 0), (2, 0, 0), (2, 2, 0), (0, 2, 0)]) == pytest.approx((1, 1, 0))
