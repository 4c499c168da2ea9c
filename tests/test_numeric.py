import math

import numpy as np
import pytest

from quadrato.numeric import create_number_list, pairwise, remap_number_array


def test_regular_number_list():
    assert create_number_list(0, 2, 3) == [0, 2, 4, 6]
    assert create_number_list(-5, 10, 1) == [-5, 5]
    assert create_number_list(1.5, 1, 0) == [1.5]


def test_randomized_number_list_keeps_span():
    values = create_number_list(-10, 5, 4, randomized=True, rng=np.random.default_rng(3))
    assert len(values) == 5
    assert values[0] == pytest.approx(-10)
    assert values[-1] == pytest.approx(10)
    assert all(b > a for a, b in zip(values, values[1:]))


def test_randomized_number_list_without_steps():
    assert create_number_list(4, 2, 0, randomized=True, rng=np.random.default_rng(1)) == [4.0]


def test_randomized_number_list_is_reproducible_with_seed():
    a = create_number_list(0, 1, 6, True, np.random.default_rng(42))
    b = create_number_list(0, 1, 6, True, np.random.default_rng(42))
    assert a == b


def test_remap_uses_data_bounds_by_default():
    assert remap_number_array([0, 5, 10], 0, 1) == pytest.approx([0, 0.5, 1])
    assert remap_number_array([2, 4], 10, 20) == pytest.approx([10, 20])


def test_remap_with_explicit_source_bounds():
    assert remap_number_array([5], 0, 100, 0, 10) == pytest.approx([50])
    assert remap_number_array([0, 10], 1, -1, -10, 10) == pytest.approx([0, -1])


def test_remap_degenerate_range_gives_nan():
    out = remap_number_array([3, 3], 0, 1)
    assert all(math.isnan(v) for v in out)


def test_pairwise():
    assert pairwise([1, 2, 3]) == [(1, 2), (2, 3)]
    assert pairwise([1, 2, 3], closed=True) == [(1, 2), (2, 3), (3, 1)]
    assert pairwise([]) == []
    assert pairwise([], closed=True) == []
