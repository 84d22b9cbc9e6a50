import numpy as np
import pytest
from numpy.testing import assert_array_equal

from ndtools import (ShapeError, center_value, collect_dim, expand_dims,
                     flatten_trailing_dims, reorient, slice_, slice_indices)


def test_reorient():
    assert reorient(np.arange(3), 2).shape == (1, 1, 3)
    assert reorient(np.arange(3), 0, 3).shape == (3, 1, 1)
    assert reorient([1, 2], 1).shape == (1, 2)


def test_collect_dim():
    r = collect_dim(range(5), 1)
    assert_array_equal(r, [[0, 1, 2, 3, 4]])


def test_expand_dims():
    a = np.ones((1, 2, 3))
    r = expand_dims(a, 5)
    assert r.shape == (1, 2, 3, 1, 1)
    assert np.shares_memory(r, a)
    assert expand_dims(a, 3).shape == a.shape

    with pytest.raises(ShapeError):
        expand_dims(a, 2)


def test_flatten_trailing_dims():
    a = np.arange(120).reshape(2, 3, 4, 5)
    r = flatten_trailing_dims(a)
    assert r.shape == (2, 3, 20)
    assert np.shares_memory(r, a)
    assert flatten_trailing_dims(a, 1).shape == (2, 60)

    with pytest.raises(ShapeError):
        flatten_trailing_dims(a, 4)


def test_slice():
    x = np.arange(1, 10).reshape(3, 3)
    r = slice_(x, 0, 0)
    assert_array_equal(r, [[1, 2, 3]])
    assert np.shares_memory(r, x)
    assert_array_equal(slice_(x, 1, -1), [[3], [6], [9]])

    with pytest.raises(IndexError):
        slice_(x, 1, 3)


def test_slice_indices():
    r = slice_indices((10, 20, 12, 33), 0, 3)
    assert r == (slice(3, 4), slice(None), slice(None), slice(None))


def test_center_value():
    assert center_value(np.arange(16).reshape(4, 4)) == 10
    assert center_value(np.arange(5)) == 2
