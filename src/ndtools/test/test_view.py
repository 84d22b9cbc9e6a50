from itertools import product

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from ndtools import PadValueError, env, select_region, select_region_view


def test_pad_around():
    v = select_region_view(np.ones((3, 3)), new_size=(7, 7), center=(0, 2))
    assert v.shape == (7, 7)
    assert v.ndim == 2
    assert len(v) == 7
    assert v.dtype == np.float64

    expected = np.zeros((7, 7))
    expected[3:6, 1:4] = 1
    assert_array_equal(np.asarray(v), expected)
    assert v[0, 0] == 0
    assert v[4, 2] == 1


def test_same_as_copy():
    a = np.arange(30).reshape(5, 6)
    sizes = [(2, 3), (5, 6), (9, 4)]
    centers = [(0, 0), (2, 3), (4, 5), (7, -2)]
    for new_size, center in product(sizes, centers):
        v = select_region_view(a, new_size=new_size, center=center)
        r = select_region(a, new_size=new_size, center=center)
        assert_array_equal(np.asarray(v), r)


def test_write_through():
    src = np.zeros((3, 3))
    v = select_region_view(src, new_size=(7, 7), center=(0, 2))

    v[4, 2] = 5
    assert src[1, 1] == 5
    assert v[4, 2] == 5


def test_write_outside_is_dropped():
    src = np.zeros((3, 3))
    v = select_region_view(src, new_size=(7, 7), center=(0, 2))

    v[0, 0] = 7
    assert v[0, 0] == 0
    assert not src.any()


def test_slice_write():
    src = np.zeros((3, 3))
    v = select_region_view(src, new_size=(7, 7), center=(0, 2))

    v[...] = 9
    assert_array_equal(src, np.full((3, 3), 9.))
    assert v[...].sum() == 81
    assert_array_equal(v[0], np.zeros(7))

    v[3] = np.arange(7)
    assert_array_equal(src[0], [1, 2, 3])


def test_indexing():
    v = select_region_view(np.arange(3), new_size=(5, ), pad_value=-1)
    assert_array_equal(v[:], [-1, 0, 1, 2, -1])
    assert_array_equal(v[1:4], [0, 1, 2])
    assert_array_equal(v[::2], [-1, 1, -1])
    assert v[-1] == -1
    assert v[2] == 1

    with pytest.raises(IndexError):
        v[5]
    with pytest.raises(IndexError):
        v[0, 0]
    with pytest.raises(IndexError):
        v[None]


def test_partial_size():
    a = np.arange(24).reshape(2, 3, 4)
    v = select_region_view(a, new_size=(4, ))
    assert v.shape == (4, 3, 4)
    assert_array_equal(v[1:3], a)
    assert_array_equal(v[0, ..., 0], np.zeros(3))


def test_bad_pad_value():
    with pytest.raises(PadValueError):
        select_region_view(np.arange(3), new_size=(5, ), pad_value=0.5)


def test_non_numeric_pad_value():
    with pytest.raises(PadValueError):
        select_region_view(np.zeros(3), new_size=(5, ), pad_value=None)


def test_lossy_pad_value_warns_at_caller(monkeypatch):
    monkeypatch.setattr(env, 'NDTOOLS_STRICT_PAD', False)
    with pytest.warns(UserWarning) as record:
        v = select_region_view(np.ones(3, 'i4'), new_size=(5, ),
                               pad_value=0.5)
    assert len(record) == 1
    assert record[0].filename == __file__
    assert v[0] == 0


def test_write_with_leading_singleton():
    src = np.zeros((3, 3))
    v = select_region_view(src, new_size=(7, 7), center=(0, 2))

    v[4] = np.ones((1, 7))
    assert_array_equal(src[1], [1, 1, 1])
    assert not src[0].any()
    assert not src[2].any()

    v[3:6, 2] = np.full((1, 1, 3), 4)
    assert_array_equal(src[:, 1], [4, 4, 4])

    with pytest.raises(ValueError):
        v[4] = np.ones((2, 7))


def test_array_conversion_copies():
    src = np.arange(3)
    v = select_region_view(src, new_size=(5, ))
    a = np.asarray(v)
    assert_array_equal(a, [0, 0, 1, 2, 0])
    a[2] = 9
    assert_array_equal(src, [0, 1, 2])

    assert np.asarray(v, dtype='f4').dtype == np.float32
    with pytest.raises(ValueError):
        np.asarray(v, copy=False)
