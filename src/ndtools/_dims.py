__all__ = [
    'center_value',
    'collect_dim',
    'expand_dims',
    'flatten_trailing_dims',
    'reorient',
    'slice_',
    'slice_indices',
]

from collections.abc import Iterable, Sequence
from math import prod

import numpy as np
import numpy.typing as npt

from ._size import center_position, normalize_axes, single_dim_size
from ._types import ShapeError


def reorient(vec: npt.ArrayLike,
             dim: int,
             ndim: int | None = None) -> np.ndarray:
    """Reshape 1D `vec` to be oriented along `dim`"""
    vec = np.asarray(vec)
    return vec.reshape(single_dim_size(dim, vec.size, ndim))


def collect_dim(col: Iterable, dim: int) -> np.ndarray:
    """
    Collect `col` and orient it along `dim`.

    >>> collect_dim(range(5), 1)
    array([[0, 1, 2, 3, 4]])
    """
    return reorient([*col], dim)


def expand_dims(a: npt.ArrayLike, ndim: int) -> np.ndarray:
    """Append singleton axes to `a` to have `ndim` dimensions"""
    a = np.asarray(a)
    if ndim < a.ndim:
        raise ShapeError(f'Cannot reduce {a.ndim}D array to {ndim}D')
    return a.reshape(a.shape + (1, ) * (ndim - a.ndim))


def flatten_trailing_dims(a: np.ndarray, max_dim: int | None = None):
    """
    Merge axes starting from `max_dim` into the last one.
    By default 2N-dimensional array becomes N+1-dimensional.

    Returns view when possible.
    """
    if max_dim is None:
        max_dim = a.ndim // 2
    if not 0 <= max_dim < a.ndim:
        raise ShapeError(f'max_dim {max_dim} is out of bounds '
                         f'for {a.ndim}D array')
    return a.reshape(*a.shape[:max_dim], prod(a.shape[max_dim:]))


def slice_indices(shape: Sequence[int], dim: int,
                  index: int) -> tuple[slice, ...]:
    """
    Index selecting single plane at `index` along `dim`,
    keeping `dim` as singleton.

    >>> slice_indices((10, 20), 0, 3)
    (slice(3, 4, None), slice(None, None, None))
    """
    dim, = normalize_axes(dim, len(shape))
    if not -shape[dim] <= index < shape[dim]:
        raise IndexError(f'index {index} is out of bounds for axis {dim} '
                         f'with size {shape[dim]}')
    index %= shape[dim]
    return *(slice(index, index + 1) if i == dim else slice(None)
             for i in range(len(shape))),


def slice_(a: np.ndarray, dim: int, index: int) -> np.ndarray:
    """
    View of `a` at `index` along `dim`. Result has `shape[dim] == 1`.

    >>> slice_(np.arange(1, 10).reshape(3, 3), 0, 0)
    array([[1, 2, 3]])
    """
    return a[slice_indices(a.shape, dim, index)]


def center_value(a: np.ndarray):
    """Value at Fourier center of `a`"""
    return a[center_position(a)]
