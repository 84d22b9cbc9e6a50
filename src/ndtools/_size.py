__all__ = [
    'apply_dims',
    'apply_tuple_list',
    'as_tuple',
    'center_position',
    'expand_add',
    'expand_size',
    'ft_center_diff',
    'linear_index',
    'normalize_axes',
    'select_sizes',
    'single_dim_size',
]

from collections.abc import Callable, Iterable, Sequence
from math import prod
from typing import Any

import numpy as np

from ._types import NumpyLike, Shape, ShapeError

# ----------------------------- tuple coercion ------------------------------


def as_tuple(t: int | Iterable[int]) -> tuple[int, ...]:
    """Coerce scalar or any int sequence (incl. ndarray) to tuple of ints"""
    if isinstance(t, int | np.integer):
        return int(t),
    return tuple(int(x) for x in t)


def normalize_axes(axes: int | Iterable[int], ndim: int) -> tuple[int, ...]:
    """Wrap negative axes, reject ones outside of `ndim`"""
    r = []
    for a in as_tuple(axes):
        if not -ndim <= a < ndim:
            raise ShapeError(f'axis {a} is out of bounds for {ndim}D')
        r.append(a % ndim)
    return *r,


# ------------------------------ size vectors -------------------------------


def expand_size(primary: int | Iterable[int],
                reference: Iterable[int]) -> tuple[int, ...]:
    """
    Extend `primary` to the length of `reference`,
    taking missing trailing entries from `reference`.

    >>> expand_size((1, 2, 3), (4, 5, 6, 7, 8, 9))
    (1, 2, 3, 7, 8, 9)
    """
    primary = as_tuple(primary)
    reference = as_tuple(reference)
    n = len(primary)
    if n > len(reference):
        raise ShapeError(f'Cannot expand {n}D {primary} '
                         f'to {len(reference)}D of {reference}')
    return *primary, *reference[n:]


def expand_add(t1: Iterable[int], t2: Iterable[int]) -> tuple[int, ...]:
    """
    Add `t1` to `t2` where both are present, keep the tail of `t2`.

    >>> expand_add((1, 2, 3), (4, 5, 6, 7, 8, 9))
    (5, 7, 9, 7, 8, 9)
    """
    t1 = as_tuple(t1)
    t2 = as_tuple(t2)
    if len(t1) > len(t2):
        raise ShapeError(f'Cannot add {len(t1)}D {t1} to {len(t2)}D {t2}')
    return *(a + b for a, b in zip(t1, t2)), *t2[len(t1):]


def ft_center_diff(shape: Iterable[int],
                   axes: int | Iterable[int] | None = None) -> Shape:
    """
    Shift which moves the zero frequency to the Fourier center.

    Equals to index of the center pixel (right of center for even sizes)
    for selected `axes`, and 0 for the rest.
    """
    shape = as_tuple(shape)
    if axes is None:
        return *(s // 2 for s in shape),
    selected = normalize_axes(axes, len(shape))
    return *(s // 2 if a in selected else 0 for a, s in enumerate(shape)),


def center_position(a: NumpyLike | Iterable[int]) -> Shape:
    """Fourier center of array or shape, usable as an index"""
    shape = a.shape if hasattr(a, 'shape') else a
    return ft_center_diff(shape)


def single_dim_size(dim: int, dim_size: int, ndim: int | None = None) -> Shape:
    """
    All-singleton shape of `ndim` axes with `dim_size` at `dim`.
    By default `dim` is the last axis.

    >>> single_dim_size(3, 5)
    (1, 1, 1, 5)
    """
    if ndim is None:
        ndim = dim + 1
    dim, = normalize_axes(dim, ndim)
    return *(dim_size if a == dim else 1 for a in range(ndim)),


def select_sizes(a: NumpyLike,
                 axes: int | Iterable[int],
                 keep_dims: bool = True) -> Shape:
    """
    Sizes of `a` along `axes`.

    With `keep_dims` other axes are reported as singletons,
    otherwise only selected sizes are returned, in order of `axes`.
    """
    shape = tuple(a.shape)
    axes = normalize_axes(axes, len(shape))
    if not keep_dims:
        return *(shape[i] for i in axes),
    return *(s if i in axes else 1 for i, s in enumerate(shape)),


def linear_index(pos: Sequence[int], shape: Sequence[int]) -> int:
    """Flat C-ordered index of `pos`, i.e. `a.ravel()[r] == a[pos]`"""
    if len(pos) != len(shape):
        raise ShapeError(f'Position {pos} does not match shape {shape}')
    return sum(p * prod(shape[i + 1:]) for i, p in enumerate(pos))


# ------------------------- per-axis tuple mapping --------------------------


def _is_tuple_list(obj: Any) -> bool:
    if isinstance(obj, np.ndarray):
        return obj.ndim == 2
    return (isinstance(obj, list | tuple) and bool(obj)
            and all(isinstance(x, tuple | list | np.ndarray) for x in obj))


def apply_dims(scale, axes: int | Iterable[int], ndim: int):
    """
    Pass entries of `scale` at `axes` through, replace others with zeros.
    Also maps over a list of tuples.

    >>> apply_dims((1, 2, 3), (0, 1), 4)
    (1, 2, 0, 0)
    """
    if _is_tuple_list(scale):
        return *(apply_dims(s, axes, ndim) for s in scale),
    axes = normalize_axes(axes, ndim)
    zero = type(scale[0])(0) if len(scale) else 0
    return *(scale[i] if i in axes else zero for i in range(ndim)),


def apply_tuple_list(fn: Callable[[Any, Any], Any], t1, t2):
    """
    Apply binary `fn` to tuples.

    When either side is a list of tuples (or 2D array of row-vectors),
    `fn` is mapped over it. Both lists are zipped.
    """
    match _is_tuple_list(t1), _is_tuple_list(t2):
        case True, True:
            return *(fn(a, b) for a, b in zip(t1, t2, strict=True)),
        case True, False:
            return *(fn(a, t2) for a in t1),
        case False, True:
            return *(fn(t1, b) for b in t2),
    return fn(t1, t2)
