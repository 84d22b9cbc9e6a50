__all__ = ['at', 'get_src_dst_range', 'to_slices']

from collections.abc import Iterable, Sequence
from itertools import starmap

import numpy as np

from .._size import as_tuple, ft_center_diff
from .._types import IndexRanges, NumpyLike, ShapeError, Span


def get_src_dst_range(
    src_shape: Iterable[int],
    dst_shape: Iterable[int],
    roi_shape: Iterable[int],
    src_center: Iterable[int],
    dst_center: Iterable[int] | None = None,
) -> IndexRanges | None:
    """
    Compute spans to copy `roi_shape`-sized window from `src` into `dst`,
    such that `src_center` of `src` lands at `dst_center` of `dst`.

    Window is anchored at its own Fourier center (`roi_shape // 2`).
    Both resulting span tuples are clipped to array bounds
    and have the same extent along every axis.

    Returns `None` if window does not intersect either of arrays.
    """
    dst_shape = as_tuple(dst_shape)
    if dst_center is None:
        dst_center = ft_center_diff(dst_shape)

    vecs = [
        np.array(as_tuple(v), dtype=np.intp)
        for v in (src_shape, dst_shape, roi_shape, src_center, dst_center)
    ]
    src_shape, dst_shape, roi, src_c, dst_c = vecs
    if len({v.size for v in vecs}) != 1:
        raise ShapeError(
            'All of shapes and centers must have same length, got: '
            f'src={src_shape}, dst={dst_shape}, roi={roi}, '
            f'src_center={src_c}, dst_center={dst_c}')

    roi_c = roi // 2

    # Window in source coordinates
    src_lo = src_c - roi_c
    src_hi = src_lo + roi
    src_lo_c = np.maximum(src_lo, 0)
    src_hi_c = np.minimum(src_hi, src_shape)
    if (src_lo_c >= src_shape).any() or (src_hi_c <= 0).any():
        return None

    extra_lo = src_lo_c - src_lo
    extra_hi = np.maximum(src_hi - src_hi_c, 0)
    size = roi - extra_lo - extra_hi

    # Same window in destination coordinates
    dst_lo = dst_c - roi_c + extra_lo
    dst_hi = dst_lo + size
    dst_lo_c = np.maximum(dst_lo, 0)
    dst_hi_c = np.minimum(dst_hi, dst_shape)
    if (dst_lo_c >= dst_shape).any() or (dst_hi_c <= 0).any():
        return None

    # Trim source by what was cut from destination
    src_lo_c += dst_lo_c - dst_lo
    src_hi_c -= np.maximum(dst_hi - dst_hi_c, 0)

    # Degenerate (i.e. non-positive) ROI sizes
    if (src_hi_c <= src_lo_c).any() or (dst_hi_c <= dst_lo_c).any():
        return None

    src_loc = *zip(src_lo_c.tolist(), src_hi_c.tolist()),
    dst_loc = *zip(dst_lo_c.tolist(), dst_hi_c.tolist()),
    return src_loc, dst_loc


def to_slices(loc: Sequence[Span]) -> tuple[slice, ...]:
    return tuple(starmap(slice, loc))


def at(a: NumpyLike, loc: Sequence[Span]) -> np.ndarray:
    """Do `a[lo0:hi0, lo1:hi1, ...]`. Returns view for ndarrays"""
    return a[to_slices(loc)]
