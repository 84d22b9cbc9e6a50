__all__ = ['as_pad_value', 'select_region', 'select_region_inplace']

import logging
import warnings
from collections.abc import Iterable
from typing import Any

import numpy as np
import numpy.typing as npt

from ndtools._env import env
from ndtools._size import as_tuple, expand_size, ft_center_diff
from ndtools._types import NumpyLike, PadValueError

from ._combine import Op, OpName, get_op
from ._range import at, get_src_dst_range

logger = logging.getLogger(__name__)


def as_pad_value(pad_value: Any,
                 dtype: npt.DTypeLike,
                 stacklevel: int = 2) -> np.generic:
    """
    Cast `pad_value` to scalar of `dtype`.

    Casts that lose more than float rounding (fractions to integers,
    overflow, complex to real with non-zero imaginary part, non-numbers
    to numbers) are rejected, unless `NDTOOLS_STRICT_PAD` is disabled.

    `stacklevel` is passed to `warnings.warn` as seen from the caller.
    """
    dtype = np.dtype(dtype)
    value = np.asarray(pad_value)
    if value.ndim:
        raise PadValueError(f'pad_value should be scalar, got: {pad_value!r}')

    try:
        with warnings.catch_warnings(), np.errstate(invalid='ignore',
                                                    over='ignore'):
            warnings.simplefilter('ignore', np.exceptions.ComplexWarning)
            r = value.astype(dtype)
    except (TypeError, ValueError) as exc:
        raise PadValueError(
            f'Cannot cast pad_value {pad_value!r} to {dtype}') from exc

    numeric = value.dtype.kind in 'biufc'
    match dtype.kind:
        case 'b' | 'i' | 'u':
            lossy = not numeric or r != value
        case 'f' | 'c':
            lossy = (not numeric
                     or (dtype.kind == 'f' and value.dtype.kind == 'c'
                         and value.imag != 0)
                     or (np.isfinite(value) and not np.isfinite(r)))
        case _:
            lossy = False

    if lossy:
        msg = f'pad_value {pad_value!r} is not representable as {dtype}'
        if env.NDTOOLS_STRICT_PAD:
            raise PadValueError(msg)
        warnings.warn(f'{msg}, used {r.item()!r}', stacklevel=stacklevel + 1)
    return r[()]


def select_region_inplace[T: np.ndarray](
    src: NumpyLike,
    dst: T,
    new_size: int | Iterable[int] | None = None,
    center: int | Iterable[int] | None = None,
    dst_center: int | Iterable[int] | None = None,
    op: OpName | Op = 'assign',
) -> T:
    """
    Write region of `src` into `dst`, in-place.

    ROI of `new_size` (defaults to `dst.shape`) is taken around `center`
    of `src` (defaults to its Fourier center) and put around `dst_center`
    of `dst` (defaults to its Fourier center).
    Only the part lying within both arrays is touched.

    Each of `new_size`, `center`, `dst_center` can be shorter than ndim,
    missing trailing axes are filled with defaults.

    `op` is applied as `op(dst_view, src_view)`, use one of
    'assign', 'add', 'sub', 'mul', 'div' or pass callable.

    Returns `dst`.
    """
    fn = get_op(op)
    src_shape = as_tuple(src.shape)
    dst_shape = as_tuple(dst.shape)

    new_size = dst_shape if new_size is None else new_size
    center = () if center is None else center
    dst_center = () if dst_center is None else dst_center

    new_size = expand_size(new_size, dst_shape)
    center = expand_size(center, ft_center_diff(src_shape))
    dst_center = expand_size(dst_center, ft_center_diff(dst_shape))

    loc = get_src_dst_range(src_shape, dst_shape, new_size, center,
                            dst_center)
    if loc is None:
        logger.debug('No overlap of %s ROI at %s of %s and %s of %s',
                     new_size, center, src_shape, dst_center, dst_shape)
        return dst

    src_loc, dst_loc = loc
    fn(at(dst, dst_loc), at(src, src_loc))
    return dst


def select_region(
    src: NumpyLike,
    new_size: int | Iterable[int] | None = None,
    center: int | Iterable[int] | None = None,
    pad_value: Any = 0,
    dst_center: int | Iterable[int] | None = None,
) -> np.ndarray:
    """
    Extract (crop, pad or shift) region of `src` to new array.

    Parameters:
    - new_size - shape of result, `src.shape` by default.
      Negative sizes are treated as 0.
    - center - point of `src` to put to `dst_center` of result.
      By default Fourier-centers of both are aligned.
    - pad_value - fill for parts of result not covered by `src`.
    - dst_center - Fourier-center of result by default.

    Sizes and centers with less than `src.ndim` items are
    expanded with defaults for trailing axes.

    Example:
    ```
    >>> select_region(np.ones((3, 3)), new_size=(7, 7), center=(0, 2))
    array([[0., 0., 0., 0., 0., 0., 0.],
           [0., 0., 0., 0., 0., 0., 0.],
           [0., 0., 0., 0., 0., 0., 0.],
           [0., 1., 1., 1., 0., 0., 0.],
           [0., 1., 1., 1., 0., 0., 0.],
           [0., 1., 1., 1., 0., 0., 0.],
           [0., 0., 0., 0., 0., 0., 0.]])
    ```
    """
    src_shape = as_tuple(src.shape)
    new_size = src_shape if new_size is None else new_size
    new_size = *(max(s, 0) for s in expand_size(new_size, src_shape)),

    pad_value = as_pad_value(pad_value, src.dtype)
    dst = np.full(new_size, pad_value, dtype=src.dtype)
    return select_region_inplace(
        src, dst, new_size=new_size, center=center, dst_center=dst_center)
