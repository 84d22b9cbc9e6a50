__all__ = ['PaddedView', 'select_region_view']

from collections.abc import Iterable
from types import EllipsisType
from typing import Any

import numpy as np
import numpy.typing as npt

from ndtools._size import as_tuple, expand_size, ft_center_diff
from ndtools._types import Shape, Vec

from ._select import as_pad_value

type _Index = int | slice | EllipsisType
type _Key = _Index | tuple[_Index, ...]


class PaddedView:
    """
    Virtual array of `shape` backed by `data` placed at `offset`.

    Reads outside of `data` give `pad_value`, writes there are dropped.
    Writes inside go directly to `data`, so view can be used
    to update region of interest in-place.

    Supports integer, slice and Ellipsis indexing.
    """
    __slots__ = ('data', 'offset', 'pad_value', 'shape')

    def __init__(self, data: np.ndarray, shape: Iterable[int], offset: Vec,
                 pad_value: Any) -> None:
        self.data = data
        self.shape: Shape = as_tuple(shape)
        self.offset: Vec = as_tuple(offset)
        self.pad_value = as_pad_value(pad_value, data.dtype)
        if not (len(self.shape) == len(self.offset) == data.ndim):
            raise ValueError(f'Shape {self.shape} and offset {self.offset} '
                             f'should be {data.ndim}D as data')

    def __repr__(self) -> str:
        return (f'{type(self).__name__}(shape={self.shape}, '
                f'offset={self.offset}, pad_value={self.pad_value!r}, '
                f'dtype={self.dtype})')

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    @property
    def ndim(self) -> int:
        return len(self.shape)

    @property
    def size(self) -> int:
        return int(np.prod(self.shape))

    def __len__(self) -> int:
        if not self.shape:
            raise TypeError('len() of unsized object')
        return self.shape[0]

    def __array__(self,
                  dtype: npt.DTypeLike = None,
                  copy: bool | None = None) -> np.ndarray:
        if copy is False:
            raise ValueError(f'{type(self).__name__} is always copied '
                             'on conversion to array')
        r = self[...]
        return r if dtype is None else r.astype(dtype)

    def _resolve(
        self, key: _Key
    ) -> tuple[list[np.ndarray], list[np.ndarray], tuple[int, ...]]:
        """
        Map key to per-axis view indices, matching data indices,
        and axes to squeeze (those indexed with integer).
        """
        if not isinstance(key, tuple):
            key = key,
        if (n := sum(k is Ellipsis for k in key)) > 1:
            raise IndexError('an index can only have a single ellipsis')
        if n:
            pos = key.index(Ellipsis)
            fill = (slice(None), ) * (self.ndim - len(key) + 1)
            key = key[:pos] + fill + key[pos + 1:]
        if len(key) > self.ndim:
            raise IndexError(f'too many indices for {self.ndim}D view')
        key = key + (slice(None), ) * (self.ndim - len(key))

        masks, idxs, squeeze = [], [], []
        for axis, (k, size, o, dsize) in enumerate(
                zip(key, self.shape, self.offset, self.data.shape)):
            if not isinstance(k, slice | int | np.integer):
                raise IndexError(f'Unsupported index {k!r}')
            vidx = np.atleast_1d(np.arange(size)[k])  # Raises IndexError
            if not isinstance(k, slice):
                squeeze.append(axis)
            didx = vidx - o
            mask = (didx >= 0) & (didx < dsize)
            masks.append(mask)
            idxs.append(didx[mask])
        return masks, idxs, (*squeeze, )

    def __getitem__(self, key: _Key) -> np.ndarray | np.generic:
        masks, idxs, squeeze = self._resolve(key)
        r = np.full([m.size for m in masks], self.pad_value, self.dtype)
        if all(i.size for i in idxs):
            r[np.ix_(*masks)] = self.data[np.ix_(*idxs)]
        r = r.squeeze(squeeze)
        return r[()] if r.ndim == 0 else r

    def __setitem__(self, key: _Key, value: Any) -> None:
        masks, idxs, squeeze = self._resolve(key)
        value = np.asarray(value)

        # Broadcast as to the squeezed selection, then restore squeezed axes
        shape = [m.size for m in masks]
        sel_shape = [s for a, s in enumerate(shape) if a not in squeeze]
        while value.ndim > len(sel_shape) and value.shape[0] == 1:
            value = value[0]
        value = np.broadcast_to(value, sel_shape).reshape(shape)

        if all(i.size for i in idxs):
            self.data[np.ix_(*idxs)] = value[np.ix_(*masks)]


def select_region_view(
    src: np.ndarray,
    new_size: int | Iterable[int] | None = None,
    center: int | Iterable[int] | None = None,
    pad_value: Any = 0,
) -> PaddedView:
    """
    Same as `select_region` but without copying.

    Returns mutable view of `new_size` shape with `center` of `src`
    at its Fourier center. Region outside of `src` reads as `pad_value`,
    writes to it are ignored.
    """
    src_shape = as_tuple(src.shape)
    new_size = src_shape if new_size is None else new_size
    new_size = *(max(s, 0) for s in expand_size(new_size, src_shape)),
    center = () if center is None else center
    center = expand_size(center, ft_center_diff(src_shape))

    offset = *(c1 - c0 for c0, c1 in zip(center, ft_center_diff(new_size))),
    pad_value = as_pad_value(pad_value, src.dtype)
    return PaddedView(src, new_size, offset, pad_value)
