__all__ = [
    'IndexRanges',
    'NumpyLike',
    'PadValueError',
    'Shape',
    'ShapeError',
    'Span',
    'Vec',
]

from collections.abc import Sequence
from typing import Protocol

import numpy as np

type Shape = tuple[int, ...]  # N-dim shape
type Span = tuple[int, int]  # start/stop for `slice()`
type Vec = tuple[int, ...]  # N-dim radius-vector to some point

# Matching (src, dst) spans, one pair of tuples per call
type IndexRanges = tuple[tuple[Span, ...], tuple[Span, ...]]


class NumpyLike(Protocol):
    @property
    def shape(self) -> Sequence[int]: ...

    @property
    def dtype(self) -> np.dtype: ...

    def __getitem__(self, key: slice | tuple[slice, ...]) -> np.ndarray: ...


class ShapeError(ValueError):
    """Size, center or axis sequence does not fit the array it refers to"""


class PadValueError(TypeError):
    """Pad value is not representable in the element type of the array"""
