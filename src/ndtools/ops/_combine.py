__all__ = [
    'Op',
    'OpName',
    'add_to',
    'assign_to',
    'div_to',
    'get_op',
    'mul_to',
    'sub_to',
]

from collections.abc import Callable
from typing import Literal

import numpy as np

# In-place elementwise operator, `op(dst, src)` updates `dst`
type Op = Callable[[np.ndarray, np.ndarray], object]
type OpName = Literal['assign', 'add', 'sub', 'mul', 'div']


def assign_to(a: np.ndarray, b) -> None:
    """`a[...] = b`"""
    a[...] = b


def add_to(a: np.ndarray, b) -> None:
    """`a += b`"""
    a += b


def sub_to(a: np.ndarray, b) -> None:
    """`a -= b`"""
    a -= b


def mul_to(a: np.ndarray, b) -> None:
    """`a *= b`"""
    a *= b


def div_to(a: np.ndarray, b) -> None:
    """`a /= b`. Integer `a` is not supported, as numpy can't cast back"""
    a /= b


_OPS: dict[str, Op] = {
    'assign': assign_to,
    'add': add_to,
    'sub': sub_to,
    'mul': mul_to,
    'div': div_to,
}


def get_op(op: OpName | Op) -> Op:
    if callable(op):
        return op
    if (fn := _OPS.get(op)) is None:
        raise ValueError(f'Unknown op: {op!r}. Use one of {[*_OPS]} '
                         'or callable of (dst, src)')
    return fn
