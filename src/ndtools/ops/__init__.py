from ._combine import (Op, OpName, add_to, assign_to, div_to, get_op, mul_to,
                       sub_to)
from ._range import at, get_src_dst_range, to_slices
from ._select import as_pad_value, select_region, select_region_inplace
from ._view import PaddedView, select_region_view

__all__ = [
    'Op',
    'OpName',
    'PaddedView',
    'add_to',
    'as_pad_value',
    'assign_to',
    'at',
    'div_to',
    'get_op',
    'get_src_dst_range',
    'mul_to',
    'select_region',
    'select_region_inplace',
    'select_region_view',
    'sub_to',
    'to_slices',
]
