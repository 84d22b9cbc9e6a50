from ._dims import (center_value, collect_dim, expand_dims,
                    flatten_trailing_dims, reorient, slice_, slice_indices)
from ._env import env
from ._numeric import (complex_dtype, delta_phase, exp_decay, multi_exp_decay,
                       pack, radial_mean, soft_delta, soft_theta)
from ._size import (apply_dims, apply_tuple_list, center_position, expand_add,
                    expand_size, ft_center_diff, linear_index, select_sizes,
                    single_dim_size)
from ._types import PadValueError, Shape, ShapeError, Span, Vec
from .ops import (PaddedView, add_to, assign_to, div_to, get_src_dst_range,
                  mul_to, select_region, select_region_inplace,
                  select_region_view, sub_to)

__all__ = [
    'PadValueError',
    'PaddedView',
    'Shape',
    'ShapeError',
    'Span',
    'Vec',
    'add_to',
    'apply_dims',
    'apply_tuple_list',
    'assign_to',
    'center_position',
    'center_value',
    'collect_dim',
    'complex_dtype',
    'delta_phase',
    'div_to',
    'env',
    'exp_decay',
    'expand_add',
    'expand_dims',
    'expand_size',
    'flatten_trailing_dims',
    'ft_center_diff',
    'get_src_dst_range',
    'linear_index',
    'mul_to',
    'multi_exp_decay',
    'pack',
    'radial_mean',
    'reorient',
    'select_region',
    'select_region_inplace',
    'select_region_view',
    'select_sizes',
    'single_dim_size',
    'slice_',
    'slice_indices',
    'soft_delta',
    'soft_theta',
    'sub_to',
]
