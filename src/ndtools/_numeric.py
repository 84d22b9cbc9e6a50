__all__ = [
    'complex_dtype',
    'delta_phase',
    'exp_decay',
    'multi_exp_decay',
    'pack',
    'radial_mean',
    'soft_delta',
    'soft_theta',
]

from collections.abc import Callable, Iterable, Sequence
from math import pi

import numpy as np
import numpy.typing as npt

from ._env import env
from ._size import ft_center_diff, normalize_axes
from ._types import ShapeError

# ------------------------------ soft functions -----------------------------


def soft_theta(x: npt.ArrayLike, eps: float | None = None):
    """
    Differentiable step function.

    Gives 0 below `-eps`, 1 above `eps`, and cosine ramp in between.
    `eps` defaults to `NDTOOLS_SOFT_EPS`.
    """
    if eps is None:
        eps = env.NDTOOLS_SOFT_EPS
    x = np.asarray(x, dtype='f8')
    ramp = (1 - np.cos((x + eps) * (pi / (2 * eps)))) / 2
    r = np.where(x > eps, 1.0, np.where(x < -eps, 0.0, ramp))
    return r[()]


def soft_delta(x: npt.ArrayLike, eps: float | None = None):
    """
    Differentiable peak of `2 * eps` width, equal to 1 at 0.
    Not normalized to unit area.
    """
    if eps is None:
        eps = env.NDTOOLS_SOFT_EPS
    x = np.asarray(x)
    peak = (1 + np.cos(x * (pi / eps))) / 2
    r = np.where(np.abs(x) > abs(eps), 0.0, peak)
    return r[()]


def exp_decay(t: npt.ArrayLike,
              tau: npt.ArrayLike,
              eps: float | None = None) -> np.ndarray:
    """
    Exponential decay starting at t = 0 with soft onset.
    For vector of `tau`, decays are stacked along new last axis.
    """
    t = np.asarray(t, dtype='f8')
    tau = np.asarray(tau, dtype='f8')
    if tau.ndim:
        t = t[..., None]
    return soft_theta(t, eps) * np.exp(-t / tau)


def multi_exp_decay(t: npt.ArrayLike,
                    amps: npt.ArrayLike,
                    taus: npt.ArrayLike,
                    eps: float | None = None) -> np.ndarray:
    """Sum of `amps`-weighted decays with lifetimes `taus`"""
    amps = np.atleast_1d(np.asarray(amps, dtype='f8'))
    taus = np.atleast_1d(np.asarray(taus, dtype='f8'))
    if amps.shape != taus.shape:
        raise ShapeError('amps and taus should be of same length, got: '
                         f'{amps.shape} and {taus.shape}')
    return (amps * exp_decay(t, taus, eps)).sum(-1)


# --------------------------------- binning ---------------------------------


def radial_mean(
    data: np.ndarray,
    nbins: int | None = None,
    bin_step: float | None = None,
    scale: Sequence[float] | None = None,
    center: Sequence[float] | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Average `data` over rings around `center`.

    Parameters:
    - nbins - number of rings, outer pixels are joined into the last one.
      By default enough to cover whole array.
    - bin_step - ring width, `max(scale)` by default.
    - scale - pixel size along each axis, 1 by default.
    - center - ring center in pixel coordinates, may be fractional.
      Fourier center of `data` by default.

    Returns mean per ring and ring centers. Empty rings give 0.
    """
    data = np.asarray(data)
    scale = (1, ) * data.ndim if scale is None else tuple(scale)
    if len(scale) != data.ndim:
        raise ShapeError(f'scale should be {data.ndim}D, got: {scale}')
    if bin_step is None:
        bin_step = max(scale)
    center = ft_center_diff(data.shape) if center is None else tuple(center)
    if len(center) != data.ndim:
        raise ShapeError(f'center should be {data.ndim}D, got: {center}')

    r2 = np.zeros(data.shape, dtype='f8')
    for axis, (size, c, s) in enumerate(
            zip(data.shape, center, scale)):
        x = (np.arange(size) - c) * (s / bin_step)
        r2 += (x ** 2).reshape(
            [size if a == axis else 1 for a in range(data.ndim)])

    idx = np.rint(np.sqrt(r2)).astype(np.intp)  # Round half to even
    if nbins is None:
        nbins = int(idx.max()) + 1 if idx.size else 0
    else:
        np.minimum(idx, nbins - 1, out=idx)

    bin_centers = bin_step * (np.arange(nbins) + 0.5)

    sums = np.zeros(nbins, dtype=np.result_type(data.dtype, 'f8'))
    np.add.at(sums, idx.ravel(), data.ravel())
    counts = np.bincount(idx.ravel(), minlength=nbins)
    counts[counts == 0] = 1
    return sums / counts, bin_centers


# ---------------------------------- phase ----------------------------------


def delta_phase(a: np.ndarray, axis: int) -> np.ndarray:
    """
    Phase difference of neighbors along `axis`,
    computed by complex division so no unwrapping is needed.
    `a` must be non-zero.
    """
    axis, = normalize_axes(axis, a.ndim)
    lo = [slice(None)] * a.ndim
    hi = [slice(None)] * a.ndim
    lo[axis] = slice(None, -1)
    hi[axis] = slice(1, None)
    return np.angle(a[*lo] / a[*hi])


def complex_dtype(x: npt.ArrayLike | npt.DTypeLike) -> np.dtype:
    """
    Complex dtype to hold values of `x` without precision loss.

    >>> complex_dtype(np.float32(1))
    dtype('complex64')
    >>> complex_dtype(22.2)
    dtype('complex128')
    """
    if isinstance(x, np.dtype | type):
        dtype = np.dtype(x)
    else:
        dtype = np.asarray(x).dtype
    return np.result_type(dtype, np.complex64)


# ------------------------------ fit parameters -----------------------------


def pack(
    values: Sequence[npt.ArrayLike],
    do_fit: Iterable[bool],
    rel_scale: float | None = None,
    dtype: npt.DTypeLike = 'f8',
) -> tuple[np.ndarray, Callable[[np.ndarray], tuple]]:
    """
    Pack parameters marked with `do_fit` into single flat vector
    for use in optimizers. Others are kept as constants.

    With `rel_scale` each packed parameter is divided by
    `rel_scale * mean(parameter)`, normalizing its magnitude.

    Returns vector and function to restore all the parameters from it.
    """
    do_fit = [bool(f) for f in do_fit]
    if len(do_fit) != len(values):
        raise ShapeError(f'Got {len(values)} values, '
                         f'but {len(do_fit)} fit flags')

    parts: list[np.ndarray] = []
    layout: list[tuple[bool, tuple[int, ...], object]] = []
    for v, fit in zip(values, do_fit):
        if not fit:
            layout.append((False, (), v))
            continue
        arr = np.asarray(v, dtype='f8')
        scale = 1.0 if rel_scale is None else arr.mean() * rel_scale
        parts.append(arr.ravel() / scale)
        layout.append((True, arr.shape, scale))

    vec = np.concatenate(parts) if parts else np.empty(0)
    vec = vec.astype(dtype)

    def unpack(vec: np.ndarray) -> tuple:
        r = []
        pos = 0
        for fit, shape, s in layout:
            if not fit:
                r.append(s)
                continue
            n = int(np.prod(shape))
            r.append((vec[pos:pos + n] * s).reshape(shape)[()])
            pos += n
        return *r,

    return vec, unpack
