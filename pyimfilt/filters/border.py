"""Border handling for the correlation helpers shared by the filters.

All filters index neighbours as ``source[pos + i - k]`` for a kernel of odd
length ``2k + 1`` (correlation, not flipped convolution). What happens when
that index falls outside the image is decided by a :class:`BorderPolicy`:

``skip``
    Out-of-bounds taps are dropped and the remaining weights are *not*
    rescaled. Equivalent to zero padding. Near the border the effective kernel
    sums to less than one, so smoothing kernels darken the edges. This is the
    default everywhere.
``renormalize``
    Out-of-bounds taps are dropped and the result is divided by the sum of the
    in-bounds weights. Only meaningful for kernels whose weights do not sum to
    zero.
``replicate``
    Coordinates are clamped to the nearest edge pixel.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage

from pyimfilt.errors import InvalidArgumentError


class BorderPolicy(str, Enum):
    """How taps that fall outside the image are treated."""

    SKIP = "skip"
    RENORMALIZE = "renormalize"
    REPLICATE = "replicate"


# scipy.ndimage boundary modes; RENORMALIZE runs on top of "constant".
_NDIMAGE_MODES = {
    BorderPolicy.SKIP: "constant",
    BorderPolicy.RENORMALIZE: "constant",
    BorderPolicy.REPLICATE: "nearest",
}


def parse_border_policy(raw: Union[str, BorderPolicy]) -> BorderPolicy:
    if isinstance(raw, BorderPolicy):
        return raw
    try:
        return BorderPolicy(str(raw).lower())
    except ValueError as exc:
        choices = ", ".join(p.value for p in BorderPolicy)
        raise InvalidArgumentError(f"Unknown border policy: {raw!r}. Expected one of: {choices}") from exc


def _renormalized(acc: NDArray, weight: NDArray) -> NDArray:
    return np.divide(acc, weight, out=np.zeros_like(acc), where=weight != 0)


def correlate_1d(plane: NDArray, kernel: NDArray, *, axis: int, policy: BorderPolicy) -> NDArray[np.float64]:
    """Correlate every line of a 2-D float plane along ``axis`` with ``kernel``.

    ``axis=1`` runs along rows (horizontal pass), ``axis=0`` along columns.
    """

    plane = np.asarray(plane, dtype=np.float64)
    weights = np.asarray(kernel, dtype=np.float64)
    if plane.size == 0:
        return plane.copy()

    mode = _NDIMAGE_MODES[policy]
    acc = ndimage.correlate1d(plane, weights, axis=axis, mode=mode, cval=0.0)
    if policy is BorderPolicy.RENORMALIZE:
        weight = ndimage.correlate1d(np.ones_like(plane), weights, axis=axis, mode=mode, cval=0.0)
        return _renormalized(acc, weight)
    return acc


def correlate_2d(plane: NDArray, kernel: NDArray, *, policy: BorderPolicy) -> NDArray[np.float64]:
    """Correlate a 2-D float plane with a small odd-sized 2-D kernel."""

    plane = np.asarray(plane, dtype=np.float64)
    weights = np.asarray(kernel, dtype=np.float64)
    if plane.size == 0:
        return plane.copy()

    mode = _NDIMAGE_MODES[policy]
    if policy is BorderPolicy.RENORMALIZE:
        if np.isclose(weights.sum(), 0.0):
            raise InvalidArgumentError(
                "Border policy 'renormalize' is undefined for kernels whose weights sum to zero"
            )
        acc = ndimage.correlate(plane, weights, mode=mode, cval=0.0)
        weight = ndimage.correlate(np.ones_like(plane), weights, mode=mode, cval=0.0)
        return _renormalized(acc, weight)
    return ndimage.correlate(plane, weights, mode=mode, cval=0.0)
