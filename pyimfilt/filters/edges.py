"""Sobel edge detection on grayscale images."""

from __future__ import annotations

import logging
from typing import Union

import numpy as np

from pyimfilt.errors import InvalidArgumentError
from pyimfilt.filters._common import require_gray, to_uint8
from pyimfilt.filters.border import BorderPolicy, correlate_2d, parse_border_policy
from pyimfilt.image import Image

logger = logging.getLogger(__name__)


SOBEL_X = np.array(
    [[-1.0, 0.0, 1.0],
     [-2.0, 0.0, 2.0],
     [-1.0, 0.0, 1.0]]
)
SOBEL_Y = np.array(
    [[-1.0, -2.0, -1.0],
     [0.0, 0.0, 0.0],
     [1.0, 2.0, 1.0]]
)


def sobel_edge_detection(
    image: Image,
    *,
    border: Union[str, BorderPolicy] = BorderPolicy.SKIP,
) -> Image:
    """
    Gradient magnitude of a grayscale image.

    Parameters
    ----------
    image : Image
        Grayscale input. RGB input raises ``InvalidOperationError``.
    border : str or BorderPolicy, default='skip'
        ``skip`` drops neighbours outside the image (zero padding), which
        biases magnitudes near the border; ``replicate`` clamps to the edge.
        ``renormalize`` is rejected because the Sobel kernels sum to zero.

    Returns
    -------
    edges : Image
        Grayscale image of the same size holding ``min(|gx| + |gy|, 255)``.
        This is the L1 magnitude, not the Euclidean one.

    Examples
    --------
    >>> img = Image.gray(3, 3, [0, 0, 0, 0, 255, 255, 0, 0, 0])
    >>> sobel_edge_detection(img).pixel(1, 1)
    255
    """
    require_gray(image, "Sobel only implemented for grayscale images")
    policy = parse_border_policy(border)
    if policy is BorderPolicy.RENORMALIZE:
        raise InvalidArgumentError("Sobel does not support border policy 'renormalize'")

    if image.is_empty:
        return image.copy()

    plane = image.to_numpy().astype(np.float64)
    gx = correlate_2d(plane, SOBEL_X, policy=policy)
    gy = correlate_2d(plane, SOBEL_Y, policy=policy)
    magnitude = np.abs(gx) + np.abs(gy)

    logger.debug("Applied sobel edge detection: %dx%d border=%s", image.width, image.height, policy.value)
    return Image.from_numpy(to_uint8(magnitude))
