from __future__ import annotations

import logging

import numpy as np

from pyimfilt.filters._common import require_gray
from pyimfilt.image import Image
from pyimfilt.utils.param_check import check_byte

logger = logging.getLogger(__name__)


def threshold_binary(image: Image, thresh: int, maxval: int) -> Image:
    """Map every sample ``v`` to ``maxval`` if ``v > thresh`` else ``0``.

    Both values must be bytes; no relation between them is enforced, so an
    inverted ``maxval=0`` is accepted and yields an all-black image.
    """
    require_gray(image, "Binary threshold only for grayscale images")
    t = check_byte(thresh, param_name="thresh")
    m = check_byte(maxval, param_name="maxval")

    data = image.data()
    out = np.where(data > t, np.uint8(m), np.uint8(0)).astype(np.uint8)

    logger.debug("Applied binary threshold: thresh=%d maxval=%d", t, m)
    return Image.gray(image.width, image.height, out)
