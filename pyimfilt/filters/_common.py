from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pyimfilt.errors import InvalidOperationError
from pyimfilt.image import Image, PixelFormat


def require_gray(image: Image, message: str) -> None:
    if image.format is not PixelFormat.GRAY:
        raise InvalidOperationError(message)


def to_uint8(values: NDArray) -> NDArray[np.uint8]:
    """Clamp to [0, 255] and truncate toward zero."""

    return np.clip(values, 0.0, 255.0).astype(np.uint8)
