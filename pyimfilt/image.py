"""Pixel buffer representation shared by every filter.

An :class:`Image` is a flat, row-major ``uint8`` buffer plus its dimensions and
a :class:`PixelFormat` tag. The format is a closed set (gray, rgb); filters
match on it explicitly and never convert between formats behind the caller's
back.

Pixel ``(x, y)`` lives at ``(y * width + x) * channels`` in the buffer. For rgb
the three channel bytes follow each other (R, G, B).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Tuple, Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image as PILImage

from pyimfilt.errors import InvalidArgumentError
from pyimfilt.utils.param_check import check_dimension


class PixelFormat(str, Enum):
    """Supported pixel layouts."""

    GRAY = "gray"
    RGB = "rgb"

    @property
    def channels(self) -> int:
        return 1 if self is PixelFormat.GRAY else 3


_PIL_MODES = {
    PixelFormat.GRAY: "L",
    PixelFormat.RGB: "RGB",
}


def _coerce_buffer(data: Any) -> NDArray[np.uint8]:
    """Turn caller data into a flat, contiguous uint8 array.

    Writable contiguous uint8 ndarrays and bytearrays are adopted without a
    copy. Read-only arrays (such as another image's ``data()`` view) are
    copied so ``data_mut()`` always owns a writable buffer; everything else is
    validated and converted.
    """

    if isinstance(data, np.ndarray):
        arr = data if data.flags.writeable else data.copy()
    elif isinstance(data, (bytes, bytearray, memoryview)):
        if len(data) == 0:
            arr = np.empty(0, dtype=np.uint8)
        else:
            arr = np.frombuffer(data, dtype=np.uint8)
            if not arr.flags.writeable:
                arr = arr.copy()
    else:
        arr = np.asarray(data)
        if arr.size == 0:
            arr = arr.astype(np.uint8)

    if arr.ndim != 1:
        raise InvalidArgumentError(
            f"Pixel data must be a flat 1-D buffer, got shape {arr.shape}"
        )

    if arr.dtype != np.uint8:
        if arr.dtype.kind not in ("i", "u"):
            raise InvalidArgumentError(f"Pixel data must hold integers, got dtype={arr.dtype}")
        if arr.size and (int(arr.min()) < 0 or int(arr.max()) > 255):
            raise InvalidArgumentError(
                f"Pixel values must be in [0, 255]. Got min={int(arr.min())}, max={int(arr.max())}."
            )
        arr = arr.astype(np.uint8)

    return np.ascontiguousarray(arr)


class Image:
    """Row-major 8-bit image of fixed shape and mutable content.

    Build instances through :meth:`gray` and :meth:`rgb`; both check that the
    buffer length matches ``width * height * channels`` and raise
    :class:`~pyimfilt.errors.InvalidArgumentError` otherwise.

    Examples
    --------
    >>> img = Image.gray(2, 2, [10, 20, 30, 40])
    >>> img.width, img.height
    (2, 2)
    >>> img.pixel(1, 0)
    20
    """

    __slots__ = ("_format", "_width", "_height", "_data")

    def __init__(self, pixel_format: Union[str, PixelFormat], width: int, height: int, data: Any) -> None:
        try:
            fmt = PixelFormat(pixel_format)
        except ValueError as exc:
            raise InvalidArgumentError(f"Unknown pixel format: {pixel_format!r}") from exc

        w = check_dimension(width, param_name="width")
        h = check_dimension(height, param_name="height")
        buf = _coerce_buffer(data)

        expected = w * h * fmt.channels
        if buf.size != expected:
            raise InvalidArgumentError(
                f"{fmt.value} image of {w}x{h} needs {expected} bytes, got {buf.size}"
            )

        self._format = fmt
        self._width = w
        self._height = h
        self._data = buf

    # ------------------------------------------------------------------
    @classmethod
    def gray(cls, width: int, height: int, data: Any) -> "Image":
        """Single-channel image; ``len(data)`` must equal ``width * height``."""

        return cls(PixelFormat.GRAY, width, height, data)

    @classmethod
    def rgb(cls, width: int, height: int, data: Any) -> "Image":
        """Interleaved RGB image; ``len(data)`` must equal ``width * height * 3``."""

        return cls(PixelFormat.RGB, width, height, data)

    @classmethod
    def from_numpy(cls, array: NDArray) -> "Image":
        """Wrap an ``(H, W)`` array as gray or an ``(H, W, 3)`` array as rgb."""

        arr = np.asarray(array)
        if arr.ndim == 2:
            fmt = PixelFormat.GRAY
        elif arr.ndim == 3 and arr.shape[2] == 3:
            fmt = PixelFormat.RGB
        else:
            raise InvalidArgumentError(f"Expected shape (H,W) or (H,W,3), got {arr.shape}")
        height, width = int(arr.shape[0]), int(arr.shape[1])
        return cls(fmt, width, height, np.ascontiguousarray(arr).reshape(-1))

    @classmethod
    def from_pil(cls, pil_image: PILImage.Image) -> "Image":
        """Convert a Pillow image in mode ``L`` or ``RGB``.

        Other modes are rejected rather than converted.
        """

        if pil_image.mode == "L":
            fmt = PixelFormat.GRAY
        elif pil_image.mode == "RGB":
            fmt = PixelFormat.RGB
        else:
            raise InvalidArgumentError(
                f"Unsupported Pillow mode {pil_image.mode!r}; expected 'L' or 'RGB'"
            )
        width, height = pil_image.size
        data = np.asarray(pil_image, dtype=np.uint8).reshape(-1)
        return cls(fmt, width, height, data.copy())

    # ------------------------------------------------------------------
    @property
    def format(self) -> PixelFormat:
        return self._format

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def channels(self) -> int:
        return self._format.channels

    @property
    def shape(self) -> Tuple[int, ...]:
        """numpy-style shape: ``(H, W)`` for gray, ``(H, W, 3)`` for rgb."""

        if self._format is PixelFormat.GRAY:
            return (self._height, self._width)
        return (self._height, self._width, 3)

    @property
    def is_empty(self) -> bool:
        return self._width == 0 or self._height == 0

    def data(self) -> NDArray[np.uint8]:
        """Read-only view of the backing buffer."""

        view = self._data.view()
        view.flags.writeable = False
        return view

    def data_mut(self) -> NDArray[np.uint8]:
        """The backing buffer itself, for in-place edits."""

        return self._data

    def to_numpy(self) -> NDArray[np.uint8]:
        """Read-only view shaped like :attr:`shape`."""

        return self.data().reshape(self.shape)

    def to_pil(self) -> PILImage.Image:
        if self.is_empty:
            raise InvalidArgumentError("Cannot convert an empty image to Pillow")
        mode = _PIL_MODES[self._format]
        return PILImage.frombytes(mode, (self._width, self._height), self._data.tobytes())

    # ------------------------------------------------------------------
    def offset(self, x: int, y: int) -> int:
        """Buffer index of the first channel of pixel ``(x, y)``."""

        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._width}x{self._height} image")
        return (y * self._width + x) * self.channels

    def pixel(self, x: int, y: int) -> Union[int, Tuple[int, int, int]]:
        idx = self.offset(x, y)
        if self._format is PixelFormat.GRAY:
            return int(self._data[idx])
        r, g, b = (int(v) for v in self._data[idx : idx + 3])
        return (r, g, b)

    def copy(self) -> "Image":
        return Image(self._format, self._width, self._height, self._data.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self._format is other._format
            and self._width == other._width
            and self._height == other._height
            and np.array_equal(self._data, other._data)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Image(format={self._format.value!r}, width={self._width}, height={self._height})"
