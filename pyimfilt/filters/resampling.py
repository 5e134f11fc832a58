"""
Resize dispatch over (backend, algorithm) pairs.

Every pair lives in a capability table. A pair either maps to a transform
callable or is left unsupported, in which case :func:`resize` raises
:class:`~pyimfilt.errors.UnsupportedCapabilityError`. Adding an implementation
is a single :func:`register_resize` decoration; call sites never change.

Only ``(Backend.CPU, Algorithm.NEAREST)`` is implemented.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Union

import numpy as np

from pyimfilt.errors import InvalidArgumentError, UnsupportedCapabilityError
from pyimfilt.image import Image
from pyimfilt.utils.param_check import check_dimension

logger = logging.getLogger(__name__)

ResizeTransform = Callable[[Image, int, int], Image]


class Backend(str, Enum):
    """Execution strategy for a resize."""

    CPU = "cpu"
    SIMD = "simd"
    GPU = "gpu"


class Algorithm(str, Enum):
    """Sampling strategy for a resize."""

    NEAREST = "nearest"
    BILINEAR = "bilinear"
    BICUBIC = "bicubic"


def parse_backend(raw: Union[str, Backend]) -> Backend:
    if isinstance(raw, Backend):
        return raw
    try:
        return Backend(str(raw).lower())
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown resize backend: {raw!r}") from exc


def parse_algorithm(raw: Union[str, Algorithm]) -> Algorithm:
    if isinstance(raw, Algorithm):
        return raw
    try:
        return Algorithm(str(raw).lower())
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown resize algorithm: {raw!r}") from exc


@dataclass
class ResizeEntry:
    backend: Backend
    algorithm: Algorithm
    transform: Optional[ResizeTransform]

    @property
    def supported(self) -> bool:
        return self.transform is not None


class ResizeRegistry:
    """Capability table covering every (backend, algorithm) pair."""

    def __init__(self) -> None:
        self._registry: Dict[Tuple[Backend, Algorithm], ResizeEntry] = {
            (backend, algorithm): ResizeEntry(backend, algorithm, None)
            for backend in Backend
            for algorithm in Algorithm
        }

    # ------------------------------------------------------------------
    def register(
        self,
        backend: Union[str, Backend],
        algorithm: Union[str, Algorithm],
        transform: ResizeTransform,
        *,
        overwrite: bool = False,
    ) -> None:
        key = (parse_backend(backend), parse_algorithm(algorithm))
        if not overwrite and self._registry[key].supported:
            raise KeyError(
                f"Resize {key[0].value}/{key[1].value} already registered. "
                "Set overwrite=True to replace it."
            )
        self._registry[key] = ResizeEntry(key[0], key[1], transform)

    def get(self, backend: Union[str, Backend], algorithm: Union[str, Algorithm]) -> ResizeTransform:
        entry = self.info(backend, algorithm)
        if entry.transform is None:
            raise UnsupportedCapabilityError(
                f"{entry.algorithm.value.capitalize()} resize not implemented yet "
                f"for the {entry.backend.value} backend",
                backend=entry.backend,
                algorithm=entry.algorithm,
            )
        return entry.transform

    def info(self, backend: Union[str, Backend], algorithm: Union[str, Algorithm]) -> ResizeEntry:
        return self._registry[(parse_backend(backend), parse_algorithm(algorithm))]

    def capabilities(self) -> Dict[Tuple[Backend, Algorithm], bool]:
        return {key: entry.supported for key, entry in self._registry.items()}


RESIZE_REGISTRY = ResizeRegistry()


def register_resize(
    backend: Union[str, Backend],
    algorithm: Union[str, Algorithm],
    *,
    overwrite: bool = False,
) -> Callable[[ResizeTransform], ResizeTransform]:
    """
    Decorator registering a resize transform for one (backend, algorithm) pair.

    The transform receives the source image and validated, non-zero target
    dimensions, and must return a new image of the same pixel format.

    Examples
    --------
    >>> @register_resize("simd", "nearest")
    ... def resize_nearest_simd(img, new_width, new_height):
    ...     ...
    """

    def decorator(transform: ResizeTransform) -> ResizeTransform:
        RESIZE_REGISTRY.register(backend, algorithm, transform, overwrite=overwrite)
        return transform

    return decorator


def resize_capabilities() -> Dict[Tuple[Backend, Algorithm], bool]:
    """Full (backend, algorithm) matrix with a supported flag per pair."""
    return RESIZE_REGISTRY.capabilities()


def is_resize_supported(backend: Union[str, Backend], algorithm: Union[str, Algorithm]) -> bool:
    return RESIZE_REGISTRY.info(backend, algorithm).supported


def resize(
    img: Image,
    new_width: int,
    new_height: int,
    backend: Union[str, Backend] = Backend.CPU,
    algorithm: Union[str, Algorithm] = Algorithm.NEAREST,
) -> Image:
    """
    Resize an image to ``new_width`` x ``new_height``.

    Parameters
    ----------
    img : Image
        Source image, gray or rgb.
    new_width, new_height : int
        Target size, >= 0. A zero dimension yields an empty image.
    backend : str or Backend, default='cpu'
    algorithm : str or Algorithm, default='nearest'

    Returns
    -------
    resized : Image
        New image of the same pixel format.

    Raises
    ------
    UnsupportedCapabilityError
        The (backend, algorithm) pair has no implementation.
    InvalidArgumentError
        Negative target size, or an empty source with a non-empty target.
    """
    transform = RESIZE_REGISTRY.get(backend, algorithm)
    nw = check_dimension(new_width, param_name="new_width")
    nh = check_dimension(new_height, param_name="new_height")

    if nw == 0 or nh == 0:
        return Image(img.format, nw, nh, np.zeros(nw * nh * img.channels, dtype=np.uint8))
    if img.is_empty:
        raise InvalidArgumentError(
            f"Cannot resize an empty {img.width}x{img.height} image to {nw}x{nh}"
        )

    out = transform(img, nw, nh)
    logger.debug(
        "Resized %dx%d -> %dx%d (%s, %s)",
        img.width, img.height, nw, nh, parse_backend(backend).value, parse_algorithm(algorithm).value,
    )
    return out


@register_resize(Backend.CPU, Algorithm.NEAREST)
def resize_nearest_cpu(img: Image, new_width: int, new_height: int) -> Image:
    """Floor-based forward mapping: ``src = dst * size // new_size``.

    Not centre-aligned. Upscaling by an integer factor repeats each source
    pixel into a block; downscaling keeps the top-left sample of each block.
    """
    src_x = (np.arange(new_width, dtype=np.int64) * img.width) // new_width
    src_y = (np.arange(new_height, dtype=np.int64) * img.height) // new_height

    plane = img.to_numpy()
    out = plane[src_y[:, None], src_x[None, :]]
    return Image.from_numpy(np.ascontiguousarray(out))
