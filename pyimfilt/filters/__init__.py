"""
Spatial filters over :class:`~pyimfilt.image.Image` buffers.

Every filter is a pure function: it reads its input and returns a freshly
allocated image. Grayscale-only filters raise ``InvalidOperationError`` on rgb
input instead of converting.
"""

from .blur import convolve_1d, gaussian_blur, gaussian_kernel
from .border import BorderPolicy, parse_border_policy
from .edges import SOBEL_X, SOBEL_Y, sobel_edge_detection
from .resampling import (
    RESIZE_REGISTRY,
    Algorithm,
    Backend,
    ResizeRegistry,
    is_resize_supported,
    parse_algorithm,
    parse_backend,
    register_resize,
    resize,
    resize_capabilities,
    resize_nearest_cpu,
)
from .threshold import threshold_binary

__all__ = [
    # Resize
    "Algorithm",
    "Backend",
    "RESIZE_REGISTRY",
    "ResizeRegistry",
    "is_resize_supported",
    "parse_algorithm",
    "parse_backend",
    "register_resize",
    "resize",
    "resize_capabilities",
    "resize_nearest_cpu",
    # Fixed-algorithm filters
    "sobel_edge_detection",
    "SOBEL_X",
    "SOBEL_Y",
    "threshold_binary",
    "gaussian_blur",
    "gaussian_kernel",
    "convolve_1d",
    # Border handling
    "BorderPolicy",
    "parse_border_policy",
]
