"""pyimfilt - minimal pixel processing.

An :class:`Image` buffer (gray or rgb, row-major ``uint8``) plus a handful of
pure spatial filters: resize with pluggable (backend, algorithm) dispatch,
Sobel edges, binary threshold and separable Gaussian blur.

Exports are resolved lazily so ``import pyimfilt`` stays cheap.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__version__ = "0.1.0"

__all__ = [
    # Modules
    "config",
    "errors",
    "filters",
    "image",
    "pipeline",
    "utils",
    # Data model
    "Image",
    "PixelFormat",
    # Errors
    "PixfiltError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "UnsupportedCapabilityError",
    # Filters
    "Algorithm",
    "Backend",
    "BorderPolicy",
    "resize",
    "sobel_edge_detection",
    "threshold_binary",
    "gaussian_blur",
    "gaussian_kernel",
    # Pipelines
    "FilterPipeline",
    "load_config",
]


_LAZY_SUBMODULES = {
    "config",
    "errors",
    "filters",
    "image",
    "pipeline",
    "utils",
}

_LAZY_EXPORTS = {
    "Image": ("image", "Image"),
    "PixelFormat": ("image", "PixelFormat"),
    "PixfiltError": ("errors", "PixfiltError"),
    "InvalidArgumentError": ("errors", "InvalidArgumentError"),
    "InvalidOperationError": ("errors", "InvalidOperationError"),
    "UnsupportedCapabilityError": ("errors", "UnsupportedCapabilityError"),
    "Algorithm": ("filters", "Algorithm"),
    "Backend": ("filters", "Backend"),
    "BorderPolicy": ("filters", "BorderPolicy"),
    "resize": ("filters", "resize"),
    "sobel_edge_detection": ("filters", "sobel_edge_detection"),
    "threshold_binary": ("filters", "threshold_binary"),
    "gaussian_blur": ("filters", "gaussian_blur"),
    "gaussian_kernel": ("filters", "gaussian_kernel"),
    "FilterPipeline": ("pipeline", "FilterPipeline"),
    "load_config": ("config", "load_config"),
}


def __getattr__(name: str) -> Any:  # pragma: no cover - thin delegation
    if name in _LAZY_SUBMODULES:
        module = import_module(f"{__name__}.{name}")
        globals()[name] = module
        return module

    target = _LAZY_EXPORTS.get(name)
    if target is not None:
        module_name, attr = target
        module = import_module(f"{__name__}.{module_name}")
        value = getattr(module, attr)
        globals()[name] = value
        return value

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - tooling convenience
    return sorted(set(globals()) | set(__all__))
