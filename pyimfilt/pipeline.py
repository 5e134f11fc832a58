"""
Chain filters into a reusable pipeline.

A pipeline is an ordered list of ``(operation, params)`` steps. Each step
calls one filter function with the previous step's output, so the input image
is never modified. Pipelines can be described in a config file::

    {"steps": [{"op": "gaussian_blur", "ksize": 5, "sigma": 1.2},
               {"op": "sobel"},
               {"op": "threshold_binary", "thresh": 60, "maxval": 255}]}

Step params are the keyword arguments of the filter function.
"""

from __future__ import annotations

import inspect
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Tuple

from pyimfilt.config.io import load_config
from pyimfilt.errors import InvalidArgumentError
from pyimfilt.filters import gaussian_blur, resize, sobel_edge_detection, threshold_binary
from pyimfilt.image import Image

logger = logging.getLogger(__name__)


OPERATIONS: Dict[str, Callable[..., Image]] = {
    "resize": resize,
    "sobel": sobel_edge_detection,
    "threshold_binary": threshold_binary,
    "gaussian_blur": gaussian_blur,
}


def list_operations() -> List[str]:
    return sorted(OPERATIONS)


class FilterPipeline:
    """
    Build and execute filter pipelines.

    Examples
    --------
    >>> pipeline = FilterPipeline()
    >>> pipeline.add_step('gaussian_blur', ksize=5, sigma=1.0)
    >>> pipeline.add_step('sobel')
    >>> pipeline.add_step('threshold_binary', thresh=60, maxval=255)
    >>>
    >>> edges = pipeline.transform(image)
    """

    def __init__(self) -> None:
        self.steps: List[Tuple[str, Callable[..., Image], Dict[str, Any]]] = []
        logger.info("Initialized FilterPipeline")

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "FilterPipeline":
        """Build a pipeline from a ``{"steps": [{"op": ..., **params}, ...]}`` mapping."""

        steps = config.get("steps", [])
        if not isinstance(steps, list):
            raise InvalidArgumentError(f"'steps' must be a list, got {type(steps).__name__}")

        pipeline = cls()
        for index, step in enumerate(steps):
            if not isinstance(step, Mapping) or "op" not in step:
                raise InvalidArgumentError(f"Step {index} must be a mapping with an 'op' key, got {step!r}")
            params = {key: value for key, value in step.items() if key != "op"}
            pipeline.add_step(str(step["op"]), **params)
        return pipeline

    @classmethod
    def from_file(cls, path: str | Path) -> "FilterPipeline":
        return cls.from_config(load_config(path))

    def add_step(self, operation: str, **kwargs: Any) -> "FilterPipeline":
        """
        Add a filter step.

        Parameters
        ----------
        operation : str
            Operation name, one of :func:`list_operations`.
        **kwargs : dict
            Keyword arguments for the filter, checked against its signature.

        Returns
        -------
        self : FilterPipeline
            For method chaining
        """
        func = OPERATIONS.get(operation)
        if func is None:
            available = ", ".join(list_operations())
            raise InvalidArgumentError(f"Unknown operation: {operation!r}. Available: {available}")

        try:
            inspect.signature(func).bind(None, **kwargs)
        except TypeError as exc:
            raise InvalidArgumentError(f"Invalid parameters for {operation!r}: {exc}") from exc

        self.steps.append((operation, func, dict(kwargs)))
        logger.debug("Added step: %s with params %s", operation, kwargs)
        return self

    def transform(self, image: Image) -> Image:
        """Apply every step in order and return the final image."""

        result = image.copy()
        for operation, func, kwargs in self.steps:
            logger.debug("Applying: %s", operation)
            result = func(result, **kwargs)
        return result

    def transform_batch(self, images: List[Image]) -> List[Image]:
        return [self.transform(img) for img in images]

    def __len__(self) -> int:
        return len(self.steps)

    def __repr__(self) -> str:
        names = ", ".join(name for name, _func, _kwargs in self.steps)
        return f"FilterPipeline([{names}])"
