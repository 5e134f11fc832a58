"""
Example usage of the filter layer.

This example demonstrates:
1. Building images from numpy arrays
2. Calling filters directly
3. Chaining filters with FilterPipeline
4. Probing the resize capability matrix
"""

import numpy as np

from pyimfilt import (
    Algorithm,
    Backend,
    FilterPipeline,
    Image,
    UnsupportedCapabilityError,
    gaussian_blur,
    resize,
    sobel_edge_detection,
    threshold_binary,
)
from pyimfilt.filters import resize_capabilities


def create_sample_image():
    """A dark square on a bright background."""
    arr = np.full((32, 32), 220, dtype=np.uint8)
    arr[8:24, 8:24] = 30
    return Image.from_numpy(arr)


def example_direct_calls():
    print("\n" + "="*60)
    print("Example 1: Direct filter calls")
    print("="*60)

    img = create_sample_image()
    blurred = gaussian_blur(img, 5, 1.2, border="renormalize")
    edges = sobel_edge_detection(blurred, border="replicate")
    mask = threshold_binary(edges, 80, 255)

    print(f"Input:  {img}")
    print(f"Edges:  max={int(edges.to_numpy().max())}")
    print(f"Mask:   {int((mask.to_numpy() > 0).sum())} edge pixels")


def example_pipeline():
    print("\n" + "="*60)
    print("Example 2: Pipelines")
    print("="*60)

    pipeline = FilterPipeline.from_config({
        "steps": [
            {"op": "resize", "new_width": 64, "new_height": 64},
            {"op": "gaussian_blur", "ksize": 3, "sigma": 1.0},
            {"op": "sobel"},
            {"op": "threshold_binary", "thresh": 60, "maxval": 255},
        ]
    })
    out = pipeline.transform(create_sample_image())
    print(f"{pipeline} -> {out}")


def example_capabilities():
    print("\n" + "="*60)
    print("Example 3: Resize capabilities")
    print("="*60)

    for (backend, algorithm), supported in resize_capabilities().items():
        print(f"  {backend.value:5s} {algorithm.value:9s} {'yes' if supported else 'no'}")

    try:
        resize(create_sample_image(), 16, 16, Backend.GPU, Algorithm.BILINEAR)
    except UnsupportedCapabilityError as exc:
        print(f"Falling back to cpu/nearest: {exc}")
        resize(create_sample_image(), 16, 16)


if __name__ == "__main__":
    example_direct_calls()
    example_pipeline()
    example_capabilities()
