import numpy as np
import pytest

from pyimfilt.errors import InvalidArgumentError, InvalidOperationError
from pyimfilt.filters.edges import sobel_edge_detection
from pyimfilt.image import Image, PixelFormat


def test_sobel_edge_detection_on_simple_image():
    img = Image.gray(3, 3, [0, 0, 0, 0, 255, 255, 0, 0, 0])
    out = sobel_edge_detection(img)
    assert out.format is PixelFormat.GRAY
    assert out.data()[4] > 200


def test_sobel_preserves_dimensions():
    img = Image.gray(5, 2, list(range(10)))
    out = sobel_edge_detection(img)
    assert (out.width, out.height) == (5, 2)


def test_sobel_zero_image_is_all_zero():
    out = sobel_edge_detection(Image.gray(4, 4, [0] * 16))
    assert not np.any(out.to_numpy())


def test_sobel_uniform_image_has_no_interior_gradient():
    img = Image.from_numpy(np.full((5, 5), 77, dtype=np.uint8))
    out = sobel_edge_detection(img).to_numpy()
    assert not np.any(out[1:-1, 1:-1])


def test_sobel_uniform_image_replicate_border_is_all_zero():
    img = Image.from_numpy(np.full((5, 5), 77, dtype=np.uint8))
    out = sobel_edge_detection(img, border="replicate")
    assert not np.any(out.to_numpy())


def test_sobel_skip_border_biases_corners():
    # Only the bottom-right 2x2 of the kernels is in bounds at (0, 0):
    # gx = gy = 3 * v, so |gx| + |gy| = 6 * v.
    img = Image.from_numpy(np.full((3, 3), 10, dtype=np.uint8))
    out = sobel_edge_detection(img)
    assert out.pixel(0, 0) == 60


def test_sobel_vertical_edge():
    img = Image.from_numpy(np.array([[0, 0, 255, 255]] * 3, dtype=np.uint8))
    out = sobel_edge_detection(img).to_numpy()
    assert out[1].tolist() == [0, 255, 255, 255]


def test_sobel_uses_l1_magnitude():
    # gx = (1 + 2 + 1) * 20, gy = 0 at the centre of a left-to-right ramp.
    img = Image.from_numpy(np.array([[0, 10, 20]] * 3, dtype=np.uint8))
    out = sobel_edge_detection(img)
    assert out.pixel(1, 1) == 80


def test_sobel_clamps_to_255():
    img = Image.from_numpy(np.array([[0, 0, 255]] * 3, dtype=np.uint8))
    assert sobel_edge_detection(img).pixel(1, 1) == 255


def test_sobel_rejects_rgb():
    img = Image.rgb(1, 1, [1, 2, 3])
    with pytest.raises(InvalidOperationError, match="Sobel only implemented for grayscale images"):
        sobel_edge_detection(img)


def test_sobel_rejects_renormalize_border():
    with pytest.raises(InvalidArgumentError):
        sobel_edge_detection(Image.gray(2, 2, [0] * 4), border="renormalize")


def test_sobel_empty_image():
    out = sobel_edge_detection(Image.gray(0, 3, []))
    assert out.is_empty
    assert (out.width, out.height) == (0, 3)


def test_sobel_does_not_mutate_input():
    img = Image.gray(3, 3, [0, 0, 0, 0, 255, 255, 0, 0, 0])
    before = img.copy()
    sobel_edge_detection(img)
    assert img == before
