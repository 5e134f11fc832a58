import numpy as np
import pytest
from PIL import Image as PILImage

from pyimfilt.errors import InvalidArgumentError
from pyimfilt.image import Image, PixelFormat


@pytest.mark.parametrize(
    "width,height,length,ok",
    [
        (4, 3, 12, True),
        (4, 3, 11, False),
        (4, 3, 13, False),
        (1, 1, 1, True),
        (0, 5, 0, True),
        (0, 0, 1, False),
    ],
)
def test_gray_accepts_exactly_width_times_height(width, height, length, ok):
    data = [1] * length
    if ok:
        img = Image.gray(width, height, data)
        assert img.width == width
        assert img.height == height
        assert img.format is PixelFormat.GRAY
    else:
        with pytest.raises(InvalidArgumentError):
            Image.gray(width, height, data)


@pytest.mark.parametrize(
    "width,height,length,ok",
    [
        (2, 2, 12, True),
        (2, 2, 4, False),
        (2, 2, 11, False),
        (3, 0, 0, True),
    ],
)
def test_rgb_accepts_exactly_three_bytes_per_pixel(width, height, length, ok):
    data = [7] * length
    if ok:
        img = Image.rgb(width, height, data)
        assert img.channels == 3
        assert img.data().size == length
    else:
        with pytest.raises(InvalidArgumentError):
            Image.rgb(width, height, data)


def test_gray_image_accessors():
    data = [1] * 12
    img = Image.gray(4, 3, data)
    assert img.width == 4
    assert img.height == 3
    assert img.shape == (3, 4)
    assert list(img.data()) == data


def test_rgb_image_accessors():
    data = [255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 0]
    img = Image.rgb(2, 2, data)
    assert img.shape == (2, 2, 3)
    assert list(img.data()) == data
    assert img.pixel(1, 0) == (0, 255, 0)
    assert img.pixel(1, 1) == (255, 255, 0)
    assert img.offset(1, 1) == 9


def test_shape_error_is_a_value_error():
    with pytest.raises(ValueError):
        Image.gray(2, 2, [0, 0, 0])


def test_negative_dimensions_are_rejected():
    with pytest.raises(InvalidArgumentError):
        Image.gray(-1, 2, [])


def test_non_integer_dimensions_are_rejected():
    with pytest.raises(InvalidArgumentError):
        Image.gray(2.0, 1, [0, 0])


def test_out_of_range_samples_are_rejected():
    with pytest.raises(InvalidArgumentError):
        Image.gray(2, 1, [0, 256])
    with pytest.raises(InvalidArgumentError):
        Image.gray(2, 1, [-1, 0])


def test_float_buffers_are_rejected():
    with pytest.raises(InvalidArgumentError):
        Image.gray(2, 1, np.array([0.5, 1.0]))


def test_two_dimensional_buffers_are_rejected():
    with pytest.raises(InvalidArgumentError):
        Image.gray(2, 2, np.zeros((2, 2), dtype=np.uint8))


def test_bytes_and_bytearray_buffers():
    img = Image.gray(3, 1, b"\x01\x02\x03")
    assert list(img.data()) == [1, 2, 3]
    img.data_mut()[0] = 9
    assert img.pixel(0, 0) == 9

    img2 = Image.gray(3, 1, bytearray([4, 5, 6]))
    assert img2.pixel(2, 0) == 6


def test_uint8_buffer_is_adopted_without_copy():
    buf = np.arange(6, dtype=np.uint8)
    img = Image.gray(3, 2, buf)
    assert img.data_mut() is buf


def test_data_view_is_read_only():
    img = Image.gray(2, 1, [1, 2])
    view = img.data()
    assert not view.flags.writeable
    with pytest.raises(ValueError):
        view[0] = 5
    assert img.pixel(0, 0) == 1


def test_read_only_source_buffer_is_copied():
    a = Image.gray(2, 1, [1, 2])
    b = Image.gray(2, 1, a.data())
    b.data_mut()[0] = 9
    assert b.pixel(0, 0) == 9
    assert a.data().tolist() == [1, 2]


def test_from_numpy_of_another_image_owns_its_buffer():
    a = Image.rgb(1, 1, [1, 2, 3])
    b = Image.from_numpy(a.to_numpy())
    assert b.data_mut().flags.writeable
    b.data_mut()[:] = 0
    assert a.pixel(0, 0) == (1, 2, 3)


def test_to_pil_returns_pillow_image():
    pil = Image.gray(1, 1, [7]).to_pil()
    assert isinstance(pil, PILImage.Image)
    assert pil.getpixel((0, 0)) == 7


def test_data_mut_edits_in_place():
    img = Image.gray(2, 2, [0, 0, 0, 0])
    img.data_mut()[img.offset(1, 1)] = 200
    assert img.pixel(1, 1) == 200
    assert img.to_numpy()[1, 1] == 200


def test_pixel_outside_image_raises_index_error():
    img = Image.gray(2, 2, [0, 0, 0, 0])
    with pytest.raises(IndexError):
        img.pixel(2, 0)
    with pytest.raises(IndexError):
        img.offset(0, -1)


def test_zero_size_images_are_valid_and_empty():
    img = Image.gray(0, 0, [])
    assert img.is_empty
    assert img.data().size == 0
    assert Image.rgb(4, 0, b"").is_empty


def test_from_numpy_picks_format_from_shape():
    gray = Image.from_numpy(np.zeros((3, 5), dtype=np.uint8))
    assert gray.format is PixelFormat.GRAY
    assert (gray.width, gray.height) == (5, 3)

    rgb = Image.from_numpy(np.zeros((2, 4, 3), dtype=np.uint8))
    assert rgb.format is PixelFormat.RGB
    assert (rgb.width, rgb.height) == (4, 2)


@pytest.mark.parametrize("shape", [(3,), (3, 3, 1), (3, 3, 4)])
def test_from_numpy_rejects_bad_shapes(shape):
    with pytest.raises(InvalidArgumentError):
        Image.from_numpy(np.zeros(shape, dtype=np.uint8))


def test_to_numpy_is_row_major():
    img = Image.rgb(2, 1, [1, 2, 3, 4, 5, 6])
    arr = img.to_numpy()
    assert arr.shape == (1, 2, 3)
    assert arr[0, 1].tolist() == [4, 5, 6]


def test_copy_is_independent():
    img = Image.gray(2, 1, [1, 2])
    dup = img.copy()
    assert dup == img
    dup.data_mut()[0] = 99
    assert img.pixel(0, 0) == 1
    assert dup != img


def test_equality_considers_format_and_dimensions():
    assert Image.gray(3, 1, [1, 2, 3]) == Image.gray(3, 1, [1, 2, 3])
    assert Image.gray(3, 1, [1, 2, 3]) != Image.gray(1, 3, [1, 2, 3])
    assert Image.gray(3, 1, [0, 0, 0]) != Image.rgb(1, 1, [0, 0, 0])


def test_unknown_pixel_format():
    with pytest.raises(InvalidArgumentError):
        Image("rgba", 1, 1, [0, 0, 0, 0])


def test_pil_round_trip():
    img = Image.rgb(2, 1, [10, 20, 30, 40, 50, 60])
    pil = img.to_pil()
    assert pil.mode == "RGB"
    assert pil.size == (2, 1)
    assert Image.from_pil(pil) == img

    gray = Image.gray(2, 2, [0, 64, 128, 255])
    assert gray.to_pil().mode == "L"
    assert Image.from_pil(gray.to_pil()) == gray


def test_from_pil_rejects_other_modes():
    rgba = PILImage.new("RGBA", (2, 2))
    with pytest.raises(InvalidArgumentError):
        Image.from_pil(rgba)
