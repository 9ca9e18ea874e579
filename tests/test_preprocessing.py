import pytest

from slammer.preprocessing import box_blur, preprocess_image


def test_preprocess_is_identity():
    data = bytes(range(16))
    assert preprocess_image(data, 4, 4) == data


def test_preprocess_accepts_list():
    assert preprocess_image([1, 2, 3, 4], 2, 2) == bytes([1, 2, 3, 4])


def test_uniform_image_unchanged():
    data = bytes([77] * 25)
    assert box_blur(data, 5, 5) == data


def test_single_bright_centre_is_averaged():
    data = bytes([0, 0, 0, 0, 90, 0, 0, 0, 0])
    assert box_blur(data, 3, 3) == bytes([0, 0, 0, 0, 10, 0, 0, 0, 0])


def test_border_pixels_preserved():
    data = bytes((i * 37) % 256 for i in range(36))
    out = box_blur(data, 6, 6)
    assert len(out) == len(data)
    assert out[:6] == data[:6]
    assert out[30:] == data[30:]
    for y in range(6):
        assert out[y * 6] == data[y * 6]
        assert out[y * 6 + 5] == data[y * 6 + 5]


def test_blurred_values_within_neighbourhood_range():
    data = bytes((i * 53) % 256 for i in range(49))
    out = box_blur(data, 7, 7)
    for y in range(1, 6):
        for x in range(1, 6):
            neighbourhood = [data[(y + j) * 7 + x + i] for j in (-1, 0, 1) for i in (-1, 0, 1)]
            assert min(neighbourhood) <= out[y * 7 + x] <= max(neighbourhood)


def test_narrow_images_unchanged():
    data = bytes([5, 200, 9, 40, 100, 3])
    assert box_blur(data, 2, 3) == data
    assert box_blur(data, 1, 6) == data


def test_trailing_bytes_kept():
    data = bytes([1] * 9) + bytes([250, 251])
    assert box_blur(data, 3, 3) == data


def test_zero_dimension_rejected():
    with pytest.raises(ValueError):
        box_blur(b"", 0, 3)


def test_short_data_rejected():
    with pytest.raises(ValueError):
        box_blur(bytes(8), 3, 3)