import pytest

from raycub.image import Image, good_color, mask_shifts

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_new_image_is_zeroed():
    img = Image(IM1_SX, IM1_SY)
    assert len(img.pixels) == IM1_SX * IM1_SY
    assert all(p == 0 for p in img.pixels)
    assert img.bits_per_pixel == 32
    assert img.size_line == IM1_SX * 4


@pytest.mark.parametrize("size", [(IM1_SX, IM1_SY), (IM3_SX, IM3_SY)])
def test_fill_and_read_back(size):
    w, h = size
    img = Image(w, h)
    for y in range(h):
        for x in range(w):
            img.set_pixel(x, y, good_color(_color_map(x, y, w, h), 24, (16, 8, 8, 8, 0, 8)))
    assert img.get_pixel(0, 0) == 0xFF0000
    assert img.get_pixel(w - 1, h - 1) == _color_map(w - 1, h - 1, w, h)


def test_set_pixel_out_of_range():
    img = Image(4, 4)
    with pytest.raises(IndexError):
        img.set_pixel(0, 4, 1)
    with pytest.raises(IndexError):
        img.get_pixel(-1, 0)


def test_row_stride_wraps_like_flat_buffer():
    img = Image(4, 4)
    img.set_pixel(4, 0, 7)
    assert img.get_pixel(0, 1) == 7


def test_pixels_are_signed_32_bit():
    img = Image(2, 2)
    img.set_pixel(1, 1, 0xFF000000)
    assert img.get_pixel(1, 1) < 0
    assert img.get_pixel(1, 1) & 0xFFFFFFFF == 0xFF000000


def test_invalid_size():
    with pytest.raises(ValueError):
        Image(0, 5)


def test_blit_with_offset_and_clipping():
    dst = Image(5, 5)
    src = Image(3, 3, pixels=[9] * 9)
    dst.blit(src, 3, 3)
    assert dst.get_pixel(3, 3) == 9
    assert dst.get_pixel(4, 4) == 9
    assert dst.get_pixel(2, 2) == 0
    assert sum(1 for p in dst.pixels if p == 9) == 4


def test_blit_negative_offset():
    dst = Image(4, 4)
    src = Image(2, 2, pixels=[1, 2, 3, 4])
    dst.blit(src, -1, -1)
    assert dst.get_pixel(0, 0) == 4
    assert sum(dst.pixels) == 4


def test_good_color_true_color_is_identity():
    assert good_color(0xFF99FF, 24, (16, 8, 8, 8, 0, 8)) == 0xFF99FF
    assert good_color(0x00FFFF, 32, (16, 8, 8, 8, 0, 8)) == 0x00FFFF


def test_mask_shifts_for_rgb888():
    assert mask_shifts(0xFF0000, 0xFF00, 0xFF) == (16, 8, 8, 8, 0, 8)


def test_good_color_rgb565():
    decrgb = mask_shifts(0xF800, 0x07E0, 0x001F)
    assert decrgb == (11, 5, 5, 6, 0, 5)
    assert good_color(0xFFFFFF, 16, decrgb) == 0xFFFF
    assert good_color(0, 16, decrgb) == 0


def test_mask_shifts_rejects_zero():
    with pytest.raises(ValueError):
        mask_shifts(0, 0xFF00, 0xFF)