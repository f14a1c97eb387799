import pytest

from rtpixels.color import ColorFormat

RED_565, GREEN_565, BLUE_565 = 0xF800, 0x07E0, 0x001F


@pytest.fixture
def rgb565():
    return ColorFormat.from_masks(16, RED_565, GREEN_565, BLUE_565)


def test_deep_visual_keeps_color():
    fmt = ColorFormat.from_masks(24, 0xFF0000, 0x00FF00, 0x0000FF)
    assert fmt.pixel_value(0xFF99FF) == 0xFF99FF
    assert fmt.pixel_value(0x00FFFF) == 0x00FFFF


def test_from_masks_layout_24(rgb565):
    fmt = ColorFormat.from_masks(24, 0xFF0000, 0x00FF00, 0x0000FF)
    assert (fmt.blue_shift, fmt.blue_bits) == (0, 8)
    assert fmt.red_shift == fmt.green_shift + fmt.green_bits


def test_from_masks_layout_565(rgb565):
    assert rgb565.red_bits == 5
    assert rgb565.red_shift == rgb565.green_shift + rgb565.green_bits
    assert rgb565.green_shift == rgb565.blue_shift + rgb565.blue_bits


@pytest.mark.parametrize(
    "color,mask",
    [(0xFF0000, RED_565), (0x00FF00, GREEN_565), (0x0000FF, BLUE_565)],
)
def test_pure_channel_fills_its_mask(rgb565, color, mask):
    assert rgb565.pixel_value(color) == mask


def test_white_and_black(rgb565):
    assert rgb565.pixel_value(0xFFFFFF) == RED_565 | GREEN_565 | BLUE_565
    assert rgb565.pixel_value(0x000000) == 0


def test_channels_are_independent(rgb565):
    combined = rgb565.pixel_value(0xFF00FF)
    assert combined == rgb565.pixel_value(0xFF0000) | rgb565.pixel_value(0x0000FF)


def test_zero_mask_rejected():
    with pytest.raises(ValueError):
        ColorFormat.from_masks(16, 0, GREEN_565, BLUE_565)