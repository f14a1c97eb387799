import pytest

from rtpixels.colornames import lookup_color
from rtpixels.xpm import (
    TRANSPARENT,
    XpmError,
    color_key,
    strip_comments,
    text_to_rgb,
    xpm_file_to_image,
    xpm_text_to_image,
    xpm_to_image,
)

SAMPLE = [
    "3 2 3 1",
    "r c red",
    "g c #00FF00",
    ". c None",
    "rg.",
    ".gr",
]

SAMPLE_TEXT = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
"r c red",
"g c #00FF00", // green
". c None",
/* pixels */
"rg.",
".gr"
};
"""


def _pixels(image):
    return [[image.get_pixel(x, y) for x in range(image.width)] for y in range(image.height)]


def test_strip_block_comment_keeps_length():
    text = "a /* x */ b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result == "a" + " " * (len(text) - 2) + "b"


def test_strip_comment_inside_quotes_is_kept():
    text = '"/* k */"'
    assert strip_comments(text) == text


def test_strip_line_comment_blanks_to_newline():
    text = 'a // c\n"b"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "//" not in result
    assert result.endswith('"b"')
    assert result.strip() == 'a          "b"'.replace(" ", "", 0)[:1] + result.strip()[1:]


def test_color_key_values():
    assert color_key("A") == 65
    assert color_key("AB") == 0x4142
    assert color_key("") == 0


def test_text_to_rgb_hex():
    assert text_to_rgb("#00FF00") == 0x00FF00
    assert text_to_rgb("#zz") == 0


def test_text_to_rgb_names():
    assert text_to_rgb("red") == 0xFF0000
    assert text_to_rgb("RED") == lookup_color("red")
    assert text_to_rgb("None") == -1
    assert text_to_rgb("bogus") == 0


def test_text_to_rgb_joins_suffix():
    assert text_to_rgb("dark", "slate") == 0x2F4F4F
    assert text_to_rgb("red", "extra") == 0


def test_xpm_to_image_pixels():
    image = xpm_to_image(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    red = lookup_color("red")
    assert _pixels(image) == [
        [red, 0x00FF00, TRANSPARENT],
        [TRANSPARENT, 0x00FF00, red],
    ]


def test_big_endian_layout():
    image = xpm_to_image(SAMPLE, 32, 1)
    assert bytes(image.data[0:4]) == lookup_color("red").to_bytes(4, "big")
    assert image.get_pixel(2, 0) == TRANSPARENT


def test_transparent_in_24_bits_drops_high_byte():
    image = xpm_to_image(SAMPLE, 24, 0)
    assert image.get_pixel(2, 0) == 0
    assert image.get_pixel(1, 0) == 0x00FF00


def test_short_keys_last_definition_wins():
    data = ["1 1 2 1", "a c red", "a c #0000FF", "a"]
    assert xpm_to_image(data).get_pixel(0, 0) == 0x0000FF


def test_long_keys_first_definition_wins():
    data = ["1 1 2 3", "abc c red", "abc c #0000FF", "abc"]
    assert xpm_to_image(data).get_pixel(0, 0) == lookup_color("red")


def test_unknown_key_is_black():
    data = ["2 1 1 1", "a c red", "az"]
    assert _pixels(xpm_to_image(data)) == [[lookup_color("red"), 0]]


@pytest.mark.parametrize(
    "data",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_invalid_data_raises(data):
    with pytest.raises(XpmError):
        xpm_to_image(data)


def test_text_matches_sequence():
    from_text = xpm_text_to_image(SAMPLE_TEXT)
    from_data = xpm_to_image(SAMPLE)
    assert (from_text.width, from_text.height) == (from_data.width, from_data.height)
    assert from_text.data == from_data.data


def test_file_round_trip(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_TEXT)
    image = xpm_file_to_image(path, 32, 0)
    assert _pixels(image) == _pixels(xpm_to_image(SAMPLE))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        xpm_file_to_image(tmp_path / "absent.xpm")


def test_empty_text_raises():
    with pytest.raises(XpmError):
        xpm_text_to_image("")