import pytest

from rtpixels.sprintf import FormatError, sprintf, to_base


def test_plain_text_is_returned_unchanged():
    text = "no directives here"
    assert sprintf(text) == text


def test_percent_escape():
    assert sprintf("100%% done") == "100% done"
    assert sprintf("%%d") == "%d"


def test_string_and_null_string():
    assert sprintf("hello %s!", "world") == "hello world!"
    assert sprintf("[%s]", None) == "[(null)]"


def test_char_from_int_and_str():
    assert sprintf("%c%c", ord("o"), "k") == "ok"


def test_nul_char_contributes_nothing():
    assert sprintf("a%cb", 0) == "ab"


@pytest.mark.parametrize("value", [0, 7, -42, 2147483647, -2147483648])
def test_signed_round_trip(value):
    assert int(sprintf("%d", value)) == value
    assert sprintf("%i", value) == sprintf("%d", value)


def test_signed_wraps_to_32_bits():
    assert sprintf("%d", 0xFFFFFFFF) == "-1"


@pytest.mark.parametrize("value", [0, 1, 255, 4096, 0xDEADBEEF, 0xFFFFFFFF])
def test_hex_round_trip(value):
    lower = sprintf("%x", value)
    assert int(lower, 16) == value
    assert lower == lower.lower()
    assert sprintf("%X", value) == lower.upper()


def test_hex_of_negative_uses_32_bit_pattern():
    assert sprintf("%x", -1) == sprintf("%x", 0xFFFFFFFF)


def test_unsigned_small_values():
    assert sprintf("%u", 2147483647) == "2147483647"
    assert sprintf("%u", -1) == "4294967295"


def test_unsigned_large_value_drops_zero_padding_of_low_part():
    assert sprintf("%u", 3000000005) == "30000005"


def test_pointer():
    assert sprintf("%p", 0) == "0x0"
    assert sprintf("%p", None) == "0x0"
    result = sprintf("%p", 0x7FFE1234)
    assert result.startswith("0x")
    assert int(result, 16) == 0x7FFE1234


def test_mixed_directives_in_order():
    result = sprintf("%s=%d (%x) %c%%", "n", 10, 10, "!")
    assert result == "n=10 (" + sprintf("%x", 10) + ") !%"


def test_extra_arguments_are_ignored():
    assert sprintf("%d", 1, 2, 3) == "1"


def test_unknown_conversion_raises():
    with pytest.raises(FormatError):
        sprintf("%q", 1)


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        sprintf("50%")


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        sprintf("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(FormatError):
        sprintf("%d", "seven")
    with pytest.raises(FormatError):
        sprintf("%s", 7)


def test_non_string_format_raises():
    with pytest.raises(TypeError):
        sprintf(None)


@pytest.mark.parametrize("value", [0, 1, 15, 16, 12345, 2**64 - 1])
def test_to_base_round_trip(value):
    assert int(to_base(value, "0123456789abcdef"), 16) == value
    assert int(to_base(value, "01"), 2) == value
    assert to_base(value, "0123456789") == str(value)


def test_to_base_custom_alphabet_single_digit():
    assert to_base(2, "xyz") == "z"


def test_to_base_rejects_bad_input():
    with pytest.raises(ValueError):
        to_base(-1, "0123456789")
    with pytest.raises(ValueError):
        to_base(5, "0")