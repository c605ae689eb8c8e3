import io

import pytest

from sigtalk.formatting import format_message, print_formatted


def test_plain_text_is_copied():
    assert format_message("Server PID: ready") == "Server PID: ready"


@pytest.mark.parametrize("value", [0, 7, 42, -1, 123456, -2147483647, 2147483647])
def test_signed_round_trip(value):
    assert int(format_message("%d", value)) == value
    assert format_message("%i", value) == format_message("%d", value)


def test_int_min_is_rendered():
    assert format_message("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert format_message("%d", 2**31) == "-2147483648"


@pytest.mark.parametrize("value", [0, 9, 10, 4000000000])
def test_unsigned_round_trip(value):
    assert int(format_message("%u", value)) == value


def test_unsigned_wraps_negative():
    assert int(format_message("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 15, 16, 255, 0xDEADBEEF])
def test_hex_round_trip(value):
    lower = format_message("%x", value)
    upper = format_message("%X", value)
    assert int(lower, 16) == value
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_char_from_string_and_code():
    assert format_message("%c", "z") == "z"
    assert format_message("%c", ord("z")) == "z"


def test_string_and_null_string():
    assert format_message("<%s>", "abc") == "<abc>"
    assert format_message("%s", None) == "(null)"


def test_pointer_formats():
    assert format_message("%p", None) == "(nil)"
    assert format_message("%p", 0) == "(nil)"
    text = format_message("%p", 255)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 255


def test_percent_literal_consumes_no_argument():
    assert format_message("%%%d", 5) == "%" + format_message("%d", 5)


def test_unknown_conversion_produces_nothing():
    assert format_message("a%qb") == "ab"


def test_trailing_percent_produces_nothing():
    assert format_message("abc%") == "abc"


def test_mixed_template():
    result = format_message("%s=%d (%c)", "n", 3, "x")
    assert result == "n=" + format_message("%d", 3) + " (x)"


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_message("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_message("%d", "seven")
    with pytest.raises(TypeError):
        format_message("%s", 12)


def test_print_formatted_writes_and_counts():
    buffer = io.StringIO()
    count = print_formatted("Server PID: %d\n", 4242, file=buffer)
    assert buffer.getvalue() == format_message("Server PID: %d\n", 4242)
    assert count == len(buffer.getvalue())


def test_print_formatted_defaults_to_stdout(capsys):
    count = print_formatted("%s%%", "done")
    captured = capsys.readouterr().out
    assert captured == "done%"
    assert count == len(captured)