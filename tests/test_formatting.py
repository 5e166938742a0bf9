import pytest

from pushswap.formatting import (
    format_hex,
    format_number,
    format_pointer,
    format_string,
    format_template,
)
from pushswap.formatting import format_unsigned


@pytest.mark.parametrize("n", [0, 1, -1, 42, -2147483648, 2147483647])
def test_format_number_round_trip(n):
    assert int(format_number(n)) == n


def test_format_number_int_min():
    assert format_number(-2147483648) == "-2147483648"


def test_format_unsigned_wraps_negative():
    assert int(format_unsigned(-1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 7, 123456, 2**32 - 1])
def test_format_unsigned_round_trip(n):
    assert int(format_unsigned(n)) == n


@pytest.mark.parametrize("n", [0, 10, 255, 4096, 2**32 - 1])
def test_format_hex_round_trip(n):
    assert int(format_hex(n, False), 16) == n
    assert int(format_hex(n, True), 16) == n


def test_format_hex_case():
    lower = format_hex(0xABCDEF, False)
    upper = format_hex(0xABCDEF, True)
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_format_hex_zero():
    assert format_hex(0, True) == "0"


def test_format_pointer_nil():
    assert format_pointer(None) == "(nil)"
    assert format_pointer(0) == "(nil)"


def test_format_pointer_prefix_and_value():
    text = format_pointer(0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xDEADBEEF


def test_format_string_null():
    assert format_string(None) == "(null)"
    assert format_string("abc") == "abc"


@pytest.mark.parametrize("name", ["a", "b"])
def test_template_operation_lines(name):
    assert format_template("s%c\n", name) == "s" + name + "\n"
    assert format_template("rr%c\n", name) == "rr" + name + "\n"


def test_template_percent_literal_and_trailing():
    assert format_template("%%") == "%"
    assert format_template("x%") == "x%"


def test_template_unknown_conversion_consumes_nothing():
    assert format_template("%q%d", 5) == "5"


def test_template_mixed():
    result = format_template("%s=%i;%u;%x", "n", -3, 3, 31)
    assert result == "n=" + format_number(-3) + ";3;" + format_hex(31)


def test_template_missing_argument():
    with pytest.raises(TypeError):
        format_template("%d %d", 1)


def test_template_char_from_int():
    assert format_template("%c", ord("z")) == "z"