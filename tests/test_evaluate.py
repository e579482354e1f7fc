import math

import pytest

from askflow.evaluate import as_boolean, as_float, as_int


def test_boolean_true():
    assert as_boolean("true") is True


def test_boolean_false():
    assert as_boolean("false") is False


@pytest.mark.parametrize("text", ["True", "yes", "1", "", " true"])
def test_boolean_rejects_other_text(text):
    with pytest.raises(ValueError, match="Expected a boolean, but received"):
        as_boolean(text)


@pytest.mark.parametrize("text,expected", [("42", 42), ("-17", -17), ("+8", 8)])
def test_int_plain(text, expected):
    assert as_int(text) == expected


def test_int_leading_whitespace_allowed():
    assert as_int("  12") == 12


def test_int_empty_string_gives_zero():
    assert as_int("") == 0


@pytest.mark.parametrize("text", ["12 ", "1.5", "abc", "12abc", " ", "-", "0x10"])
def test_int_rejects_partial(text):
    with pytest.raises(ValueError, match="Expected an integer, but received"):
        as_int(text)


def test_int_rejects_long_overflow():
    with pytest.raises(ValueError, match="Expected an integer"):
        as_int("99999999999999999999")


def test_int_result_fits_32_bits():
    result = as_int("3000000000")
    assert -(2**31) <= result < 2**31


@pytest.mark.parametrize("text,expected", [("1.5", 1.5), ("-2", -2.0), ("0.25", 0.25)])
def test_float_exact_values(text, expected):
    assert as_float(text) == expected


def test_float_exponent():
    assert as_float("2e3") == 2000.0


def test_float_infinity():
    assert as_float("inf") == math.inf
    assert as_float("-Infinity") == -math.inf


def test_float_nan():
    result = as_float("nan")
    assert str(result) == "nan"
    assert math.isnan(result) is True


def test_float_hex():
    assert as_float("0x10") == 16.0


def test_float_is_single_precision():
    result = as_float("0.1")
    assert result != 0.1
    assert abs(result - 0.1) < 1e-8


@pytest.mark.parametrize("text", ["1.5 ", "abc", "1e", "1.2.3", " "])
def test_float_rejects_partial(text):
    with pytest.raises(ValueError, match="Expected a float, but received"):
        as_float(text)


def test_float_rejects_underflow():
    with pytest.raises(ValueError, match="Expected a float"):
        as_float("1e-50")