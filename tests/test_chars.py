import string

import pytest

from miniprintf.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII_CODES = range(128)


def test_is_alpha_matches_ascii_letters():
    for code in ASCII_CODES:
        assert is_alpha(code) == (chr(code) in string.ascii_letters)


def test_is_alpha_accepts_strings():
    assert is_alpha("q") is True
    assert is_alpha(",") is False


def test_is_digit_matches_digits():
    for code in ASCII_CODES:
        assert is_digit(chr(code)) == (chr(code) in string.digits)


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(-5, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_alnum_bracket_is_false():
    assert is_alnum(93) is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("A") is True


def test_is_print_matches_python_for_ascii():
    for code in ASCII_CODES:
        assert is_print(code) == chr(code).isprintable()


def test_is_print_rejects_high_codes():
    assert is_print(127) is False
    assert is_print(200) is False


def test_to_upper_matches_str_upper_for_ascii():
    for ch in string.ascii_letters + string.digits + string.punctuation:
        assert to_upper(ch) == ch.upper()


def test_to_lower_matches_str_lower_for_ascii():
    for ch in string.ascii_letters + string.digits + string.punctuation:
        assert to_lower(ch) == ch.lower()


def test_case_conversion_keeps_int_kind():
    assert to_upper(ord("b")) == ord("B")
    assert to_lower(ord("B")) == ord("b")


def test_case_conversion_ignores_non_ascii():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_round_trip_of_letters():
    for ch in string.ascii_lowercase:
        assert to_lower(to_upper(ch)) == ch


@pytest.mark.parametrize("bad", ["", "ab"])
def test_multi_char_string_raises(bad):
    with pytest.raises(ValueError):
        is_alpha(bad)


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        to_upper(1.5)