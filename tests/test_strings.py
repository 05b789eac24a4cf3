import pytest

from miniprintf.strings import (
    atoi,
    itoa,
    split,
    strjoin,
    striteri,
    strmapi,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [("  -123", -123), ("456", 456), ("+789", 789)],
)
def test_atoi_source_examples(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "-", "+", "   ", "+-5", "--5"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_skips_control_whitespace_and_stops_at_non_digit():
    assert atoi("\t\n\v\f\r 42abc") == 42
    assert atoi("12 34") == 12


def test_atoi_does_not_skip_other_leading_characters():
    assert atoi("x42") == 0


@pytest.mark.parametrize("n", [0, 1, -1, 7, -9, 10, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero_and_sign():
    assert itoa(0) == "0"
    assert itoa(-5).startswith("-")
    assert not itoa(5).startswith("-")


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_split_drops_empty_pieces():
    assert split("  paco  pacoo ", " ") == ["paco", "pacoo"]


def test_split_with_nul_separator_keeps_whole_string():
    assert split("paco", "\0") == ["paco"]


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_accepts_int_separator():
    assert split("a,b", ord(",")) == split("a,b", ",")


def test_split_pieces_rejoin_without_separators():
    text = ",,one,two,,three,"
    pieces = split(text, ",")
    assert ",".join(pieces) == text.strip(",").replace(",,", ",")
    assert all(piece and "," not in piece for piece in pieces)


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_substr_basic_and_clamped():
    text = "Hola mundo"
    assert substr(text, 5, 3) == text[5:8]
    assert substr(text, 5, 100) == text[5:]
    assert substr(text, 0, 0) == ""


def test_substr_start_past_end_is_empty():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 10, 2) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


def test_strjoin():
    assert strjoin("Hola ", "Mundo!") == "Hola Mundo!"
    assert strjoin("", "") == ""


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_source_example():
    assert strtrim("   ***Hello, World!***   ", " *") == "Hello, World!"


def test_strtrim_everything_in_set():
    assert strtrim("****", "*") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  a  ", "") == "  a  "


def test_strtrim_keeps_inner_characters():
    assert strtrim("*a*b*", "*") == "a*b"


def test_strmapi_uses_index_and_char():
    result = strmapi("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"


def test_strmapi_preserves_length():
    text = "hello world"
    assert len(strmapi(text, lambda i, c: "x")) == len(text)


def test_strmapi_requires_function():
    with pytest.raises(TypeError):
        strmapi("abc", None)


def test_striteri_modifies_in_place():
    chars = list("abc")
    seen = []

    def visit(i, c):
        seen.append((i, c))
        return c.upper()

    striteri(chars, visit)
    assert chars == ["A", "B", "C"]
    assert seen == [(0, "a"), (1, "b"), (2, "c")]


def test_striteri_none_return_leaves_element():
    chars = list("xyz")
    striteri(chars, lambda i, c: None)
    assert chars == ["x", "y", "z"]


def test_striteri_none_chars_calls_nothing():
    calls = []
    assert striteri(None, lambda i, c: calls.append(i)) is None
    assert calls == []