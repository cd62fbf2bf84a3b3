import pytest

from raycube.textutils import (
    check_str,
    is_digit_str,
    is_space,
    is_valid_char,
    parse_int,
    split_fields,
)


@pytest.mark.parametrize("c", list("NSEW"))
def test_valid_char_member(c):
    assert is_valid_char(c, "NSEW")


@pytest.mark.parametrize("c", ["0", "x", "", "NS"])
def test_valid_char_rejects(c):
    assert not is_valid_char(c, "NSEW")


@pytest.mark.parametrize("c", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_space_accepts_whitespace(c):
    assert is_space(c)


@pytest.mark.parametrize("c", ["a", "1", "", "\0"])
def test_is_space_rejects(c):
    assert not is_space(c)


def test_digit_str():
    assert is_digit_str("0123456789")
    assert is_digit_str("")
    assert not is_digit_str("12a")
    assert not is_digit_str("-1")
    assert not is_digit_str("٣")


def test_check_str():
    assert check_str("1 1 \n", " 1\n")
    assert not check_str("101", " 1\n")
    assert check_str("", "1")


@pytest.mark.parametrize(
    "text, value",
    [
        ("42", 42),
        ("  -42abc", -42),
        ("\t+7", 7),
        ("255\n", 255),
        ("abc", 0),
        ("", 0),
    ],
)
def test_parse_int(text, value):
    assert parse_int(text) == value


def test_parse_int_single_sign_only():
    assert parse_int("--5") == 0
    assert parse_int("+-5") == 0


def test_split_fields_drops_empty():
    assert split_fields("255,0,,12", ",") == ["255", "0", "12"]
    assert split_fields(",,", ",") == []
    assert split_fields("a b", ",") == ["a b"]


def test_split_fields_round_trip():
    parts = ["220", "100", "0"]
    assert split_fields(",".join(parts), ",") == parts