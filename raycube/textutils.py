"""Small character and string helpers used by the scene parser."""

from __future__ import annotations

_SPACES = "\t\n\v\f\r "
_DIGITS = "0123456789"


def is_valid_char(c: str, valid: str) -> bool:
    """True when the single character ``c`` is one of ``valid``."""
    return len(c) == 1 and c in valid


def is_space(c: str) -> bool:
    """True for a space or an ASCII control whitespace character."""
    return len(c) == 1 and c in _SPACES


def is_digit_str(s: str) -> bool:
    """True when every character is an ASCII digit; the empty string passes."""
    return all(ch in _DIGITS for ch in s)


def check_str(s: str, valid: str) -> bool:
    """True when every character of ``s`` is one of ``valid``."""
    return all(is_valid_char(ch, valid) for ch in s)


def parse_int(s: str) -> int:
    """Read a leading integer: skip whitespace, one optional sign, then digits."""
    text = s.lstrip(_SPACES)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    value = 0
    for ch in text:
        if ch not in _DIGITS:
            break
        value = value * 10 + int(ch)
    return sign * value


def split_fields(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty fields."""
    return [part for part in s.split(sep) if part]