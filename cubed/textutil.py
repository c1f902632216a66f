"""Small string helpers with C-library semantics used when reading map data."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping like a 32-bit signed int.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Text without digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    value = int("".join(digits)) * sign if digits else 0
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def is_digits(text: str) -> bool:
    """True when every character is an ASCII digit (an empty string qualifies)."""
    return all(char in _DIGITS for char in text)


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign of the result gives the order."""
    if n < 0:
        raise ValueError("n must not be negative")
    head_a, head_b = first[:n], second[:n]
    for char_a, char_b in zip(head_a, head_b):
        if char_a != char_b:
            return ord(char_a) - ord(char_b)
    if len(head_a) == len(head_b):
        return 0
    if len(head_a) > len(head_b):
        return ord(head_a[len(head_b)])
    return -ord(head_b[len(head_a)])