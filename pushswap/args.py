"""Command-line argument checking and conversion to the starting numbers."""

from __future__ import annotations

from typing import Iterable, List, Sequence

MAX_INT = 2147483647
MIN_INT = -2147483648
ERROR_MSG = "Error"
ERROR_EXIT_CODE = 255

_WHITESPACE = {chr(code) for code in range(9, 14)} | {" "}
_MAX_TOKEN_LENGTH = 11


class ArgumentError(ValueError):
    """The arguments are not a list of distinct 32-bit integers."""

    def __init__(self, message: str = ERROR_MSG) -> None:
        super().__init__(message)


def atoi(text: str) -> int:
    """Read a leading integer the lenient way, wrapping to a signed 32-bit value."""
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    acc = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        acc = (acc * 10 + ord(text[pos]) - ord("0")) & 0xFFFFFFFF
        pos += 1
    result = (sign * acc) & 0xFFFFFFFF
    return result - (1 << 32) if result > MAX_INT else result


def has_blank_argument(argv: Iterable[str]) -> bool:
    """True when some argument is empty or made only of spaces."""
    return any(not arg.strip(" ") for arg in argv)


def split_arguments(argv: Sequence[str]) -> List[str]:
    """Join the arguments with spaces and split them again on spaces."""
    return [token for token in " ".join(argv).split(" ") if token]


def _is_integer(token: str) -> bool:
    digits = token[1:] if token[:1] in ("-", "+") else token
    if not all("0" <= ch <= "9" for ch in digits):
        return False
    number = int(digits) if digits else 0
    if token.startswith("-"):
        number = -number
    return MIN_INT <= number <= MAX_INT


def validate_tokens(tokens: Sequence[str]) -> None:
    """Raise ArgumentError unless every token is a distinct in-range integer."""
    seen: set[str] = set()
    for token in tokens:
        if (
            not token
            or len(token) > _MAX_TOKEN_LENGTH
            or not _is_integer(token)
            or token in seen
        ):
            raise ArgumentError()
        seen.add(token)


def parse_arguments(argv: Sequence[str]) -> List[int]:
    """Turn the program arguments (without the program name) into numbers."""
    if not argv:
        return []
    if has_blank_argument(argv):
        raise ArgumentError()
    tokens = split_arguments(argv)
    validate_tokens(tokens)
    return [atoi(token) for token in tokens]