"""Small text helpers used by the map parser."""

import re

_U64 = (1 << 64) - 1
_ATOI_LIMIT = 18446744073709551
_ATOI_RE = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading integer the way the map parser expects.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Overlong values give -1 (positive) or 0 (negative),
    and the result wraps to a 32-bit signed integer.
    """
    match = _ATOI_RE.match(text)
    sign = -1 if match.group(1) == "-" else 1
    result = 0
    for digit in match.group(2):
        result = (result * 10 + int(digit)) & _U64
    if result > _ATOI_LIMIT:
        return 0 if sign == -1 else -1
    return _to_int32(result * sign)


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def split_lines(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, keeping empty lines as a single space.

    A run of n separators yields n - 1 placeholder ``" "`` entries, so
    blank lines survive the split while the separators themselves vanish.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    escaped = re.escape(sep)
    tokens: list[str] = []
    for match in re.finditer(f"{escaped}+|[^{escaped}]+", text):
        piece = match.group()
        if piece[0] == sep:
            tokens.extend(" " for _ in range(len(piece) - 1))
        else:
            tokens.append(piece)
    return tokens


def skip_spaces(text: str, start: int) -> int:
    """Return the index of the first non-space character at or after ``start``."""
    rest = text[start:]
    return start + len(rest) - len(rest.lstrip(" "))


def count_commas(text: str) -> int:
    """Count the commas in ``text``; return -1 if two commas are adjacent."""
    if ",," in text:
        return -1
    return text.count(",")