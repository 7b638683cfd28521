"""Reading of XPM images used as wall textures."""

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Iterator, Optional, Sequence, Union

from .colornames import lookup_color
from .textutil import atoi

TRANSPARENT = 0xFF000000
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_STRTOL_HEX = re.compile(r"[\t\n\v\f\r ]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_LONG_MAX = (1 << 63) - 1
_NAME_BUFFER = 63


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: 32-bit pixel values in row-major order."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]

    def to_bytes(self, big_endian: bool = False) -> bytes:
        """Return the pixels packed four bytes each in the given byte order."""
        order = "big" if big_endian else "little"
        return b"".join(value.to_bytes(4, order) for value in self.pixels)


def words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty pieces."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_unquoted(text: str, find: str) -> int:
    """Return the first position of ``find`` outside double quotes, or -1."""
    inside = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(find, pos):
            return pos
    return -1


def _blank(text: str, start: int, length: int) -> str:
    end = min(len(text), start + length)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside string literals with spaces.

    The length of the text is kept. A line comment is blanked together
    with the newline that ends it.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        close = text.find("*/", begin + 2)
        offset = close - (begin + 2) if close != -1 else -1
        text = _blank(text, begin, offset + 4)
    while (begin := _find_unquoted(text, "//")) != -1:
        newline = text.find("\n", begin + 2)
        offset = newline - (begin + 2) if newline != -1 else -1
        text = _blank(text, begin, offset + 3)
    return text


def _parse_hex(text: str) -> int:
    match = _STRTOL_HEX.match(text)
    digits = match.group(2)
    value = int(digits, 16) if digits else 0
    if value > _LONG_MAX:
        value = _LONG_MAX if match.group(1) != "-" else -_LONG_MAX - 1
    elif match.group(1) == "-":
        value = -value
    return _to_int32(value)


def text_to_rgb(name: str, extra: Optional[str]) -> int:
    """Return the colour value named by an XPM colour definition.

    ``#RRGGBB`` is read as hexadecimal. Otherwise ``name`` (joined with
    ``extra`` by a space when given) is looked up among the named
    colours, ignoring case; ``None`` gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_BUFFER]
    color = lookup_color(name)
    return 0 if color is None else color


def good_color(color: int, depth: int, decrgb: Sequence[int]) -> int:
    """Convert ``0xRRGGBB`` to a pixel value for a display of ``depth`` bits.

    At 24 bits or more the colour is returned unchanged. Below that,
    ``decrgb`` gives the shift and bit width of red, green and blue, as
    ``(red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits)``.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - decrgb[1])) << decrgb[0])
        + ((green >> (16 - decrgb[3])) << decrgb[2])
        + ((blue >> (16 - decrgb[5])) << decrgb[4])
    )


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise ValueError(f"XPM data ends before {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    tokens = words(line)
    if len(tokens) < 4:
        raise ValueError("XPM header needs width, height, colours and chars per pixel")
    values = tuple(atoi(token) for token in tokens[:4])
    if any(value <= 0 for value in values):
        raise ValueError("XPM header values must be positive")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its string entries, header first.

    Raises ValueError when the header is invalid, a colour line has no
    ``c`` definition, or lines are missing.
    """
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(source, "the header"))
    direct = cpp <= 2
    table: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "the colour table")
        tokens = words(line[cpp:])
        if "c" not in tokens:
            raise ValueError(f"colour line without a 'c' definition: {line!r}")
        index = tokens.index("c") + 1
        if index >= len(tokens):
            raise ValueError(f"colour line without a colour: {line!r}")
        extra = tokens[index + 1] if index + 1 < len(tokens) else None
        rgb = text_to_rgb(tokens[index], extra)
        key = line[:cpp]
        if direct:
            table[key] = rgb
        else:
            table.setdefault(key, rgb)
    pixels: list[int] = []
    for _ in range(height):
        line = _next_line(source, "the last pixel row")
        for x in range(width):
            color = table.get(line[cpp * x:cpp * (x + 1)], 0)
            if color == -1:
                color = TRANSPARENT
            pixels.append(color & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def xpm_from_data(data: Sequence[str]) -> XpmImage:
    """Decode an XPM image given as the list of strings of an XPM array."""
    return parse_xpm(data)


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def read_xpm_file(path: Union[str, "PathLike[str]"]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    with open(path, encoding="latin-1", newline="") as handle:
        text = handle.read()
    return parse_xpm(_quoted_strings(strip_comments(text)))