"""Parsing of the texture and colour lines at the top of a map file."""

import os
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .errors import MapError
from .textutil import atoi, count_commas, skip_spaces, split_words

# Identifier -> (message when the path is missing, message when repeated).
# The order is the order in which each line is checked.
_TEXTURES = {
    "SO": ("so_tex_path musnt be empty", "SO more than one in map"),
    "NO": ("no_tex_path not must empty!", "NO is more than one in map"),
    "WE": ("we_tex_path not should be empty!", "WE more than one in map"),
    "EA": ("ea texture path not should be empty", "EA more than one in map"),
}
_COLORS = {
    "F": "F is more than one in map",
    "C": "C is more than one in map",
}
_DIRECTION_PREFIXES = ("SO ", "NO ", "EA ", "WE ", "F ", "C ")
_COLOR_PIECE = re.compile(r" *[0-9]* *")


def _after_identifier(line: str) -> str:
    """Return what follows the first word of ``line`` and the spaces after it."""
    match = re.match(r"[^ ]* *", line)
    return line[match.end():]


def _is_readable(path: str) -> bool:
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def texture_path(line: str) -> Optional[str]:
    """Return the texture path given on an identifier line.

    ``None`` is returned when no path follows the identifier or the path
    cannot be opened for reading.
    """
    path = _after_identifier(line)
    if not path or not _is_readable(path):
        return None
    return path


def color_text(line: str) -> Optional[str]:
    """Return the colour text after the identifier, or ``None`` if there is none."""
    text = _after_identifier(line)
    return text or None


def parse_rgb(text: Optional[str]) -> int:
    """Turn ``"R,G,B"`` into a ``0xRRGGBB`` integer, raising MapError if invalid."""
    if text is None:
        raise MapError("color musn't be empty\n")
    if count_commas(text) != 2:
        raise MapError("colors miss or much! \n")
    pieces = split_words(text, ",")
    if not all(_COLOR_PIECE.fullmatch(piece) for piece in pieces):
        raise MapError("colors must be positive numbers!\n")
    if len(pieces) < 3 or any(atoi(piece) > 255 for piece in pieces[:3]):
        raise MapError("colors not enough! \n")
    red, green, blue = (atoi(piece) for piece in pieces[:3])
    return (red << 16) + (green << 8) + blue


def is_direction_line(line: str) -> bool:
    """Tell whether a line may appear among the identifier lines.

    Identifier lines and blank lines are allowed; anything else is not.
    """
    rest = line[skip_spaces(line, 0):]
    if rest.startswith(_DIRECTION_PREFIXES):
        return True
    return all(char == "\n" for char in rest)


@dataclass
class Elements:
    """The four wall textures and the floor and ceiling colours of a map."""

    textures: dict[str, str] = field(default_factory=dict)
    colors: dict[str, int] = field(default_factory=dict)

    @property
    def count(self) -> int:
        """Number of identifiers seen so far."""
        return len(self.textures) + len(self.colors)

    @property
    def complete(self) -> bool:
        return self.count == len(_TEXTURES) + len(_COLORS)

    @property
    def north(self) -> Optional[str]:
        return self.textures.get("NO")

    @property
    def south(self) -> Optional[str]:
        return self.textures.get("SO")

    @property
    def west(self) -> Optional[str]:
        return self.textures.get("WE")

    @property
    def east(self) -> Optional[str]:
        return self.textures.get("EA")

    @property
    def floor(self) -> int:
        return self.colors.get("F", 0)

    @property
    def ceiling(self) -> int:
        return self.colors.get("C", 0)

    def feed(self, line: str) -> bool:
        """Record the identifier on ``line``; return whether one was found.

        Raises MapError for a missing or unreadable texture, a bad colour
        or an identifier given twice.
        """
        rest = line[skip_spaces(line, 0):]
        for ident, (empty_message, repeat_message) in _TEXTURES.items():
            if ident in self.textures:
                if rest.startswith(ident):
                    raise MapError(repeat_message)
            elif rest.startswith(ident + " "):
                path = texture_path(rest)
                if path is None:
                    raise MapError(empty_message)
                self.textures[ident] = path
                return True
        for ident, repeat_message in _COLORS.items():
            if ident in self.colors:
                if rest.startswith(ident):
                    raise MapError(repeat_message)
            elif rest.startswith(ident + " "):
                self.colors[ident] = parse_rgb(color_text(rest))
                return True
        return False


def parse_elements(lines: Iterable[str]) -> tuple[Elements, int]:
    """Read identifier lines until all six are known.

    Returns the elements and the index of the line that completed them.
    """
    lines = list(lines)
    elements = Elements()
    end = 0
    for index, line in enumerate(lines):
        elements.feed(line)
        if elements.complete:
            end = index
            break
    if not elements.complete:
        raise MapError("map have not 6 direction")
    if not all(is_direction_line(line) for line in lines[:end]):
        raise MapError("direction partition error")
    return elements, end