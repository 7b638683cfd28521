"""Loading and validation of a whole ``.cub`` map file."""

from dataclasses import dataclass
from os import PathLike
from typing import Optional, Sequence, Union

from .elements import Elements, parse_elements
from .errors import MapError
from .textutil import skip_spaces, split_lines

MAP_CHARS = frozenset("WESN01 ")
PLAYER_CHARS = frozenset("NSEW")


@dataclass
class CubMap:
    """A validated map: its elements, its grid and the player's start."""

    elements: Elements
    grid: list[str]
    player_x: int
    player_y: int
    direction: str

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def floor(self) -> int:
        return self.elements.floor

    @property
    def ceiling(self) -> int:
        return self.elements.ceiling

    @property
    def north(self) -> Optional[str]:
        return self.elements.north

    @property
    def south(self) -> Optional[str]:
        return self.elements.south

    @property
    def west(self) -> Optional[str]:
        return self.elements.west

    @property
    def east(self) -> Optional[str]:
        return self.elements.east


def find_map_start(lines: Sequence[str], end: int) -> int:
    """Return the index of the first grid line after the identifier lines.

    ``end`` is the index of the line that completed the identifiers.
    Blank lines are skipped; the space count carries over from one
    blank line to the next. If only blank lines remain, the index past
    the last line is returned.
    """
    index = end + 1
    if index >= len(lines):
        raise MapError("map not have anything at lastline")
    counter = 0
    while index < len(lines):
        line = lines[index]
        counter = skip_spaces(line, counter)
        if counter < len(line):
            return index
        index += 1
    return index


def extract_grid(lines: Sequence[str], start: int) -> list[str]:
    """Return the grid lines from ``start`` on, checking their characters."""
    grid = list(lines[start:])
    for row in grid:
        if any(char not in MAP_CHARS for char in row):
            raise MapError("Wrong character in map")
    if not grid:
        raise MapError("Map is empty")
    return grid


def find_player(grid: Sequence[str]) -> tuple[int, int, str]:
    """Return ``(x, y, direction)`` of the single player start in ``grid``."""
    found = [
        (x, y, char)
        for y, row in enumerate(grid)
        for x, char in enumerate(row)
        if char in PLAYER_CHARS
    ]
    if len(found) != 1:
        raise MapError("Player count mismatch")
    return found[0]


def check_closed(grid: Sequence[str], x: int, y: int) -> None:
    """Raise MapError unless the area reachable from ``(x, y)`` is walled in.

    Walking from the start through every non-wall cell must never reach
    the edge of the grid or a space.
    """
    cells = [list(row) for row in grid]
    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if (
            cx < 0
            or cy < 0
            or cy >= len(cells)
            or cx >= len(cells[cy])
            or cells[cy][cx] == " "
        ):
            raise MapError("Wrong map")
        if cells[cy][cx] == "1":
            continue
        cells[cy][cx] = "1"
        pending.extend(
            [(cx, cy + 1), (cx + 1, cy), (cx, cy - 1), (cx - 1, cy)]
        )


def parse_map(text: str) -> CubMap:
    """Parse and validate the full contents of a map file."""
    if not text:
        raise MapError("Map read error")
    lines = split_lines(text, "\n")
    height = text.count("\n")
    elements, end = parse_elements(lines[:height])
    start = find_map_start(lines, end)
    grid = extract_grid(lines, start)
    x, y, direction = find_player(grid)
    check_closed(grid, x, y)
    return CubMap(elements, grid, x, y, direction)


def load_map(path: Union[str, "PathLike[str]"]) -> CubMap:
    """Read the map file at ``path`` and parse it."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("Failed to open map file") from exc
    return parse_map(text)