"""Frame drawing and the command that starts a game from a map file."""

import sys
from dataclasses import dataclass
from typing import MutableSequence, Optional, Sequence

from .cubmap import load_map
from .errors import MapError, format_error

WIDTH = 800
HEIGHT = 600
TEXWIDTH = 64
TEXHEIGHT = 64

KEY_W = 119
KEY_S = 115
KEY_A = 97
KEY_D = 100
KEY_RIGHT = 65363
KEY_LEFT = 65361
KEY_ESC = 65307

_EXTENSION = ".cub"
_MIN_NAME_LENGTH = 10


@dataclass
class Ray:
    """State of the ray cast for one screen column."""

    camerax: float = 0.0
    raydirx: float = 0.0
    raydiry: float = 0.0
    sidedistx: float = 0.0
    sidedisty: float = 0.0
    deltadistx: float = 0.0
    deltadisty: float = 0.0
    perpwalldist: float = 0.0
    wallx: float = 0.0
    mapx: int = 0
    mapy: int = 0
    stepx: int = 0
    stepy: int = 0
    hit: int = 0
    side: int = 0
    lineh: int = 0
    drawstart: int = 0
    drawend: int = 0
    texx: int = 0
    texy: int = 0
    texpos: float = 0.0


@dataclass
class Textures:
    """The four wall textures, each TEXWIDTH x TEXHEIGHT pixels in row order."""

    north: Sequence[int]
    south: Sequence[int]
    west: Sequence[int]
    east: Sequence[int]

    def for_ray(self, ray: Ray) -> Sequence[int]:
        """Return the texture of the wall face the ray hit."""
        if ray.side == 1:
            return self.north if ray.raydiry < 0 else self.south
        return self.west if ray.raydirx < 0 else self.east


def check_args(argv: Sequence[str]) -> str:
    """Check the command-line arguments and return the map path.

    Exactly one argument is expected: a file name of at least ten
    characters ending in ``.cub``.
    """
    if len(argv) != 1:
        raise MapError("Wrong number of arguments")
    path = argv[0]
    if len(path) < _MIN_NAME_LENGTH:
        raise MapError("Wrong file name")
    if not path.endswith(_EXTENSION):
        raise MapError("Wrong file extension")
    return path


def render_column(
    frame: MutableSequence[int],
    x: int,
    ray: Ray,
    textures: Textures,
    ceiling: int,
    floor: int,
    step: float,
) -> None:
    """Draw screen column ``x`` of ``frame`` (WIDTH x HEIGHT, row order).

    Rows above ``ray.drawstart`` get the ceiling colour, rows below
    ``ray.drawend`` the floor colour, and the rows between are sampled
    from the hit wall's texture, advancing ``ray.texpos`` by ``step``.
    """
    texture = textures.for_ray(ray)
    for y in range(HEIGHT):
        ray.texy = int(ray.texpos)
        index = y * WIDTH + x
        if y < ray.drawstart:
            frame[index] = ceiling
        elif y > ray.drawend:
            frame[index] = floor
        else:
            frame[index] = texture[TEXHEIGHT * ray.texy + ray.texx]
            ray.texpos += step


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check the arguments and load the map; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        path = check_args(argv)
        load_map(path)
    except MapError as exc:
        sys.stdout.write(format_error(exc.message, exc.status))
        return exc.status
    return 0