import pytest

from raycube.errors import MapError
from raycube.render import (
    HEIGHT,
    TEXHEIGHT,
    TEXWIDTH,
    WIDTH,
    Ray,
    Textures,
    check_args,
    main,
    render_column,
)


def _solid(value):
    return [value] * (TEXWIDTH * TEXHEIGHT)


def _textures():
    return Textures(north=_solid(1), south=_solid(2), west=_solid(3), east=_solid(4))


def _column(frame, x):
    return [frame[y * WIDTH + x] for y in range(HEIGHT)]


def test_check_args_returns_path():
    assert check_args(["maps/level.cub"]) == "maps/level.cub"


@pytest.mark.parametrize(
    "argv, message",
    [
        ([], "Wrong number of arguments"),
        (["a.cub", "b.cub"], "Wrong number of arguments"),
        (["x.cub"], "Wrong file name"),
        (["maps/level.txt"], "Wrong file extension"),
    ],
)
def test_check_args_errors(argv, message):
    with pytest.raises(MapError) as info:
        check_args(argv)
    assert info.value.message == message
    assert info.value.status == 1


def test_render_column_ceiling_wall_floor():
    frame = [0] * (WIDTH * HEIGHT)
    ray = Ray(side=1, raydiry=-0.5, drawstart=100, drawend=200)
    render_column(frame, 5, ray, _textures(), ceiling=7, floor=9, step=0.0)
    column = _column(frame, 5)
    assert column[:100] == [7] * 100
    assert column[100:201] == [1] * 101
    assert column[201:] == [9] * (HEIGHT - 201)
    assert frame[6] == 0


@pytest.mark.parametrize(
    "side, dirx, diry, expected",
    [
        (1, 0.0, -1.0, 1),
        (1, 0.0, 1.0, 2),
        (1, 0.0, 0.0, 2),
        (0, -1.0, 0.0, 3),
        (0, 1.0, 0.0, 4),
        (0, 0.0, 0.0, 4),
    ],
)
def test_render_column_texture_choice(side, dirx, diry, expected):
    frame = [0] * (WIDTH * HEIGHT)
    ray = Ray(side=side, raydirx=dirx, raydiry=diry, drawstart=0, drawend=HEIGHT)
    render_column(frame, 0, ray, _textures(), ceiling=7, floor=9, step=0.0)
    assert set(_column(frame, 0)) == {expected}


def test_render_column_samples_texture_rows():
    texture = [row for row in range(TEXHEIGHT) for _ in range(TEXWIDTH)]
    textures = Textures(north=texture, south=texture, west=texture, east=texture)
    frame = [0] * (WIDTH * HEIGHT)
    ray = Ray(side=0, raydirx=1.0, drawstart=0, drawend=TEXHEIGHT - 1, texx=3)
    render_column(frame, 2, ray, textures, ceiling=7, floor=9, step=1.0)
    column = _column(frame, 2)
    assert column[:TEXHEIGHT] == list(range(TEXHEIGHT))
    assert ray.texpos == float(TEXHEIGHT)


def test_render_column_advances_texpos_per_wall_pixel():
    frame = [0] * (WIDTH * HEIGHT)
    ray = Ray(side=1, raydiry=1.0, drawstart=10, drawend=19, texpos=0.0)
    render_column(frame, 0, ray, _textures(), ceiling=7, floor=9, step=0.5)
    assert ray.texpos == pytest.approx(5.0)
    assert ray.texy == 5


def _write_map(tmp_path, grid):
    tex = tmp_path / "wall.xpm"
    tex.write_text("texture\n")
    body = (
        f"NO {tex}\nSO {tex}\nWE {tex}\nEA {tex}\n"
        "F 220,100,0\nC 225,30,0\n\n" + grid
    )
    path = tmp_path / "level_map.cub"
    path.write_text(body)
    return str(path)


def test_main_valid_map(tmp_path, capsys):
    path = _write_map(tmp_path, "111\n1N1\n111\n")
    assert main([path]) == 0
    assert capsys.readouterr().out == ""


def test_main_open_map_fails(tmp_path, capsys):
    path = _write_map(tmp_path, "111\n1N0\n111\n")
    assert main([path]) == 1
    assert "Wrong map" in capsys.readouterr().out


def test_main_bad_extension(capsys):
    assert main(["maps/level.txt"]) == 1
    out = capsys.readouterr().out
    assert "Error" in out
    assert "Wrong file extension" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing_map.cub")]) == 1
    assert "Failed to open map file" in capsys.readouterr().out