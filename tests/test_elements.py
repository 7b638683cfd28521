import pytest

from raycube.elements import (
    Elements,
    color_text,
    is_direction_line,
    parse_elements,
    parse_rgb,
)
from raycube.elements import texture_path
from raycube.errors import MapError


@pytest.fixture
def textures(tmp_path):
    paths = {}
    for name in ("north", "south", "west", "east"):
        path = tmp_path / f"{name}.xpm"
        path.write_text("x")
        paths[name] = str(path)
    return paths


def _config(paths):
    return [
        f"NO {paths['north']}",
        f"SO {paths['south']}",
        f"WE {paths['west']}",
        f"EA {paths['east']}",
        "F 220,100,0",
        "C 225,30,0",
    ]


def test_texture_path_existing_file(textures):
    assert texture_path("SO " + textures["south"]) == textures["south"]


def test_texture_path_skips_extra_spaces(textures):
    assert texture_path("NO    " + textures["north"]) == textures["north"]


def test_texture_path_missing_file(tmp_path):
    assert texture_path("SO " + str(tmp_path / "absent.xpm")) is None


@pytest.mark.parametrize("line", ["SO", "SO   "])
def test_texture_path_empty(line):
    assert texture_path(line) is None


def test_color_text():
    assert color_text("F 220,100,0") == "220,100,0"
    assert color_text("C   1,2,3") == "1,2,3"


@pytest.mark.parametrize("line", ["F", "F   "])
def test_color_text_empty(line):
    assert color_text(line) is None


def test_parse_rgb_components():
    value = parse_rgb("220,100,0")
    assert value >> 16 == 220
    assert (value >> 8) & 0xFF == 100
    assert value & 0xFF == 0


def test_parse_rgb_white():
    assert parse_rgb("255,255,255") == 0xFFFFFF


def test_parse_rgb_allows_surrounding_spaces():
    assert parse_rgb(" 1 , 2 ,3 ") == parse_rgb("1,2,3")


@pytest.mark.parametrize(
    "text, message",
    [
        (None, "color musn't be empty\n"),
        ("1,2", "colors miss or much! \n"),
        ("1,2,3,4", "colors miss or much! \n"),
        ("1,,2,3", "colors miss or much! \n"),
        ("1,a,3", "colors must be positive numbers!\n"),
        ("1 2,3,4", "colors must be positive numbers!\n"),
        ("-1,2,3", "colors must be positive numbers!\n"),
        ("256,0,0", "colors not enough! \n"),
        (",1,2", "colors not enough! \n"),
    ],
)
def test_parse_rgb_errors(text, message):
    with pytest.raises(MapError) as info:
        parse_rgb(text)
    assert info.value.message == message
    assert info.value.status == 1


@pytest.mark.parametrize(
    "line", ["NO ./a", "  F 1,2,3", "C 0,0,0", "", "   ", "\n"]
)
def test_is_direction_line_accepts(line):
    assert is_direction_line(line) is True


@pytest.mark.parametrize("line", ["hello", "1111", "NOx", "  F1,2,3"])
def test_is_direction_line_rejects(line):
    assert is_direction_line(line) is False


def test_feed_records_texture(textures):
    elements = Elements()
    assert elements.feed("  WE " + textures["west"]) is True
    assert elements.west == textures["west"]
    assert elements.count == 1


def test_feed_ignores_other_lines():
    elements = Elements()
    assert elements.feed("111111") is False
    assert elements.count == 0


def test_feed_missing_texture(tmp_path):
    elements = Elements()
    with pytest.raises(MapError) as info:
        elements.feed("EA " + str(tmp_path / "nothing.xpm"))
    assert info.value.message == "ea texture path not should be empty"


def test_feed_duplicate_texture(textures):
    elements = Elements()
    elements.feed("SO " + textures["south"])
    with pytest.raises(MapError) as info:
        elements.feed("SO " + textures["south"])
    assert info.value.message == "SO more than one in map"


def test_feed_duplicate_color():
    elements = Elements()
    elements.feed("F 1,2,3")
    with pytest.raises(MapError) as info:
        elements.feed("F 4,5,6")
    assert info.value.message == "F is more than one in map"


def test_parse_elements_complete(textures):
    lines = _config(textures)
    elements, end = parse_elements(lines)
    assert end == len(lines) - 1
    assert elements.complete
    assert elements.north == textures["north"]
    assert elements.south == textures["south"]
    assert elements.east == textures["east"]
    assert elements.floor == parse_rgb("220,100,0")
    assert elements.ceiling == parse_rgb("225,30,0")


def test_parse_elements_with_blank_lines(textures):
    lines = _config(textures)
    lines.insert(2, " ")
    lines.append("111")
    lines.append("C 1,2,3")
    elements, end = parse_elements(lines)
    assert end == 6
    assert elements.ceiling == parse_rgb("225,30,0")


def test_parse_elements_missing_identifier(textures):
    with pytest.raises(MapError) as info:
        parse_elements(_config(textures)[:-1])
    assert info.value.message == "map have not 6 direction"


def test_parse_elements_junk_before_end(textures):
    lines = _config(textures)
    lines.insert(1, "junk")
    with pytest.raises(MapError) as info:
        parse_elements(lines)
    assert info.value.message == "direction partition error"