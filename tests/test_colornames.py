import pytest

from raycube.colornames import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("navy", 0x80),
        ("gray100", 0xFFFFFF),
        ("light green", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("ReD") == lookup_color("red")
    assert lookup_color("GHOST WHITE") == lookup_color("ghost white")


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("NONE") == -1


def test_unknown_name_gives_none():
    assert lookup_color("not a colour") is None
    assert lookup_color("") is None


def test_first_duplicate_entry_wins():
    # "dark slate" is listed for slate gray first and slate blue later.
    assert lookup_color("dark slate") == lookup_color("darkslategray")
    assert lookup_color("dark slate") != lookup_color("darkslateblue")
    assert lookup_color("light goldenrod") == lookup_color(
        "lightgoldenrodyellow"
    )


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    gray = lookup_color(f"gray{level}")
    assert gray == lookup_color(f"grey{level}")
    red, green, blue = gray >> 16, (gray >> 8) & 0xFF, gray & 0xFF
    assert red == green == blue


def test_spaced_and_joined_names_agree():
    pairs = [
        ("misty rose", "mistyrose"),
        ("sea green", "seagreen"),
        ("orange red", "orangered"),
        ("dark orange", "darkorange"),
    ]
    for spaced, joined in pairs:
        assert lookup_color(spaced) == lookup_color(joined)


def test_numbered_variant_one_matches_base():
    for base in ("snow", "red", "yellow", "gold", "tomato", "magenta"):
        assert lookup_color(f"{base}1") == lookup_color(base)


def test_all_colours_fit_in_24_bits():
    names = ["snow", "thistle4", "lightgreen", "gray50", "blueviolet"]
    for name in names:
        assert 0 <= lookup_color(name) <= 0xFFFFFF