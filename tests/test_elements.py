import pytest

from cubraycaster.elements import (
    clean_path,
    is_color_line,
    is_empty_line,
    is_map_config_line,
    is_map_desc_line,
    is_path_line,
    parse_color,
    parse_elements,
    validate_textures,
)
from cubraycaster.model import Config, CubError

HEADER = [
    "NO ./north.xpm\n",
    "SO ./south.xpm\n",
    "WE ./west.xpm\n",
    "EA ./east.xpm\n",
    "\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
]
MAP = ["111111\n", "100N01\n", "103401\n", "111111\n"]


def _rgb(value):
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


@pytest.mark.parametrize(
    "line, expected",
    [("", True), ("   \t\n", True), ("  1 \n", False), ("\n", True)],
)
def test_is_empty_line(line, expected):
    assert is_empty_line(line) is expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("NO ./a.xpm", True),
        ("WE x", True),
        ("F 1,2,3", True),
        ("C 1,2,3", True),
        ("NO", False),
        ("FF 1,2,3", False),
        ("  NO ./a", False),
        ("1111", False),
    ],
)
def test_is_map_config_line(line, expected):
    assert is_map_config_line(line) is expected


def test_path_and_color_lines_are_distinct():
    assert is_path_line("SO ./s.xpm") is True
    assert is_color_line("SO ./s.xpm") is False
    assert is_color_line("C 0,0,0") is True
    assert is_path_line("C 0,0,0") is False


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1111\n", True),
        ("  10N1  \n", True),
        ("1034EWS1", True),
        ("1X1\n", False),
        ("   \n", False),
        ("", False),
    ],
)
def test_is_map_desc_line(line, expected):
    assert is_map_desc_line(line) is expected


def test_clean_path_strips_whitespace():
    assert clean_path("   ./textures/north.xpm \t\r\n") == "./textures/north.xpm"


def test_clean_path_empty_raises():
    with pytest.raises(CubError):
        clean_path("   \n")


@pytest.mark.parametrize("rgb", [(0, 0, 0), (10, 20, 30), (255, 128, 1)])
def test_parse_color_round_trip(rgb):
    text = "{},{},{}\n".format(*rgb)
    assert _rgb(parse_color(text)) == rgb


def test_parse_color_white():
    assert parse_color("255,255,255") == 0xFFFFFF


def test_parse_color_allows_surrounding_spaces():
    assert _rgb(parse_color(" 10 , 20 ,30\n")) == (10, 20, 30)


@pytest.mark.parametrize(
    "text, message",
    [
        ("1 2,3,4", "invalid Number"),
        ("1,2", "Only 3 integers"),
        ("1,2,3,4", "Only 3 integers"),
        ("1,a,3", "Only digits"),
        ("-1,0,0", "Only digits"),
        ("256,0,0", "between 0 and 255"),
    ],
)
def test_parse_color_errors(text, message):
    with pytest.raises(CubError, match=message):
        parse_color(text)


def test_parse_elements_full_scene():
    config = Config()
    parse_elements(config, HEADER + MAP)
    assert config.no == "./north.xpm"
    assert config.so == "./south.xpm"
    assert config.we == "./west.xpm"
    assert config.ea == "./east.xpm"
    assert _rgb(config.floor_color) == (220, 100, 0)
    assert _rgb(config.ceil_color) == (225, 30, 0)
    assert config.grid == [row.rstrip("\n") for row in MAP]
    assert config.height == len(MAP)


def test_parse_elements_trailing_blank_lines_ok():
    config = Config()
    parse_elements(config, HEADER + MAP + ["\n", "  \n"])
    assert config.height == len(MAP)


def test_parse_elements_config_after_map_is_accepted():
    header = [line for line in HEADER if not line.startswith("C ")]
    config = Config()
    parse_elements(config, header + MAP + ["C 1,2,3\n"])
    assert _rgb(config.ceil_color) == (1, 2, 3)
    assert config.height == len(MAP)


def test_parse_elements_duplicate_path():
    with pytest.raises(CubError, match="duplicated"):
        parse_elements(Config(), ["NO ./b.xpm\n"] + HEADER + MAP)


def test_parse_elements_duplicate_color():
    with pytest.raises(CubError, match="Color configuration line duplicated"):
        parse_elements(Config(), HEADER + ["F 1,2,3\n"] + MAP)


def test_parse_elements_missing_color():
    header = [line for line in HEADER if not line.startswith("F ")]
    with pytest.raises(CubError, match="Color configuration line missing"):
        parse_elements(Config(), header + MAP)


def test_parse_elements_map_before_config():
    with pytest.raises(CubError, match="must be the last"):
        parse_elements(Config(), MAP + HEADER)


def test_parse_elements_map_without_colors():
    paths = HEADER[:4]
    with pytest.raises(CubError, match="must be the last"):
        parse_elements(Config(), paths + MAP)


def test_parse_elements_empty_line_inside_map():
    lines = HEADER + MAP[:2] + ["\n"] + MAP[2:]
    with pytest.raises(CubError, match="Empty lines inside map"):
        parse_elements(Config(), lines)


def test_parse_elements_invalid_line():
    with pytest.raises(CubError, match="Invalid configuration line"):
        parse_elements(Config(), HEADER + ["hello\n"] + MAP)


def test_validate_textures_ok(tmp_path):
    config = Config()
    for attr in ("no", "so", "ea", "we"):
        path = tmp_path / f"{attr}.xpm"
        path.write_text("x")
        setattr(config, attr, str(path))
    validate_textures(config)
    assert config.no == str(tmp_path / "no.xpm")


def test_validate_textures_missing_entry(tmp_path):
    path = tmp_path / "a.xpm"
    path.write_text("x")
    config = Config(no=str(path), so=str(path), ea=str(path))
    with pytest.raises(CubError, match="element path missing"):
        validate_textures(config)


def test_validate_textures_nonexistent_file(tmp_path):
    path = tmp_path / "a.xpm"
    path.write_text("x")
    missing = str(tmp_path / "missing.xpm")
    config = Config(no=str(path), so=str(path), ea=str(path), we=missing)
    with pytest.raises(CubError, match="file not found"):
        validate_textures(config)