import pytest

from cubraycaster.mapcheck import (
    check_walls,
    detect_leaks,
    find_player,
    flood_fill_space,
    normalize,
    validate_map,
)
from cubraycaster.model import Config, CubError


def test_check_walls_rejects_floor_in_first_row():
    with pytest.raises(CubError, match="walls required"):
        check_walls(["1101", "1N01", "1111"])


def test_check_walls_rejects_floor_in_last_row():
    with pytest.raises(CubError, match="walls required"):
        check_walls(["1111", "1N01", "1011"])


def test_check_walls_rejects_open_middle_row():
    with pytest.raises(CubError, match="Invalid row"):
        check_walls(["1111", "0N01", "1111"])


def test_check_walls_rejects_open_end_of_middle_row():
    with pytest.raises(CubError, match="Invalid row"):
        check_walls(["1111", "  1N00  ", "1111"])


def test_normalize_pads_rows_to_width():
    grid = ["111", "1N01", "11"]
    rows = normalize(grid, 4)
    assert all(len(row) == 4 for row in rows)
    for original, row in zip(grid, rows):
        assert "".join(row).rstrip(" ") == original


def test_find_player_sets_position_and_direction():
    config = Config()
    rows = normalize(["1111", "10N1", "1111"], 4)
    find_player(config, rows)
    assert (config.player.pos.x, config.player.pos.y) == (2.5, 1.5)
    assert (config.player.dir.x, config.player.dir.y) == (0.0, -1.0)
    assert (config.player.plane.x, config.player.plane.y) == (0.66, 0.0)


def test_find_player_rejects_two_players():
    config = Config()
    rows = normalize(["1111", "1N01", "10S1", "1111"], 4)
    with pytest.raises(CubError, match="single player"):
        find_player(config, rows)


def test_find_player_requires_player():
    config = Config()
    rows = normalize(["1111", "1001", "1111"], 4)
    with pytest.raises(CubError, match="Player not found"):
        find_player(config, rows)


def test_flood_fill_enclosed_space_is_marked():
    rows = normalize(["111", "1 1", "111"], 3)
    assert flood_fill_space(rows, 1, 1) is True
    assert rows[1][1] == "F"


def test_flood_fill_reaching_floor_reports_leak():
    rows = normalize(["1111", "1 01", "1111"], 4)
    assert flood_fill_space(rows, 1, 1) is False


def test_detect_leaks_raises_on_leak():
    rows = normalize(["11111", "1N0 1", "11111"], 5)
    with pytest.raises(CubError, match="leak detected"):
        detect_leaks(rows)


def test_detect_leaks_fills_every_blank_cell():
    rows = normalize(["111", "1N01", "1111"], 4)
    detect_leaks(rows)
    assert not any(cell == " " for row in rows for cell in row)


def test_validate_map_sets_width_and_player():
    config = Config(grid=["111", "1N01", "1111"], height=3)
    validate_map(config)
    assert config.width == 4
    assert config.player.pos.y == 1.5
    assert config.grid == ["111", "1N01", "1111"]


def test_validate_map_reports_leak():
    config = Config(grid=["11111", "1N0 1", "11111"], height=3)
    with pytest.raises(CubError, match="leak detected"):
        validate_map(config)