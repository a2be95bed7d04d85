import pytest

from solong.mapdata import (
    MSG_OPEN_FAILED,
    MSG_SIZE,
    PIXEL,
    GameMap,
    MapError,
    count_lines,
    is_composed_of,
    load_map,
    parse_map,
)

SMALL = "1111111\n1P0C0E1\n1111111\n"


def _rows(game_map):
    return ["".join(row) for row in game_map.blocks]


def test_parse_map_rows_round_trip():
    game_map = parse_map(SMALL)
    assert "\n".join(_rows(game_map)) + "\n" == SMALL


def test_parse_map_dimensions():
    game_map = parse_map(SMALL)
    assert game_map.x_len == len("1111111")
    assert game_map.y_len == len(SMALL.splitlines())
    assert game_map.width == game_map.x_len * PIXEL
    assert game_map.height == game_map.y_len * PIXEL


def test_parse_map_without_final_newline():
    assert _rows(parse_map(SMALL.rstrip("\n"))) == _rows(parse_map(SMALL))


def test_parse_map_keeps_carriage_return():
    game_map = parse_map("11\r\n11\n")
    assert _rows(game_map) == ["11\r", "11"]


def test_parse_empty_text():
    game_map = parse_map("")
    assert game_map.blocks == []
    assert game_map.x_len == 0
    assert game_map.y_len == 0


def test_fresh_map_state():
    game_map = GameMap()
    assert (game_map.player_x, game_map.player_y) == (-1, -1)
    assert game_map.escape is False


def test_find_player():
    game_map = parse_map(SMALL)
    position = game_map.find_player()
    assert position == (1, 1)
    assert (game_map.player_x, game_map.player_y) == position
    assert game_map.blocks[position[1]][position[0]] == "P"


def test_find_player_missing():
    game_map = parse_map("111\n101\n111\n")
    assert game_map.find_player() is None
    assert game_map.player_x == -1


def test_count_items():
    game_map = parse_map("111111\n1PCCE1\n1C0001\n111111\n")
    assert game_map.count_items() == (1, 3, 1)


def test_is_composed_of():
    assert is_composed_of("10PCE", "01PCE")
    assert is_composed_of("", "01PCE")
    assert not is_composed_of("10X", "01PCE")


def test_count_lines(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text(SMALL)
    assert count_lines(path) == len(SMALL.splitlines())


def test_count_lines_missing_file(tmp_path):
    assert count_lines(tmp_path / "absent.ber") == 0


def test_load_map_matches_parse(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text(SMALL)
    loaded = load_map(path)
    assert loaded == parse_map(SMALL)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError) as info:
        load_map(tmp_path / "absent.ber")
    assert str(info.value) == MSG_OPEN_FAILED


def test_load_map_too_many_lines(tmp_path):
    path = tmp_path / "tall.ber"
    path.write_text("1111\n" * 12)
    with pytest.raises(MapError) as info:
        load_map(path)
    assert str(info.value) == MSG_SIZE


def test_load_map_eleven_lines_allowed(tmp_path):
    path = tmp_path / "tall.ber"
    path.write_text("1111\n" * 11)
    assert load_map(path).y_len == 11