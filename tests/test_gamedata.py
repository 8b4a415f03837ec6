import io

from raycub.gamedata import (
    TEX_SIZE,
    WIN_HEIGHT,
    WIN_WIDTH,
    GameData,
    MapInfo,
    Player,
    Ray,
    TexInfo,
    debug_display_data,
    format_char_tab,
    format_data,
)


def _sample() -> GameData:
    data = GameData()
    data.map = ["111", "1N1", "111"]
    data.mapinfo.height = 3
    data.mapinfo.width = 4
    data.texinfo.hex_ceiling = 0xFF
    data.texinfo.hex_floor = 0x10
    data.texinfo.north = "./n.xpm"
    data.player.direction = "N"
    data.player.pos_x = 1.5
    data.player.pos_y = 1.5
    data.player.dir_y = -1.0
    return data


def test_player_defaults():
    player = Player()
    assert player.direction == "\0"
    assert (player.pos_x, player.pos_y, player.rotate) == (0.0, 0.0, 0)


def test_texinfo_defaults():
    tex = TexInfo()
    assert tex.size == TEX_SIZE
    assert tex.north is None and tex.floor is None
    assert tex.hex_floor == 0


def test_gamedata_defaults():
    data = GameData()
    assert data.win_width == WIN_WIDTH
    assert data.win_height == WIN_HEIGHT
    assert data.map is None
    assert data.ray == Ray()
    assert data.mapinfo == MapInfo()


def test_instances_do_not_share_state():
    first = GameData()
    second = GameData()
    first.mapinfo.file.append("111\n")
    first.player.pos_x = 3.0
    assert second.mapinfo.file == []
    assert second.player.pos_x == 0.0


def test_format_char_tab():
    assert format_char_tab(["11", "10"]) == "\n11\n10\n\n"
    assert format_char_tab([]) == "\n\n"


def test_format_data_map_section():
    text = format_data(_sample())
    assert "Map height: 3\n" in text
    assert "Map width: 4\n" in text
    assert format_char_tab(["111", "1N1", "111"]) in text


def test_format_data_colors_and_textures():
    text = format_data(_sample())
    assert "Color ceiling: #ff\n" in text
    assert "Color floor: #10\n" in text
    assert "Texture north: ./n.xpm\n" in text
    assert "Texture south: (null)\n" in text


def test_format_data_player():
    text = format_data(_sample())
    assert "x = 1.500000, y = 1.500000\n" in text
    assert "Player direction: N (x = 0.000000, y = -1.000000)\n" in text
    assert text.endswith(")\n\n")


def test_format_data_without_map():
    text = format_data(GameData())
    assert "Map height: 0\n" in text
    assert "Texture west: (null)\n" in text


def test_debug_display_data_writes_format():
    data = _sample()
    stream = io.StringIO()
    debug_display_data(data, stream)
    assert stream.getvalue() == format_data(data)