import pytest

from raycub.colornames import lookup_color
from raycub.xpm import (
    XpmError,
    extract_strings,
    parse_xpm,
    read_xpm,
    str_to_wordtab,
    strip_comments,
    text_to_rgb,
)


def test_str_to_wordtab_splits_on_spaces_and_tabs():
    assert str_to_wordtab("  42 42\t2 1 ") == ["42", "42", "2", "1"]
    assert str_to_wordtab("") == []


def test_str_to_wordtab_keeps_newlines_in_words():
    assert str_to_wordtab("a\nb c") == ["a\nb", "c"]


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000", None) == 0xFF0000
    assert text_to_rgb("#00ff00", "ignored") == 0x00FF00


def test_text_to_rgb_named_and_joined():
    assert text_to_rgb("Red", None) == lookup_color("red")
    assert text_to_rgb("dark", "red") == lookup_color("dark red")


def test_text_to_rgb_none_and_unknown():
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_strip_comments_keeps_length_and_quotes():
    text = '/* head */ "a /* b */ c" // tail\n"d"'
    out = strip_comments(text)
    assert len(out) == len(text)
    assert "head" not in out
    assert "tail" not in out
    assert '"a /* b */ c"' in out
    assert extract_strings(out) == ["a /* b */ c", "d"]


def test_extract_strings():
    assert extract_strings('x "one", "two" y') == ["one", "two"]


def test_parse_xpm_direct_colours():
    img = parse_xpm(["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"])
    assert (img.width, img.height) == (2, 2)
    assert img.get_pixel(0, 0) == 0xFF0000
    assert img.get_pixel(1, 1) == 0xFF0000
    assert img.get_pixel(1, 0) & 0xFFFFFFFF == 0xFF000000


def test_parse_xpm_table_colours_first_wins():
    img = parse_xpm(
        ["2 1 3 3", "aaa c #0000FF", "bbb c white", "aaa c #FF0000", "aaabbb"]
    )
    assert img.get_pixel(0, 0) == 0x0000FF
    assert img.get_pixel(1, 0) == lookup_color("white")


def test_parse_xpm_direct_last_wins():
    img = parse_xpm(["1 1 2 1", "a c #0000FF", "a c #00FF00", "a"])
    assert img.get_pixel(0, 0) == 0x00FF00


def test_parse_xpm_bad_header():
    with pytest.raises(XpmError):
        parse_xpm(["0 2 1 1", "a c #FFFFFF", "a", "a"])
    with pytest.raises(XpmError):
        parse_xpm(["2 2"])


def test_parse_xpm_missing_c_and_rows():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a s foo", "a"])
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a c", "a"])
    with pytest.raises(XpmError):
        parse_xpm(["1 2 1 1", "a c #FFFFFF", "a"])


def test_read_xpm_file(tmp_path):
    content = (
        "/* XPM */\n"
        "static char *img[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '"x c #112233",\n'
        '". c black",\n'
        "// pixels\n"
        '"x."\n'
        "};\n"
    )
    path = tmp_path / "img.xpm"
    path.write_text(content, encoding="latin-1")
    img = read_xpm(path)
    assert (img.width, img.height) == (2, 1)
    assert img.get_pixel(0, 0) == 0x112233
    assert img.get_pixel(1, 0) == lookup_color("black")


def test_read_xpm_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_xpm(tmp_path / "absent.xpm")