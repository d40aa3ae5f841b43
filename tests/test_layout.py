import pytest

from asciiart import AsciiArt
from asciiart.palette import strip_color_tokens
from layout import COLUMN_GAP, compose, logo_lines


def make_art(lines, colors=("red", "blue")):
    return AsciiArt.from_lines(lines, colors)


THREE_LINE = make_art(["0123456789", "$1ab$2cd", "x"])


def test_three_line_art_with_five_info_lines():
    info = [f"info {i}" for i in range(5)]
    rows = compose(THREE_LINE, info, False, "white")
    assert THREE_LINE.width == 10
    assert len(rows) == 5
    assert rows[3] == " " * 12 + "info 3"
    assert rows[4] == " " * 12 + "info 4"


@pytest.mark.parametrize("info_count", [0, 1, 3, 7])
def test_row_count(info_count):
    info = ["i"] * info_count
    rows = compose(THREE_LINE, info, True, "white")
    assert len(rows) == max(len(THREE_LINE.lines), info_count)


def test_padding_invariant_without_colors():
    rows = compose(THREE_LINE, [], False, "white")
    for row in rows:
        assert len(row) == THREE_LINE.width + COLUMN_GAP


def test_padding_invariant_with_colors():
    art = THREE_LINE
    rows = compose(art, ["A", "B", "C"], True, "white")
    for i, row in enumerate(rows):
        rendered = art.render_line(i, True, "white")
        assert row.startswith(rendered)
        left = row[len(rendered):-1]
        assert art.line_visible_width(i) + len(left) == art.width + COLUMN_GAP


def test_info_text_follows_logo_column():
    rows = compose(make_art(["ab", "abcd"]), ["one", "two"], False, "white")
    assert rows == ["ab    one", "abcd  two"]


def test_logo_shorter_than_info_and_no_info():
    rows = compose(make_art(["a"]), [], False, "white")
    assert rows == ["a  "]


def test_logo_lines_are_not_padded():
    art = make_art(["$1ab", "c"])
    assert logo_lines(art, False, "white") == ["ab", "c"]
    colored = logo_lines(art, True, "white")
    assert [strip_color_tokens(line) for line in art.lines] == ["ab", "c"]
    assert len(colored) == 2
    assert not colored[1].endswith(" ")
