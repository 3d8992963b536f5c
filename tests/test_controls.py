import dataclasses

import pytest

from merge2048.controls import command_for_key, direction_for_key
from merge2048.core.board import Direction
from merge2048.styles import DEFAULT_STYLE, TILE_STYLES, style_for


def test_browser_and_letter_keys():
    assert direction_for_key("ArrowUp") is Direction.UP
    assert direction_for_key("w") is Direction.UP
    assert direction_for_key("ArrowDown") is Direction.DOWN
    assert direction_for_key("s") is Direction.DOWN
    assert direction_for_key("ArrowLeft") is Direction.LEFT
    assert direction_for_key("A") is Direction.LEFT
    assert direction_for_key("ArrowRight") is Direction.RIGHT
    assert direction_for_key("d") is Direction.RIGHT


def test_curses_keys():
    assert direction_for_key("KEY_UP") is Direction.UP
    assert direction_for_key("KEY_DOWN") is Direction.DOWN
    assert direction_for_key("KEY_LEFT") is Direction.LEFT
    assert direction_for_key("KEY_RIGHT") is Direction.RIGHT


def test_unknown_keys():
    assert direction_for_key("x") is None
    assert direction_for_key("arrowup") is None
    assert direction_for_key("KEY_RESIZE") is None
    assert command_for_key("x") is None


def test_command_keys():
    assert command_for_key("n") == "new_game"
    assert command_for_key("M") == "mid_game"
    assert command_for_key("q") == "quit"


def test_style_table_and_fallback():
    assert set(TILE_STYLES) == {0} | {2 ** k for k in range(1, 12)}
    assert style_for(2).bg_color == "#eee4da"
    assert style_for(1024).font_size == 40
    assert not style_for(4).light_text
    assert style_for(8).light_text
    assert style_for(4096) is DEFAULT_STYLE
    assert style_for(4096).light_text


def test_tile_styles_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        style_for(2).font_size = 10
