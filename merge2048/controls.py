"""Key bindings for the front-ends.

Browser key names (``ArrowUp``) and curses key names (``KEY_UP``) both
resolve to a `Direction`; unknown keys resolve to None.
"""

from merge2048.core.board import Direction

KEY_DIRECTIONS = {
    "ArrowUp": Direction.UP,
    "KEY_UP": Direction.UP,
    "w": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "KEY_DOWN": Direction.DOWN,
    "s": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "KEY_LEFT": Direction.LEFT,
    "a": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "KEY_RIGHT": Direction.RIGHT,
    "d": Direction.RIGHT,
}

COMMAND_KEYS = {
    "n": "new_game",
    "m": "mid_game",
    "q": "quit",
}


def _normalize(key: str) -> str:
    # single letters are case-insensitive, named keys are not
    return key.lower() if len(key) == 1 else key


def direction_for_key(key: str) -> Direction | None:
    return KEY_DIRECTIONS.get(_normalize(key))


def command_for_key(key: str) -> str | None:
    return COMMAND_KEYS.get(_normalize(key))
