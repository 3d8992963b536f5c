import curses
import logging
from typing import Optional

import hydra
from omegaconf import DictConfig

from merge2048.controls import command_for_key, direction_for_key
from merge2048.envs.game2048 import Game2048Env, make_env
from merge2048.styles import style_for

log = logging.getLogger(__name__)


def draw_board(stdscr, board, status: str = ""):
    stdscr.clear()
    rows, cols = board.shape

    # Terminal size
    h, w = stdscr.getmaxyx()

    # Choose cell width based on largest value for better fit
    max_val = int(board.max())
    cell_w = max(4, len(str(max(2, max_val))) + 2)

    # Compute required dimensions
    board_width = 1 + cols * (cell_w + 1)  # e.g. +------+-...+
    total_height = rows * 2 + 3  # rows lines + borders + status/instructions

    # If too small, prompt user to resize
    if board_width > w or total_height > h:
        msg1 = "Window too small for board"
        msg2 = f"Need at least {board_width}x{total_height}, have {w}x{h}"
        if h > 0:
            stdscr.addstr(0, 0, msg1[: max(0, w)])
        if h > 1:
            stdscr.addstr(1, 0, msg2[: max(0, w)])
        stdscr.refresh()
        return

    # Center the board
    top = max(0, (h - total_height) // 2)
    left = max(0, (w - board_width) // 2)

    horiz = "+" + ("-" * cell_w + "+") * cols
    for r in range(rows):
        stdscr.addstr(top + r * 2, left, horiz)
        line = "|".join(
            f"{int(v):^{cell_w}}" if v > 0 else " " * cell_w for v in board[r]
        )
        stdscr.addstr(top + r * 2 + 1, left, "|" + line + "|")
        for c, v in enumerate(board[r]):
            if style_for(v).light_text:
                stdscr.chgat(top + r * 2 + 1, left + 1 + c * (cell_w + 1), cell_w, curses.A_BOLD | curses.A_REVERSE)

    stdscr.addstr(top + rows * 2, left, horiz)
    stdscr.addstr(top + rows * 2 + 1, left, status[: max(0, w - left)])
    stdscr.addstr(top + rows * 2 + 2, left, "Arrows/WASD to move, 'n' new, 'm' mid-game, 'q' quit"[: max(0, w - left)])
    stdscr.refresh()


def play_loop(stdscr, env: Game2048Env, seed: Optional[int] = None):
    curses.curs_set(0)
    stdscr.nodelay(False)
    stdscr.keypad(True)

    obs, info = env.reset(seed=seed)
    status = ""
    draw_board(stdscr, obs, status)

    while True:
        key = stdscr.getkey()
        # Redraw on resize to adapt layout
        if key == "KEY_RESIZE":
            draw_board(stdscr, obs, status)
            continue

        command = command_for_key(key)
        if command == "quit":
            break
        if command == "new_game":
            obs, status = env.new_game(), "New game"
        elif command == "mid_game":
            obs, status = env.mid_game(), "Mid-game board"
        else:
            direction = direction_for_key(key)
            if direction is None:
                continue
            obs, _, _, _, info = env.step(int(direction))
            if not info["moved"]:
                # no-op move: nothing changed, nothing to redraw
                continue
            status = f"Max tile: {info['max_tile']}"
        draw_board(stdscr, obs, status)


@hydra.main(config_path="conf", config_name="play", version_base=None)
def main(cfg: DictConfig):
    env = make_env(cfg.env)
    seed = cfg.get("seed")
    log.info("Starting %dx%d game, seed=%s", env.size, env.size, seed)
    curses.wrapper(play_loop, env=env, seed=seed)


if __name__ == "__main__":
    main()
